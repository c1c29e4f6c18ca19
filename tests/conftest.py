import pytest

from namedarrays import NamedArray


@pytest.fixture
def table_2x3():
    return NamedArray(
        [[1, 2, 3], [4, 5, 6]],
        names=[["one", "two"], ["a", "b", "c"]],
        dimnames=["rows", "cols"],
    )
