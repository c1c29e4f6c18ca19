import numpy
import pytest

from namedarrays import DuplicateKey, NameTable, TypeMismatch, UnknownName, default_dimnames


def test_default_table():
    table = NameTable.default(3)
    assert table.keys() == ["1", "2", "3"]
    assert table.key_type is None
    assert table.lookup("2") == 1
    assert table.key_at(0) == "1"


def test_lookup_and_positions():
    table = NameTable(["x", "y", "z"])
    assert table.key_type is str
    assert table.lookup("z") == 2
    assert table.key_at(1) == "y"

    # Caller order is preserved, repeats allowed
    assert table.positions(["z", "x", "z"]) == [2, 0, 2]
    assert list(table.items()) == [("x", 0), ("y", 1), ("z", 2)]
    assert list(table) == ["x", "y", "z"]
    assert "y" in table
    assert "w" not in table
    assert [] not in table


def test_unknown_names_reported_together():
    table = NameTable(["x", "y"])
    with pytest.raises(UnknownName) as err:
        table.positions(["x", "w", "v"])
    assert err.value.keys == ["w", "v"]

    with pytest.raises(KeyError):
        table.lookup("q")


def test_construction_checks():
    with pytest.raises(TypeMismatch):
        NameTable(["a", 1])
    with pytest.raises(DuplicateKey):
        NameTable(["a", "b", "a"])

    derived = NameTable(["x", "x", "y"], unique=False)
    assert len(derived) == 3
    assert derived.lookup("x") == 0


def test_numpy_keys_stored_as_python_values():
    table = NameTable(numpy.array(["a", "b"]))
    assert table.key_type is str
    assert table.lookup(numpy.str_("b")) == 1

    ints = NameTable(numpy.arange(3))
    assert ints.key_type is int
    assert ints.lookup(2) == 2


def test_rename():
    table = NameTable(["x", "y", "z"])
    table.rename("y", "q")
    assert table.keys() == ["x", "q", "z"]
    assert table.lookup("q") == 1
    assert "y" not in table

    table.rename_at(0, "first")
    assert table.keys() == ["first", "q", "z"]

    # Renaming an entry to itself is a no-op
    table.rename("z", "z")
    assert table.keys() == ["first", "q", "z"]

    with pytest.raises(TypeMismatch):
        table.rename_at(0, 5)
    with pytest.raises(DuplicateKey):
        table.rename("first", "z")
    with pytest.raises(UnknownName):
        table.rename("missing", "w")
    assert table.keys() == ["first", "q", "z"]


def test_rename_in_derived_table():
    table = NameTable(["x", "x", "y"], unique=False)
    table.rename_at(0, "w")
    assert table.keys() == ["w", "x", "y"]
    assert table.lookup("x") == 1
    assert table.lookup("w") == 0


def test_rebuild():
    table = NameTable(["x", "y", "z"])
    table.rebuild(["c", "b", "a"])
    assert table.keys() == ["c", "b", "a"]
    assert table.lookup("a") == 2

    with pytest.raises(ValueError):
        table.rebuild(["a", "b"])
    with pytest.raises(DuplicateKey):
        table.rebuild(["a", "a", "b"])
    with pytest.raises(TypeMismatch):
        table.rebuild([1, 2, 3])
    with pytest.raises(TypeMismatch):
        table.rebuild(["a", 2, "c"])
    assert table.keys() == ["c", "b", "a"]


def test_rebuild_fixes_type_of_default_table():
    table = NameTable.default(2)
    table.rebuild([10, 20])
    assert table.key_type is int
    assert table.lookup(20) == 1

    with pytest.raises(TypeMismatch):
        table.rebuild(["a", "b"])


def test_equality_and_copy():
    table = NameTable(["x", "y"])
    other = table.copy()
    assert other == table

    other.rename("x", "w")
    assert other != table
    assert table.keys() == ["x", "y"]
    assert NameTable(["y", "x"]) != table


def test_default_dimnames():
    assert default_dimnames(0) == []
    assert default_dimnames(3) == ["A", "B", "C"]
    assert default_dimnames(28)[25:] == ["Z", "AA", "AB"]
