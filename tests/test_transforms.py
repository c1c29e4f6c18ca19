import numpy
import pytest
from numpy.testing import assert_array_equal

from namedarrays import NamedArray, concatenate, hstack, roll, transpose, vstack


def test_concatenate_keeps_matching_tables(table_2x3):
    joined = concatenate([table_2x3, table_2x3], axis="rows")
    assert joined.shape == (4, 3)
    assert joined.names[1] == ["a", "b", "c"]
    assert joined.names[0] == ["1", "2", "3", "4"]
    assert joined.dimnames == ["rows", "cols"]
    assert joined["3", "b"] == 2


def test_concatenate_resets_differing_tables(table_2x3):
    other = table_2x3.copy()
    other.setnames("cols", ["x", "y", "z"])

    joined = concatenate([table_2x3, other], axis=0)
    assert joined.names[1] == ["1", "2", "3"]
    assert joined.dimnames == ["rows", "cols"]


def test_concatenate_plain_arrays(table_2x3):
    joined = concatenate([table_2x3, numpy.zeros((1, 3))])
    assert joined.shape == (3, 3)
    assert joined.names == [["1", "2", "3"], ["1", "2", "3"]]
    assert joined.dimnames == ["A", "B"]

    with pytest.raises(ValueError):
        concatenate([])


def test_stacking(table_2x3):
    wide = hstack([table_2x3, table_2x3])
    assert wide.shape == (2, 6)
    assert wide.names[0] == ["one", "two"]
    assert wide.names[1] == ["1", "2", "3", "4", "5", "6"]

    tall = vstack([table_2x3, table_2x3])
    assert tall.shape == (4, 3)

    flat = hstack([NamedArray([1, 2]), NamedArray([3])])
    assert_array_equal(flat.array, [1, 2, 3])


def test_transpose(table_2x3):
    flipped = table_2x3.T
    assert flipped.shape == (3, 2)
    assert flipped.names == [["a", "b", "c"], ["one", "two"]]
    assert flipped.dimnames == ["cols", "rows"]
    assert flipped["b", "two"] == 5

    assert table_2x3.transpose(1, 0).names == flipped.names


def test_transpose_by_label():
    cube = NamedArray(numpy.arange(24).reshape(2, 3, 4), dimnames=["i", "j", "k"])
    moved = transpose(cube, ["k", "i", "j"])
    assert moved.shape == (4, 2, 3)
    assert moved.dimnames == ["k", "i", "j"]
    assert moved.names[0] == ["1", "2", "3", "4"]
    assert moved["4", "2", "3"] == cube["2", "3", "4"]

    with pytest.raises(ValueError):
        transpose(cube, [0, 0, 1])


def test_roll_moves_names_with_entries(table_2x3):
    rolled = roll(table_2x3, 1, "cols")
    assert_array_equal(rolled.array, [[3, 1, 2], [6, 4, 5]])
    assert rolled.names[1] == ["c", "a", "b"]
    assert rolled.names[0] == ["one", "two"]

    for row in table_2x3.names[0]:
        for col in table_2x3.names[1]:
            assert rolled[row, col] == table_2x3[row, col]


def test_roll_several_axes(table_2x3):
    rolled = table_2x3.roll((1, -1), ("rows", "cols"))
    assert rolled.names == [["two", "one"], ["b", "c", "a"]]
    assert rolled["one", "a"] == 1

    twice = roll(table_2x3, (1, 1), (1, 1))
    assert twice.names[1] == ["b", "c", "a"]
    assert_array_equal(twice.array, numpy.roll(table_2x3.array, 2, axis=1))

    with pytest.raises(ValueError):
        roll(table_2x3, (1, 2, 3), (0, 1))
