"""Sequence helper tests."""

import pytest

from utils import chunk_array


def test_short_input_is_returned_whole():
    items = [1, 2, 3]
    result = chunk_array(items, 5)
    assert result == [[1, 2, 3]]
    assert result[0] is items


def test_exact_fit_is_not_chunked():
    assert chunk_array([1, 2, 3], 3) == [[1, 2, 3]]


def test_last_chunk_may_be_shorter():
    assert chunk_array([1, 2, 3, 4, 5], 2) == [[1, 2], [3, 4], [5]]


def test_even_split():
    assert chunk_array(list(range(6)), 3) == [[0, 1, 2], [3, 4, 5]]


def test_chunk_size_one():
    assert chunk_array(["a", "b"], 1) == [["a"], ["b"]]


def test_empty_input_is_single_empty_chunk():
    assert chunk_array([], 4) == [[]]


def test_works_on_tuples_and_strings():
    assert chunk_array((1, 2, 3), 2) == [(1, 2), (3,)]
    assert chunk_array("abcde", 2) == ["ab", "cd", "e"]


@pytest.mark.parametrize("size", [0, -1, -10])
def test_non_positive_chunk_size_is_rejected(size):
    with pytest.raises(ValueError):
        chunk_array([1, 2, 3], size)


@pytest.mark.parametrize("size", [2.0, 1.5, "2", None, True])
def test_non_integer_chunk_size_is_rejected(size):
    with pytest.raises(TypeError):
        chunk_array([1, 2, 3], size)
