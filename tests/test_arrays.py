import pytest
from hypothesis import given
from hypothesis import strategies as st

from drillkit.arrays import (
    binary_search,
    exchange_sort,
    numbered_grid,
    reverse_in_place,
    rotate_right,
    scale_all,
)

SORTED = [2, 5, 6, 9, 10, 11, 32, 43, 76]


def test_binary_search_source_example():
    assert binary_search(SORTED, 43) == 7


def test_binary_search_missing_key():
    assert binary_search(SORTED, 7) == -1
    assert binary_search([], 1) == -1


@given(st.sets(st.integers(), max_size=30))
def test_binary_search_finds_every_element(values):
    items = sorted(values)
    for position, value in enumerate(items):
        assert binary_search(items, value) == position


@given(st.sets(st.integers(min_value=-50, max_value=50), max_size=20), st.integers(-60, 60))
def test_binary_search_absent_gives_minus_one(values, key):
    items = sorted(values)
    result = binary_search(items, key)
    if key in values:
        assert items[result] == key
    else:
        assert result == -1


def test_exchange_sort_source_example():
    words = ["ABC", "AEF", "AZA", "ZBA", "XACD", "ZAEF"]
    assert exchange_sort(words) == ["ABC", "AEF", "AZA", "XACD", "ZAEF", "ZBA"]


@given(st.lists(st.text(max_size=5)))
def test_exchange_sort_is_ordered_permutation(words):
    original = list(words)
    result = exchange_sort(words)
    assert words == original
    assert sorted(result) == sorted(original)
    assert all(a <= b for a, b in zip(result, result[1:]))


def test_reverse_in_place_example():
    items = [1, 2, 3, 4, 5, 6]
    reverse_in_place(items)
    assert items == [6, 5, 4, 3, 2, 1]


@given(st.lists(st.integers()))
def test_reverse_in_place_twice_is_identity(items):
    original = list(items)
    reverse_in_place(items)
    if original:
        assert items[0] == original[-1]
    reverse_in_place(items)
    assert items == original


def test_rotate_right_example():
    items = [1, 2, 3, 4, 5]
    rotate_right(items)
    assert items == [5, 1, 2, 3, 4]


def test_rotate_right_empty_stays_empty():
    items = []
    rotate_right(items)
    assert items == []


@given(st.lists(st.integers(), max_size=15))
def test_rotate_right_full_cycle_is_identity(items):
    original = list(items)
    for _ in original:
        rotate_right(items)
    assert items == original


def test_scale_all_by_zero_gives_zeros():
    items = [1, 2, 3, 4, 5]
    scale_all(items, 0)
    assert items == [0, 0, 0, 0, 0]


@given(st.lists(st.integers()))
def test_scale_all_by_one_is_identity(items):
    original = list(items)
    scale_all(items, 1)
    assert items == original


@given(st.lists(st.integers()))
def test_scale_all_is_undone_by_division(items):
    original = list(items)
    scale_all(items, 5)
    assert [value // 5 for value in items] == original


def test_numbered_grid_source_example():
    assert numbered_grid(3, 4, 100) == [
        [100, 101, 102, 103],
        [104, 105, 106, 107],
        [108, 109, 110, 111],
    ]


@given(st.integers(0, 8), st.integers(0, 8), st.integers(-100, 100))
def test_numbered_grid_shape_and_sequence(rows, columns, start):
    grid = numbered_grid(rows, columns, start)
    assert len(grid) == rows
    assert all(len(row) == columns for row in grid)
    flat = [value for row in grid for value in row]
    assert all(b - a == 1 for a, b in zip(flat, flat[1:]))
    if flat:
        assert flat[0] == start


def test_numbered_grid_negative_size_raises():
    with pytest.raises(ValueError):
        numbered_grid(-1, 4)