from hypothesis import given
from hypothesis import strategies as st

from dsalab.searching import binary_search, linear_search


def test_binary_search_empty():
    assert binary_search([], 3) is None


def test_binary_search_finds_middle():
    assert binary_search([1, 3, 5, 7, 9], 5) == 2


def test_binary_search_ends():
    data = [2, 4, 6, 8]
    assert binary_search(data, 2) == 0
    assert binary_search(data, 8) == 3


def test_binary_search_missing():
    assert binary_search([1, 3, 5], 4) is None
    assert binary_search([1, 3, 5], 0) is None
    assert binary_search([1, 3, 5], 6) is None


@given(st.lists(st.integers(-50, 50), unique=True), st.integers(-50, 50))
def test_binary_search_agrees_with_membership(raw, key):
    data = sorted(raw)
    index = binary_search(data, key)
    if key in data:
        assert data[index] == key
    else:
        assert index is None


def test_linear_search_returns_last_match():
    assert linear_search([4, 1, 4, 2], 4) == 2


def test_linear_search_missing():
    assert linear_search([4, 1, 2], 9) is None
    assert linear_search([], 9) is None


@given(st.lists(st.integers(-5, 5)), st.integers(-5, 5))
def test_linear_search_invariant(data, key):
    index = linear_search(data, key)
    if key in data:
        assert data[index] == key
        assert key not in data[index + 1:]
    else:
        assert index is None