import pytest

from algokit.linked import (
    ListNode,
    build_list,
    delete_duplicates,
    delete_node,
    list_values,
    merge_two_lists,
    remove_elements,
)


@pytest.mark.parametrize("values", [[1], [1, 2, 3], [5, 5, -1, 0]])
def test_build_and_read_round_trip(values):
    assert list_values(build_list(values)) == values


def test_empty_list_is_none():
    assert build_list([]) is None
    assert list_values(None) == []


@pytest.mark.parametrize(
    "a, b",
    [([1, 2, 4], [1, 3, 4]), ([], [0]), ([2, 6, 9], [1, 3, 5, 7, 11]), ([], [])],
)
def test_merge_gives_sorted_union(a, b):
    merged = merge_two_lists(build_list(a), build_list(b))
    assert list_values(merged) == sorted(a + b)


def test_merge_reuses_nodes_and_prefers_second_on_ties():
    first = ListNode(1)
    second = ListNode(1)
    merged = merge_two_lists(first, second)
    assert merged is second
    assert merged.next is first


def test_merge_with_empty_returns_other():
    head = build_list([3, 4])
    assert merge_two_lists(None, head) is head
    assert merge_two_lists(head, None) is head


def test_delete_duplicates_on_sorted_input():
    values = [1, 1, 2, 3, 3, 3]
    head = build_list(values)
    result = delete_duplicates(head)
    assert list_values(result) == sorted(set(values))
    assert list_values(head) == values


def test_delete_duplicates_keeps_non_adjacent_repeats():
    values = [1, 2, 1]
    assert list_values(delete_duplicates(build_list(values))) == values


def test_delete_duplicates_of_empty():
    assert delete_duplicates(None) is None


@pytest.mark.parametrize(
    "values, val",
    [([1, 2, 6, 3, 4, 5, 6], 6), ([7, 7, 1, 7], 7), ([1, 2], 3)],
)
def test_remove_elements(values, val):
    result = remove_elements(build_list(values), val)
    assert list_values(result) == [v for v in values if v != val]


def test_remove_elements_all_removed():
    assert remove_elements(build_list([7, 7, 7]), 7) is None


def test_delete_node_in_middle():
    head = build_list([4, 5, 1, 9])
    delete_node(head.next)
    assert list_values(head) == [4, 1, 9]


def test_delete_last_node_raises():
    head = build_list([4, 5])
    with pytest.raises(ValueError):
        delete_node(head.next)