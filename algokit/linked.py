"""Singly linked list puzzles."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import groupby
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """One node of a singly linked list."""

    val: int = 0
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def build_list(values: Iterable[int]) -> Optional[ListNode]:
    """Link the values into a new list and return its head, or None when empty."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: Optional[ListNode]) -> list[int]:
    """The values of the list starting at ``head``, in order."""
    return list(head) if head is not None else []


def merge_two_lists(l1: Optional[ListNode], l2: Optional[ListNode]) -> Optional[ListNode]:
    """Splice two sorted lists into one; on ties the node from ``l2`` comes first."""
    dummy = ListNode()
    tail = dummy
    a, b = l1, l2
    while a is not None and b is not None:
        if a.val < b.val:
            tail.next, a = a, a.next
        else:
            tail.next, b = b, b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def delete_duplicates(head: Optional[ListNode]) -> Optional[ListNode]:
    """A new list with runs of equal neighbouring values collapsed to one."""
    return build_list(value for value, _ in groupby(list_values(head)))


def remove_elements(head: Optional[ListNode], val: int) -> Optional[ListNode]:
    """Unlink every node holding ``val`` and return the new head."""
    while head is not None and head.val == val:
        removed, head = head, head.next
        removed.next = None
    if head is None:
        return None
    prev = head
    while prev.next is not None:
        if prev.next.val == val:
            removed = prev.next
            prev.next = removed.next
            removed.next = None
        else:
            prev = prev.next
    return head


def delete_node(node: ListNode) -> None:
    """Remove ``node`` from its list by taking over its successor's value and link."""
    successor = node.next
    if successor is None:
        raise ValueError("cannot delete the last node this way")
    node.val = successor.val
    node.next = successor.next