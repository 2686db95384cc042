"""Singly linked list node types and list algorithms."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    val: int = 0
    next: ListNode | None = field(default=None, repr=False)


@dataclass(eq=False)
class RandomNode:
    """A linked list node with an extra pointer to any node of the list."""

    val: int = 0
    next: RandomNode | None = field(default=None, repr=False)
    random: RandomNode | None = field(default=None, repr=False)


def _nodes(head):
    node = head
    while node is not None:
        yield node
        node = node.next


def build_list(values: Iterable[int]) -> ListNode | None:
    """Build a linked list holding the given values, in order."""
    dummy = ListNode()
    tail = dummy
    for value in values:
        tail.next = ListNode(value)
        tail = tail.next
    return dummy.next


def list_values(head: ListNode | None) -> list[int]:
    """Return the values of a linked list as a Python list."""
    return [node.val for node in _nodes(head)]


def add_two_numbers(l1: ListNode | None, l2: ListNode | None) -> ListNode | None:
    """Add two numbers stored as reversed digit lists."""
    dummy = ListNode()
    tail = dummy
    carry = 0
    while l1 is not None or l2 is not None or carry:
        total = carry
        if l1 is not None:
            total += l1.val
            l1 = l1.next
        if l2 is not None:
            total += l2.val
            l2 = l2.next
        carry, digit = divmod(total, 10)
        tail.next = ListNode(digit)
        tail = tail.next
    return dummy.next


def remove_nth_from_end(head: ListNode | None, n: int) -> ListNode | None:
    """Unlink the n-th node counted from the end and return the new head."""
    if n < 1:
        raise ValueError("n must be at least 1")
    dummy = ListNode(0, head)
    lead: ListNode | None = dummy
    for _ in range(n + 1):
        if lead is None:
            raise ValueError("n exceeds the length of the list")
        lead = lead.next
    trail = dummy
    while lead is not None:
        lead = lead.next
        trail = trail.next
    trail.next = trail.next.next
    return dummy.next


def rotate_right(head: ListNode | None, k: int) -> ListNode | None:
    """Rotate the list to the right by k places and return the new head."""
    if head is None or head.next is None or k == 0:
        return head
    nodes = list(_nodes(head))
    size = len(nodes)
    k %= size
    if k == 0:
        return head
    new_end = nodes[size - k - 1]
    new_head = new_end.next
    new_end.next = None
    nodes[-1].next = head
    return new_head


def delete_duplicates(head: ListNode | None) -> ListNode | None:
    """Remove every value that occurs more than once in a sorted list."""
    dummy = ListNode(0, head)
    node = dummy
    while node.next is not None and node.next.next is not None:
        if node.next.val == node.next.next.val:
            duplicate = node.next.val
            while node.next is not None and node.next.val == duplicate:
                node.next = node.next.next
        else:
            node = node.next
    return dummy.next


def reverse_between(head: ListNode | None, left: int, right: int) -> ListNode | None:
    """Reverse the values at 1-based positions left..right in place."""
    nodes = list(_nodes(head))
    if not 1 <= left <= right <= len(nodes):
        raise ValueError("positions must satisfy 1 <= left <= right <= length")
    segment = nodes[left - 1 : right]
    values = [node.val for node in segment]
    for node, value in zip(segment, reversed(values)):
        node.val = value
    return head


def _merge(a: ListNode | None, b: ListNode | None) -> ListNode | None:
    dummy = ListNode()
    tail = dummy
    while a is not None and b is not None:
        if a.val < b.val:
            a, b = b, a
        tail.next = b
        b = b.next
        tail = tail.next
    tail.next = a if a is not None else b
    return dummy.next


def _split_sort(head: ListNode | None, length: int) -> ListNode | None:
    if length <= 1:
        return head
    half = length // 2
    mid = head
    for _ in range(half - 1):
        mid = mid.next
    second = mid.next
    mid.next = None
    return _merge(_split_sort(head, half), _split_sort(second, length - half))


def sort_list(head: ListNode | None) -> ListNode | None:
    """Sort a linked list in ascending order with merge sort."""
    length = sum(1 for _ in _nodes(head))
    return _split_sort(head, length)


def copy_random_list(head: RandomNode | None) -> RandomNode | None:
    """Deep-copy a list whose nodes carry random pointers."""
    copies: dict[RandomNode | None, RandomNode | None] = {None: None}
    dummy = RandomNode()
    tail = dummy
    for node in _nodes(head):
        tail.next = RandomNode(node.val)
        tail = tail.next
        copies[node] = tail
    for node in _nodes(head):
        copies[node].random = copies[node.random]
    return dummy.next


def _iter_values(head: ListNode | None) -> Iterator[int]:
    return (node.val for node in _nodes(head))