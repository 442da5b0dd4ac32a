"""Singly linked lists and cycle detection."""

from __future__ import annotations

from collections.abc import Sequence


class ListNode:
    """A node of a singly linked list; nodes compare and hash by identity."""

    __slots__ = ("val", "next")

    def __init__(self, val: int, next: ListNode | None = None) -> None:
        self.val = val
        self.next = next

    def __repr__(self) -> str:
        return f"ListNode({self.val!r})"


def build_list(values: Sequence[int], cycle_position: int = -1) -> ListNode | None:
    """Link ``values`` into a list and return its head, or None when there are no values.

    When ``cycle_position`` is a valid index, the last node points back to the
    node at that index; any other position leaves the list without a cycle.
    """
    if not values:
        return None
    nodes = [ListNode(value) for value in values]
    for node, following in zip(nodes, nodes[1:]):
        node.next = following
    if 0 <= cycle_position < len(nodes):
        nodes[-1].next = nodes[cycle_position]
    return nodes[0]


def has_cycle_hashing(head: ListNode | None) -> bool:
    """Return True if the list loops back on itself, remembering every node visited."""
    if head is None or head.next is None:
        return False
    visited: set[int] = set()
    current: ListNode | None = head
    while current is not None:
        if id(current) in visited:
            return True
        visited.add(id(current))
        current = current.next
    return False


def has_cycle(head: ListNode | None) -> bool:
    """Return True if the list loops back on itself, using a slow and a fast pointer."""
    if head is None or head.next is None:
        return False
    slow: ListNode | None = head
    fast: ListNode | None = head
    while fast is not None and fast.next is not None:
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            return True
    return False