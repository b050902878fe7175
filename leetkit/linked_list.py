"""Singly linked list node type and merging of sorted lists."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A singly linked list node holding an integer value."""

    val: int = 0
    next: Optional[ListNode] = None

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> Optional[ListNode]:
        """Build a list from values, returning its head or None when empty."""
        head: Optional[ListNode] = None
        tail: Optional[ListNode] = None
        for value in values:
            node = cls(value)
            if tail is None:
                head = node
            else:
                tail.next = node
            tail = node
        return head

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.val
            node = node.next


def format_list(head: Optional[ListNode]) -> str:
    """Render a list as ``a -> b -> nullptr``."""
    values = head if head is not None else ()
    return "".join(f"{value} -> " for value in values) + "nullptr"


def merge_two_lists(
    list1: Optional[ListNode], list2: Optional[ListNode]
) -> Optional[ListNode]:
    """Splice two sorted lists into one sorted list; ties take from ``list1``."""
    dummy = ListNode()
    current = dummy
    while list1 is not None and list2 is not None:
        if list1.val <= list2.val:
            current.next = list1
            list1 = list1.next
        else:
            current.next = list2
            list2 = list2.next
        current = current.next
    current.next = list1 if list1 is not None else list2
    return dummy.next