"""A singly linked list whose lookups use a three-way comparison function."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, Optional

from codexkit.comparator import identity_compare

Compare = Callable[[Any, Any], int]


@dataclass(eq=False)
class ListNode:
    """One link of a :class:`LinkedList`."""

    value: Any
    next: Optional["ListNode"] = None


class LinkedList:
    """Singly linked list.

    ``compare`` decides which stored value matches in :meth:`find` and
    :meth:`remove`; by default values match only when they are the same object.
    """

    def __init__(self, compare: Compare = identity_compare) -> None:
        self.compare = compare
        self.head: Optional[ListNode] = None

    def prepend(self, value: Any) -> None:
        """Insert ``value`` at the front of the list."""
        self.head = ListNode(value, self.head)

    def append(self, value: Any) -> None:
        """Insert ``value`` at the end of the list."""
        node = ListNode(value)
        last = self.tail()
        if last is None:
            self.head = node
        else:
            last.next = node

    def remove(self, value: Any) -> None:
        """Unlink the first node whose value matches ``value``; do nothing if none does."""
        previous: Optional[ListNode] = None
        node = self.head
        while node is not None:
            if self.compare(node.value, value) == 0:
                if previous is None:
                    self.head = node.next
                else:
                    previous.next = node.next
                return
            previous, node = node, node.next

    def find(self, value: Any) -> Optional[ListNode]:
        """Return the first node whose value matches ``value``, or ``None``."""
        for node in self._nodes():
            if self.compare(node.value, value) == 0:
                return node
        return None

    def tail(self) -> Optional[ListNode]:
        """Return the last node, or ``None`` when the list is empty."""
        last = None
        for node in self._nodes():
            last = node
        return last

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.value

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"