"""Singly, doubly and circular linked lists."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any


@dataclass(eq=False)
class Node:
    """A list cell holding a value and links to its neighbours."""

    value: Any
    next: Node | None = None
    prev: Node | None = None


class SinglyLinkedList:
    """A list of nodes linked forward from a head node."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = Node(value)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front of the list."""
        self.head = Node(value, next=self.head)
        if self._tail is None:
            self._tail = self.head
        self._size += 1

    def delete_first(self) -> Any:
        """Remove the first node and return its value."""
        if self.head is None:
            raise IndexError("delete from an empty list")
        node = self.head
        self.head = node.next
        if self.head is None:
            self._tail = None
        self._size -= 1
        return node.value

    def delete_last(self) -> Any:
        """Remove the last node and return its value."""
        if self.head is None:
            raise IndexError("list is already empty")
        if self.head.next is None:
            value = self.head.value
            self.head = self._tail = None
        else:
            before = self.head
            while before.next is not None and before.next.next is not None:
                before = before.next
            assert before.next is not None
            value = before.next.value
            before.next = None
            self._tail = before
        self._size -= 1
        return value

    def reverse(self) -> None:
        """Reverse the list in place by relinking its nodes one by one."""
        previous: Node | None = None
        current = self.head
        self._tail = current
        while current is not None:
            following = current.next
            current.next = previous
            previous = current
            current = following
        self.head = previous

    def reverse_recursive(self) -> None:
        """Reverse the list in place, relinking nodes on the way back from the end."""
        if self.head is None:
            return
        old_head = self.head

        def _reverse(node: Node) -> None:
            if node.next is None:
                self.head = node
                return
            _reverse(node.next)
            node.next.next = node
            node.next = None

        _reverse(old_head)
        self._tail = old_head

    def middle(self) -> Any:
        """Value of the middle node, found in one pass; the second of two middles."""
        if self.head is None:
            raise IndexError("middle of an empty list")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            assert slow.next is not None
            slow = slow.next
        return slow.value

    def middle_by_count(self) -> Any:
        """Value of the middle node, found by counting first; the second of two middles."""
        if self.head is None:
            raise IndexError("middle of an empty list")
        return next(islice(self, len(self) // 2, None))

    def reversed_values(self) -> list[Any]:
        """The values from last to first, collected recursively."""
        collected: list[Any] = []

        def _collect(node: Node) -> None:
            if node.next is not None:
                _collect(node.next)
            collected.append(node.value)

        if self.head is not None:
            _collect(self.head)
        return collected

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class DoublyLinkedList:
    """A list of nodes linked both forward and backward."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        for value in reversed(list(values)):
            self.prepend(value)

    def prepend(self, value: Any) -> None:
        """Add ``value`` at the front of the list."""
        node = Node(value)
        if self.head is None:
            self.head = self._tail = node
            return
        self.head.prev = node
        node.next = self.head
        self.head = node

    def __iter__(self) -> Iterator[Any]:
        node = self.head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"


class CircularLinkedList:
    """A ring of nodes reached through its tail; the node after the tail is the first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.tail: Node | None = None
        for value in reversed(list(values)):
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` at the beginning of the ring, right after the tail."""
        node = Node(value)
        if self.tail is None:
            node.next = node
            self.tail = node
            return
        node.next = self.tail.next
        self.tail.next = node

    def __iter__(self) -> Iterator[Any]:
        if self.tail is None:
            return
        first = self.tail.next
        node = first
        while True:
            assert node is not None
            yield node.value
            node = node.next
            if node is first:
                break

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"