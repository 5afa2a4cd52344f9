"""A singly linked list with a header node and position iterators."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Optional

from cityroutes.errors import BadIterator


class _Node:
    __slots__ = ("element", "next")

    def __init__(self, element: Any = None, next_node: Optional[_Node] = None) -> None:
        self.element = element
        self.next = next_node


class ListIterator:
    """A position in a LinkedList; past the end when it holds no node."""

    def __init__(self, node: Optional[_Node] = None) -> None:
        self._node = node

    def is_past_end(self) -> bool:
        return self._node is None

    def advance(self) -> None:
        """Move to the next position, unless already past the end."""
        if self._node is not None:
            self._node = self._node.next

    def retrieve(self) -> Any:
        """Return the item at this position; raise BadIterator past the end."""
        if self._node is None:
            raise BadIterator("iterator is past the end")
        return self._node.element


class LinkedList:
    """Singly linked list accessed through ListIterator positions."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._header = _Node()
        position = self.zeroth()
        for item in items:
            self.insert(item, position)
            position.advance()

    def is_empty(self) -> bool:
        return self._header.next is None

    def make_empty(self) -> None:
        self._header.next = None

    def zeroth(self) -> ListIterator:
        """Return the position before the first item."""
        return ListIterator(self._header)

    def first(self) -> ListIterator:
        """Return the position of the first item (past the end if empty)."""
        return ListIterator(self._header.next)

    def insert(self, x: Any, p: ListIterator) -> None:
        """Insert ``x`` after position ``p``; nothing happens if ``p`` is past the end."""
        node = p._node
        if node is not None:
            node.next = _Node(x, node.next)

    def find(self, x: Any) -> ListIterator:
        """Return the position of the first item equal to ``x``, or past the end."""
        node = self._header.next
        while node is not None and node.element != x:
            node = node.next
        return ListIterator(node)

    def find_previous(self, x: Any) -> ListIterator:
        """Return the position just before the first item equal to ``x``.

        If ``x`` is absent this is the position of the last node.
        """
        node = self._header
        while node.next is not None and node.next.element != x:
            node = node.next
        return ListIterator(node)

    def remove(self, x: Any) -> None:
        """Remove the first item equal to ``x``, if any."""
        prev = self.find_previous(x)._node
        if prev is not None and prev.next is not None:
            prev.next = prev.next.next

    def copy(self) -> LinkedList:
        return LinkedList(self)

    def __iter__(self) -> Iterator[Any]:
        node = self._header.next
        while node is not None:
            yield node.element
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"