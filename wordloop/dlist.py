"""Doubly linked list of strings with cursors that can splice nodes around."""

from __future__ import annotations

from collections.abc import Iterable, Iterator


class _Node:
    __slots__ = ("prev", "data", "next")

    def __init__(self, data: str) -> None:
        self.prev: _Node | None = None
        self.data = data
        self.next: _Node | None = None


class DList:
    """A doubly linked list whose nodes can be moved in place through cursors."""

    def __init__(self, items: Iterable[str] = ()) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        for item in items:
            self.append(item)

    def append(self, data: str) -> None:
        """Add a new node holding ``data`` at the end."""
        node = _Node(data)
        if self._head is None:
            self._head = self._tail = node
        else:
            assert self._tail is not None
            self._tail.next = node
            node.prev = self._tail
            self._tail = node

    def clear(self) -> None:
        """Drop every node."""
        node = self._head
        while node is not None:
            following = node.next
            node.prev = node.next = None
            node = following
        self._head = self._tail = None

    def __iter__(self) -> Iterator[str]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __bool__(self) -> bool:
        return self._head is not None

    def __repr__(self) -> str:
        return f"DList({list(self)!r})"

    def begin(self) -> Cursor:
        """Cursor on the first node, or the end cursor if the list is empty."""
        return Cursor(self, self._head)

    def end(self) -> Cursor:
        """Cursor one past the last node."""
        return Cursor(self, None)

    def back(self) -> Cursor:
        """Cursor on the last node, or the end cursor if the list is empty."""
        return Cursor(self, self._tail)


class Cursor:
    """A position in a :class:`DList`; the end position holds no node."""

    __slots__ = ("_list", "_node")

    def __init__(self, dlist: DList, node: _Node | None) -> None:
        self._list = dlist
        self._node = node

    @property
    def value(self) -> str:
        """The string stored at this position."""
        if self._node is None:
            raise IndexError("end cursor has no value")
        return self._node.data

    @value.setter
    def value(self, data: str) -> None:
        if self._node is None:
            raise IndexError("end cursor has no value")
        self._node.data = data

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cursor):
            return NotImplemented
        return self._node is other._node

    def __hash__(self) -> int:
        return hash(id(self._node))

    def __repr__(self) -> str:
        if self._node is None:
            return "Cursor(<end>)"
        return f"Cursor({self._node.data!r})"

    def _step(self, forward: bool) -> _Node | None:
        if self._node is None:
            raise IndexError("cannot move a cursor from the end position")
        return self._node.next if forward else self._node.prev

    def __add__(self, shift: int) -> Cursor:
        node_cursor = Cursor(self._list, self._node)
        forward = shift > 0
        for _ in range(abs(shift)):
            node_cursor._node = node_cursor._step(forward)
        return node_cursor

    def __sub__(self, shift: int) -> Cursor:
        return self + (-shift)

    def pull(self, other: Cursor) -> None:
        """Move the node under ``other`` so that it stands just before this cursor."""
        self.pull_range(other, other)

    def pull_range(self, front: Cursor, back: Cursor) -> None:
        """Move the nodes from ``front`` to ``back`` inclusive to just before this cursor."""
        left, right, anchor = front._node, back._node, self._node
        if right is anchor or left is anchor:
            return
        if right is None:
            return
        if left is None:
            raise IndexError("range cannot start at the end position")

        source = front._list
        is_head = left.prev is None
        is_tail = right.next is None
        if is_head and is_tail:
            source._head = source._tail = None
        else:
            if is_head:
                assert right.next is not None
                source._head = right.next
                right.next.prev = None
            else:
                assert left.prev is not None
                left.prev.next = right.next
            if is_tail:
                assert left.prev is not None
                source._tail = left.prev
                left.prev.next = None
            else:
                assert right.next is not None
                right.next.prev = left.prev

        target = self._list
        if anchor is None:
            if target._head is None:
                target._head = left
                left.prev = None
            else:
                assert target._tail is not None
                target._tail.next = left
                left.prev = target._tail
            target._tail = right
            right.next = None
        elif anchor.prev is None:
            anchor.prev = right
            right.next = anchor
            target._head = left
            left.prev = None
        else:
            anchor.prev.next = left
            left.prev = anchor.prev
            anchor.prev = right
            right.next = anchor