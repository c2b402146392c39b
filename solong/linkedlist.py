"""A minimal singly linked list of arbitrary payloads."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass
class Node:
    """One link of a list: a payload and the node that follows it."""

    content: Any
    next: Optional[Node] = None


def delete_node(node: Node | None, release: Callable[[Any], object] | None) -> None:
    """Hand a node's payload to ``release`` and detach the node.

    Nothing happens when either the node or ``release`` is missing.
    """
    if node is None or release is None:
        return
    release(node.content)
    node.next = None


class LinkedList:
    """Singly linked list built from an iterable of payloads."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Node | None = None
        tail: Node | None = None
        for item in items:
            node = Node(item)
            if tail is None:
                self.head = node
            else:
                tail.next = node
            tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def last(self) -> Node | None:
        """The final node, or ``None`` for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def for_each(self, func: Callable[[Any], object] | None) -> None:
        """Call ``func`` on every payload, front to back."""
        if func is None:
            return
        for content in self:
            func(content)

    def clear(self, release: Callable[[Any], object] | None = None) -> None:
        """Empty the list, passing each payload to ``release`` when given."""
        node = self.head
        while node is not None:
            following = node.next
            if release is not None:
                release(node.content)
            node.next = None
            node = following
        self.head = None