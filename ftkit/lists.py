"""A singly linked list of arbitrary contents."""

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a list: a content and the node after it."""

    content: Any = None
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list whose nodes hold arbitrary contents."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def add_front(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the head and return it."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Put a new node holding ``content`` at the tail and return it."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """The last node, or None when the list is empty."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]] = None) -> None:
        """Remove every node, passing each content to ``delete`` first if given."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            self.head = following
            node = following

    def iterate(self, func: Callable[[Any], None]) -> None:
        """Call ``func`` on each content, head to tail."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """A new list of ``func(content)`` for each content.

        A content of None is carried over as None without calling ``func``.
        If ``func`` raises, the contents mapped so far are passed to
        ``delete`` and the exception propagates.
        """
        if not callable(func):
            raise TypeError("map needs a callable func")
        result = LinkedList()
        try:
            for content in self:
                result.add_back(None if content is None else func(content))
        except BaseException:
            result.clear(delete)
            raise
        return result