"""Singly linked lists of byte payloads."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass

Deleter = Callable[["bytes | None", int], object]


@dataclass(eq=False)
class ListNode:
    """One list element: a payload, its size and the following node."""

    content: bytes | None = None
    content_size: int = 0
    next: ListNode | None = None

    def __iter__(self) -> Iterator[ListNode]:
        node: ListNode | None = self
        while node is not None:
            yield node
            node = node.next


def _nodes(head: ListNode | None) -> list[ListNode]:
    return [] if head is None else list(head)


def lstnew(content: bytes | bytearray | str | None) -> ListNode:
    """A detached node holding a copy of ``content``; None gives an empty node."""
    if content is None:
        return ListNode()
    data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
    return ListNode(content=data, content_size=len(data))


def lstadd(head: ListNode | None, node: ListNode) -> ListNode:
    """Put ``node`` in front of ``head`` and return the new head."""
    node.next = head
    return node


def lstdelone(node: ListNode, delete: Deleter) -> None:
    """Hand the node's payload to ``delete`` and detach the node."""
    delete(node.content, node.content_size)
    node.content = None
    node.content_size = 0
    node.next = None


def lstdel(head: ListNode | None, delete: Deleter) -> None:
    """Delete every node of the list, the last one first."""
    for node in reversed(_nodes(head)):
        lstdelone(node, delete)


def lstiter(head: ListNode | None, f: Callable[[ListNode], object]) -> None:
    """Call ``f`` on each node in order."""
    for node in _nodes(head):
        f(node)


def lstmap(head: ListNode | None, f: Callable[[ListNode], ListNode]) -> ListNode | None:
    """A new list made of ``f`` applied to each node, in the same order."""
    new_head: ListNode | None = None
    tail: ListNode | None = None
    for node in _nodes(head):
        mapped = f(node)
        if tail is None:
            new_head = mapped
        else:
            tail.next = mapped
        tail = mapped
    return new_head


def lstlen(head: ListNode | None) -> int:
    """Number of nodes in the list."""
    return len(_nodes(head))


def lstrev(head: ListNode | None) -> ListNode | None:
    """Reverse the list in place and return its new head."""
    previous: ListNode | None = None
    node = head
    while node is not None:
        following = node.next
        node.next = previous
        previous = node
        node = following
    return previous


def swaplst(first: ListNode, second: ListNode) -> tuple[ListNode, ListNode]:
    """Exchange the successors of two nodes and return them in swapped order."""
    first.next, second.next = second.next, first.next
    return second, first


def swpcntlst(first: ListNode, second: ListNode) -> None:
    """Exchange the payloads of two nodes, leaving the links alone."""
    first.content, second.content = second.content, first.content
    first.content_size, second.content_size = second.content_size, first.content_size