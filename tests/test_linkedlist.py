import pytest

from fmtprint.linkedlist import (
    ListNode,
    lstadd,
    lstdel,
    lstdelone,
    lstiter,
    lstlen,
    lstmap,
    lstnew,
    lstrev,
    swaplst,
    swpcntlst,
)


def build(*items):
    head = None
    for item in reversed(items):
        head = lstadd(head, lstnew(item))
    return head


def contents(head):
    return [] if head is None else [node.content for node in head]


def test_lstnew_copies_content():
    data = bytearray(b"abc")
    node = lstnew(data)
    data[0] = ord("z")
    assert node.content == b"abc"
    assert node.content_size == 3
    assert node.next is None


def test_lstnew_encodes_text():
    node = lstnew("hi")
    assert node.content == b"hi"
    assert node.content_size == 2


def test_lstnew_none_gives_empty_node():
    node = lstnew(None)
    assert node.content is None
    assert node.content_size == 0


def test_lstadd_puts_node_in_front():
    head = build(b"b", b"c")
    new_head = lstadd(head, lstnew(b"a"))
    assert contents(new_head) == [b"a", b"b", b"c"]
    assert new_head.next is head


@pytest.mark.parametrize("items", [(), (b"x",), (b"a", b"b", b"c", b"d")])
def test_lstlen_counts_nodes(items):
    assert lstlen(build(*items)) == len(items)


def test_lstiter_visits_in_order():
    seen = []
    lstiter(build(b"1", b"2", b"3"), lambda node: seen.append(node.content))
    assert seen == [b"1", b"2", b"3"]


def test_lstiter_on_empty_list_calls_nothing():
    seen = []
    lstiter(None, seen.append)
    assert seen == []


def test_lstdelone_passes_payload_and_detaches():
    head = build(b"ab", b"cd")
    calls = []
    lstdelone(head, lambda content, size: calls.append((content, size)))
    assert calls == [(b"ab", 2)]
    assert head.next is None


def test_lstdel_deletes_every_node_last_first():
    calls = []
    head = build(b"a", b"bb", b"ccc")
    lstdel(head, lambda content, size: calls.append((content, size)))
    assert calls == [(b"ccc", 3), (b"bb", 2), (b"a", 1)]
    assert head.next is None


def test_lstmap_builds_new_list():
    head = build(b"ab", b"cd")
    mapped = lstmap(head, lambda node: lstnew(node.content.upper()))
    assert contents(mapped) == [b"AB", b"CD"]
    assert contents(head) == [b"ab", b"cd"]
    assert all(a is not b for a, b in zip(head, mapped))


def test_lstmap_of_empty_list_is_none():
    assert lstmap(None, lambda node: node) is None


def test_lstrev_reverses():
    head = lstrev(build(b"1", b"2", b"3"))
    assert contents(head) == [b"3", b"2", b"1"]


def test_lstrev_twice_restores_order():
    items = [b"a", b"b", b"c", b"d"]
    head = lstrev(lstrev(build(*items)))
    assert contents(head) == items


def test_lstrev_empty():
    assert lstrev(None) is None


def test_swaplst_exchanges_successors():
    first = build(b"a", b"b")
    second = build(b"x", b"y")
    b_node, y_node = first.next, second.next
    new_first, new_second = swaplst(first, second)
    assert new_first is second and new_second is first
    assert new_first.next is b_node
    assert new_second.next is y_node


def test_swpcntlst_exchanges_payloads():
    first = lstnew(b"one")
    second = lstnew(b"three")
    follower = lstnew(b"tail")
    first.next = follower
    swpcntlst(first, second)
    assert (first.content, first.content_size) == (b"three", 5)
    assert (second.content, second.content_size) == (b"one", 3)
    assert first.next is follower


def test_node_iteration_yields_nodes():
    head = ListNode(b"a", 1, ListNode(b"b", 1))
    assert [node.content for node in head] == [b"a", b"b"]