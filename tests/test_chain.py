import pytest
from hypothesis import given
from hypothesis import strategies as st

from pushswap.chain import Chain, Node


def contents(chain):
    return [node.content for node in chain]


def test_build_keeps_order():
    chain = Chain([3, 1, 2])
    assert contents(chain) == [3, 1, 2]
    assert len(chain) == 3


def test_empty_chain():
    chain = Chain()
    assert len(chain) == 0
    assert chain.last() is None
    assert chain.head is None


def test_add_front_and_back():
    chain = Chain([2])
    chain.add_front(Node(1))
    chain.add_back(Node(3))
    assert contents(chain) == [1, 2, 3]


def test_add_back_to_empty_sets_head():
    chain = Chain()
    node = Node("x", name="a")
    chain.add_back(node)
    assert chain.head is node
    assert chain.last() is node


def test_last_is_final_node():
    chain = Chain([5, 6, 7])
    assert chain.last().content == 7
    assert chain.last().next is None


def test_add_rejects_non_nodes():
    chain = Chain()
    with pytest.raises(TypeError):
        chain.add_front(4)
    with pytest.raises(TypeError):
        chain.add_back(None)


def test_clear_hands_payloads_to_delete():
    deleted = []
    chain = Chain(["a", "b"])
    chain.clear(deleted.append)
    assert deleted == ["a", "b"]
    assert len(chain) == 0


def test_iterate_visits_every_payload():
    seen = []
    Chain([1, 2, 3]).iterate(seen.append)
    assert seen == [1, 2, 3]


def test_map_builds_new_chain():
    source = Chain([1, 2, 3])
    mapped = source.map(str)
    assert contents(mapped) == ["1", "2", "3"]
    assert contents(source) == [1, 2, 3]


def test_map_cleans_up_on_failure():
    deleted = []

    def convert(value):
        if value == 3:
            raise RuntimeError("boom")
        return value * 10

    with pytest.raises(RuntimeError):
        Chain([1, 2, 3]).map(convert, deleted.append)
    assert deleted == [10, 20]


def test_moving_node_between_chains():
    a = Chain([1, 2])
    b = Chain()
    node = a.head
    a.head = node.next
    b.add_front(node)
    assert contents(a) == [2]
    assert contents(b) == [1]


@given(st.lists(st.integers(), max_size=30))
def test_length_and_contents_match_input(values):
    chain = Chain(values)
    assert len(chain) == len(values)
    assert contents(chain) == values
    assert contents(chain.map(lambda v: v)) == values