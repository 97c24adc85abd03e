"""
Unit tests for the circular vertex container.
"""

import pytest

from planarpoly.core.ring import Ring, RingNode


class TestIndexing:
    """Tests for wraparound access."""

    def test_at_wraps_forward(self):
        """Indices past the end wrap to the start."""
        ring = Ring(['a', 'b', 'c'])
        assert ring.at(0) == 'a'
        assert ring.at(3) == 'a'
        assert ring.at(7) == 'b'

    def test_at_wraps_backward(self):
        """Negative indices count back from the end."""
        ring = Ring(['a', 'b', 'c'])
        assert ring.at(-1) == 'c'
        assert ring.at(-4) == 'c'

    def test_empty_ring(self):
        """An empty ring has no first node and rejects indexing."""
        ring = Ring()
        assert ring.first is None
        assert len(ring) == 0
        with pytest.raises(IndexError):
            ring.at(0)

    def test_append(self):
        """Appended items go to the end of the ring."""
        ring = Ring()
        for item in 'xyz':
            ring.append(item)
        assert list(ring) == ['x', 'y', 'z']
        assert ring.first.data == 'x'


class TestNodes:
    """Tests for node adjacency."""

    def test_next_prev_inverse(self):
        """prev undoes next for every node."""
        ring = Ring(range(5))
        for node in ring.nodes():
            assert node.next.prev == node
            assert node.prev.next == node

    def test_full_traversal_returns_to_start(self):
        """Following next len(ring) times returns to the first node."""
        ring = Ring(range(4))
        node = ring.first
        seen = []
        for _ in range(len(ring)):
            seen.append(node.data)
            node = node.next
        assert node == ring.first
        assert seen == [0, 1, 2, 3]

    def test_neighbours_wrap(self):
        """The first node's prev is the last node."""
        ring = Ring(['a', 'b', 'c'])
        assert ring.first.prev.data == 'c'
        assert ring.node(2).next.data == 'a'

    def test_nodes_of_different_rings_differ(self):
        """Nodes compare by ring identity and position."""
        assert Ring([1]).first != Ring([1]).first
        assert isinstance(Ring([1]).first, RingNode)


class TestQueries:
    """Tests for search and bulk operations."""

    def test_find_node(self):
        """find_node returns the first match under the predicate."""
        ring = Ring([1, 5, 9, 5])
        node = ring.find_node(5, lambda data, value: data == value)
        assert node.index == 1

    def test_find_node_missing(self):
        """find_node returns None when nothing matches."""
        ring = Ring([1, 2, 3])
        assert ring.find_node(7, lambda data, value: data == value) is None

    def test_map_and_filter_keep_order(self):
        """map and filter return plain lists in ring order."""
        ring = Ring([3, 1, 4, 1, 5])
        assert ring.map(lambda x: x * 2) == [6, 2, 8, 2, 10]
        assert ring.filter(lambda x: x != 1) == [3, 4, 5]

    def test_for_each_visits_once(self):
        """for_each passes each node with its index exactly once."""
        ring = Ring('abcd')
        visits = []
        ring.for_each(lambda node, i: visits.append((i, node.data)))
        assert visits == [(0, 'a'), (1, 'b'), (2, 'c'), (3, 'd')]

    def test_some_short_circuits(self):
        """some stops at the first node satisfying the predicate."""
        ring = Ring([1, 2, 3, 4])
        calls = []

        def predicate(node):
            calls.append(node.data)
            return node.data == 2

        assert ring.some(predicate)
        assert calls == [1, 2]

    def test_every(self):
        """every holds only when all nodes satisfy the predicate."""
        ring = Ring([2, 4, 6])
        assert ring.every(lambda node: node.data % 2 == 0)
        assert not ring.every(lambda node: node.data > 2)
