"""
Circular ordered container.

A ``Ring`` stores its elements in a flat list and hands out lightweight
``RingNode`` views. A node's neighbours are computed from its index modulo
the ring length, so adjacency never needs to be stored or kept in sync.
"""

from typing import Any, Callable, Iterable, Iterator, List, Optional


class RingNode:
    """View of one position in a ``Ring``."""

    __slots__ = ("ring", "index")

    def __init__(self, ring: "Ring", index: int):
        self.ring = ring
        self.index = index

    @property
    def data(self) -> Any:
        return self.ring._items[self.index]

    @property
    def next(self) -> "RingNode":
        return RingNode(self.ring, (self.index + 1) % len(self.ring))

    @property
    def prev(self) -> "RingNode":
        return RingNode(self.ring, (self.index - 1) % len(self.ring))

    def __eq__(self, other):
        if not isinstance(other, RingNode):
            return NotImplemented
        return self.ring is other.ring and self.index == other.index

    def __hash__(self):
        return hash((id(self.ring), self.index))

    def __repr__(self):
        return f"RingNode({self.index}, {self.data!r})"


class Ring:
    """
    Circular sequence with wraparound indexing.

    Parameters
    ----------
    items : iterable, optional
        Initial elements in ring order.
    """

    def __init__(self, items: Iterable = ()):
        self._items: List[Any] = list(items)

    def append(self, item: Any) -> None:
        self._items.append(item)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator:
        return iter(self._items)

    def __repr__(self):
        return f"Ring({self._items!r})"

    @property
    def first(self) -> Optional[RingNode]:
        """The first node, or None for an empty ring."""
        if not self._items:
            return None
        return RingNode(self, 0)

    def node(self, i: int) -> RingNode:
        """Node at position ``i`` modulo the ring length."""
        if not self._items:
            raise IndexError("Ring is empty")
        return RingNode(self, i % len(self._items))

    def at(self, i: int) -> Any:
        """
        Element at position ``i`` modulo the ring length.

        Negative and over-length indices wrap around, so ``at(offset + i)``
        is valid for any integer offset.
        """
        return self.node(i).data

    def nodes(self) -> Iterator[RingNode]:
        for i in range(len(self._items)):
            yield RingNode(self, i)

    def find_node(self, value: Any, predicate: Callable[[Any, Any], bool]) -> Optional[RingNode]:
        """
        Return the first node whose data satisfies ``predicate(data, value)``.

        Returns None if no node matches.
        """
        for node in self.nodes():
            if predicate(node.data, value):
                return node
        return None

    def map(self, fn: Callable[[Any], Any]) -> list:
        """Return ``fn`` applied to every element, in ring order."""
        return [fn(item) for item in self._items]

    def filter(self, predicate: Callable[[Any], bool]) -> list:
        """Return the elements satisfying ``predicate``, in ring order."""
        return [item for item in self._items if predicate(item)]

    def for_each(self, fn: Callable[[RingNode, int], None]) -> None:
        """Call ``fn(node, index)`` once per node, starting at the first node."""
        for node in self.nodes():
            fn(node, node.index)

    def some(self, predicate: Callable[[RingNode], bool]) -> bool:
        """True iff ``predicate(node)`` holds for some node. Stops at the first match."""
        return any(predicate(node) for node in self.nodes())

    def every(self, predicate: Callable[[RingNode], bool]) -> bool:
        """True iff ``predicate(node)`` holds for every node."""
        return all(predicate(node) for node in self.nodes())
