"""Graphs of nodes with dynamic or fixed numbers of connections."""

from __future__ import annotations

import heapq
import itertools
from typing import Generic, Iterator, Optional, Sequence, TypeVar

from eternakit.graph_node import (
    GraphConnection,
    GraphError,
    GraphNode,
    GraphNodeDynamic,
    GraphNodeStatic,
)

T = TypeVar("T")

__all__ = ["Graph", "GraphDynamic", "GraphStatic", "GraphError"]


def _walk(
    start: GraphNode[T], leafs: Sequence[GraphNode[T]]
) -> Iterator[GraphNode[T]]:
    """Visit nodes from ``start``, always taking the lowest-index frontier node.

    When the frontier runs dry, the walk restarts at the next unseen leaf.
    """
    seen = {start}
    heap: list[tuple[int, int, GraphNode[T]]] = []
    counter = itertools.count()
    current: Optional[GraphNode[T]] = start
    while current is not None:
        yield current
        for c in current.connections:
            if c is None:
                continue
            n = c.partner(current.index)
            if n in seen:
                continue
            heapq.heappush(heap, (n.index, next(counter), n))
            seen.add(n)
        if heap:
            current = heapq.heappop(heap)[2]
        else:
            current = next((n for n in leafs if n not in seen), None)
            if current is not None:
                seen.add(current)


class Graph(Generic[T]):
    """Nodes and connections, with an index counter and a nesting level."""

    def __init__(self) -> None:
        self._nodes: list[GraphNode[T]] = []
        self._connections: list[GraphConnection[T]] = []
        self._last_node: Optional[GraphNode[T]] = None
        self.index = 0
        self._level = 0

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[GraphNode[T]]:
        """Walk the graph, starting from the first node with fewer than two connections."""
        if not self._nodes:
            return iter(())
        leafs = [
            n for n in self._nodes
            if sum(c is not None for c in n.connections) < 2
        ]
        start = leafs[0] if leafs else self._nodes[0]
        return _walk(start, leafs)

    def transverse(self, node: Optional[GraphNode[T]]) -> Iterator[GraphNode[T]]:
        """Walk the part of the graph reachable from ``node``."""
        if node is None:
            return iter(())
        return _walk(node, [])

    @property
    def nodes(self) -> tuple[GraphNode[T], ...]:
        return tuple(self._nodes)

    @property
    def connections(self) -> tuple[GraphConnection[T], ...]:
        return tuple(self._connections)

    @property
    def last_node(self) -> Optional[GraphNode[T]]:
        return self._last_node

    @property
    def level(self) -> int:
        return self._level

    def get_node(self, index: int) -> GraphNode[T]:
        for n in self._nodes:
            if n.index == index:
                return n
        raise GraphError(f"cannot find node with index: {index}")

    def oldest_node(self) -> GraphNode[T]:
        """The node with the smallest index."""
        if self._last_node is None:
            raise GraphError("attempted to call oldest_node but there are no nodes")
        return min(self._nodes, key=lambda n: n.index, default=self._last_node)

    def increase_level(self) -> None:
        self._level += 1

    def decrease_level(self) -> None:
        if self._level - 1 < 0:
            raise GraphError("level has to be positive")
        self._level -= 1


class GraphDynamic(Graph[T]):
    """A graph whose nodes accept any number of connections."""

    def add_data(self, data: T, parent_index: int = -1, orphan: bool = False) -> int:
        """Add a node holding ``data``, joined to its parent unless ``orphan``.

        The parent is the last node added unless ``parent_index`` is given.
        Returns the new node's index.
        """
        parent = self._last_node
        if parent_index != -1:
            parent = self.get_node(parent_index)

        n = GraphNodeDynamic(data, self.index, self._level)
        if parent is not None and not orphan:
            c = GraphConnection(parent, n, 0, 0)
            parent.add_connection(c)
            n.add_connection(c)
            self._connections.append(c)

        self._nodes.append(n)
        self.index += 1
        self._last_node = n
        return self.index - 1

    def connect(self, i: int, j: int) -> None:
        n1 = self.get_node(i)
        n2 = self.get_node(j)
        c = GraphConnection(n1, n2, 0, 0)
        n1.add_connection(c)
        if n1 is not n2:
            n2.add_connection(c)
        self._connections.append(c)


class GraphStatic(Graph[T]):
    """A graph whose nodes have a fixed number of connection positions."""

    def copy(self) -> "GraphStatic[T]":
        """A new graph with fresh nodes and connections; node data is shared."""
        new: GraphStatic[T] = GraphStatic()
        new._nodes = [
            GraphNodeStatic(n.data, n.index, n.level, len(n.connections))
            for n in self._nodes
        ]
        for c in self._connections:
            i = c.node_1.index
            j = c.node_2.index
            new.connect(i, j, c.end_index(i), c.end_index(j))
        if self._last_node is not None:
            new._last_node = new.get_node(self._last_node.index)
        new._level = self._level
        new.index = self.index
        return new

    __copy__ = copy

    def add_data(
        self,
        data: T,
        parent_index: int = -1,
        parent_pos: int = -1,
        child_pos: int = -1,
        n_children: int = 0,
        orphan: bool = False,
        index: int = -1,
    ) -> int:
        """Add a node with ``n_children`` positions holding ``data``.

        Unless ``orphan``, it is joined to its parent (the last node added, or
        ``parent_index``) at the given positions, or the first free ones.
        Returns the node's index.
        """
        given_index = index if index != -1 else self.index

        parent = self._last_node
        n = GraphNodeStatic(data, given_index, self._level, n_children)

        if parent_index != -1:
            parent = self.get_node(parent_index)
        if orphan:
            parent = None
        if parent is not None:
            parent_pos = self.check_pos_is_valid(parent, parent_pos)
            child_pos = self.check_pos_is_valid(n, child_pos)
            c = GraphConnection(parent, n, parent_pos, child_pos)
            parent.add_connection(c, parent_pos)
            n.add_connection(c, child_pos)
            self._connections.append(c)

        self._nodes.append(n)
        self.index += 1
        self._last_node = n
        return given_index

    def connect(self, i: int, j: int, i_pos: int, j_pos: int) -> None:
        n1 = self.get_node(i)
        n2 = self.get_node(j)
        i_pos = self.check_pos_is_valid(n1, i_pos)
        j_pos = self.check_pos_is_valid(n2, j_pos)
        c = GraphConnection(n1, n2, i_pos, j_pos)
        n1.add_connection(c, i_pos)
        n2.add_connection(c, j_pos)
        self._connections.append(c)

    def check_pos_is_valid(self, node: GraphNode[T], pos: int) -> int:
        """Return ``pos`` if free, or the first free position when ``pos`` is -1."""
        if pos == -1:
            available = node.available_children_pos()
            if not available:
                raise GraphError(
                    "cannot add connection to node, has not available ends"
                )
            return available[0]
        if not node.available_pos(pos):
            raise GraphError("graph pos is not available")
        return pos

    def get_available_pos(self, node: GraphNode[T], pos: int) -> list[int]:
        """All free positions when ``pos`` is -1, otherwise ``[pos]`` if it is free."""
        if pos == -1:
            return node.available_children_pos()
        if not node.available_pos(pos):
            raise GraphError(f"graph pos is not available {pos}")
        return [pos]

    def remove_node(self, index: int) -> None:
        """Remove the node with ``index`` and all of its connections."""
        n = self.get_node(index)
        for c in n.connections:
            if c is None or not c.is_connected:
                continue
            partner = c.partner(n.index)
            n.remove_connection(c)
            partner.remove_connection(c)
            self._connections.remove(c)
            c.disconnect()

        self._nodes = [node for node in self._nodes if node is not n]
        self._last_node = self._nodes[-1] if self._nodes else None

    def remove_level(self, level: int) -> None:
        """Remove every node at ``level`` or deeper."""
        for n in [node for node in self._nodes if node.level >= level]:
            self.remove_node(n.index)