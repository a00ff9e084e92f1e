"""Graph nodes and the connections that join them."""

from __future__ import annotations

import abc
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class GraphError(RuntimeError):
    """Raised when a graph, node or connection is used inconsistently."""


class GraphConnection(Generic[T]):
    """An edge between two nodes, remembering which end of each node it uses."""

    __slots__ = ("node_1", "node_2", "end_index_1", "end_index_2")

    def __init__(
        self,
        node_1: "GraphNode[T]",
        node_2: "GraphNode[T]",
        end_index_1: int,
        end_index_2: int,
    ) -> None:
        self.node_1: Optional[GraphNode[T]] = node_1
        self.node_2: Optional[GraphNode[T]] = node_2
        self.end_index_1 = end_index_1
        self.end_index_2 = end_index_2

    def __repr__(self) -> str:
        ids = [None if n is None else n.index for n in (self.node_1, self.node_2)]
        return f"GraphConnection({ids[0]}, {ids[1]}, {self.end_index_1}, {self.end_index_2})"

    @property
    def is_connected(self) -> bool:
        return self.node_1 is not None and self.node_2 is not None

    def disconnect(self) -> None:
        """Drop both node references."""
        self.node_1 = None
        self.node_2 = None

    def _nodes(self) -> tuple["GraphNode[T]", "GraphNode[T]"]:
        if self.node_1 is None or self.node_2 is None:
            raise GraphError("connection has been disconnected")
        return self.node_1, self.node_2

    def partner(self, index: int) -> "GraphNode[T]":
        """The node at the other end from the node with ``index``."""
        node_1, node_2 = self._nodes()
        if index == node_1.index:
            return node_2
        if index == node_2.index:
            return node_1
        raise GraphError("cannot call partner with node not in connection")

    def end_index(self, node_index: int) -> int:
        """The end of the node with ``node_index`` that this connection uses."""
        node_1, node_2 = self._nodes()
        if node_index == node_1.index:
            return self.end_index_1
        if node_index == node_2.index:
            return self.end_index_2
        raise GraphError("cannot call end_index with node not in connection")


class GraphNode(abc.ABC, Generic[T]):
    """A node holding data, an index, a level and a list of connection slots."""

    def __init__(self, data: T, index: int, level: int, n_connections: int = 0) -> None:
        self.data = data
        self.index = index
        self.level = level
        self._connections: list[Optional[GraphConnection[T]]] = [None] * n_connections

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r}, index={self.index}, level={self.level})"

    @property
    def connections(self) -> tuple[Optional[GraphConnection[T]], ...]:
        """The connection slots; an empty slot is ``None``."""
        return tuple(self._connections)

    @abc.abstractmethod
    def add_connection(self, connection: GraphConnection[T], pos: int = -1) -> None:
        """Attach ``connection`` to this node."""

    @abc.abstractmethod
    def remove_connection(self, connection: GraphConnection[T]) -> None:
        """Detach ``connection`` from this node."""

    def available_children_pos(self) -> list[int]:
        """Positions of the empty connection slots."""
        return [i for i, c in enumerate(self._connections) if c is None]

    def available_pos(self, pos: int) -> bool:
        """True if ``pos`` is an existing, empty slot."""
        if pos < 0 or pos >= len(self._connections):
            return False
        return self._connections[pos] is None

    def _active(self):
        return (c for c in self._connections if c is not None)

    def parent(self) -> Optional["GraphNode[T]"]:
        """The first connected node with a smaller index, if any."""
        for c in self._active():
            partner = c.partner(self.index)
            if partner.index < self.index:
                return partner
        return None

    def parent_index(self) -> int:
        parent = self.parent()
        return -1 if parent is None else parent.index

    def parent_end_index(self) -> int:
        """The end of the parent that connects to this node, or -1."""
        parent = self.parent()
        if parent is None:
            return -1
        for c in self._active():
            if c.partner(self.index).index == parent.index:
                return c.end_index(parent.index)
        return -1

    def unset_connections(self) -> None:
        """Disconnect every connection and empty its slot."""
        for i, c in enumerate(self._connections):
            if c is None:
                continue
            c.disconnect()
            self._connections[i] = None

    def connected(self, node: "GraphNode[T]") -> Optional[GraphConnection[T]]:
        """The connection joining this node to ``node``, if there is one."""
        for c in self._active():
            if c.partner(self.index) is node:
                return c
        return None


class GraphNodeDynamic(GraphNode[T]):
    """A node whose connection list grows as connections are added."""

    def __init__(self, data: T, index: int, level: int) -> None:
        super().__init__(data, index, level, 0)

    def add_connection(self, connection: GraphConnection[T], pos: int = -1) -> None:
        self._connections.append(connection)

    def remove_connection(self, connection: GraphConnection[T]) -> None:
        if not any(c is connection for c in self._connections):
            raise GraphError("tried to remove connection but is not present in node")
        self._connections = [c for c in self._connections if c is not connection]


class GraphNodeStatic(GraphNode[T]):
    """A node with a fixed number of connection slots."""

    def __init__(self, data: T, index: int, level: int, n_children: int) -> None:
        super().__init__(data, index, level, n_children)

    def add_connection(self, connection: GraphConnection[T], pos: int = -1) -> None:
        if pos == -1:
            raise GraphError(
                "attempted to resize children array in NodeTypeStatic GraphNode"
            )
        if pos < 0 or pos >= len(self._connections):
            raise GraphError("cannot add child at position")
        if self._connections[pos] is not None:
            raise GraphError("attempted to add child in a position that is already full")
        self._connections[pos] = connection

    def remove_connection(self, connection: GraphConnection[T]) -> None:
        for i, c in enumerate(self._connections):
            if c is connection:
                self._connections[i] = None
                return
        raise GraphError("tried to remove connection but is not present in node")