"""Graph model: nodes, edges, keys and the graph that holds them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Protocol


class KeyNotFoundError(LookupError):
    """Raised when a key cannot be found on a graph object."""


class GraphType(enum.Enum):
    """Direction of an edge."""

    DIRECTED = "directed"
    UNDIRECTED = "undirected"

    @classmethod
    def parse(cls, text: str) -> "GraphType":
        """Parse the value of a GraphML ``directed`` attribute."""
        if text == "true":
            return cls.DIRECTED
        if text == "false":
            return cls.UNDIRECTED
        raise ValueError(f"unknown graph type: {text}")


class KeyType(enum.Enum):
    """Data type of a key's value."""

    BOOLEAN = "boolean"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    STRING = "string"


@dataclass
class Key:
    """A named attribute with a value."""

    id: str
    attrname: str
    attrtype: KeyType
    value: str


@dataclass
class Node:
    """A vertex of a graph; ``no`` is its position in the graph's node list."""

    id: str
    keys: list[Key] = field(default_factory=list)
    no: int = 0

    def __hash__(self) -> int:
        return hash((self.id, self.no))


@dataclass
class Edge:
    """A weighted connection between two nodes."""

    id: str
    weight: int
    etype: GraphType
    source: Node
    dest: Node
    keys: list[Key] = field(default_factory=list)


@dataclass
class Graph:
    """A collection of nodes and the edges between them."""

    id: str
    nodes: list[Node] = field(default_factory=list)
    edges: list[Edge] = field(default_factory=list)
    keys: list[Key] = field(default_factory=list)

    def adjacency_matrix(self) -> list[list[bool]]:
        """Return an N x N matrix where ``m[a][b]`` is true if an edge runs from a to b."""
        size = self.node_len()
        matrix = [[False] * size for _ in range(size)]
        for edge in self.edges:
            matrix[edge.source.no][edge.dest.no] = True
        return matrix

    def node_len(self) -> int:
        return len(self.nodes)

    def edge_len(self) -> int:
        return len(self.edges)


class Keyed(Protocol):
    id: str
    keys: list[Key]


def add_key(obj: Keyed, key: Key) -> None:
    """Add ``key`` to ``obj``, or update the value of an existing key with the same id."""
    for existing in obj.keys:
        if existing.id == key.id:
            existing.value = key.value
            return
    obj.keys.append(key)


def delete_key(obj: Keyed, key_id: str) -> None:
    """Remove the key with ``key_id`` from ``obj``; do nothing if there is none."""
    obj.keys[:] = _without_first(obj.keys, key_id)


def _without_first(keys: list[Key], key_id: str) -> list[Key]:
    remaining = list(keys)
    for index, key in enumerate(remaining):
        if key.id == key_id:
            del remaining[index]
            break
    return remaining


def key_position(obj: Keyed, key_id: str) -> int:
    """Return the index of the key with ``key_id``."""
    for index, key in enumerate(obj.keys):
        if key.id == key_id:
            return index
    raise KeyNotFoundError("Key not found!")


def key_position_by_attrname(obj: Keyed, attrname: str) -> int:
    """Return the index of the first key with attribute name ``attrname``."""
    for index, key in enumerate(obj.keys):
        if key.attrname == attrname:
            return index
    raise KeyNotFoundError("Key not found!")