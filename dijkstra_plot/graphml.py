"""Reading keys and nodes from GraphML documents."""

from __future__ import annotations

import enum
import xml.etree.ElementTree as ET
from dataclasses import dataclass, field, replace
from os import PathLike

from dijkstra_plot.graph import GraphType, Key, KeyType, Node

ROOT_NAME = "graphml"
NODE_NAME = "node"
EDGE_NAME = "edge"
DATA_NAME = "data"
KEY_NAME = "key"
DEFAULT_NAME = "default"

MISSING_DEFAULT = "ERR"
"""Value given to a key that declares no default."""

_KEY_TYPES = {
    "boolean": KeyType.BOOLEAN,
    "int": KeyType.INT,
    "long": KeyType.LONG,
    "Float": KeyType.FLOAT,
    "Double": KeyType.DOUBLE,
}


class KeyFor(enum.Enum):
    """Kind of graph object a key applies to."""

    GRAPH = "graph"
    NODE = "node"
    EDGE = "edge"
    ALL = "all"

    @classmethod
    def parse(cls, text: str) -> "KeyFor":
        """Map a ``for`` attribute to a member; unknown values mean ``ALL``."""
        try:
            return cls(text)
        except ValueError:
            return cls.ALL


@dataclass
class GraphMLDocument:
    """Keys and nodes read from a GraphML document."""

    edgedefault: GraphType = GraphType.UNDIRECTED
    keys: list[tuple[Key, KeyFor]] = field(default_factory=list)
    nodes: list[Node] = field(default_factory=list)


def _local_name(tag: str) -> str:
    return tag.rsplit("}", 1)[-1] if tag.startswith("{") else tag


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _direct_text(element: ET.Element) -> str:
    return (element.text or "") + "".join(child.tail or "" for child in element)


def _read_key(element: ET.Element) -> tuple[Key, KeyFor]:
    attrtype = _KEY_TYPES.get(element.get("attr.type", "string"), KeyType.STRING)
    defaults = _children(element, DEFAULT_NAME)
    value = _direct_text(defaults[0]) if defaults else MISSING_DEFAULT
    key = Key(
        id=element.get("id", ""),
        attrname=element.get("attr.name", ""),
        attrtype=attrtype,
        value=value,
    )
    return key, KeyFor.parse(element.get("for", "all"))


def _read_node(
    element: ET.Element, no: int, keys: list[tuple[Key, KeyFor]]
) -> Node:
    datas = [
        (data.get("key", ""), _direct_text(data))
        for data in _children(element, DATA_NAME)
        if data.get("key", "")
    ]
    node_keys = []
    for key, applies_to in keys:
        if applies_to not in (KeyFor.ALL, KeyFor.NODE):
            continue
        value = next((v for key_id, v in datas if key_id == key.id), key.value)
        node_keys.append(replace(key, value=value))
    return Node(id=element.get("id", ""), keys=node_keys, no=no)


def parse_graphml(text: str) -> GraphMLDocument:
    """Parse GraphML text into its keys and nodes.

    Raises ``ValueError`` if the text is not well-formed XML. A document
    whose root is not ``graphml`` yields an empty result.
    """
    try:
        root = ET.fromstring(text)
    except ET.ParseError as exc:
        raise ValueError(f"invalid XML: {exc}") from exc

    document = GraphMLDocument()
    if _local_name(root.tag).lower() != ROOT_NAME:
        return document

    if root.get("edgedefault", "undirected") == "directed":
        document.edgedefault = GraphType.DIRECTED

    document.keys = [_read_key(element) for element in _children(root, KEY_NAME)]
    document.nodes = [
        _read_node(element, no, document.keys)
        for no, element in enumerate(_children(root, NODE_NAME))
    ]
    return document


def read_graphml(path: str | PathLike[str]) -> GraphMLDocument:
    """Read and parse a GraphML file; an unreadable file parses as empty text."""
    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except OSError:
        text = ""
    return parse_graphml(text)