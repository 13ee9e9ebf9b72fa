"""
Node access and the PathMatch chain returned by the finder.

Nodes are never wrapped or copied: the finder reads them through two small
accessors, one for the id and one for the children, so attribute-style
objects, pydantic models and plain JSON dicts can all be searched as-is.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Optional, Sequence, Union

from treepath.annotate import DEFAULT_CHILDREN_KEY, DEFAULT_ID_KEY

ChildrenAccessor = Callable[[Any], Sequence[Any]]
IdAccessor = Callable[[Any], int]
AccessorSpec = Union[str, Callable[[Any], Any]]


def _read_field(node: Any, field: str, default: Any = None, required: bool = False) -> Any:
    if isinstance(node, Mapping):
        if field in node:
            return node[field]
    elif hasattr(node, field):
        return getattr(node, field)
    if required:
        raise KeyError(f"Node {node!r} has no field '{field}'")
    return default


def make_children_accessor(children: AccessorSpec = DEFAULT_CHILDREN_KEY) -> ChildrenAccessor:
    """
    Builds a function returning the ordered children of a node.

    Args:
        children: Either the name of the field holding the child sequence
            (a mapping key for dict nodes, an attribute otherwise) or a
            callable taking a node and returning its children.

    A node without the field, or with a ``None`` value, is treated as a leaf.
    """
    if callable(children):
        return lambda node: children(node) or ()
    if not isinstance(children, str):
        raise TypeError(f"children accessor must be a field name or a callable, got {children!r}")

    def accessor(node):
        return _read_field(node, children) or ()

    return accessor


def make_id_accessor(node_id: AccessorSpec = DEFAULT_ID_KEY) -> IdAccessor:
    """Builds a function returning the id of a node, see ``make_children_accessor``."""
    if callable(node_id):
        return node_id
    if not isinstance(node_id, str):
        raise TypeError(f"id accessor must be a field name or a callable, got {node_id!r}")

    def accessor(node):
        return _read_field(node, node_id, required=True)

    return accessor


@dataclass(frozen=True)
class PathMatch:
    """
    One link of a matched root-to-leaf chain.

    ``child`` is the match for the next (deeper) level; ``None`` marks the leaf.
    Nodes are borrowed references into the caller's tree.
    """

    node: Any
    child: Optional["PathMatch"] = None

    def __iter__(self) -> Iterator[Any]:
        current = self
        while current is not None:
            yield current.node
            current = current.child

    def __len__(self) -> int:
        return sum(1 for _ in self)

    @property
    def leaf(self) -> Any:
        current = self
        while current.child is not None:
            current = current.child
        return current.node

    def nodes(self) -> List[Any]:
        return list(self)

    def ids(self, node_id: AccessorSpec = DEFAULT_ID_KEY) -> List[int]:
        get_id = make_id_accessor(node_id)
        return [get_id(node) for node in self]
