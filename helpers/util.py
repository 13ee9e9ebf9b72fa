import json
from collections.abc import Mapping
from typing import Any, Optional

from pydantic import BaseModel


def convert_to_serializable_dict(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return convert_to_serializable_dict(obj.model_dump())
    if isinstance(obj, dict):
        return {str(k): convert_to_serializable_dict(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple, set)):
        return [convert_to_serializable_dict(i) for i in obj]
    if isinstance(obj, type):
        return obj.__name__
    if callable(obj):
        return str(obj)
    try:
        json.dumps(obj)
        return obj
    except (TypeError, ValueError):
        return str(obj)


def node_name(node: Any) -> Optional[str]:
    if isinstance(node, Mapping):
        return node.get("name")
    return getattr(node, "name", None)


def node_label(node: Any, node_id: Any) -> str:
    name = node_name(node)
    if name:
        return f"{node_id} ({name})"
    return str(node_id)


def count_nodes(roots, get_children) -> int:
    total = 0
    stack = list(roots)
    while stack:
        node = stack.pop()
        total += 1
        stack.extend(get_children(node))
    return total
