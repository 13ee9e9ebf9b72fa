"""Loading category trees from JSON files."""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Union

from treepath.annotate import DEFAULT_CHILDREN_KEY, DEFAULT_ID_KEY

logger = logging.getLogger(__name__)


class TreeLoadError(ValueError):
    pass


def _check_node(node: Any, children_key: str, id_key: str, location: str):
    if not isinstance(node, dict):
        raise TreeLoadError(f"{location}: expected an object, got {type(node).__name__}")
    node_id = node.get(id_key)
    if isinstance(node_id, bool) or not isinstance(node_id, int):
        raise TreeLoadError(f"{location}: '{id_key}' must be an integer, got {node_id!r}")
    sub_nodes = node.get(children_key, [])
    if sub_nodes is None:
        return
    if not isinstance(sub_nodes, list):
        raise TreeLoadError(f"{location}: '{children_key}' must be a list")
    for i, child in enumerate(sub_nodes):
        _check_node(child, children_key, id_key, f"{location}.{children_key}[{i}]")


def parse_tree(
    data: Any, children_key: str = DEFAULT_CHILDREN_KEY, id_key: str = DEFAULT_ID_KEY
) -> List[Dict[str, Any]]:
    """
    Extracts the root node list from decoded JSON.

    Accepts a bare list of root nodes, a single root node object, or an
    object holding the roots under ``roots`` or under the children key.
    """
    if isinstance(data, dict):
        if "roots" in data:
            data = data["roots"]
        elif id_key in data:
            data = [data]
        elif children_key in data:
            data = data[children_key]
        else:
            raise TreeLoadError("Expected a list of root nodes or an object with a 'roots' list")
    if not isinstance(data, list):
        raise TreeLoadError(f"Root nodes must be a list, got {type(data).__name__}")
    for i, root in enumerate(data):
        _check_node(root, children_key, id_key, f"roots[{i}]")
    return data


def load_tree(
    path: Union[str, Path],
    children_key: str = DEFAULT_CHILDREN_KEY,
    id_key: str = DEFAULT_ID_KEY,
) -> List[Dict[str, Any]]:
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        raise TreeLoadError(f"Tree file not found: {path}")
    except json.JSONDecodeError as e:
        raise TreeLoadError(f"Tree file {path} is not valid JSON: {e}")
    except UnicodeDecodeError as e:
        raise TreeLoadError(f"Tree file {path} is not UTF-8 text: {e}")
    except RecursionError:
        raise TreeLoadError(f"Tree file {path} is nested too deeply")
    except OSError as e:
        raise TreeLoadError(f"Tree file {path} could not be read: {e}")

    try:
        roots = parse_tree(data, children_key, id_key)
    except RecursionError:
        raise TreeLoadError(f"Tree file {path} is nested too deeply")
    logger.debug("Loaded %d root nodes from %s", len(roots), path)
    return roots
