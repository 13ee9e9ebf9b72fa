from typing import Any, Iterable, List, Optional

from treepath.annotate import DEFAULT_CHILDREN_KEY, DEFAULT_ID_KEY
from treepath.finder import normalize_pool
from treepath.node import AccessorSpec, PathMatch, make_children_accessor, make_id_accessor


def _contains(nodes: Iterable[Any], node: Any) -> bool:
    return any(candidate is node for candidate in nodes)


def verify_path_match(
    match: PathMatch,
    id_pool: Iterable[int],
    root_nodes: Optional[Iterable[Any]] = None,
    children: AccessorSpec = DEFAULT_CHILDREN_KEY,
    node_id: AccessorSpec = DEFAULT_ID_KEY,
) -> List[str]:
    """
    Checks a match against the pool and tree it was found in.

    Returns a list of problems; an empty list means the chain consumes every
    pool id exactly once and each node is a child of the one before it (the
    first being a root, when ``root_nodes`` is given).
    """
    get_id = make_id_accessor(node_id)
    get_children = make_children_accessor(children)
    pool = normalize_pool(id_pool)
    nodes = match.nodes()
    ids = [get_id(node) for node in nodes]
    problems = []

    if len(nodes) != len(pool):
        problems.append(f"chain length {len(nodes)} does not match pool size {len(pool)}")

    seen = set()
    for path_id in ids:
        if path_id in seen:
            problems.append(f"id {path_id} appears more than once in the chain")
        seen.add(path_id)

    missing = [pool_id for pool_id in pool if pool_id not in seen]
    extra = [path_id for path_id in dict.fromkeys(ids) if path_id not in set(pool)]
    if missing:
        problems.append(f"pool ids missing from the chain: {missing}")
    if extra:
        problems.append(f"chain ids not in the pool: {extra}")

    if root_nodes is not None and not _contains(root_nodes, nodes[0]):
        problems.append(f"first node {ids[0]} is not a root node")

    for parent, child, child_id in zip(nodes, nodes[1:], ids[1:]):
        if not _contains(get_children(parent), child):
            problems.append(f"node {child_id} is not a child of node {get_id(parent)}")

    return problems


def is_valid_path_match(
    match: Optional[PathMatch],
    id_pool: Iterable[int],
    root_nodes: Optional[Iterable[Any]] = None,
    children: AccessorSpec = DEFAULT_CHILDREN_KEY,
    node_id: AccessorSpec = DEFAULT_ID_KEY,
) -> bool:
    if match is None:
        return False
    return not verify_path_match(match, id_pool, root_nodes, children, node_id)
