"""
Backtracking search for the tree path that consumes an unordered id pool.
"""

from collections import deque
from numbers import Integral
from typing import Any, Iterable, List, Optional, Sequence

from treepath.annotate import DEFAULT_CHILDREN_KEY, DEFAULT_ID_KEY
from treepath.node import (
    AccessorSpec,
    ChildrenAccessor,
    IdAccessor,
    PathMatch,
    make_children_accessor,
    make_id_accessor,
)
from treepath.trace import (
    NO_MATCHING_CHILDREN,
    NO_TRAVERSABLE_CHILDREN,
    BaseTracer,
    NoOpTracer,
)


def find_path(
    id_pool: Iterable[int],
    root_nodes: Iterable[Any],
    children: AccessorSpec = DEFAULT_CHILDREN_KEY,
    node_id: AccessorSpec = DEFAULT_ID_KEY,
    tracer: Optional[BaseTracer] = None,
) -> Optional[PathMatch]:
    """
    Finds the first root-to-descendant chain whose node ids are exactly ``id_pool``.

    Args:
        id_pool: Ids to connect, in any order. Duplicates are collapsed; the
            order of first occurrence decides which chain is returned when
            several are valid.
        root_nodes: Nodes of the root level to start from.
        children: Field name or callable giving a node's ordered children.
        node_id: Field name or callable giving a node's integer id.
        tracer: Optional observer notified of every step of the search.

    Returns:
        The matched chain, root first, or None when no chain consumes the
        whole pool. An empty pool never matches.

    Raises:
        ValueError: If ``id_pool`` or ``root_nodes`` is None.
        TypeError: If the pool holds anything other than integers.
    """
    if id_pool is None:
        raise ValueError("id_pool must not be None")
    if root_nodes is None:
        raise ValueError("root_nodes must not be None")

    pool = normalize_pool(id_pool)
    return _find_level(
        pool,
        list(root_nodes),
        make_children_accessor(children),
        make_id_accessor(node_id),
        tracer or NoOpTracer(),
        0,
    )


def normalize_pool(id_pool: Iterable[int]) -> List[int]:
    """Validates pool entries and drops repeated ids, keeping first-occurrence order."""
    pool = []
    for value in id_pool:
        if isinstance(value, bool) or not isinstance(value, Integral):
            raise TypeError(f"Pool ids must be integers, got {value!r}")
        pool.append(int(value))
    return list(dict.fromkeys(pool))


def _resolve(candidate_id: int, level_nodes: Sequence[Any], get_id: IdAccessor) -> Optional[Any]:
    for node in level_nodes:
        if get_id(node) == candidate_id:
            return node
    return None


def _find_level(
    pool: List[int],
    level_nodes: Sequence[Any],
    get_children: ChildrenAccessor,
    get_id: IdAccessor,
    tracer: BaseTracer,
    depth: int,
) -> Optional[PathMatch]:
    # candidates follow pool order, not level order
    level_ids = {get_id(node) for node in level_nodes}
    candidates = [candidate_id for candidate_id in pool if candidate_id in level_ids]
    tracer.level(depth, pool, candidates)

    queue = deque(candidates)
    while queue:
        candidate_id = queue.popleft()
        node = _resolve(candidate_id, level_nodes, get_id)
        remaining = [pool_id for pool_id in pool if pool_id != candidate_id]
        tracer.candidate(depth, candidate_id, remaining)

        if node is None:
            # The pool no longer agrees with the level; the whole level fails
            # rather than moving on to the next candidate.
            tracer.unresolved(depth, candidate_id)
            return None

        if not remaining:
            tracer.success(depth, candidate_id)
            return PathMatch(node)

        remaining_ids = set(remaining)
        sub_nodes = [child for child in get_children(node) if get_id(child) in remaining_ids]
        if not sub_nodes:
            tracer.dead_end(depth, candidate_id, NO_MATCHING_CHILDREN)
            continue

        child_match = _find_level(remaining, sub_nodes, get_children, get_id, tracer, depth + 1)
        if child_match is None:
            tracer.dead_end(depth, candidate_id, NO_TRAVERSABLE_CHILDREN)
            continue

        tracer.success(depth, candidate_id)
        return PathMatch(node, child_match)

    return None
