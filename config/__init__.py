from .pydantic_models import (
    CategoryNode,
    FinderOptions,
    PoolOptions,
    TreeBundle,
    VisualizeOptions,
)
from .tree_loader import TreeLoadError, load_tree, parse_tree
from .tree_registry import tree_bundles

__all__ = [
    "tree_bundles",
    "CategoryNode",
    "FinderOptions",
    "PoolOptions",
    "TreeBundle",
    "VisualizeOptions",
    "TreeLoadError",
    "load_tree",
    "parse_tree",
]
