from typing import Any, List

import click
from rich.console import Console

from config.pydantic_models import FinderOptions, TreeBundle, VisualizeOptions
from helpers import build_tree_view
from treepath.node import make_children_accessor, make_id_accessor

from .options import pool_options, trace_options, tree_options, visualize_options
from .search_runner import run_find_command


@click.command()
@tree_options
@pool_options
@trace_options
@visualize_options
def find(
    roots: List[Any],
    tree_name: str,
    tree_bundle: TreeBundle,
    pools: List[List[int]],
    finder_options: FinderOptions,
    visualize_options: VisualizeOptions,
    **kwargs,
):
    """Find the tree path consuming each id pool."""
    all_found = run_find_command(
        roots,
        tree_name,
        tree_bundle.description,
        pools,
        finder_options,
        visualize_options,
        "Path Search Configuration",
    )
    if not all_found:
        click.get_current_context().exit(1)


@click.command()
@tree_options
@click.option("--max_depth", default=None, type=int, help="Deepest level shown in the tree")
def show(
    roots: List[Any],
    tree_name: str,
    tree_bundle: TreeBundle,
    finder_options: FinderOptions,
    max_depth: int,
    **kwargs,
):
    """Print a tree."""
    console = Console()
    if tree_bundle.description:
        console.print(f"[dim]{tree_bundle.description}[/dim]")
    console.print(
        build_tree_view(
            roots,
            make_children_accessor(finder_options.children_key),
            make_id_accessor(finder_options.id_key),
            max_depth=max_depth,
            title=tree_name,
        )
    )
