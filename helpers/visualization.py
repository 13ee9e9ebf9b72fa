from typing import Any, Callable, List, Optional, Sequence

from rich.panel import Panel
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from helpers.formatting import human_format, human_time, path_format, pool_format
from helpers.util import node_label


def build_setup_panel(
    tree_name: str,
    description: str,
    root_count: int,
    node_count: int,
    pool: Sequence[int],
) -> Panel:
    grid = Table.grid(padding=(0, 2))
    grid.add_column(style="cyan", no_wrap=True)
    grid.add_column()
    grid.add_row("Tree", Text(tree_name, style="bold"))
    if description:
        grid.add_row("Description", description)
    grid.add_row("Roots", human_format(root_count))
    grid.add_row("Nodes", human_format(node_count))
    grid.add_row("Id Pool", pool_format(pool))
    return Panel(grid, title="[bold blue]Search Setup[/bold blue]", expand=False)


def build_result_table(
    solved: bool,
    path_labels: List[str],
    search_time: float,
    candidates_tried: int,
    problems: Optional[List[str]] = None,
    pool_index: Optional[int] = None,
) -> Table:
    title = "[bold]Search Result[/bold]"
    if pool_index is not None:
        title = f"[bold]Search Result for Pool {pool_index}[/bold]"

    result_table = Table(title=title)
    result_table.add_column("Metric", style="cyan")
    result_table.add_column("Value", justify="right")
    if solved:
        result_table.add_row("Status", "[bold green]Path Found[/bold green]")
        result_table.add_row("Path", path_format(path_labels))
        result_table.add_row("Length", str(len(path_labels)))
        if problems:
            result_table.add_row("Verified", f"[bold red]No[/bold red] ({'; '.join(problems)})")
        else:
            result_table.add_row("Verified", "[green]Yes[/green]")
    else:
        result_table.add_row("Status", "[bold red]No Path Found[/bold red]")

    result_table.add_row("Candidates Tried", human_format(candidates_tried))
    result_table.add_row("Search Time", human_time(search_time))
    return result_table


def build_path_panel(path_labels: List[str]) -> Panel:
    """Shows the matched chain as an indented root-to-leaf listing."""
    tree = None
    branch = None
    for depth, label in enumerate(path_labels):
        style = "bold green" if depth == len(path_labels) - 1 else "bold"
        if tree is None:
            tree = Tree(Text(label, style=style), guide_style="green")
            branch = tree
        else:
            branch = branch.add(Text(label, style=style))
    if tree is None:
        tree = Text("Empty path", style="dim")
    return Panel(
        tree, title="[bold green]Matched Path[/bold green]", border_style="green", expand=False
    )


def build_summary_table(
    tree_name: str,
    pools: List[List[int]],
    total_solved: List[bool],
    total_search_times: List[float],
    total_candidates: List[int],
) -> Table:
    summary_table = Table(title=f"[bold]Summary for {tree_name} ({len(pools)} pools)[/bold]")
    summary_table.add_column("Pool", justify="left", style="cyan")
    summary_table.add_column("Found", justify="center")
    summary_table.add_column("Candidates", justify="right")
    summary_table.add_column("Search Time", justify="right")

    for i, pool in enumerate(pools):
        summary_table.add_row(
            pool_format(pool),
            "[green]Yes[/green]" if total_solved[i] else "[red]No[/red]",
            human_format(total_candidates[i]),
            human_time(total_search_times[i]),
        )

    summary_table.add_section()

    count = max(len(pools), 1)
    found_rate = sum(1 for s in total_solved if s) / count * 100
    avg_candidates = sum(total_candidates) / count
    avg_time = sum(total_search_times) / count
    summary_table.add_row(
        "[bold]Average[/bold]",
        f"{found_rate:.1f}%",
        human_format(avg_candidates),
        human_time(avg_time),
    )
    return summary_table


def build_tree_view(
    roots: Sequence[Any],
    get_children: Callable[[Any], Sequence[Any]],
    get_id: Callable[[Any], int],
    highlight: Optional[Sequence[Any]] = None,
    max_depth: Optional[int] = None,
    title: str = "Tree",
) -> Tree:
    """
    Renders the whole forest; nodes in ``highlight`` (matched by identity) are
    drawn in bold green.
    """
    highlighted = {id(node) for node in (highlight or ())}
    view = Tree(f"[bold]{title}[/bold]", guide_style="bright_blue")

    def add(parent: Tree, node: Any, depth: int):
        label = node_label(node, get_id(node))
        if id(node) in highlighted:
            branch = parent.add(Text(label, style="bold green"))
        else:
            branch = parent.add(Text(label))
        sub_nodes = get_children(node)
        if max_depth is not None and depth >= max_depth:
            if sub_nodes:
                branch.add(Text(f"... {len(sub_nodes)} more", style="dim"))
            return
        for child in sub_nodes:
            add(branch, child, depth + 1)

    for root in roots:
        add(view, root, 0)
    return view
