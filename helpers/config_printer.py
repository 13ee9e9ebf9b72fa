from rich.columns import Columns
from rich.console import Console
from rich.panel import Panel
from rich.pretty import Pretty
from rich.table import Table
from rich.text import Text
from rich.tree import Tree

from helpers.util import convert_to_serializable_dict

TRUNCATE_LENGTH = 80
TRUNCATE_SEQ_LENGTH = 10


def _is_single_level(config: dict) -> bool:
    """
    Checks if the config dictionary has only one level of hierarchy.
    """
    if not isinstance(config, dict):
        return True
    return not any(isinstance(v, dict) for v in config.values())


def _truncate(value):
    if isinstance(value, str):
        if len(value) > TRUNCATE_LENGTH:
            return value[:TRUNCATE_LENGTH] + " ..."
        return value
    if isinstance(value, list) and len(value) > TRUNCATE_SEQ_LENGTH:
        half = TRUNCATE_SEQ_LENGTH // 2
        front = ", ".join(str(x) for x in value[:half])
        back = ", ".join(str(x) for x in value[-half:])
        return f"[{front} ... {back}]"
    return value


def _add_node(parent: Tree, key: str, value):
    if isinstance(value, dict):
        branch = parent.add(f"[bold magenta]{key}[/bold magenta]")
        for k, v in value.items():
            _add_node(branch, k, v)
        return

    display_value = _truncate(value)
    item_grid = Table.grid(padding=(0, 1))
    item_grid.add_column(no_wrap=True)
    item_grid.add_column()
    if isinstance(display_value, str):
        value_renderable = Text(display_value)
    else:
        value_renderable = Pretty(display_value)
    item_grid.add_row(Text(f"{key}:", style="bold magenta"), value_renderable)
    parent.add(item_grid)


def print_config(title: str, config: dict):
    """
    Prints a configuration as a tree wrapped in a panel.
    Nested configurations are split over two columns.
    """
    config = convert_to_serializable_dict(config)
    console = Console()

    if not config:
        layout = Text("Configuration is empty.", justify="center")
    elif len(config) <= 2 or _is_single_level(config):
        layout = Tree("", guide_style="bright_blue")
        for key, value in config.items():
            _add_node(layout, key, value)
    else:
        items = list(config.items())
        midpoint = (len(items) + 1) // 2
        left_tree = Tree("", guide_style="bright_blue")
        right_tree = Tree("", guide_style="bright_blue")
        for key, value in items[:midpoint]:
            _add_node(left_tree, key, value)
        for key, value in items[midpoint:]:
            _add_node(right_tree, key, value)
        layout = Columns([left_tree, right_tree], equal=True, expand=True)

    panel = Panel(
        layout, title=f"[bold green]{title}[/bold green]", border_style="dim", expand=False
    )
    console.print(panel)
