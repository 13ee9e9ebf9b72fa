import logging
import time
from typing import Any, List, Sequence

from rich.console import Console
from rich.logging import RichHandler

from config.pydantic_models import FinderOptions, VisualizeOptions
from helpers import (
    build_path_panel,
    build_result_table,
    build_setup_panel,
    build_summary_table,
    build_tree_view,
    count_nodes,
    node_label,
    print_config,
)
from treepath import RecordingTracer, create_tracer, find_path, verify_path_match
from treepath.annotate import TRACE_LOGGER_NAME
from treepath.node import make_children_accessor, make_id_accessor


def _setup_trace_logging(console: Console) -> logging.Logger:
    logger = logging.getLogger(TRACE_LOGGER_NAME)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=console, show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
        logger.propagate = False
    logger.setLevel(logging.DEBUG)
    return logger


def _build_tracer(finder_options: FinderOptions, console: Console) -> RecordingTracer:
    kind = finder_options.tracer
    if kind == "logging":
        _setup_trace_logging(console)
        return RecordingTracer(forward=create_tracer("logging"))
    if kind == "rich":
        return RecordingTracer(forward=create_tracer("rich", console=console))
    return RecordingTracer()


def search_pools(
    roots: Sequence[Any],
    tree_name: str,
    description: str,
    pools: List[List[int]],
    finder_options: FinderOptions,
    visualize_options: VisualizeOptions,
    console: Console = None,
) -> List[bool]:
    console = console or Console()
    get_children = make_children_accessor(finder_options.children_key)
    get_id = make_id_accessor(finder_options.id_key)
    tracer = _build_tracer(finder_options, console)
    node_count = count_nodes(roots, get_children)

    total_solved = []
    total_search_times = []
    total_candidates = []

    for index, pool in enumerate(pools):
        if len(pools) == 1:
            console.print(
                build_setup_panel(
                    tree_name=tree_name,
                    description=description,
                    root_count=len(roots),
                    node_count=node_count,
                    pool=pool,
                )
            )

        tracer.clear()
        start = time.perf_counter()
        match = find_path(
            pool,
            roots,
            children=get_children,
            node_id=get_id,
            tracer=tracer,
        )
        search_time = time.perf_counter() - start
        solved = match is not None
        candidates_tried = tracer.count("candidate")

        path_labels = []
        problems = []
        if solved:
            path_labels = [node_label(node, get_id(node)) for node in match]
            problems = verify_path_match(match, pool, roots, get_children, get_id)

        console.print(
            build_result_table(
                solved=solved,
                path_labels=path_labels,
                search_time=search_time,
                candidates_tried=candidates_tried,
                problems=problems,
                pool_index=index if len(pools) > 1 else None,
            )
        )
        if solved:
            console.print(build_path_panel(path_labels))

        if visualize_options.visualize_terminal:
            console.print(
                build_tree_view(
                    roots,
                    get_children,
                    get_id,
                    highlight=match.nodes() if solved else None,
                    max_depth=visualize_options.max_depth,
                    title=tree_name,
                )
            )

        total_solved.append(solved and not problems)
        total_search_times.append(search_time)
        total_candidates.append(candidates_tried)

    if len(pools) > 1:
        console.print(
            build_summary_table(
                tree_name=tree_name,
                pools=pools,
                total_solved=total_solved,
                total_search_times=total_search_times,
                total_candidates=total_candidates,
            )
        )

    return total_solved


def run_find_command(
    roots: Sequence[Any],
    tree_name: str,
    description: str,
    pools: List[List[int]],
    finder_options: FinderOptions,
    visualize_options: VisualizeOptions,
    config_title: str,
) -> bool:
    config = {
        "tree_name": tree_name,
        "pools": [",".join(str(i) for i in pool) for pool in pools],
        "finder_options": finder_options,
        "visualize_options": visualize_options,
    }
    print_config(config_title, config)

    total_solved = search_pools(
        roots,
        tree_name,
        description,
        pools,
        finder_options,
        visualize_options,
    )
    return all(total_solved)
