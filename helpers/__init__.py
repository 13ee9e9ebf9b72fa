from .config_printer import print_config
from .formatting import human_format, human_time, path_format, pool_format
from .util import convert_to_serializable_dict, count_nodes, node_label, node_name
from .visualization import (
    build_path_panel,
    build_result_table,
    build_setup_panel,
    build_summary_table,
    build_tree_view,
)

__all__ = [
    # Config
    "print_config",
    # Formatting
    "human_format",
    "human_time",
    "path_format",
    "pool_format",
    # Util
    "convert_to_serializable_dict",
    "count_nodes",
    "node_label",
    "node_name",
    # Visualization
    "build_path_panel",
    "build_result_table",
    "build_setup_panel",
    "build_summary_table",
    "build_tree_view",
]
