from functools import wraps

import click

from config import tree_bundles
from config.pydantic_models import FinderOptions, PoolOptions, TreeBundle, VisualizeOptions
from config.tree_loader import TreeLoadError, load_tree
from treepath.trace import TRACER_TYPES


def tree_options(func: callable) -> callable:
    @click.option(
        "-t",
        "--tree",
        default="example",
        type=click.Choice(list(tree_bundles.keys())),
        help="Built-in tree to search",
    )
    @click.option(
        "-f",
        "--tree_file",
        default=None,
        type=click.Path(dir_okay=False),
        help="JSON file holding the tree; overrides --tree",
    )
    @click.option(
        "-ck", "--children_key", default=None, type=str, help="Field holding a node's children"
    )
    @click.option("-ik", "--id_key", default=None, type=str, help="Field holding a node's id")
    @wraps(func)
    def wrapper(*args, **kwargs):
        tree_name = kwargs.pop("tree")
        tree_file = kwargs.pop("tree_file")

        if tree_file is not None:
            tree_bundle = TreeBundle(roots=[], description=f"Loaded from {tree_file}")
            tree_name = tree_file
        else:
            tree_bundle = tree_bundles[tree_name]

        overrides = {
            k: v for k, v in kwargs.items() if v is not None and k in ("children_key", "id_key")
        }
        finder_opts = tree_bundle.finder_options.model_copy(update=overrides)
        kwargs.pop("children_key")
        kwargs.pop("id_key")

        if tree_file is not None:
            try:
                roots = load_tree(tree_file, finder_opts.children_key, finder_opts.id_key)
            except TreeLoadError as e:
                raise click.BadParameter(str(e), param_hint="'--tree_file'")
        else:
            roots = tree_bundle.roots

        kwargs["roots"] = roots
        kwargs["tree_name"] = tree_name
        kwargs["tree_bundle"] = tree_bundle
        kwargs["finder_options"] = finder_opts
        return func(*args, **kwargs)

    return wrapper


def pool_options(func: callable) -> callable:
    @click.option(
        "-i",
        "--ids",
        default=None,
        type=str,
        help="Id pool to match, e.g. '4,1,3'. Separate several pools with ';'",
    )
    @wraps(func)
    def wrapper(*args, **kwargs):
        ids = kwargs.pop("ids")
        if ids is None:
            ids = kwargs["tree_bundle"].default_ids
        if not ids:
            raise click.UsageError("No id pool given, use --ids")
        try:
            kwargs["pools"] = PoolOptions(ids=ids).get_pool_list()
        except ValueError as e:
            raise click.BadParameter(str(e), param_hint="'--ids'")
        return func(*args, **kwargs)

    return wrapper


def trace_options(func: callable) -> callable:
    @click.option(
        "--tracer",
        default=None,
        type=click.Choice(list(TRACER_TYPES)),
        help="Where to send search trace events",
    )
    @wraps(func)
    def wrapper(*args, **kwargs):
        tracer = kwargs.pop("tracer")
        finder_opts: FinderOptions = kwargs["finder_options"]
        if tracer is not None:
            kwargs["finder_options"] = finder_opts.model_copy(update={"tracer": tracer})
        return func(*args, **kwargs)

    return wrapper


def visualize_options(func: callable) -> callable:
    @click.option(
        "-vt",
        "--visualize_terminal",
        is_flag=True,
        default=False,
        help="Show the tree with the matched path highlighted",
    )
    @click.option("--max_depth", default=None, type=int, help="Deepest level shown in the tree")
    @wraps(func)
    def wrapper(*args, **kwargs):
        visualize_kwargs = {k: kwargs.pop(k) for k in VisualizeOptions.model_fields.keys()}
        kwargs["visualize_options"] = VisualizeOptions(**visualize_kwargs)
        return func(*args, **kwargs)

    return wrapper
