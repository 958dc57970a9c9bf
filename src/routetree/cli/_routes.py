"""``routetree routes``: list compiled routes.

Discovers a pages directory, compiles it, and prints every route with
its full path, kind, and source module.
"""

import argparse

from routetree.cli._compile import compile_pages, config_from_args
from routetree.compiler import iter_routes
from routetree.types import CompiledRoute, ExportRef


def _kind(route: CompiledRoute) -> str:
    if route.index:
        return "page"
    if route.layout:
        return "layout"
    if not route.children:
        return "fallback"
    return "group"


def _source(route: CompiledRoute) -> str:
    for value in (route.element, route.loader, route.action, route.error_boundary):
        if isinstance(value, ExportRef):
            return value.source
    if route.element is None:
        return ""
    return repr(route.element)


def run_routes(args: argparse.Namespace) -> None:
    """Print a table of PATH, KIND, and SOURCE for every compiled route."""
    config = config_from_args(args)
    routes = compile_pages(args, config)

    rows = [(path, _kind(route), _source(route)) for path, route in iter_routes(routes)]

    # Column widths
    max_path = max(max(len(r[0]) for r in rows), 4)  # "PATH" header
    max_kind = max(max(len(r[1]) for r in rows), 4)  # "KIND" header

    fmt = f"{{:<{max_path}}}  {{:<{max_kind}}}  {{}}"
    print(fmt.format("PATH", "KIND", "SOURCE"))
    sep_len = max_path + max_kind + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for path, kind, source in rows:
        print(fmt.format(path, kind, source).rstrip())
