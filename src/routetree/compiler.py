"""Route table compilation.

Walks a route tree and produces the nested route table a client-side
router consumes.  Each node contributes, in order:

1. An index route for its page, if it has one.
2. One route per child that produced any routes of its own: a layout
   route when the child owns a layout, an element-less grouping
   route otherwise.

The top-level table is a single root-layout route mounted at the base
path, with a trailing ``*`` not-found route after everything else.
"""

import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import TypeAlias

from routetree.config import CompilerConfig
from routetree.errors import MissingRootLayoutError
from routetree.segments import segment_to_pattern
from routetree.tree import tree_from_modules
from routetree.types import CompiledRoute, DiscoveredModule, ModuleRef, RouteNode

logger = logging.getLogger("routetree.compiler")

NOT_FOUND_PATH = "*"

ModuleSource: TypeAlias = Mapping[str, ModuleRef] | Iterable[DiscoveredModule]


def compile_node(node: RouteNode) -> tuple[CompiledRoute, ...]:
    """Compile *node*'s index route and routed children, in that order.

    Children are visited in insertion order.  A child whose own
    compilation is empty is skipped, so no empty grouping routes appear.
    """
    routes: list[CompiledRoute] = []

    if node.page is not None:
        routes.append(CompiledRoute.index_route(node.page))

    for key, child in node.children.items():
        path = segment_to_pattern(key)
        child_routes = compile_node(child)
        if not child_routes:
            logger.debug("Skipping %r: no page below it", key)
            continue

        if child.layout is not None:
            routes.append(CompiledRoute.layout_route(path, child.layout, child_routes))
        else:
            routes.append(CompiledRoute(path=path, children=child_routes))

    return tuple(routes)


def compile_tree(root: RouteNode, config: CompilerConfig | None = None) -> list[CompiledRoute]:
    """Compile a whole tree into the single-root route table.

    Raises:
        MissingRootLayoutError: If the root node has no layout.
    """
    config = config or CompilerConfig()
    if root.layout is None:
        raise MissingRootLayoutError

    children = (
        *compile_node(root),
        CompiledRoute(path=NOT_FOUND_PATH, element=config.not_found_element),
    )
    return [CompiledRoute.layout_route(config.base_path, root.layout, children)]


def generate_routes(
    modules: ModuleSource,
    config: CompilerConfig | None = None,
) -> list[CompiledRoute]:
    """Compile discovered modules into a router-ready route table.

    Args:
        modules: Mapping of discovered path to :class:`ModuleRef`, or an
            iterable of :class:`DiscoveredModule`.  Iteration order decides
            sibling order and which duplicate wins.
        config: Compiler configuration; defaults to :class:`CompilerConfig`.

    Returns:
        A one-element list holding the root layout route.

    Raises:
        MissingRootLayoutError: If no layout sits at the pages root.
        DuplicateRouteError: In strict mode, when two modules claim the
            same page or layout slot.
    """
    config = config or CompilerConfig()
    if isinstance(modules, Mapping):
        pairs = list(modules.items())
    else:
        pairs = [(m.path, m.module) for m in modules]

    root = tree_from_modules(pairs, config)
    routes = compile_tree(root, config)
    logger.info(
        "Compiled %d modules (%d tree nodes) into %d routes",
        len(pairs),
        sum(1 for _ in root.walk()),
        sum(1 for _ in iter_routes(routes)),
    )
    return routes


def iter_routes(
    routes: Iterable[CompiledRoute],
    prefix: str = "",
) -> Iterator[tuple[str, CompiledRoute]]:
    """Yield ``(full_path, route)`` for every route, depth first.

    *full_path* joins the patterns of all ancestors, e.g. ``/shop/:id``.
    Index routes report their parent's path.
    """
    for route in routes:
        if route.index or route.path is None:
            full = prefix or "/"
        elif route.path.startswith("/"):
            full = route.path
        else:
            full = f"{prefix.rstrip('/')}/{route.path}"
        yield full, route
        if route.children:
            yield from iter_routes(route.children, "" if full == "/" else full)
