"""Route tree construction.

Folds classified entries into a single tree keyed by raw segment name.
The first entry to reach a segment creates its node; later entries reuse
it.  A page or layout attached twice to the same node is resolved by
last-write-wins, or rejected in strict mode.
"""

import logging
from collections.abc import Iterable

from routetree.classify import classify_path
from routetree.config import CompilerConfig
from routetree.errors import DuplicateRouteError
from routetree.types import ClassifiedEntry, ModuleRef, Role, RouteNode

logger = logging.getLogger("routetree.tree")


class RouteTreeBuilder:
    """Builds a :class:`RouteNode` tree from classified entries.

    Usage::

        builder = RouteTreeBuilder()
        builder.insert(ClassifiedEntry(("shop",), Role.PAGE), ModuleRef(component=Shop))
        root = builder.build()
    """

    __slots__ = ("_built", "_root", "_strict")

    def __init__(self, *, strict: bool = False) -> None:
        self._root = RouteNode()
        self._strict = strict
        self._built = False

    def insert(self, entry: ClassifiedEntry, module: ModuleRef, source: str = "") -> None:
        """Attach *module* to the node addressed by *entry*. Must be called before build()."""
        if self._built:
            msg = "Cannot insert entries after the tree has been built."
            raise RuntimeError(msg)

        if entry.role is Role.IGNORED:
            logger.debug("Ignoring %r: not a page or layout", source)
            return

        node = self._root
        for segment in entry.segments:
            child = node.children.get(segment)
            if child is None:
                child = RouteNode(segment=segment)
                node.children[segment] = child
            node = child

        location = "/".join(entry.segments) or "/"
        if entry.role is Role.LAYOUT:
            self._check_duplicate("layout", location, node.layout_source, source, node.layout)
            node.layout = module
            node.layout_source = source
        else:
            self._check_duplicate("page", location, node.page_source, source, node.page)
            node.page = module
            node.page_source = source

    def _check_duplicate(
        self,
        role: str,
        location: str,
        previous_source: str | None,
        source: str,
        previous: ModuleRef | None,
    ) -> None:
        if previous is None:
            return
        if self._strict:
            raise DuplicateRouteError(role, location, previous_source or "", source)
        logger.debug(
            "%s for %r from %r replaces %r", role.capitalize(), location, source, previous_source
        )

    def build(self) -> RouteNode:
        """Freeze the builder and return the root node."""
        self._built = True
        return self._root


def build_tree(
    entries: Iterable[tuple[ClassifiedEntry, ModuleRef]],
    *,
    strict: bool = False,
) -> RouteNode:
    """Fold ``(entry, module)`` pairs into a route tree and return its root."""
    builder = RouteTreeBuilder(strict=strict)
    for entry, module in entries:
        builder.insert(entry, module)
    return builder.build()


def tree_from_modules(
    modules: Iterable[tuple[str, ModuleRef]],
    config: CompilerConfig,
) -> RouteNode:
    """Classify every discovered ``(path, module)`` pair and build the tree in input order."""
    builder = RouteTreeBuilder(strict=config.strict)
    for path, module in modules:
        builder.insert(classify_path(path, config), module, source=path)
    return builder.build()
