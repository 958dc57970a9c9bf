"""Data models for file-path route compilation.

Frozen dataclasses for discovered modules, classified entries, and
compiled routes.  ``RouteNode`` is the only mutable type; it lives only
while the tree builder folds entries together.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Role(Enum):
    """What a discovered module contributes to its node."""

    PAGE = "page"
    LAYOUT = "layout"
    IGNORED = "ignored"


@dataclass(frozen=True, slots=True)
class ExportRef:
    """A named export of a source file found by discovery.

    Attributes:
        source: Path of the file relative to the pages root (POSIX style).
        name: Export name (``"default"`` for the default export).
    """

    source: str
    name: str


@dataclass(frozen=True, slots=True)
class ModuleRef:
    """The capabilities a page or layout module exposes.

    Every field is optional and opaque to the compiler; values are
    passed through to the compiled route unchanged.

    Attributes:
        component: Renderable component (the module's default export).
        loader: Data loader callable.
        action: Form action callable.
        error_boundary: Component rendered when the route errors.
    """

    component: Any = None
    loader: Any = None
    action: Any = None
    error_boundary: Any = None


@dataclass(frozen=True, slots=True)
class DiscoveredModule:
    """A ``(path, module)`` pair handed over by module discovery."""

    path: str
    module: ModuleRef


@dataclass(frozen=True, slots=True)
class ClassifiedEntry:
    """A discovered path split into segments and tagged with its role."""

    segments: tuple[str, ...]
    role: Role


@dataclass(slots=True)
class RouteNode:
    """A node in the route tree. Mutable during tree building only.

    Attributes:
        segment: Raw segment name; ``None`` only for the synthetic root.
        page: Module rendered as this node's index route.
        layout: Module wrapping this node's subtree.
        children: Child nodes keyed by raw segment name, in first-seen order.
        page_source: Discovered path the page came from (diagnostics).
        layout_source: Discovered path the layout came from (diagnostics).
    """

    segment: str | None = None
    page: ModuleRef | None = None
    layout: ModuleRef | None = None
    children: dict[str, RouteNode] = field(default_factory=dict)
    page_source: str | None = None
    layout_source: str | None = None

    def walk(self) -> Iterator[RouteNode]:
        """Yield this node and all descendants, depth first."""
        yield self
        for child in self.children.values():
            yield from child.walk()


@dataclass(frozen=True, slots=True)
class CompiledRoute:
    """One route in the table handed to the client-side router.

    Index routes carry no ``path`` and no ``children``.  Grouping routes
    carry a ``path`` and ``children`` but no element.
    """

    path: str | None = None
    index: bool = False
    element: Any = None
    loader: Any = None
    action: Any = None
    error_boundary: Any = None
    children: tuple[CompiledRoute, ...] = ()
    layout: bool = False  # Rendered from a layout module, even one without a component

    @classmethod
    def index_route(cls, module: ModuleRef) -> CompiledRoute:
        """Build the index route rendering *module*."""
        return cls(
            index=True,
            element=module.component,
            loader=module.loader,
            action=module.action,
            error_boundary=module.error_boundary,
        )

    @classmethod
    def layout_route(
        cls,
        path: str | None,
        module: ModuleRef,
        children: tuple[CompiledRoute, ...],
    ) -> CompiledRoute:
        """Build a route rendering *module* around *children*."""
        return cls(
            path=path,
            element=module.component,
            loader=module.loader,
            action=module.action,
            error_boundary=module.error_boundary,
            children=children,
            layout=True,
        )

    def to_dict(self) -> dict[str, Any]:
        """Render the React Router ``RouteObject`` shape.

        Keys whose value is absent are omitted, so an index route yields
        ``{"index": True, ...}`` and a grouping route
        ``{"path": ..., "children": [...]}``.
        """
        out: dict[str, Any] = {}
        if self.index:
            out["index"] = True
        elif self.path is not None:
            out["path"] = self.path
        if self.element is not None:
            out["element"] = self.element
        if self.loader is not None:
            out["loader"] = self.loader
        if self.action is not None:
            out["action"] = self.action
        if self.error_boundary is not None:
            out["errorElement"] = self.error_boundary
        if not self.index and self.children:
            out["children"] = [child.to_dict() for child in self.children]
        return out
