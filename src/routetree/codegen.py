"""TypeScript route module generation.

Renders a compiled route table as a module exporting
``generatedRoutes: RouteObject[]`` for ``createBrowserRouter``.  Each
source file referenced by an :class:`ExportRef` gets one namespace
import; elements are created with ``React.createElement``.

The kida environment is created once per call with autoescape off,
since the output is TypeScript rather than HTML.
"""

import json
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from kida import Environment

from routetree.config import CompilerConfig
from routetree.types import CompiledRoute, ExportRef

_MODULE_TEMPLATE = """\
// Generated by routetree. Do not edit.
import * as React from "react";
import type { RouteObject } from "react-router";
{% for imp in imports %}
import * as {{ imp.alias }} from {{ imp.specifier }};
{% end %}

export const generatedRoutes: RouteObject[] = {{ routes }};
"""

_INDENT = "  "


@dataclass(frozen=True, slots=True)
class _Import:
    alias: str
    specifier: str


class _ImportTable:
    """Assigns one namespace alias per source file, in first-use order."""

    __slots__ = ("_aliases", "_prefix", "_strip")

    def __init__(self, config: CompilerConfig) -> None:
        self._aliases: dict[str, str] = {}
        self._prefix = config.import_prefix
        self._strip = config.extensions

    def alias(self, source: str) -> str:
        if source not in self._aliases:
            self._aliases[source] = f"M{len(self._aliases)}"
        return self._aliases[source]

    def imports(self) -> list[_Import]:
        return [
            _Import(alias, json.dumps(self._prefix + _strip_extension(source, self._strip)))
            for source, alias in self._aliases.items()
        ]


def _strip_extension(source: str, extensions: tuple[str, ...]) -> str:
    for ext in extensions:
        if source.endswith(ext):
            return source[: -len(ext)]
    return source


def _value_expr(value: Any, table: _ImportTable) -> str:
    if isinstance(value, ExportRef):
        return f"{table.alias(value.source)}.{value.name}"
    return json.dumps(value)


def _element_expr(value: Any, table: _ImportTable) -> str:
    if isinstance(value, ExportRef):
        return f"React.createElement({_value_expr(value, table)})"
    if isinstance(value, str):
        return f'React.createElement("h1", null, {json.dumps(value)})'
    return json.dumps(value)


def _route_expr(route: CompiledRoute, table: _ImportTable, depth: int) -> str:
    pad = _INDENT * (depth + 1)
    fields: list[str] = []
    if route.index:
        fields.append("index: true")
    elif route.path is not None:
        fields.append(f"path: {json.dumps(route.path)}")
    if route.element is not None:
        fields.append(f"element: {_element_expr(route.element, table)}")
    if route.loader is not None:
        fields.append(f"loader: {_value_expr(route.loader, table)}")
    if route.action is not None:
        fields.append(f"action: {_value_expr(route.action, table)}")
    if route.error_boundary is not None:
        fields.append(f"errorElement: {_element_expr(route.error_boundary, table)}")
    if not route.index and route.children:
        fields.append(f"children: {_routes_expr(route.children, table, depth + 1)}")

    body = ",\n".join(pad + field for field in fields)
    return "{\n" + body + ",\n" + _INDENT * depth + "}"


def _routes_expr(routes: Sequence[CompiledRoute], table: _ImportTable, depth: int) -> str:
    if not routes:
        return "[]"
    pad = _INDENT * (depth + 1)
    items = ",\n".join(pad + _route_expr(route, table, depth + 1) for route in routes)
    return "[\n" + items + ",\n" + _INDENT * depth + "]"


def render_routes_module(
    routes: Sequence[CompiledRoute],
    config: CompilerConfig | None = None,
) -> str:
    """Render *routes* as the source of a TypeScript module.

    Args:
        routes: Route table from :func:`routetree.compiler.generate_routes`.
        config: Supplies ``import_prefix`` and the extensions stripped from
            import specifiers.

    Returns:
        Module source text ending in a newline.
    """
    config = config or CompilerConfig()
    table = _ImportTable(config)
    # Rendering the routes first fills the import table.
    routes_src = _routes_expr(routes, table, 0)

    env = Environment(autoescape=False, trim_blocks=True, lstrip_blocks=True)
    template = env.from_string(_MODULE_TEMPLATE)
    return template.render({"imports": table.imports(), "routes": routes_src})
