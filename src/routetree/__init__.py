"""routetree: compile a pages directory into a client-side route table.

Directory nesting becomes route nesting: ``layout`` modules wrap their
subtree, ``page``/``index`` modules become index routes, and bracketed
directory names become parameters.

Basic usage::

    from routetree import ModuleRef, generate_routes

    routes = generate_routes({
        "layout.tsx": ModuleRef(component=RootLayout),
        "page.tsx": ModuleRef(component=Home),
        "shop/[id]/page.tsx": ModuleRef(component=Product, loader=load_product),
    })
    table = [route.to_dict() for route in routes]

Scanning a directory of TypeScript sources::

    from routetree import discover_modules, generate_routes

    routes = generate_routes(discover_modules("src/app"))
"""

__version__ = "0.1.0"
__all__ = [
    "CompiledRoute",
    "CompilerConfig",
    "ConfigurationError",
    "DiscoveredModule",
    "DiscoveryError",
    "DuplicateRouteError",
    "ExportRef",
    "MissingRootLayoutError",
    "ModuleRef",
    "RouteTreeError",
    "discover_modules",
    "generate_routes",
    "render_routes_module",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routetree`` fast while providing a clean top-level API.
    """
    if name == "CompilerConfig":
        from routetree.config import CompilerConfig

        return CompilerConfig

    if name in ("CompiledRoute", "DiscoveredModule", "ExportRef", "ModuleRef"):
        from routetree import types as _types

        return getattr(_types, name)

    if name == "generate_routes":
        from routetree.compiler import generate_routes

        return generate_routes

    if name == "discover_modules":
        from routetree.discovery import discover_modules

        return discover_modules

    if name == "render_routes_module":
        from routetree.codegen import render_routes_module

        return render_routes_module

    if name in (
        "ConfigurationError",
        "DiscoveryError",
        "DuplicateRouteError",
        "MissingRootLayoutError",
        "RouteTreeError",
    ):
        from routetree import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
