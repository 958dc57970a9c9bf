"""routetree exception hierarchy.

Shared across discovery, the tree builder, and the compiler so every
module raises and catches the same types.
"""


class RouteTreeError(Exception):
    """Base for all routetree-specific errors."""


class ConfigurationError(RouteTreeError):
    """Raised when the discovered module set cannot form a route table.

    Raised synchronously while generating routes and meant to abort
    application startup.
    """


class MissingRootLayoutError(ConfigurationError):
    """The pages root has no ``layout`` module to wrap the route table."""

    def __init__(self, detail: str = "") -> None:
        super().__init__(
            detail or "Root layout not found. Create a layout module at the pages root."
        )


class DuplicateRouteError(ConfigurationError):
    """Two modules resolve to the same node with the same role.

    Only raised in strict mode; by default the module processed last wins.
    """

    def __init__(self, role: str, location: str, first: str = "", second: str = "") -> None:
        self.role = role
        self.location = location
        msg = f"Duplicate {role} for {location!r}"
        if first and second:
            msg = f"{msg}: {first!r} conflicts with {second!r}"
        super().__init__(msg)


class DiscoveryError(RouteTreeError):
    """Raised when the pages directory cannot be scanned."""
