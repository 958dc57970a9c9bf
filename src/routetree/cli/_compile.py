"""Shared discovery and compilation for CLI commands.

Builds a :class:`CompilerConfig` from parsed arguments and turns
library errors into a one-line message and exit code 1.
"""

import argparse
import dataclasses
import sys

from routetree.compiler import generate_routes
from routetree.config import CompilerConfig
from routetree.discovery import discover_modules
from routetree.errors import RouteTreeError
from routetree.types import CompiledRoute


def config_from_args(args: argparse.Namespace) -> CompilerConfig:
    """Apply CLI overrides on top of the default configuration."""
    overrides: dict[str, object] = {"strict": args.strict}
    if args.base_path is not None:
        overrides["base_path"] = args.base_path
    import_prefix = getattr(args, "import_prefix", None)
    if import_prefix is not None:
        overrides["import_prefix"] = import_prefix
    return dataclasses.replace(CompilerConfig(), **overrides)


def compile_pages(args: argparse.Namespace, config: CompilerConfig) -> list[CompiledRoute]:
    """Discover ``args.pages_dir`` and compile it, exiting 1 on failure."""
    try:
        modules = discover_modules(args.pages_dir, config)
        return generate_routes(modules, config)
    except RouteTreeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
