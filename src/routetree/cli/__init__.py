"""routetree CLI: inspect and generate route tables from a pages directory.

Entry point registered as ``routetree`` in ``pyproject.toml``::

    [project.scripts]
    routetree = "routetree.cli:main"
"""

import argparse
import logging
import sys


def _add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("pages_dir", help="Pages directory (e.g. src/app)")
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when two modules claim the same page or layout",
    )
    parser.add_argument("--base-path", default=None, help="Path the root layout is mounted at")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log discovery and compilation details",
    )


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routetree`` command."""
    parser = argparse.ArgumentParser(
        prog="routetree",
        description="routetree: compile a pages directory into client-side routes.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routetree routes -------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List compiled routes")
    _add_common_arguments(routes_parser)

    # -- routetree generate -----------------------------------------------
    generate_parser = subparsers.add_parser("generate", help="Write a TypeScript routes module")
    _add_common_arguments(generate_parser)
    generate_parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file (default: stdout)",
    )
    generate_parser.add_argument(
        "--import-prefix",
        default=None,
        help='Import specifier prefix for page modules (default: "./app/")',
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "routes":
        from routetree.cli._routes import run_routes

        run_routes(args)
    elif args.command == "generate":
        from routetree.cli._generate import run_generate

        run_generate(args)
