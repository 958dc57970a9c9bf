"""``routetree generate``: write the TypeScript routes module."""

import argparse
import logging
from pathlib import Path

from routetree.cli._compile import compile_pages, config_from_args
from routetree.codegen import render_routes_module

logger = logging.getLogger("routetree.cli")


def run_generate(args: argparse.Namespace) -> None:
    """Compile ``args.pages_dir`` and write the module to ``args.output`` or stdout."""
    config = config_from_args(args)
    routes = compile_pages(args, config)
    source = render_routes_module(routes, config)

    if args.output is None:
        print(source, end="")
        return

    output = Path(args.output)
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(source, encoding="utf-8")
    logger.info("Wrote %s", output)
