"""Settings shared by classification, discovery, and code generation.

One frozen ``CompilerConfig`` is built per run and threaded through every
stage, so a run never reads ambient state.
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class CompilerConfig:
    """How discovered paths are read and how the route table is emitted.

    The defaults match a Vite-style ``src/app`` tree of TypeScript modules::

        config = CompilerConfig(root_prefix="./app/", strict=True)
    """

    # Classification
    root_prefix: str = ""  # Stripped from discovered paths (e.g. "./app/" for bundler glob keys)
    extensions: tuple[str, ...] = (".tsx", ".ts", ".jsx", ".js")

    # Output
    base_path: str = "/"
    not_found_element: str = "Not Found"

    # Duplicate page/layout on one node raises instead of last-write-wins
    strict: bool = False

    # Discovery
    ignore_prefixes: tuple[str, ...] = (".",)  # Files and directories skipped while walking

    # Code generation
    import_prefix: str = "./app/"  # Import specifier prefix for generated modules
