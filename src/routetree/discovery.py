"""Filesystem module discovery for a pages directory.

Walks the pages directory and reads every source file whose extension
is listed in :attr:`CompilerConfig.extensions`, recording which of the
route capabilities it exports:

- ``export default``          -> component
- ``export ... loader``       -> loader
- ``export ... action``       -> action
- ``export ... ErrorBoundary`` -> error boundary

Files and directories starting with one of
:attr:`CompilerConfig.ignore_prefixes` are skipped.  Export detection is
a regex scan of the source, not a parse.
"""

import logging
import re
from pathlib import Path

from routetree.config import CompilerConfig
from routetree.errors import DiscoveryError
from routetree.types import ExportRef, ModuleRef

logger = logging.getLogger("routetree.discovery")

# export default function Page() / export default Page / export { Page as default }
_EXPORT_DEFAULT_RE = re.compile(
    r"^\s*export\s+default\b|^\s*export\s*\{[^}]*\bas\s+default\b",
    re.MULTILINE,
)


def _named_export_re(name: str) -> re.Pattern[str]:
    return re.compile(
        rf"^\s*export\s+(?:async\s+)?(?:function\*?|const|let|var|class)\s+{name}\b"
        rf"|^\s*export\s*\{{[^}}]*\b{name}\b[^}}]*\}}",
        re.MULTILINE,
    )


# (ModuleRef field, exported name)
_NAMED_EXPORTS: tuple[tuple[str, str], ...] = (
    ("loader", "loader"),
    ("action", "action"),
    ("error_boundary", "ErrorBoundary"),
)

_NAMED_EXPORT_RES = {name: _named_export_re(name) for _, name in _NAMED_EXPORTS}


def discover_modules(
    pages_dir: str | Path,
    config: CompilerConfig | None = None,
) -> dict[str, ModuleRef]:
    """Walk a pages directory and describe every source module in it.

    Args:
        pages_dir: Path to the pages directory.
        config: Compiler configuration (extensions and ignore prefixes).

    Returns:
        Mapping of POSIX path relative to *pages_dir* (extension kept) to
        :class:`ModuleRef`, sorted by path.  Capability fields hold
        :class:`ExportRef` values.

    Raises:
        DiscoveryError: If *pages_dir* is not a directory.
    """
    config = config or CompilerConfig()
    root = Path(pages_dir).resolve()
    if not root.is_dir():
        raise DiscoveryError(f"Pages directory not found: {root}")

    modules: dict[str, ModuleRef] = {}
    _walk_directory(root, root, config=config, modules=modules)
    logger.debug("Discovered %d modules under %s", len(modules), root)
    return dict(sorted(modules.items()))


def _walk_directory(
    directory: Path,
    root: Path,
    *,
    config: CompilerConfig,
    modules: dict[str, ModuleRef],
) -> None:
    """Recursively collect source modules below *directory*."""
    for item in sorted(directory.iterdir()):
        if item.name.startswith(config.ignore_prefixes):
            continue

        if item.is_dir():
            _walk_directory(item, root, config=config, modules=modules)
            continue

        if not item.is_file() or not item.name.endswith(config.extensions):
            continue

        relative = item.relative_to(root).as_posix()
        try:
            source = item.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DiscoveryError(f"Cannot read {item}: {exc}") from exc
        modules[relative] = scan_exports(relative, source)


def scan_exports(relative: str, source: str) -> ModuleRef:
    """Build a :class:`ModuleRef` from the exports found in *source*."""
    fields: dict[str, ExportRef] = {}
    if _EXPORT_DEFAULT_RE.search(source):
        fields["component"] = ExportRef(relative, "default")
    for field_name, export_name in _NAMED_EXPORTS:
        if _NAMED_EXPORT_RES[export_name].search(source):
            fields[field_name] = ExportRef(relative, export_name)
    return ModuleRef(**fields)
