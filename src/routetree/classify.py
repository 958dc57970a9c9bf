"""Path classification for discovered modules.

Turns a discovered path such as ``shop/[id]/page.tsx`` into the segments
leading to its tree node and the role it plays there::

    layout.tsx             -> ()              LAYOUT
    shop/_layout.tsx       -> ("shop",)       LAYOUT
    page.tsx               -> ()              PAGE
    shop/[id]/index.tsx    -> ("shop", "[id]") PAGE
    shop/cart.tsx          -> ("shop", "cart") PAGE  (implicit page)
"""

from routetree.config import CompilerConfig
from routetree.types import ClassifiedEntry, Role

LAYOUT_NAMES = frozenset({"layout", "_layout"})
PAGE_NAMES = frozenset({"page", "index"})

_DEFAULT_CONFIG = CompilerConfig()


def strip_path(path: str, config: CompilerConfig = _DEFAULT_CONFIG) -> str:
    """Remove the pages-root prefix and one known file extension."""
    if config.root_prefix and path.startswith(config.root_prefix):
        path = path[len(config.root_prefix) :]
    for ext in config.extensions:
        if path.endswith(ext):
            return path[: -len(ext)]
    return path


def split_segments(path: str) -> tuple[str, ...]:
    """Split on ``/``; the empty string yields no segments."""
    if not path:
        return ()
    return tuple(path.split("/"))


def classify_path(path: str, config: CompilerConfig = _DEFAULT_CONFIG) -> ClassifiedEntry:
    """Classify a discovered path relative to the pages root.

    A final segment named ``layout``/``_layout`` makes a layout and one
    named ``page``/``index`` makes a page; that segment is dropped.  Any
    other module is an implicit page at its full path.  Leading slashes
    left by the prefix are dropped; a path that is empty once the prefix
    and extension are removed is ignored.
    """
    stem = strip_path(path, config).lstrip("/")
    if not stem:
        return ClassifiedEntry((), Role.IGNORED)

    segments = split_segments(stem)
    last = segments[-1]

    if last in LAYOUT_NAMES:
        return ClassifiedEntry(segments[:-1], Role.LAYOUT)
    if last in PAGE_NAMES:
        return ClassifiedEntry(segments[:-1], Role.PAGE)
    return ClassifiedEntry(segments, Role.PAGE)
