"""Segment pattern compilation.

Maps one raw directory or file segment to its route-pattern contribution::

    "index" / "page" -> None       (the node's own index content)
    "[...rest]"      -> "*"        (catch-all)
    "[[id]]"         -> ":id?"     (optional parameter)
    "[id]"           -> ":id"      (required parameter)
    "shop"           -> "shop"     (literal)

Anything that does not match a bracket form exactly, such as ``[id`` or
``[]``, is treated as a literal.
"""

import re
from dataclasses import dataclass
from enum import Enum

_CATCH_ALL_RE = re.compile(r"^\[\.{3}(.+)\]$")
_OPTIONAL_RE = re.compile(r"^\[\[(.+)\]\]$")
_PARAM_RE = re.compile(r"^\[(.+)\]$")

INDEX_SEGMENTS = frozenset({"index", "page"})


class SegmentKind(Enum):
    INDEX = "index"
    STATIC = "static"
    PARAM = "param"
    OPTIONAL = "optional"
    CATCH_ALL = "catch_all"


@dataclass(frozen=True, slots=True)
class Segment:
    """A parsed path segment.

    Static:     ``shop``       (kind=STATIC)
    Param:      ``[id]``       (kind=PARAM, param_name="id")
    Optional:   ``[[lang]]``   (kind=OPTIONAL, param_name="lang")
    Catch-all:  ``[...rest]``  (kind=CATCH_ALL, param_name="rest")
    """

    value: str
    kind: SegmentKind
    param_name: str | None = None

    @property
    def pattern(self) -> str | None:
        """Router path pattern for this segment, ``None`` for index segments."""
        match self.kind:
            case SegmentKind.INDEX:
                return None
            case SegmentKind.CATCH_ALL:
                return "*"
            case SegmentKind.OPTIONAL:
                return f":{self.param_name}?"
            case SegmentKind.PARAM:
                return f":{self.param_name}"
            case _:
                return self.value


def parse_segment(value: str) -> Segment:
    """Classify a raw segment name.

    The catch-all form is checked before the optional form, and both
    before the plain parameter form, since ``[[id]]`` and ``[...rest]``
    also match the single-bracket pattern.
    """
    if value in INDEX_SEGMENTS:
        return Segment(value, SegmentKind.INDEX)

    match = _CATCH_ALL_RE.match(value)
    if match:
        return Segment(value, SegmentKind.CATCH_ALL, match.group(1))

    match = _OPTIONAL_RE.match(value)
    if match:
        return Segment(value, SegmentKind.OPTIONAL, match.group(1))

    match = _PARAM_RE.match(value)
    if match:
        return Segment(value, SegmentKind.PARAM, match.group(1))

    return Segment(value, SegmentKind.STATIC)


def segment_to_pattern(value: str) -> str | None:
    """Compile a raw segment name to its router path pattern."""
    return parse_segment(value).pattern
