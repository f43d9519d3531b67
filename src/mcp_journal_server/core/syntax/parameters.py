"""Quote-aware parameter list splitting.

The text between a call's parentheses is cut on ``,`` / ``, `` and the pieces
of a double-quoted literal that contained a comma are glued back together.
The separator after each logical parameter is read from the source, so the
space before the next parameter survives even after a non-ASCII value. A
space after a comma inside a quoted literal is not kept.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from ..models import Parameter
from .base import BLOCK_COMMENT_CLOSE, PARAMETER_COMMENT_RE, PARAMETER_SEPARATOR_RE, QUOTE


@dataclass(frozen=True, slots=True)
class _Segment:
    """A naive comma segment: text[start:end] followed by separator ``sep``."""

    start: int
    end: int
    sep: str


def _iter_segments(text: str) -> Iterator[_Segment]:
    start = 0
    for m in PARAMETER_SEPARATOR_RE.finditer(text):
        yield _Segment(start, m.start(), m.group())
        start = m.end()
    yield _Segment(start, len(text), "")


def _opens_string(segment: str) -> bool:
    """True for a segment that starts a quoted literal without closing it."""
    return segment.startswith(QUOTE) and not segment.endswith(QUOTE)


def parse_parameter(literal: str, prefix: str = "") -> Parameter:
    """Split a trailing /*comment*/ off one parameter literal."""
    if literal.endswith(BLOCK_COMMENT_CLOSE):
        m = PARAMETER_COMMENT_RE.match(literal)
        # An empty /**/ stays part of the value so it is written back.
        if m and m.group("comment"):
            return Parameter(value=m.group("value"), prefix=prefix, comment=m.group("comment"))
    return Parameter(value=literal, prefix=prefix)


def split_parameters(text: str) -> list[Parameter]:
    """Split a parameter list into parameters. Never raises.

    An unterminated quoted literal swallows the rest of the list.
    """
    if not text:
        return []

    segments = list(_iter_segments(text))
    params: list[Parameter] = []
    prefix = ""
    i = 0
    while i < len(segments):
        group = [segments[i]]
        if _opens_string(text[group[0].start : group[0].end]):
            while i + 1 < len(segments):
                i += 1
                group.append(segments[i])
                if text[segments[i].start : segments[i].end].endswith(QUOTE):
                    break
        last = group[-1]
        # Pieces of a quoted literal are re-joined with a bare ",".
        literal = ",".join(text[s.start : s.end] for s in group)
        params.append(parse_parameter(literal, prefix))
        # The cursor sits right after the comma: keep a single space, if any.
        prefix = last.sep[1:]
        i += 1
    return params
