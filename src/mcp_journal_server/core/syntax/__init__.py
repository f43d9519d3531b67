"""Journal script syntax.

Contains the line classifier and the quote-aware parameter splitter.
"""

from __future__ import annotations

from .base import LineParser
from .journal import JournalLineParser, parse_line
from .parameters import parse_parameter, split_parameters

__all__ = [
    "JournalLineParser",
    "LineParser",
    "parse_line",
    "parse_parameter",
    "split_parameters",
]
