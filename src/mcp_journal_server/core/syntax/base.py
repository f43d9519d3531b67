"""Parser interface and the fixed journal grammar patterns."""

from __future__ import annotations

import re
from typing import Protocol

from ..models import Line

# [YYYY-MM-DD HH:MM:SS(mmm)]: fixed width, leading digits may be spaces.
# The recorder sometimes writes the hour three wide ("0 9").
TIMESTAMP = (
    r"\[[0-9]{4}-[0-9 ][0-9]-[0-9 ][0-9] "
    r"[0-9 ][0-9 ]?[0-9]:[0-9 ][0-9]:[0-9 ][0-9]\([0-9 ]{3}\)\]"
)

# /*[timestamp]*/ <rest>;  (the ";" stays in rest so the suffix survives)
FULL_LINE_RE = re.compile(r"/\*(?P<stamp>" + TIMESTAMP + r")\*/ (?P<rest>.*;)")

# Parameter list is greedy: it runs to the last ")" on the line.
CALL_RE = re.compile(
    r"(?P<module>Jrn[A-Za-z]{3})\.(?P<action>[A-Za-z]+)\((?P<params>.*)\)(?P<suffix>.*)"
)

PARAMETER_SEPARATOR_RE = re.compile(r", ?")

# Greedy value: the comment is the last /*...*/ of the parameter.
PARAMETER_COMMENT_RE = re.compile(r"(?P<value>.*)(/\*(?P<comment>.*)\*/)")

COMMENT_MARKER = "//"
BLOCK_COMMENT_OPEN = "/*"
BLOCK_COMMENT_CLOSE = "*/"
QUOTE = '"'


class LineParser(Protocol):
    """Parser interface: every input line yields exactly one Line."""

    def parse(self, line: str) -> Line:
        """Classify and parse one line of text (no trailing newline)."""
        ...
