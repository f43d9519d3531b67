"""Journal line classifier."""

from __future__ import annotations

from collections.abc import Collection
from dataclasses import dataclass

from ..models import Line, ParameterizedLine, RawLine
from .base import BLOCK_COMMENT_OPEN, CALL_RE, COMMENT_MARKER, FULL_LINE_RE
from .parameters import split_parameters


@dataclass(frozen=True, slots=True)
class JournalLineParser:
    """Parse '[/*[timestamp]*/ ]JrnXxx.Action(params)suffix' lines.

    ``modules``/``actions`` optionally restrict the accepted names; calls
    outside those sets are kept as RawLine instead of being rejected.
    """

    modules: Collection[str] | None = None
    actions: Collection[str] | None = None

    def _accepts(self, module: str, action: str) -> bool:
        if self.modules is not None and module not in self.modules:
            return False
        if self.actions is not None and action not in self.actions:
            return False
        return True

    def parse(self, line: str) -> Line:
        """Parse one line; anything unrecognized comes back as RawLine."""
        prefix = ""
        pure = line
        if line.startswith(BLOCK_COMMENT_OPEN):
            m = FULL_LINE_RE.fullmatch(line)
            if m:
                prefix = m.group("stamp")
                pure = m.group("rest")

        if pure.startswith(COMMENT_MARKER):
            return RawLine(line)

        m = CALL_RE.fullmatch(pure)
        if not m or not self._accepts(m.group("module"), m.group("action")):
            return RawLine(line)

        return ParameterizedLine(
            module=m.group("module"),
            action=m.group("action"),
            parameters=split_parameters(m.group("params")),
            prefix=prefix,
            suffix=m.group("suffix"),
        )


_DEFAULT_PARSER = JournalLineParser()


def parse_line(line: str) -> Line:
    """Parse one line with the unrestricted default parser."""
    return _DEFAULT_PARSER.parse(line)
