"""Whole-file journal documents.

A Document is an ordered list of lines; each line is parsed on its own, so
the only thing the document adds is splitting and joining text.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from .config import DocumentConfig
from .models import Line, RawLine
from .syntax import JournalLineParser, LineParser

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class Document:
    """A parsed journal file."""

    filename: str = ""
    lines: list[Line] = field(default_factory=list)
    config: DocumentConfig = field(default_factory=DocumentConfig)
    parser: LineParser = field(default_factory=JournalLineParser)

    def parse_text(self, text: str, *, source: str | Path | None = None) -> None:
        """Append the lines of ``text`` split on the configured separator."""
        lines = self._parse_lines(text)
        self.lines.extend(lines)
        if source is not None:
            LOGGER.debug("Loaded %s (%d lines)", source, len(lines))

    def _parse_lines(self, text: str) -> list[Line]:
        return [self.parser.parse(raw) for raw in text.split(self.config.line_separator)]

    def _read(self, path: Path) -> str:
        # newline="" keeps CRLF intact for the configured split.
        with open(path, encoding=self.config.encoding, newline="") as f:
            return f.read()

    def load(self, filename: str | Path) -> None:
        """Read a file and append its lines."""
        path = Path(filename)
        self.parse_text(self._read(path), source=path)

    def open(self, filename: str | Path) -> None:
        """Replace the contents with a file and remember its name.

        The current lines are kept when the file cannot be read.
        """
        path = Path(filename)
        text = self._read(path)
        self.clear()
        self.parse_text(text, source=path)
        self.filename = str(filename)

    def close(self) -> None:
        self.clear()

    def line_literals(self) -> list[str]:
        """Return the literal of every line that is written on save."""
        return [
            line.literal()
            for line in self.lines
            if not (self.config.skip_empty_line and isinstance(line, RawLine) and line.is_empty())
        ]

    def render(self) -> str:
        """Return the document text as it would be saved."""
        return self.config.output_separator.join(self.line_literals())

    def save(self) -> None:
        if not self.filename:
            raise ValueError("Document has no filename; use save_as()")
        self.save_as(self.filename)

    def save_as(self, filename: str | Path) -> None:
        path = Path(filename)
        text = self.render()
        with open(path, "w", encoding=self.config.encoding, newline="") as f:
            f.write(text)
        LOGGER.debug("Saved %s (%d lines)", path, len(self.lines))

    def clear(self) -> None:
        self.lines = []
        self.filename = ""


def parse_document(text: str, *, config: DocumentConfig | None = None) -> Document:
    """Parse journal text into a new Document."""
    doc = Document(config=config or DocumentConfig())
    doc.parse_text(text)
    return doc
