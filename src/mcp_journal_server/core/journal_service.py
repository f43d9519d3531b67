"""Journal loading, saving and summarizing.

This module is the async integration point used by the MCP tools; plain text
and gzip-compressed journals are both supported.
"""

from __future__ import annotations

import gzip
import logging
from collections import Counter
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from .config import DocumentConfig, resolve_document_config
from .document import Document
from .models import ParameterizedLine, RawLine
from .syntax import LineParser
from .syntax.base import COMMENT_MARKER

LOGGER = logging.getLogger(__name__)


@asynccontextmanager
async def _open_text(path: Path, mode: str, *, encoding: str):
    """Open a journal for async text I/O (plain or gzip), without newline translation."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode=f"{mode}t", encoding=encoding, newline="")
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, mode, encoding=encoding, newline="") as f:
            yield f


async def read_journal_text(path: str | Path, *, encoding: str = "utf-8") -> str:
    """Read a journal file as text."""
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Journal file not found: {p}")
    async with _open_text(p, "r", encoding=encoding) as f:
        return await f.read()


async def write_journal_text(path: str | Path, text: str, *, encoding: str = "utf-8") -> Path:
    """Write journal text, creating parent directories as needed."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    async with _open_text(p, "w", encoding=encoding) as f:
        await f.write(text)
    return p


async def load_document(
    path: str | Path,
    *,
    config: DocumentConfig | None = None,
    parser: LineParser | None = None,
) -> Document:
    """Read and parse a journal file into a Document.

    Environment overrides apply only when no explicit config is given.
    """
    cfg = config if config is not None else resolve_document_config()
    text = await read_journal_text(path, encoding=cfg.encoding)
    doc = Document(filename=str(path), config=cfg)
    if parser is not None:
        doc.parser = parser
    doc.parse_text(text, source=path)
    return doc


async def save_document(document: Document, path: str | Path | None = None) -> Path:
    """Write a Document to ``path`` (defaults to its own filename)."""
    target = path if path is not None else document.filename
    if not target:
        raise ValueError("Document has no filename; pass a path")
    out = await write_journal_text(target, document.render(), encoding=document.config.encoding)
    LOGGER.debug("Saved %s (%d lines)", out, len(document.lines))
    return out


@dataclass(frozen=True, slots=True)
class JournalSummary:
    """Line counts for a parsed journal."""

    total: int = 0
    parameterized: int = 0
    raw: int = 0
    blank: int = 0
    comments: int = 0
    timestamped: int = 0
    modules: Counter[str] = field(default_factory=Counter)
    calls: Counter[str] = field(default_factory=Counter)  # keyed by "module.action"


def summarize(document: Document) -> JournalSummary:
    """Count line kinds, modules and calls in a document."""
    parameterized = raw = blank = comments = timestamped = 0
    modules: Counter[str] = Counter()
    calls: Counter[str] = Counter()

    for line in document.lines:
        if isinstance(line, ParameterizedLine):
            parameterized += 1
            if line.prefix:
                timestamped += 1
            modules[line.module] += 1
            calls[f"{line.module}.{line.action}"] += 1
        elif isinstance(line, RawLine):
            raw += 1
            stripped = line.content.strip()
            if not stripped:
                blank += 1
            elif stripped.startswith(COMMENT_MARKER):
                comments += 1

    return JournalSummary(
        total=len(document.lines),
        parameterized=parameterized,
        raw=raw,
        blank=blank,
        comments=comments,
        timestamped=timestamped,
        modules=modules,
        calls=calls,
    )
