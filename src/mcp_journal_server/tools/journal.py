"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import replace
from typing import Any

from mcp_journal_server.core.config import (
    DocumentConfig,
    parse_separator,
    resolve_document_config,
    safe_resolve,
)
from mcp_journal_server.core.document import Document, parse_document
from mcp_journal_server.core.journal_service import (
    load_document,
    read_journal_text,
    save_document,
    summarize,
)
from mcp_journal_server.core.models import ParameterizedLine
from mcp_journal_server.core.serialization import line_from_dict, line_to_dict
from mcp_journal_server.core.syntax import JournalLineParser

DEFAULT_LIMIT = 500
HARD_LIMIT = 10000


def _config(
    *,
    line_separator: str | None = None,
    output_separator: str | None = None,
    skip_empty_line: bool | None = None,
) -> DocumentConfig:
    """Environment config with explicit tool arguments applied on top."""
    cfg = resolve_document_config()
    if line_separator is not None:
        cfg = replace(cfg, line_separator=parse_separator(line_separator))
    if output_separator is not None:
        cfg = replace(cfg, output_separator=parse_separator(output_separator))
    if skip_empty_line is not None:
        cfg = replace(cfg, skip_empty_line=skip_empty_line)
    return cfg


def _parser(modules: Sequence[str] | None) -> JournalLineParser:
    names = [m.strip() for m in modules or () if m.strip()]
    return JournalLineParser(modules=frozenset(names) if names else None)


async def parse_journal_impl(
    *,
    path: str,
    line_separator: str | None = None,
    include_raw_lines: bool = True,
    modules: Sequence[str] | None = None,
    limit: int | None = None,
) -> dict[str, Any]:
    """Implementation for the `parse_journal` MCP tool.

    ``path`` must resolve inside JOURNAL_BASE_DIR.
    Counts always cover the whole file; ``limit`` only caps the returned
    ``lines`` (hard-capped at HARD_LIMIT).
    """
    if limit is None:
        limit = DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    limit = min(limit, HARD_LIMIT)

    doc = await load_document(
        safe_resolve(path),
        config=_config(line_separator=line_separator),
        parser=_parser(modules),
    )

    selected = [
        (line_no, line)
        for line_no, line in enumerate(doc.lines, start=1)
        if include_raw_lines or isinstance(line, ParameterizedLine)
    ]
    parameterized = sum(1 for line in doc.lines if isinstance(line, ParameterizedLine))

    return {
        "filename": doc.filename,
        "count": len(doc.lines),
        "parameterized": parameterized,
        "raw": len(doc.lines) - parameterized,
        "truncated": len(selected) > limit,
        "lines": [line_to_dict(line, line_no=n) for n, line in selected[:limit]],
    }


def render_journal_impl(
    *,
    lines: Sequence[dict[str, Any]],
    output_separator: str | None = None,
    skip_empty_line: bool | None = None,
) -> dict[str, Any]:
    """Implementation for the `render_journal` MCP tool."""
    cfg = _config(output_separator=output_separator, skip_empty_line=skip_empty_line)
    doc = Document(lines=[line_from_dict(dict(item)) for item in lines], config=cfg)
    return {"count": len(doc.lines), "text": doc.render()}


async def rewrite_journal_impl(
    *,
    path: str,
    output_path: str | None = None,
    line_separator: str | None = None,
    output_separator: str | None = None,
    skip_empty_line: bool | None = None,
) -> dict[str, Any]:
    """Implementation for the `rewrite_journal` MCP tool.

    Parses and re-serializes a journal. ``round_trip`` reports whether the
    written text equals the text that was read.
    """
    cfg = _config(
        line_separator=line_separator,
        output_separator=output_separator,
        skip_empty_line=skip_empty_line,
    )
    source = safe_resolve(path)
    target = safe_resolve(output_path) if output_path else source

    text = await read_journal_text(source, encoding=cfg.encoding)
    doc = parse_document(text, config=cfg)
    doc.filename = str(source)
    rendered = doc.render()
    out = await save_document(doc, target)

    return {
        "path": str(out),
        "count": len(doc.lines),
        "round_trip": rendered == text,
    }


async def summarize_journal_impl(
    *,
    path: str,
    line_separator: str | None = None,
) -> dict[str, Any]:
    """Implementation for the `summarize_journal` MCP tool."""
    doc = await load_document(safe_resolve(path), config=_config(line_separator=line_separator))
    s = summarize(doc)
    return {
        "filename": doc.filename,
        "total": s.total,
        "parameterized": s.parameterized,
        "raw": s.raw,
        "blank": s.blank,
        "comments": s.comments,
        "timestamped": s.timestamped,
        "modules": dict(s.modules.most_common()),
        "calls": dict(s.calls.most_common()),
    }
