"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: parse, render, rewrite and summarize journal scripts
- Resources: grammar notes, a sample journal and file access via URI
- Prompts: reusable conversation templates that clients can invoke

Run locally (stdio):
    python -m mcp_journal_server.server.journal_server
"""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_journal_server.prompts.registry import register_prompts
from mcp_journal_server.resources.registry import register_resources
from mcp_journal_server.tools.journal import (
    parse_journal_impl,
    render_journal_impl,
    rewrite_journal_impl,
    summarize_journal_impl,
)

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv("JOURNAL_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


mcp = FastMCP("journal-script", json_response=True)

register_resources(mcp)
register_prompts(mcp)


@mcp.tool()
async def parse_journal(
    path: str,
    line_separator: str | None = None,
    include_raw_lines: bool = True,
    modules: Sequence[str] | None = None,
    limit: int | None = None,
) -> dict[str, Any]:
    """Parse a journal script into structured lines.

    Parameters
    ----------
    path:
        Path to a local journal file. Supports plain text and .gz. Relative paths resolve
        against JOURNAL_BASE_DIR; paths outside it are rejected.
    line_separator:
        How the file's lines are separated: "crlf" (default), "lf", "cr" or "os".
    include_raw_lines:
        When false, only parameterized (call) lines are returned.
    modules:
        Optional module names (e.g., ["JrnCmd", "JrnWdt"]). Calls to other
        modules are reported as raw lines.
    limit:
        Maximum number of lines returned (hard-capped in the implementation).

    Returns
    -------
    dict:
        {"filename", "count", "parameterized", "raw", "truncated", "lines": list[dict]}
    """
    return await parse_journal_impl(
        path=path,
        line_separator=line_separator,
        include_raw_lines=include_raw_lines,
        modules=modules,
        limit=limit,
    )


@mcp.tool()
def render_journal(
    lines: list[dict[str, Any]],
    output_separator: str | None = None,
    skip_empty_line: bool | None = None,
) -> dict[str, Any]:
    """Render structured lines (as returned by parse_journal) back to text.

    Each line is {"type": "raw", "content": ...} or {"type": "parameterized",
    "module", "action", "parameters": [{"value", "prefix", "comment"}],
    "prefix", "suffix"}. Extra keys such as line_no are ignored.
    """
    return render_journal_impl(
        lines=lines,
        output_separator=output_separator,
        skip_empty_line=skip_empty_line,
    )


@mcp.tool()
async def rewrite_journal(
    path: str,
    output_path: str | None = None,
    line_separator: str | None = None,
    output_separator: str | None = None,
    skip_empty_line: bool | None = None,
) -> dict[str, Any]:
    """Parse and re-save a journal inside JOURNAL_BASE_DIR.

    Returns {"path", "count", "round_trip"}; round_trip is true when the
    written text is identical to the text that was read.
    """
    return await rewrite_journal_impl(
        path=path,
        output_path=output_path,
        line_separator=line_separator,
        output_separator=output_separator,
        skip_empty_line=skip_empty_line,
    )


@mcp.tool()
async def summarize_journal(path: str, line_separator: str | None = None) -> dict[str, Any]:
    """Count line kinds, modules and module.action calls in a journal inside JOURNAL_BASE_DIR."""
    return await summarize_journal_impl(path=path, line_separator=line_separator)


def main(argv: Sequence[str] | None = None) -> None:
    """Start the MCP server over stdio."""
    _configure_logging()
    LOGGER.debug("Starting MCP server (transport=stdio)")
    _ = argv or sys.argv[1:]
    mcp.run(transport="stdio")


if __name__ == "__main__":
    main()
