"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from mcp.server.fastmcp import FastMCP


def _format_modules(modules: Sequence[str] | str | None) -> str:
    """Return module names as a JSON array literal for prompt display."""
    if modules is None:
        return "null"
    if isinstance(modules, str):
        items = [s.strip() for s in modules.split(",") if s.strip()]
    else:
        items = [str(s).strip() for s in modules if str(s).strip()]
    if not items:
        return "null"
    quoted = ", ".join(f'"{item}"' for item in items)
    return f"[{quoted}]"


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def summarize_resource(uri: str) -> list[dict[str, Any]]:
        """Build a prompt that summarizes a resource URI."""
        return [
            {
                "role": "system",
                "content": (
                    "You are a precise assistant. Summarize the provided resource clearly and "
                    "concisely. Extract key points, risks, and actionable items."
                ),
            },
            {
                "role": "user",
                "content": [
                    {"type": "text", "text": "Summarize this resource:"},
                    {"type": "resource", "uri": uri},
                ],
            },
        ]

    @mcp.prompt()
    def review_journal(
        path: str,
        line_separator: str = "crlf",
        modules: Sequence[str] | str | None = None,
    ) -> list[dict[str, Any]]:
        """Build a prompt for reviewing a recorded journal script."""
        call_block = "\n".join(
            [
                f"- path: {path}",
                f"- line_separator: {line_separator}",
                f"- modules: {_format_modules(modules)}",
                "- include_raw_lines: true",
            ]
        )
        return [
            {
                "role": "system",
                "content": (
                    "You are a test automation assistant reviewing recorded journal scripts. "
                    "Each call line looks like JrnXxx.Action(params); and may carry a "
                    "/*[timestamp]*/ prefix. Do not invent lines; quote only tool output."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Review the journal using summarize_journal and parse_journal. "
                    "Follow this workflow:\n"
                    "- Call summarize_journal first to see which modules and actions occur.\n"
                    "- Then call parse_journal with the parameters below.\n"
                    "- Point out raw lines that look like malformed calls "
                    "(e.g., a Jrn prefix that did not parse).\n"
                    "- Note long gaps between consecutive timestamps.\n"
                    "- Keep the response concise.\n\n"
                    "Call parse_journal with:\n"
                    f"{call_block}\n\n"
                    "Return this structure:\n"
                    "1) Overview (line counts, modules)\n"
                    "2) Suspicious lines (line_no + literal)\n"
                    "3) Timing notes\n"
                ),
            },
        ]
