"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_journal_server.core.config import BASE_DIR_ENV, base_dir, safe_resolve
from mcp_journal_server.core.journal_service import read_journal_text
from mcp_journal_server.core.serialization import line_payload_schema

ALLOWED_FILE_SUFFIXES = {".jrn", ".txt", ".log"}
TEXT_ENCODING = "utf-8"

GRAMMAR = """\
line        := full_line | raw_line
full_line   := "/*" timestamp "*/ " call_or_raw
call        := module "." action "(" params ")" suffix
module      := "Jrn" letter letter letter
action      := letter+
params      := parameter ("," " "? parameter)*
parameter   := quoted_string | bareword    ; optionally followed by "/*" comment "*/"
timestamp   := "[" YYYY "-" MM "-" DD " " HH ":" MM ":" SS "(" mmm ")" "]"

Timestamp digits may be padded with spaces. The parameter list runs to the
last ")" on the line; everything after it is the suffix. Lines that do not
match, and lines starting with "//", are kept verbatim as raw lines.
"""

SAMPLE_JOURNAL = (
    "// journal recorded by the test harness\r\n"
    "/*[2023- 1-15 09:05:30(123)]*/ JrnWdt.MouseMove(10,20);\r\n"
    '/*[2023- 1-15 09:05:31(  7)]*/ JrnCmd.Execute("ExportToGFCCommand", "a,b", 1/*count*/);\r\n'
    "\r\n"
    'JrnCmd.CompareExpectedResult("ExportToGFCCommand", "Gfc导出数据对比成功", "Text");\r\n'
    "JrnDbg.Flush();"
)


def _allowed_suffix(path: Path) -> str:
    """Return the effective suffix for allowlist checks."""
    suffix = path.suffix.lower()
    if suffix == ".gz":
        suffix = path.with_suffix("").suffix.lower()
    return suffix


def _ensure_allowed_suffix(path: Path) -> None:
    """Validate the file suffix against the allowlist."""
    suffix = _allowed_suffix(path)
    if suffix not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")


def _resolve_resource_path(path: str) -> Path:
    """Resolve and validate a resource file path."""
    resolved = safe_resolve(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"File not found: {resolved}")
    _ensure_allowed_suffix(resolved)
    return resolved


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://journal/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        return (
            "Resources:\n"
            "- app://journal/help\n"
            "- app://journal/grammar\n"
            "- app://journal/schemas/line\n"
            "- app://journal/examples/sample-journal\n"
            f"- file://{{path}} (restricted to {BASE_DIR_ENV}; allowed: {allowed}, .gz)\n"
            "- journal://{path} (same rules as file://; intended for journals)\n"
            f"\nBase directory: {base_dir()}\n"
        )

    @mcp.resource("app://journal/grammar")
    def grammar() -> str:
        """Return the journal line grammar."""
        return GRAMMAR

    @mcp.resource("app://journal/examples/sample-journal")
    def sample_journal() -> str:
        """Return a tiny CRLF-separated sample journal for demos and tests."""
        return SAMPLE_JOURNAL

    @mcp.resource("app://journal/schemas/line")
    def line_schema() -> dict[str, Any]:
        """Return the JSON schema for structured journal lines."""
        return line_payload_schema()

    @mcp.resource("file://{path}")
    async def read_file(path: str) -> str:
        """Read a text file from within JOURNAL_BASE_DIR."""
        p = _resolve_resource_path(path)
        return await read_journal_text(p, encoding=TEXT_ENCODING)

    @mcp.resource("journal://{path}")
    async def read_journal(path: str) -> str:
        """Return the full journal contents."""
        p = _resolve_resource_path(path)
        return await read_journal_text(p, encoding=TEXT_ENCODING)
