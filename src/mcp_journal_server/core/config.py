"""Document I/O configuration with environment overrides."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

SEPARATORS: dict[str, str] = {
    "crlf": "\r\n",
    "lf": "\n",
    "cr": "\r",
    "os": os.linesep,
}

LINE_SEPARATOR_ENV = "JOURNAL_LINE_SEPARATOR"
OUTPUT_SEPARATOR_ENV = "JOURNAL_OUTPUT_SEPARATOR"
SKIP_EMPTY_LINE_ENV = "JOURNAL_SKIP_EMPTY_LINE"
BASE_DIR_ENV = "JOURNAL_BASE_DIR"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class DocumentConfig:
    """How journal text is split on load and joined on save.

    Journals are written by the recorder with CRLF, while saves join with LF;
    use the same separator for both to get byte-identical round trips.
    """

    line_separator: str = "\r\n"
    output_separator: str = "\n"
    skip_empty_line: bool = False
    encoding: str = "utf-8"


def parse_separator(value: str) -> str:
    """Map a separator name (crlf, lf, cr, os) to its characters."""
    name = value.strip().lower()
    try:
        return SEPARATORS[name]
    except KeyError as e:
        allowed = ", ".join(SEPARATORS)
        raise ValueError(f"Unknown line separator '{value}'. Allowed: {allowed}") from e


def _env_separator(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    try:
        return parse_separator(raw)
    except ValueError as exc:
        raise ValueError(f"{name} must be one of: {', '.join(SEPARATORS)}") from exc


def _env_bool(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None or raw == "":
        return None
    value = raw.strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ValueError(f"{name} must be a boolean (1/0, true/false, yes/no)")


def resolve_document_config(cfg: DocumentConfig | None = None) -> DocumentConfig:
    """Return config with optional env overrides applied."""
    if cfg is None:
        cfg = DocumentConfig()

    overrides: dict[str, object] = {}
    line_sep = _env_separator(LINE_SEPARATOR_ENV)
    if line_sep is not None:
        overrides["line_separator"] = line_sep
    out_sep = _env_separator(OUTPUT_SEPARATOR_ENV)
    if out_sep is not None:
        overrides["output_separator"] = out_sep
    skip = _env_bool(SKIP_EMPTY_LINE_ENV)
    if skip is not None:
        overrides["skip_empty_line"] = skip

    if not overrides:
        return cfg
    return replace(cfg, **overrides)


def base_dir() -> Path:
    """Return the resolved base directory for files reachable over MCP."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def safe_resolve(path: str | Path) -> Path:
    """Resolve a path under the configured base directory."""
    base = base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p
