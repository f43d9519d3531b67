from __future__ import annotations

from pathlib import Path

import pytest

from mcp_journal_server.core.config import (
    DocumentConfig,
    parse_separator,
    resolve_document_config,
    safe_resolve,
)


def test_defaults_without_env() -> None:
    cfg = resolve_document_config()
    assert cfg == DocumentConfig()
    assert cfg.line_separator == "\r\n"
    assert cfg.output_separator == "\n"
    assert cfg.skip_empty_line is False


def test_parse_separator_names() -> None:
    assert parse_separator("CRLF") == "\r\n"
    assert parse_separator(" lf ") == "\n"
    with pytest.raises(ValueError):
        parse_separator("tab")


def test_env_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOURNAL_LINE_SEPARATOR", "lf")
    monkeypatch.setenv("JOURNAL_OUTPUT_SEPARATOR", "crlf")
    monkeypatch.setenv("JOURNAL_SKIP_EMPTY_LINE", "yes")

    cfg = resolve_document_config(DocumentConfig(encoding="utf-8-sig"))

    assert cfg.line_separator == "\n"
    assert cfg.output_separator == "\r\n"
    assert cfg.skip_empty_line is True
    assert cfg.encoding == "utf-8-sig"


def test_invalid_env_separator_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOURNAL_LINE_SEPARATOR", "semicolon")
    with pytest.raises(ValueError, match="JOURNAL_LINE_SEPARATOR"):
        resolve_document_config()


def test_invalid_env_bool_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOURNAL_SKIP_EMPTY_LINE", "maybe")
    with pytest.raises(ValueError, match="JOURNAL_SKIP_EMPTY_LINE"):
        resolve_document_config()


def test_safe_resolve_stays_under_base(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOURNAL_BASE_DIR", str(tmp_path))
    assert safe_resolve("a/b.jrn") == (tmp_path / "a" / "b.jrn").resolve()
    with pytest.raises(ValueError):
        safe_resolve("../outside.jrn")
