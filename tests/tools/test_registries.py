from __future__ import annotations

from pathlib import Path

import pytest

from mcp_journal_server.core.document import parse_document
from mcp_journal_server.core.models import ParameterizedLine
from mcp_journal_server.prompts import registry as prompts
from mcp_journal_server.resources import registry as resources


def test_format_modules() -> None:
    assert prompts._format_modules(None) == "null"
    assert prompts._format_modules("JrnCmd, JrnWdt") == '["JrnCmd", "JrnWdt"]'
    assert prompts._format_modules([" JrnDbg ", ""]) == '["JrnDbg"]'


def test_resource_path_rules(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JOURNAL_BASE_DIR", str(tmp_path))
    (tmp_path / "session.jrn").write_text("JrnCmd.A();", encoding="utf-8")
    (tmp_path / "archive.jrn.gz").write_bytes(b"")
    (tmp_path / "script.py").write_text("", encoding="utf-8")

    assert resources._resolve_resource_path("session.jrn") == (tmp_path / "session.jrn").resolve()
    assert resources._resolve_resource_path("archive.jrn.gz").name == "archive.jrn.gz"
    with pytest.raises(ValueError):
        resources._resolve_resource_path("script.py")
    with pytest.raises(FileNotFoundError):
        resources._resolve_resource_path("missing.jrn")


def test_sample_journal_parses_losslessly() -> None:
    doc = parse_document(resources.SAMPLE_JOURNAL)

    assert sum(isinstance(line, ParameterizedLine) for line in doc.lines) == 4
    assert "\r\n".join(doc.line_literals()) == resources.SAMPLE_JOURNAL


def test_server_module_builds() -> None:
    from mcp_journal_server.server import journal_server

    assert journal_server.mcp.name == "journal-script"
