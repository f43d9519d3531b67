from __future__ import annotations

from pathlib import Path

import pytest

from mcp_journal_server.core.config import DocumentConfig
from mcp_journal_server.core.document import Document, parse_document
from mcp_journal_server.core.models import ParameterizedLine, RawLine


def test_open_splits_on_crlf(tmp_path: Path, write_journal, journal_lines) -> None:
    path = tmp_path / "session.jrn"
    write_journal(path)

    doc = Document()
    doc.open(path)

    assert doc.filename == str(path)
    assert len(doc.lines) == len(journal_lines)
    assert isinstance(doc.lines[0], RawLine)
    assert isinstance(doc.lines[1], ParameterizedLine)
    assert doc.lines[3] == RawLine("")
    assert doc.line_literals() == journal_lines


def test_default_save_joins_with_lf(tmp_path: Path, write_journal, journal_lines) -> None:
    path = tmp_path / "session.jrn"
    write_journal(path)
    out = tmp_path / "out.jrn"

    doc = Document()
    doc.open(path)
    doc.save_as(out)

    assert out.read_bytes() == "\n".join(journal_lines).encode("utf-8")


def test_round_trip_with_matching_separators(tmp_path: Path, write_journal) -> None:
    path = tmp_path / "session.jrn"
    original = write_journal(path)

    doc = Document(config=DocumentConfig(line_separator="\r\n", output_separator="\r\n"))
    doc.open(path)
    doc.save()

    with open(path, encoding="utf-8", newline="") as f:
        assert f.read() == original


def test_reparse_of_saved_output_is_equivalent(tmp_path: Path, write_journal) -> None:
    path = tmp_path / "session.jrn"
    write_journal(path)

    doc = Document()
    doc.open(path)
    again = parse_document(doc.render(), config=DocumentConfig(line_separator="\n"))

    assert again.lines == doc.lines


def test_skip_empty_line(journal_lines) -> None:
    cfg = DocumentConfig(line_separator="\n", skip_empty_line=True)
    doc = parse_document("\n".join(journal_lines), config=cfg)

    assert "" not in doc.line_literals()
    assert len(doc.line_literals()) == len(journal_lines) - 1
    assert len(doc.lines) == len(journal_lines)


def test_load_appends_and_open_replaces(tmp_path: Path) -> None:
    a = tmp_path / "a.jrn"
    b = tmp_path / "b.jrn"
    a.write_bytes(b"JrnCmd.A();")
    b.write_bytes(b"JrnCmd.B();\r\nJrnCmd.C();")

    doc = Document()
    doc.load(a)
    doc.load(b)
    assert [line.literal() for line in doc.lines] == ["JrnCmd.A();", "JrnCmd.B();", "JrnCmd.C();"]

    doc.open(a)
    assert doc.line_literals() == ["JrnCmd.A();"]


def test_close_clears(tmp_path: Path, write_journal) -> None:
    path = tmp_path / "session.jrn"
    write_journal(path)

    doc = Document()
    doc.open(path)
    doc.close()

    assert doc.lines == []
    assert doc.filename == ""


def test_save_without_filename_raises() -> None:
    with pytest.raises(ValueError):
        Document().save()


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        Document().open(tmp_path / "missing.jrn")


def test_empty_text_is_one_empty_line() -> None:
    doc = parse_document("")
    assert doc.lines == [RawLine("")]
    assert doc.render() == ""


def test_open_missing_file_keeps_current_lines(tmp_path: Path, write_journal) -> None:
    path = tmp_path / "session.jrn"
    write_journal(path)

    doc = Document()
    doc.open(path)
    before = list(doc.lines)

    with pytest.raises(FileNotFoundError):
        doc.open(tmp_path / "missing.jrn")

    assert doc.lines == before
    assert doc.filename == str(path)
