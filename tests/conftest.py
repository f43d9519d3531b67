from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

JOURNAL_LINES = [
    "// recorded by the test harness",
    "/*[2023- 1-15 09:05:30(123)]*/ JrnWdt.MouseMove(10,20);",
    '/*[2023- 1-15 09:05:31(  7)]*/ JrnCmd.Execute("Export", "a,b", 1/*count*/);',
    "",
    'JrnCmd.CompareExpectedResult("ExportToGFCCommand", "Gfc导出数据对比成功", "Text");',
    "JrnDbg.Flush();",
    "not a call at all",
]


@pytest.fixture
def journal_lines() -> list[str]:
    return list(JOURNAL_LINES)


@pytest.fixture
def write_journal() -> Callable[[Path], str]:
    """Write the sample journal with CRLF separators and return its text."""

    def _write(path: Path) -> str:
        text = "\r\n".join(JOURNAL_LINES)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(text)
        return text

    return _write


@pytest.fixture(autouse=True)
def _clean_journal_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    for name in (
        "JOURNAL_LINE_SEPARATOR",
        "JOURNAL_OUTPUT_SEPARATOR",
        "JOURNAL_SKIP_EMPTY_LINE",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("JOURNAL_BASE_DIR", str(tmp_path))
