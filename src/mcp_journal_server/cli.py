from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Sequence
from dataclasses import replace
from pathlib import Path

from mcp_journal_server.core.config import SEPARATORS, parse_separator, resolve_document_config
from mcp_journal_server.core.document import Document
from mcp_journal_server.core.models import Line, ParameterizedLine
from mcp_journal_server.core.serialization import line_to_dict


def _separator(s: str) -> str:
    try:
        return parse_separator(s)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def _describe(line: Line) -> str:
    if isinstance(line, ParameterizedLine):
        ts = line.prefix or "-"
        values = ", ".join(p.value for p in line.parameters)
        return f"{ts} {line.module}.{line.action}({values})"
    return f"- raw {line.content!r}"


def _read_text(path: Path, encoding: str) -> str:
    with open(path, encoding=encoding, newline="") as f:
        return f.read()


def main(argv: Sequence[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Parse and re-serialize journal scripts.")
    p.add_argument("journal_path")
    choices = ", ".join(SEPARATORS)
    p.add_argument("--eol", type=_separator, default=None, help=f"Input line separator ({choices}). Default: crlf")
    p.add_argument("--out-eol", type=_separator, default=None, help=f"Output line separator ({choices}). Default: lf")
    p.add_argument("--skip-empty", action="store_true", help="Omit empty lines when writing")
    p.add_argument("--json", dest="as_json", action="store_true", help="Print lines as JSON")
    p.add_argument("--check", action="store_true", help="Exit 1 unless the file round-trips byte-identically")
    p.add_argument("--write", default=None, help="Write the re-serialized journal to this path")

    args = p.parse_args(argv)
    path = Path(args.journal_path)

    try:
        cfg = resolve_document_config()
        if args.eol is not None:
            cfg = replace(cfg, line_separator=args.eol)
        if args.out_eol is not None:
            cfg = replace(cfg, output_separator=args.out_eol)
        if args.skip_empty:
            cfg = replace(cfg, skip_empty_line=True)

        doc = Document(config=cfg)
        doc.open(path)
        if args.check:
            original = _read_text(path, cfg.encoding)
        if args.write:
            doc.save_as(args.write)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.as_json:
        payload = [line_to_dict(line, line_no=n) for n, line in enumerate(doc.lines, start=1)]
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for n, line in enumerate(doc.lines, start=1):
            print(f"{n} {_describe(line)}")
        calls = sum(1 for line in doc.lines if isinstance(line, ParameterizedLine))
        print(f"\nParsed {len(doc.lines)} lines ({calls} calls).")

    if args.check and doc.render() != original:
        print("Round trip differs from the source file.", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
