"""Command line entry point: parse → solve → render."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from logic_solver import Grid, resolve_limits
from orchestrator import log as event_log
from orchestrator.pipeline import public_summary, run_grid
from project_config import get_section
from puzzle_io import GridFormatError, parse, render, render_boxed
from puzzle_io.pdf import PdfPage, render_pdf
from puzzle_io.schema_validator import SchemaValidationError, load_puzzle_document, validate_document

EXIT_OK = 0
EXIT_INPUT_ERROR = 1
EXIT_STALLED = 2

_LOGGER = logging.getLogger(__name__)


def _read_grid(source: str) -> Tuple[Grid, str]:
    if source == "-":
        return parse(sys.stdin.read()), "stdin"
    path = Path(source)
    if path.suffix.lower() == ".json":
        grid, name = load_puzzle_document(path)
        return grid, name or path.stem
    return parse(path.read_text("utf-8")), path.stem


def _limits_from_args(args: argparse.Namespace):
    return resolve_limits(cli={"max_depth": args.max_depth, "subset_cap": args.subset_cap})


def _configure_logging(args: argparse.Namespace) -> None:
    level_name = args.log_level or str(get_section("logging.level", "WARNING"))
    logging.basicConfig(
        level=getattr(logging, level_name.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    log_dir = args.log_dir if args.log_dir is not None else get_section("logging.event_dir", "")
    if log_dir:
        max_bytes = get_section("logging.max_bytes", None)
        event_log.configure(log_dir, max_bytes=int(max_bytes) if max_bytes else None)


def _run_one(source: str, args: argparse.Namespace) -> Dict[str, Any]:
    grid, name = _read_grid(source)
    summary = run_grid(grid, limits=_limits_from_args(args), name=name, record_trace=args.trace)
    if args.trace:
        validate_document(summary["trace"], "solve_trace")
    summary["puzzle"] = grid
    return summary


def cmd_solve(args: argparse.Namespace) -> int:
    summary = _run_one(args.file, args)
    if args.pdf:
        render_pdf([PdfPage(summary["puzzle"], summary["result"], title=summary["name"] or "")], args.pdf)

    if args.json:
        payload = public_summary(summary)
        payload.pop("puzzle", None)
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        text = render_boxed(summary["result"]) if args.boxed else render(summary["result"])
        print(text)

    if summary["status"] != "solved":
        print(summary["message"], file=sys.stderr)
        return EXIT_STALLED
    return EXIT_OK


def cmd_batch(args: argparse.Namespace) -> int:
    summaries: List[Dict[str, Any]] = []
    pages: List[PdfPage] = []
    for source in args.files:
        summary = _run_one(source, args)
        pages.append(PdfPage(summary["puzzle"], summary["result"], title=summary["name"] or ""))
        payload = public_summary(summary)
        payload.pop("puzzle", None)
        summaries.append(payload)
    if args.pdf and pages:
        render_pdf(pages, args.pdf)
    print(json.dumps(summaries, indent=2, sort_keys=True))
    if any(item["status"] != "solved" for item in summaries):
        return EXIT_STALLED
    return EXIT_OK


def _add_common(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--max-depth", type=int, default=None, help="Override the recursion cap (default from config)")
    parser.add_argument(
        "--subset-cap", type=int, default=None, help="Override the subset enumeration cap (default from config)"
    )
    parser.add_argument("--trace", action="store_true", help="Include the per-sweep trace in JSON output")
    parser.add_argument("--pdf", default=None, help="Also render the puzzle and result to this PDF path")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Solve 9x9 Sudoku puzzles by pure logical deduction")
    parser.add_argument("--log-level", default=None, help="Logging level (default from config)")
    parser.add_argument("--log-dir", default=None, help="Directory for JSONL run events")
    sub = parser.add_subparsers(dest="command", required=True)

    solve = sub.add_parser("solve", help="Solve one puzzle file ('-' reads stdin)")
    solve.add_argument("file")
    solve.add_argument("--json", action="store_true", help="Print a JSON summary instead of the grid")
    solve.add_argument("--boxed", action="store_true", help="Draw block separators")
    _add_common(solve)
    solve.set_defaults(func=cmd_solve)

    batch = sub.add_parser("batch", help="Solve several puzzle files and print a JSON summary")
    batch.add_argument("files", nargs="+")
    _add_common(batch)
    batch.set_defaults(func=cmd_batch)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args)
    try:
        return args.func(args)
    except (GridFormatError, SchemaValidationError, OSError) as exc:
        _LOGGER.debug("input error", exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_INPUT_ERROR


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
