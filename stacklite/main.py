from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from stacklite.api import compile_source, format_tokens
from stacklite.checker import check
from stacklite.config import StackliteSettings, load_settings
from stacklite.errors import CompileError, VMError
from stacklite.scanner import scan
from stacklite.schemas import DiagnosticModel, ProgramModel
from stacklite.vm import run_program

logger = logging.getLogger(__name__)

DEMO_PROGRAM = "1 2 +\nprint\n3 4 +\nprint\n"

EXIT_COMPILE_ERROR = 1
EXIT_RUNTIME_ERROR = 3


def _existing_path(value: str) -> Path:
    p = Path(value)
    if not p.is_file():
        raise argparse.ArgumentTypeError(f"path not found: {value}")
    return p


def _add_source_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("path", nargs="?", type=_existing_path, default=None)
    p.add_argument("-e", "--eval", dest="text", default=None, help="program text to use")


def _read_source(args: argparse.Namespace, *, settings: StackliteSettings) -> tuple[str, str]:
    if args.text is not None:
        return settings.source_name, args.text
    if args.path is not None:
        return str(args.path), args.path.read_text(encoding="utf-8")
    return settings.source_name, DEMO_PROGRAM


def _report(err: CompileError, *, as_json: bool) -> int:
    if as_json:
        print(DiagnosticModel.from_error(err).model_dump_json(), file=sys.stderr)
    else:
        print(str(err), file=sys.stderr)
    return EXIT_COMPILE_ERROR


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="stacklite")
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="override STACKLITE_LOG_LEVEL",
    )
    sub = parser.add_subparsers(dest="cmd", required=True)

    run_p = sub.add_parser("run", help="scan, check and execute a program")
    _add_source_args(run_p)

    check_p = sub.add_parser("check", help="scan and check a program without running it")
    _add_source_args(check_p)
    check_p.add_argument("--json", action="store_true", help="emit diagnostics as JSON")

    tokens_p = sub.add_parser("tokens", help="print the scanned token sequence")
    _add_source_args(tokens_p)
    tokens_p.add_argument("--json", action="store_true", help="emit tokens as JSON")

    args = parser.parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as e:
        parser.error(str(e))
    logging.basicConfig(
        level=args.log_level or settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    name, src = _read_source(args, settings=settings)
    logger.info("loaded %s (%d chars)", name, len(src))

    if args.cmd == "tokens":
        try:
            program = scan(name, src)
        except CompileError as e:
            return _report(e, as_json=args.json)
        if args.json:
            print(ProgramModel.from_program(program).model_dump_json(indent=2))
        else:
            print(format_tokens(program))
        return 0

    if args.cmd == "check":
        try:
            check(scan(name, src))
        except CompileError as e:
            return _report(e, as_json=args.json)
        print("ok")
        return 0

    if args.cmd == "run":
        try:
            program = compile_source(src=src, name=name)
        except CompileError as e:
            return _report(e, as_json=False)
        try:
            run_program(program, out=sys.stdout)
        except VMError as e:
            print(str(e), file=sys.stderr)
            return EXIT_RUNTIME_ERROR
        return 0

    raise AssertionError(f"unhandled command: {args.cmd}")
