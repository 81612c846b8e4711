"""Command-line front end: run a JSON AST program or start an interactive loop.

Provides the ``fwjs`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO

from .errors import FWJSError
from .evaluator import evaluate
from .loader import load_file
from .session import Session
from .values import Value, VClosure


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def _fmt_value(value: Value) -> str:
    """Format a value for display in the interactive loop."""
    if isinstance(value, VClosure):
        return f"<{value}>"
    return str(value)


def _show_vars(session: Session, dest: IO[str]) -> None:
    """Print all global bindings."""
    if not session.bindings:
        print("  (no variables defined)", file=dest)
        return
    width = max(len(k) for k in session.bindings)
    for name, value in session.bindings.items():
        print(f"  {name:<{width}} : {_fmt_value(value)}", file=dest)


def _eval_line(session: Session, line: str, dest: IO[str]) -> None:
    """Evaluate one JSON AST and echo its value; errors go to stderr."""
    try:
        result = session.eval(line)
    except FWJSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return
    print(_fmt_value(result), file=dest)


def _process_line(session: Session, line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    # ── Exit ──────────────────────────────────────────────────────────────
    if line in (":q", ":quit"):
        return False

    # ── Control commands ──────────────────────────────────────────────────
    if line == ":vars":
        _show_vars(session, dest)
        return True

    if line == ":reset":
        session.reset()
        return True

    # ── Batch file ────────────────────────────────────────────────────────
    if line.startswith("?<< "):
        filepath = line[4:].strip()
        try:
            with open(filepath, encoding="utf-8") as fh:
                for file_line in fh:
                    if not _process_line(session, file_line.rstrip("\n"), dest):
                        return False
        except OSError as exc:
            print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
        return True

    # ── One JSON AST per line ─────────────────────────────────────────────
    _eval_line(session, line, dest)
    return True


def run_file(path: str, quiet: bool = False, dest: IO[str] | None = None) -> int:
    """Evaluate the JSON AST program at *path*.  Returns the exit status."""
    dest = dest or sys.stdout
    try:
        result = evaluate(load_file(path), out=dest)
    except OSError as exc:
        print(f"error: cannot read '{path}': {exc}", file=sys.stderr)
        return 1
    except FWJSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    if not quiet:
        print(_fmt_value(result), file=dest)
    return 0


def interact(session: Session, dest: IO[str]) -> None:
    print("FWJS REPL  (:q to quit  |  :vars  :reset  |  ?<< <file>)", file=dest)

    while True:
        try:
            line = input("fwjs> ").strip()
        except EOFError:
            print(file=dest)
            break
        except KeyboardInterrupt:
            print(file=dest)
            continue

        if not _process_line(session, line, dest):
            break


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fwjs",
        description="Evaluate FWJS programs given as JSON syntax trees.",
    )
    parser.add_argument("program", nargs="?", help="JSON AST file to run; omit for an interactive loop")
    parser.add_argument("-q", "--quiet", action="store_true", help="do not print the program's final value")
    parser.add_argument("-v", "--verbose", action="store_true", help="log evaluation details to stderr")
    return parser


def main(argv: list[str] | None = None) -> int:
    """``fwjs`` / ``python -m fwjs_core.repl``."""
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.program:
        return run_file(args.program, quiet=args.quiet)

    interact(Session(), sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
