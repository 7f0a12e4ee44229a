from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from dotlisp.config import NOTATIONS, Settings, load_settings
from dotlisp.interpreter import Interpreter
from dotlisp.repl import Repl


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dotlisp",
        description="Read-eval-print loop for a small LISP dialect.",
    )
    parser.add_argument("files", nargs="*", help="source files to run; standard input if none")
    parser.add_argument("--notation", choices=NOTATIONS, help="output notation for results")
    parser.add_argument("--no-prompt", action="store_true", help="do not print a prompt before each read")
    parser.add_argument("--log-level", help="logging level, e.g. DEBUG")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = load_settings()
    except ValueError as ex:
        print(ex, file=sys.stderr)
        return 2

    settings = Settings(
        prompt=settings.prompt,
        error_prefix=settings.error_prefix,
        notation=args.notation or settings.notation,
        recursion_limit=settings.recursion_limit,
        log_level=(args.log_level or settings.log_level).upper(),
    )
    level = getattr(logging, settings.log_level, None)
    if not isinstance(level, int):
        print(f"Invalid log level: {settings.log_level}", file=sys.stderr)
        return 2
    logging.basicConfig(level=level, stream=sys.stderr)
    if settings.recursion_limit is not None:
        sys.setrecursionlimit(settings.recursion_limit)

    # One session across all inputs, so definitions carry over between files
    interp = Interpreter()
    if not args.files:
        return Repl(interp, settings, prompt=not args.no_prompt).run(sys.stdin, sys.stdout)

    for path in args.files:
        with open(path, encoding="utf-8") as source:
            Repl(interp, settings, prompt=False).run(source, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
