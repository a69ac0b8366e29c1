"""Command line entry point: `skim [FILE]`."""

from __future__ import annotations

import argparse
import logging
import sys

from skim import __version__
from skim.config import get_log_level
from skim.errors import SkimError, SkimSyntaxError
from skim.interpreter import Interpreter
from skim.printer import format_tokens
from skim.reader.lexer import lex

logger = logging.getLogger("skim")
# user-facing diagnostics: always shown, written as the bare message
diagnostics = logging.getLogger("skim.diagnostics")

EXIT_OK = 0
EXIT_EVALUATION_ERROR = 1
EXIT_SYNTAX_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="skim",
        description="Evaluate a Skim program and print the result of each top-level form.",
    )
    parser.add_argument("file", nargs="?", help="program file (default: read stdin)")
    parser.add_argument("--tokens", action="store_true", help="print the token stream and exit")
    parser.add_argument("--tree", action="store_true", help="print the parse tree before the results")
    parser.add_argument("--stats", action="store_true", help="print arena allocation statistics to stderr")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="increase log verbosity")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _stderr_handler(fmt: str) -> logging.Handler:
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _install(target: logging.Logger, handler: logging.Handler, level: int) -> None:
    for old in list(target.handlers):
        target.removeHandler(old)
    target.addHandler(handler)
    target.setLevel(level)
    target.propagate = False


def configure_logging(verbosity: int) -> None:
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, get_log_level(), logging.WARNING)
    # handlers are rebuilt on every call so they follow the current sys.stderr
    _install(logger, _stderr_handler("%(name)s: %(levelname)s: %(message)s"), level)
    _install(diagnostics, _stderr_handler("%(message)s"), logging.ERROR)


def read_source(path: str | None) -> str:
    if path is None or path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as f:
        return f.read()


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        source = read_source(args.file)
    except OSError as e:
        diagnostics.error("skim: cannot read %s: %s", args.file, e.strerror)
        return EXIT_EVALUATION_ERROR

    if args.tokens:
        try:
            print(format_tokens(lex(source)))
        except SkimSyntaxError as e:
            diagnostics.error("error: %s", e)
            return EXIT_SYNTAX_ERROR
        return EXIT_OK

    interp = None
    try:
        interp = Interpreter()
        n = interp.run(source, out=sys.stdout, show_tree=args.tree)
        logger.info("evaluated %d form(s)", n)
        return EXIT_OK
    except SkimSyntaxError as e:
        logger.debug("syntax error", exc_info=True)
        diagnostics.error("error: %s", e)
        return EXIT_SYNTAX_ERROR
    except SkimError as e:
        logger.debug("evaluation error", exc_info=True)
        diagnostics.error("error: %s", e)
        return EXIT_EVALUATION_ERROR
    finally:
        sys.stdout.flush()
        if interp is not None:
            if args.stats:
                stats = interp.arena.stats()
                print(" ".join(f"{k}={v}" for k, v in stats.items()), file=sys.stderr)
            interp.close()


if __name__ == "__main__":
    sys.exit(main())
