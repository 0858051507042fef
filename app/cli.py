"""
Interactive calculator.

    exprtree                  # read expressions until EOF / Ctrl-C
    exprtree -e "2*(3+4)"     # evaluate one expression
    exprtree --file exprs.txt # batch mode, CSV on stdout
"""

import argparse
import logging
import sys
from typing import Iterable, Iterator, Optional, TextIO

from exprtree.config import Settings, load_settings
from exprtree.errors import ExpressionError
from exprtree.evaluator import evaluate
from exprtree.logsink import make_sink
from exprtree.parser import parse_expression
from exprtree.printer import format_number, print_tree


def prompt_lines(prompt: str) -> Iterator[str]:
    while True:
        try:
            yield input(prompt)
        except EOFError:
            return


def handle(src: str, settings: Settings, out: TextIO, err: TextIO, sink: logging.Logger) -> bool:
    """Run one request. Returns False when it failed."""
    try:
        tree = parse_expression(src, strict=settings.strict, backend=settings.backend)
        value = evaluate(tree)
    except ExpressionError as e:
        sink.debug(f"{src!r} failed: {e}")
        err.write(f"Error: {e}\n")
        err.flush()
        return False
    if settings.show_tree:
        print_tree(tree, out, settings.precision)
    out.write(f"Result: {format_number(value, settings.precision)}\n")
    out.flush()
    return True


def run_repl(lines: Iterable[str], settings: Settings, out: TextIO, err: TextIO,
             sink: logging.Logger) -> int:
    failures = 0
    for line in lines:
        src = line.strip()
        if not src:
            continue
        if not handle(src, settings, out, err, sink):
            failures += 1
    return failures


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="exprtree", description="Parse, print and evaluate arithmetic expressions.")
    src = ap.add_mutually_exclusive_group()
    src.add_argument("-e", "--expr", help="evaluate a single expression and exit")
    src.add_argument("-f", "--file", help="evaluate every line of FILE, write CSV to stdout")
    ap.add_argument("--strict", action="store_true", default=None, help="reject trailing input")
    ap.add_argument("--backend", choices=["descent", "lark"], default=None)
    ap.add_argument("--precision", type=int, default=None, help="significant digits in output")
    ap.add_argument("--no-tree", dest="show_tree", action="store_false", default=None)
    ap.add_argument("--no-color", dest="color", action="store_false", default=None)
    ap.add_argument("--log-level", default=None)
    return ap


def main(argv: Optional[list] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    settings = load_settings(strict=args.strict, backend=args.backend, precision=args.precision,
                             show_tree=args.show_tree, color=args.color, log_level=args.log_level)
    sink = make_sink(settings.log_level, settings.color)
    sink.debug(f"Settings: {settings.model_dump()}")

    if args.file:
        from engine.batch import evaluate_many, read_expressions
        df = evaluate_many(read_expressions(args.file), settings)
        df.to_csv(sys.stdout, index=False)
        return 1 if df["error"].notna().any() else 0

    if args.expr is not None:
        return 0 if handle(args.expr, settings, sys.stdout, sys.stderr, sink) else 1

    try:
        run_repl(prompt_lines(settings.prompt), settings, sys.stdout, sys.stderr, sink)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
