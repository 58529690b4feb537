from __future__ import annotations
import argparse
import json
import subprocess
import sys
from typing import List, Optional, TextIO
from lexer import Lexer
from tokens import Token
from interpreter import Interpreter
from pretty_printer import PrettyPrinter
from report_json import report_to_json
from state_viz import write_and_render


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def interpret(
    text: str, out: Optional[TextIO] = None, err: Optional[TextIO] = None
) -> Interpreter:
    """Evaluate a program with a fresh symbol table and return the finished interpreter."""
    interp = Interpreter(text, out=out, err=err)
    interp.run()
    return interp


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    dump_json_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
) -> Interpreter:
    """Process a single program: optionally list tokens, evaluate, and write artifacts."""
    if print_tokens:
        print(PrettyPrinter.print_tokens(lex(text)))

    interp = interpret(text)

    if dump_json_path:
        try:
            with open(dump_json_path, "w", encoding="utf-8") as fh:
                json.dump(report_to_json(interp), fh, indent=2)
        except OSError as e:
            print(f"Failed to write JSON report to {dump_json_path}: {e}", file=sys.stderr)

    if viz_path:
        try:
            write_and_render(interp.state_trace, viz_path, fmt=viz_format)
        except (OSError, RuntimeError, subprocess.CalledProcessError) as e:
            print(f"Failed to render state visualization to {viz_path}: {e}", file=sys.stderr)

    return interp


class ArgumentParser(argparse.ArgumentParser):
    """argparse parser that exits with status 1 on usage errors."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        print(f"{self.prog}: error: {message}", file=sys.stderr)
        sys.exit(1)


def build_arg_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="assigncalc",
        description="Evaluate a file of ';'-separated assignment statements",
    )
    parser.add_argument("file", help="Path to source file to evaluate")
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--dump-json", dest="dump_json", help="Path to write the run report as JSON"
    )
    parser.add_argument(
        "--viz-states",
        dest="viz_states",
        help="Path (without extension) to write a Graphviz rendering of the driver states",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        with open(args.file, "r", encoding="utf-8") as fh:
            text = fh.read()
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error opening file: {args.file} ({e})", file=sys.stderr)
        parser.print_usage(sys.stderr)
        return 1

    # Statement errors are reported in the output and do not affect the exit code.
    process_program(
        text,
        print_tokens=args.print_tokens,
        dump_json_path=args.dump_json,
        viz_path=args.viz_states,
        viz_format=args.viz_format,
    )
    return 0


def run_cli() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run_cli()
