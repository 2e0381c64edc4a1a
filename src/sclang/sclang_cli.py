"""
SCLANG CLI Entrypoint.

This module provides the command-line interface for inspecting SCLANG source.
It runs the front end (lex → parse) and prints the result as JSON.

Features:
    - Read source from `.sc` files or inline strings.
    - Print the parsed AST, or the raw token stream with `--tokens`.
    - Optionally pretty-print the JSON output.
    - Report lex and parse errors on stderr with a non-zero exit status.

Example usage:
    sclang script.sc
    sclang -s "let x = 5" -p
    sclang -s "while x == 1 { x + 1 }" --tokens
    sclang script.sc --verbose

Functions:
    run_sclang(source: str, is_string: bool = False, tokens: bool = False, pretty: bool = False) -> None:
        Executes the front-end pipeline (read → lex → parse → print).

    main() -> None:
        Parses CLI arguments and invokes `run_sclang`.
"""

import argparse
import json
import logging
import sys
from typing import Any

from sclang.sclang_errors import SclangError
from sclang.sclang_lexer import Token, tokenise
from sclang.sclang_parser import Parser

logger = logging.getLogger(__name__)


def token_to_dict(tok: Token) -> dict[str, Any]:
    return {"kind": tok.kind.name, "value": tok.value, "line": tok.line, "col": tok.col}


def run_sclang(
    source: str,
    is_string: bool = False,
    tokens: bool = False,
    pretty: bool = False,
) -> None:
    """
    Run the SCLANG front end and print its output as JSON.

    Args:
        source (str): The SCLANG source code or path to a `.sc` file.
        is_string (bool): If True, treats `source` as raw code instead of a file path. Defaults to False.
        tokens (bool): If True, prints the token stream instead of the AST. Defaults to False.
        pretty (bool): If True, indents the JSON output. Defaults to False.

    Raises:
        ValueError: If `is_string` is False and the source does not end with '.sc'.
        LexError: If the source contains a malformed numeral.
        ParseError: If the token stream does not match the grammar.
    """
    if not is_string and not source.endswith(".sc"):
        raise ValueError("Only .sc files are supported.")
    # 1. Read source
    if not is_string:
        logger.debug("reading %s", source)
        with open(source, encoding="utf-8") as f:
            source = f.read()

    indent = 2 if pretty else None

    # 2. Lexing only
    if tokens:
        print(json.dumps([token_to_dict(tok) for tok in tokenise(source)], indent=indent))
        return

    # 3. Parsing
    ast = Parser(source).parse()
    print(json.dumps(ast.to_dict(), indent=indent))


def main() -> None:
    """
    Entry point for the SCLANG CLI.

    Supported flags:
        - `-s`, `--string`: Interpret source as a raw string instead of a file path.
        - `-t`, `--tokens`: Print the token stream instead of the AST.
        - `-p`, `--pretty`: Indent the JSON output.
        - `--verbose`: Log front-end progress to stderr.

    Lex and parse errors are printed to stderr and exit with status 1.
    """
    parser = argparse.ArgumentParser(prog="sclang")
    parser.add_argument("source", help="Filename or raw source (with -s)")
    parser.add_argument(
        "-s", "--string", action="store_true", help="Interpret source as literal string"
    )
    parser.add_argument(
        "-t", "--tokens", action="store_true", help="Print tokens instead of the AST"
    )
    parser.add_argument("-p", "--pretty", action="store_true", help="Indent JSON output")
    parser.add_argument("--verbose", action="store_true", help="Log progress to stderr")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        run_sclang(
            source=args.source,
            is_string=args.string,
            tokens=args.tokens,
            pretty=args.pretty,
        )
    except (SclangError, ValueError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__" and not any("pytest" in arg for arg in sys.argv):
    main()
