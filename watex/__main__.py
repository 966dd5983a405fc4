import argparse
import logging
import sys
from typing import List, Optional

from .diagnostics import collect_diagnostics, render_diagnostics
from .lexer import Lexer

log = logging.getLogger('watex')


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog='watex', description="Tokenize LaTeX math-mode source.")
    parser.add_argument("filename", nargs='?', help="Path to the source file. Reads stdin if omitted.")
    parser.add_argument(
        "--log-level",
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default='WARNING',
        help="Set the logging level."
    )
    parser.add_argument(
        "--strict",
        action='store_true',
        help="Exit with status 1 if any lexical error is found."
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level), format='%(levelname)s:%(name)s:%(message)s')

    # newline='' keeps '\r' as written, so positions match the raw input
    source_name = args.filename or '<stdin>'
    try:
        if args.filename:
            with open(args.filename, 'r', encoding='utf-8', newline='') as f:
                source_code = f.read()
        else:
            source_code = sys.stdin.buffer.read().decode('utf-8')
    except (OSError, UnicodeDecodeError) as e:
        log.error(f"Cannot read {source_name}: {e}")
        return 2
    log.info(f"Lexing {source_name}")

    tokens = list(Lexer(source_code, debug=args.log_level == 'DEBUG'))
    for token in tokens:
        print(f"{token.line}:{token.column}\t{token.val!r}")

    diagnostics = collect_diagnostics(tokens)
    if diagnostics:
        sys.stderr.write(render_diagnostics(source_code, diagnostics))
        log.info(f"{len(diagnostics)} lexical error(s)")
    if args.strict and diagnostics:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
