"""Command-line entry point: run a program file."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from limbo.errors import LimboError, format_report
from limbo.interpreter import compute
from limbo.parser import analyze
from limbo.tokenizer import tokenize
from limbo.values import Value

_FAILURE = 255


def run_file(path: str) -> Optional[Value]:
    """Tokenize, parse and run the program at ``path``; return its value."""
    tokens = tokenize(path)
    statements = analyze(tokens)
    return compute(statements)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program named by the first argument, if any."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        return 0
    try:
        run_file(args[0])
    except LimboError as error:
        sys.stderr.write(format_report(error))
        return _FAILURE
    return 0


if __name__ == "__main__":
    sys.exit(main())