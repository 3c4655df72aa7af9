"""Command-line entry point: read one password from stdin and print its report."""

from __future__ import annotations

import sys
from typing import TextIO

from pwstrength.config import get_settings
from pwstrength.evaluator.service import PasswordEvaluator
from pwstrength.utils.logging_config import setup_logging
from pwstrength.utils.report_formatter import HEADER, NO_PASSWORD, PROMPT, format_report


def read_password(stream: TextIO) -> str:
    """Read one line, dropping only the line terminator.

    End of input yields an empty string.
    """
    line = stream.readline()
    if line.endswith("\n"):
        line = line[:-1]
    return line


def run(stdin: TextIO, stdout: TextIO, evaluator: PasswordEvaluator | None = None) -> int:
    """Prompt, evaluate, print. Returns the process exit status."""
    print(HEADER, file=stdout)
    print(PROMPT, end="", file=stdout, flush=True)
    password = read_password(stdin)

    if not password:
        print(NO_PASSWORD, file=stdout)
        return 0

    evaluator = evaluator or PasswordEvaluator()
    report = evaluator.check(password)
    print(format_report(report), file=stdout)
    return 0


def main() -> int:
    settings = get_settings()
    setup_logging(level=settings.log_level, environment=settings.app_env.value)
    return run(sys.stdin, sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
