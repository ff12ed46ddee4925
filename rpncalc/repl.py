"""Interactive read-eval-print loop for the calculator."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from rpncalc import strings
from rpncalc.calc import Calc, QuitRequested
from rpncalc.commands import InputError, ParseError, Value, parse_token

PROMPT = ">>> "


def raw_input(
    prompt: str = PROMPT,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> str | None:
    """Show ``prompt`` and read one line, stripped of surrounding whitespace.

    Returns None at end of input; a final line without a line break also
    counts as end of input. Raises :class:`InputError` if reading fails.
    """
    stdin = sys.stdin if stdin is None else stdin
    stdout = sys.stdout if stdout is None else stdout
    stdout.write(prompt)
    stdout.flush()
    try:
        line = stdin.readline()
    except (OSError, ValueError) as exc:
        raise InputError() from exc
    if not line.endswith("\n"):
        return None
    return strings.strip(line)


def read_value(
    prompt: str = PROMPT,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> Value:
    """Read one line and parse it as a number or command.

    Raises EOFError at end of input and :class:`ParseError` for
    anything unrecognised.
    """
    text = raw_input(prompt, stdin, stdout)
    if text is None:
        raise EOFError("end of input")
    return parse_token(text)


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run the calculator until quit or end of input; return the exit status."""
    stdout = sys.stdout if stdout is None else stdout
    calc = Calc(output=stdout)
    while True:
        try:
            results = calc.eval(read_value(stdin=stdin, stdout=stdout))
        except (EOFError, QuitRequested):
            return 0
        except InputError as exc:
            print(f"Error: {exc}", file=stdout)
            return 1
        except ParseError as exc:
            print(f"Error: {exc}", file=stdout)
            continue
        for result in results:
            print(f"{result:g}", file=stdout)


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point."""
    return run()


if __name__ == "__main__":
    sys.exit(main())