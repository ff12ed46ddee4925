"""An early, minimal calculator: four arithmetic operators on a stack."""

from __future__ import annotations

import math
import operator
import sys
from collections.abc import Callable, Sequence
from typing import TextIO

from rpncalc.commands import Command, InputError, ParseError, Value
from rpncalc.repl import read_value
from rpncalc.stack import Stack


def _divide(a: float, b: float) -> float:
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


_OPERATORS: dict[Command, Callable[[float, float], float]] = {
    Command.add: operator.add,
    Command.sub: operator.sub,
    Command.mul: operator.mul,
    Command.div: _divide,
}


class ProtoCalc:
    """Pushes numbers and applies ``+ - * /``; other commands are ignored.

    Each result is printed and pushed back. The top value is the left
    operand.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output
        self._stack = Stack()

    def eval(self, value: Value) -> None:
        """Apply one value. Raises IndexError if the stack runs empty."""
        if not isinstance(value, Command):
            self._stack.push(float(value))
            return
        op = _OPERATORS.get(value)
        if op is None:
            return
        left = self._stack.pop()
        result = op(left, self._stack.pop())
        output = self._output if self._output is not None else sys.stdout
        print(f"{result:g}", file=output)
        self._stack.push(result)


def run(stdin: TextIO | None = None, stdout: TextIO | None = None) -> int:
    """Run until the first error or end of input; return the exit status."""
    stdout = sys.stdout if stdout is None else stdout
    calc = ProtoCalc(output=stdout)
    try:
        while True:
            calc.eval(read_value(stdin=stdin, stdout=stdout))
    except EOFError:
        return 0
    except (IndexError, ParseError, InputError) as exc:
        print(f"Error: {exc}", file=stdout)
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point."""
    return run()


if __name__ == "__main__":
    sys.exit(main())