"""The reverse polish notation calculator engine."""

from __future__ import annotations

import math
import operator
import sys
from collections import deque
from collections.abc import Callable
from typing import TextIO

from rpncalc.commands import Command, ParseError, Value

HELP_TEXT = "\n".join(
    (
        "this is a RPN (reverse polish notation) calculator",
        "    try this to get started: ",
        "    >>> 1",
        "    >>> 2",
        "    >>> +",
        "",
        "    other operators: +, -, *, /, **, ",
        "                     chs, sqrt, swap, rot, log, ln, ld, exp,",
        "                     sin, cos, tan, asin, acos, atan, deg, rad,",
        "                     help, quit, print, clst",
        "",
    )
)


class QuitRequested(Exception):
    """The user asked the calculator to stop."""


def _is_odd_integer(x: float) -> bool:
    return math.isfinite(x) and x.is_integer() and x % 2 == 1


def _divide(a: float, b: float) -> float:
    """IEEE division: dividing by zero gives an infinity or NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def _power(a: float, b: float) -> float:
    """``a`` raised to ``b`` with IEEE results instead of exceptions."""
    try:
        return math.pow(a, b)
    except OverflowError:
        return -math.inf if a < 0 and _is_odd_integer(b) else math.inf
    except ValueError:
        if a == 0:
            return math.copysign(math.inf, a) if _is_odd_integer(b) else math.inf
        return math.nan


def _ieee(fn: Callable[[float], float]) -> Callable[[float], float]:
    """Wrap ``fn`` so domain errors give NaN and overflow gives infinity."""

    def wrapped(x: float) -> float:
        try:
            return fn(x)
        except OverflowError:
            return math.inf
        except ValueError:
            return math.nan

    return wrapped


def _logarithm(fn: Callable[[float], float]) -> Callable[[float], float]:
    safe = _ieee(fn)

    def wrapped(x: float) -> float:
        return -math.inf if x == 0 else safe(x)

    return wrapped


_BINARY: dict[Command, Callable[[float, float], float]] = {
    Command.add: operator.add,
    Command.sub: operator.sub,
    Command.mul: operator.mul,
    Command.div: _divide,
    Command.pow: _power,
}

_UNARY: dict[Command, Callable[[float], float]] = {
    Command.chs: lambda x: x * -1,
    Command.sqrt: _ieee(math.sqrt),
    Command.log: _logarithm(math.log10),
    Command.ln: _logarithm(math.log),
    Command.ld: _logarithm(math.log2),
    Command.exp: _ieee(math.exp),
    Command.sin: _ieee(math.sin),
    Command.cos: _ieee(math.cos),
    Command.tan: _ieee(math.tan),
    Command.asin: _ieee(math.asin),
    Command.acos: _ieee(math.acos),
    Command.atan: _ieee(math.atan),
    Command.deg: lambda x: x * 180 / math.pi,
    Command.rad: lambda x: x / 180 * math.pi,
}


class Calc:
    """A calculator holding a stack of numbers, top first.

    Binary operators take the top value as their left operand and the
    value below it as the right one.
    """

    def __init__(self, output: TextIO | None = None) -> None:
        self._output = output
        self._stack: deque[float] = deque()

    def stack(self) -> tuple[float, ...]:
        """The values on the stack, top first."""
        return tuple(self._stack)

    def _push(self, value: float) -> list[float]:
        self._stack.appendleft(value)
        return [value]

    def _take(self, n: int) -> list[float]:
        if len(self._stack) < n:
            raise ParseError()
        return [self._stack.popleft() for _ in range(n)]

    def eval(self, value: Value) -> list[float]:
        """Apply a number or command and return the values to show.

        Raises :class:`ParseError` when the stack holds too few values
        and :class:`QuitRequested` for the quit command.
        """
        if not isinstance(value, Command):
            return self._push(float(value))
        if value in _BINARY:
            first, second = self._take(2)
            return self._push(_BINARY[value](first, second))
        if value in _UNARY:
            (argument,) = self._take(1)
            return self._push(_UNARY[value](argument))
        if value is Command.swap:
            first, second = self._take(2)
            self._stack.appendleft(first)
            self._stack.appendleft(second)
            return []
        if value is Command.print:
            return list(self._stack)
        if value is Command.clst:
            self._stack.clear()
            return []
        if value is Command.rot:
            if not self._stack:
                raise ParseError()
            self._stack.rotate(1)
            return []
        if value is Command.help:
            output = self._output if self._output is not None else sys.stdout
            output.write(HELP_TEXT)
            return []
        if value is Command.quit:
            raise QuitRequested()
        raise ValueError("invalid Command")