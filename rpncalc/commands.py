"""Calculator commands and the parsing of one input token."""

from __future__ import annotations

import enum
import math
import re
from typing import Union


class ParseError(ValueError):
    """The input could not be understood as a number or a command."""

    def __init__(self, message: str = "received invalid input") -> None:
        super().__init__(message)


class InputError(OSError):
    """The input stream failed."""

    def __init__(self, message: str = "bad input stream") -> None:
        super().__init__(message)


class Command(enum.Enum):
    """Operations the calculator understands."""

    add = "add"
    sub = "sub"
    mul = "mul"
    div = "div"
    pow = "pow"
    chs = "chs"
    print = "print"
    clst = "clst"
    sqrt = "sqrt"
    swap = "swap"
    rot = "rot"
    log = "log"
    ln = "ln"
    ld = "ld"
    exp = "exp"
    sin = "sin"
    cos = "cos"
    tan = "tan"
    asin = "asin"
    acos = "acos"
    atan = "atan"
    deg = "deg"
    rad = "rad"
    help = "help"
    quit = "quit"


Value = Union[float, Command]

_SYMBOLS = {
    "+": Command.add,
    "-": Command.sub,
    "*": Command.mul,
    "/": Command.div,
    "**": Command.pow,
}

# A leading numeric prefix, as a C string-to-double conversion reads it.
_NUMBER = re.compile(
    r"""
    [ \t\n\v\f\r]*
    (?P<sign>[+-]?)
    (?:
        (?P<special>infinity|inf|nan(?:\([0-9A-Za-z_]*\))?)
      | (?P<hex>0x(?:[0-9a-f]+(?:\.[0-9a-f]*)?|\.[0-9a-f]+)(?:p[+-]?[0-9]+)?)
      | (?P<dec>(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:e[+-]?[0-9]+)?)
    )
    """,
    re.VERBOSE | re.IGNORECASE,
)


def _parse_number(text: str) -> float | None:
    """Read a number from the start of ``text``; None if there is none or it is out of range."""
    match = _NUMBER.match(text)
    if match is None:
        return None
    negative = match.group("sign") == "-"
    special = match.group("special")
    if special is not None:
        value = math.nan if special.lower().startswith("nan") else math.inf
        return -value if negative else value
    hex_part = match.group("hex")
    if hex_part is not None:
        mantissa = re.split(r"[pP]", hex_part[2:])[0]
        try:
            value = float.fromhex(hex_part)
        except OverflowError:
            return None
    else:
        dec_part = match.group("dec")
        mantissa = re.split(r"[eE]", dec_part)[0]
        value = float(dec_part)
    if math.isinf(value):
        return None
    if value == 0.0 and any(c not in "0." for c in mantissa):
        return None
    return -value if negative else value


def parse_token(text: str) -> Value:
    """Turn one input token into a number or a :class:`Command`.

    A leading number is read first, ignoring anything after it; otherwise
    the operator symbols and the command names are tried. Raises
    :class:`ParseError` if nothing matches.
    """
    number = _parse_number(text)
    if number is not None:
        return number
    if text in _SYMBOLS:
        return _SYMBOLS[text]
    try:
        return Command[text]
    except KeyError:
        raise ParseError() from None