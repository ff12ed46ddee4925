"""Character classes, case conversion and padding for ASCII text.

Classification and case mapping follow the C locale: only the ASCII
letters are cased, only ``0``-``9`` are digits, and whitespace is the set
in :data:`rpncalc.strings.WHITESPACE`. Other characters are left alone.
"""

from __future__ import annotations

import string
from collections.abc import Iterator

from rpncalc.strings import WHITESPACE

_LOWER = frozenset(string.ascii_lowercase)
_UPPER = frozenset(string.ascii_uppercase)
_ALPHA = _LOWER | _UPPER
_DIGIT = frozenset(string.digits)
_ALNUM = _ALPHA | _DIGIT
_SPACE = frozenset(WHITESPACE)

_TO_UPPER = str.maketrans(string.ascii_lowercase, string.ascii_uppercase)
_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_SWAP = str.maketrans(
    string.ascii_lowercase + string.ascii_uppercase,
    string.ascii_uppercase + string.ascii_lowercase,
)

TABLE_SIZE = 256


def _all_in(s: str, chars: frozenset[str]) -> bool:
    return bool(s) and all(c in chars for c in s)


def isalnum(s: str) -> bool:
    """True if ``s`` is non-empty and every character is an ASCII letter or digit."""
    return _all_in(s, _ALNUM)


def isalpha(s: str) -> bool:
    """True if ``s`` is non-empty and every character is an ASCII letter."""
    return _all_in(s, _ALPHA)


def isdigit(s: str) -> bool:
    """True if ``s`` is non-empty and every character is a decimal digit."""
    return _all_in(s, _DIGIT)


def islower(s: str) -> bool:
    """True if ``s`` is non-empty and every character is a lowercase letter."""
    return _all_in(s, _LOWER)


def isupper(s: str) -> bool:
    """True if ``s`` is non-empty and every character is an uppercase letter."""
    return _all_in(s, _UPPER)


def isspace(s: str) -> bool:
    """True if ``s`` is non-empty and every character is whitespace."""
    return _all_in(s, _SPACE)


def istitle(s: str) -> bool:
    """True if ``s`` is title-cased and holds at least one cased character."""
    if len(s) == 1:
        return s in _UPPER
    cased = False
    previous_is_cased = False
    for c in s:
        if c in _UPPER:
            if previous_is_cased:
                return False
            previous_is_cased = cased = True
        elif c in _LOWER:
            if not previous_is_cased:
                return False
            previous_is_cased = cased = True
        else:
            previous_is_cased = False
    return cased


def lower(s: str) -> str:
    """Copy of ``s`` with ASCII uppercase letters lowered."""
    return s.translate(_TO_LOWER)


def upper(s: str) -> str:
    """Copy of ``s`` with ASCII lowercase letters raised."""
    return s.translate(_TO_UPPER)


def swapcase(s: str) -> str:
    """Copy of ``s`` with the case of every ASCII letter inverted."""
    return s.translate(_SWAP)


def capitalize(s: str) -> str:
    """Copy of ``s`` with the first character upper-cased and the rest lowered."""
    if not s:
        return s
    return upper(s[0]) + lower(s[1:])


def _title_chars(s: str) -> Iterator[str]:
    previous_is_cased = False
    for c in s:
        if c in _LOWER:
            yield c if previous_is_cased else upper(c)
            previous_is_cased = True
        elif c in _UPPER:
            yield lower(c) if previous_is_cased else c
            previous_is_cased = True
        else:
            yield c
            previous_is_cased = False


def title(s: str) -> str:
    """Copy of ``s`` where each word starts upper-case and the rest is lower-case."""
    return "".join(_title_chars(s))


def translate(s: str, table: str, deletechars: str = "") -> str:
    """Map ``s`` through a 256-character ``table``, dropping ``deletechars``.

    A table of any other length leaves ``s`` unchanged. Characters beyond
    the table's range are kept as they are.
    """
    if len(table) != TABLE_SIZE:
        return s
    deleted = set(deletechars)
    return "".join(
        table[ord(c)] if ord(c) < TABLE_SIZE else c
        for c in s
        if c not in deleted
    )


def zfill(s: str, width: int) -> str:
    """Pad ``s`` on the left with zeros to ``width``, keeping a leading sign first."""
    fill = width - len(s)
    if fill <= 0:
        return s
    if s[:1] in ("+", "-"):
        return s[0] + "0" * fill + s[1:]
    return "0" * fill + s


def ljust(s: str, width: int) -> str:
    """``s`` padded with spaces on the right to ``width``."""
    return s + " " * max(width - len(s), 0)


def rjust(s: str, width: int) -> str:
    """``s`` padded with spaces on the left to ``width``."""
    return " " * max(width - len(s), 0) + s


def center(s: str, width: int) -> str:
    """``s`` centred in a field of ``width`` spaces."""
    margin = width - len(s)
    if margin <= 0:
        return s
    left = margin // 2 + (margin & width & 1)
    return " " * left + s + " " * (margin - left)


def _expand(s: str, tabsize: int) -> Iterator[str]:
    column = 0
    for c in s:
        if c == "\t":
            if tabsize > 0:
                fill = tabsize - column % tabsize
                column += fill
                yield " " * fill
        else:
            column = 0 if c in "\n\r" else column + 1
            yield c


def expandtabs(s: str, tabsize: int = 8) -> str:
    """Replace tabs by spaces up to the next multiple of ``tabsize``.

    A ``tabsize`` of zero or less removes the tabs.
    """
    return "".join(_expand(s, tabsize))