"""String operations modelled on the classic string methods.

Whitespace means the C locale set (space, tab, newline, vertical tab,
form feed, carriage return). Line breaks are ``\\n``, ``\\r`` and ``\\r\\n``
only. An empty separator or character set selects whitespace handling.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

WHITESPACE = " \t\n\v\f\r"

_WORD = re.compile(r"[^ \t\n\v\f\r]+")
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _adjust(start: int, end: int | None, length: int) -> tuple[int, int]:
    """Normalise slice bounds the way slice notation does."""
    if end is None or end > length:
        end = length
    elif end < 0:
        end = max(end + length, 0)
    if start < 0:
        start = max(start + length, 0)
    return start, end


def _split_whitespace(s: str, maxsplit: int | None) -> list[str]:
    result: list[str] = []
    for match in _WORD.finditer(s):
        if maxsplit is not None and len(result) == maxsplit:
            result.append(s[match.start():])
            break
        result.append(match.group())
    return result


def _rsplit_whitespace(s: str, maxsplit: int) -> list[str]:
    result: list[str] = []
    for match in reversed(list(_WORD.finditer(s))):
        if len(result) == maxsplit:
            result.append(s[: match.end()])
            break
        result.append(match.group())
    result.reverse()
    return result


def split(s: str, sep: str = "", maxsplit: int = -1) -> list[str]:
    """Split ``s`` on ``sep``, or on runs of whitespace when ``sep`` is empty."""
    if not sep:
        return _split_whitespace(s, None if maxsplit < 0 else maxsplit)
    return s.split(sep, maxsplit)


def rsplit(s: str, sep: str = "", maxsplit: int = -1) -> list[str]:
    """Like :func:`split`, but the splits are counted from the right."""
    if maxsplit < 0:
        return split(s, sep, maxsplit)
    if not sep:
        return _rsplit_whitespace(s, maxsplit)
    return s.rsplit(sep, maxsplit)


def strip(s: str, chars: str = "") -> str:
    """Remove leading and trailing ``chars`` (whitespace if empty)."""
    return s.strip(chars or WHITESPACE)


def lstrip(s: str, chars: str = "") -> str:
    """Remove leading ``chars`` (whitespace if empty)."""
    return s.lstrip(chars or WHITESPACE)


def rstrip(s: str, chars: str = "") -> str:
    """Remove trailing ``chars`` (whitespace if empty)."""
    return s.rstrip(chars or WHITESPACE)


def partition(s: str, sep: str) -> tuple[str, str, str]:
    """Split around the first ``sep``; ``(s, "", "")`` if it is absent."""
    pos = find(s, sep)
    if pos < 0:
        return s, "", ""
    return s[:pos], sep, s[pos + len(sep):]


def rpartition(s: str, sep: str) -> tuple[str, str, str]:
    """Split around the last ``sep``; ``("", "", s)`` if it is absent."""
    pos = rfind(s, sep)
    if pos < 0:
        return "", "", s
    return s[:pos], sep, s[pos + len(sep):]


def join(sep: str, seq: Iterable[str]) -> str:
    """Concatenate ``seq`` with ``sep`` between the items."""
    return sep.join(seq)


def startswith(s: str, prefix: str, start: int = 0, end: int | None = None) -> bool:
    """Whether ``s[start:end]`` begins with ``prefix``."""
    start, end = _adjust(start, end, len(s))
    if start + len(prefix) > len(s):
        return False
    if end - start < len(prefix):
        return False
    return s[start:start + len(prefix)] == prefix


def endswith(s: str, suffix: str, start: int = 0, end: int | None = None) -> bool:
    """Whether ``s[start:end]`` ends with ``suffix``."""
    start, end = _adjust(start, end, len(s))
    if end - start < len(suffix) or start > len(s):
        return False
    start = max(start, end - len(suffix))
    return s[start:start + len(suffix)] == suffix


def find(s: str, sub: str, start: int = 0, end: int | None = None) -> int:
    """Lowest index of ``sub`` within ``s[start:end]``, or -1."""
    start, end = _adjust(start, end, len(s))
    pos = s.find(sub, start)
    if pos < 0 or pos + len(sub) > end:
        return -1
    return pos


def index(s: str, sub: str, start: int = 0, end: int | None = None) -> int:
    """Same as :func:`find`: -1 when ``sub`` is absent."""
    return find(s, sub, start, end)


def rfind(s: str, sub: str, start: int = 0, end: int | None = None) -> int:
    """Highest index of ``sub`` starting at or before ``end`` and lying in range, or -1.

    Only the last occurrence that starts at or before ``end`` is considered;
    if it runs past ``end`` the result is -1.
    """
    start, end = _adjust(start, end, len(s))
    pos = s.rfind(sub, 0, min(end + len(sub), len(s)))
    if pos < 0 or pos < start or pos + len(sub) > end:
        return -1
    return pos


def rindex(s: str, sub: str, start: int = 0, end: int | None = None) -> int:
    """Same as :func:`rfind`: -1 when ``sub`` is absent."""
    return rfind(s, sub, start, end)


def count(s: str, sub: str, start: int = 0, end: int | None = None) -> int:
    """Number of non-overlapping occurrences of ``sub`` in ``s[start:end]``."""
    if not sub:
        raise ValueError("empty substring")
    total = 0
    cursor = start
    while (cursor := find(s, sub, cursor, end)) >= 0:
        cursor += len(sub)
        total += 1
    return total


def replace(s: str, old: str, new: str, count: int = -1) -> str:
    """Replace occurrences of ``old`` by ``new``; all of them if ``count`` < 0."""
    return s.replace(old, new, count)


def splitlines(s: str, keepends: bool = False) -> list[str]:
    """Split ``s`` at ``\\n``, ``\\r`` and ``\\r\\n`` line breaks."""
    lines: list[str] = []
    pos = 0
    for match in _LINE_BREAK.finditer(s):
        lines.append(s[pos: match.end() if keepends else match.start()])
        pos = match.end()
    if pos < len(s):
        lines.append(s[pos:])
    return lines


def slice(s: str, start: int = 0, end: int | None = None) -> str:  # noqa: A001
    """``s[start:end]`` with slice-notation bounds."""
    start, end = _adjust(start, end, len(s))
    if start >= end:
        return ""
    return s[start:end]


def mul(s: str, n: int) -> str:
    """``s`` repeated ``n`` times; empty when ``n`` is not positive."""
    if n <= 0:
        return ""
    return s * n