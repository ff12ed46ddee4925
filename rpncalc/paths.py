"""Pure string path manipulation for Windows (``nt``) and POSIX styles.

Every operation exists in three forms: an ``_nt`` variant, a ``_posix``
variant, and an unsuffixed one that picks the variant for the platform
the program runs on. Nothing here touches the file system; ``abspath``
takes the working directory as an argument.
"""

from __future__ import annotations

import sys

from rpncalc import strings

_WINDOWS = sys.platform == "win32"

_NT_SEPS = ("/", "\\")


def _ends_with_nt_sep(path: str) -> bool:
    return path.endswith(_NT_SEPS)


def _starts_with_nt_sep(path: str) -> bool:
    return path.startswith(_NT_SEPS)


# --- splitdrive -----------------------------------------------------------


def splitdrive_nt(path: str) -> tuple[str, str]:
    """Split ``path`` into ``(drive, rest)``; the drive is like ``c:`` or empty."""
    if strings.slice(path, 1, 2) == ":":
        return strings.slice(path, 0, 2), strings.slice(path, 2)
    return "", path


def splitdrive_posix(path: str) -> tuple[str, str]:
    """POSIX paths have no drive: always ``("", path)``."""
    return "", path


def splitdrive(path: str) -> tuple[str, str]:
    """Split off the drive using the conventions of the running platform."""
    return splitdrive_nt(path) if _WINDOWS else splitdrive_posix(path)


# --- isabs ----------------------------------------------------------------


def isabs_nt(path: str) -> bool:
    """True if, after any drive, ``path`` begins with a slash or backslash."""
    _, rest = splitdrive_nt(path)
    return _starts_with_nt_sep(rest)


def isabs_posix(path: str) -> bool:
    """True if ``path`` begins with ``/``."""
    return path.startswith("/")


def isabs(path: str) -> bool:
    """Whether ``path`` is absolute on the running platform."""
    return isabs_nt(path) if _WINDOWS else isabs_posix(path)


# --- join -----------------------------------------------------------------


def _nt_discards_previous(path: str, part: str) -> bool:
    """Whether joining ``part`` onto ``path`` throws ``path`` away."""
    if not path:
        return True
    if not isabs_nt(part):
        return False
    if strings.slice(path, 1, 2) != ":" or strings.slice(part, 1, 2) == ":":
        return True
    # path has a drive letter; part is absolute without one.
    return len(path) > 3 or (len(path) == 3 and not _ends_with_nt_sep(path))


def join_nt(*paths: str) -> str:
    """Join components with ``\\``, restarting at absolute components."""
    if not paths:
        return ""
    path = paths[0]
    for part in paths[1:]:
        if _nt_discards_previous(path, part):
            path = part
        elif _ends_with_nt_sep(path):
            path += part[1:] if _starts_with_nt_sep(part) else part
        elif path.endswith(":"):
            path += part
        elif part:
            path += part if _starts_with_nt_sep(part) else "\\" + part
        else:
            path += "\\"
    return path


def join_posix(*paths: str) -> str:
    """Join components with ``/``, restarting at components that begin with ``/``."""
    if not paths:
        return ""
    path = paths[0]
    for part in paths[1:]:
        if part.startswith("/"):
            path = part
        elif not path or path.endswith("/"):
            path += part
        else:
            path += "/" + part
    return path


def join(*paths: str) -> str:
    """Join path components using the running platform's rules."""
    return join_nt(*paths) if _WINDOWS else join_posix(*paths)


# --- split, basename, dirname ---------------------------------------------


def split_nt(path: str) -> tuple[str, str]:
    """Split into ``(head, tail)`` at the last slash or backslash."""
    drive, rest = splitdrive_nt(path)
    cut = max(rest.rfind("\\"), rest.rfind("/")) + 1
    head, tail = rest[:cut], rest[cut:]
    stripped = head.rstrip("/\\")
    if stripped:
        head = stripped
    return drive + head, tail


def split_posix(path: str) -> tuple[str, str]:
    """Split into ``(head, tail)`` at the last ``/``.

    Trailing slashes are removed from the head unless it is all slashes.
    """
    cut = strings.rfind(path, "/") + 1
    head, tail = strings.slice(path, 0, cut), strings.slice(path, cut)
    if head and head != strings.mul("/", len(head)):
        head = strings.rstrip(head, "/")
    return head, tail


def split(path: str) -> tuple[str, str]:
    """Split ``path`` into ``(head, tail)`` for the running platform."""
    return split_nt(path) if _WINDOWS else split_posix(path)


def basename_nt(path: str) -> str:
    """Final component of a Windows path; empty if it ends in a separator."""
    return split_nt(path)[1]


def basename_posix(path: str) -> str:
    """Final component of a POSIX path; empty if it ends in ``/``."""
    return split_posix(path)[1]


def basename(path: str) -> str:
    """Final component of ``path`` for the running platform."""
    return split(path)[1]


def dirname_nt(path: str) -> str:
    """Directory part of a Windows path."""
    return split_nt(path)[0]


def dirname_posix(path: str) -> str:
    """Directory part of a POSIX path."""
    return split_posix(path)[0]


def dirname(path: str) -> str:
    """Directory part of ``path`` for the running platform."""
    return split(path)[0]


# --- normpath -------------------------------------------------------------


def normpath_nt(path: str) -> str:
    """Collapse separators and ``.``/``..`` parts, using backslashes.

    Without a drive, leading backslashes are kept as they are (so UNC
    names survive); with a drive, they collapse to one.
    """
    prefix, rest = splitdrive_nt(strings.replace(path, "/", "\\"))
    if not prefix:
        stripped = rest.lstrip("\\")
        prefix = "\\" * (len(rest) - len(stripped))
        rest = stripped
    elif rest.startswith("\\"):
        prefix += "\\"
        rest = strings.lstrip(rest, "\\")

    comps: list[str] = []
    for comp in strings.split(rest, "\\"):
        if not comp or comp == ".":
            continue
        if comp == "..":
            if comps and comps[-1] != "..":
                comps.pop()
                continue
            if not comps and prefix.endswith("\\"):
                continue
        comps.append(comp)

    if not prefix and not comps:
        comps.append(".")
    return prefix + strings.join("\\", comps)


def normpath_posix(path: str) -> str:
    """Collapse slashes and ``.``/``..`` parts of a POSIX path.

    Exactly two leading slashes are kept; three or more become one.
    """
    if not path:
        return "."
    initial_slashes = 1 if path.startswith("/") else 0
    if initial_slashes and path.startswith("//") and not path.startswith("///"):
        initial_slashes = 2

    comps: list[str] = []
    for comp in strings.split(path, "/"):
        if not comp or comp == ".":
            continue
        if (
            comp != ".."
            or (initial_slashes == 0 and not comps)
            or (comps and comps[-1] == "..")
        ):
            comps.append(comp)
        elif comps:
            comps.pop()

    result = strings.mul("/", initial_slashes) + strings.join("/", comps)
    return result or "."


def normpath(path: str) -> str:
    """Normalise ``path`` using the running platform's rules."""
    return normpath_nt(path) if _WINDOWS else normpath_posix(path)


# --- abspath --------------------------------------------------------------


def abspath_nt(path: str, cwd: str) -> str:
    """Normalised absolute form of a Windows ``path`` relative to ``cwd``."""
    if not isabs_nt(path):
        path = join_nt(cwd, path)
    return normpath_nt(path)


def abspath_posix(path: str, cwd: str) -> str:
    """Normalised absolute form of a POSIX ``path`` relative to ``cwd``."""
    if not isabs_posix(path):
        path = join_posix(cwd, path)
    return normpath_posix(path)


def abspath(path: str, cwd: str) -> str:
    """Normalised absolute form of ``path`` relative to ``cwd`` for this platform."""
    return abspath_nt(path, cwd) if _WINDOWS else abspath_posix(path, cwd)


# --- splitext -------------------------------------------------------------


def _splitext(path: str, sep: str, altsep: str, extsep: str) -> tuple[str, str]:
    sep_index = path.rfind(sep)
    if altsep:
        sep_index = max(sep_index, path.rfind(altsep))
    dot_index = path.rfind(extsep)
    # A dot that is the first character of the file name does not start an
    # extension; any later last dot does.
    if dot_index > sep_index + 1:
        return path[:dot_index], path[dot_index:]
    return path, ""


def splitext_nt(path: str) -> tuple[str, str]:
    """Split a Windows path into ``(root, ext)`` with ``root + ext == path``."""
    return _splitext(path, "\\", "/", ".")


def splitext_posix(path: str) -> tuple[str, str]:
    """Split a POSIX path into ``(root, ext)`` with ``root + ext == path``."""
    return _splitext(path, "/", "", ".")


def splitext(path: str) -> tuple[str, str]:
    """Split off the extension using the running platform's separators."""
    return splitext_nt(path) if _WINDOWS else splitext_posix(path)