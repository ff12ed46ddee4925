import sys

import pytest

from rpncalc import paths

ON_WINDOWS = sys.platform == "win32"

SAMPLE_PATHS = [
    "",
    "a",
    "/",
    "//",
    "///a",
    "/foo/bar/",
    "A//B",
    "A/./B",
    "A/foo/../B",
    "../x/../../y",
    "c:",
    "c:/",
    "c:\\a\\b",
    "\\\\server\\mount\\dir",
    ".cshrc",
    "dir/file.tar.gz",
]


@pytest.mark.parametrize("path", SAMPLE_PATHS)
def test_splitdrive_nt_parts_concatenate(path):
    drive, rest = paths.splitdrive_nt(path)
    assert drive + rest == path


def test_splitdrive_nt_takes_drive_letter():
    assert paths.splitdrive_nt("c:/a") == ("c:", "/a")


@pytest.mark.parametrize("path", SAMPLE_PATHS)
def test_splitdrive_posix_never_has_drive(path):
    assert paths.splitdrive_posix(path) == ("", path)


@pytest.mark.parametrize("path", SAMPLE_PATHS)
def test_dispatching_functions_match_platform(path):
    if ON_WINDOWS:
        expected = (
            paths.splitdrive_nt(path),
            paths.isabs_nt(path),
            paths.split_nt(path),
            paths.normpath_nt(path),
            paths.splitext_nt(path),
            paths.basename_nt(path),
            paths.dirname_nt(path),
            paths.join_nt(path, "x"),
        )
    else:
        expected = (
            paths.splitdrive_posix(path),
            paths.isabs_posix(path),
            paths.split_posix(path),
            paths.normpath_posix(path),
            paths.splitext_posix(path),
            paths.basename_posix(path),
            paths.dirname_posix(path),
            paths.join_posix(path, "x"),
        )
    actual = (
        paths.splitdrive(path),
        paths.isabs(path),
        paths.split(path),
        paths.normpath(path),
        paths.splitext(path),
        paths.basename(path),
        paths.dirname(path),
        paths.join(path, "x"),
    )
    assert actual == expected


def test_isabs_posix():
    assert paths.isabs_posix("/foo/bar/")
    assert not paths.isabs_posix("A/B")
    assert not paths.isabs_posix("")


def test_isabs_nt_accepts_both_slashes_after_drive():
    assert paths.isabs_nt("c:/")
    assert paths.isabs_nt("c:\\a\\b")
    assert paths.isabs_nt("\\\\server\\mount\\dir")
    assert not paths.isabs_nt("c:")
    assert not paths.isabs_nt("A/B")


@pytest.mark.parametrize(
    "first, second, expected",
    [
        ("c:", "/a", "c:/a"),
        ("c:/", "/a", "c:/a"),
        ("c:/a", "/b", "/b"),
        ("c:", "d:/", "d:/"),
        ("c:/", "d:/", "d:/"),
    ],
)
def test_join_nt_drive_cases(first, second, expected):
    assert paths.join_nt(first, second) == expected


def test_join_nt_inserts_backslash():
    assert paths.join_nt("A", "B") == "A\\B"
    assert paths.join_nt("A", "") == "A\\"


def test_join_nt_empty_first_takes_second():
    assert paths.join_nt("", "B") == "B"


def test_join_posix_inserts_slash_once():
    assert paths.join_posix("A", "B") == "A/B"
    assert paths.join_posix("A/", "B") == "A/B"
    assert paths.join_posix("", "B") == "B"


def test_join_posix_absolute_restarts():
    assert paths.join_posix("A", "/foo/bar/", "B") == "/foo/bar/B"


def test_join_with_no_or_one_argument():
    assert paths.join_posix() == ""
    assert paths.join_nt() == ""
    assert paths.join_posix("A//B") == "A//B"
    assert paths.join_nt("A//B") == "A//B"


@pytest.mark.parametrize("path", SAMPLE_PATHS)
def test_split_posix_tail_has_no_slash(path):
    head, tail = paths.split_posix(path)
    assert "/" not in tail
    assert path.endswith(tail)
    assert path.startswith(head)


@pytest.mark.parametrize("path", SAMPLE_PATHS)
def test_split_nt_tail_has_no_separator(path):
    head, tail = paths.split_nt(path)
    assert "/" not in tail and "\\" not in tail
    assert path.endswith(tail)


def test_basename_of_trailing_slash_is_empty():
    assert paths.basename_posix("/foo/bar/") == ""
    assert paths.basename_nt("/foo/bar/") == ""


def test_split_posix_strips_trailing_slashes_except_root():
    assert paths.split_posix("/foo/bar/") == ("/foo/bar", "")
    assert paths.split_posix("//") == ("//", "")


@pytest.mark.parametrize("path", SAMPLE_PATHS)
def test_basename_and_dirname_are_split_halves(path):
    assert (paths.dirname_posix(path), paths.basename_posix(path)) == paths.split_posix(path)
    assert (paths.dirname_nt(path), paths.basename_nt(path)) == paths.split_nt(path)


@pytest.mark.parametrize("path", ["A//B", "A/B/", "A/./B", "A/foo/../B"])
def test_normpath_posix_collapses(path):
    assert paths.normpath_posix(path) == "A/B"


@pytest.mark.parametrize("path", ["A//B", "A/B/", "A/./B", "A/foo/../B"])
def test_normpath_nt_collapses_to_backslash(path):
    assert paths.normpath_nt(path) == "A\\B"


def test_normpath_posix_empty_is_dot():
    assert paths.normpath_posix("") == "."


def test_normpath_posix_leading_slashes():
    assert paths.normpath_posix("//") == "//"
    assert paths.normpath_posix("///a") == "/a"


def test_normpath_posix_keeps_leading_parent_refs():
    assert paths.normpath_posix("../x/../../y") == "../../y"


@pytest.mark.parametrize("path", SAMPLE_PATHS)
def test_normpath_is_idempotent(path):
    once_posix = paths.normpath_posix(path)
    assert paths.normpath_posix(once_posix) == once_posix
    once_nt = paths.normpath_nt(path)
    assert paths.normpath_nt(once_nt) == once_nt


@pytest.mark.parametrize("path", SAMPLE_PATHS)
def test_normpath_nt_uses_no_forward_slash(path):
    assert "/" not in paths.normpath_nt(path)


def test_normpath_nt_preserves_unc_prefix():
    result = paths.normpath_nt("\\\\server\\mount\\dir")
    assert result == "\\\\server\\mount\\dir"


@pytest.mark.parametrize("path", ["a", "A/foo/../B", "../x/../../y", "/foo/bar/"])
def test_abspath_posix_is_absolute_and_normal(path):
    result = paths.abspath_posix(path, "/root")
    assert paths.isabs_posix(result)
    assert paths.normpath_posix(result) == result


def test_abspath_posix_keeps_absolute_input():
    assert paths.abspath_posix("/foo/bar/", "/root") == paths.normpath_posix("/foo/bar/")


@pytest.mark.parametrize("path", ["a", "A/foo/../B", "c:\\a\\b"])
def test_abspath_nt_is_absolute(path):
    result = paths.abspath_nt(path, "c:\\")
    assert paths.isabs_nt(result)
    assert paths.normpath_nt(result) == result


@pytest.mark.parametrize("path", SAMPLE_PATHS)
def test_splitext_parts_concatenate(path):
    root, ext = paths.splitext_posix(path)
    assert root + ext == path
    root, ext = paths.splitext_nt(path)
    assert root + ext == path


def test_splitext_ignores_leading_dot():
    assert paths.splitext_posix(".cshrc") == (".cshrc", "")
    assert paths.splitext_nt(".cshrc") == (".cshrc", "")


def test_splitext_takes_last_extension():
    root, ext = paths.splitext_posix("dir/file.tar.gz")
    assert ext.startswith(".")
    assert ext.count(".") == 1
    assert root + ext == "dir/file.tar.gz"


def test_splitext_extension_never_crosses_separator():
    assert paths.splitext_posix("a.b/c") == ("a.b/c", "")
    assert paths.splitext_nt("a.b\\c") == ("a.b\\c", "")
    assert paths.splitext_nt("a.b/c") == ("a.b/c", "")