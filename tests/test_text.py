import pytest

from eternakit.text import (
    base_dir,
    filename,
    is_number,
    join_by_delimiter,
    ltrim,
    rtrim,
    split_str_by_delimiter,
    trim,
)


@pytest.mark.parametrize(
    "s, delim, expected",
    [
        ("a,b,c", ",", ["a", "b", "c"]),
        ("a,b,", ",", ["a", "b"]),
        (",a", ",", ["", "a"]),
        ("a,,b", ",", ["a", "", "b"]),
        ("", ",", []),
        ("abc", ",", ["abc"]),
        ("a::b::c", "::", ["a", "b", "c"]),
    ],
)
def test_split(s, delim, expected):
    assert split_str_by_delimiter(s, delim) == expected


@pytest.mark.parametrize("s", ["a,b,c", "x", ",lead", "a,,b"])
def test_join_inverts_split(s):
    assert join_by_delimiter(split_str_by_delimiter(s, ","), ",") == s


def test_join_single_element_has_no_delimiter():
    assert join_by_delimiter(["only"], ",") == "only"
    assert join_by_delimiter([], ",") == ""


def test_filename_and_base_dir():
    assert filename("dir/sub/file.txt") == "file.txt"
    assert base_dir("dir/sub/file.txt") == "dir/sub/"
    assert filename("file.txt") == "file.txt"
    assert base_dir("file.txt") == ""


def test_absolute_base_dir_keeps_leading_slash():
    assert base_dir("/a/b") == "/a/"
    assert filename("/a/b") == "b"


@pytest.mark.parametrize("path", ["a/b/c", "/root/x.pdb", "plain", "x/y"])
def test_base_dir_plus_filename_rebuilds_path(path):
    assert base_dir(path) + filename(path) == path


@pytest.mark.parametrize(
    "s, expected",
    [("12345", True), ("0", True), ("", True), ("12a", False), ("1.5", False), ("-1", False)],
)
def test_is_number(s, expected):
    assert is_number(s) is expected


def test_trims():
    s = "  \t hi there \n "
    assert ltrim(s) == "hi there \n "
    assert rtrim(s) == "  \t hi there"
    assert trim(s) == "hi there"


def test_trim_all_whitespace_gives_empty():
    assert trim(" \t\n ") == ""
    assert ltrim("") == ""
    assert rtrim("   ") == ""


@pytest.mark.parametrize("s", ["abc", "  abc", "abc  ", " a b "])
def test_trim_is_idempotent(s):
    assert trim(trim(s)) == trim(s)