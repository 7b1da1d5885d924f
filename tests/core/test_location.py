"""Tests for `pathkit.core.location.Location` derivations."""

import os

import pytest
from pydantic import ValidationError

from pathkit.core.location import Location


def test_trailing_separator_is_dropped() -> None:
    assert Location("/test/directory/").string == "/test/directory"
    assert Location("/test/directory").string == "/test/directory"
    assert Location("/").string == "/"
    assert Location("/test/directory/") == Location("/test/directory")


def test_keyword_and_pathlike_construction() -> None:
    assert Location(string="/a/b") == Location("/a/b")
    assert Location(Location("/a/b")).string == "/a/b"


def test_name_and_parent() -> None:
    f = Location("/not/exists/path/file")
    assert f.name == "file"
    assert f.parent == Location("/not/exists/path")
    assert Location("/test/directory/").name == "directory"


@pytest.mark.parametrize(
    "path,expected",
    [
        ("/top", "/"),
        ("a/b", "a"),
    ],
)
def test_parent_edges(path: str, expected: str) -> None:
    assert Location(path).parent == Location(expected)


@pytest.mark.parametrize("path", ["/", "", "relative"])
def test_parent_absent(path: str) -> None:
    assert Location(path).parent is None


@pytest.mark.parametrize(
    "path,extension",
    [
        ("/foo/bar/test/file1", ""),
        ("/foo/bar/test/file2.png", "png"),
        ("/foo/bar/test.file.has.many.ext", "ext"),
        ("/foo/bar/.another_dir", "another_dir"),
    ],
)
def test_extension(path: str, extension: str) -> None:
    assert Location(path).extension == extension


@pytest.mark.parametrize(
    "path,stem",
    [
        ("/boo/bar/some1.txt", "some1"),
        ("/boo/bar/some2", "some2"),
        ("/foo/bar/.hidden", ".hidden"),
        ("/foo/bar/.anotherhidden.txt", ".anotherhidden"),
    ],
)
def test_stem(path: str, stem: str) -> None:
    assert Location(path).stem == stem


def test_hidden() -> None:
    assert Location("/foo/bar/.hidden").is_hidden is True
    assert Location("/foo/bar/visible").is_hidden is False


def test_child_join() -> None:
    base = Location("/downloads")
    assert base.child("someFile.txt").string == "/downloads/someFile.txt"
    assert (base / "a" / "b").string == "/downloads/a/b"
    assert (Location("/") / "etc").string == "/etc"


def test_string_views() -> None:
    loc = Location("/Some/Special/File")
    assert str(loc) == "/Some/Special/File"
    assert os.fspath(loc) == "/Some/Special/File"
    assert repr(loc) == "Location('/Some/Special/File')"


def test_is_hashable_and_frozen() -> None:
    loc = Location("/a")
    assert {loc, Location("/a/")} == {loc}
    with pytest.raises(ValidationError):
        loc.string = "/b"  # type: ignore[misc]


@pytest.mark.parametrize("bad", ["/a\x00b", b"/bytes", 42])
def test_rejects_invalid_values(bad: object) -> None:
    with pytest.raises(ValidationError):
        Location(bad)
