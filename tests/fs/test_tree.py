"""Tests for tree navigation and the current directory.

Paths are resolved segment by segment from the root (absolute paths)
or from the current directory (relative paths).  ``.`` stays put and
``..`` climbs to the parent, never above the root.
"""

import pytest

from bytecrawl.fs.content import File, Text
from bytecrawl.fs.errors import PathNotFoundError
from bytecrawl.fs.filesystem import ROOT_PATH, FileSystem


def _tree() -> FileSystem:
    """Create a file system with ``/a/b/c`` and ``/x``."""
    fs = FileSystem()
    fs.mkdir("/a/b/c")
    fs.mkdir("/x")
    return fs


class TestFileSystemCreation:
    """Verify the initial state of a fresh file system."""

    def test_root_exists(self) -> None:
        """A new file system should have a root directory."""
        fs = FileSystem()
        assert fs.exists(ROOT_PATH)

    def test_root_is_empty(self) -> None:
        """A fresh root directory should have no entries."""
        info = FileSystem().resolve(ROOT_PATH)
        assert info.is_empty

    def test_root_has_no_parent(self) -> None:
        """The root is named ``/`` and has no parent path."""
        info = FileSystem().resolve(ROOT_PATH)
        assert info.name == "/"
        assert info.parent_path is None

    def test_starts_in_root(self) -> None:
        """The current directory starts at the root."""
        assert FileSystem().get_pwd() == ROOT_PATH


class TestResolve:
    """Verify absolute and relative path resolution."""

    def test_absolute_path(self) -> None:
        """An absolute path resolves from the root."""
        fs = _tree()
        assert fs.resolve("/a/b/c").path == "/a/b/c"

    def test_relative_path_uses_current_directory(self) -> None:
        """A relative path resolves from the current directory."""
        fs = _tree()
        fs.cd("/a")
        assert fs.resolve("b/c").path == "/a/b/c"

    def test_relative_path_with_explicit_start(self) -> None:
        """The *start* argument overrides the current directory."""
        fs = _tree()
        assert fs.resolve("c", start="/a/b").path == "/a/b/c"

    def test_empty_segments_are_ignored(self) -> None:
        """Doubled and trailing slashes do not matter."""
        fs = _tree()
        assert fs.resolve("//a//b/").path == "/a/b"

    def test_dot_is_a_no_op(self) -> None:
        """``.`` segments leave the resolution point unchanged."""
        fs = _tree()
        assert fs.resolve("/a/./b/.").path == "/a/b"

    def test_dot_dot_moves_to_parent(self) -> None:
        """``..`` climbs one level."""
        fs = _tree()
        assert fs.resolve("/a/b/c/..").path == "/a/b"

    def test_dot_dot_across_branches(self) -> None:
        """``..`` can climb out of one branch and into another."""
        fs = _tree()
        fs.cd("/a/b")
        assert fs.resolve("../../x").path == "/x"

    def test_dot_dot_above_root_is_absorbed(self) -> None:
        """Climbing above the root stays at the root."""
        fs = _tree()
        assert fs.resolve("/../../a").path == "/a"

    def test_missing_segment_raises(self) -> None:
        """A missing directory names the segment in the error."""
        fs = _tree()
        with pytest.raises(PathNotFoundError, match="nope"):
            fs.resolve("/a/nope/c")

    def test_files_are_not_directories(self) -> None:
        """A file name cannot be walked into."""
        fs = _tree()
        fs.touch("/a", File(name="f", content=Text("hi")))
        with pytest.raises(PathNotFoundError):
            fs.resolve("/a/f")

    def test_resolve_matches_manual_walk(self) -> None:
        """Resolving a mixed path matches walking each segment by hand."""
        fs = _tree()
        direct = fs.resolve("/a/b/../b/./c")
        fs.cd("/a")
        fs.cd("b")
        fs.cd("c")
        assert direct.number == fs.resolve(".").number

    def test_resolve_never_creates(self) -> None:
        """A failed resolution leaves the tree unchanged."""
        fs = _tree()
        with pytest.raises(PathNotFoundError):
            fs.resolve("/new")
        assert not fs.exists("/new")

    def test_snapshot_lists_children_in_order(self) -> None:
        """The snapshot lists subdirectories and files in creation order."""
        fs = _tree()
        fs.touch("/", File(name="z", content=Text()))
        info = fs.resolve("/")
        assert info.subdirectories == ("a", "x")
        assert info.files == ("z",)


class TestPathInvariant:
    """Verify that every directory's path is parent path plus name."""

    @pytest.mark.parametrize("path", ["/a", "/a/b", "/a/b/c", "/x"])
    def test_path_is_parent_path_plus_name(self, path: str) -> None:
        """The stored parent path and name add up to the full path."""
        info = _tree().resolve(path)
        assert info.parent_path is not None
        assert info.parent_path + info.name == path

    def test_parent_path_ends_with_slash(self) -> None:
        """Stored parent paths end with a slash."""
        info = _tree().resolve("/a/b")
        assert info.parent_path == "/a/"

    def test_relative_resolution_round_trips(self) -> None:
        """Resolving a relative path gives current directory + input."""
        fs = _tree()
        fs.cd("/a")
        assert fs.resolve("b/c").path == fs.get_pwd() + "/b/c"


class TestCd:
    """Verify changing the current directory."""

    def test_cd_absolute(self) -> None:
        """``cd`` to an absolute path updates the working directory."""
        fs = _tree()
        fs.cd("/a/b")
        assert fs.get_pwd() == "/a/b"

    def test_cd_relative_and_back(self) -> None:
        """Relative ``cd`` followed by ``..`` returns to the start."""
        fs = _tree()
        fs.cd("a")
        fs.cd("b")
        fs.cd("..")
        assert fs.get_pwd() == "/a"

    def test_cd_normalizes_path(self) -> None:
        """The stored working directory is always a full, clean path."""
        fs = _tree()
        fs.cd("/a/./b/../b//")
        assert fs.get_pwd() == "/a/b"

    def test_cd_to_missing_path_keeps_directory(self) -> None:
        """A failed ``cd`` leaves the working directory unchanged."""
        fs = _tree()
        fs.cd("/a")
        with pytest.raises(PathNotFoundError):
            fs.cd("missing")
        assert fs.get_pwd() == "/a"


class TestLs:
    """Verify the directory listing format."""

    def test_empty_directory(self) -> None:
        """An empty directory lists only its path."""
        assert FileSystem().ls() == "/:"

    def test_directories_before_files(self) -> None:
        """Directories come first; only the very last entry gets ``└─``."""
        fs = FileSystem()
        fs.mkdir("/docs")
        fs.mkdir("/games")
        fs.touch("/", File(name="notes", content=Text("x")))
        assert fs.ls() == "\n".join(
            [
                "/:",
                " ├─📁 docs",
                " ├─📁 games",
                " └─🗎 notes (TXT)",
            ]
        )

    def test_last_directory_gets_corner_without_files(self) -> None:
        """With no files, the last directory gets the ``└─`` connector."""
        fs = FileSystem()
        fs.mkdir("/only")
        assert fs.ls().splitlines()[-1] == " └─📁 only"

    def test_ls_other_path(self) -> None:
        """``ls`` can list a directory other than the current one."""
        fs = _tree()
        assert fs.ls("/a").splitlines() == ["/a:", " └─📁 b"]
