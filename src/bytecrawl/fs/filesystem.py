"""In-memory directory tree with path resolution and mutation operations.

The tree is stored as a flat table (an *arena*) rather than as nested
objects:

- **Directory entry**: one record per directory, keyed by an integer
  directory number.  It holds its own name, the number of its parent,
  the parent path it was created under, the numbers of its child
  directories, and its files.

- **Path resolution**: ``/dungeon/door1`` is walked segment by segment
  from the root entry, looking each name up among the current entry's
  children.  ``.`` stays put and ``..`` follows the parent number, so
  walking upwards is as cheap as walking downwards and works the same
  way whether the caller only reads the result or goes on to change it.

- **Current directory**: relative paths start from
  ``current_directory``, which ``cd`` only changes after the new path
  has resolved.

Removing a directory drops its whole subtree from the table.  Nothing
outside the table holds a reference to an entry, so there are no cycles
and nothing to clean up.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from itertools import count
from typing import TYPE_CHECKING

from bytecrawl.fs.content import Executable, File, FileContent, Shop, Text
from bytecrawl.fs.errors import (
    DirectoryExistsError,
    InvalidArgumentsError,
    NotExecutableError,
    NotReadableError,
    PathNotFoundError,
)
from bytecrawl.fs.paths import split_parent_and_name, split_segments
from bytecrawl.fs.registry import ProgramRegistry
from bytecrawl.logging import LogLevel

if TYPE_CHECKING:
    from bytecrawl.logging import Logger
    from bytecrawl.player import Player

ROOT_PATH = "/"

_RESERVED_NAMES: frozenset[str] = frozenset(["", ".", ".."])


@dataclass(frozen=True)
class DirectoryInfo:
    """Read-only snapshot of a directory (returned by ``resolve``)."""

    number: int
    name: str
    path: str
    parent_path: str | None
    subdirectories: tuple[str, ...]
    files: tuple[str, ...]

    @property
    def is_empty(self) -> bool:
        """Return True if the directory has no subdirectories and no files."""
        return not self.subdirectories and not self.files


@dataclass
class _Directory:
    """Internal directory entry in the arena.

    ``parent_path`` is fixed when the directory is created and always
    ends in ``/``; the full path is ``parent_path + name``.
    """

    number: int
    name: str
    parent: int | None
    parent_path: str | None
    children: list[int] = field(default_factory=list)  # pyright: ignore[reportUnknownVariableType]
    files: list[File] = field(default_factory=list)  # pyright: ignore[reportUnknownVariableType]

    @property
    def path(self) -> str:
        """Return the full path of this directory."""
        return (self.parent_path or "") + self.name

    @property
    def child_parent_path(self) -> str:
        """Return the parent path a new child of this directory gets."""
        if self.parent is None:
            return ROOT_PATH
        return self.path + "/"

    def find_file(self, name: str) -> File | None:
        """Return the first file called *name*, or None."""
        return next((f for f in self.files if f.name == name), None)

    def __str__(self) -> str:
        """Format as ``📁 name``."""
        return f"📁 {self.name}"


class FileSystem:
    """An in-memory directory tree rooted at ``/``.

    Every operation accepts absolute paths or paths relative to
    ``current_directory``.  Failures raise a ``FileSystemError``
    subclass; nothing here prints or exits.
    """

    def __init__(
        self,
        *,
        programs: ProgramRegistry | None = None,
        logger: Logger | None = None,
    ) -> None:
        """Create a file system with an empty root directory.

        Args:
            programs: Registry that executable files are looked up in.
            logger: Optional log that receives one entry per mutation.

        """
        self._numbers = count(start=0)
        root = _Directory(number=next(self._numbers), name=ROOT_PATH, parent=None, parent_path=None)
        self._dirs: dict[int, _Directory] = {root.number: root}
        self._root_number: int = root.number
        self._programs = programs if programs is not None else ProgramRegistry()
        self._logger = logger
        self.current_directory: str = root.path

    @property
    def programs(self) -> ProgramRegistry:
        """Return the program registry used by ``run``."""
        return self._programs

    @property
    def root(self) -> _Directory:
        """Return the live root entry."""
        return self._dirs[self._root_number]

    def _log(self, message: str, level: LogLevel = LogLevel.INFO) -> None:
        if self._logger is not None:
            self._logger.log(level, message, source="fs")

    # -- Navigation -------------------------------------------------------

    def _find_subdir(self, directory: _Directory, name: str) -> _Directory | None:
        """Return the first child directory called *name*, or None."""
        for number in directory.children:
            child = self._dirs[number]
            if child.name == name:
                return child
        return None

    def _parent_of(self, directory: _Directory) -> _Directory:
        """Return the parent entry; the root is its own parent."""
        if directory.parent is None:
            return directory
        return self._dirs[directory.parent]

    def _resolve(self, path: str, start: str | None = None) -> _Directory:
        """Walk *path* and return the live directory entry it names.

        Raises:
            PathNotFoundError: If a segment names no child directory.

        """
        if path.startswith("/"):
            current = self.root
        else:
            start_path = self.current_directory if start is None else start
            current = self._walk(self.root, start_path)
        return self._walk(current, path)

    def _walk(self, current: _Directory, path: str) -> _Directory:
        for segment in split_segments(path):
            if segment == ".":
                continue
            if segment == "..":
                current = self._parent_of(current)
                continue
            child = self._find_subdir(current, segment)
            if child is None:
                msg = f"Directory not found: {segment}"
                raise PathNotFoundError(msg)
            current = child
        return current

    def _to_info(self, directory: _Directory) -> DirectoryInfo:
        return DirectoryInfo(
            number=directory.number,
            name=directory.name,
            path=directory.path,
            parent_path=directory.parent_path,
            subdirectories=tuple(self._dirs[n].name for n in directory.children),
            files=tuple(f.name for f in directory.files),
        )

    def resolve(self, path: str, *, start: str | None = None) -> DirectoryInfo:
        """Resolve *path* to a directory and return a snapshot of it.

        Args:
            path: Absolute path, or a path relative to *start*.
            start: Directory that relative paths begin at
                (defaults to ``current_directory``).

        Raises:
            PathNotFoundError: If any segment does not exist.

        """
        return self._to_info(self._resolve(path, start))

    def exists(self, path: str) -> bool:
        """Check whether *path* names a directory."""
        try:
            self._resolve(path)
        except PathNotFoundError:
            return False
        return True

    # -- Current directory ------------------------------------------------

    def get_pwd(self) -> str:
        """Return the current directory's full path."""
        return self.current_directory

    def cd(self, path: str) -> None:
        """Change the current directory.

        The current directory is left untouched if *path* does not resolve.

        Raises:
            PathNotFoundError: If *path* does not exist.

        """
        self.current_directory = self._resolve(path).path

    def ls(self, path: str | None = None) -> str:
        """Render a listing of a directory (default: the current one).

        Directories come before files, both in creation order.  Every
        entry is prefixed with ``├─`` except the very last, which gets
        ``└─``.

        Raises:
            PathNotFoundError: If *path* does not exist.

        """
        directory = self._resolve(path if path is not None else self.current_directory)
        entries = [str(self._dirs[n]) for n in directory.children]
        entries.extend(str(f) for f in directory.files)
        lines = [f"{directory.path}:"]
        for i, entry in enumerate(entries):
            connector = "└─" if i == len(entries) - 1 else "├─"
            lines.append(f" {connector}{entry}")
        return "\n".join(lines)

    # -- Directories ------------------------------------------------------

    @staticmethod
    def _check_name(name: str) -> None:
        """Reject names that could never be reached by a path.

        Raises:
            InvalidArgumentsError: If *name* is empty, ``.``, ``..`` or contains ``/``.

        """
        if name in _RESERVED_NAMES or "/" in name:
            msg = f"Invalid name: {name!r}"
            raise InvalidArgumentsError(msg)

    def _make_subdir(self, parent: _Directory, name: str) -> _Directory:
        self._check_name(name)
        if self._find_subdir(parent, name) is not None:
            msg = f"Directory already exists: {name}"
            raise DirectoryExistsError(msg)
        directory = _Directory(
            number=next(self._numbers),
            name=name,
            parent=parent.number,
            parent_path=parent.child_parent_path,
        )
        self._dirs[directory.number] = directory
        parent.children.append(directory.number)
        return directory

    def make_subdir(self, parent_path: str, name: str) -> DirectoryInfo:
        """Create a single directory *name* inside *parent_path*.

        Raises:
            PathNotFoundError: If *parent_path* does not exist.
            InvalidArgumentsError: If *name* is empty, ``.``, ``..`` or contains ``/``.
            DirectoryExistsError: If a sibling directory is already called *name*.

        """
        directory = self._make_subdir(self._resolve(parent_path), name)
        self._log(f"Created directory {directory.path}")
        return self._to_info(directory)

    def mkdir(self, path: str) -> DirectoryInfo:
        """Create every missing directory along *path*.

        Directories that already exist are reused.  ``.`` and ``..``
        navigate as they do during resolution.

        Returns:
            A snapshot of the last directory on the path.

        Raises:
            InvalidArgumentsError: If *path* has no segments.

        """
        segments = split_segments(path)
        if not segments:
            msg = "Specified path can not be empty!"
            raise InvalidArgumentsError(msg)

        current = self.root if path.startswith("/") else self._resolve(self.current_directory)
        for segment in segments:
            if segment == ".":
                continue
            if segment == "..":
                current = self._parent_of(current)
                continue
            existing = self._find_subdir(current, segment)
            if existing is None:
                current = self._make_subdir(current, segment)
                self._log(f"Created directory {current.path}")
            else:
                current = existing
        return self._to_info(current)

    def rm_dir(self, path: str) -> None:
        """Remove a directory and everything below it.

        If the current directory was inside the removed subtree it moves
        to the removed directory's parent.

        Raises:
            InvalidArgumentsError: If *path* names the root.
            PathNotFoundError: If the directory does not exist.

        """
        trimmed = path.rstrip("/")
        parent_path, name = split_parent_and_name(trimmed)
        if not name:
            msg = "Cannot remove the root directory"
            raise InvalidArgumentsError(msg)

        parent = self._resolve(parent_path)
        target = self._find_subdir(parent, name)
        if target is None:
            msg = f"Directory not found: {name}"
            raise PathNotFoundError(msg)

        cwd = self._resolve(self.current_directory)
        removed = self._collect_subtree(target)
        parent.children.remove(target.number)
        for number in removed:
            del self._dirs[number]
        if cwd.number in removed:
            self.current_directory = parent.path
        self._log(f"Removed directory {target.path} ({len(removed)} total)")

    def _collect_subtree(self, directory: _Directory) -> set[int]:
        """Return the numbers of *directory* and all its descendants."""
        numbers: set[int] = set()
        stack = [directory.number]
        while stack:
            number = stack.pop()
            numbers.add(number)
            stack.extend(self._dirs[number].children)
        return numbers

    # -- Files ------------------------------------------------------------

    def touch(self, path: str, file: File) -> None:
        """Append *file* to the directory at *path*.

        A file with the same name may already exist; both are kept and
        lookups return the older one.

        Raises:
            InvalidArgumentsError: If the file name is not a valid name.
            PathNotFoundError: If the directory does not exist.

        """
        self._check_name(file.name)
        directory = self._resolve(path)
        directory.files.append(file)
        self._log(f"Created file {file.name} in {directory.path}")

    def _locate_file(self, path: str) -> tuple[_Directory, File]:
        """Return the containing directory and the first file matching *path*.

        Raises:
            PathNotFoundError: If the directory or the file does not exist.

        """
        parent_path, name = split_parent_and_name(path)
        directory = self._resolve(parent_path)
        file = directory.find_file(name)
        if file is None:
            msg = f"File not found: {name}"
            raise PathNotFoundError(msg)
        return (directory, file)

    def get_file(self, path: str) -> File:
        """Return the file at *path*.

        Raises:
            PathNotFoundError: If the file does not exist.

        """
        _, file = self._locate_file(path)
        return file

    def cat(self, path: str) -> tuple[str, str]:
        """Read a text file.

        Returns:
            A ``(name, text)`` tuple.

        Raises:
            PathNotFoundError: If the file does not exist.
            NotReadableError: If the file is not a text file.

        """
        _, file = self._locate_file(path)
        match file.content:
            case Text(text=text):
                return (file.name, text)
            case Executable() | Shop():
                msg = f"This file is not a text file and can not be read: {file.name}"
                raise NotReadableError(msg)

    def edit_file(self, path: str, new_content: FileContent) -> None:
        """Replace a file's content wholesale.

        Raises:
            PathNotFoundError: If the file does not exist.

        """
        directory, file = self._locate_file(path)
        file.content = new_content
        self._log(f"Edited file {file.name} in {directory.path}", LogLevel.DEBUG)

    def rm_file(self, path: str) -> None:
        """Remove the first file matching *path*.

        Raises:
            PathNotFoundError: If the file does not exist.

        """
        directory, file = self._locate_file(path)
        directory.files.remove(file)
        self._log(f"Removed file {file.name} from {directory.path}")

    def run(self, path: str, player: Player, args: list[str]) -> str:
        """Run an executable file and return the program's output.

        The program gets full access to this file system and to
        *player*, and may change either.

        Raises:
            PathNotFoundError: If the file does not exist.
            NotExecutableError: If the file is not executable or its
                program is not registered.

        """
        _, file = self._locate_file(path)
        match file.content:
            case Executable(program=name):
                try:
                    program = self._programs.get(name)
                except KeyError as e:
                    msg = f"No program registered for {file.name}: {name}"
                    raise NotExecutableError(msg) from e
                return program(self, player, args)
            case Text() | Shop():
                msg = f"This file is not executable: {file.name}"
                raise NotExecutableError(msg)
