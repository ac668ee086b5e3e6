"""Virtual filesystem: directory tree, path grammar, and content kinds.

Re-exports public symbols so callers can write::

    from bytecrawl.fs import FileSystem, File, Text
"""

from bytecrawl.fs.content import Executable, File, FileContent, Shop, Text, content_label
from bytecrawl.fs.errors import (
    DirectoryExistsError,
    FileSystemError,
    InvalidArgumentsError,
    MalformedPathError,
    NotExecutableError,
    NotReadableError,
    PathNotFoundError,
)
from bytecrawl.fs.filesystem import ROOT_PATH, DirectoryInfo, FileSystem
from bytecrawl.fs.paths import parse_path_segment, split_parent_and_name, split_segments
from bytecrawl.fs.registry import Program, ProgramRegistry

__all__ = [
    "ROOT_PATH",
    "DirectoryExistsError",
    "DirectoryInfo",
    "Executable",
    "File",
    "FileContent",
    "FileSystem",
    "FileSystemError",
    "InvalidArgumentsError",
    "MalformedPathError",
    "NotExecutableError",
    "NotReadableError",
    "PathNotFoundError",
    "Program",
    "ProgramRegistry",
    "Shop",
    "Text",
    "content_label",
    "parse_path_segment",
    "split_parent_and_name",
    "split_segments",
]
