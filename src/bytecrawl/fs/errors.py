"""Exceptions raised by the virtual filesystem.

Every failure the engine can report is a subclass of
``FileSystemError``, so the shell can catch one type and turn any of
them into an ``Error:`` line without ending the session.
"""


class FileSystemError(Exception):
    """Base class for every recoverable filesystem failure."""


class MalformedPathError(FileSystemError):
    """Raise when a raw path string cannot be parsed (e.g. an unclosed quote)."""


class PathNotFoundError(FileSystemError):
    """Raise when a directory or file named in a path does not exist."""


class DirectoryExistsError(FileSystemError):
    """Raise when a directory is created next to a sibling of the same name."""


class NotReadableError(FileSystemError):
    """Raise when ``cat`` targets a file whose content is not text."""


class NotExecutableError(FileSystemError):
    """Raise when ``run`` targets a file whose content is not a program."""


class InvalidArgumentsError(FileSystemError):
    """Raise when an operation receives an argument it cannot act on."""
