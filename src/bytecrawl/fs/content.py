"""File content kinds: what a file holds and how it may be used.

A file's content is one of a closed set of kinds:

- **Text**: a string the player can ``cat`` and a debug user can edit.
- **Executable**: the *name* of a program in the program registry.
  Running the file looks the name up and calls the program.  The file
  itself stores no behaviour, only the key.
- **Shop**: the name of a shop in the shop registry.  Shops are
  entered, not read.

Each kind is a frozen dataclass and ``FileContent`` is their union, so
every consumer handles them with a ``match`` over exactly three cases.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias


@dataclass(frozen=True)
class Text:
    """Plain readable text."""

    text: str = ""


@dataclass(frozen=True)
class Executable:
    """A reference to a registered program, by name."""

    program: str


@dataclass(frozen=True)
class Shop:
    """A reference to a registered shop, by name."""

    name: str


FileContent: TypeAlias = Text | Executable | Shop


def content_label(content: FileContent) -> str:
    """Return the short label shown next to a file in ``ls``."""
    match content:
        case Text():
            return "TXT"
        case Executable() | Shop():
            return "EXEC"


@dataclass
class File:
    """A named file in a directory.

    The name lives on the file itself; a directory may hold several
    files with the same name, and lookups return the first one.
    """

    name: str
    content: FileContent

    def __str__(self) -> str:
        """Format as ``🗎 name (LABEL)``."""
        return f"🗎 {self.name} ({content_label(self.content)})"
