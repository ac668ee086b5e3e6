"""Program registry: the behaviours behind executable files.

An ``Executable`` file stores only a program *name*.  The registry maps
that name to a callable, so the filesystem stays plain data and tests
can swap in their own programs without touching any game content.

A program receives the filesystem, the player, and the argument list
that followed the path on the command line, and returns the text to
show the player.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from bytecrawl.fs.filesystem import FileSystem
    from bytecrawl.player import Player

Program: TypeAlias = Callable[["FileSystem", "Player", list[str]], str]


class ProgramRegistry:
    """Named lookup table of programs."""

    def __init__(self, programs: dict[str, Program] | None = None) -> None:
        """Create a registry, optionally pre-populated.

        Args:
            programs: Starting name → program mapping (copied).

        """
        self._programs: dict[str, Program] = dict(programs) if programs else {}

    def register(self, name: str, program: Program) -> None:
        """Bind *name* to *program*, replacing any previous binding."""
        self._programs[name] = program

    def get(self, name: str) -> Program:
        """Return the program registered under *name*.

        Raises:
            KeyError: If no program has that name.

        """
        program = self._programs.get(name)
        if program is None:
            msg = f"Unknown program: {name}"
            raise KeyError(msg)
        return program

    def names(self) -> list[str]:
        """Return the registered program names, sorted."""
        return sorted(self._programs)

    def __contains__(self, name: object) -> bool:
        """Return True if *name* is registered."""
        return name in self._programs
