"""Tab completer for the game shell.

The completer separates **what to complete** (pure logic, fully
testable) from **how to wire it** (readline integration in the REPL).

- First word: command names, or ``./`` followed by a file name.
- Later words: directory and file names, following any ``/`` already
  typed (``cd dungeon/do`` → ``dungeon/door1/``, ``dungeon/door2/`` …).
"""

from __future__ import annotations

import readline
from typing import TYPE_CHECKING

from bytecrawl.fs.errors import FileSystemError
from bytecrawl.shell import RUN_PREFIX

if TYPE_CHECKING:
    from bytecrawl.shell import Shell


class Completer:
    """Context-aware tab completer for the game shell."""

    def __init__(self, shell: Shell) -> None:
        """Create a completer attached to a shell instance."""
        self._shell = shell

    def complete(self, text: str, state: int) -> str | None:
        """Readline callback: return the *state*-th candidate for *text*."""
        line = readline.get_line_buffer()
        matches = self.completions(text, line)
        return matches[state] if state < len(matches) else None

    def completions(self, text: str, line: str) -> list[str]:
        """Return every completion candidate for *text* within *line*.

        Args:
            text: The partial word being completed.
            line: The whole input line so far.

        """
        is_first_word = not line[: len(line) - len(text)].strip()
        if is_first_word:
            if text.startswith(RUN_PREFIX):
                names = self._path_candidates(text.removeprefix(RUN_PREFIX))
                return [RUN_PREFIX + name for name in names]
            return [name for name in self._shell.command_names if name.startswith(text)]
        return self._path_candidates(text)

    def _path_candidates(self, text: str) -> list[str]:
        """Return paths under the directory part of *text* that extend it."""
        directory, slash, partial = text.rpartition("/")
        prefix = directory + slash
        lookup = prefix if prefix else "."
        try:
            info = self._shell.fs.resolve(lookup)
        except FileSystemError:
            return []
        names = [f"{name}/" for name in info.subdirectories]
        names.extend(info.files)
        return [prefix + name for name in names if name.startswith(partial)]
