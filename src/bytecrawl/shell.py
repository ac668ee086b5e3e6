"""The shell: command interpreter for the game.

The shell reads a command line, splits it into a verb and a raw
argument string, dispatches to the matching handler, and returns a
string result.  Paths inside the argument string are pulled out with
the path grammar, so ``cat 'my notes'`` and ``./door1/loot_example``
both work.

Design choices:
    - **Returns strings, not prints.**  The REPL and the web UI decide
      how to display output; the shell stays fully testable.
    - **Command dispatch via a dict.**  Adding a command means writing a
      method and adding one dict entry.
    - **Errors become output.**  Every ``FileSystemError`` is caught and
      returned as an ``Error:`` line so a bad command never ends the
      session.
    - **Stats are mirrored after every command.**  Whatever a program
      did to the player shows up in ``/stats`` straight away.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, TypeAlias

from bytecrawl.fs.content import Executable, File, Shop, Text
from bytecrawl.fs.errors import FileSystemError, InvalidArgumentsError, PathNotFoundError
from bytecrawl.fs.paths import parse_path_segment, split_parent_and_name
from bytecrawl.logging import LogLevel

if TYPE_CHECKING:
    from bytecrawl.fs.filesystem import FileSystem
    from bytecrawl.session import Session

# A command handler takes the raw argument string and returns output.
_Handler: TypeAlias = Callable[[str], str]

RUN_PREFIX = "./"

_HELP_TEXT = """Commands:
  cd <path>                    - change directories
  ls [path]                    - list contents of a directory
  pwd                          - display the current directory
  clear                        - clear the screen
  cat <path>                   - display the contents of a file
  exit                         - exit the program
  help                         - display this help message
To run an EXEC file, type ./<program name>"""

_DEBUG_HELP_TEXT = """Debug commands:
  ps <var> <value>             - edit player stats
  mkdir <path>                 - create a directory and any missing parents
  edit <file path> <new text>  - edit a text file's content
  touch <file path> <text?>    - create a new text file with optional text
  rm <file, dir> <path>        - remove a file or directory
  log                          - show the session log"""


class Shell:
    """Command interpreter bound to one game session."""

    EXIT_SENTINEL = "__EXIT__"

    def __init__(self, *, session: Session, allow_debug: bool | None = None) -> None:
        """Create a shell for *session*.

        Args:
            session: The game whose file system and player commands act on.
            allow_debug: Whether ``debug`` commands are accepted.  Defaults
                to the session's configuration.

        """
        self._session = session
        self._allow_debug = session.config.debug if allow_debug is None else allow_debug

        self._commands: dict[str, _Handler] = {
            "cd": self._cmd_cd,
            "ls": self._cmd_ls,
            "pwd": self._cmd_pwd,
            "clear": self._cmd_clear,
            "exit": self._cmd_exit,
            "cat": self._cmd_cat,
            "help": self._cmd_help,
        }
        if self._allow_debug:
            self._commands["debug"] = self._cmd_debug

        self._debug_commands: dict[str, _Handler] = {
            "help": self._debug_help,
            "?": self._debug_help,
            "ps": self._debug_ps,
            "mkdir": self._debug_mkdir,
            "edit": self._debug_edit,
            "touch": self._debug_touch,
            "rm": self._debug_rm,
            "log": self._debug_log,
        }

    @property
    def session(self) -> Session:
        """Return the session this shell drives."""
        return self._session

    @property
    def fs(self) -> FileSystem:
        """Return the session's file system."""
        return self._session.fs

    @property
    def command_names(self) -> list[str]:
        """Return the available command names, sorted."""
        return sorted(self._commands)

    def execute(self, command: str) -> str:
        """Parse and execute one command line.

        Args:
            command: The raw line typed by the player (e.g. ``"cd dungeon"``).

        Returns:
            The command output, an ``Error:`` line, or ``EXIT_SENTINEL``.

        """
        output = self._execute_single(command)
        if output == self.EXIT_SENTINEL:
            return output

        try:
            self._session.sync_stats()
        except PathNotFoundError as e:
            note = f"Couldn't write stats to file. {e}"
            output = f"{output}\n{note}" if output else note
        return output

    def _execute_single(self, command: str) -> str:
        """Split off the verb and dispatch to its handler."""
        parts = command.split()
        if not parts:
            return ""

        name = parts[0]
        raw_args = " ".join(parts[1:])

        if name.startswith(RUN_PREFIX):
            handler = self._cmd_run
            raw_args = " ".join([name.removeprefix(RUN_PREFIX), *parts[1:]])
        else:
            handler = self._commands.get(name)
            if handler is None:
                return f"Unknown command: {name}"

        try:
            return handler(raw_args)
        except FileSystemError as e:
            self._session.logger.log(LogLevel.WARNING, f"{name}: {e}", source="shell")
            return f"Error: {e}"

    @staticmethod
    def _single_path(raw_args: str) -> str:
        """Parse *raw_args* as exactly one path.

        Raises:
            MalformedPathError: If the path has an unclosed quote.
            InvalidArgumentsError: If anything follows the path.

        """
        path, remainder = parse_path_segment(raw_args)
        if remainder is not None:
            msg = f"Invalid path: {raw_args}"
            raise InvalidArgumentsError(msg)
        return path

    # -- Command handlers ------------------------------------------------

    def _cmd_help(self, _raw_args: str) -> str:
        """Describe the available commands."""
        if self._allow_debug:
            return _HELP_TEXT + "\nDebug mode is on: type `debug help` for debug commands."
        return _HELP_TEXT

    def _cmd_cd(self, raw_args: str) -> str:
        """Change the current directory."""
        if not raw_args:
            return "Usage: cd <path>"
        self.fs.cd(self._single_path(raw_args))
        return ""

    def _cmd_ls(self, raw_args: str) -> str:
        """List a directory (default: the current one)."""
        path = self._single_path(raw_args) if raw_args else None
        return self.fs.ls(path)

    def _cmd_pwd(self, raw_args: str) -> str:
        """Show the current directory."""
        if raw_args:
            return "Usage: pwd"
        return self.fs.get_pwd()

    def _cmd_clear(self, _raw_args: str) -> str:
        """Report that clearing the screen is not available."""
        return "This command is not currently implemented."

    def _cmd_exit(self, raw_args: str) -> str:
        """Signal the REPL to stop."""
        if raw_args:
            return "Usage: exit"
        return self.EXIT_SENTINEL

    def _cmd_cat(self, raw_args: str) -> str:
        """Show the contents of a text file."""
        if not raw_args:
            return "Usage: cat <path>"
        name, text = self.fs.cat(self._single_path(raw_args))
        return f"{name}:\n{text}"

    def _cmd_run(self, raw_args: str) -> str:
        """Run an executable file, or enter a shop."""
        path, remainder = parse_path_segment(raw_args)
        if not path:
            return "Usage: ./<program name> [args...]"
        args = remainder.split(" ") if remainder is not None else []

        file = self.fs.get_file(path)
        match file.content:
            case Shop(name=shop_name):
                try:
                    return self._session.shops.enter(shop_name)
                except KeyError as e:
                    return f"Error: {e.args[0]}"
            case Executable() | Text():
                return self.fs.run(path, self._session.player, args)

    # -- Debug commands --------------------------------------------------

    def _cmd_debug(self, raw_args: str) -> str:
        """Dispatch a privileged debug subcommand."""
        if not raw_args:
            return "Not enough arguments."
        sub, _, rest = raw_args.partition(" ")
        handler = self._debug_commands.get(sub)
        if handler is None:
            return "Unknown subcommand."
        return handler(rest)

    def _debug_help(self, _raw_args: str) -> str:
        """List the debug subcommands."""
        return _DEBUG_HELP_TEXT

    def _debug_ps(self, raw_args: str) -> str:
        """Set a player stat: ``debug ps <var> <value>``."""
        args = raw_args.split()
        if len(args) != 2:  # noqa: PLR2004
            return "Not enough arguments."
        var, raw_value = args
        try:
            value = int(raw_value)
            self._session.player.set_stat(var, value)
        except ValueError:
            return "Invalid value."
        except KeyError:
            return "Unknown variable."
        return ""

    def _debug_mkdir(self, raw_args: str) -> str:
        """Create a directory and its missing parents."""
        if not raw_args:
            return "Not enough arguments."
        self.fs.mkdir(self._single_path(raw_args))
        return ""

    def _debug_edit(self, raw_args: str) -> str:
        """Replace a file's content with new text."""
        path, text = parse_path_segment(raw_args)
        if not path or text is None:
            return "Not enough arguments."
        self.fs.edit_file(path, Text(text))
        return ""

    def _debug_touch(self, raw_args: str) -> str:
        """Create a text file, optionally with content."""
        if not raw_args:
            return "Not enough arguments."
        path, text = parse_path_segment(raw_args)
        parent, name = split_parent_and_name(path)
        if not name:
            return "Invalid path."
        self.fs.touch(parent, File(name=name, content=Text(text or "")))
        return ""

    def _debug_rm(self, raw_args: str) -> str:
        """Remove a file or a directory: ``debug rm {file|dir} <path>``."""
        kind, _, raw_path = raw_args.partition(" ")
        if not raw_path:
            return "Not enough arguments."
        path, remainder = parse_path_segment(raw_path)
        if remainder is not None:
            return f"Invalid arguments: {remainder}"
        match kind:
            case "file":
                self.fs.rm_file(path)
            case "dir":
                self.fs.rm_dir(path)
            case _:
                return "Unknown subcommand for rm."
        return ""

    def _debug_log(self, _raw_args: str) -> str:
        """Show the session log."""
        return self._session.logger.render() or "No log entries."
