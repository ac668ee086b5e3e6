"""Interactive REPL (Read-Eval-Print Loop) for the game.

The REPL is the terminal interface.  It starts a session, creates a
shell, and enters the classic loop:

    1. **Read**: display a prompt showing the current directory.
    2. **Eval**: pass the line to ``shell.execute()``.
    3. **Print**: display the result.
    4. **Loop**: repeat until the shell returns the exit sentinel.

The helpers (``build_prompt``, ``format_banner``) are pure and
testable.  ``run()`` is the I/O entrypoint and ``main()`` the console
script.
"""

import readline

from bytecrawl.completer import Completer
from bytecrawl.config import GameConfig, load_config
from bytecrawl.fs.filesystem import FileSystem
from bytecrawl.session import Session
from bytecrawl.shell import Shell


def format_banner(config: GameConfig) -> str:
    """Return the welcome text shown when the game starts."""
    lines = ["Welcome to ByteCrawl! Type ls to get your bearings."]
    if config.tutorial:
        lines[0] += " Run the tutorial program with `./tutorial`."
    if config.debug:
        lines.append("Debug commands are enabled. Type `debug help` to list them.")
    return "\n".join(lines)


def build_prompt(fs: FileSystem) -> str:
    """Build the prompt string, e.g. ``/dungeon> ``."""
    return f"{fs.get_pwd()}> "


def run(config: GameConfig | None = None) -> None:
    """Start a game and run the interactive REPL.

    Handles Ctrl+D and Ctrl+C as a graceful exit.
    """
    session = Session.new(config)
    shell = Shell(session=session)

    completer = Completer(shell)
    readline.set_completer(completer.complete)
    readline.set_completer_delims(" \t")
    readline.parse_and_bind("tab: complete")

    print(format_banner(session.config))  # noqa: T201

    try:
        while True:
            try:
                command = input(build_prompt(session.fs))
            except EOFError:
                print()  # noqa: T201
                break

            result = shell.execute(command)
            if result == Shell.EXIT_SENTINEL:
                break
            if result:
                print(result)  # noqa: T201

    except KeyboardInterrupt:
        print("\nInterrupted.")  # noqa: T201

    finally:
        print("Exited safely. Thanks for playing!")  # noqa: T201


def main() -> None:
    """Run the game with configuration from the environment.

    This is the ``bytecrawl`` console entry point.
    """
    run(load_config())
