"""Guided tutorial: a walkthrough played in a throwaway world.

The ``tutorial`` program builds a complete second session (its own
file system and its own player), drives a short script of real shell
commands against it, and returns the transcript.  Nothing the
tutorial does touches the player's actual game.

Each step pairs a sentence of explanation with the command it
demonstrates::

    Step 2: See what is around you
      $ ls
      /:
       ├─📁 shops
       ...
"""

from __future__ import annotations

from bytecrawl.config import GameConfig
from bytecrawl.session import Session
from bytecrawl.shell import Shell

_STEPS: list[tuple[str, str]] = [
    ("Find out where you are", "pwd"),
    ("See what is around you", "ls"),
    ("Walk into the dungeon", "cd dungeon"),
    ("Look behind the first door", "ls door1"),
    ("Run the program you found", "./door1/loot_example"),
    ("Go back up with '..'", "cd .."),
    ("Read a text file", "cat scripts/README"),
    ("Check your stats", "cat stats"),
]


def run_tutorial(_args: list[str] | None = None) -> str:
    """Play through the tutorial script and return the transcript."""
    session = Session.new(GameConfig(tutorial=False))
    shell = Shell(session=session, allow_debug=False)

    lines: list[str] = [
        "Welcome to the tutorial! This will run you through the basics of the game!",
        "All changes made here will not be reflected in the actual game,"
        " so feel free to experiment!",
        "",
    ]
    for number, (explanation, command) in enumerate(_STEPS, start=1):
        lines.append(f"Step {number}: {explanation}")
        lines.append(f"  $ {command}")
        output = shell.execute(command)
        lines.extend(f"  {line}" for line in output.splitlines())
        lines.append("")

    lines.append("That's it! Type `help` any time to see every command.")
    return "\n".join(lines)
