"""Built-in programs: the behaviours behind the dungeon's executable files.

Each program has the ``Program`` signature: it gets the file system,
the player, and the command-line arguments, and returns the text to
show.  ``default_programs()`` builds the registry a new world uses.
"""

from __future__ import annotations

import random
from typing import TYPE_CHECKING

from bytecrawl.fs.registry import ProgramRegistry

if TYPE_CHECKING:
    from bytecrawl.fs.filesystem import FileSystem
    from bytecrawl.player import Player

LOOT_BYTES = 10
GAMBLE_STAKE = 10


def loot_box(_fs: FileSystem, player: Player, _args: list[str]) -> str:
    """Give the player a fixed amount of bytes."""
    player.bytes += LOOT_BYTES
    return f"You found a loot box! You got {LOOT_BYTES} bytes!"


def gamble_crate(_fs: FileSystem, player: Player, _args: list[str]) -> str:
    """Flip a coin: win bytes, or lose them to a file gremlin."""
    lines = ["You open the crate..."]
    if random.randint(0, 1) == 0:  # noqa: S311
        player.bytes += GAMBLE_STAKE
        lines.append(f"You found {GAMBLE_STAKE} bytes!")
        return "\n".join(lines)

    lines.append("You found a file gremlin that takes some bytes! :(")
    if player.bytes >= GAMBLE_STAKE:
        player.bytes -= GAMBLE_STAKE
    elif player.bytes != 0:
        lines.append("The gremlin took all your remaining bytes. :(")
        player.bytes = 0
    else:
        lines.append("You didnt have any bytes for the gremlin to take, so it just left.")
    return "\n".join(lines)


def tutorial(_fs: FileSystem, _player: Player, args: list[str]) -> str:
    """Walk the player through the commands in a throwaway world."""
    from bytecrawl.tutorial import run_tutorial  # noqa: PLC0415

    return run_tutorial(args)


def default_programs() -> ProgramRegistry:
    """Return a registry holding every built-in program."""
    return ProgramRegistry(
        {
            "loot_example": loot_box,
            "gamble_example": gamble_crate,
            "tutorial": tutorial,
        }
    )
