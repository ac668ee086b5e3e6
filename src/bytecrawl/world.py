"""World builder: populate a fresh file system with the starting layout.

::

    /
    ├─📁 shops       (test_shop → the "Scripts" shop)
    ├─📁 scripts     (README)
    ├─📁 dungeon
    │   ├─📁 door1   (loot_example)
    │   ├─📁 door2   (gamble_example)
    │   └─📁 door3
    ├─🗎 stats
    └─🗎 tutorial    (only in the main game, not inside the tutorial)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bytecrawl.fs.content import Executable, File, Shop, Text
from bytecrawl.fs.filesystem import FileSystem
from bytecrawl.programs import default_programs

if TYPE_CHECKING:
    from bytecrawl.fs.registry import ProgramRegistry
    from bytecrawl.logging import Logger
    from bytecrawl.player import Player

STATS_PATH = "/stats"


def create_world(
    player: Player,
    *,
    with_tutorial: bool = True,
    programs: ProgramRegistry | None = None,
    logger: Logger | None = None,
) -> FileSystem:
    """Create and populate the game's file system.

    Args:
        player: Player whose stats seed the ``/stats`` file.
        with_tutorial: Whether to place the ``tutorial`` program in ``/``.
        programs: Registry for executable files (defaults to the built-ins).
        logger: Optional log for file system events.

    """
    fs = FileSystem(
        programs=programs if programs is not None else default_programs(),
        logger=logger,
    )

    fs.mkdir("/shops/")
    fs.touch("/shops", File(name="test_shop", content=Shop(name="Scripts")))

    fs.mkdir("/scripts/")
    fs.touch(
        "/scripts",
        File(name="README", content=Text("Scripts are currently not implemented.")),
    )

    fs.mkdir("/dungeon/door1")
    fs.touch("/dungeon/door1", File(name="loot_example", content=Executable("loot_example")))
    fs.mkdir("/dungeon/door2")
    fs.touch(
        "/dungeon/door2",
        File(name="gamble_example", content=Executable("gamble_example")),
    )
    fs.mkdir("/dungeon/door3")

    fs.touch("/", File(name="stats", content=Text(str(player))))

    if with_tutorial:
        fs.touch("/", File(name="tutorial", content=Executable("tutorial")))

    return fs
