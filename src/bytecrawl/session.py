"""Session: everything one game needs, in one place.

The file system, the player, the shops, and the log are bundled here
and handed to the shell, rather than living in module globals.  Two
sessions never share state, which is what lets the tutorial run a
complete game of its own and throw it away afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from bytecrawl.config import GameConfig
from bytecrawl.fs.content import Text
from bytecrawl.logging import Logger
from bytecrawl.player import Player
from bytecrawl.shop import ShopRegistry
from bytecrawl.world import STATS_PATH, create_world

if TYPE_CHECKING:
    from bytecrawl.fs.filesystem import FileSystem


@dataclass
class Session:
    """State for one game: file system, player, shops, and log."""

    fs: FileSystem
    player: Player
    shops: ShopRegistry = field(default_factory=ShopRegistry)
    logger: Logger = field(default_factory=Logger)
    config: GameConfig = field(default_factory=GameConfig)

    @classmethod
    def new(cls, config: GameConfig | None = None) -> Session:
        """Start a new game with a freshly populated world."""
        config = config if config is not None else GameConfig()
        player = Player()
        logger = Logger()
        fs = create_world(player, with_tutorial=config.tutorial, logger=logger)
        return cls(fs=fs, player=player, logger=logger, config=config)

    def sync_stats(self) -> None:
        """Rewrite ``/stats`` with the player's current stats.

        Raises:
            PathNotFoundError: If ``/stats`` has been removed.

        """
        self.fs.edit_file(STATS_PATH, Text(str(self.player)))
