"""Tests for the starting world and the session that holds it."""

import pytest

from bytecrawl.config import GameConfig
from bytecrawl.fs.content import Executable, Shop
from bytecrawl.fs.errors import PathNotFoundError
from bytecrawl.player import Player
from bytecrawl.session import Session
from bytecrawl.world import STATS_PATH, create_world


class TestCreateWorld:
    """Verify the starting layout."""

    def test_top_level_layout(self) -> None:
        """The root holds the three areas and the stats file."""
        info = create_world(Player()).resolve("/")
        assert info.subdirectories == ("shops", "scripts", "dungeon")
        assert info.files == ("stats", "tutorial")

    def test_without_tutorial(self) -> None:
        """The tutorial program can be left out."""
        info = create_world(Player(), with_tutorial=False).resolve("/")
        assert info.files == ("stats",)

    def test_dungeon_doors(self) -> None:
        """The dungeon has three doors; the third is empty."""
        fs = create_world(Player())
        assert fs.resolve("/dungeon").subdirectories == ("door1", "door2", "door3")
        assert fs.resolve("/dungeon/door3").is_empty

    def test_content_kinds(self) -> None:
        """Programs and shops are wired to their registries by name."""
        fs = create_world(Player())
        assert fs.get_file("/dungeon/door1/loot_example").content == Executable("loot_example")
        assert fs.get_file("/shops/test_shop").content == Shop("Scripts")

    def test_stats_seeded_from_player(self) -> None:
        """``/stats`` starts with the player's stats."""
        player = Player(bytes=7)
        fs = create_world(player)
        assert fs.cat(STATS_PATH) == ("stats", str(player))


class TestSession:
    """Verify session creation and stats syncing."""

    def test_new_session_starts_at_root(self) -> None:
        """A new session starts in ``/`` with a fresh player."""
        session = Session.new()
        assert session.fs.get_pwd() == "/"
        assert session.player == Player()

    def test_config_controls_tutorial(self) -> None:
        """The tutorial flag is taken from the config."""
        session = Session.new(GameConfig(tutorial=False))
        assert "tutorial" not in session.fs.resolve("/").files

    def test_sync_stats(self) -> None:
        """``sync_stats`` rewrites ``/stats``."""
        session = Session.new()
        session.player.bytes = 123
        session.sync_stats()
        assert "Bytes: 123" in session.fs.cat(STATS_PATH)[1]

    def test_sync_stats_without_file_raises(self) -> None:
        """Syncing fails once ``/stats`` is gone."""
        session = Session.new()
        session.fs.rm_file(STATS_PATH)
        with pytest.raises(PathNotFoundError):
            session.sync_stats()

    def test_sessions_are_independent(self) -> None:
        """Two sessions share no state."""
        first = Session.new()
        second = Session.new()
        first.fs.mkdir("/only_here")
        assert not second.fs.exists("/only_here")
