"""The player: health, score, and the bytes used as currency.

Programs found in the dungeon change these numbers; the shell mirrors
them into the ``/stats`` text file after every command so the player
can ``cat /stats`` to check on themselves.
"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_HEALTH = 100

_STAT_NAMES: tuple[str, ...] = ("health", "score", "bytes")


@dataclass
class Player:
    """Mutable player record."""

    health: int = DEFAULT_HEALTH
    score: int = 0
    bytes: int = 0

    def damage(self, amount: int) -> bool:
        """Reduce health by *amount*, never below zero.

        Returns:
            True if the damage killed the player.

        """
        if self.health > amount:
            self.health -= amount
            return False
        self.health = 0
        return True

    def heal(self, amount: int) -> None:
        """Increase health by *amount*."""
        self.health += amount

    def set_stat(self, name: str, value: int) -> None:
        """Set one of the named stats (used by ``debug ps``).

        Raises:
            KeyError: If *name* is not a stat.
            ValueError: If *value* is negative.

        """
        if name not in _STAT_NAMES:
            msg = f"Unknown variable: {name}"
            raise KeyError(msg)
        if value < 0:
            msg = f"Invalid value: {value}"
            raise ValueError(msg)
        setattr(self, name, value)

    def __str__(self) -> str:
        """Format as the three-line stats sheet."""
        return f"Health: {self.health}\nScore: {self.score}\nBytes: {self.bytes}"
