"""Shops: named storefronts that ``Shop`` files point at.

A shop file holds only a shop name.  Entering it looks the name up
here.  Trading is not implemented yet, so entering a shop only greets
the player.
"""

from __future__ import annotations

DEFAULT_SHOPS: tuple[str, ...] = ("Scripts",)


class ShopRegistry:
    """The set of shops that exist in a game."""

    def __init__(self, names: tuple[str, ...] = DEFAULT_SHOPS) -> None:
        """Create a registry holding the given shop names."""
        self._names: list[str] = list(names)

    def add(self, name: str) -> None:
        """Open a new shop called *name* (no-op if it already exists)."""
        if name not in self._names:
            self._names.append(name)

    def names(self) -> list[str]:
        """Return the shop names in the order they were added."""
        return list(self._names)

    def enter(self, name: str) -> str:
        """Enter the shop called *name* and return its greeting.

        Raises:
            KeyError: If no shop has that name.

        """
        if name not in self._names:
            msg = f"Unknown shop: {name}"
            raise KeyError(msg)
        return "\n".join(
            [
                f"Welcome to the {name} shop!",
                "Type ls to browse the stock. Run `help` to see how to navigate the shop.",
                "",
                "Shops are currently not implemented.",
            ]
        )
