"""Game configuration: defaults, an optional JSON file, and the environment.

Settings are resolved in three layers, later layers winning:

1. Built-in defaults (debug off, tutorial on, web port 8080).
2. An optional JSON file, e.g. ``{"debug": true, "web_port": 9000}``.
   It is passed explicitly or named by ``BYTECRAWL_CONFIG``.
3. The ``BYTECRAWL_DEBUG`` environment variable.

The result is a frozen ``GameConfig``: configuration is read once at
start-up and never changes during a session.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Mapping

CONFIG_ENV_VAR = "BYTECRAWL_CONFIG"
DEBUG_ENV_VAR = "BYTECRAWL_DEBUG"
DEFAULT_WEB_PORT = 8080

_TRUTHY: frozenset[str] = frozenset(["1", "true", "yes", "on"])


class ConfigError(RuntimeError):
    """Raise when a configuration file cannot be read or parsed."""


@dataclass(frozen=True)
class GameConfig:
    """Start-up settings for a game session.

    Attributes:
        debug: Whether the privileged ``debug`` command is available.
        tutorial: Whether the ``tutorial`` program is placed in ``/``.
        web_port: Port the web UI listens on.

    """

    debug: bool = False
    tutorial: bool = True
    web_port: int = DEFAULT_WEB_PORT


def _parse_flag(value: str) -> bool:
    return value.strip().lower() in _TRUTHY


def _read_flag(values: dict[str, Any], key: str, *, default: bool) -> bool:
    """Return the boolean setting *key*, accepting JSON booleans or flag strings.

    Raises:
        ConfigError: If the value is neither a boolean nor a string.

    """
    value = values.get(key, default)
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return _parse_flag(value)
    msg = f"Invalid {key}: {value!r}"
    raise ConfigError(msg)


def _read_config_file(path: Path) -> dict[str, Any]:
    """Read a JSON object from *path*.

    Raises:
        ConfigError: If the file is unreadable, not JSON, or not an object.

    """
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as e:
        msg = f"Cannot load config: {e}"
        raise ConfigError(msg) from e
    if not isinstance(data, dict):
        msg = f"Config file must hold a JSON object: {path}"
        raise ConfigError(msg)
    return data  # pyright: ignore[reportUnknownVariableType]


def load_config(
    path: Path | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> GameConfig:
    """Build a ``GameConfig`` from defaults, a JSON file, and *environ*.

    Args:
        path: Optional JSON file with any of the ``GameConfig`` fields.
            When omitted, ``BYTECRAWL_CONFIG`` may name one instead.
        environ: Environment mapping (defaults to ``os.environ``).

    Raises:
        ConfigError: If the file cannot be used or a value is invalid.

    """
    env = os.environ if environ is None else environ
    if path is None and env.get(CONFIG_ENV_VAR):
        path = Path(env[CONFIG_ENV_VAR])

    values: dict[str, Any] = _read_config_file(path) if path is not None else {}
    if DEBUG_ENV_VAR in env:
        values["debug"] = _parse_flag(env[DEBUG_ENV_VAR])

    try:
        web_port = int(values.get("web_port", DEFAULT_WEB_PORT))
    except (TypeError, ValueError) as e:
        msg = f"Invalid web_port: {values.get('web_port')!r}"
        raise ConfigError(msg) from e

    return GameConfig(
        debug=_read_flag(values, "debug", default=False),
        tutorial=_read_flag(values, "tutorial", default=True),
        web_port=web_port,
    )
