"""Tests for the browser-based web UI.

The web UI exposes the game shell over HTTP.  Tests use
``pytest.importorskip`` so they are skipped when Flask is not installed.
"""

from __future__ import annotations

from typing import Any

import pytest

flask = pytest.importorskip("flask")

from bytecrawl.config import GameConfig  # noqa: E402
from bytecrawl.web.app import create_app  # noqa: E402

HTTP_OK = 200
HTTP_BAD_REQUEST = 400


def _create_client(config: GameConfig | None = None) -> Any:
    """Create a test client from a fresh app."""
    app = create_app(config)
    app.config["TESTING"] = True
    return app.test_client()


class TestAppCreation:
    """Verify the app factory and landing page."""

    def test_create_app_returns_flask(self) -> None:
        """create_app should return a Flask application."""
        assert isinstance(create_app(), flask.Flask)

    def test_index_returns_html(self) -> None:
        """The landing page is the terminal page."""
        response = _create_client().get("/")
        assert response.status_code == HTTP_OK
        assert b"ByteCrawl" in response.data


class TestExecuteEndpoint:
    """Verify POST /api/execute."""

    def test_execute_pwd(self) -> None:
        """Commands run against the session."""
        response = _create_client().post("/api/execute", json={"command": "pwd"})
        assert response.status_code == HTTP_OK
        assert response.get_json() == {"output": "/", "cwd": "/", "exited": False}

    def test_cwd_follows_cd(self) -> None:
        """The returned cwd reflects ``cd``."""
        client = _create_client()
        data = client.post("/api/execute", json={"command": "cd dungeon"}).get_json()
        assert data["cwd"] == "/dungeon"

    def test_missing_command_is_bad_request(self) -> None:
        """A body without ``command`` is rejected."""
        response = _create_client().post("/api/execute", json={})
        assert response.status_code == HTTP_BAD_REQUEST
        assert "command" in response.get_json()["error"]

    def test_non_json_is_bad_request(self) -> None:
        """A non-JSON body is rejected."""
        response = _create_client().post("/api/execute", data="pwd")
        assert response.status_code == HTTP_BAD_REQUEST

    def test_non_object_body_is_bad_request(self) -> None:
        """A JSON list is rejected rather than crashing."""
        response = _create_client().post("/api/execute", json=["command"])
        assert response.status_code == HTTP_BAD_REQUEST

    def test_non_string_command_is_bad_request(self) -> None:
        """``command`` must be a string."""
        response = _create_client().post("/api/execute", json={"command": 5})
        assert response.status_code == HTTP_BAD_REQUEST
        assert "string" in response.get_json()["error"]

    def test_exit_ends_session(self) -> None:
        """After ``exit`` no further commands run."""
        client = _create_client()
        first = client.post("/api/execute", json={"command": "exit"}).get_json()
        assert first["exited"] is True
        second = client.post("/api/execute", json={"command": "pwd"}).get_json()
        assert second == {"output": "Session ended.", "cwd": None, "exited": True}

    def test_debug_follows_config(self) -> None:
        """Debug commands are available only when configured."""
        client = _create_client(GameConfig(debug=True))
        data = client.post("/api/execute", json={"command": "debug ps bytes 50"}).get_json()
        assert data["output"] == ""


class TestStatusEndpoint:
    """Verify GET /api/status."""

    def test_status_reports_player(self) -> None:
        """Status shows the cwd and the player's stats."""
        client = _create_client()
        client.post("/api/execute", json={"command": "./dungeon/door1/loot_example"})
        data = client.get("/api/status").get_json()
        assert data["cwd"] == "/"
        assert data["player"] == {"health": 100, "score": 0, "bytes": 10}
        assert data["exited"] is False
