"""Flask application factory for the ByteCrawl web UI.

The ``create_app`` function starts a session, creates a shell, and
returns a Flask app with three endpoints:

- ``GET /``: render the terminal HTML page with the welcome banner.
- ``POST /api/execute``: execute a command and return JSON.
- ``GET /api/status``: return the current directory and player stats.

The game tree assumes a single writer, while Flask may serve requests
on several threads.  Every endpoint therefore holds one lock for the
whole time it touches the session.
"""

from __future__ import annotations

import threading

from flask import Flask, Response, jsonify, render_template, request

from bytecrawl.config import GameConfig, load_config
from bytecrawl.repl import format_banner
from bytecrawl.session import Session
from bytecrawl.shell import Shell

_HTTP_BAD_REQUEST = 400


def create_app(config: GameConfig | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        config: Game settings (defaults to ``GameConfig()``).

    Returns:
        A configured Flask application ready to serve.

    """
    session = Session.new(config)
    shell = Shell(session=session)
    lock = threading.Lock()
    state = {"exited": False}

    banner = format_banner(session.config)

    app = Flask(__name__)

    @app.route("/")
    def index() -> str:  # pyright: ignore[reportUnusedFunction]
        """Render the terminal HTML page."""
        with lock:
            prompt = session.fs.get_pwd()
        return render_template("index.html", banner=banner, prompt=prompt)

    @app.route("/api/execute", methods=["POST"])
    def execute() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Execute a shell command and return JSON output.

        Expects JSON body: ``{"command": "..."}``

        Returns:
            JSON with ``output``, ``cwd`` and ``exited`` fields.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or "command" not in data:
            return jsonify({"error": "Missing 'command' field"}), _HTTP_BAD_REQUEST

        command = data["command"]
        if not isinstance(command, str):
            return jsonify({"error": "'command' must be a string"}), _HTTP_BAD_REQUEST
        with lock:
            if state["exited"]:
                return jsonify({"output": "Session ended.", "cwd": None, "exited": True})
            result = shell.execute(command)
            if result == Shell.EXIT_SENTINEL:
                state["exited"] = True
                return jsonify(
                    {"output": "Exited safely. Thanks for playing!", "cwd": None, "exited": True}
                )
            cwd = session.fs.get_pwd()

        return jsonify({"output": result, "cwd": cwd, "exited": False})

    @app.route("/api/status")
    def status() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the session status for polling.

        Returns:
            JSON with ``cwd``, ``player`` and ``exited`` fields.

        """
        with lock:
            player = session.player
            return jsonify(
                {
                    "cwd": session.fs.get_pwd(),
                    "player": {
                        "health": player.health,
                        "score": player.score,
                        "bytes": player.bytes,
                    },
                    "exited": state["exited"],
                }
            )

    return app


def main() -> None:
    """Run the web UI development server.

    This is the ``bytecrawl-web`` console entry point.
    """
    config = load_config()
    app = create_app(config)
    app.run(debug=config.debug, port=config.web_port)
