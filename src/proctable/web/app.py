"""Flask application factory for the process-table web UI.

The ``create_app`` function creates (or adopts) a registry, attaches a
shell, and returns a Flask app with three endpoints:

- ``GET /`` — render the command page.
- ``POST /api/execute`` — execute a command and return JSON.
- ``GET /api/state`` — return the current queues and tree.
"""

from __future__ import annotations

from flask import Flask, Response, jsonify, render_template, request

from proctable.registry import ProcessRegistry
from proctable.shell import Shell

_HTTP_BAD_REQUEST = 400
_DEFAULT_PORT = 8080


def create_app(*, registry: ProcessRegistry | None = None) -> Flask:
    """Create and configure the Flask application.

    Args:
        registry: Registry to serve.  A fresh one is created if omitted.

    Returns:
        A configured Flask application ready to serve.

    """
    shell = Shell(registry=registry if registry is not None else ProcessRegistry())

    app = Flask(__name__)

    @app.route("/")
    def index() -> str:  # pyright: ignore[reportUnusedFunction]
        """Render the command page."""
        return render_template("index.html", menu=shell.command_names)

    @app.route("/api/execute", methods=["POST"])
    def execute() -> tuple[Response, int] | Response:  # pyright: ignore[reportUnusedFunction]
        """Execute a shell command and return JSON output.

        Expects JSON body: ``{"command": "..."}``

        Returns:
            JSON with ``output`` and ``halted`` fields.

        """
        data = request.get_json(silent=True)
        if not isinstance(data, dict) or "command" not in data:
            return jsonify({"error": "Missing 'command' field"}), _HTTP_BAD_REQUEST

        command = data["command"]
        if not isinstance(command, str):
            return jsonify({"error": "'command' must be a string"}), _HTTP_BAD_REQUEST

        if shell.halted:
            return jsonify({"output": "Session closed.", "halted": True})

        result = shell.execute(command)

        if result == Shell.EXIT_SENTINEL:
            return jsonify({"output": "Session closed.", "halted": True})

        return jsonify({"output": result, "halted": False})

    @app.route("/api/state")
    def state() -> Response:  # pyright: ignore[reportUnusedFunction]
        """Return the registry snapshot as JSON."""
        return jsonify(shell.registry.snapshot().to_dict())

    return app


def main() -> None:
    """Run the web UI development server.

    This is the ``proctable-web`` console entry point.
    """
    app = create_app()
    app.run(debug=True, port=_DEFAULT_PORT)
