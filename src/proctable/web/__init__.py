"""Browser-based web UI for the process table.

This package provides a Flask application that exposes the shell
through a web browser.  It is an **optional** extra — install with::

    pip install proctable[web]

The ``create_app`` factory in ``app.py`` creates a registry and a
shell, and serves three endpoints:

- ``GET /`` — HTML command page.
- ``POST /api/execute`` — execute a shell command and return JSON.
- ``GET /api/state`` — queues and tree as JSON for live polling.
"""
