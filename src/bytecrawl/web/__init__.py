"""Browser-based web UI for ByteCrawl.

This package provides a Flask application that exposes the game shell
through a web browser.  It is an **optional** extra: install with::

    pip install bytecrawl[web]

The ``create_app`` factory in ``app.py`` starts a session, creates a
shell, and serves three endpoints:

- ``GET /``: HTML terminal page.
- ``POST /api/execute``: execute a shell command and return JSON.
- ``GET /api/status``: current directory and player stats.
"""
