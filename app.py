"""Expose the steamconnect application for ``flask --app app run`` and WSGI servers."""
from __future__ import annotations

import logging

from src.steamconnect import app

__all__ = ["app"]


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.run(debug=True, host="0.0.0.0", port=5000)
