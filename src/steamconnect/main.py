"""Development server entry point for the steamconnect Flask service."""
from __future__ import annotations

import logging

from src.steamconnect import app


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    app.run(debug=True, host="0.0.0.0", port=8888)
