"""Application package for the steamconnect Flask service."""
from __future__ import annotations

from flask import Flask

from src.steamconnect.settings import load_settings

# Single application object shared by the route modules and the WSGI entry
# points in ``app.py`` and ``main.py``.
app = Flask(__name__, static_folder=None)
app.config.from_mapping(load_settings())

# Passwords may legitimately contain ``//``; the router must not rewrite them.
app.url_map.merge_slashes = False


def _register_routes() -> None:
    """Attach the connect route to :data:`app`.

    The route module imports ``app`` from this package, so it is loaded only
    once ``app`` exists.
    """

    from src.steamconnect.routes import connect as _connect  # noqa: F401


_register_routes()

__all__ = ["app"]
