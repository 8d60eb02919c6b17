"""Service layer helpers for the steamconnect application."""
from __future__ import annotations

from .connect_request import (
    ConnectRequest,
    ConnectRequestError,
    MalformedRequestError,
    parse_connect_path,
)
from .resolver import Resolution, resolve_host
from .translator import (
    ResolvedTarget,
    UnresolvableHostError,
    build_connect_uri,
    translate_path,
)

__all__ = [
    "ConnectRequest",
    "ConnectRequestError",
    "MalformedRequestError",
    "Resolution",
    "ResolvedTarget",
    "UnresolvableHostError",
    "build_connect_uri",
    "parse_connect_path",
    "resolve_host",
    "translate_path",
]
