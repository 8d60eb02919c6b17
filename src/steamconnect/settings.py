"""Utilities for loading the optional settings file."""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, TypedDict

from src.steamconnect.services.resolver import ADDRESS_FAMILIES


class SteamConnectSettings(TypedDict, total=False):
    """Structure of the settings file, keyed by Flask config name."""

    STEAMCONNECT_REDIRECT_CODE: int
    STEAMCONNECT_ADDRESS_FAMILY: str
    STEAMCONNECT_PUBLIC_URL: str | None


SETTINGS_ENV_VAR = "STEAMCONNECT_SETTINGS"

_DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parents[2] / "data" / "steamconnect.json"

# Settings file keys mapped to their config names and accepted types.
_KEYS: dict[str, tuple[str, tuple[type, ...]]] = {
    "redirect_code": ("STEAMCONNECT_REDIRECT_CODE", (int,)),
    "address_family": ("STEAMCONNECT_ADDRESS_FAMILY", (str,)),
    "public_url": ("STEAMCONNECT_PUBLIC_URL", (str, type(None))),
}
_REDIRECT_CODES = {301, 302, 303, 307, 308}


def load_settings(path: str | Path | None = None) -> SteamConnectSettings:
    """Load settings from ``data/steamconnect.json``.

    Args:
        path: Optional override of the settings file location. When omitted
            the ``STEAMCONNECT_SETTINGS`` environment variable is consulted
            before the default location.

    Returns:
        The parsed settings keyed by Flask config name. A missing default file
        yields an empty mapping.

    Raises:
        FileNotFoundError: If an explicitly requested file is missing.
        ValueError: If the file cannot be parsed or holds unknown or invalid
            values.
    """

    explicit = path if path is not None else os.environ.get(SETTINGS_ENV_VAR)
    settings_path = Path(explicit) if explicit else _DEFAULT_SETTINGS_PATH

    try:
        raw_contents = settings_path.read_text(encoding="utf-8")
    except FileNotFoundError:
        if not explicit:
            return SteamConnectSettings()
        raise FileNotFoundError(
            f"Unable to locate steamconnect settings at '{settings_path}'."
        ) from None

    try:
        parsed_contents: Any = json.loads(raw_contents)
    except json.JSONDecodeError as exc:
        raise ValueError(
            f"The settings file at '{settings_path}' is not valid JSON."
        ) from exc

    if not isinstance(parsed_contents, dict):
        raise ValueError("The settings file must contain a JSON object.")

    unknown_keys = parsed_contents.keys() - _KEYS.keys()
    if unknown_keys:
        raise ValueError(
            "The settings file contains unknown keys: " + ", ".join(sorted(unknown_keys))
        )

    settings = SteamConnectSettings()
    for key, value in parsed_contents.items():
        config_key, accepted = _KEYS[key]
        # bool is an int subclass; reject it explicitly.
        if isinstance(value, bool) or not isinstance(value, accepted):
            raise ValueError(f"Setting '{key}' has an invalid type.")
        settings[config_key] = value

    _validate(settings)
    return settings


def _validate(settings: SteamConnectSettings) -> None:
    code = settings.get("STEAMCONNECT_REDIRECT_CODE")
    if code is not None and code not in _REDIRECT_CODES:
        raise ValueError(
            "redirect_code must be one of: " + ", ".join(str(c) for c in sorted(_REDIRECT_CODES))
        )

    family = settings.get("STEAMCONNECT_ADDRESS_FAMILY")
    if family is not None and family not in ADDRESS_FAMILIES:
        raise ValueError(
            "address_family must be one of: " + ", ".join(sorted(ADDRESS_FAMILIES))
        )


__all__ = ["SETTINGS_ENV_VAR", "SteamConnectSettings", "load_settings"]
