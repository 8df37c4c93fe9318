"""Version of the installed package."""

from __future__ import annotations

from importlib import metadata

DISTRIBUTION = "civoclient"
DEFAULT_VERSION = "dev"


def get_version() -> str:
    """Return the installed distribution's version, or "dev" when not installed."""
    try:
        return metadata.version(DISTRIBUTION) or DEFAULT_VERSION
    except metadata.PackageNotFoundError:
        return DEFAULT_VERSION