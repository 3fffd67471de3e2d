"""Application paths and version lookup.

This module provides functions for accessing:
- Per-user application data directory (for the saved OAuth access token)
- The installed package version, with a fallback for source checkouts

The module uses platformdirs to determine platform-appropriate paths
for application data.
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

from platformdirs import user_data_dir

# Application metadata constants
APP_NAME = "flickrie"
APP_ORG = "flickrie"
TOKEN_FILE = "flickr_access_token.json"
_DEFAULT_VERSION = "1.0.0"  # Fallback version if unable to determine


def app_version() -> str:
    """Get the library version.

    Tries multiple approaches:
    1. importlib.metadata.version() (works when installed)
    2. Reading pyproject.toml from source tree (development mode)
    3. Returns default version as fallback

    Returns:
        Version string (e.g., "1.0.0")
    """
    try:
        return version(APP_NAME)
    except PackageNotFoundError:
        pass

    try:
        # Navigate from src/flickrie/core/paths.py to project root
        project_root = Path(__file__).parent.parent.parent.parent
        pyproject_path = project_root / "pyproject.toml"
        if pyproject_path.exists():
            import tomllib  # Python 3.11+

            with pyproject_path.open("rb") as f:
                data = tomllib.load(f)
                if "project" in data and "version" in data["project"]:
                    return data["project"]["version"]
    except Exception as e:
        log = logging.getLogger(__name__)
        log.debug("Could not read version from pyproject.toml: %s", e)

    return _DEFAULT_VERSION


def app_data_dir() -> Path:
    """Return a per-user app data directory for the saved access token."""
    return Path(user_data_dir(appname=APP_NAME, appauthor=APP_ORG, roaming=True))


def token_path() -> Path:
    """Return the location of the saved OAuth access token."""
    return app_data_dir() / TOKEN_FILE
