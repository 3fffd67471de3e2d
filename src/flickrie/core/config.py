"""Runtime settings for flickrie.

Settings can be given explicitly, read from the environment, or completed
from the access token that ``FlickrAuth`` saved in the per-user data
directory.
"""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from .errors import ConfigurationError
from .paths import token_path

API_URL = "https://api.flickr.com/services/rest/"
UPLOAD_URL = "https://up.flickr.com/services/upload/"
REPLACE_URL = "https://up.flickr.com/services/replace/"

# (connect, read) timeouts in seconds
DEFAULT_TIMEOUT = (5.0, 10.0)
DEFAULT_UPLOAD_TIMEOUT = (10.0, 60.0)

ENV_API_KEY = "FLICKR_API_KEY"
ENV_SHARED_SECRET = "FLICKR_SHARED_SECRET"
ENV_ACCESS_TOKEN = "FLICKR_ACCESS_TOKEN"
ENV_ACCESS_SECRET = "FLICKR_ACCESS_SECRET"
ENV_DEBUG = "FLICKRIE_DEBUG"

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Credentials, endpoints and timeouts used by a ``Flickrie`` instance."""

    api_key: str | None = None
    shared_secret: str | None = None
    access_token: str | None = None
    access_secret: str | None = None
    api_url: str = API_URL
    upload_url: str = UPLOAD_URL
    replace_url: str = REPLACE_URL
    timeout: tuple[float, float] = DEFAULT_TIMEOUT
    upload_timeout: tuple[float, float] = DEFAULT_UPLOAD_TIMEOUT
    debug: bool = False

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None, **overrides: Any) -> Settings:
        """Build settings from environment variables.

        When neither access credential is given, both are read from the saved
        token file.
        Keyword arguments that are not ``None`` take precedence over both.

        Args:
            environ: Mapping to read instead of ``os.environ``
            **overrides: Explicit field values

        Returns:
            A new Settings instance
        """
        env = os.environ if environ is None else environ
        values: dict[str, Any] = {
            "api_key": env.get(ENV_API_KEY),
            "shared_secret": env.get(ENV_SHARED_SECRET),
            "access_token": env.get(ENV_ACCESS_TOKEN),
            "access_secret": env.get(ENV_ACCESS_SECRET),
            "debug": env.get(ENV_DEBUG, "").lower() in ("1", "true", "yes"),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})

        # A saved token only stands in for a missing pair, never half of one
        if not values.get("access_token") and not values.get("access_secret"):
            saved = load_saved_token()
            if saved:
                values["access_token"] = saved.get("token")
                values["access_secret"] = saved.get("secret")

        return cls(**values)

    @property
    def authenticated(self) -> bool:
        """Whether an access token pair is available for signing requests."""
        return bool(self.access_token and self.access_secret)

    def with_access_token(self, token: str | None, secret: str | None) -> Settings:
        """Return a copy of these settings using another access token."""
        return replace(self, access_token=token, access_secret=secret)

    def require_api_key(self) -> str:
        """Return the API key, raising ConfigurationError if it is missing."""
        if not self.api_key:
            raise ConfigurationError(
                f"Flickr API key is not set. Pass api_key or set {ENV_API_KEY}."
            )
        return self.api_key

    def require_shared_secret(self) -> str:
        """Return the shared secret, raising ConfigurationError if it is missing."""
        if not self.shared_secret:
            raise ConfigurationError(
                f"Flickr shared secret is not set. Pass shared_secret or set {ENV_SHARED_SECRET}."
            )
        return self.shared_secret


def load_saved_token(path: Path | None = None) -> dict[str, Any] | None:
    """Load the access token saved by ``FlickrAuth``.

    Args:
        path: Token file to read (defaults to the per-user data directory)

    Returns:
        The token data, or None if there is no readable token file
    """
    path = path or token_path()
    if not path.exists():
        return None
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        log.warning("Failed to load saved access token from %s: %s", path, e)
        return None
    if not isinstance(data, dict):
        log.warning("Ignoring malformed access token file: %s", path)
        return None
    return data
