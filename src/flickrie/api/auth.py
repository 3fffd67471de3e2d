"""Flickr OAuth 1.0a authentication.

This module handles the three-legged OAuth flow for the Flickr API,
including access token storage.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any

from requests_oauthlib import OAuth1Session

from ..core.config import Settings, load_saved_token
from ..core.paths import token_path

REQUEST_TOKEN_URL = "https://www.flickr.com/services/oauth/request_token"
AUTHORIZE_URL = "https://www.flickr.com/services/oauth/authorize"
ACCESS_TOKEN_URL = "https://www.flickr.com/services/oauth/access_token"

# Permissions an application can ask for
PERMISSIONS = ("read", "write", "delete")


@dataclass(frozen=True)
class RequestToken:
    token: str
    secret: str


@dataclass(frozen=True)
class AccessToken:
    """An access token plus the user it was issued for."""

    token: str
    secret: str
    user_nsid: str | None = None
    username: str | None = None
    fullname: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class FlickrAuth:
    """Runs the OAuth 1.0a flow and stores the resulting access token.

    Example::

        auth = FlickrAuth(settings)
        request_token = auth.get_request_token()
        print("Visit", auth.authorize_url(request_token, perms="write"))
        access_token = auth.get_access_token(request_token, input("Code: "))
    """

    def __init__(self, settings: Settings, token_file: Path | str | None = None) -> None:
        """Initialize the authentication handler.

        Args:
            settings: Settings carrying the API key and shared secret
            token_file: Where to keep the access token (defaults to the
                per-user data directory)
        """
        self.log = logging.getLogger(__name__)
        self.settings = settings
        self.token_path = Path(token_file) if token_file else token_path()
        self.access_token: AccessToken | None = None

    def _session(self, **kwargs: Any) -> OAuth1Session:
        return OAuth1Session(
            self.settings.require_api_key(),
            client_secret=self.settings.require_shared_secret(),
            **kwargs,
        )

    def get_request_token(self, callback: str = "oob") -> RequestToken:
        """Obtain a request token.

        Args:
            callback: URL Flickr redirects to after authorization, or "oob"
                to show the verifier code to the user instead

        Returns:
            The request token to authorize
        """
        session = self._session(callback_uri=callback)
        data = session.fetch_request_token(REQUEST_TOKEN_URL)
        self.log.info("Obtained request token")
        return RequestToken(data["oauth_token"], data["oauth_token_secret"])

    def authorize_url(self, request_token: RequestToken, perms: str = "read") -> str:
        """Return the URL where the user authorizes the request token.

        Raises:
            ValueError: If ``perms`` isn't one of read, write or delete
        """
        if perms not in PERMISSIONS:
            raise ValueError(f"perms must be one of {', '.join(PERMISSIONS)}, got {perms!r}")
        session = self._session(
            resource_owner_key=request_token.token,
            resource_owner_secret=request_token.secret,
        )
        return session.authorization_url(AUTHORIZE_URL, perms=perms)

    def get_access_token(self, request_token: RequestToken, verifier: str, save: bool = True) -> AccessToken:
        """Exchange an authorized request token for an access token.

        Args:
            request_token: Token returned by ``get_request_token``
            verifier: Code shown to the user after authorizing
            save: Whether to store the token for later runs

        Returns:
            The access token
        """
        session = self._session(
            resource_owner_key=request_token.token,
            resource_owner_secret=request_token.secret,
            verifier=verifier,
        )
        data = session.fetch_access_token(ACCESS_TOKEN_URL)
        self.access_token = AccessToken(
            token=data["oauth_token"],
            secret=data["oauth_token_secret"],
            user_nsid=data.get("user_nsid"),
            username=data.get("username"),
            fullname=data.get("fullname"),
        )
        self.log.info("Obtained access token for %s", self.access_token.username or self.access_token.user_nsid)
        if save:
            self.save()
        return self.access_token

    def load(self) -> AccessToken | None:
        """Load a previously saved access token."""
        data = load_saved_token(self.token_path)
        if not data or not data.get("token") or not data.get("secret"):
            return None
        self.access_token = AccessToken(
            token=data["token"],
            secret=data["secret"],
            user_nsid=data.get("user_nsid"),
            username=data.get("username"),
            fullname=data.get("fullname"),
        )
        self.log.info("Loaded existing access token from %s", self.token_path)
        return self.access_token

    def save(self) -> None:
        """Save the access token to the token file."""
        if not self.access_token:
            return

        # Ensure app data directory exists
        self.token_path.parent.mkdir(parents=True, exist_ok=True)

        with self.token_path.open("w", encoding="utf-8") as f:
            json.dump(self.access_token.to_dict(), f, indent=2)

        self.log.info("Saved access token to %s", self.token_path)

    def is_authenticated(self) -> bool:
        """Check if an access token is available."""
        return self.access_token is not None or self.load() is not None

    def authenticated_settings(self) -> Settings:
        """Return the settings with the loaded access token filled in."""
        token = self.access_token or self.load()
        if token is None:
            return self.settings
        return self.settings.with_access_token(token.token, token.secret)

    def revoke(self) -> None:
        """Forget the access token and delete the token file.

        Flickr has no revocation endpoint; users revoke access from their
        account settings.
        """
        if self.token_path.exists():
            self.token_path.unlink()
            self.log.info("Deleted token file: %s", self.token_path)

        self.access_token = None
