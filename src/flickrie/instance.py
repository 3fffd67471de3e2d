"""The ``Flickrie`` entry point."""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

import requests

from .api.aliases import install_aliases
from .api.client import FlickrClient, UploadClient
from .api.methods import ApiMethods
from .core.config import Settings


class Flickrie(ApiMethods):
    """A Flickr API client bound to one set of credentials.

    Example::

        flickr = Flickrie(api_key="...", shared_secret="...")
        for photo in flickr.search_photos(tags="sunset", per_page=10):
            print(photo.title, photo.medium640().source_url)

    Credentials not passed explicitly are read from ``FLICKR_API_KEY``,
    ``FLICKR_SHARED_SECRET``, ``FLICKR_ACCESS_TOKEN`` and
    ``FLICKR_ACCESS_SECRET``, and the access token falls back to the one
    saved by ``FlickrAuth``.
    """

    def __init__(
        self,
        api_key: str | None = None,
        shared_secret: str | None = None,
        access_token: str | None = None,
        access_secret: str | None = None,
        *,
        settings: Settings | None = None,
        debug: bool = False,
        session: requests.Session | None = None,
        upload_session: requests.Session | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Flickr API key
            shared_secret: Shared secret belonging to the API key
            access_token: OAuth access token, for authenticated calls
            access_secret: Secret of the access token
            settings: Complete settings; the credential arguments override them
            debug: Log every request and response summary
            session: Session for REST calls (mainly for tests)
            upload_session: Session for uploads (mainly for tests)
        """
        self.log = logging.getLogger(__name__)
        overrides: dict[str, Any] = {
            "api_key": api_key,
            "shared_secret": shared_secret,
            "access_token": access_token,
            "access_secret": access_secret,
        }
        if debug:
            overrides["debug"] = True

        if settings is None:
            settings = Settings.from_env(**overrides)
        else:
            settings = replace(settings, **{k: v for k, v in overrides.items() if v is not None})

        self.settings = settings
        self.client = FlickrClient(settings, session=session)
        self.upload_client = UploadClient(settings, session=upload_session)
        self.log.debug("Flickrie ready (authenticated: %s)", settings.authenticated)

    @property
    def authenticated(self) -> bool:
        return self.settings.authenticated

    def close(self) -> None:
        """Close the underlying HTTP sessions."""
        self.client.close()
        self.upload_client.close()

    def __enter__(self) -> Flickrie:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"<Flickrie authenticated={self.authenticated}>"


install_aliases(Flickrie)
