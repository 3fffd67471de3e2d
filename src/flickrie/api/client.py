"""Flickr API transport using requests.

This module provides the clients that talk to Flickr over HTTP: one for the
REST endpoint and one for the upload/replace endpoints. Both sign requests
with OAuth 1.0a when an access token is configured, and both turn a
non-"ok" response status into FlickrError.
"""

from __future__ import annotations

import logging
import mimetypes
from contextlib import ExitStack
from pathlib import Path
from typing import IO, Any
from xml.etree import ElementTree

import requests
from requests_oauthlib import OAuth1

from ..core.config import Settings
from ..core.errors import ConfigurationError, FlickrError
from ..core.paths import app_version
from ..core.utils import except_keys, format_params
from ..objects.coerce import to_int
from .request_builder import GET, ApiRequest

# Payload keys whose item counts are logged in debug mode
_LIST_KEYS = {
    "photos": "photo",
    "photoset": "photo",
    "photosets": "photoset",
    "comments": "comment",
    "photocounts": "photocount",
}


def build_auth(settings: Settings) -> OAuth1 | None:
    """Return OAuth 1.0a signing for the configured access token, if any."""
    if not settings.authenticated:
        return None
    return OAuth1(
        settings.require_api_key(),
        client_secret=settings.require_shared_secret(),
        resource_owner_key=settings.access_token,
        resource_owner_secret=settings.access_secret,
    )


def build_session(settings: Settings) -> requests.Session:
    """Create a requests session set up for Flickr."""
    session = requests.Session()
    session.headers.update({"User-Agent": f"flickrie/{app_version()}"})
    session.auth = build_auth(settings)
    return session


def check_status(body: Any, api_method: str | None = None) -> dict[str, Any]:
    """Return the decoded envelope, or raise FlickrError if it isn't "ok"."""
    if not isinstance(body, dict):
        raise FlickrError(f"Unexpected response from {api_method or 'Flickr'}: {body!r}")
    if body.get("stat") != "ok":
        raise FlickrError(body.get("message"), to_int(body.get("code")))
    return body


class FlickrClient:
    """Client for the Flickr REST API."""

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        """Initialize the API client.

        Args:
            settings: Credentials, endpoint and timeouts
            session: Session to use instead of a new one (mainly for tests)
        """
        self.log = logging.getLogger(__name__)
        self.settings = settings
        self.debug = settings.debug
        self.session = session if session is not None else build_session(settings)

    def call(self, request: ApiRequest) -> dict[str, Any]:
        """Send a request and return the decoded response envelope.

        Args:
            request: Request produced by ``build_request``

        Returns:
            The JSON envelope, with ``stat`` equal to "ok"

        Raises:
            FlickrError: If Flickr reports a failure
            ConfigurationError: If no API key is configured
            requests.RequestException: If the request fails
        """
        params = {"api_key": self.settings.require_api_key(), **request.params}
        if request.http_method == GET:
            return self._request(request.http_method, request.api_method, params=params)
        return self._request(request.http_method, request.api_method, data=params)

    def _request(
        self,
        method: str,
        api_method: str,
        params: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        url = self.settings.api_url

        # Log request if debug is enabled
        if self.debug:
            self.log.info("API Request: %s %s", method, api_method)
            if params:
                self.log.info("  Params: %s", _loggable(params))
            if data:
                self.log.info("  Form Body: %s", _loggable(data))

        try:
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                data=data,
                timeout=self.settings.timeout,
            )
            response.raise_for_status()
            body = check_status(response.json(), api_method)
        except FlickrError as e:
            self.log.error("Flickr call failed: %s - %s", api_method, e)
            raise
        except requests.RequestException as e:
            self.log.error("API request failed: %s %s - %s", method, api_method, e)
            raise

        if self.debug:
            self.log.info("API Response: %s - Status: %s", api_method, response.status_code)
            for key, item_key in _LIST_KEYS.items():
                payload = body.get(key)
                if isinstance(payload, dict) and isinstance(payload.get(item_key), list):
                    self.log.info("  Response contains %d %s items", len(payload[item_key]), key)

        return body

    def close(self) -> None:
        self.session.close()


class UploadClient:
    """Client for the upload and replace endpoints.

    These take multipart bodies, answer in XML and need "write" permissions,
    so they use their own session and longer timeouts.
    """

    def __init__(self, settings: Settings, session: requests.Session | None = None) -> None:
        self.log = logging.getLogger(__name__)
        self.settings = settings
        self.debug = settings.debug
        if session is None:
            session = requests.Session()
            session.headers.update({"User-Agent": f"flickrie/{app_version()}"})
        self.session = session

    def upload(self, media: str | Path | IO[bytes], params: dict[str, Any]) -> dict[str, str]:
        """Upload a photo or video.

        Returns:
            The ``rsp`` children as a dict: ``photoid``, or ``ticketid`` for
            ``async=1`` uploads
        """
        return self._post(self.settings.upload_url, media, params)

    def replace(self, media: str | Path | IO[bytes], media_id: Any, params: dict[str, Any]) -> dict[str, str]:
        """Replace the file of an existing photo or video."""
        return self._post(self.settings.replace_url, media, {"photo_id": media_id, **params})

    def _post(self, url: str, media: str | Path | IO[bytes], params: dict[str, Any]) -> dict[str, str]:
        auth = build_auth(self.settings)
        if auth is None:
            raise ConfigurationError("Uploading requires an access token with \"write\" permissions")

        fields = format_params(params)
        # Flickr signs the form fields but not the file, so the signature is
        # computed over a urlencoded request and reused for the multipart one
        signed = auth(requests.Request("POST", url, data=fields).prepare())
        authorization = signed.headers["Authorization"]
        if isinstance(authorization, bytes):
            authorization = authorization.decode("utf-8")
        headers = {"Authorization": authorization}

        if self.debug:
            self.log.info("Upload Request: POST %s", url)
            self.log.info("  Fields: %s", fields)

        with ExitStack() as stack:
            file_obj, filename = _open_media(media, stack)
            content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"
            try:
                response = self.session.post(
                    url,
                    data=fields,
                    files={"photo": (filename, file_obj, content_type)},
                    headers=headers,
                    timeout=self.settings.upload_timeout,
                )
                response.raise_for_status()
            except requests.RequestException as e:
                self.log.error("Upload failed: %s - %s", url, e)
                raise

        result = parse_upload_response(response.content)
        self.log.info("Upload finished: %s", result)
        return result

    def close(self) -> None:
        self.session.close()


def parse_upload_response(content: bytes | str) -> dict[str, str]:
    """Parse the XML answer of the upload endpoints.

    Raises:
        FlickrError: If the status isn't "ok" or the body isn't valid XML
    """
    try:
        root = ElementTree.fromstring(content)
    except ElementTree.ParseError as e:
        raise FlickrError(f"Malformed upload response: {e}") from e
    if root.get("stat") != "ok":
        err = root.find("err")
        if err is None:
            raise FlickrError("Upload failed")
        raise FlickrError(err.get("msg"), to_int(err.get("code")))
    return {child.tag: (child.text or "").strip() for child in root}


def _open_media(media: str | Path | IO[bytes], stack: ExitStack) -> tuple[IO[bytes], str]:
    if isinstance(media, (str, Path)):
        path = Path(media)
        return stack.enter_context(path.open("rb")), path.name
    name = getattr(media, "name", None)
    return media, Path(name).name if isinstance(name, str) else "upload"


def _loggable(params: dict[str, Any]) -> dict[str, Any]:
    return except_keys(params, "api_key")
