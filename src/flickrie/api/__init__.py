"""Flickr API integration.

This package provides modules for authenticating with and calling the
Flickr REST and upload APIs using the requests library.
"""

from .auth import AccessToken, FlickrAuth, RequestToken
from .client import FlickrClient, UploadClient
from .methods import ApiMethods
from .request_builder import OPERATIONS, ApiRequest, build_request

__all__ = [
    "OPERATIONS",
    "AccessToken",
    "ApiMethods",
    "ApiRequest",
    "FlickrAuth",
    "FlickrClient",
    "RequestToken",
    "UploadClient",
    "build_request",
]
