"""FortnoxPy - Typed Python client for the Fortnox accounting API."""

import logging

from fortnoxpy._version import __version__
from fortnoxpy.auth import async_get_access_token, get_access_token
from fortnoxpy.client_async import AsyncFortnoxClient
from fortnoxpy.client_base import ClientConfig
from fortnoxpy.client_sync import FortnoxClient
from fortnoxpy.exceptions import (
    FortnoxAPIError,
    FortnoxDecodeError,
    FortnoxError,
    FortnoxRemoteError,
    FortnoxTransportError,
    FortnoxUnauthorizedError,
    MalformedDateError,
    MalformedNumberError,
)
from fortnoxpy.query import (
    ArticleQueryParams,
    CustomerQueryParams,
    OrderQueryParams,
    QueryParams,
)
from fortnoxpy.scalars import FortnoxDate

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "FortnoxClient",
    "AsyncFortnoxClient",
    "ClientConfig",
    "get_access_token",
    "async_get_access_token",
    "FortnoxDate",
    "QueryParams",
    "OrderQueryParams",
    "ArticleQueryParams",
    "CustomerQueryParams",
    "FortnoxError",
    "FortnoxAPIError",
    "FortnoxDecodeError",
    "FortnoxRemoteError",
    "FortnoxTransportError",
    "FortnoxUnauthorizedError",
    "MalformedDateError",
    "MalformedNumberError",
]
