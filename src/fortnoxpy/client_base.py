"""Base client functionality for Fortnox API.

The functions here are the transport independent steps of a request: URL
resolution, header merging, body encoding and response classification.
The sync and async clients only add the network call around them.
"""

from __future__ import annotations

import json
import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, TypeVar
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from fortnoxpy._version import __version__
from fortnoxpy.exceptions import (
    FortnoxAPIError,
    FortnoxDecodeError,
    FortnoxRemoteError,
    FortnoxUnauthorizedError,
    MalformedDateError,
    MalformedNumberError,
)
from fortnoxpy.models import ErrorResponse, FortnoxPayload
from fortnoxpy.query import QueryParams, encode_query
from fortnoxpy.scalars import FortnoxDate, loads

T = TypeVar("T", bound=BaseModel)
P = TypeVar("P", bound=FortnoxPayload)

MIME_JSON = "application/json"
USER_AGENT = f"FortnoxPy/{__version__}"

DEFAULT_HEADERS: Mapping[str, str] = {
    "Accept": MIME_JSON,
    "Content-Type": MIME_JSON,
    "User-Agent": USER_AGENT,
}

# bytes of body kept in decode errors
SUCCESS_PREVIEW_LENGTH = 30
ERROR_PREVIEW_LENGTH = 128

Query = QueryParams | Mapping[str, Any] | str | None


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for Fortnox API client.

    Resource paths are resolved against ``base_url`` as relative references,
    so the base URL should end with a slash.
    """

    BASE_URL: ClassVar[str] = "https://api.fortnox.se/3/"
    DEFAULT_TIMEOUT: ClassVar[float] = 20.0

    access_token: str
    client_secret: str
    base_url: str = BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    verify: bool | str = True
    headers: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not self.access_token or not self.client_secret:
            raise ValueError("Both access_token and client_secret must be provided")
        object.__setattr__(self, "headers", MappingProxyType(dict(self.headers)))

    @classmethod
    def from_env(cls, **overrides: Any) -> ClientConfig:
        """Build a configuration from ``FORTNOX_*`` environment variables.

        Args:
            **overrides: Values that take precedence over the environment

        Returns:
            Client configuration
        """
        values: dict[str, Any] = {
            "access_token": os.environ.get("FORTNOX_ACCESS_TOKEN", ""),
            "client_secret": os.environ.get("FORTNOX_CLIENT_SECRET", ""),
            "base_url": os.environ.get("FORTNOX_BASE_URL", cls.BASE_URL),
            "timeout": float(os.environ.get("FORTNOX_TIMEOUT", cls.DEFAULT_TIMEOUT)),
        }
        values.update(overrides)
        return cls(**values)


def resource_path(collection: str, identifier: str | int | None = None) -> str:
    """Build a relative resource path, quoting the identifier as one segment."""
    if identifier is None:
        return collection
    return f"{collection}/{quote(str(identifier), safe='')}"


def build_url(base_url: str | httpx.URL, resource: str, query: Query = None) -> httpx.URL:
    """Resolve ``resource`` against ``base_url`` and attach the query string.

    Args:
        base_url: Absolute base URL
        resource: Relative reference, e.g. ``orders/12``
        query: Filter object, mapping or pre-encoded query string

    Returns:
        Absolute request URL
    """
    url = httpx.URL(base_url).join(resource)
    query_string = encode_query(query)
    if query_string:
        url = url.copy_with(query=query_string.encode("ascii"))
    return url


def build_headers(*layers: Mapping[str, str] | None) -> httpx.Headers:
    """Merge header layers over the JSON defaults. Later layers win."""
    headers = httpx.Headers(DEFAULT_HEADERS)
    for layer in layers:
        if layer:
            headers.update(layer)
    return headers


def _json_default(value: Any) -> Any:
    if isinstance(value, FortnoxPayload):
        return value.to_wire()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    if isinstance(value, FortnoxDate):
        return None if value.is_zero else str(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_body(method: str, body: Any) -> bytes:
    """Encode the request body.

    DELETE requests never carry a body. Every other method sends the JSON
    encoding of ``body``, which is ``null`` when there is none.
    """
    if method.upper() == "DELETE":
        return b""
    return json.dumps(body, default=_json_default).encode()


def envelope(
    key: str,
    payload: P | Mapping[str, Any],
    payload_class: type[P],
) -> dict[str, Any]:
    """Wrap a payload under its resource key, e.g. ``{"Order": {...}}``."""
    if not isinstance(payload, FortnoxPayload):
        payload = payload_class.model_validate(payload)
    return {key: payload}


def _preview(response: httpx.Response, length: int) -> str:
    return response.content[:length].decode("utf-8", errors="replace")


def validate_model(
    model_class: type[T],
    data: Any,
    response: httpx.Response,
) -> T:
    """Validate decoded JSON into ``model_class``.

    Malformed numbers and dates are raised as they are; any other mismatch
    becomes a FortnoxDecodeError.
    """
    try:
        return model_class.model_validate(data)
    except ValidationError as e:
        for error in e.errors():
            cause = error.get("ctx", {}).get("error")
            if isinstance(cause, (MalformedNumberError, MalformedDateError)):
                raise cause from e
        raise FortnoxDecodeError(
            f"response does not match {model_class.__name__}",
            preview=_preview(response, SUCCESS_PREVIEW_LENGTH),
            status_code=response.status_code,
        ) from e


def parse_error_response(response: httpx.Response) -> FortnoxAPIError | FortnoxDecodeError:
    """Parse error response and return appropriate exception.

    Args:
        response: HTTP response from the API

    Returns:
        FortnoxUnauthorizedError for 401, FortnoxRemoteError when the body
        holds an error envelope, FortnoxDecodeError when it does not
    """
    status_code = response.status_code
    request = response.request

    try:
        error_data: Any = response.json()
        error_response = ErrorResponse.model_validate(error_data)
    except (ValueError, ValidationError):
        if status_code == 401:
            return FortnoxUnauthorizedError(
                response.text or "Unauthorized", status_code, {}, request, response
            )
        return FortnoxDecodeError(
            f"failed to decode {status_code} error from response",
            preview=_preview(response, ERROR_PREVIEW_LENGTH),
            status_code=status_code,
        )

    info = error_response.error_information
    if status_code == 401:
        return FortnoxUnauthorizedError(
            info.message or "Unauthorized", status_code, error_data, request, response
        )
    return FortnoxRemoteError(
        info.message,
        code=info.code,
        error=info.error,
        status_code=status_code,
        response_data=error_data,
        request=request,
        response=response,
    )


def handle_response(
    response: httpx.Response,
    response_model: type[T] | None = None,
) -> T | Any:
    """Classify a response by status code.

    Args:
        response: HTTP response from the API
        response_model: Model to validate a successful body into

    Returns:
        The validated model (or decoded JSON when no model is given) for
        200 and 201, None for 204

    Raises:
        FortnoxUnauthorizedError: On 401
        FortnoxRemoteError: On any other status with an error envelope
        FortnoxDecodeError: When the body cannot be decoded
    """
    status_code = response.status_code

    if status_code in (200, 201):
        try:
            if response_model is None:
                return response.json()
            data = loads(response.content)
        except ValueError as e:
            raise FortnoxDecodeError(
                "failed to decode json from response",
                preview=_preview(response, SUCCESS_PREVIEW_LENGTH),
                status_code=status_code,
            ) from e
        return validate_model(response_model, data, response)

    if status_code == 204:
        return None

    raise parse_error_response(response)
