"""Exceptions for the FortnoxPy library."""

from typing import Any

import httpx


class FortnoxError(Exception):
    """Base exception for everything raised by FortnoxPy."""


class FortnoxTransportError(FortnoxError):
    """Raised when the request never produced an HTTP response.

    Wraps DNS failures, refused connections, timeouts and protocol errors.
    The original httpx exception is available as ``__cause__``.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class FortnoxAPIError(FortnoxError, httpx.HTTPStatusError):
    """Base exception for non-success HTTP statuses.

    Extends httpx.HTTPStatusError so users can catch both FortnoxAPIError
    and httpx.HTTPStatusError to handle API errors.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response_data: dict[str, Any] | None = None,
        request: httpx.Request | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        """Initialize FortnoxAPIError.

        Args:
            message: Error message
            status_code: HTTP status code from the API response
            response_data: Decoded error body, if any
            request: The request that caused the error
            response: The response from the API
        """
        if request and response:
            super().__init__(message, request=request, response=response)
        else:
            Exception.__init__(self, message)

        self.message = message
        self.status_code = status_code
        self.response_data = response_data or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class FortnoxUnauthorizedError(FortnoxAPIError):
    """Raised on 401. Credentials should be refreshed, not the call retried."""

    pass


class FortnoxRemoteError(FortnoxAPIError):
    """Raised when Fortnox answers with an ``ErrorInformation`` envelope."""

    def __init__(
        self,
        message: str,
        code: int = 0,
        error: int = 0,
        status_code: int | None = None,
        response_data: dict[str, Any] | None = None,
        request: httpx.Request | None = None,
        response: httpx.Response | None = None,
    ) -> None:
        super().__init__(message, status_code, response_data, request, response)
        self.code = code
        self.error = error

    @property
    def http_status(self) -> int | None:
        return self.status_code

    def __str__(self) -> str:
        return f"{self.code} - {self.message}"


class FortnoxDecodeError(FortnoxError):
    """Raised when a response body cannot be decoded.

    Covers both malformed JSON and JSON that does not match the expected
    shape. ``preview`` holds the first bytes of the body for diagnostics.
    """

    def __init__(
        self,
        message: str,
        preview: str = "",
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.preview = preview
        self.status_code = status_code

    def __str__(self) -> str:
        return f"{self.message} [{self.preview}]"


class MalformedNumberError(FortnoxError, ValueError):
    """Raised when a present numeric field does not hold a number."""

    pass


class MalformedDateError(FortnoxError, ValueError):
    """Raised when a 10-character date field is not ``YYYY-MM-DD``."""

    pass
