"""Authentication for Fortnox API."""

import logging
from abc import ABC, abstractmethod

import httpx
from pydantic import Field

from fortnoxpy.client_base import ClientConfig, build_headers, build_url, handle_response
from fortnoxpy.exceptions import FortnoxTransportError
from fortnoxpy.models import FortnoxModel

logger = logging.getLogger(__name__)


class BaseAuth(ABC):
    """Base authentication class."""

    @abstractmethod
    def get_headers(self) -> dict[str, str]:
        """Get authentication headers for requests."""
        pass


class TokenAuth(BaseAuth):
    """Authentication with an integration's access token and client secret."""

    def __init__(self, access_token: str, client_secret: str) -> None:
        """Initialize token authentication.

        Args:
            access_token: Access token obtained for the user's company
            client_secret: Client secret of the integration
        """
        self.access_token = access_token
        self.client_secret = client_secret

    def get_headers(self) -> dict[str, str]:
        """Get authentication headers."""
        return {
            "Access-Token": self.access_token,
            "Client-Secret": self.client_secret,
        }


class AuthorizationCodeAuth(BaseAuth):
    """Headers for exchanging an authorization code for an access token."""

    def __init__(self, authorization_code: str, client_secret: str) -> None:
        self.authorization_code = authorization_code
        self.client_secret = client_secret

    def get_headers(self) -> dict[str, str]:
        return {
            "Authorization-Code": self.authorization_code,
            "Client-Secret": self.client_secret,
        }


class Authorization(FortnoxModel):
    access_token: str = ""


class AuthorizationResponse(FortnoxModel):
    authorization: Authorization = Field(default_factory=Authorization)


def get_access_token(
    authorization_code: str,
    client_secret: str,
    *,
    base_url: str = ClientConfig.BASE_URL,
    timeout: float = ClientConfig.DEFAULT_TIMEOUT,
    http_client: httpx.Client | None = None,
) -> str:
    """Exchange an authorization code for a permanent access token.

    An authorization code can only be exchanged once.

    Args:
        authorization_code: Code the user received when adding the integration
        client_secret: Client secret of the integration
        base_url: API root the exchange is sent to
        timeout: Request timeout in seconds
        http_client: Optional client to send the request with

    Returns:
        The access token

    Raises:
        FortnoxTransportError: If the request could not be sent
        FortnoxAPIError: If Fortnox rejected the exchange
    """
    url = build_url(base_url, "")
    headers = build_headers(AuthorizationCodeAuth(authorization_code, client_secret).get_headers())

    logger.debug("Exchanging authorization code at %s", url)
    client = http_client or httpx.Client(timeout=timeout)
    try:
        response = client.request("GET", url, headers=headers)
    except httpx.TransportError as e:
        raise FortnoxTransportError(f"error sending request: {e}") from e
    finally:
        if http_client is None:
            client.close()

    result = handle_response(response, AuthorizationResponse)
    return result.authorization.access_token


async def async_get_access_token(
    authorization_code: str,
    client_secret: str,
    *,
    base_url: str = ClientConfig.BASE_URL,
    timeout: float = ClientConfig.DEFAULT_TIMEOUT,
    http_client: httpx.AsyncClient | None = None,
) -> str:
    """Exchange an authorization code for a permanent access token (async).

    See get_access_token.
    """
    url = build_url(base_url, "")
    headers = build_headers(AuthorizationCodeAuth(authorization_code, client_secret).get_headers())

    logger.debug("Exchanging authorization code at %s", url)
    client = http_client or httpx.AsyncClient(timeout=timeout)
    try:
        response = await client.request("GET", url, headers=headers)
    except httpx.TransportError as e:
        raise FortnoxTransportError(f"error sending request: {e}") from e
    finally:
        if http_client is None:
            await client.aclose()

    result = handle_response(response, AuthorizationResponse)
    return result.authorization.access_token
