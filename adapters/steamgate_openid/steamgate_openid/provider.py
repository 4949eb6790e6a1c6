# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Steam OpenID 2.0 relying party.

This module builds the ``checkid_setup`` login redirect and verifies the
provider's callback with a direct ``check_authentication`` round trip
(the OpenID "dumb relying party" mode), so no association secrets are kept.

See "9.1. Request Parameters" of
https://openid.net/specs/openid-authentication-2_0.html
"""

from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

import httpx

from steamgate_logging import create_logger

from .errors import ParseError, TransportError
from .models import VerificationResult
from .parsing import parse_check_authentication, parse_claimed_id

logger = create_logger(logger_type="stdout", level="INFO", name="steamgate.openid")

STEAM_OPENID_ENDPOINT = "https://steamcommunity.com/openid/login"
OPENID_NS = "http://specs.openid.net/auth/2.0"
IDENTIFIER_SELECT = "http://specs.openid.net/auth/2.0/identifier_select"

MODE_CHECKID_SETUP = "checkid_setup"
MODE_CHECK_AUTHENTICATION = "check_authentication"

CALLBACK_PATH = "/auth/steam"


def build_url(endpoint: str, params: dict[str, str]) -> str:
    """Append ``params`` to ``endpoint`` in order.

    Any query string or fragment already present on ``endpoint`` is
    dropped.

    Args:
        endpoint: Base URL
        params: Ordered query parameters

    Returns:
        The endpoint URL carrying exactly ``params`` as its query
    """
    scheme, netloc, path, _, _ = urlsplit(endpoint)
    return urlunsplit((scheme, netloc, path, urlencode(params), ""))


def parse_callback_query(query: str) -> list[tuple[str, str]]:
    """Decode a callback query string into ordered key/value pairs.

    Blank values and repeated keys are kept. Nothing is validated here.
    """
    return parse_qsl(query, keep_blank_values=True)


def build_check_authentication_params(callback_params: list[tuple[str, str]]) -> dict[str, str]:
    """Derive the re-validation request from the callback parameters.

    ``openid.mode`` becomes ``check_authentication``; every other field is
    forwarded unchanged, in the order it was first received.

    Args:
        callback_params: Decoded callback query

    Returns:
        Ordered parameters for the ``check_authentication`` request
    """
    params = {"openid.mode": MODE_CHECK_AUTHENTICATION}
    for key, value in callback_params:
        if key == "openid.mode":
            continue
        params[key] = value
    return params


def _first(params: list[tuple[str, str]], key: str) -> str | None:
    for name, value in params:
        if name == key:
            return value
    return None


class SteamOpenIDProvider:
    """Relying-party side of Steam's OpenID 2.0 login.

    The provider is stateless apart from its configuration and the shared
    HTTP client, so one instance serves all concurrent requests.

    Attributes:
        endpoint: Steam OpenID endpoint (login and verification)
        return_to: Callback URL Steam redirects the browser to
        realm: Trust root presented to the user by Steam
        timeout: Seconds to wait for the ``check_authentication`` response
    """

    def __init__(
        self,
        return_to: str,
        realm: str,
        client: httpx.AsyncClient,
        endpoint: str = STEAM_OPENID_ENDPOINT,
        timeout: float = 10.0,
    ):
        """Initialize the provider.

        Args:
            return_to: Callback URL for the OpenID flow
            realm: OpenID realm (trust root)
            client: Shared async HTTP client used for verification
            endpoint: Steam OpenID endpoint
            timeout: Verification request timeout in seconds
        """
        self.return_to = return_to
        self.realm = realm
        self.endpoint = endpoint
        self.timeout = timeout
        self._client = client

    @classmethod
    def for_base_url(
        cls,
        base_url: str,
        client: httpx.AsyncClient,
        endpoint: str = STEAM_OPENID_ENDPOINT,
        timeout: float = 10.0,
    ) -> "SteamOpenIDProvider":
        """Create a provider whose return_to and realm derive from ``base_url``.

        Args:
            base_url: Externally reachable base URL of this service
            client: Shared async HTTP client used for verification
            endpoint: Steam OpenID endpoint
            timeout: Verification request timeout in seconds

        Returns:
            Configured provider
        """
        realm = base_url.rstrip("/")
        return cls(
            return_to=f"{realm}{CALLBACK_PATH}",
            realm=realm,
            client=client,
            endpoint=endpoint,
            timeout=timeout,
        )

    def login_params(self) -> dict[str, str]:
        """Return the ``checkid_setup`` request parameters in wire order."""
        return {
            "openid.mode": MODE_CHECKID_SETUP,
            "openid.ns": OPENID_NS,
            "openid.identity": IDENTIFIER_SELECT,
            "openid.claimed_id": IDENTIFIER_SELECT,
            "openid.return_to": self.return_to,
            "openid.realm": self.realm,
        }

    def get_login_url(self) -> str:
        """Generate the Steam login URL the browser is redirected to."""
        return build_url(self.endpoint, self.login_params())

    async def verify_callback(self, query: str) -> VerificationResult:
        """Verify a callback with Steam and extract the Steam ID.

        The callback parameters are never trusted on their own: the result
        only reports ``authenticated=True`` when Steam answers the
        ``check_authentication`` request with ``is_valid:true``.

        Args:
            query: Raw query string of the callback request

        Returns:
            Verification result carrying the claimed Steam ID

        Raises:
            ExtractionError: If ``openid.claimed_id`` is missing or malformed
            TransportError: If Steam is unreachable, times out or does not
                answer with HTTP 200
            ParseError: If Steam's response body cannot be parsed
        """
        callback_params = parse_callback_query(query)
        steam_id = parse_claimed_id(_first(callback_params, "openid.claimed_id"))

        check_url = build_url(self.endpoint, build_check_authentication_params(callback_params))

        try:
            response = await self._client.post(check_url, timeout=self.timeout)
        except httpx.HTTPError as e:
            raise TransportError(f"check_authentication request failed: {e}") from e

        if response.status_code != 200:
            raise TransportError(
                f"check_authentication returned HTTP {response.status_code}",
                status_code=response.status_code,
            )

        try:
            result = parse_check_authentication(response.text)
        except ParseError as e:
            logger.error(
                f"Failed to parse Steam check_authentication response: {e}",
                status_code=response.status_code,
                body_hex=response.content.hex(),
            )
            raise

        return VerificationResult(authenticated=result.is_valid, steam_id=steam_id)
