# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Gateway service implementation."""

from dataclasses import dataclass

import httpx
from steamgate_logging import create_logger
from steamgate_openid import (
    ExtractionError,
    ParseError,
    SteamOpenIDError,
    SteamOpenIDProvider,
    TransportError,
)

logger = create_logger(logger_type="stdout", level="INFO", name="gateway.service")


@dataclass(frozen=True)
class CallbackOutcome:
    """HTTP-facing result of handling one callback.

    Attributes:
        status_code: 200 authenticated, 401 rejected, 500 on any error
        steam_id: Claimed Steam ID, when one could be extracted
    """
    status_code: int
    steam_id: str | None = None

    @property
    def authenticated(self) -> bool:
        return self.status_code == 200


class SteamAuthService:
    """Steam login service.

    Owns the Steam OpenID provider and the HTTP client it verifies
    callbacks with. One instance is shared by all requests.

    Attributes:
        config: Gateway configuration
        client: Shared async HTTP client
        provider: Steam OpenID relying party
    """

    def __init__(self, config, client: httpx.AsyncClient | None = None):
        """Initialize the service.

        Args:
            config: Gateway configuration
            client: HTTP client to use; one is created from config if omitted
        """
        self.config = config
        self.client = client or httpx.AsyncClient(timeout=config.verify_timeout_seconds)
        self.provider = SteamOpenIDProvider.for_base_url(
            base_url=config.public_base_url,
            client=self.client,
            endpoint=config.openid_endpoint,
            timeout=config.verify_timeout_seconds,
        )
        logger.info(
            "Steam OpenID provider initialized",
            return_to=self.provider.return_to,
            realm=self.provider.realm,
        )

    def get_login_url(self) -> str:
        """Return the Steam URL to redirect a browser to."""
        return self.provider.get_login_url()

    async def handle_callback(self, query: str) -> CallbackOutcome:
        """Verify a Steam callback and map the outcome to an HTTP status.

        Args:
            query: Raw query string of the callback request

        Returns:
            Outcome carrying the status code and the claimed Steam ID
        """
        try:
            result = await self.provider.verify_callback(query)
        except ParseError:
            # Already logged by the provider with the raw response.
            return CallbackOutcome(status_code=500)
        except ExtractionError as e:
            logger.error(f"Rejected callback with malformed claimed identity: {e}")
            return CallbackOutcome(status_code=500)
        except TransportError as e:
            logger.error(f"Steam verification request failed: {e}", status_code=e.status_code)
            return CallbackOutcome(status_code=500)
        except SteamOpenIDError as e:
            logger.error(f"Steam verification failed: {e}")
            return CallbackOutcome(status_code=500)

        logger.info(
            f"Steam ID '{result.steam_id}' authenticated: {str(result.authenticated).lower()}",
            **result.to_dict(),
        )
        return CallbackOutcome(
            status_code=200 if result.authenticated else 401,
            steam_id=result.steam_id,
        )

    async def aclose(self) -> None:
        """Close the shared HTTP client."""
        await self.client.aclose()
