# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Value types produced by the Steam OpenID verification flow."""

from dataclasses import dataclass


@dataclass(frozen=True)
class CheckAuthenticationResponse:
    """Parsed body of an OpenID ``check_authentication`` response.

    Attributes:
        ns: OpenID namespace URI reported by the provider
        is_valid: Whether the provider vouches for the assertion
    """
    ns: str
    is_valid: bool


@dataclass(frozen=True)
class VerificationResult:
    """Outcome of verifying one callback.

    ``steam_id`` is always the identifier taken from the callback's
    ``openid.claimed_id``. It is only trustworthy when ``authenticated``
    is True.

    Attributes:
        authenticated: True if the provider confirmed the assertion
        steam_id: 17-character Steam identifier from the claimed identity
    """
    authenticated: bool
    steam_id: str

    def to_dict(self) -> dict:
        """Convert the result to a dictionary for structured logging.

        Returns:
            Dictionary representation of the result
        """
        return {
            "authenticated": self.authenticated,
            "steam_id": self.steam_id,
        }
