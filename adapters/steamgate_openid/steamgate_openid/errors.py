# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Exceptions raised while running the Steam OpenID verification flow.

An explicit rejection from the provider (``is_valid:false``) is not an
error; it is reported through ``VerificationResult.authenticated``.
"""


class SteamOpenIDError(Exception):
    """Base class for failures of the OpenID verification flow."""
    pass


class ExtractionError(SteamOpenIDError):
    """Raised when the claimed identity is missing or malformed."""
    pass


class ParseError(SteamOpenIDError):
    """Raised when a check_authentication response cannot be parsed."""
    pass


class TransportError(SteamOpenIDError):
    """Raised when the provider cannot be reached or does not answer with 200.

    Attributes:
        status_code: HTTP status returned by the provider, if any
    """

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code
