# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Steam OpenID 2.0 relying-party adapter.

Builds the Steam login redirect, verifies callbacks with a direct
``check_authentication`` request and extracts the Steam ID from the
claimed identity.
"""

__version__ = "0.1.0"

from .errors import ExtractionError, ParseError, SteamOpenIDError, TransportError
from .models import CheckAuthenticationResponse, VerificationResult
from .parsing import STEAM_ID_LENGTH, parse_check_authentication, parse_claimed_id
from .provider import (
    CALLBACK_PATH,
    STEAM_OPENID_ENDPOINT,
    SteamOpenIDProvider,
    build_check_authentication_params,
    build_url,
    parse_callback_query,
)

__all__ = [
    # Version
    "__version__",
    # Models
    "CheckAuthenticationResponse",
    "VerificationResult",
    # Provider
    "SteamOpenIDProvider",
    "CALLBACK_PATH",
    "STEAM_OPENID_ENDPOINT",
    "build_url",
    "build_check_authentication_params",
    "parse_callback_query",
    # Parsers
    "STEAM_ID_LENGTH",
    "parse_check_authentication",
    "parse_claimed_id",
    # Exceptions
    "SteamOpenIDError",
    "ExtractionError",
    "ParseError",
    "TransportError",
]
