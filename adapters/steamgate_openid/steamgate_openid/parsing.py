# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Pure parsers for the data exchanged with the Steam OpenID provider."""

from .errors import ExtractionError, ParseError
from .models import CheckAuthenticationResponse

STEAM_ID_LENGTH = 17

_NS_PREFIX = "ns:"
_IS_VALID_PREFIX = "is_valid:"


def parse_check_authentication(response: str) -> CheckAuthenticationResponse:
    """Parse the body of a ``check_authentication`` response.

    The body is a list of ``key:value`` lines separated by ``\\n``, e.g.
    ``ns:http://specs.openid.net/auth/2.0\\nis_valid:false\\n``. Only the
    ``ns`` and ``is_valid`` keys are recognised; a value runs from the
    first ``:`` to the end of the line and may contain further colons.

    Args:
        response: Raw response text

    Returns:
        Parsed response

    Raises:
        ParseError: On an unknown entry, a non-boolean ``is_valid`` or a
            missing ``ns``/``is_valid`` entry
    """
    ns: str | None = None
    is_valid: bool | None = None

    for entry in (line for line in response.split("\n") if line):
        if entry.startswith(_NS_PREFIX):
            ns = entry[len(_NS_PREFIX):]
        elif entry.startswith(_IS_VALID_PREFIX):
            value = entry[len(_IS_VALID_PREFIX):]
            if value == "true":
                is_valid = True
            elif value == "false":
                is_valid = False
            else:
                raise ParseError(f"Could not parse value of 'is_valid' as boolean: {value!r}")
        else:
            raise ParseError(f"Unknown entry {entry!r}")

    if ns is None or is_valid is None:
        raise ParseError("Expected entries 'ns' and 'is_valid'")

    return CheckAuthenticationResponse(ns=ns, is_valid=is_valid)


def parse_claimed_id(claimed_id: str | None) -> str:
    """Extract the Steam ID from an ``openid.claimed_id`` value.

    The claimed identity looks like
    ``https://steamcommunity.com/openid/id/76561197960287930``; the Steam ID
    is the segment after the last ``/``. Only its length is checked.

    Args:
        claimed_id: Claimed identity URL from the callback (untrusted)

    Returns:
        The 17-character Steam ID

    Raises:
        ExtractionError: If the value is missing, has no ``/``, has its
            last ``/`` at index 0, or the trailing segment is not 17
            characters long
    """
    if not claimed_id:
        raise ExtractionError("Missing 'openid.claimed_id'")

    idx = claimed_id.rfind("/")
    if idx <= 0:
        raise ExtractionError(f"Could not locate Steam ID in 'openid.claimed_id': {claimed_id!r}")

    steam_id = claimed_id[idx + 1:]
    if len(steam_id) != STEAM_ID_LENGTH:
        raise ExtractionError(f"Could not parse Steam ID from 'openid.claimed_id': {claimed_id!r}")

    return steam_id
