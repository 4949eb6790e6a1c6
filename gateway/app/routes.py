# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Mapping of request targets to the gateway's routes."""

from enum import Enum

from steamgate_openid import CALLBACK_PATH


class Route(Enum):
    """The closed set of things the gateway can do with a request."""
    REDIRECT = "redirect"
    CALLBACK = "callback"
    FAVICON = "favicon"
    NOT_FOUND = "not_found"


def resolve_route(target: str) -> Route:
    """Resolve a raw request target (path plus ``?query``) to a route.

    The method is not considered. ``/auth/steam`` is matched as a prefix;
    ``/`` and ``/favicon.ico`` only match exactly, query string included.

    Args:
        target: Request target as received, e.g. ``/auth/steam?openid.mode=id_res``

    Returns:
        The matching route
    """
    if target == "/":
        return Route.REDIRECT
    if target.startswith(CALLBACK_PATH):
        return Route.CALLBACK
    if target == "/favicon.ico":
        return Route.FAVICON
    return Route.NOT_FOUND
