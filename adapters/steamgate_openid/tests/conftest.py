# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Pytest fixtures for the Steam OpenID adapter tests."""

from typing import Callable

import httpx
import pytest

from steamgate_openid import SteamOpenIDProvider


@pytest.fixture
def make_provider() -> Callable[..., tuple[SteamOpenIDProvider, list[httpx.Request]]]:
    """Create a provider whose HTTP client answers with ``handler``.

    Returns the provider and the list of requests the client sent.
    """

    def _make(handler: Callable[[httpx.Request], httpx.Response]):
        sent: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        provider = SteamOpenIDProvider.for_base_url("http://localhost:8080", client=client)
        return provider, sent

    return _make
