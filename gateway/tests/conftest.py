# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Pytest configuration for gateway service tests."""

import sys
from pathlib import Path
from typing import Callable

import httpx
import pytest

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from steamgate_config import StaticConfigProvider

from app.config import load_gateway_config
from app.service import SteamAuthService

SCHEMA_DIR = Path(__file__).resolve().parents[2] / "documents" / "schemas" / "configs"


@pytest.fixture(autouse=True)
def set_test_environment(monkeypatch):
    """Point the config loader at the repository schemas."""
    monkeypatch.setenv("SCHEMA_DIR", str(SCHEMA_DIR))
    monkeypatch.setenv("STEAMGATE_PUBLIC_URL", "http://localhost:8080")
    monkeypatch.delenv("STEAM_OPENID_ENDPOINT", raising=False)


@pytest.fixture
def gateway_config():
    """Gateway configuration with schema defaults."""
    return load_gateway_config(schema_dir=str(SCHEMA_DIR), provider=StaticConfigProvider({}))


@pytest.fixture
def make_service(gateway_config) -> Callable[..., tuple[SteamAuthService, list[httpx.Request]]]:
    """Create a service whose Steam round trips are answered by ``handler``."""

    def _make(handler: Callable[[httpx.Request], httpx.Response]):
        sent: list[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            sent.append(request)
            return handler(request)

        client = httpx.AsyncClient(transport=httpx.MockTransport(recording_handler))
        return SteamAuthService(config=gateway_config, client=client), sent

    return _make
