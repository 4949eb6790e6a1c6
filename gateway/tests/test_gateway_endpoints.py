# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""End-to-end tests for the gateway HTTP surface."""

from urllib.parse import parse_qsl, urlencode, urlsplit

import httpx
import pytest
from fastapi.testclient import TestClient

import main

STEAM_ID = "00000000000000000"
VALID_BODY = "ns:http://specs.openid.net/auth/2.0\nis_valid:true\n"
INVALID_BODY = "ns:http://specs.openid.net/auth/2.0\nis_valid:false\n"
CALLBACK_PATH = "/auth/steam?" + urlencode({
    "openid.ns": "http://specs.openid.net/auth/2.0",
    "openid.mode": "id_res",
    "openid.op_endpoint": "https://steamcommunity.com/openid/login",
    "openid.claimed_id": f"https://provider/openid/id/{STEAM_ID}",
    "openid.identity": f"https://provider/openid/id/{STEAM_ID}",
    "openid.return_to": "http://localhost:8080/auth/steam",
    "openid.sig": "abc+def=",
})


@pytest.fixture
def create_client(monkeypatch):
    """Create a test client around an injected service."""

    def _create(service):
        monkeypatch.setattr(main, "auth_service", service)
        return TestClient(main.app, follow_redirects=False)

    return _create


class TestRedirect:
    """Tests for the login redirect."""

    def test_root_redirects_to_steam(self, make_service, create_client):
        """Test that / answers 303 with a checkid_setup Location."""
        service, _ = make_service(lambda request: httpx.Response(200, text=VALID_BODY))
        client = create_client(service)

        response = client.get("/")

        assert response.status_code == 303
        assert response.content == b""
        location = urlsplit(response.headers["location"])
        assert f"{location.scheme}://{location.netloc}{location.path}" == "https://steamcommunity.com/openid/login"
        params = dict(parse_qsl(location.query))
        assert params["openid.mode"] == "checkid_setup"
        assert params["openid.return_to"] == "http://localhost:8080/auth/steam"
        assert params["openid.realm"] == "http://localhost:8080"

    @pytest.mark.parametrize("method", ["POST", "PUT", "DELETE"])
    def test_any_method_redirects(self, make_service, create_client, method):
        """Test that the redirect does not depend on the method."""
        service, _ = make_service(lambda request: httpx.Response(200, text=VALID_BODY))
        client = create_client(service)

        response = client.request(method, "/")

        assert response.status_code == 303

    def test_root_with_query_is_not_found(self, make_service, create_client):
        """Test that / only matches exactly."""
        service, _ = make_service(lambda request: httpx.Response(200, text=VALID_BODY))
        client = create_client(service)

        response = client.get("/?next=/profile")

        assert response.status_code == 404


class TestCallback:
    """Tests for callback verification."""

    def test_authenticated(self, make_service, create_client):
        """Test that a confirmed assertion answers 200."""
        service, sent = make_service(lambda request: httpx.Response(200, text=VALID_BODY))
        client = create_client(service)

        response = client.get(CALLBACK_PATH)

        assert response.status_code == 200
        assert response.content == b""
        assert len(sent) == 1
        forwarded = dict(sent[0].url.params.multi_items())
        assert forwarded["openid.mode"] == "check_authentication"
        assert forwarded["openid.sig"] == "abc+def="

    def test_rejected(self, make_service, create_client):
        """Test that is_valid:false answers 401."""
        service, _ = make_service(lambda request: httpx.Response(200, text=INVALID_BODY))
        client = create_client(service)

        response = client.get(CALLBACK_PATH)

        assert response.status_code == 401
        assert response.content == b""

    def test_provider_error(self, make_service, create_client, caplog):
        """Test that a provider 500 answers 500 without parsing the body."""
        service, _ = make_service(lambda request: httpx.Response(500, text="garbage"))
        client = create_client(service)

        response = client.get(CALLBACK_PATH)

        assert response.status_code == 500
        assert response.content == b""
        assert not any("Failed to parse" in message for message in caplog.messages)

    def test_missing_claimed_id(self, make_service, create_client):
        """Test that a callback without a claimed identity answers 500 without verification."""
        service, sent = make_service(lambda request: httpx.Response(200, text=VALID_BODY))
        client = create_client(service)

        response = client.get("/auth/steam?openid.mode=id_res")

        assert response.status_code == 500
        assert sent == []

    def test_unparseable_response(self, make_service, create_client):
        """Test that a malformed verification body answers 500."""
        service, _ = make_service(lambda request: httpx.Response(200, text="is_valid:yes\n"))
        client = create_client(service)

        response = client.get(CALLBACK_PATH)

        assert response.status_code == 500

    def test_callback_prefix_and_post(self, make_service, create_client):
        """Test that the callback matches by prefix and for any method."""
        service, _ = make_service(lambda request: httpx.Response(200, text=VALID_BODY))
        client = create_client(service)

        response = client.post(CALLBACK_PATH.replace("/auth/steam?", "/auth/steam/return?"))

        assert response.status_code == 200


class TestOtherRoutes:
    """Tests for the favicon and not-found routes."""

    def test_favicon(self, make_service, create_client):
        """Test that /favicon.ico answers 204 with an empty body."""
        service, _ = make_service(lambda request: httpx.Response(200, text=VALID_BODY))
        client = create_client(service)

        response = client.get("/favicon.ico")

        assert response.status_code == 204
        assert response.content == b""

    @pytest.mark.parametrize("path", ["/anything-else", "/docs", "/openapi.json", "/auth"])
    def test_not_found(self, make_service, create_client, path):
        """Test that unknown targets answer 404 with an empty body."""
        service, _ = make_service(lambda request: httpx.Response(200, text=VALID_BODY))
        client = create_client(service)

        response = client.get(path)

        assert response.status_code == 404
        assert response.content == b""

    def test_not_initialized(self, create_client):
        """Test that the service routes answer 503 before startup."""
        client = create_client(None)

        assert client.get("/").status_code == 503
        assert client.get(CALLBACK_PATH).status_code == 503
        assert client.get("/favicon.ico").status_code == 204


class TestAnyMethod:
    """Tests that routing never depends on the request method."""

    @pytest.mark.parametrize("method", ["TRACE", "PROPFIND", "CONNECT"])
    def test_unlisted_methods_are_routed(self, make_service, create_client, method):
        """Test that uncommon and non-standard methods reach the route table."""
        service, _ = make_service(lambda request: httpx.Response(200, text=VALID_BODY))
        client = create_client(service)

        statuses = {path: client.request(method, path) for path in ("/", "/favicon.ico", "/nope")}

        assert {path: r.status_code for path, r in statuses.items()} == {
            "/": 303,
            "/favicon.ico": 204,
            "/nope": 404,
        }
        for response in statuses.values():
            assert response.content == b""
            assert "allow" not in response.headers

    def test_unlisted_method_on_callback(self, make_service, create_client):
        """Test that the callback is verified for a non-standard method."""
        service, sent = make_service(lambda request: httpx.Response(200, text=VALID_BODY))
        client = create_client(service)

        response = client.request("PROPFIND", CALLBACK_PATH)

        assert response.status_code == 200
        assert len(sent) == 1


class TestLifespan:
    """Tests for service startup and shutdown."""

    def test_startup_builds_service_from_config(self, monkeypatch):
        """Test that the lifespan loads config and tears the service down."""
        monkeypatch.setattr(main, "auth_service", None)
        monkeypatch.setenv("STEAMGATE_PUBLIC_URL", "https://login.example.org")

        with TestClient(main.app, follow_redirects=False) as client:
            service = main.auth_service
            response = client.get("/")

            assert service is not None
            assert service.provider.return_to == "https://login.example.org/auth/steam"
            assert response.status_code == 303

        assert main.auth_service is None
        assert service.client.is_closed
