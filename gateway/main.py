# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Copilot-for-Consensus contributors

"""Steam OpenID Gateway: relying party for Steam's OpenID 2.0 login.

Routes (any method):
- ``/``: redirect (303) to the Steam login page
- ``/auth/steam*``: verify the Steam callback (200, 401 or 500)
- ``/favicon.ico``: no content (204)
- anything else: 404

All responses have empty bodies.
"""

import os
import sys
from contextlib import asynccontextmanager

# Add app directory to path
sys.path.insert(0, os.path.dirname(__file__))


import uvicorn
from app import __version__
from app.config import load_gateway_config
from app.routes import Route, resolve_route
from app.service import SteamAuthService
from fastapi import FastAPI, Request, Response
from steamgate_logging import create_logger, create_uvicorn_log_config

logger = create_logger(logger_type="stdout", level="INFO", name="gateway")

# Global service instance
auth_service: SteamAuthService | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage service lifecycle."""
    global auth_service

    logger.info("Starting Steam OpenID Gateway...")
    config = load_gateway_config()
    auth_service = SteamAuthService(config=config)
    logger.info("Steam OpenID Gateway started successfully", version=__version__)

    yield

    logger.info("Shutting down Steam OpenID Gateway...")
    await auth_service.aclose()
    auth_service = None


# Documentation routes are disabled: every path outside the table above is a 404.
app = FastAPI(
    title="Steam OpenID Gateway",
    version=__version__,
    description="Steam OpenID 2.0 relying party",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


def request_target(request: Request) -> str:
    """Rebuild the request target (raw path plus ``?query``) as received."""
    raw_path = request.scope.get("raw_path") or request.url.path.encode()
    target = raw_path.split(b"?", 1)[0].decode("latin-1")
    query = request.scope.get("query_string", b"")
    if query:
        target += "?" + query.decode("latin-1")
    return target


@app.middleware("http")
async def dispatch(request: Request, call_next) -> Response:
    """Answer every request, whatever its method, from the route table.

    The router is never reached, so no request gets a framework 405.
    """
    target = request_target(request)
    logger.info(f"{request.method} {target}")

    route = resolve_route(target)

    if route is Route.FAVICON:
        return Response(status_code=204)
    if route is Route.NOT_FOUND:
        return Response(status_code=404)

    if not auth_service:
        return Response(status_code=503)

    if route is Route.REDIRECT:
        return Response(status_code=303, headers={"Location": auth_service.get_login_url()})

    query = request.scope.get("query_string", b"").decode("utf-8", errors="replace")
    outcome = await auth_service.handle_callback(query)
    return Response(status_code=outcome.status_code)


if __name__ == "__main__":
    config = load_gateway_config()

    uvicorn.run(
        "main:app",
        host=config.listen_host,
        port=config.listen_port,
        log_config=create_uvicorn_log_config("gateway", config.log_level),
        access_log=True,
    )
