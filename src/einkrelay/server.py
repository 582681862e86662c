#!/usr/bin/env python3
"""Distribution server for eink-relay.

The server exposes the shared document to pull-only readers:
- GET /get serves the reader page with the current document embedded
- GET /api/content returns the rendered document and its fingerprint
- POST /api/content replaces the document (last writer wins)

Every request renders the document afresh; nothing is cached. Handlers are
plain functions, so the framework runs them concurrently on its worker
threads and the document store arbitrates between them.

If the port cannot be bound the server logs the failure and returns, and
the rest of the process keeps running without network distribution.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from einkrelay.hashing import make_error_hash
from einkrelay.protocol import (
    BOOTSTRAP_PATH,
    CONTENT_PATH,
    ERROR_HTML,
    NO_CACHE_HEADERS,
    UPDATE_FAILED_MESSAGE,
    UPDATE_OK_MESSAGE,
    ContentResponse,
    SetTextPayload,
)
from einkrelay.rendering import process
from einkrelay.server_page import render_page
from einkrelay.server_socket import BindFailure, SERVER_HOST, SERVER_PORT, bind_listening_socket
from einkrelay.store import StoreUnavailable

if TYPE_CHECKING:
    from einkrelay.store import ContentStore

logger = logging.getLogger(__name__)


def create_app(store: ContentStore) -> FastAPI:
    """Build the distribution application around a document store.

    Args:
        store: The shared document store.

    Returns:
        The configured FastAPI application.
    """
    app = FastAPI(title="eink-relay", docs_url=None, redoc_url=None, openapi_url=None)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type"],
    )

    def get_page() -> HTMLResponse:
        """Serve the reader page with the current document embedded."""
        logger.info("Request received for initial page %s", BOOTSTRAP_PATH)
        try:
            text = store.read()
        except StoreUnavailable as e:
            logger.error("Serving error page for %s: %s", BOOTSTRAP_PATH, e)
            return HTMLResponse(
                render_page(ERROR_HTML, make_error_hash()),
                status_code=500,
                headers=NO_CACHE_HEADERS,
            )
        view = process(text)
        logger.info("Serving initial page with hash: %s", view.fingerprint)
        return HTMLResponse(render_page(view.markup, view.fingerprint), headers=NO_CACHE_HEADERS)

    def get_content() -> JSONResponse:
        """Return the rendered document and its fingerprint."""
        logger.debug("Polling request received for %s", CONTENT_PATH)
        try:
            text = store.read()
        except StoreUnavailable as e:
            logger.warning("Serving error payload for %s: %s", CONTENT_PATH, e)
            response = ContentResponse(html=ERROR_HTML, hash=make_error_hash())
            return JSONResponse(response.model_dump(), status_code=500, headers=NO_CACHE_HEADERS)
        view = process(text)
        response = ContentResponse(html=view.markup, hash=view.fingerprint)
        return JSONResponse(response.model_dump(), headers=NO_CACHE_HEADERS)

    def set_content(payload: SetTextPayload) -> JSONResponse:
        """Replace the document unconditionally."""
        logger.info("Request received to update content via POST %s", CONTENT_PATH)
        try:
            store.write(payload.new_text)
        except StoreUnavailable as e:
            logger.error("Update via %s failed: %s", CONTENT_PATH, e)
            return JSONResponse(UPDATE_FAILED_MESSAGE, status_code=500)
        logger.info("Successfully updated shared text from API.")
        return JSONResponse(UPDATE_OK_MESSAGE)

    app.add_api_route(BOOTSTRAP_PATH, get_page, methods=["GET"], response_class=HTMLResponse)
    app.add_api_route(CONTENT_PATH, get_content, methods=["GET"])
    app.add_api_route(CONTENT_PATH, set_content, methods=["POST"])
    return app


async def serve(store: ContentStore, host: str = SERVER_HOST, port: int = SERVER_PORT) -> bool:
    """Serve the document until the server is shut down.

    Args:
        store: The shared document store.
        host: Interface address to listen on.
        port: TCP port to listen on.

    Returns:
        True after a normal shutdown, False if the port could not be bound.
    """
    import uvicorn

    try:
        sock = bind_listening_socket(host, port)
    except BindFailure as e:
        logger.error("%s", e)
        return False

    logger.info("E-Ink server listening on http://%s:%d%s", host, port, BOOTSTRAP_PATH)
    config = uvicorn.Config(create_app(store), log_config=None, access_log=False)
    server = uvicorn.Server(config)
    try:
        await server.serve(sockets=[sock])
    finally:
        sock.close()
    return True


def run_server(store: ContentStore, host: str = SERVER_HOST, port: int = SERVER_PORT) -> bool:
    """Run the distribution server on the current thread.

    Args:
        store: The shared document store.
        host: Interface address to listen on.
        port: TCP port to listen on.

    Returns:
        True after a normal shutdown, False if the port could not be bound.
    """
    import asyncio

    return asyncio.run(serve(store, host, port))
