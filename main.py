"""
Main API module for the short URL service.

Responsibilities:
    - Expose REST endpoints for creating short URLs and redirecting
    - Translate core errors into the public `{"error": "invalid url"}` body
    - Provide a tiny landing page, a sample endpoint and a health check

Architecture:
    - App Factory pattern (create_app) for test isolation and DI.
    - Each app instance owns its own in-memory AliasStore.
    - The AliasStore owns validation, dedupe and alias assignment; routes only
      parse input and shape responses.
"""

import logging
from typing import Any, Dict, Optional, Union

import uvicorn
from fastapi import FastAPI, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from pydantic import BaseModel

from shorturl_platform.config import settings
from shorturl_platform.exceptions import AliasNotFoundError, InvalidUrlError
from shorturl_platform.manager.alias_store import AliasStore

INVALID_URL_BODY = {"error": "invalid url"}

INDEX_HTML = """<!DOCTYPE html>
<html>
  <head><title>URL Shortener Microservice</title></head>
  <body>
    <h1>URL Shortener Microservice</h1>
    <form action="/api/shorturl" method="POST">
      <label for="url_input">URL:</label>
      <input id="url_input" type="text" name="url" placeholder="https://www.example.com" />
      <input type="submit" value="POST URL" />
    </form>
  </body>
</html>
"""


class ShortUrlResponse(BaseModel):
    """Successful create response."""
    original_url: str
    short_url: int


class ErrorResponse(BaseModel):
    """Error body shared by create and redirect."""
    error: str


async def _read_submitted_url(request: Request) -> Optional[str]:
    """
    Pull the `url` field out of a JSON or form-encoded body.

    Returns None when the body is missing, unparseable, or `url` is not a string.
    """
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith("application/json"):
        try:
            payload = await request.json()
        except ValueError:
            return None
        value = payload.get("url") if isinstance(payload, dict) else None
    else:
        form = await request.form()
        value = form.get("url")
    return value if isinstance(value, str) else None


def create_app(store: Optional[AliasStore] = None) -> FastAPI:
    """
    Factory function to build and configure a new FastAPI app instance.

    Args:
        store (Optional[AliasStore]): Injected store; a fresh one is built if omitted.

    Returns:
        FastAPI: A fully configured application instance with its own AliasStore.
    """
    app = FastAPI(
        title="URL Shortener Microservice",
        description="Sequential integer aliases for http/https URLs, kept in memory",
        docs_url="/docs",
    )
    log = logging.getLogger("shorturl")

    if not logging.getLogger().handlers:
        logging.basicConfig(level=settings.LOG_LEVEL)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    alias_store = store if store is not None else AliasStore()
    app.state.alias_store = alias_store

    log.info(
        "Short URL service configured: log_level=%s cors_origins=%s",
        settings.LOG_LEVEL,
        settings.CORS_ALLOW_ORIGINS,
    )

    # ----------------------------------------------------------------
    # Routes
    # ----------------------------------------------------------------
    @app.get("/", response_class=HTMLResponse)
    def index() -> str:
        return INDEX_HTML

    @app.get("/api/hello")
    def hello() -> Dict[str, str]:
        return {"greeting": "hello API"}

    @app.get("/health")
    def health() -> Dict[str, str]:
        return {"status": "ok"}

    @app.post(
        "/api/shorturl",
        response_model=Union[ShortUrlResponse, ErrorResponse],
    )
    async def create_short_url(request: Request) -> Dict[str, Any]:
        """
        Create (or reuse) the alias for a submitted URL.

        Accepts `url` from either a JSON body or an HTML form post.

        Returns:
            dict: `{"original_url", "short_url"}` on success, or
                  `{"error": "invalid url"}` when the URL is rejected.
        """
        submitted = await _read_submitted_url(request)
        try:
            # The store lock is also taken from threadpool handlers; keep it off the event loop.
            record = await run_in_threadpool(alias_store.create_or_reuse, submitted)
        except InvalidUrlError:
            log.info("Rejected invalid url: %r", submitted)
            return INVALID_URL_BODY

        log.info("Short url %d -> %s", record.alias, record.original_url)
        return record.to_dict()

    @app.get("/api/shorturl/{short}")
    def redirect_short_url(short: str):
        """
        Redirect to the original URL stored under `short`.

        Unknown or non-numeric aliases get the error body instead of a redirect.
        """
        try:
            original_url = alias_store.resolve(short)
        except AliasNotFoundError:
            log.debug("Unknown alias requested: %r", short)
            return JSONResponse(INVALID_URL_BODY)

        return RedirectResponse(url=original_url, status_code=302)

    return app


# `uvicorn main:app` and `from main import app` continue to work.
app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT, log_level=logging.getLevelName(settings.LOG_LEVEL))
