"""Web process entrypoint."""

from __future__ import annotations

import logging
from pathlib import Path
from time import monotonic

import uvicorn
from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from faqbot.app import App, create_app
from faqbot.config.logging import configure_logging
from faqbot.config.settings import load_settings
from faqbot.web.router import router

logger = logging.getLogger(__name__)


def create_web_app(app: App) -> FastAPI:
    """Build the FastAPI application around an application container.

    The static asset tree is mounted last so API routes take precedence; it is skipped when the
    configured directory does not exist.
    """

    web = FastAPI(
        title="Stimulus FAQ Bot",
        description="Keyword-matched FAQ replies for the site chat widget",
        version=app.settings.app_version,
    )
    web.state.faq_app = app

    web.add_middleware(
        CORSMiddleware,
        allow_origins=app.settings.cors_origin_list,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @web.middleware("http")
    async def log_requests(request: Request, call_next) -> Response:
        started = monotonic()
        try:
            response = await call_next(request)
        except Exception:
            latency_ms = int((monotonic() - started) * 1000)
            logger.exception(
                "request failed method=%s path=%s latency_ms=%d",
                request.method,
                request.url.path,
                latency_ms,
            )
            raise
        latency_ms = int((monotonic() - started) * 1000)
        logger.info(
            "request method=%s path=%s status=%d latency_ms=%d",
            request.method,
            request.url.path,
            response.status_code,
            latency_ms,
        )
        return response

    web.include_router(router)

    static_dir = Path(app.settings.static_dir)
    if static_dir.is_dir():
        web.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.info("static directory not found, skipping mount path=%s", static_dir)

    return web


def main() -> None:
    """Run the HTTP server."""

    settings = load_settings()
    configure_logging(settings.log_level)

    web = create_web_app(create_app(settings))
    logger.info("starting server host=%s port=%d", settings.host, settings.port)
    try:
        uvicorn.run(web, host=settings.host, port=settings.port, log_level=settings.log_level.lower())
    finally:
        logger.info("shutting down")


if __name__ == "__main__":
    main()
