"""SPA Host — FastAPI application entry point.

Invariants:
    - API router registered before the static mount so /api/v1/hello takes precedence
    - Every other path goes to the SPA static responder (fallback, never 404)
    - Middleware order, outermost first: COOP/COEP isolation, then permissive CORS
    - Startup aborts if the fallback document is missing

Design Decisions:
    - create_app(settings) factory: tests point the app at a temporary asset tree
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - Listening line logged from lifespan, before the socket is bound
"""

import logging
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from spa_host.api.error_handlers import register_error_handlers
from spa_host.api.routes import hello
from spa_host.api.security_headers import CrossOriginIsolationMiddleware
from spa_host.config import Settings, get_settings
from spa_host.core.errors import StaticAssetsMissingError
from spa_host.infrastructure.observability import setup_logging
from spa_host.infrastructure.spa_static import SPAStaticFiles

logger = logging.getLogger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        if not os.path.isfile(settings.fallback_path):
            raise StaticAssetsMissingError(settings.fallback_path)
        logger.info(
            f"Listening on {settings.listen_url}",
            extra={"host": settings.host, "port": settings.port},
        )
        yield

    app = FastAPI(
        title="SPA Host", version="1.0.0", lifespan=lifespan,
        docs_url=None, redoc_url=None, openapi_url=None,
    )

    # add_middleware prepends: the last one added is the outermost layer
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(CrossOriginIsolationMiddleware)

    app.include_router(hello.router)

    # Mounted AFTER API routes so /api/v1/* takes precedence
    app.mount(
        "/",
        SPAStaticFiles(
            directory=settings.static_dir,
            fallback_document=settings.fallback_document,
        ),
        name="static",
    )

    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve the app; a failed bind exits the process (no retry)."""
    settings = get_settings()
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_config=None,
        log_level="warning",
        access_log=False,
    )
