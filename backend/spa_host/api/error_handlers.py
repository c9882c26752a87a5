"""Error Handlers — global exception handlers for the SPA host.

Invariants:
    - SpaHostError → structured JSON with error code, message, severity
    - Exception (catch-all) → never leaks internal details
    - Both responses carry the cross-origin isolation headers

Design Decisions:
    - Two-layer handler: domain (SpaHostError), catch-all (Exception)
    - Catch-all sets headers itself: Starlette answers it from ServerErrorMiddleware,
      outside the user middleware stack
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from spa_host.api.security_headers import apply_isolation_headers
from spa_host.core.errors import ErrorCategory, ErrorSeverity, SpaHostError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_spa_host_error_handler(app)
    _register_generic_error_handler(app)


def _register_spa_host_error_handler(app: FastAPI) -> None:

    @app.exception_handler(SpaHostError)
    async def spa_host_error_handler(request: Request, exc: SpaHostError):
        """Handle all SPA host domain/infrastructure errors."""
        logger.error(
            f"SpaHostError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
            extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
        )
        response = JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An unexpected error occurred",
                    "category": ErrorCategory.INTERNAL.value,
                    "severity": ErrorSeverity.CRITICAL.value,
                },
            },
        )
        apply_isolation_headers(response.headers)
        response.headers["Access-Control-Allow-Origin"] = "*"
        return response
