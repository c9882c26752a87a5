"""Error Hierarchy — typed, categorized exceptions for SPA host failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - A missing static file is NOT an error (the SPA fallback handles it)
    - to_response() produces the REST envelope; no filesystem paths leak into it

Design Decisions:
    - Single hierarchy with SpaHostError base: FastAPI global handler catches all
    - Paths kept on the exception for logging, message stays generic
"""

from datetime import datetime, timezone
from enum import Enum
from pathlib import Path


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    STATIC_ASSETS = "static_assets"
    CONFIGURATION = "configuration"
    INTERNAL = "internal"


class SpaHostError(Exception):
    """Base exception for all SPA host errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.http_status = http_status
        self.timestamp = datetime.now(timezone.utc)

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.timestamp.isoformat(),
            }
        }


class FallbackDocumentMissingError(SpaHostError):
    """SPA entry document vanished after startup."""
    def __init__(self, path: Path):
        super().__init__(
            "Application entry document is unavailable",
            "FALLBACK_DOCUMENT_MISSING", ErrorCategory.STATIC_ASSETS,
            ErrorSeverity.CRITICAL, 500,
        )
        self.path = path


class StaticAssetsMissingError(SpaHostError):
    """Asset directory or entry document absent at startup."""
    def __init__(self, path: Path):
        super().__init__(
            f"SPA fallback document not found: {path}",
            "STATIC_ASSETS_MISSING", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, 500,
        )
        self.path = path
