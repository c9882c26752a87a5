"""Error Hierarchy — verifies codes, status mapping and REST envelope shape."""

from pathlib import Path

from spa_host.core.errors import (
    ErrorCategory, ErrorSeverity, FallbackDocumentMissingError,
    SpaHostError, StaticAssetsMissingError,
)


def test_fallback_missing_maps_to_500():
    exc = FallbackDocumentMissingError(Path("dist/index.html"))
    assert isinstance(exc, SpaHostError)
    assert exc.http_status == 500
    assert exc.code == "FALLBACK_DOCUMENT_MISSING"
    assert exc.category == ErrorCategory.STATIC_ASSETS
    assert exc.severity == ErrorSeverity.CRITICAL


def test_fallback_missing_response_hides_path():
    exc = FallbackDocumentMissingError(Path("/secret/dist/index.html"))
    body = exc.to_response()
    assert "/secret" not in str(body)
    assert exc.path == Path("/secret/dist/index.html")


def test_static_assets_missing_names_path_in_message():
    exc = StaticAssetsMissingError(Path("dist/index.html"))
    assert exc.code == "STATIC_ASSETS_MISSING"
    assert exc.category == ErrorCategory.CONFIGURATION
    assert "index.html" in str(exc)


def test_to_response_envelope():
    exc = SpaHostError("boom", "SOME_CODE", ErrorCategory.INTERNAL)
    error = exc.to_response()["error"]
    assert error["code"] == "SOME_CODE"
    assert error["message"] == "boom"
    assert error["category"] == "internal"
    assert error["severity"] == "error"
    assert error["timestamp"].endswith("+00:00")
