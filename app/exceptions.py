# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error body carries an "error" message the site can show as-is.
# =============================================================================

from typing import Any

from fastapi import Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class PortfolioException(Exception):
    """
    Base exception for the portfolio API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "PORTFOLIO_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "error": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Upload Exceptions
# =============================================================================

class MissingFileError(PortfolioException):
    """Raised when an upload request carries no file."""

    def __init__(self):
        super().__init__(
            message="No file provided",
            code="MISSING_FILE",
            status_code=400,
            suggestion="Send the image as the 'file' field of a multipart form",
        )


class InvalidImageTypeError(PortfolioException):
    """Raised when the declared content type is not an image."""

    def __init__(self, content_type: str | None):
        super().__init__(
            message="File must be an image",
            code="INVALID_FILE_TYPE",
            status_code=400,
            suggestion="Upload a PNG, JPEG, WebP, GIF or SVG image",
            details={"content_type": content_type},
        )


class ImageTooLargeError(PortfolioException):
    """Raised when an uploaded image exceeds the size limit."""

    def __init__(self, size_bytes: int, max_mb: int):
        super().__init__(
            message=f"File must be smaller than {max_mb}MB",
            code="FILE_TOO_LARGE",
            status_code=400,
            suggestion=f"Resize or compress the image below {max_mb}MB",
            details={"size_bytes": size_bytes, "max_mb": max_mb},
        )


# =============================================================================
# Storage Exceptions
# =============================================================================

class ProfilePictureWriteError(PortfolioException):
    """Raised when the profile picture cannot be written to disk."""

    def __init__(self, error: str):
        super().__init__(
            message="Failed to upload profile picture",
            code="PROFILE_PICTURE_WRITE_ERROR",
            status_code=500,
            suggestion="Try again later or check that the public directory is writable",
            details={"error": error},
        )


class ReadOnlyStorageError(PortfolioException):
    """Raised when uploading against the read-only static backend."""

    def __init__(self):
        super().__init__(
            message="Profile picture uploads are disabled on this deployment",
            code="READ_ONLY_STORAGE",
            status_code=405,
            suggestion="Set STORAGE_BACKEND=filesystem on a host with writable storage",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def portfolio_exception_handler(
    request: Request,
    exc: PortfolioException
) -> JSONResponse:
    """
    Convert PortfolioException to JSON response.

    Returns structured error with:
    - error: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


VALIDATION_ERROR_HIDDEN_KEYS = ("input", "ctx", "url")


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Reports where and why each field failed. The rejected input and the
    validator context are left out so nothing from the request or the
    server is echoed back.
    """
    errors = [
        {key: value for key, value in error.items() if key not in VALIDATION_ERROR_HIDDEN_KEYS}
        for error in exc.errors()
    ]
    return JSONResponse(
        status_code=422,
        content={
            "error": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": jsonable_encoder(errors)
        }
    )


async def http_exception_handler(
    request: Request,
    exc: StarletteHTTPException
) -> JSONResponse:
    """
    Render errors raised by FastAPI or Starlette themselves, such as an
    unknown route, in the same shape as our own errors.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={
            "error": exc.detail,
            "code": "HTTP_ERROR"
        },
        headers=getattr(exc, "headers", None)
    )
