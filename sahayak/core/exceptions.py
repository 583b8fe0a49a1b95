"""
Core exceptions for Sahayak.
Custom exception classes for structured error handling.
"""

from typing import Optional, Dict, Any


class SahayakException(Exception):
    """Base exception for Sahayak errors."""

    def __init__(
        self,
        message: str,
        error_code: str = "SAHAYAK_ERROR",
        status_code: int = 500,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


# =========================
# Validation Exceptions
# =========================

class ValidationError(SahayakException):
    """Raised when a request carries bad or missing input."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="VALIDATION_ERROR",
            status_code=400,
            details=details
        )


class UnsupportedLanguageException(ValidationError):
    """Raised when a language code is not one of the supported codes."""

    def __init__(self, language: str, supported: list):
        super().__init__(
            message=f"Language '{language}' is not supported",
            details={"language": language, "supported_languages": supported}
        )


# =========================
# Lookup Exceptions
# =========================

class NotFoundError(SahayakException):
    """Raised when a requested record does not exist."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            status_code=404,
            details=details
        )


class SchemeNotFoundException(NotFoundError):
    """Raised when a scheme id is unknown."""

    def __init__(self, scheme_id: str):
        super().__init__(
            message="Scheme not found",
            details={"scheme_id": scheme_id}
        )


# =========================
# Dependency Exceptions
# =========================

class DependencyError(SahayakException):
    """Base exception for failures of the store or the language model."""

    def __init__(
        self,
        message: str,
        error_code: str = "DEPENDENCY_ERROR",
        details: Optional[Dict[str, Any]] = None
    ):
        super().__init__(
            message=message,
            error_code=error_code,
            status_code=500,
            details=details
        )


class LLMException(DependencyError):
    """Base exception for LLM errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="LLM_ERROR",
            details=details
        )


class LLMNotConfiguredException(LLMException):
    """Raised when no API key is available for the LLM."""

    def __init__(self):
        super().__init__(
            message="LLM API key is not configured",
            details={"error_type": "not_configured"}
        )


class LLMAPIException(LLMException):
    """Raised when Groq API returns an error."""

    def __init__(self, api_error: str, status_code: int = 500):
        super().__init__(
            message=f"LLM API error: {api_error}",
            details={"api_error": api_error, "api_status_code": status_code}
        )


class LLMTimeoutException(LLMException):
    """Raised when LLM processing times out."""

    def __init__(self, timeout_seconds: float):
        super().__init__(
            message=f"LLM processing timed out after {timeout_seconds} seconds",
            details={"timeout_seconds": timeout_seconds}
        )


class LLMRateLimitException(LLMException):
    """Raised when LLM API rate limit is exceeded."""

    def __init__(self, retry_after: Optional[float] = None):
        super().__init__(
            message="LLM API rate limit exceeded",
            details={"retry_after_seconds": retry_after}
        )


class LLMResponseFormatException(LLMException):
    """Raised when the LLM output cannot be parsed."""

    def __init__(self, expected: str, raw: str):
        super().__init__(
            message=f"LLM output is not valid {expected}",
            details={"expected": expected, "raw": raw[:200]}
        )


class DatabaseException(DependencyError):
    """Raised when the scheme store fails."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code="DATABASE_ERROR",
            details=details
        )


class ChatProcessingError(DependencyError):
    """
    Raised when a chat turn cannot be completed.
    The message is a localized apology safe to show to the user.
    """

    def __init__(self, apology: str, language: str, cause: Optional[str] = None):
        super().__init__(
            message=apology,
            error_code="PROCESSING_ERROR",
            details={"language": language, "cause": cause}
        )
