"""Core module initialization."""

from sahayak.core.exceptions import (
    SahayakException,
    ValidationError,
    NotFoundError,
    DependencyError,
    LLMException,
    DatabaseException,
    ChatProcessingError
)
from sahayak.core.languages import LanguageCode, DEFAULT_LANGUAGE, MESSAGES

__all__ = [
    "SahayakException",
    "ValidationError",
    "NotFoundError",
    "DependencyError",
    "LLMException",
    "DatabaseException",
    "ChatProcessingError",
    "LanguageCode",
    "DEFAULT_LANGUAGE",
    "MESSAGES"
]
