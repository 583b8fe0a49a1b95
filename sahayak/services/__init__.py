"""Services module initialization."""

from sahayak.services.llm import LLMService
from sahayak.services.matching import match_schemes

__all__ = [
    "LLMService",
    "match_schemes"
]
