"""
LLM Service using Groq API.
Generates scheme guidance replies and extracts user details.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from sahayak.config import get_settings
from sahayak.core.conversation import ConversationTurn
from sahayak.core.exceptions import (
    LLMAPIException,
    LLMNotConfiguredException,
    LLMResponseFormatException,
    LLMTimeoutException,
    LLMRateLimitException
)
from sahayak.core.languages import LanguageCode
from sahayak.services.llm.prompts import (
    build_chat_messages,
    build_extraction_messages,
    parse_extracted_info
)

logger = logging.getLogger(__name__)
settings = get_settings()


@dataclass
class LLMResponse:
    """Response from LLM completion."""
    content: str
    finish_reason: Optional[str] = None
    usage: Optional[Dict[str, int]] = None
    processing_time_ms: Optional[float] = None


class LLMService:
    """
    LLM service using the Groq API.

    Without an API key the service stays uninitialized and every call
    raises LLMNotConfiguredException.
    """

    def __init__(self, client: Any = None, model: Optional[str] = None):
        self._client = client
        self._is_initialized = client is not None
        self._model = model or settings.LLM_MODEL_ID

    @property
    def is_initialized(self) -> bool:
        return self._is_initialized

    async def initialize(self):
        """Initialize Groq client."""
        if self._is_initialized:
            return

        if not settings.GROQ_API_KEY:
            logger.warning("GROQ_API_KEY is not set; chat requests will fail until it is configured")
            return

        from groq import AsyncGroq

        self._client = AsyncGroq(api_key=settings.GROQ_API_KEY)
        self._is_initialized = True
        logger.info(f"LLM service initialized with model: {self._model}")

    async def complete(
        self,
        messages: List[Dict[str, str]],
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None
    ) -> LLMResponse:
        """
        Generate a complete response.

        Timeouts are retried up to LLM_MAX_RETRIES times; other errors
        are raised immediately.
        """
        if not self._is_initialized:
            raise LLMNotConfiguredException()

        kwargs = {
            "model": self._model,
            "messages": messages,
            "temperature": settings.LLM_TEMPERATURE if temperature is None else temperature,
            "max_tokens": max_tokens or settings.LLM_MAX_TOKENS
        }

        attempts = 1 + max(settings.LLM_MAX_RETRIES, 0)
        for attempt in range(1, attempts + 1):
            start_time = time.time()
            try:
                response = await asyncio.wait_for(
                    self._client.chat.completions.create(**kwargs),
                    timeout=settings.LLM_TIMEOUT_SECONDS
                )
            except asyncio.TimeoutError:
                logger.warning(f"LLM timeout (attempt {attempt}/{attempts})")
                if attempt == attempts:
                    raise LLMTimeoutException(settings.LLM_TIMEOUT_SECONDS)
                continue
            except Exception as e:
                if "rate_limit" in str(e).lower() or getattr(e, "status_code", None) == 429:
                    raise LLMRateLimitException()
                raise LLMAPIException(str(e), getattr(e, "status_code", 500) or 500)

            choice = response.choices[0]
            usage = getattr(response, "usage", None)

            return LLMResponse(
                content=choice.message.content or "",
                finish_reason=choice.finish_reason,
                usage={
                    "prompt_tokens": usage.prompt_tokens,
                    "completion_tokens": usage.completion_tokens,
                    "total_tokens": usage.total_tokens
                } if usage else None,
                processing_time_ms=(time.time() - start_time) * 1000
            )

    async def generate_reply(
        self,
        message: str,
        language: LanguageCode,
        history: Sequence[ConversationTurn] = (),
        scheme_summaries: Optional[Sequence[str]] = None
    ) -> str:
        """Generate the assistant reply in `language`."""
        messages = build_chat_messages(
            message,
            language,
            history,
            window=settings.HISTORY_WINDOW,
            scheme_summaries=scheme_summaries
        )
        response = await self.complete(messages)

        if not response.content.strip():
            raise LLMResponseFormatException("text", response.content)

        return response.content.strip()

    async def extract_user_info(self, message: str, language: LanguageCode) -> Dict[str, Any]:
        """
        Extract age, income, state, occupation and family size.

        Raises:
            LLMException: on API failure or unparseable output
        """
        response = await self.complete(
            build_extraction_messages(message, language),
            temperature=0.0,
            max_tokens=256
        )
        try:
            return parse_extracted_info(response.content)
        except ValueError:
            raise LLMResponseFormatException("JSON", response.content)

    async def cleanup(self):
        """Cleanup resources."""
        if self._client is not None and hasattr(self._client, "close"):
            await self._client.close()
        self._client = None
        self._is_initialized = False
        logger.info("LLM service cleaned up")
