"""
Chat Orchestrator.
Coordinates validation → LLM reply → user-info extraction → scheme lookup.
"""

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional, Sequence

from sahayak.config import get_settings
from sahayak.core.conversation import ConversationTurn, new_session_id
from sahayak.core.exceptions import (
    ChatProcessingError,
    DependencyError,
    LLMException,
    ValidationError
)
from sahayak.core.languages import MESSAGES, LanguageCode
from sahayak.db.repositories.schemes import SchemeRepository
from sahayak.detection import DetectionResult, LanguageDetector, get_detector
from sahayak.logging.chat_logger import ChatLogger
from sahayak.services.llm import LLMService
from sahayak.services.matching import match_schemes

logger = logging.getLogger(__name__)
settings = get_settings()


@dataclass
class ChatRequest:
    """Validated chat input."""
    message: str
    language: LanguageCode
    history: List[ConversationTurn] = field(default_factory=list)
    session_id: str = field(default_factory=new_session_id)

    @classmethod
    def build(
        cls,
        message: Any,
        language: Optional[str] = None,
        history: Optional[Sequence[Mapping[str, Any]]] = None,
        session_id: Optional[str] = None
    ) -> "ChatRequest":
        """
        Validate raw request fields.

        Raises:
            ValidationError: empty/non-string message or unsupported language
        """
        if not isinstance(message, str) or not message.strip():
            raise ValidationError("Message is required", {"field": "message"})

        turns = []
        for entry in history or []:
            if isinstance(entry, Mapping):
                turn = ConversationTurn.from_client(entry)
                if turn:
                    turns.append(turn)

        return cls(
            message=message.strip(),
            language=LanguageCode.parse(language or settings.DEFAULT_CHAT_LANGUAGE),
            history=turns,
            session_id=session_id or new_session_id()
        )


@dataclass
class ChatResult:
    """Outcome of a chat turn."""
    response: str
    schemes: List[Dict[str, Any]]
    session_id: str
    extracted_info: Dict[str, Any]
    language: LanguageCode
    detected_language: DetectionResult
    latency_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "response": self.response,
            "schemes": self.schemes,
            "sessionId": self.session_id,
            "extractedInfo": self.extracted_info,
            "language": self.language.value,
            "detectedLanguage": self.detected_language.to_dict()
        }


class ChatOrchestrator:
    """
    Runs one chat turn.

    Collaborator failures never escape as raw exceptions: they are logged
    and re-raised as ChatProcessingError carrying a localized apology.
    """

    def __init__(
        self,
        llm_service: LLMService,
        scheme_repository: Optional[SchemeRepository] = None,
        detector: Optional[LanguageDetector] = None,
        chat_logger: Optional[ChatLogger] = None
    ):
        self.llm = llm_service
        self.schemes = scheme_repository or SchemeRepository()
        self.detector = detector or get_detector()
        self.chat_logger = chat_logger

    async def process(self, request: ChatRequest) -> ChatResult:
        """Process a validated chat request."""
        start_time = time.time()
        detection = self.detector.detect(request.message, preferred=request.language)

        logger.info(
            f"Chat turn session={request.session_id} language={request.language.value} "
            f"detected={detection.language.value}:{detection.confidence:.2f}"
        )

        try:
            available = await self.schemes.get_all_active()

            response = await self.llm.generate_reply(
                request.message,
                request.language,
                request.history,
                scheme_summaries=[f"{s.name} ({s.category})" for s in available]
            )

            extracted_info = await self._extract_user_info(request)

            scheme_ids = match_schemes(request.message, available, extracted_info)
            schemes = await self.schemes.get_by_ids(scheme_ids) if scheme_ids else []

        except DependencyError as e:
            raise await self._failure(request, e.error_code, e.message, e.details) from e
        except Exception as e:
            logger.exception(f"Unexpected chat failure for session {request.session_id}")
            raise await self._failure(request, "INTERNAL_ERROR", str(e), {"type": type(e).__name__}) from e

        latency_ms = (time.time() - start_time) * 1000

        result = ChatResult(
            response=response,
            schemes=[s.to_dict(request.language) for s in schemes],
            session_id=request.session_id,
            extracted_info=extracted_info,
            language=request.language,
            detected_language=detection,
            latency_ms=latency_ms
        )

        if self.chat_logger:
            await self.chat_logger.log_chat_turn(
                request.session_id,
                request.message,
                request.language.value,
                response,
                [s.id for s in schemes],
                detection=detection.to_dict(),
                extracted_info=extracted_info,
                latency_ms=latency_ms
            )

        return result

    async def _extract_user_info(self, request: ChatRequest) -> Dict[str, Any]:
        """Best-effort extraction; failures degrade to an empty dict."""
        try:
            return await self.llm.extract_user_info(request.message, request.language)
        except LLMException as e:
            logger.warning(f"User info extraction failed for session {request.session_id}: {e.message}")
            return {}

    async def _failure(
        self,
        request: ChatRequest,
        error_code: str,
        message: str,
        details: Optional[Dict[str, Any]] = None
    ) -> ChatProcessingError:
        logger.error(
            f"Chat processing failed session={request.session_id} "
            f"language={request.language.value} code={error_code}: {message}"
        )
        if self.chat_logger:
            await self.chat_logger.log_error(request.session_id, error_code, message, details)

        return ChatProcessingError(
            MESSAGES.lookup("chat_error", request.language),
            request.language.value,
            cause=error_code
        )
