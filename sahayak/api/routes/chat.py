"""
Chat REST Endpoint.
Answers a user message with guidance and matching schemes.
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from sahayak.core.chat import ChatOrchestrator, ChatRequest

logger = logging.getLogger(__name__)

router = APIRouter()


class ChatMessage(BaseModel):
    """Request model for sending a message."""
    message: Optional[Any] = None
    language: Optional[str] = None
    conversationHistory: List[Dict[str, Any]] = Field(default_factory=list)
    sessionId: Optional[str] = None


class DetectedLanguage(BaseModel):
    language: str
    confidence: float


class ChatResponse(BaseModel):
    """Response model for a chat turn."""
    response: str
    schemes: List[Dict[str, Any]] = []
    sessionId: str
    extractedInfo: Dict[str, Any] = {}
    language: str
    detectedLanguage: DetectedLanguage


@router.post("", response_model=ChatResponse)
async def process_chat_message(request: Request, body: ChatMessage):
    """
    Process a chat message.

    Validation happens before any service is touched, so an empty message
    never reaches the language model.
    """
    chat_request = ChatRequest.build(
        body.message,
        language=body.language,
        history=body.conversationHistory,
        session_id=body.sessionId
    )

    app = request.app
    orchestrator = ChatOrchestrator(
        llm_service=app.state.llm_service,
        detector=app.state.detector,
        chat_logger=getattr(app.state, "chat_logger", None)
    )

    result = await orchestrator.process(chat_request)
    return result.to_dict()
