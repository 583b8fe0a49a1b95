"""
Language REST Endpoints.
Supported languages, server-side detection and a localized greeting check.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Request
from pydantic import BaseModel

from sahayak.config import get_settings
from sahayak.core.languages import MESSAGES, LanguageCode, get_language_info, list_languages

logger = logging.getLogger(__name__)
settings = get_settings()

router = APIRouter()


class DetectRequest(BaseModel):
    text: str = ""
    preferred: Optional[str] = None


class LanguageTestRequest(BaseModel):
    language: Optional[str] = None
    message: Optional[str] = None


@router.get("/languages")
async def get_languages():
    """List supported languages."""
    return {
        "success": True,
        "data": list_languages(),
        "default": settings.DEFAULT_CHAT_LANGUAGE
    }


@router.post("/language/detect")
async def detect_language(request: Request, body: DetectRequest):
    """Detect the language of a text."""
    preferred = LanguageCode.parse(body.preferred) if body.preferred else None
    result = request.app.state.detector.detect(body.text, preferred=preferred)
    info = get_language_info(result.language)

    return {
        **result.to_dict(),
        "languageName": info.native_name,
        "speechLocale": info.speech_locale,
        "label": MESSAGES.lookup("language_detected", result.language)
    }


@router.post("/test-language")
async def test_language(body: LanguageTestRequest):
    """Echo a greeting in the requested language."""
    language = LanguageCode.parse(body.language or settings.DEFAULT_CHAT_LANGUAGE)
    logger.info(f"Language test: language={language.value} message={body.message!r}")

    return {
        "response": MESSAGES.lookup("greeting", language),
        "language": language.value,
        "message": "Language test successful - response should be in selected language"
    }
