"""
Voice capabilities.

Speech recognition and synthesis engines are external. The assistant only
sees two capabilities:
- a Transcriber producing partial and final transcripts
- a Speaker that reads a reply aloud in a given language

VoiceAssistant wires them to the chat API with language auto-switching.
"""

import logging
from dataclasses import dataclass
from typing import Any, AsyncIterator, Awaitable, Callable, Dict, Optional, Protocol

from sahayak.config import get_settings
from sahayak.core.languages import LanguageCode, get_language_info
from sahayak.detection import DetectionResult, LanguageDetector, get_detector

logger = logging.getLogger(__name__)
settings = get_settings()


@dataclass(frozen=True)
class Transcript:
    """Speech recognition output."""
    text: str
    is_final: bool = False


class Transcriber(Protocol):
    def transcribe(self) -> AsyncIterator[Transcript]:
        ...

    def set_language(self, speech_locale: str) -> None:
        ...


class Speaker(Protocol):
    async def speak(self, text: str, language: LanguageCode) -> None:
        ...


SendChat = Callable[[str, LanguageCode], Awaitable[Dict[str, Any]]]


def suggest_language_switch(
    text: str,
    current: LanguageCode,
    detector: Optional[LanguageDetector] = None,
    threshold: Optional[float] = None
) -> Optional[DetectionResult]:
    """
    Return the detection if the speaker confidently switched language.

    A switch needs confidence strictly above `threshold` and a language
    different from `current`.
    """
    detector = detector or get_detector()
    threshold = settings.LANGUAGE_SWITCH_THRESHOLD if threshold is None else threshold

    detection = detector.detect(text, preferred=current)
    if detection.confidence > threshold and detection.language != current:
        return detection
    return None


@dataclass
class VoiceTurn:
    """What happened during one spoken exchange."""
    transcript: str
    language: LanguageCode
    switched_from: Optional[LanguageCode] = None
    reply: Optional[Dict[str, Any]] = None


class VoiceAssistant:
    """Listen → detect language → chat → speak."""

    def __init__(
        self,
        transcriber: Transcriber,
        speaker: Speaker,
        send_chat: SendChat,
        language: LanguageCode = LanguageCode.HI,
        detector: Optional[LanguageDetector] = None
    ):
        self.transcriber = transcriber
        self.speaker = speaker
        self.send_chat = send_chat
        self.language = language
        self.detector = detector or get_detector()

    def _switch_language(self, language: LanguageCode):
        self.language = language
        self.transcriber.set_language(get_language_info(language).speech_locale)

    async def run_turn(self) -> Optional[VoiceTurn]:
        """
        Handle one utterance.

        Returns None when recognition ended without a non-empty final
        transcript; nothing is sent or spoken in that case.
        """
        final_text = ""
        transcripts = self.transcriber.transcribe()
        try:
            async for transcript in transcripts:
                if transcript.is_final:
                    final_text = transcript.text.strip()
                    break
        finally:
            # Stops the recognizer once a final transcript arrives
            aclose = getattr(transcripts, "aclose", None)
            if aclose is not None:
                await aclose()

        if not final_text:
            return None

        turn = VoiceTurn(transcript=final_text, language=self.language)

        detection = suggest_language_switch(final_text, self.language, self.detector)
        if detection:
            logger.info(
                f"Switching voice language {self.language.value} -> {detection.language.value} "
                f"(confidence {detection.confidence:.2f})"
            )
            turn.switched_from = self.language
            self._switch_language(detection.language)
            turn.language = detection.language

        turn.reply = await self.send_chat(final_text, self.language)

        reply_text = (turn.reply or {}).get("response")
        if reply_text:
            await self.speaker.speak(reply_text, self.language)

        return turn
