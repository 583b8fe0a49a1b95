"""
Heuristic Language Detector.
Scores text against per-language script ranges and lexical markers.
"""

import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import regex

from sahayak.core.languages import LanguageCode
from sahayak.detection.signals import DEFAULT_SIGNALS, SignalTables

logger = logging.getLogger(__name__)

SCRIPT_WEIGHT = 3
MARKER_WEIGHT = 2
MIN_CONFIDENCE = 0.1
FALLBACK_CONFIDENCE = 0.5

# Letters, combining marks (Indic vowel signs, virama, anusvara), digits, "_"
_WORD_CHAR = r"[\p{L}\p{M}\p{N}_]"


@dataclass(frozen=True)
class DetectionResult:
    """
    Detector output.

    Attributes:
        language: Best-guess language
        confidence: Heuristic certainty in [0, 1]. 0.0 means the input was
            empty; 0.5 on the default language means the evidence was too
            weak and the detector fell back.
    """
    language: LanguageCode
    confidence: float

    def to_dict(self) -> Dict[str, object]:
        return {"language": self.language.value, "confidence": round(self.confidence, 4)}


def _marker_pattern(marker: str) -> "regex.Pattern":
    return regex.compile(
        "(?<!" + _WORD_CHAR + ")" + regex.escape(marker.lower()) + "(?!" + _WORD_CHAR + ")"
    )


class LanguageDetector:
    """
    Script/keyword language detector.

    Pure and thread-safe: the signal tables and the compiled marker
    patterns are read-only after construction.
    """

    def __init__(self, signals: SignalTables = DEFAULT_SIGNALS):
        self._signals = signals
        self._patterns: Dict[LanguageCode, Tuple["regex.Pattern", ...]] = {
            code: tuple(_marker_pattern(marker) for marker in signals.markers[code])
            for code in LanguageCode
        }

    @property
    def signals(self) -> SignalTables:
        return self._signals

    @staticmethod
    def normalize(text: str) -> str:
        return (text or "").lower().strip()

    def score(self, text: str) -> Dict[LanguageCode, int]:
        """Raw per-language scores for `text` (script pass + lexical pass)."""
        normalized = self.normalize(text)
        scores = {code: 0 for code in LanguageCode}
        if not normalized:
            return scores

        for code in LanguageCode:
            scores[code] += self._signals.scripts[code].count(normalized) * SCRIPT_WEIGHT

        for code in LanguageCode:
            for pattern in self._patterns[code]:
                matches = pattern.findall(normalized)
                scores[code] += len(matches) * MARKER_WEIGHT

        return scores

    def detect(
        self,
        text: str,
        preferred: Optional[LanguageCode] = None
    ) -> DetectionResult:
        """
        Detect the language of `text`.

        Args:
            text: Any text, possibly empty
            preferred: Language that wins a tie on the top score, e.g. the
                language the conversation is already in

        Returns:
            DetectionResult; never raises
        """
        normalized = self.normalize(text)
        if not normalized:
            return DetectionResult(self._signals.default, 0.0)

        scores = self.score(normalized)
        winner = self._pick_winner(scores, preferred)
        confidence = min(scores[winner] / len(normalized), 1.0)

        if confidence < MIN_CONFIDENCE:
            return DetectionResult(self._signals.default, FALLBACK_CONFIDENCE)

        return DetectionResult(winner, confidence)

    @staticmethod
    def _pick_winner(
        scores: Dict[LanguageCode, int],
        preferred: Optional[LanguageCode]
    ) -> LanguageCode:
        """Highest score; ties go to `preferred`, else enumeration order."""
        best = max(scores.values())
        tied: List[LanguageCode] = [code for code in LanguageCode if scores[code] == best]
        if len(tied) > 1:
            logger.debug(f"Detector tie at {best}: {[code.value for code in tied]}")
        if preferred is not None and preferred in tied:
            return preferred
        return tied[0]


_default_detector: Optional[LanguageDetector] = None


def get_detector() -> LanguageDetector:
    """Shared detector built on the default signal tables."""
    global _default_detector
    if _default_detector is None:
        _default_detector = LanguageDetector()
    return _default_detector


def detect_language(text: str, preferred: Optional[LanguageCode] = None) -> DetectionResult:
    """Convenience wrapper around the shared detector."""
    return get_detector().detect(text, preferred)
