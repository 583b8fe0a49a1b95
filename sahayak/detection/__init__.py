"""Language detection module initialization."""

from sahayak.detection.detector import (
    DetectionResult,
    LanguageDetector,
    detect_language,
    get_detector
)
from sahayak.detection.signals import DEFAULT_SIGNALS, ScriptRange, SignalTables, build_signal_tables

__all__ = [
    "DetectionResult",
    "LanguageDetector",
    "detect_language",
    "get_detector",
    "DEFAULT_SIGNALS",
    "ScriptRange",
    "SignalTables",
    "build_signal_tables"
]
