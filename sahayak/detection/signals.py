"""
Signal tables for the heuristic language detector.

Two signals per language:
- a script range: the Unicode block of its writing system
- lexical markers: short, frequent function words and particles

Hindi and Marathi share Devanagari, Bengali and Assamese share the Bengali
block. Those pairs tie on the script pass and are separated only by their
markers or by the detector's tie-break.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from sahayak.core.languages import DEFAULT_LANGUAGE, LanguageCode


@dataclass(frozen=True)
class ScriptRange:
    """Inclusive Unicode code-point interval."""
    start: int
    end: int

    def __post_init__(self):
        if self.start > self.end:
            raise ValueError(f"Empty script range {self.start:#06x}-{self.end:#06x}")

    def contains(self, char: str) -> bool:
        return self.start <= ord(char) <= self.end

    def count(self, text: str) -> int:
        """Number of characters of `text` inside the range."""
        return sum(1 for char in text if self.start <= ord(char) <= self.end)


@dataclass(frozen=True)
class SignalTables:
    """
    Immutable detector configuration.

    Every LanguageCode must appear in both tables; construction fails
    otherwise so the detector can never pick a language it cannot score.
    """
    scripts: Mapping[LanguageCode, ScriptRange]
    markers: Mapping[LanguageCode, Tuple[str, ...]]
    default: LanguageCode = DEFAULT_LANGUAGE

    def __post_init__(self):
        missing_scripts = [code.value for code in LanguageCode if code not in self.scripts]
        missing_markers = [code.value for code in LanguageCode if code not in self.markers]
        if missing_scripts or missing_markers:
            raise ValueError(
                f"Incomplete signal tables: scripts missing {missing_scripts}, "
                f"markers missing {missing_markers}"
            )


def build_signal_tables(
    scripts: Mapping[LanguageCode, Tuple[int, int]],
    markers: Mapping[LanguageCode, Iterable[str]],
    default: LanguageCode = DEFAULT_LANGUAGE
) -> SignalTables:
    """Freeze plain dicts into a SignalTables instance."""
    frozen_scripts: Dict[LanguageCode, ScriptRange] = {
        code: ScriptRange(*bounds) for code, bounds in scripts.items()
    }
    frozen_markers: Dict[LanguageCode, Tuple[str, ...]] = {
        code: tuple(words) for code, words in markers.items()
    }
    return SignalTables(
        scripts=MappingProxyType(frozen_scripts),
        markers=MappingProxyType(frozen_markers),
        default=default
    )


L = LanguageCode

SCRIPT_RANGES = {
    L.EN: (0x0061, 0x007A),  # Latin a-z (text is lowercased first)
    L.HI: (0x0900, 0x097F),  # Devanagari
    L.TE: (0x0C00, 0x0C7F),  # Telugu
    L.TA: (0x0B80, 0x0BFF),  # Tamil
    L.BN: (0x0980, 0x09FF),  # Bengali
    L.MR: (0x0900, 0x097F),  # Devanagari
    L.GU: (0x0A80, 0x0AFF),  # Gujarati
    L.KN: (0x0C80, 0x0CFF),  # Kannada
    L.ML: (0x0D00, 0x0D7F),  # Malayalam
    L.PA: (0x0A00, 0x0A7F),  # Gurmukhi
    L.OR: (0x0B00, 0x0B7F),  # Oriya
    L.AS: (0x0980, 0x09FF),  # Bengali
    L.UR: (0x0600, 0x06FF),  # Arabic
}

LEXICAL_MARKERS = {
    L.EN: ["the", "is", "and", "to", "of", "in", "for", "with", "on", "at", "by", "from"],
    L.HI: ["है", "में", "के", "की", "को", "और", "या", "से", "पर", "मैं", "आप", "यह", "वह"],
    L.TE: ["లో", "కు", "నుండి", "తో", "అని", "ఉంది", "అవుతుంది", "చేయాలి", "వచ్చింది", "మరియు"],
    L.TA: ["இல்", "கு", "ஆக", "ல்", "உம்", "ஆன", "என்று", "செய்", "வரும்", "மற்றும்"],
    L.BN: ["এর", "তে", "কে", "হয়", "করে", "থেকে", "সাথে", "আমি", "তুমি", "এবং"],
    L.MR: ["मध्ये", "ला", "ने", "आहे", "करून", "पासून", "सोबत", "मी", "तुम्ही", "आणि"],
    L.GU: ["માં", "ને", "થી", "સાથે", "છે", "કરીને", "હું", "તમે", "અને"],
    L.KN: ["ಯಲ್ಲಿ", "ಗೆ", "ಇಂದ", "ಜೊತೆ", "ಇದೆ", "ಮಾಡಿ", "ನಾನು", "ನೀವು", "ಮತ್ತು"],
    L.ML: ["ൽ", "ക്ക്", "ൽ നിന്ന്", "ഓട്", "ആണ്", "ചെയ്ത്", "ഞാൻ", "നിങ്ങൾ", "ഉം"],
    L.PA: ["ਵਿੱਚ", "ਨੂੰ", "ਤੋਂ", "ਨਾਲ", "ਹੈ", "ਕਰਕੇ", "ਮੈਂ", "ਤੁਸੀਂ", "ਅਤੇ"],
    L.OR: ["ରେ", "କୁ", "ରୁ", "ସହିତ", "ଅଛି", "କରି", "ମୁଁ", "ଆପଣ", "ଏବଂ"],
    L.AS: ["ত", "লৈ", "ৰ পৰা", "সৈতে", "আছে", "কৰি", "মই", "আপুনি", "আৰু"],
    L.UR: ["میں", "کو", "سے", "کے ساتھ", "ہے", "کرکے", "آپ", "اور"],
}

del L

DEFAULT_SIGNALS = build_signal_tables(SCRIPT_RANGES, LEXICAL_MARKERS)
