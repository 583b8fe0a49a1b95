"""
Supported languages and localized text lookup.

`LanguageCode` is the closed set of languages the assistant speaks. Every
localized table in the code base is keyed by it and read through
`MessageCatalog.lookup` / `localize`, which fall back to the default
language instead of failing.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

from sahayak.core.exceptions import UnsupportedLanguageException


class LanguageCode(str, Enum):
    """Supported language identifiers, in detection tie-break order."""

    EN = "en"
    HI = "hi"
    TE = "te"
    TA = "ta"
    BN = "bn"
    MR = "mr"
    GU = "gu"
    KN = "kn"
    ML = "ml"
    PA = "pa"
    OR = "or"
    AS = "as"
    UR = "ur"

    @classmethod
    def parse(cls, value: str) -> "LanguageCode":
        """
        Parse a language code such as "hi", "HI" or "hi-IN".

        Raises:
            UnsupportedLanguageException: if the code is not supported
        """
        if isinstance(value, cls):
            return value
        code = str(value or "").strip().lower().replace("_", "-").split("-")[0]
        try:
            return cls(code)
        except ValueError:
            raise UnsupportedLanguageException(str(value), [c.value for c in cls])


DEFAULT_LANGUAGE = LanguageCode.EN


@dataclass(frozen=True)
class LanguageInfo:
    """Display and speech metadata for a language."""
    code: LanguageCode
    name: str
    native_name: str
    prompt_name: str
    speech_locale: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "code": self.code.value,
            "name": self.name,
            "nativeName": self.native_name,
            "speechLocale": self.speech_locale
        }


LANGUAGES: Mapping[LanguageCode, LanguageInfo] = MappingProxyType({
    info.code: info for info in [
        LanguageInfo(LanguageCode.EN, "English", "English", "English", "en-US"),
        LanguageInfo(LanguageCode.HI, "Hindi", "हिन्दी", "Hindi (हिंदी)", "hi-IN"),
        LanguageInfo(LanguageCode.TE, "Telugu", "తెలుగు", "Telugu (తెలుగు)", "te-IN"),
        LanguageInfo(LanguageCode.TA, "Tamil", "தமிழ்", "Tamil (தமிழ்)", "ta-IN"),
        LanguageInfo(LanguageCode.BN, "Bengali", "বাংলা", "Bengali (বাংলা)", "bn-IN"),
        LanguageInfo(LanguageCode.MR, "Marathi", "मराठी", "Marathi (मराठी)", "mr-IN"),
        LanguageInfo(LanguageCode.GU, "Gujarati", "ગુજરાતી", "Gujarati (ગુજરાતી)", "gu-IN"),
        LanguageInfo(LanguageCode.KN, "Kannada", "ಕನ್ನಡ", "Kannada (ಕನ್ನಡ)", "kn-IN"),
        LanguageInfo(LanguageCode.ML, "Malayalam", "മലയാളം", "Malayalam (മലയാളം)", "ml-IN"),
        LanguageInfo(LanguageCode.PA, "Punjabi", "ਪੰਜਾਬੀ", "Punjabi (ਪੰਜਾਬੀ)", "pa-IN"),
        LanguageInfo(LanguageCode.OR, "Odia", "ଓଡ଼ିଆ", "Odia (ଓଡ଼ିଆ)", "or-IN"),
        LanguageInfo(LanguageCode.AS, "Assamese", "অসমীয়া", "Assamese (অসমীয়া)", "as-IN"),
        LanguageInfo(LanguageCode.UR, "Urdu", "اردو", "Urdu (اردو)", "ur-IN"),
    ]
})


def get_language_info(code: LanguageCode) -> LanguageInfo:
    """Get metadata for a language code."""
    return LANGUAGES[code]


def list_languages() -> List[Dict[str, str]]:
    """List all supported languages in enumeration order."""
    return [LANGUAGES[code].to_dict() for code in LanguageCode]


def localize(
    texts: Optional[Mapping[str, str]],
    language: LanguageCode,
    default: LanguageCode = DEFAULT_LANGUAGE
) -> Optional[str]:
    """
    Pick a translation from a partial per-record mapping.

    Falls back from the requested language to the default language and
    then to any available value.
    """
    if not texts:
        return None
    for code in (language.value, default.value):
        value = texts.get(code)
        if value:
            return value
    return next((value for value in texts.values() if value), None)


class MessageCatalog:
    """
    Read-only table of localized UI strings.

    Every key must carry a default-language entry so that `lookup` is total.
    """

    def __init__(
        self,
        messages: Mapping[str, Mapping[LanguageCode, str]],
        default: LanguageCode = DEFAULT_LANGUAGE
    ):
        for key, table in messages.items():
            if default not in table:
                raise ValueError(f"Message '{key}' has no '{default.value}' entry")
        self._default = default
        self._messages = MappingProxyType({
            key: MappingProxyType(dict(table)) for key, table in messages.items()
        })

    def lookup(self, key: str, language: LanguageCode) -> str:
        """Get message `key` in `language`, falling back to the default language."""
        table = self._messages[key]
        return table.get(language, table[self._default])

    def keys(self):
        return self._messages.keys()


L = LanguageCode

MESSAGES = MessageCatalog({
    "chat_error": {
        L.EN: "Sorry, I encountered an error. Please try again.",
        L.HI: "क्षमा करें, कुछ तकनीकी समस्या है। कृपया बाद में कोशिश करें।",
        L.TE: "క్షమించండి, నాకు దోషం ఎదురైంది. దయచేసి మళ్లీ ప్రయత్నించండి.",
        L.TA: "மன்னிக்கவும், எனக்கு பிழை ஏற்பட்டது. தயவுசெய்து மீண்டும் முயற்சிக்கவும்.",
        L.BN: "দুঃখিত, আমার একটি ত্রুটি হয়েছে। অনুগ্রহ করে আবার চেষ্টা করুন।",
        L.MR: "क्षमस्व, मला एक त्रुटी आली. कृपया पुन्हा प्रयत्न करा.",
        L.GU: "માફ કરશો, મને ભૂલ આવી. કૃપા કરીને ફરી પ્રયાસ કરો.",
        L.KN: "ಕ್ಷಮಿಸಿ, ನನಗೆ ದೋಷ ಸಂಭವಿಸಿದೆ. ದಯವಿಟ್ಟು ಮತ್ತೆ ಪ್ರಯತ್ನಿಸಿ.",
        L.ML: "ക്ഷമിക്കുക, എനിക്ക് പിശക് സംഭവിച്ചു. വീണ്ടും ശ്രമിക്കുക.",
        L.PA: "ਮਾਫ ਕਰੋ, ਮੈਨੂੰ ਇੱਕ ਗਲਤੀ ਆਈ। ਕਿਰਪਾ ਕਰਕੇ ਦੁਬਾਰਾ ਕੋਸ਼ਿਸ਼ ਕਰੋ।",
        L.OR: "ଦୁଃଖିତ, ମୋର ଏକ ତ୍ରୁଟି ହୋଇଛି। ଦୟାକରି ପୁନର୍ବାର ଚେଷ୍ଟା କରନ୍ତୁ।",
        L.AS: "দুঃখিত, মোৰ এটা ভুল হৈছে। অনুগ্ৰহ কৰি আকৌ চেষ্টা কৰক।",
        L.UR: "معذرت، مجھے ایک خرابی کا سامنا ہوا۔ برائے کرم دوبارہ کوشش کریں۔",
    },
    "greeting": {
        L.EN: "Hello! I understand you want to know about welfare schemes. How can I help you?",
        L.HI: "नमस्ते! मैं समझ गया कि आप कल्याणकारी योजनाओं के बारे में जानना चाहते हैं। मैं आपकी कैसे सहायता कर सकता हूं?",
        L.TE: "హలో! మీరు సంక్షేమ పథకాల గురించి తెలుసుకోవాలని అనుకుంటున్నారని నేను అర్థం చేసుకున్నాను. నేను మీకు ఎలా సహాయం చేయగలను?",
        L.TA: "வணக்கம்! நீங்கள் நலத்திட்டங்களைப் பற்றி அறிய விரும்புகிறீர்கள் என்று நான் புரிந்துகொள்கிறேன். நான் உங்களுக்கு எப்படி உதவ முடியும்?",
        L.BN: "হ্যালো! আমি বুঝতে পারছি আপনি কল্যাণ প্রকল্প সম্পর্কে জানতে চান। আমি আপনাকে কীভাবে সাহায্য করতে পারি?",
        L.MR: "हॅलो! तुम्हाला कल्याण योजनांबद्दल जाणून घ्यायचे आहे हे मला समजले. मी तुमची कशी मदत करू शकतो?",
        L.GU: "હેલો! હું સમજી ગયો કે તમે કલ્યાણ યોજનાઓ વિશે જાણવા માંગો છો. હું તમારી કેવી રીતે મદદ કરી શકું?",
        L.KN: "ಹಲೋ! ನೀವು ಕಲ್ಯಾಣ ಯೋಜನೆಗಳ ಬಗ್ಗೆ ತಿಳಿದುಕೊಳ್ಳಲು ಬಯಸುತ್ತೀರಿ ಎಂದು ನಾನು ಅರ್ಥಮಾಡಿಕೊಂಡಿದ್ದೇನೆ. ನಾನು ನಿಮಗೆ ಹೇಗೆ ಸಹಾಯ ಮಾಡಬಹುದು?",
        L.ML: "ഹലോ! നിങ്ങൾ ക്ഷേമ പദ്ധതികളെക്കുറിച്ച് അറിയാൻ ആഗ്രഹിക്കുന്നുവെന്ന് ഞാൻ മനസ്സിലാക്കുന്നു. എനിക്ക് നിങ്ങളെ എങ്ങനെ സഹായിക്കാനാകും?",
        L.PA: "ਹੈਲੋ! ਮੈਂ ਸਮਝ ਗਿਆ ਕਿ ਤੁਸੀਂ ਕਲਿਆਣ ਯੋਜਨਾਵਾਂ ਬਾਰੇ ਜਾਣਨਾ ਚਾਹੁੰਦੇ ਹੋ। ਮੈਂ ਤੁਹਾਡੀ ਕਿਵੇਂ ਮਦਦ ਕਰ ਸਕਦਾ ਹਾਂ?",
        L.OR: "ହେଲୋ! ମୁଁ ବୁଝିପାରୁଛି ଯେ ଆପଣ କଲ୍ୟାଣ ଯୋଜନା ବିଷୟରେ ଜାଣିବାକୁ ଚାହୁଁଛନ୍ତି। ମୁଁ ଆପଣଙ୍କୁ କିପରି ସାହାଯ୍ୟ କରିପାରିବି?",
        L.AS: "নমস্কাৰ! মই বুজি পাইছোঁ যে আপুনি কল্যাণমূলক আঁচনিৰ বিষয়ে জানিব বিচাৰে। মই আপোনাক কেনেকৈ সহায় কৰিব পাৰোঁ?",
        L.UR: "ہیلو! میں سمجھ گیا کہ آپ فلاحی اسکیموں کے بارے میں جاننا چاہتے ہیں۔ میں آپ کی کیسے مدد کر سکتا ہوں؟",
    },
    "language_detected": {
        L.EN: "Language detected:",
        L.HI: "भाषा का पता चला:",
        L.TE: "భాష గుర్తించబడింది:",
        L.TA: "மொழி கண்டறியப்பட்டது:",
        L.BN: "ভাষা সনাক্ত করা হয়েছে:",
        L.MR: "भाषा ओळखली:",
        L.GU: "ભાષા શોધાઈ:",
        L.KN: "ಭಾಷೆ ಪತ್ತೆಯಾಗಿದೆ:",
        L.ML: "ഭാഷ കണ്ടെത്തി:",
        L.PA: "ਭਾਸ਼ਾ ਲੱਭੀ:",
        L.OR: "ଭାଷା ଚିହ୍ନଟ:",
        L.AS: "ভাষা চিনাক্ত:",
        L.UR: "زبان کی شناخت:",
    },
})

del L
