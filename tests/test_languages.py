"""Tests for language codes and localized lookups."""

import pytest

from sahayak.core.exceptions import UnsupportedLanguageException
from sahayak.core.languages import (
    MESSAGES,
    LanguageCode,
    MessageCatalog,
    get_language_info,
    list_languages,
    localize
)


@pytest.mark.parametrize("raw", ["hi", "HI", " hi ", "hi-IN", "hi_IN", LanguageCode.HI])
def test_parse_accepts_common_spellings(raw):
    assert LanguageCode.parse(raw) == LanguageCode.HI


@pytest.mark.parametrize("raw", ["xx", "", "hindi", None])
def test_parse_rejects_unknown_codes(raw):
    with pytest.raises(UnsupportedLanguageException) as exc_info:
        LanguageCode.parse(raw)

    assert exc_info.value.status_code == 400
    assert "hi" in exc_info.value.details["supported_languages"]


def test_enumeration_order():
    assert [c.value for c in LanguageCode] == [
        "en", "hi", "te", "ta", "bn", "mr", "gu", "kn", "ml", "pa", "or", "as", "ur"
    ]


def test_list_languages():
    languages = list_languages()

    assert len(languages) == 13
    assert languages[1] == {
        "code": "hi",
        "name": "Hindi",
        "nativeName": "हिन्दी",
        "speechLocale": "hi-IN"
    }


def test_speech_locale():
    assert get_language_info(LanguageCode.TA).speech_locale == "ta-IN"
    assert get_language_info(LanguageCode.EN).speech_locale == "en-US"


def test_every_message_is_translated():
    for key in MESSAGES.keys():
        for code in LanguageCode:
            assert MESSAGES.lookup(key, code)


def test_catalog_falls_back_to_default_language():
    catalog = MessageCatalog({"bye": {LanguageCode.EN: "Bye", LanguageCode.HI: "अलविदा"}})

    assert catalog.lookup("bye", LanguageCode.HI) == "अलविदा"
    assert catalog.lookup("bye", LanguageCode.TA) == "Bye"


def test_catalog_requires_default_entry():
    with pytest.raises(ValueError, match="bye"):
        MessageCatalog({"bye": {LanguageCode.HI: "अलविदा"}})


def test_localize_fallback_chain():
    texts = {"en": "Housing", "hi": "आवास"}

    assert localize(texts, LanguageCode.HI) == "आवास"
    assert localize(texts, LanguageCode.TA) == "Housing"
    assert localize({"mr": "घरकुल"}, LanguageCode.TA) == "घरकुल"
    assert localize({}, LanguageCode.HI) is None
    assert localize(None, LanguageCode.HI) is None
