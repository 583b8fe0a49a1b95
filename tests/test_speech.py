"""Tests for the voice assistant loop."""

from unittest.mock import AsyncMock

from sahayak.core.languages import LanguageCode
from sahayak.core.speech import Transcript, VoiceAssistant, suggest_language_switch


class FakeTranscriber:
    def __init__(self, transcripts):
        self.transcripts = transcripts
        self.locales = []
        self.stopped = False

    async def transcribe(self):
        try:
            for transcript in self.transcripts:
                yield transcript
        finally:
            self.stopped = True

    def set_language(self, speech_locale):
        self.locales.append(speech_locale)


class FakeSpeaker:
    def __init__(self):
        self.spoken = []

    async def speak(self, text, language):
        self.spoken.append((text, language))


def _assistant(transcripts, reply=None, language=LanguageCode.HI):
    send_chat = AsyncMock(return_value=reply if reply is not None else {"response": "ठीक है"})
    assistant = VoiceAssistant(FakeTranscriber(transcripts), FakeSpeaker(), send_chat, language=language)
    return assistant, send_chat


def test_switch_requires_confident_different_language():
    assert suggest_language_switch("Tell me about farmer schemes", LanguageCode.HI).language == LanguageCode.EN
    assert suggest_language_switch("नमस्ते, मैं किसान हूं", LanguageCode.HI) is None
    assert suggest_language_switch("12345", LanguageCode.HI) is None
    assert suggest_language_switch("Tell me", LanguageCode.HI, threshold=1.0) is None


async def test_turn_sends_final_transcript_and_speaks_reply():
    assistant, send_chat = _assistant([
        Transcript("मैं"),
        Transcript("मैं किसान हूं", is_final=True),
    ])

    turn = await assistant.run_turn()

    send_chat.assert_awaited_once_with("मैं किसान हूं", LanguageCode.HI)
    assert turn.switched_from is None
    assert assistant.speaker.spoken == [("ठीक है", LanguageCode.HI)]
    assert assistant.transcriber.locales == []


async def test_turn_switches_language():
    assistant, send_chat = _assistant([Transcript("Tell me about farmer schemes", is_final=True)])

    turn = await assistant.run_turn()

    assert turn.switched_from == LanguageCode.HI
    assert turn.language == LanguageCode.EN
    assert assistant.language == LanguageCode.EN
    assert assistant.transcriber.locales == ["en-US"]
    send_chat.assert_awaited_once_with("Tell me about farmer schemes", LanguageCode.EN)


async def test_empty_recognition_sends_nothing():
    assistant, send_chat = _assistant([Transcript("partial"), Transcript("  ", is_final=True)])

    assert await assistant.run_turn() is None
    send_chat.assert_not_called()
    assert assistant.speaker.spoken == []


async def test_reply_without_text_is_not_spoken():
    assistant, _ = _assistant([Transcript("farmer schemes", is_final=True)], reply={"schemes": []})

    turn = await assistant.run_turn()

    assert turn.reply == {"schemes": []}
    assert assistant.speaker.spoken == []


async def test_recognizer_is_stopped_after_final_transcript():
    assistant, _ = _assistant([
        Transcript("मैं किसान हूं", is_final=True),
        Transcript("trailing noise"),
    ])

    await assistant.run_turn()

    assert assistant.transcriber.stopped is True
