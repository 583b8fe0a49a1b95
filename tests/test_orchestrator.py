"""Tests for the chat orchestrator."""

import pytest

from sahayak.core.chat import ChatOrchestrator, ChatRequest
from sahayak.core.exceptions import ChatProcessingError, DatabaseException, LLMTimeoutException, ValidationError
from sahayak.core.languages import MESSAGES, LanguageCode
from sahayak.logging.chat_logger import ChatLogger


def test_build_request_defaults():
    request = ChatRequest.build("  hello  ")

    assert request.message == "hello"
    assert request.language == LanguageCode.HI
    assert request.history == []
    assert request.session_id


def test_build_request_rejects_blank_message():
    with pytest.raises(ValidationError):
        ChatRequest.build(" \n ")

    with pytest.raises(ValidationError):
        ChatRequest.build(None)


def test_build_request_skips_malformed_history():
    request = ChatRequest.build("hi", history=[
        {"type": "assistant", "content": "Welcome"},
        "not a mapping",
        {"sender": "user"},
    ])

    assert [(t.role, t.content) for t in request.history] == [("assistant", "Welcome")]


async def test_process_suggests_schemes(seeded_db, fake_llm):
    fake_llm.extract_user_info.return_value = {"state": "Maharashtra"}
    orchestrator = ChatOrchestrator(fake_llm)

    result = await orchestrator.process(ChatRequest.build("महिला योजना", language="hi"))

    assert [s["id"] for s in result.schemes] == ["ladki-bahin"]
    assert result.detected_language.language == LanguageCode.HI
    summaries = fake_llm.generate_reply.call_args.kwargs["scheme_summaries"]
    assert "PM-KISAN Samman Nidhi (agriculture)" in summaries


async def test_state_filter_drops_other_state_schemes(seeded_db, fake_llm):
    fake_llm.extract_user_info.return_value = {"state": "Kerala"}

    result = await ChatOrchestrator(fake_llm).process(
        ChatRequest.build("schemes for women", language="en")
    )

    assert result.schemes == []


async def test_llm_timeout_becomes_apology(seeded_db, fake_llm):
    fake_llm.generate_reply.side_effect = LLMTimeoutException(15.0)

    with pytest.raises(ChatProcessingError) as exc_info:
        await ChatOrchestrator(fake_llm).process(ChatRequest.build("hello", language="te"))

    error = exc_info.value
    assert error.status_code == 500
    assert error.message == MESSAGES.lookup("chat_error", LanguageCode.TE)
    assert error.details == {"language": "te", "cause": "LLM_ERROR"}


async def test_database_failure_becomes_apology(fake_llm):
    class BrokenRepository:
        async def get_all_active(self):
            raise DatabaseException("Failed to retrieve schemes")

    with pytest.raises(ChatProcessingError) as exc_info:
        await ChatOrchestrator(fake_llm, scheme_repository=BrokenRepository()).process(
            ChatRequest.build("hello", language="en")
        )

    assert exc_info.value.details["cause"] == "DATABASE_ERROR"
    fake_llm.generate_reply.assert_not_called()


async def test_turns_and_errors_are_logged(seeded_db, fake_llm, tmp_path):
    log_path = tmp_path / "chat.md"
    chat_logger = ChatLogger(str(log_path))
    orchestrator = ChatOrchestrator(fake_llm, chat_logger=chat_logger)

    await orchestrator.process(ChatRequest.build("farmer help", language="en", session_id="s-1"))

    fake_llm.generate_reply.side_effect = RuntimeError("kaboom")
    with pytest.raises(ChatProcessingError):
        await orchestrator.process(ChatRequest.build("again", language="en", session_id="s-1"))

    await chat_logger.close()
    content = log_path.read_text(encoding="utf-8")

    assert "**Session:** `s-1`" in content
    assert "`pm-kisan`" in content
    assert "`INTERNAL_ERROR`" in content
    assert "kaboom" in content
