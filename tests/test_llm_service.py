"""Tests for the LLM service and prompt helpers."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from sahayak.core.conversation import ConversationTurn
from sahayak.core.exceptions import (
    LLMAPIException,
    LLMNotConfiguredException,
    LLMRateLimitException,
    LLMResponseFormatException,
    LLMTimeoutException
)
from sahayak.core.languages import LanguageCode
from sahayak.services.llm import LLMService
from sahayak.services.llm.prompts import build_chat_messages, parse_extracted_info


def _completion(content):
    return SimpleNamespace(
        choices=[SimpleNamespace(message=SimpleNamespace(content=content), finish_reason="stop")],
        usage=SimpleNamespace(prompt_tokens=10, completion_tokens=5, total_tokens=15)
    )


def _service(*results):
    client = MagicMock()
    client.chat.completions.create = AsyncMock(side_effect=list(results))
    client.close = AsyncMock()
    return LLMService(client=client), client


async def test_uninitialized_service_refuses_calls():
    service = LLMService()
    await service.initialize()

    assert not service.is_initialized
    with pytest.raises(LLMNotConfiguredException):
        await service.generate_reply("hello", LanguageCode.EN)


async def test_generate_reply_strips_content():
    service, client = _service(_completion("  Namaste!  "))

    assert await service.generate_reply("hello", LanguageCode.HI) == "Namaste!"
    assert client.chat.completions.create.call_args.kwargs["model"] == "llama-3.1-8b-instant"


async def test_empty_reply_is_a_format_error():
    service, _ = _service(_completion("   "))

    with pytest.raises(LLMResponseFormatException):
        await service.generate_reply("hello", LanguageCode.EN)


async def test_timeout_is_retried_once():
    service, client = _service(asyncio.TimeoutError(), _completion("ok"))

    response = await service.complete([{"role": "user", "content": "hi"}])

    assert response.content == "ok"
    assert response.usage["total_tokens"] == 15
    assert client.chat.completions.create.await_count == 2


async def test_repeated_timeout_raises():
    service, _ = _service(asyncio.TimeoutError(), asyncio.TimeoutError())

    with pytest.raises(LLMTimeoutException):
        await service.complete([{"role": "user", "content": "hi"}])


async def test_api_errors_are_mapped():
    service, _ = _service(Exception("Error code: 429 - rate_limit_exceeded"))
    with pytest.raises(LLMRateLimitException):
        await service.complete([])

    service, client = _service(Exception("invalid model"))
    with pytest.raises(LLMAPIException):
        await service.complete([])
    assert client.chat.completions.create.await_count == 1


async def test_extract_user_info():
    service, client = _service(_completion('```json\n{"age": "45", "state": "Bihar", "pet": "cat"}\n```'))

    info = await service.extract_user_info("मैं 45 साल का हूं, बिहार से", LanguageCode.HI)

    assert info == {"age": 45, "state": "Bihar"}
    assert client.chat.completions.create.call_args.kwargs["temperature"] == 0.0


async def test_extract_user_info_rejects_prose():
    service, _ = _service(_completion("I could not find anything."))

    with pytest.raises(LLMResponseFormatException):
        await service.extract_user_info("hello", LanguageCode.EN)


async def test_cleanup_closes_client():
    service, client = _service()

    await service.cleanup()

    client.close.assert_awaited_once()
    assert not service.is_initialized


def test_chat_messages_use_recent_history_and_language():
    history = [ConversationTurn("user" if i % 2 == 0 else "assistant", f"turn {i}") for i in range(6)]

    messages = build_chat_messages("Which schemes?", LanguageCode.TA, history, window=4)

    assert messages[0]["role"] == "system"
    assert "Tamil" in messages[0]["content"]
    assert [m["content"] for m in messages[1:-1]] == ["turn 2", "turn 3", "turn 4", "turn 5"]
    assert messages[-1]["role"] == "user"
    assert messages[-1]["content"].startswith("Which schemes?")
    assert "respond ONLY in Tamil" in messages[-1]["content"]


def test_chat_messages_without_history():
    messages = build_chat_messages("Hi", LanguageCode.EN, [], window=4, scheme_summaries=["PMAY (housing)"])

    assert len(messages) == 2
    assert "- PMAY (housing)" in messages[0]["content"]


def test_parse_extracted_info():
    raw = 'Here you go: {"income": "₹12,000", "familySize": 4, "occupation": " farmer ", "age": null}'

    assert parse_extracted_info(raw) == {"income": 12000, "familySize": 4, "occupation": "farmer"}
    assert parse_extracted_info("{}") == {}

    with pytest.raises(ValueError):
        parse_extracted_info("no json here")
    with pytest.raises(ValueError):
        parse_extracted_info("{not json}")
