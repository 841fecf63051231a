"""Tests for the OpenAI-compatible page judge."""

import json
import logging
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from core import openai_client
from core.openai_client import (
    FALLBACK_CONTEXT,
    OpenAIPageJudge,
    build_prompt,
    parse_judgment,
)
from model.analysis import RaviStatus


def _completion(content: str) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


class TestParseJudgment:
    def test_plain_json(self):
        raw = '{"found": true, "status": "Zaeef", "context": "Ravi is weak"}'

        judgment = parse_judgment(raw)

        assert judgment.found is True
        assert judgment.status == RaviStatus.Zaeef
        assert judgment.context == "Ravi is weak"

    def test_code_fenced_json(self):
        raw = '```json\n{"found": true, "status": "Thiqah", "context": "ok"}\n```'

        judgment = parse_judgment(raw)

        assert judgment.status == RaviStatus.Thiqah

    def test_unknown_status_normalized(self):
        judgment = parse_judgment('{"found": true, "status": "Maybe", "context": "x"}')

        assert judgment.status == RaviStatus.Unknown

    def test_missing_context_uses_fallback(self):
        judgment = parse_judgment('{"found": true, "status": "Thiqah"}')

        assert judgment.context == FALLBACK_CONTEXT

    def test_long_context_clipped(self):
        raw = json.dumps({"found": True, "status": "Thiqah", "context": "c" * 500})

        assert len(parse_judgment(raw).context) == 200

    def test_empty_reply_is_none(self):
        assert parse_judgment("") is None

    def test_malformed_json_raises(self):
        with pytest.raises(ValueError):
            parse_judgment("The narrator seems reliable.")

    def test_non_object_raises(self):
        with pytest.raises(ValueError):
            parse_judgment("[1, 2, 3]")


def test_prompt_mentions_page_book_and_text():
    prompt = build_prompt("Tahdhib.pdf", 7, "Ravi text here")

    assert "page 7" in prompt
    assert '"Tahdhib.pdf"' in prompt
    assert "Ravi text here" in prompt
    assert '"found": true/false' in prompt


@pytest.mark.asyncio
async def test_judge_page_posts_chat_completion():
    reply = _completion('{"found": true, "status": "Thiqah", "context": "Ravi thiqah"}')
    judge = OpenAIPageJudge(api_key="sk-test", model="gpt-test", api_url="http://llm")

    with patch.object(openai_client, "_post_json", new=AsyncMock(return_value=reply)) as post:
        judgment = await judge.judge_page(
            book_name="b.pdf", page_number=3, page_text="Ravi thiqah"
        )

    assert judgment.found is True
    assert judgment.status == RaviStatus.Thiqah

    url, headers, payload = post.call_args.args
    assert url == "http://llm"
    assert headers["authorization"] == "Bearer sk-test"
    assert payload["model"] == "gpt-test"
    assert payload["temperature"] == 0.3
    assert payload["max_tokens"] == 500
    assert "Ravi thiqah" in payload["messages"][0]["content"]


@pytest.mark.asyncio
async def test_judge_page_without_choices_returns_none():
    judge = OpenAIPageJudge(api_key="k", api_url="http://llm")

    with patch.object(openai_client, "_post_json", new=AsyncMock(return_value={})):
        assert await judge.judge_page(book_name="b", page_number=1, page_text="t") is None


@pytest.mark.asyncio
async def test_judge_page_propagates_http_errors():
    judge = OpenAIPageJudge(api_key="k", api_url="http://llm")
    error = httpx.ConnectError("boom")

    with patch.object(openai_client, "_post_json", new=AsyncMock(side_effect=error)):
        with pytest.raises(httpx.ConnectError):
            await judge.judge_page(book_name="b", page_number=1, page_text="t")


def _mock_client(handler):
    real_client = httpx.AsyncClient
    return lambda **kw: real_client(transport=httpx.MockTransport(handler), **kw)


@pytest.mark.asyncio
async def test_non_json_body_is_logged(caplog):
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, text="<html>gateway hiccup</html>")

    judge = OpenAIPageJudge(api_key="k", api_url="http://llm.test/v1/chat")

    with patch.object(openai_client.httpx, "AsyncClient", new=_mock_client(handler)):
        with caplog.at_level(logging.WARNING, logger=openai_client.__name__):
            judgment = await judge.judge_page(
                book_name="b", page_number=4, page_text="Ravi"
            )

    assert judgment is None
    assert "ai.judge.bad_body status=200" in caplog.text
    assert "ai.judge.empty page=4" in caplog.text
    assert "gateway hiccup" not in caplog.text


@pytest.mark.asyncio
async def test_http_error_status_raises():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, json={"error": "overloaded"})

    judge = OpenAIPageJudge(api_key="k", api_url="http://llm.test/v1/chat")

    with patch.object(openai_client.httpx, "AsyncClient", new=_mock_client(handler)):
        with pytest.raises(httpx.HTTPStatusError):
            await judge.judge_page(book_name="b", page_number=1, page_text="Ravi")
