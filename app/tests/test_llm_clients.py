"""
Tests for the LLM provider clients.
The chat completions client runs against httpx.MockTransport; the Gemini
client gets a stand-in SDK client so no network access is needed.
"""
import asyncio
import json
from types import SimpleNamespace

import httpx
import pytest

from app.core.config import Settings
from app.core.exceptions import ConfigurationError, ProviderError
from app.core.llm import (
    EMPTY_COMPLETION,
    ChatCompletionsClient,
    GeminiClient,
    build_llm_client,
)

URL = "https://router.example.test/v1/chat/completions"


def _chat_client(handler, api_key="hf_testtoken"):
    return ChatCompletionsClient(
        api_key=api_key,
        model="HuggingFaceTB/SmolLM3-3B",
        url=URL,
        max_tokens=500,
        transport=httpx.MockTransport(handler),
    )


def test_chat_client_sends_prompt_and_returns_content():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers["Authorization"]
        seen["body"] = json.loads(request.content)
        return httpx.Response(200, json={"choices": [{"message": {"content": '["What is Go?"]'}}]})

    text = asyncio.run(_chat_client(handler).generate("Prepare questions"))

    assert text == '["What is Go?"]'
    assert seen["auth"] == "Bearer hf_testtoken"
    assert seen["body"] == {
        "model": "HuggingFaceTB/SmolLM3-3B",
        "messages": [{"role": "user", "content": "Prepare questions"}],
        "max_tokens": 500,
    }


def test_chat_client_error_status_raises_provider_error():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, text="Rate limit reached")

    with pytest.raises(ProviderError) as exc_info:
        asyncio.run(_chat_client(handler).generate("Prepare questions"))

    error = exc_info.value
    assert error.message == "Hugging Face API error: 429 - Rate limit reached"
    assert error.provider_status == 429
    assert error.body == "Rate limit reached"
    assert error.status_code == 500


def test_chat_client_empty_choices_yield_placeholder():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": []})

    assert asyncio.run(_chat_client(handler).generate("Prepare questions")) == EMPTY_COMPLETION


def test_chat_client_transport_failure_raises_provider_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ProviderError) as exc_info:
        asyncio.run(_chat_client(handler).generate("Prepare questions"))
    assert "request failed" in exc_info.value.message


def test_chat_client_requires_api_key():
    def handler(request: httpx.Request) -> httpx.Response:  # pragma: no cover - never called
        raise AssertionError("no request expected")

    with pytest.raises(ConfigurationError):
        asyncio.run(_chat_client(handler, api_key="").generate("Prepare questions"))


class _FakeModels:
    def __init__(self, text, error=None):
        self.text = text
        self.error = error
        self.calls = []

    async def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return SimpleNamespace(text=self.text)


def _fake_genai(text, error=None):
    models = _FakeModels(text, error)
    return SimpleNamespace(aio=SimpleNamespace(models=models)), models


def test_gemini_client_returns_text():
    sdk, models = _fake_genai('["How do you scale Postgres?"]')
    client = GeminiClient(api_key="", model="gemini-2.5-flash", max_tokens=256, client=sdk)

    text = asyncio.run(client.generate("Prepare questions"))

    assert text == '["How do you scale Postgres?"]'
    assert models.calls[0]["model"] == "gemini-2.5-flash"
    assert models.calls[0]["contents"] == "Prepare questions"
    assert models.calls[0]["config"].max_output_tokens == 256
    assert models.calls[0]["config"].thinking_config.thinking_budget == 0


def test_gemini_client_empty_text_yields_placeholder():
    sdk, _ = _fake_genai(None)
    client = GeminiClient(api_key="", model="gemini-2.5-flash", client=sdk)
    assert asyncio.run(client.generate("Prepare questions")) == EMPTY_COMPLETION


def test_gemini_client_requires_api_key_without_injected_client():
    client = GeminiClient(api_key="", model="gemini-2.5-flash")
    with pytest.raises(ConfigurationError):
        asyncio.run(client.generate("Prepare questions"))


def test_build_llm_client_selects_provider():
    hf = build_llm_client(Settings(LLM_PROVIDER="huggingface", HUGGINGFACE_API_KEY="hf_x", CHAT_MODEL="m"))
    assert isinstance(hf, ChatCompletionsClient)
    assert hf.model == "m"

    gemini = build_llm_client(Settings(LLM_PROVIDER="Gemini", GEMINI_API_KEY="key"))
    assert isinstance(gemini, GeminiClient)

    with pytest.raises(ConfigurationError):
        build_llm_client(Settings(LLM_PROVIDER="openai"))


def test_gemini_client_transport_failure_raises_provider_error():
    request = httpx.Request("POST", "https://generativelanguage.googleapis.com/")
    sdk, _ = _fake_genai(None, error=httpx.ConnectTimeout("timed out", request=request))
    client = GeminiClient(api_key="", model="gemini-2.5-flash", client=sdk)

    with pytest.raises(ProviderError) as exc_info:
        asyncio.run(client.generate("Prepare questions"))
    assert exc_info.value.message == "Gemini API request failed: timed out"
    assert exc_info.value.provider_status is None
