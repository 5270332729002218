"""
Language Model (LLM) provider clients.

This module provides:
- ChatCompletionsClient for OpenAI-compatible chat completion endpoints
  (Hugging Face router by default), called directly over httpx
- GeminiClient for Google's generate-content API through the GenAI SDK
- build_llm_client() to pick the provider configured in settings

Both clients expose `async generate(prompt) -> str` and raise ProviderError
with the provider's status and body when the call does not succeed.
"""
import logging
from typing import Any, Optional, Union

import httpx
from google import genai
from google.genai import errors as genai_errors
from google.genai import types

from app.core.config import Settings, settings
from app.core.exceptions import ConfigurationError, ProviderError
from app.core.logger import log_async_execution_time

logger = logging.getLogger(__name__)

EMPTY_COMPLETION = "No response generated"


def _first_choice_content(data: Any) -> Optional[str]:
    """Return choices[0].message.content from a chat completion body, if present."""
    if not isinstance(data, dict):
        return None
    choices = data.get("choices") or []
    if not choices or not isinstance(choices[0], dict):
        return None
    message = choices[0].get("message") or {}
    content = message.get("content") if isinstance(message, dict) else None
    return content if isinstance(content, str) else None


class ChatCompletionsClient:
    """Client for an OpenAI-compatible /v1/chat/completions endpoint."""

    provider_name = "Hugging Face"

    def __init__(
        self,
        api_key: str,
        model: str,
        url: str,
        max_tokens: int = 500,
        timeout: float = 60.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.model = model
        self.url = url
        self.max_tokens = max_tokens
        self.timeout = timeout
        self._transport = transport

    @log_async_execution_time
    async def generate(self, prompt: str) -> str:
        if not self.api_key:
            raise ConfigurationError("HUGGINGFACE_API_KEY is not configured")

        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "max_tokens": self.max_tokens,
        }

        logger.info(f"Calling {self.provider_name} chat completions: model={self.model} prompt_len={len(prompt)}")
        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.url, headers=headers, json=payload)
        except httpx.HTTPError as exc:
            raise ProviderError(f"{self.provider_name} API request failed: {exc}") from exc

        if not resp.is_success:
            logger.warning(f"{self.provider_name} responded with {resp.status_code}: {resp.text[:200]}")
            raise ProviderError.from_response(self.provider_name, resp.status_code, resp.text)

        try:
            data = resp.json()
        except ValueError as exc:
            raise ProviderError.from_response(self.provider_name, resp.status_code, resp.text) from exc

        content = _first_choice_content(data)
        if not content:
            logger.warning(f"{self.provider_name} returned no completion content")
            return EMPTY_COMPLETION
        return content


class GeminiClient:
    """Client for Gemini's generate-content API."""

    provider_name = "Gemini"

    def __init__(self, api_key: str, model: str, max_tokens: int = 500, client: Any = None):
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self._client = client

    def _get_client(self) -> genai.Client:
        """Create the GenAI SDK client on first use."""
        if self._client is None:
            if not self.api_key:
                raise ConfigurationError("GEMINI_API_KEY is not configured")
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    @log_async_execution_time
    async def generate(self, prompt: str) -> str:
        client = self._get_client()
        # Thinking tokens count against max_output_tokens on 2.5 models
        config = types.GenerateContentConfig(
            max_output_tokens=self.max_tokens,
            thinking_config=types.ThinkingConfig(thinking_budget=0),
        )

        logger.info(f"Calling {self.provider_name} generate_content: model={self.model} prompt_len={len(prompt)}")
        try:
            response = await client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=config,
            )
        except genai_errors.APIError as exc:
            raise ProviderError.from_response(self.provider_name, exc.code, exc.message or str(exc)) from exc
        except httpx.HTTPError as exc:
            raise ProviderError(f"{self.provider_name} API request failed: {exc}") from exc

        text = response.text if response.text else ""
        if not text:
            logger.warning(f"{self.provider_name} returned no text")
            return EMPTY_COMPLETION
        return text


LLMClient = Union[ChatCompletionsClient, GeminiClient]


def build_llm_client(config: Settings = settings) -> LLMClient:
    """Build the client for the provider named by LLM_PROVIDER."""
    provider = config.LLM_PROVIDER.strip().lower()
    if provider == "huggingface":
        return ChatCompletionsClient(
            api_key=config.HUGGINGFACE_API_KEY,
            model=config.CHAT_MODEL,
            url=config.CHAT_COMPLETIONS_URL,
            max_tokens=config.LLM_MAX_TOKENS,
            timeout=config.LLM_TIMEOUT_SECONDS,
        )
    if provider == "gemini":
        return GeminiClient(
            api_key=config.GEMINI_API_KEY,
            model=config.GEMINI_MODEL,
            max_tokens=config.LLM_MAX_TOKENS,
        )
    raise ConfigurationError(f"Unknown LLM_PROVIDER: {config.LLM_PROVIDER}")
