"""OpenAI client helpers and the model gateway used by the planner."""

import logging
from typing import Optional, Protocol

import openai
from openai import OpenAI

from .config import get_settings
from .errors import GatewayError
from .prompts import SYSTEM_PROMPT


logger = logging.getLogger(__name__)

_client: Optional[OpenAI] = None


class ModelGateway(Protocol):
    """Anything that can turn a prompt into raw model text."""

    def complete(self, prompt: str) -> str:
        ...


def get_client() -> OpenAI:
    """Provide a singleton OpenAI client.

    Retries are disabled: a failed or slow call goes straight to the fallback
    plan instead of being repeated.
    """

    global _client
    if _client is None:
        settings = get_settings()
        if not settings.openai_api_key:
            raise GatewayError(
                "OpenAI API key not configured. Set OPENAI_API_KEY in the environment or .env file."
            )
        _client = OpenAI(
            api_key=settings.openai_api_key,
            timeout=settings.request_timeout,
            max_retries=0,
        )
    return _client


def _describe_error(exc: openai.OpenAIError) -> str:
    if isinstance(exc, openai.AuthenticationError):
        return "Invalid OpenAI API key. Check OPENAI_API_KEY."
    if isinstance(exc, openai.RateLimitError):
        if getattr(exc, "code", None) == "insufficient_quota":
            return "OpenAI API quota exceeded. Check your billing details."
        return "OpenAI rate limit exceeded."
    if isinstance(exc, openai.APITimeoutError):
        return "OpenAI request timed out."
    if isinstance(exc, openai.APIConnectionError):
        return "Could not reach the OpenAI API."
    return f"AI service error: {exc}"


class OpenAIGateway:
    """Model gateway backed by the OpenAI Responses API in JSON mode."""

    def __init__(
        self,
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_output_tokens: Optional[int] = None,
    ):
        settings = get_settings()
        self.model = model or settings.openai_model
        self.temperature = settings.temperature if temperature is None else temperature
        self.max_output_tokens = max_output_tokens or settings.max_output_tokens

    def complete(self, prompt: str) -> str:
        client = get_client()
        logger.debug("Sending %d character prompt to %s", len(prompt), self.model)
        try:
            response = client.responses.create(
                model=self.model,
                instructions=SYSTEM_PROMPT,
                input=prompt,
                temperature=self.temperature,
                max_output_tokens=self.max_output_tokens,
                text={"format": {"type": "json_object"}},
            )
        except openai.OpenAIError as exc:
            raise GatewayError(_describe_error(exc)) from exc

        text = (response.output_text or "").strip()
        if not text:
            raise GatewayError("OpenAI returned an empty response.")
        return text
