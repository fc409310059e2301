"""Tests for the OpenAI model gateway."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock, patch

import httpx
import openai
import pytest

from trip_planner.config import Settings
from trip_planner.errors import GatewayError
from trip_planner.llm import OpenAIGateway, get_client


def _settings(**overrides):
    return Settings(**{"openai_api_key": "sk-test", **overrides})


@patch("trip_planner.llm._client", None)
@patch("trip_planner.llm.get_settings")
def test_missing_api_key_raises_gateway_error(mock_settings):
    mock_settings.return_value = _settings(openai_api_key=None)
    with pytest.raises(GatewayError, match="not configured"):
        get_client()


@patch("trip_planner.llm.get_client")
@patch("trip_planner.llm.get_settings")
def test_complete_returns_stripped_text(mock_settings, mock_get_client):
    mock_settings.return_value = _settings(openai_model="test-model")
    client = MagicMock()
    client.responses.create.return_value = SimpleNamespace(output_text='  {"a": 1}\n')
    mock_get_client.return_value = client

    assert OpenAIGateway().complete("Plan my trip as JSON") == '{"a": 1}'
    kwargs = client.responses.create.call_args.kwargs
    assert kwargs["model"] == "test-model"
    assert kwargs["input"] == "Plan my trip as JSON"
    assert kwargs["text"] == {"format": {"type": "json_object"}}


@patch("trip_planner.llm.get_client")
@patch("trip_planner.llm.get_settings")
def test_empty_completion_raises(mock_settings, mock_get_client):
    mock_settings.return_value = _settings()
    client = MagicMock()
    client.responses.create.return_value = SimpleNamespace(output_text="")
    mock_get_client.return_value = client

    with pytest.raises(GatewayError, match="empty"):
        OpenAIGateway().complete("prompt")


@patch("trip_planner.llm.get_client")
@patch("trip_planner.llm.get_settings")
def test_sdk_errors_become_gateway_errors(mock_settings, mock_get_client):
    mock_settings.return_value = _settings()
    client = MagicMock()
    request = httpx.Request("POST", "https://api.openai.com/v1/responses")
    client.responses.create.side_effect = openai.APITimeoutError(request=request)
    mock_get_client.return_value = client

    with pytest.raises(GatewayError, match="timed out") as excinfo:
        OpenAIGateway().complete("prompt")
    assert isinstance(excinfo.value.__cause__, openai.APITimeoutError)


@patch("trip_planner.llm._client", None)
@patch("trip_planner.llm.OpenAI")
@patch("trip_planner.llm.get_settings")
def test_client_is_built_with_timeout_and_no_retries(mock_settings, mock_openai):
    mock_settings.return_value = _settings(request_timeout=12.5)
    client = get_client()
    mock_openai.assert_called_once_with(api_key="sk-test", timeout=12.5, max_retries=0)
    assert client is mock_openai.return_value
