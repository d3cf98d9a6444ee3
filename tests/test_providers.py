"""
Tests for the LLM provider adapters.
"""

import pytest
from unittest.mock import patch, MagicMock

from ytdigest.core.prompts import SYSTEM_PROMPT
from ytdigest.core.providers import (
    GeminiProvider,
    GroqProvider,
    OpenAIProvider,
    build_providers,
    check_api_key_availability,
    get_provider,
    parse_provider_choice,
)
from ytdigest.models.schemas import ProviderChoice
from ytdigest.utils.exceptions import (
    ConfigurationError,
    InvalidRequestError,
    MissingCredentialError,
    ProviderError,
)


@pytest.fixture
def mock_langchain_model():
    """Fixture to mock the langchain chat model."""
    with patch('ytdigest.core.providers.init_chat_model') as mock_init_model:
        mock_model = MagicMock()

        mock_response = MagicMock()
        mock_response.content = "Here's a summary: This is a summarized section of the video."
        mock_model.invoke.return_value = mock_response

        mock_init_model.return_value = mock_model
        mock_model.init_chat_model = mock_init_model

        yield mock_model


@pytest.fixture
def mock_genai():
    """Fixture to mock the google-genai client."""
    with patch('ytdigest.core.providers.genai') as mock_genai_module:
        mock_client = mock_genai_module.Client.return_value
        mock_client.models.generate_content.return_value.text = "Sure, the video covers rockets."
        yield mock_genai_module


def test_groq_generates_sanitized_text(clean_provider_env, mock_langchain_model):
    clean_provider_env.setenv("GROQ_API_KEY", "test_groq_key")

    text = GroqProvider().generate("Summarize this")

    assert text == "This is a summarized section of the video."
    kwargs = mock_langchain_model.init_chat_model.call_args.kwargs
    assert kwargs["model"] == "llama-3.3-70b-versatile"
    assert kwargs["model_provider"] == "groq"
    assert kwargs["api_key"] == "test_groq_key"
    assert kwargs["temperature"] == 0.7
    assert kwargs["max_tokens"] == 2048


def test_langchain_messages_carry_the_system_prompt(mock_langchain_model):
    OpenAIProvider(api_key="test_openai_key").generate("Summarize this")

    messages = mock_langchain_model.invoke.call_args.args[0]
    assert messages[0].content == SYSTEM_PROMPT
    assert messages[1].content == "Summarize this"
    assert mock_langchain_model.init_chat_model.call_args.kwargs["model_provider"] == "openai"


def test_prompt_braces_are_passed_through(mock_langchain_model):
    GroqProvider(api_key="k").generate("Code sample: {not_a_variable}")

    messages = mock_langchain_model.invoke.call_args.args[0]
    assert messages[1].content == "Code sample: {not_a_variable}"


def test_gemini_generates_sanitized_text(mock_genai):
    text = GeminiProvider(api_key="test_gemini_key").generate("Summarize this")

    assert text == "the video covers rockets."
    mock_genai.Client.assert_called_once_with(api_key="test_gemini_key")
    call = mock_genai.Client.return_value.models.generate_content.call_args
    assert call.kwargs["model"] == "gemini-2.0-flash-001"
    assert call.kwargs["contents"] == "Summarize this"
    assert call.kwargs["config"].system_instruction == SYSTEM_PROMPT


def test_missing_key_fails_before_building_a_client(clean_provider_env, mock_genai):
    clean_provider_env.setenv("OPENAI_API_KEY", "test_openai_key")

    with pytest.raises(MissingCredentialError) as exc_info:
        GeminiProvider().generate("Summarize this")

    error = exc_info.value
    assert isinstance(error, ConfigurationError)
    assert error.kind == ProviderError.MISSING_CREDENTIAL
    assert "Google Gemini API key is not configured" in error.message
    assert "GPT-4" in error.message
    mock_genai.Client.assert_not_called()


def test_missing_key_without_alternatives(clean_provider_env):
    message = GroqProvider().missing_key_message()

    assert message.startswith("Groq API key is not configured")
    assert "Available" not in message


def test_request_failure_is_wrapped(mock_langchain_model):
    mock_langchain_model.invoke.side_effect = ConnectionError("rate limited")

    with pytest.raises(ProviderError) as exc_info:
        GroqProvider(api_key="k").generate("Summarize this")

    assert exc_info.value.kind == ProviderError.REQUEST_FAILED
    assert "rate limited" in exc_info.value.message


def test_empty_response_becomes_empty_string(mock_langchain_model):
    mock_langchain_model.invoke.return_value.content = None

    assert GroqProvider(api_key="k").generate("Summarize this") == ""


def test_key_is_read_at_call_time(clean_provider_env):
    provider = GroqProvider()
    assert provider.is_configured() is False

    clean_provider_env.setenv("GROQ_API_KEY", "late_key")
    assert provider.is_configured() is True


def test_api_key_availability(clean_provider_env):
    clean_provider_env.setenv("GEMINI_API_KEY", "g")

    assert check_api_key_availability() == {"gemini": True, "groq": False, "gpt4": False}


def test_parse_provider_choice():
    assert parse_provider_choice("gpt4") is ProviderChoice.GPT4

    with pytest.raises(InvalidRequestError) as exc_info:
        parse_provider_choice("claude")
    assert "Google Gemini, Groq, GPT-4" in exc_info.value.message


def test_registry_builds_one_adapter_per_choice():
    providers = build_providers()

    assert set(providers) == set(ProviderChoice)
    assert isinstance(get_provider(ProviderChoice.GROQ), GroqProvider)
    assert providers[ProviderChoice.GPT4].display_name == "GPT-4"
