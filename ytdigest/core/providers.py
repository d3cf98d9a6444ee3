"""
Module for generating summary text with the supported LLM providers.
"""

import os
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from google import genai
from google.genai import types
from langchain_core.prompts import ChatPromptTemplate
from langchain.chat_models import init_chat_model

from ytdigest.core.prompts import SYSTEM_PROMPT
from ytdigest.core.sanitizer import sanitize_output
from ytdigest.models.schemas import ProviderChoice
from ytdigest.utils.exceptions import InvalidRequestError, MissingCredentialError, ProviderError
from ytdigest.utils.logger import logging


class SummaryProvider(ABC):
    """
    Base class for summary generation backends.

    Clients are built per call, after the credential has been checked, so an
    unconfigured provider fails fast without touching the network.
    """

    choice: ProviderChoice
    env_key: str
    model: str
    temperature: float = 0.7
    max_tokens: int = 2048

    def __init__(self, api_key: Optional[str] = None):
        """
        Args:
            api_key: Explicit API key (if None, the environment is read at call time)
        """
        self._api_key = api_key

    @property
    def name(self) -> str:
        return self.choice.value

    @property
    def display_name(self) -> str:
        return self.choice.display_name

    def get_api_key(self) -> Optional[str]:
        return self._api_key or os.getenv(self.env_key)

    def is_configured(self) -> bool:
        return bool(self.get_api_key())

    def missing_key_message(self) -> str:
        alternatives = [
            ProviderChoice(name).display_name
            for name, available in check_api_key_availability().items()
            if available and name != self.name
        ]
        message = (
            f"{self.display_name} API key is not configured. "
            f"Please add your API key in the settings or choose a different model."
        )
        if alternatives:
            message += f" Available: {', '.join(alternatives)}."
        return message

    def generate(self, prompt: str) -> str:
        """
        Generate summary text for a prompt.

        Args:
            prompt: Full user prompt

        Returns:
            Sanitized generated text (possibly empty)

        Raises:
            MissingCredentialError: If the provider's API key is absent
            ProviderError: If the request to the backend fails
        """
        api_key = self.get_api_key()
        if not api_key:
            raise MissingCredentialError(self.missing_key_message(), provider=self.name)

        logging.debug(f"Generating with {self.display_name} ({self.model}), prompt length {len(prompt)}")
        try:
            raw = self._complete(prompt, api_key)
        except Exception as e:
            logging.error(f"{self.display_name} request failed: {str(e)}")
            raise ProviderError(
                f"{self.display_name} request failed: {str(e)}",
                kind=ProviderError.REQUEST_FAILED,
                provider=self.name,
            ) from e

        return sanitize_output(raw or "")

    @abstractmethod
    def _complete(self, prompt: str, api_key: str) -> str:
        """Send the prompt to the backend and return the raw text."""


class GeminiProvider(SummaryProvider):
    """Google Gemini through the google-genai client."""

    choice = ProviderChoice.GEMINI
    env_key = "GEMINI_API_KEY"
    model = "gemini-2.0-flash-001"

    def _complete(self, prompt: str, api_key: str) -> str:
        client = genai.Client(api_key=api_key)
        response = client.models.generate_content(
            model=self.model,
            contents=prompt,
            config=types.GenerateContentConfig(
                system_instruction=SYSTEM_PROMPT,
                temperature=self.temperature,
                max_output_tokens=self.max_tokens,
            ),
        )
        return response.text


class LangChainProvider(SummaryProvider):
    """Chat-completion backends reached through langchain's init_chat_model."""

    model_provider: str

    def _complete(self, prompt: str, api_key: str) -> str:
        llm = init_chat_model(
            model=self.model,
            model_provider=self.model_provider,
            temperature=self.temperature,
            max_tokens=self.max_tokens,
            api_key=api_key,
        )

        summary_prompt = ChatPromptTemplate.from_messages([
            ("system", SYSTEM_PROMPT),
            ("human", "{text}"),
        ])
        response = llm.invoke(summary_prompt.format_messages(text=prompt))
        return response.content


class GroqProvider(LangChainProvider):
    choice = ProviderChoice.GROQ
    env_key = "GROQ_API_KEY"
    model = "llama-3.3-70b-versatile"
    model_provider = "groq"


class OpenAIProvider(LangChainProvider):
    choice = ProviderChoice.GPT4
    env_key = "OPENAI_API_KEY"
    model = "gpt-4o-mini"
    model_provider = "openai"


PROVIDER_CLASSES = {
    ProviderChoice.GEMINI: GeminiProvider,
    ProviderChoice.GROQ: GroqProvider,
    ProviderChoice.GPT4: OpenAIProvider,
}


def check_api_key_availability() -> Dict[str, bool]:
    """Report, per provider, whether its credential is present."""
    return {
        choice.value: bool(os.getenv(cls.env_key))
        for choice, cls in PROVIDER_CLASSES.items()
    }


def parse_provider_choice(name: str) -> ProviderChoice:
    """Resolve a provider name, raising InvalidRequestError for unknown ones."""
    try:
        return ProviderChoice(name)
    except ValueError:
        names: List[str] = [choice.display_name for choice in ProviderChoice]
        raise InvalidRequestError(
            f"Invalid AI model selected. Please choose from: {', '.join(names)}",
            provider=name,
        )


def get_provider(choice: ProviderChoice) -> SummaryProvider:
    """Build the adapter for one provider."""
    return PROVIDER_CLASSES[choice]()


def build_providers() -> Dict[ProviderChoice, SummaryProvider]:
    """Build one adapter per supported provider."""
    return {choice: get_provider(choice) for choice in PROVIDER_CLASSES}
