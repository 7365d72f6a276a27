"""Unified LLM client — tries OpenAI first, falls back to Anthropic."""

import logging
from dataclasses import dataclass

import anthropic
from openai import AsyncOpenAI

from tripwise.config import settings
from tripwise.errors import CredentialMissingError, ProviderUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompletionPreset:
    max_tokens: int
    temperature: float


# Creative itinerary and comparison text vs. near-deterministic safety analysis
TRIP_PRESET = CompletionPreset(settings.openai_max_tokens, settings.openai_temperature)
COMPARISON_PRESET = CompletionPreset(4000, 0.7)
SAFETY_PRESET = CompletionPreset(1500, 0.1)


class LLMClient:
    """Unified async LLM client with OpenAI primary + Anthropic fallback."""

    def __init__(
        self,
        openai_api_key: str | None = None,
        anthropic_api_key: str | None = None,
        timeout: float | None = None,
    ):
        openai_key = settings.openai_api_key if openai_api_key is None else openai_api_key
        anthropic_key = (
            settings.anthropic_api_key if anthropic_api_key is None else anthropic_api_key
        )
        timeout = timeout or settings.llm_timeout_seconds

        self._openai = None
        self._anthropic = None
        self.openai_model = settings.openai_model
        self.anthropic_model = settings.anthropic_model

        if openai_key:
            self._openai = AsyncOpenAI(api_key=openai_key, timeout=timeout, max_retries=0)
        if anthropic_key:
            self._anthropic = anthropic.AsyncAnthropic(
                api_key=anthropic_key, timeout=timeout, max_retries=0
            )

    @property
    def is_configured(self) -> bool:
        return self._openai is not None or self._anthropic is not None

    @property
    def model_name(self) -> str:
        return self.openai_model if self._openai else self.anthropic_model

    async def complete(
        self,
        system: str,
        user: str,
        *,
        max_tokens: int = 1000,
        temperature: float = 0,
    ) -> str:
        """Get a completion from the best available LLM.

        Args:
            system: System prompt
            user: User message
            max_tokens: Max output tokens
            temperature: Sampling temperature

        Returns:
            Raw text response from the LLM.

        Raises:
            CredentialMissingError if no provider is configured.
            ProviderUnavailable if every configured provider fails.
        """
        if not self.is_configured:
            raise CredentialMissingError("OpenAI")

        errors = []
        messages = [{"role": "user", "content": user}]

        # Try OpenAI first
        if self._openai:
            try:
                response = await self._openai.chat.completions.create(
                    model=self.openai_model,
                    max_tokens=max_tokens,
                    temperature=temperature,
                    messages=[{"role": "system", "content": system}] + messages,
                )
                return (response.choices[0].message.content or "").strip()
            except Exception as e:
                errors.append(f"OpenAI: {e}")
                logger.warning(f"OpenAI failed, trying Anthropic: {e}")

        # Fallback to Anthropic
        if self._anthropic:
            try:
                response = await self._anthropic.messages.create(
                    model=self.anthropic_model,
                    max_tokens=max_tokens,
                    temperature=temperature,
                    system=system,
                    messages=messages,
                )
                return response.content[0].text.strip()
            except Exception as e:
                errors.append(f"Anthropic: {e}")
                logger.warning(f"Anthropic also failed: {e}")

        raise ProviderUnavailable("LLM", "; ".join(errors))

    async def complete_with(self, preset: CompletionPreset, system: str, user: str) -> str:
        return await self.complete(
            system, user, max_tokens=preset.max_tokens, temperature=preset.temperature
        )


# Singleton
llm_client = LLMClient()
