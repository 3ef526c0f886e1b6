"""
Text Generator for breakdowns, coaching and summaries

Wraps the Anthropic Messages API behind a small interface so the rest of
the app (and the tests) can swap in anything with an async generate().

One attempt per call, no retries. Anything that goes wrong becomes
UpstreamUnavailable and the caller falls back to local text.

Usage:
    from focusflow.ai.text_generator import AnthropicTextGenerator

    generator = AnthropicTextGenerator()
    text = await generator.generate("Break 'do laundry' into steps")
"""

from __future__ import annotations

import asyncio
import logging
import os
from abc import ABC, abstractmethod
from typing import Any

import anthropic

from focusflow.config import load_config
from focusflow.errors import UpstreamUnavailable

logger = logging.getLogger(__name__)


class TextGenerator(ABC):
    """Anything that turns a prompt into text."""

    name = "text"

    @abstractmethod
    async def generate(
        self, prompt: str, system: str | None = None, max_tokens: int | None = None
    ) -> str:
        """
        Generate text for a prompt.

        Raises:
            UpstreamUnavailable: On any failure, timeout or empty output
        """


class AnthropicTextGenerator(TextGenerator):
    """TextGenerator backed by Claude via the anthropic SDK."""

    name = "anthropic"

    def __init__(self, config: dict[str, Any] | None = None, api_key: str | None = None):
        """
        Args:
            config: The ai.text config section (defaults to args/focusflow.yaml)
            api_key: Overrides ANTHROPIC_API_KEY
        """
        self.config = config or load_config()["ai"]["text"]
        self.api_key = api_key or os.environ.get("ANTHROPIC_API_KEY")
        self.model = self.config.get("model", "claude-3-5-haiku-latest")
        self.max_tokens = int(self.config.get("max_tokens", 1024))
        self.timeout = float(self.config.get("timeout_seconds", 20.0))
        self._client: anthropic.AsyncAnthropic | None = None

    def _get_client(self) -> anthropic.AsyncAnthropic:
        if not self.api_key:
            raise UpstreamUnavailable("ANTHROPIC_API_KEY not set")
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(
                api_key=self.api_key, timeout=self.timeout, max_retries=0
            )
        return self._client

    async def generate(
        self, prompt: str, system: str | None = None, max_tokens: int | None = None
    ) -> str:
        client = self._get_client()

        kwargs: dict[str, Any] = {
            "model": self.model,
            "max_tokens": max_tokens or self.max_tokens,
            "messages": [{"role": "user", "content": prompt}],
        }
        if system:
            kwargs["system"] = system

        try:
            message = await asyncio.wait_for(client.messages.create(**kwargs), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            raise UpstreamUnavailable(f"Text generation timed out after {self.timeout}s") from e
        except anthropic.APIError as e:
            raise UpstreamUnavailable(f"Text generation failed: {e}") from e

        text = "".join(
            block.text for block in message.content if getattr(block, "type", None) == "text"
        ).strip()
        if not text:
            raise UpstreamUnavailable("Text generation returned no text")

        logger.debug(f"Generated {len(text)} chars with {self.model}")
        return text


__all__ = ["TextGenerator", "AnthropicTextGenerator"]
