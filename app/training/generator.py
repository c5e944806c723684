"""
Text generation for weekly recommendations.

The generator is an untrusted external service: no guarantee on latency,
determinism or content.  Calls carry a hard timeout, failures get exactly
one retry, and anything still failing surfaces as
:class:`~app.core.exceptions.GeneratorError`.  Output is validated
separately (see :mod:`app.training.validator`).
"""

from __future__ import annotations

import logging
import time
from typing import Any, Optional, Protocol

from google import genai
from google.genai import types as genai_types

from app.core.exceptions import GeneratorError

logger = logging.getLogger(__name__)

SYSTEM_INSTRUCTION = (
    "You write brief, factual weekly training notes for endurance athletes on behalf of their coach. "
    "Follow the RULES section of the request exactly."
)


class TextGenerator(Protocol):
    def generate(self, prompt: str) -> str: ...


class GeminiGenerator:
    """Gemini-backed :class:`TextGenerator`.

    Args:
        api_key: Gemini API key.  Ignored when ``client`` is given.
        model: Model id.
        temperature: Sampling temperature.
        max_output_tokens: Output cap.
        timeout_s: Hard per-call timeout in seconds.
        client: Pre-built ``genai.Client`` (or compatible object).
    """

    def __init__(self, api_key: str = "", model: str = "gemini-2.5-flash-lite", temperature: float = 0.7,
                 max_output_tokens: int = 500, timeout_s: float = 20.0, client: Any = None):
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self.max_output_tokens = max_output_tokens
        self.timeout_s = timeout_s
        self._client = client

    @property
    def client(self) -> Any:
        if self._client is None:
            if not self.api_key:
                raise GeneratorError("Text generator is not configured (GEMINI_API_KEY is empty)")
            self._client = genai.Client(
                api_key=self.api_key,
                http_options=genai_types.HttpOptions(timeout=int(self.timeout_s * 1000)),
            )
        return self._client

    def generate(self, prompt: str) -> str:
        """Single call.  Raises ``GeneratorError`` on any failure or empty output."""
        start = time.monotonic()
        try:
            response = self.client.models.generate_content(
                model=self.model,
                contents=prompt,
                config=genai_types.GenerateContentConfig(
                    system_instruction=SYSTEM_INSTRUCTION,
                    temperature=self.temperature,
                    max_output_tokens=self.max_output_tokens,
                ),
            )
        except GeneratorError:
            raise
        except Exception as exc:
            raise GeneratorError(f"Text generation failed: {exc}") from exc

        latency_ms = int((time.monotonic() - start) * 1000)
        text = (getattr(response, "text", None) or "").strip()
        if not text:
            raise GeneratorError("Text generation returned an empty response")
        logger.debug("Generator answered in %d ms (%d chars)", latency_ms, len(text))
        return text


def generate_with_retry(generator: TextGenerator, prompt: str, max_attempts: int = 2) -> str:
    """Call ``generator`` with at most ``max_attempts`` tries.

    Raises:
        GeneratorError: every attempt failed.
    """
    last_error: Optional[Exception] = None
    for attempt in range(1, max_attempts + 1):
        try:
            return generator.generate(prompt)
        except Exception as exc:
            last_error = exc
            logger.warning("Generator attempt %d/%d failed: %s", attempt, max_attempts, exc)
    raise GeneratorError(f"Text generation failed after {max_attempts} attempt(s)") from last_error
