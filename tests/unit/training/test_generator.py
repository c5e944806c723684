"""Tests for the text generator wrapper and its retry policy."""

from types import SimpleNamespace

import pytest

from app.core.exceptions import GeneratorError
from app.training.generator import GeminiGenerator, generate_with_retry


class _Flaky:
    def __init__(self, failures: int, text: str = "note"):
        self.failures = failures
        self.text = text
        self.calls = 0

    def generate(self, prompt: str) -> str:
        self.calls += 1
        if self.calls <= self.failures:
            raise GeneratorError("timeout")
        return self.text


def _fake_client(response=None, error=None):
    calls = []

    def generate_content(**kwargs):
        calls.append(kwargs)
        if error is not None:
            raise error
        return response

    return SimpleNamespace(models=SimpleNamespace(generate_content=generate_content)), calls


class TestGenerateWithRetry:
    def test_first_attempt_succeeds(self):
        generator = _Flaky(failures=0)
        assert generate_with_retry(generator, "prompt") == "note"
        assert generator.calls == 1

    def test_single_retry_recovers(self):
        generator = _Flaky(failures=1)
        assert generate_with_retry(generator, "prompt") == "note"
        assert generator.calls == 2

    def test_gives_up_after_two_attempts(self):
        generator = _Flaky(failures=5)
        with pytest.raises(GeneratorError):
            generate_with_retry(generator, "prompt")
        assert generator.calls == 2

    def test_no_retry_when_one_attempt_allowed(self):
        generator = _Flaky(failures=1)
        with pytest.raises(GeneratorError):
            generate_with_retry(generator, "prompt", max_attempts=1)
        assert generator.calls == 1


class TestGeminiGenerator:
    def test_returns_stripped_text(self):
        client, calls = _fake_client(SimpleNamespace(text="  Keep it steady.  "))
        generator = GeminiGenerator(model="test-model", temperature=0.2, max_output_tokens=50, client=client)
        assert generator.generate("prompt") == "Keep it steady."
        assert calls[0]["model"] == "test-model"
        assert calls[0]["contents"] == "prompt"
        assert calls[0]["config"].temperature == 0.2
        assert calls[0]["config"].max_output_tokens == 50

    def test_empty_response_is_a_failure(self):
        client, _ = _fake_client(SimpleNamespace(text=None))
        with pytest.raises(GeneratorError):
            GeminiGenerator(client=client).generate("prompt")

    def test_sdk_errors_become_generator_errors(self):
        client, _ = _fake_client(error=RuntimeError("503 unavailable"))
        with pytest.raises(GeneratorError, match="503 unavailable"):
            GeminiGenerator(client=client).generate("prompt")

    def test_missing_api_key(self):
        with pytest.raises(GeneratorError, match="not configured"):
            GeminiGenerator(api_key="").generate("prompt")
