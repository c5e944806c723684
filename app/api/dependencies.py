"""
Shared API dependencies.

Reusable FastAPI dependencies for configuration and the text generator.
Identity is resolved upstream; athlete ids arrive as opaque path tokens.
"""

from functools import lru_cache

from app.core.config import settings
from app.training.config import PipelineConfig
from app.training.generator import GeminiGenerator, TextGenerator


@lru_cache
def get_pipeline_config() -> PipelineConfig:
    return PipelineConfig.from_settings(settings)


@lru_cache
def get_generator() -> TextGenerator:
    return GeminiGenerator(
        api_key=settings.GEMINI_API_KEY,
        model=settings.GENERATOR_MODEL,
        temperature=settings.GENERATOR_TEMPERATURE,
        max_output_tokens=settings.GENERATOR_MAX_OUTPUT_TOKENS,
        timeout_s=settings.GENERATOR_TIMEOUT_S,
    )
