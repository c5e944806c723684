"""
Domain exceptions for the weekly summary and recommendation pipeline.

Services raise these; the API layer maps them to HTTP responses in one
place (see ``app.main``).
"""

from typing import Optional

from fastapi import status


class TrainingRecordsError(Exception):
    """Base class for every error the pipeline surfaces to callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    error_code: str = "TRAINING_RECORDS_ERROR"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class InvalidDateError(TrainingRecordsError, ValueError):
    """Malformed calendar input."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "INVALID_DATE"


class InvalidLogError(TrainingRecordsError, ValueError):
    """Daily log payload with an unknown key or an out-of-range value."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "INVALID_LOG"


class NoDataError(TrainingRecordsError):
    """Summary requested for a week without a single daily record."""

    status_code = status.HTTP_404_NOT_FOUND
    error_code = "NO_DATA"


class RecommendationValidationError(TrainingRecordsError):
    """Generated recommendation rejected by the rule chain."""

    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    error_code = "RECOMMENDATION_REJECTED"

    def __init__(self, detail: str, rule: str, candidate: Optional[str] = None):
        super().__init__(detail)
        self.rule = rule
        self.candidate = candidate


class StoreError(TrainingRecordsError):
    """Persistence failure. Never retried."""

    status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    error_code = "STORE_ERROR"


class GeneratorError(TrainingRecordsError):
    """Text generation service failure after the allowed attempts."""

    status_code = status.HTTP_502_BAD_GATEWAY
    error_code = "GENERATOR_ERROR"
