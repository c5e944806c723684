"""Weekly training summary and recommendation pipeline."""

from app.training.calendar import WeekWindow, week_start_of, week_window
from app.training.config import DEFAULT_CONFIG, PipelineConfig
from app.training.metrics import aggregate
from app.training.summary import build_summary
from app.training.trends import compare
from app.training.validator import validate_recommendation

__all__ = [
    "DEFAULT_CONFIG",
    "PipelineConfig",
    "WeekWindow",
    "aggregate",
    "build_summary",
    "compare",
    "validate_recommendation",
    "week_start_of",
    "week_window",
]
