"""
Recommendation validation.

The text generator is untrusted.  Its candidate note is checked against a
fixed rule chain, first match wins:

1. ``insufficient_data`` - enough days carry no data at all: the output is
   the canonical sentence, whatever the generator wrote.
2. ``contradicted_insufficiency`` - the candidate uses the canonical
   sentence although the week has enough data.
3. ``empty`` - nothing but whitespace.
4. ``length`` - more words than allowed.
5. ``policy`` - diagnostic, medical or prescriptive vocabulary.
6. ``evidence`` - mentions a metric that was never logged this week.

Only rule 1 produces text the generator did not write.  Rules 2-6 raise
:class:`RecommendationValidationError`; a rejected candidate is never
edited into shape.

The evidence rule is mechanical and partial: it catches references to
metrics absent from the whole week, not wrong numbers.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from app.core.exceptions import RecommendationValidationError
from app.schemas.recommendation import DayRow, ValidatedRecommendation
from app.schemas.weekly_summary import WeeklySummary
from app.training.config import DEFAULT_CONFIG, PipelineConfig

logger = logging.getLogger(__name__)


_POLICY_TERMS: dict[str, tuple[str, ...]] = {
    "diagnostic": (
        r"diagnos\w*", r"symptoms?", r"syndromes?", r"disorders?", r"diseases?", r"patholog\w*",
    ),
    "medical": (
        r"medical(?:ly)?", r"doctors?", r"physicians?", r"clinic(?:al)?", r"illness(?:es)?", r"infections?",
        r"arrhythmias?", r"tachycardia", r"bradycardia", r"insomnia", r"depression", r"anemi[ac]",
    ),
    "prescriptive": (
        r"prescri\w+", r"medications?", r"medicines?", r"drugs?", r"dosages?", r"doses?", r"pills?",
        r"supplements?", r"treatments?", r"therap(?:y|ies)",
    ),
}

_POLICY_RE: dict[str, re.Pattern] = {
    category: re.compile(r"\b(?:" + "|".join(terms) + r")\b", re.IGNORECASE)
    for category, terms in _POLICY_TERMS.items()
}

_METRIC_MENTIONS: dict[str, re.Pattern] = {
    "mileage": re.compile(r"\b(?:mileage|miles?|distance)\b", re.IGNORECASE),
    "stress": re.compile(r"\bstress(?:ed|ful)?\b", re.IGNORECASE),
    "sleep": re.compile(r"\b(?:sleep(?:ing)?|slept)\b", re.IGNORECASE),
    "resting_heart_rate": re.compile(r"\b(?:resting heart rate|resting hr|rhr)\b", re.IGNORECASE),
    "exercise_heart_rate": re.compile(r"\b(?:exercise heart rate|exercise hr|workout heart rate)\b",
                                      re.IGNORECASE),
    "perceived_exertion": re.compile(r"\b(?:perceived exertion|exertion|rpe)\b", re.IGNORECASE),
}

# Generic wording covering several metrics; rejected only when none of them was logged.
_GROUP_MENTIONS: list[tuple[tuple[str, ...], re.Pattern]] = [
    (("resting_heart_rate", "exercise_heart_rate"),
     re.compile(r"\b(?:heart[- ]?rates?|hr|pulse|bpm)\b", re.IGNORECASE)),
]


def _normalize(text: str) -> str:
    return " ".join(text.lower().split())


def count_empty_days(day_table: list[DayRow]) -> int:
    """Days on which every measured metric is absent."""
    return sum(1 for row in day_table if row.is_empty)


def word_count(text: str) -> int:
    return len(text.split())


def _unlogged_metrics(day_table: list[DayRow]) -> list[str]:
    return [m for m in _METRIC_MENTIONS if all(row.values.get(m) is None for row in day_table)]


def _reject(summary: WeeklySummary, rule: str, detail: str, candidate: str) -> RecommendationValidationError:
    logger.warning("Recommendation rejected (%s) for athlete=%s week_start=%s: %s",
                   rule, summary.athlete_id, summary.week_start, detail)
    return RecommendationValidationError(detail, rule=rule, candidate=candidate)


def requires_insufficient_data_override(day_table: list[DayRow], config: Optional[PipelineConfig] = None) -> bool:
    cfg = config or DEFAULT_CONFIG
    return count_empty_days(day_table) >= cfg.insufficient_days_threshold


def validate_recommendation(summary: WeeklySummary, day_table: list[DayRow], candidate: Optional[str],
                            config: Optional[PipelineConfig] = None) -> ValidatedRecommendation:
    """Run the rule chain over a generated candidate.

    Args:
        summary: The week the candidate was generated for.
        day_table: Per-day rows rendered into the prompt.
        candidate: Generator output (may be ``None`` when generation was skipped).
        config: Optional :class:`PipelineConfig` override.

    Returns:
        :class:`ValidatedRecommendation` with the accepted text.

    Raises:
        RecommendationValidationError: the candidate broke rules 2-6.
    """
    cfg = config or DEFAULT_CONFIG
    sentence = cfg.insufficient_data_sentence

    # 1. Insufficient data always wins.
    empty_days = count_empty_days(day_table)
    if empty_days >= cfg.insufficient_days_threshold:
        logger.warning("Insufficient data for athlete=%s week_start=%s (%d empty days); using canonical sentence",
                       summary.athlete_id, summary.week_start, empty_days)
        return ValidatedRecommendation(text=sentence, overridden=True)

    text = (candidate or "").strip()

    # 2. The escape hatch is only for weeks that really lack data.
    if _normalize(sentence).rstrip(".") in _normalize(text):
        raise _reject(summary, "contradicted_insufficiency",
                      f"Candidate claims insufficient data but only {empty_days} day(s) lack data", text)

    # 3.
    if not text:
        raise _reject(summary, "empty", "Candidate is empty", text)

    # 4.
    words = word_count(text)
    if words > cfg.max_recommendation_words:
        raise _reject(summary, "length",
                      f"Candidate has {words} words (limit {cfg.max_recommendation_words})", text)

    # 5.
    for category, pattern in _POLICY_RE.items():
        match = pattern.search(text)
        if match:
            raise _reject(summary, "policy", f"Candidate contains {category} term '{match.group(0)}'", text)

    # 6.
    unlogged = _unlogged_metrics(day_table)
    for metric in unlogged:
        match = _METRIC_MENTIONS[metric].search(text)
        if match:
            raise _reject(summary, "evidence",
                          f"Candidate mentions '{match.group(0)}' but no {metric} was logged this week", text)
    for metrics, pattern in _GROUP_MENTIONS:
        if not all(metric in unlogged for metric in metrics):
            continue
        match = pattern.search(text)
        if match:
            raise _reject(summary, "evidence",
                          f"Candidate mentions '{match.group(0)}' but none of {', '.join(metrics)} "
                          f"was logged this week", text)

    return ValidatedRecommendation(text=text, overridden=False)
