"""
Recommendation publishing.
"""

from __future__ import annotations

import logging

from app.training.calendar import WeekWindow
from app.training.stores import DailyRecordStore

logger = logging.getLogger(__name__)


def publish_recommendation(athlete_id: str, window: WeekWindow, note: str, records: DailyRecordStore) -> int:
    """Attach ``note`` to every daily record of the athlete in ``window``.

    The weekly summary is left untouched; only the daily records carry
    the note.

    Returns:
        Number of daily records updated.
    """
    updated = records.set_recommendation(athlete_id, window.start, window.end, note)
    logger.info("Recommendation published for athlete=%s week_start=%s on %d records",
                athlete_id, window.start, updated)
    return updated
