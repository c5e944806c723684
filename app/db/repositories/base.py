"""
Shared repository helpers.

Persistence failures are rolled back and surfaced as
:class:`~app.core.exceptions.StoreError`; they are never retried here.
"""

import contextlib
import logging
from typing import Any, Callable, Iterator, Optional

from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from app.core.exceptions import StoreError

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def store_errors(session: Session, action: str) -> Iterator[None]:
    """Translate SQLAlchemy failures inside the block into ``StoreError``."""
    try:
        yield
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception("Store failure during %s", action)
        raise StoreError(f"Store failure during {action}") from exc


def dialect_insert(session: Session) -> Optional[Callable[..., Any]]:
    """Return the dialect ``insert`` supporting ``ON CONFLICT DO UPDATE``.

    ``None`` for dialects without it; callers then fall back to a
    select-then-write upsert.
    """
    name = session.get_bind().dialect.name
    if name == "postgresql":
        return postgresql.insert
    if name == "sqlite":
        return sqlite.insert
    return None
