"""
Database initialization.

Creates all tables known to SQLModel metadata.
"""

import logging

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from app.db.session import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(engine: Engine = default_engine) -> None:
    """Create the daily record, weekly summary and coach plan tables."""

    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    logger.info("Creating database tables on %s", engine.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created successfully")


if __name__ == "__main__":
    init_db()
