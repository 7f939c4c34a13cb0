"""
Database initialization.

Creates all tables known to ``SQLModel.metadata``.
"""

import logging
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

logger = logging.getLogger(__name__)


def init_db(bind: Optional[Engine] = None) -> None:
    """
    Initialize database schema.

    Args:
        bind: Engine to create the tables on (defaults to the application engine)
    """
    # Import all models so SQLModel.metadata has them
    import app.db.base  # noqa: F401

    if bind is None:
        from app.db.session import engine as bind

    logger.info("Creating database tables on %s", bind.url.render_as_string(hide_password=True))
    SQLModel.metadata.create_all(bind)
    logger.info("Tables created: %s", ", ".join(sorted(SQLModel.metadata.tables)))


if __name__ == "__main__":
    from app.core.config import settings
    from app.core.logging_config import setup_logging

    setup_logging(settings.LOG_LEVEL)
    init_db()
