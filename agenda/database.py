"""Backing store connection and liveness tracking."""

import os
import logging

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError

from .errors import UpstreamUnavailableError

logger = logging.getLogger(__name__)

# Database URL from environment
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./agenda.db")

engine = create_engine(
    DATABASE_URL,
    pool_pre_ping=True,
    echo=os.getenv("SQL_DEBUG", "false").lower() == "true"
)


def check_database_connection() -> bool:
    """Check if database connection is working."""
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        logger.info("Database connection successful")
        return True
    except SQLAlchemyError as e:
        logger.error(f"Database connection failed: {e}")
        return False


class BackingStore:
    """Liveness flag for the backing store.

    The record store does not read from or write to the database; the
    service only refuses traffic until a connection has been established.
    """

    def __init__(self, probe=None):
        self._probe = probe
        self.ready = False

    def connect(self) -> bool:
        """Probe the database once and remember whether it answered."""
        probe = self._probe or check_database_connection
        self.ready = bool(probe())
        return self.ready

    def require_ready(self) -> None:
        if not self.ready:
            raise UpstreamUnavailableError("Backing store is not ready")


backing_store = BackingStore()

