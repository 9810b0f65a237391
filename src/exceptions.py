"""
Application-level exceptions and helpers for translating store failures.
"""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

logger = logging.getLogger(__name__)


class StoreUnavailableError(Exception):
    """Raised when the backing store cannot be reached or a query fails.

    This is an infrastructure error and is safe to retry; it never means
    that a record is missing.
    """

    pass


@contextmanager
def store_operation(session: Session, description: str) -> Iterator[None]:
    """
    Run a block of store calls, converting driver errors to StoreUnavailableError.

    Args:
        session: The session the block operates on; rolled back on failure
        description: Short human readable name of the operation, used in logs

    Raises:
        StoreUnavailableError: If SQLAlchemy raises while the block runs
    """
    try:
        yield
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Store failure while {description}: {e}")
        raise StoreUnavailableError(f"Store failure while {description}") from e
