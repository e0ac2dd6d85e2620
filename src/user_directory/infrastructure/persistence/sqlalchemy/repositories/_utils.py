"""Shared utilities for SQLAlchemy repositories."""

import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from user_directory.domain.shared.exceptions import DomainException, StorageError

logger = logging.getLogger(__name__)


def is_unique_violation(error: IntegrityError) -> bool:
    """Whether an IntegrityError was caused by a UNIQUE constraint.

    Matches SQLite ("UNIQUE constraint failed") and PostgreSQL
    ("duplicate key value violates unique constraint") messages.
    """
    message = str(error)
    return "UNIQUE constraint failed" in message or "unique" in message.lower()


@contextmanager
def translate_store_errors(operation: str) -> Iterator[None]:
    """Re-raise unexpected SQLAlchemy errors as StorageError."""
    try:
        yield
    except DomainException:
        raise
    except SQLAlchemyError as e:
        logger.error("Store operation %s failed: %s", operation, e)
        raise StorageError(details={"operation": operation}) from e
