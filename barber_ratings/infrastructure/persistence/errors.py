"""Translation of SQLAlchemy failures into the rating error taxonomy."""
import logging
from contextlib import contextmanager

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from barber_ratings.domain.exceptions import ConstraintViolation, RatingStoreError

logger = logging.getLogger(__name__)

# MySQL ER_DUP_ENTRY and the PostgreSQL unique_violation SQLSTATE
MYSQL_DUPLICATE_ENTRY = 1062
POSTGRES_UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: IntegrityError) -> bool:
    """True when the driver reports a duplicate key rather than another integrity failure."""
    orig = error.orig
    if getattr(orig, "pgcode", None) == POSTGRES_UNIQUE_VIOLATION:
        return True
    args = getattr(orig, "args", ())
    if args and args[0] == MYSQL_DUPLICATE_ENTRY:
        return True
    return "UNIQUE constraint failed" in str(orig)


@contextmanager
def translate_store_errors(session: Session, action: str):
    """Roll back and re-raise store failures as domain exceptions.

    Only duplicate keys become ``ConstraintViolation``; foreign key and check
    failures are reported like any other store error.
    """
    try:
        yield
    except IntegrityError as e:
        session.rollback()
        if is_unique_violation(e):
            raise ConstraintViolation(f"Failed to {action}: {e.orig}") from e
        logger.error(f"Failed to {action}: {e}")
        raise RatingStoreError(f"Failed to {action}") from e
    except SQLAlchemyError as e:
        session.rollback()
        logger.error(f"Failed to {action}: {e}")
        raise RatingStoreError(f"Failed to {action}") from e
