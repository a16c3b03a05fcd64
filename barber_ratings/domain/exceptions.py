"""Rating error taxonomy.

Every failure the rating service can report derives from ``RatingError`` so
the API layer can map each kind onto an HTTP response in one place.
"""
from typing import List, Sequence


class RatingError(Exception):
    """Base class for all rating service failures."""


class RatingValidationError(RatingError):
    """Caller-correctable input problem; carries every violated rule."""

    def __init__(self, errors: Sequence[str], message: str = "Validation failed"):
        super().__init__(message)
        self.message = message
        self.errors: List[str] = list(errors)


class RatingNotFoundError(RatingError):
    """A referenced barber, user or rating does not exist."""

    def __init__(self, entity: str):
        super().__init__(f"{entity.capitalize()} not found")
        self.entity = entity
        self.message = f"{entity.capitalize()} not found"


class RatingConflictError(RatingError):
    """Two submissions raced to create the same (rater, barber) rating."""

    def __init__(self, message: str = "Rating already exists for this user and barber"):
        super().__init__(message)
        self.message = message


class RatingStoreError(RatingError):
    """Unexpected persistence failure; never shown to callers in detail."""


class ConstraintViolation(RatingStoreError):
    """The store rejected a write because of an integrity constraint."""
