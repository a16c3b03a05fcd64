"""Rating domain entity - pure business logic."""
from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any, Dict, Optional

from barber_ratings.constants import MAX_SCORE, MIN_SCORE, REVIEW_TEXT_MAX_LENGTH


@dataclass(frozen=True)
class RatingKey:
    """Compound key: one rating per rater per barber."""
    rater_id: str
    subject_id: str


@dataclass(frozen=True)
class ServiceDetails:
    """Optional details about the service that was rated."""
    service_name: Optional[str] = None
    service_date: Optional[date] = None
    service_price: Optional[float] = None

    def is_empty(self) -> bool:
        """True when none of the fields carries a value."""
        return (
            self.service_name is None
            and self.service_date is None
            and self.service_price is None
        )

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            "service_name": self.service_name,
            "service_date": self.service_date.isoformat() if self.service_date else None,
            "service_price": self.service_price,
        }


@dataclass
class Rating:
    """Rating domain entity."""
    rater_id: str
    subject_id: str
    score: int
    review_text: Optional[str] = None
    service_details: Optional[ServiceDetails] = None
    id: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def key(self) -> RatingKey:
        return RatingKey(rater_id=self.rater_id, subject_id=self.subject_id)

    def is_valid(self) -> bool:
        """Validate rating business rules."""
        return bool(
            self.rater_id
            and self.subject_id
            and isinstance(self.score, int)
            and MIN_SCORE <= self.score <= MAX_SCORE
            and (self.review_text is None or len(self.review_text) <= REVIEW_TEXT_MAX_LENGTH)
        )

    def copy(self) -> "Rating":
        """Detached copy, so stored instances are never shared with callers."""
        return replace(self)


@dataclass
class RatingData:
    """Mutable fields written by a submission (everything but the key)."""
    score: int
    review_text: Optional[str] = None
    service_details: Optional[ServiceDetails] = None


@dataclass
class RatingChanges:
    """Fields supplied to an update; ``fields`` names which ones to apply."""
    score: Optional[int] = None
    review_text: Optional[str] = None
    service_details: Optional[ServiceDetails] = None
    fields: frozenset = field(default_factory=frozenset)

    def apply_to(self, rating: Rating) -> None:
        """Write the supplied fields onto ``rating``."""
        for name in self.fields:
            setattr(rating, name, getattr(self, name))
