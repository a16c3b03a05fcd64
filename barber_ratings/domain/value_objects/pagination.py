"""Pagination value object - immutable and derived from counts."""
import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Pagination:
    """Immutable pagination block for a page of results."""
    current_page: int
    total_pages: int
    total_ratings: int
    has_next_page: bool
    has_prev_page: bool

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        """Derive the pagination block for ``page`` of ``total`` items."""
        if page < 1:
            raise ValueError(f"Page must be at least 1, got {page}")
        if limit < 1:
            raise ValueError(f"Limit must be at least 1, got {limit}")
        if total < 0:
            raise ValueError(f"Total cannot be negative, got {total}")
        total_pages = math.ceil(total / limit)
        return cls(
            current_page=page,
            total_pages=total_pages,
            total_ratings=total,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )

    @staticmethod
    def offset(page: int, limit: int) -> int:
        """Number of items to skip before ``page``."""
        return (page - 1) * limit

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "current_page": self.current_page,
            "total_pages": self.total_pages,
            "total_ratings": self.total_ratings,
            "has_next_page": self.has_next_page,
            "has_prev_page": self.has_prev_page,
        }
