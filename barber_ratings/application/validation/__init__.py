"""Rating validation engine."""
from barber_ratings.application.validation.rating_validation import (
    DEFAULT_RULES,
    ValidationResult,
    ValidationRules,
    validate_create,
    validate_list_query,
    validate_update,
)

__all__ = [
    "DEFAULT_RULES",
    "ValidationResult",
    "ValidationRules",
    "validate_create",
    "validate_list_query",
    "validate_update",
]
