"""Rating validation engine.

Pure functions deciding whether a rating submission, update or list query is
well-formed. Each check appends a human-readable message; every violated rule
is reported, in field order, rather than stopping at the first one. ``None``
stands for "not supplied" for every optional field.
"""
import math
from dataclasses import dataclass, field
from typing import Any, FrozenSet, List, Mapping, Optional, Tuple

from barber_ratings import constants
from barber_ratings.domain.entities.rating import ServiceDetails
from barber_ratings.domain.value_objects.rating_query import resolve_sort_field
from barber_ratings.utils.parsing import is_integral, is_number, parse_date, parse_int


@dataclass(frozen=True)
class ValidationRules:
    """Immutable bounds and allow-lists the engine checks against."""
    min_score: int = constants.MIN_SCORE
    max_score: int = constants.MAX_SCORE
    review_text_max_length: int = constants.REVIEW_TEXT_MAX_LENGTH
    min_page: int = constants.MIN_PAGE
    min_page_size: int = constants.MIN_PAGE_SIZE
    max_page_size: int = constants.MAX_PAGE_SIZE
    sort_fields: Tuple[str, ...] = constants.SORT_FIELDS
    sort_orders: FrozenSet[str] = constants.SORT_ORDERS


DEFAULT_RULES = ValidationRules()


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a validation run."""
    errors: List[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


def _check_score(score: Any, errors: List[str], rules: ValidationRules) -> None:
    if not is_integral(score) or not rules.min_score <= score <= rules.max_score:
        errors.append(
            f"Score must be an integer between {rules.min_score} and {rules.max_score}"
        )


def _check_review_text(review_text: Any, errors: List[str], rules: ValidationRules) -> None:
    if not isinstance(review_text, str):
        errors.append("Review text must be a string")
    elif len(review_text) > rules.review_text_max_length:
        errors.append(
            f"Review text cannot exceed {rules.review_text_max_length} characters"
        )


def _is_valid_price(price: Any) -> bool:
    if not is_number(price) or price < 0:
        return False
    try:
        return math.isfinite(float(price))
    except OverflowError:
        return False


def _check_service_details(service_details: Any, errors: List[str]) -> None:
    if isinstance(service_details, ServiceDetails):
        service_details = {
            "service_name": service_details.service_name,
            "service_date": service_details.service_date,
            "service_price": service_details.service_price,
        }
    if not isinstance(service_details, Mapping):
        errors.append("Service details must be an object")
        return

    name = service_details.get("service_name")
    if name is not None and not isinstance(name, str):
        errors.append("Service name must be a string")

    service_date = service_details.get("service_date")
    if service_date is not None and parse_date(service_date) is None:
        errors.append("Service date must be a valid date")

    price = service_details.get("service_price")
    if price is not None and not _is_valid_price(price):
        errors.append("Service price must be a non-negative number")


def validate_create(
    rater_id: Any,
    subject_id: Any,
    score: Any,
    review_text: Any = None,
    service_details: Any = None,
    rules: ValidationRules = DEFAULT_RULES,
) -> ValidationResult:
    """Validate a new rating submission."""
    errors: List[str] = []

    if not isinstance(rater_id, str) or not rater_id:
        errors.append("Rater id is required and must be a string")

    if not isinstance(subject_id, str) or not subject_id:
        errors.append("Barber id is required and must be a string")

    _check_score(score, errors, rules)

    if review_text is not None:
        _check_review_text(review_text, errors, rules)

    if service_details is not None:
        _check_service_details(service_details, errors)

    return ValidationResult(errors)


def validate_update(
    score: Any = None,
    review_text: Any = None,
    service_details: Any = None,
    rules: ValidationRules = DEFAULT_RULES,
) -> ValidationResult:
    """Validate a partial update; only supplied fields are checked."""
    errors: List[str] = []

    if score is None and review_text is None and service_details is None:
        errors.append(
            "At least one field (score, review_text, or service_details) "
            "must be provided for update"
        )

    if score is not None:
        _check_score(score, errors, rules)

    if review_text is not None:
        _check_review_text(review_text, errors, rules)

    if service_details is not None:
        _check_service_details(service_details, errors)

    return ValidationResult(errors)


def _in_range(value: Any, low: int, high: Optional[int] = None) -> bool:
    number = parse_int(value)
    if number is None or number < low:
        return False
    return high is None or number <= high


def validate_list_query(
    page: Any = None,
    limit: Any = None,
    min_score: Any = None,
    max_score: Any = None,
    sort_field: Any = None,
    sort_order: Any = None,
    rules: ValidationRules = DEFAULT_RULES,
) -> ValidationResult:
    """Validate list parameters; defaults are not applied here."""
    errors: List[str] = []

    if page is not None and not _in_range(page, rules.min_page):
        errors.append("Page must be a positive integer")

    if limit is not None and not _in_range(limit, rules.min_page_size, rules.max_page_size):
        errors.append(
            f"Limit must be a positive integer between {rules.min_page_size} "
            f"and {rules.max_page_size}"
        )

    # min_score <= max_score is not cross-checked; an inverted range matches nothing
    if min_score is not None and not _in_range(min_score, rules.min_score, rules.max_score):
        errors.append(
            f"Minimum score must be between {rules.min_score} and {rules.max_score}"
        )

    if max_score is not None and not _in_range(max_score, rules.min_score, rules.max_score):
        errors.append(
            f"Maximum score must be between {rules.min_score} and {rules.max_score}"
        )

    if sort_field is not None and resolve_sort_field(sort_field) not in rules.sort_fields:
        errors.append(f"Sort field must be one of: {', '.join(rules.sort_fields)}")

    if sort_order is not None and (
        not isinstance(sort_order, str) or sort_order.lower() not in rules.sort_orders
    ):
        errors.append('Sort order must be either "asc" or "desc"')

    return ValidationResult(errors)
