"""Tests for the rating validation engine."""
from datetime import date, datetime

import pytest

from barber_ratings.application.validation.rating_validation import (
    ValidationRules,
    validate_create,
    validate_list_query,
    validate_update,
)
from barber_ratings.domain.entities.rating import ServiceDetails

SCORE_ERROR = "Score must be an integer between 1 and 5"
NO_FIELDS_ERROR = (
    "At least one field (score, review_text, or service_details) must be provided for update"
)


class TestValidateCreate:
    """Test validation of new submissions."""

    def test_minimal_valid_submission(self):
        result = validate_create("user_1", "barber_1", 5)
        assert result.valid is True
        assert result.errors == []

    def test_full_valid_submission(self, sample_service_details):
        result = validate_create(
            "user_1", "barber_1", 4, "Great fade, friendly staff", sample_service_details
        )
        assert result.valid is True

    def test_missing_ids_are_reported_in_order(self):
        result = validate_create(None, "", 3)
        assert result.errors == [
            "Rater id is required and must be a string",
            "Barber id is required and must be a string",
        ]

    def test_non_string_ids_rejected(self):
        result = validate_create(123, ["barber"], 3)
        assert len(result.errors) == 2

    @pytest.mark.parametrize("score", [0, 6, -1, 2.5, "5", None, True, float("nan")])
    def test_invalid_scores(self, score):
        result = validate_create("user_1", "barber_1", score)
        assert result.errors == [SCORE_ERROR]

    @pytest.mark.parametrize("score", [1, 3, 5, 4.0])
    def test_valid_scores(self, score):
        assert validate_create("user_1", "barber_1", score).valid

    def test_review_text_at_limit_is_accepted(self):
        assert validate_create("user_1", "barber_1", 5, "x" * 500).valid

    def test_review_text_over_limit_is_rejected(self):
        result = validate_create("user_1", "barber_1", 5, "x" * 501)
        assert result.errors == ["Review text cannot exceed 500 characters"]

    def test_review_text_must_be_string(self):
        result = validate_create("user_1", "barber_1", 5, 42)
        assert result.errors == ["Review text must be a string"]

    def test_empty_review_text_is_allowed(self):
        assert validate_create("user_1", "barber_1", 5, "").valid

    @pytest.mark.parametrize("details", ["haircut", 12, ["haircut"], True])
    def test_scalar_service_details_rejected(self, details):
        result = validate_create("user_1", "barber_1", 5, None, details)
        assert result.errors == ["Service details must be an object"]

    def test_service_detail_fields_checked(self):
        result = validate_create(
            "user_1",
            "barber_1",
            5,
            None,
            {"service_name": 7, "service_date": "not-a-date", "service_price": -3},
        )
        assert result.errors == [
            "Service name must be a string",
            "Service date must be a valid date",
            "Service price must be a non-negative number",
        ]

    @pytest.mark.parametrize("price", ["25", True, float("nan")])
    def test_non_numeric_price_rejected(self, price):
        result = validate_create("user_1", "barber_1", 5, None, {"service_price": price})
        assert result.errors == ["Service price must be a non-negative number"]

    @pytest.mark.parametrize("price", [10 ** 400, float("inf")])
    def test_price_too_large_for_a_float_rejected(self, price):
        result = validate_create("user_1", "barber_1", 5, None, {"service_price": price})
        assert result.errors == ["Service price must be a non-negative number"]

    def test_zero_price_is_accepted(self):
        assert validate_create("user_1", "barber_1", 5, None, {"service_price": 0}).valid

    @pytest.mark.parametrize(
        "service_date",
        ["2024-02-29", "2024-01-15T10:30:00Z", date(2024, 1, 1), datetime(2024, 1, 1, 9)],
    )
    def test_valid_service_dates(self, service_date):
        assert validate_create("user_1", "barber_1", 5, None, {"service_date": service_date}).valid

    @pytest.mark.parametrize("service_date", ["2023-02-29", "", "yesterday", 20240115])
    def test_invalid_service_dates(self, service_date):
        result = validate_create("user_1", "barber_1", 5, None, {"service_date": service_date})
        assert result.errors == ["Service date must be a valid date"]

    def test_empty_service_details_is_valid(self):
        assert validate_create("user_1", "barber_1", 5, None, {}).valid

    def test_service_details_instance_is_accepted(self):
        details = ServiceDetails(service_name="Shave", service_price=10.0)
        assert validate_create("user_1", "barber_1", 5, None, details).valid

    def test_all_violations_are_collected(self):
        result = validate_create("", None, 9, "x" * 600, "cut")
        assert len(result.errors) == 5
        assert result.valid is False

    def test_custom_rules_are_honoured(self):
        rules = ValidationRules(review_text_max_length=10)
        result = validate_create("user_1", "barber_1", 5, "x" * 11, rules=rules)
        assert result.errors == ["Review text cannot exceed 10 characters"]


class TestValidateUpdate:
    """Test validation of partial updates."""

    def test_no_fields_is_an_error(self):
        result = validate_update()
        assert result.errors == [NO_FIELDS_ERROR]

    def test_single_field_is_enough(self):
        assert validate_update(score=2).valid
        assert validate_update(review_text="Better this time").valid
        assert validate_update(service_details={"service_name": "Beard trim"}).valid

    def test_empty_review_text_counts_as_supplied(self):
        assert validate_update(review_text="").valid

    def test_invalid_score(self):
        assert validate_update(score=7).errors == [SCORE_ERROR]

    def test_field_errors_are_collected(self):
        result = validate_update(score=0, review_text=5, service_details="x")
        assert result.errors == [
            SCORE_ERROR,
            "Review text must be a string",
            "Service details must be an object",
        ]

    def test_long_review_text(self):
        result = validate_update(review_text="y" * 501)
        assert result.errors == ["Review text cannot exceed 500 characters"]


class TestValidateListQuery:
    """Test validation of list parameters."""

    def test_no_parameters_is_valid(self):
        assert validate_list_query().valid

    def test_typical_query_strings(self):
        result = validate_list_query("2", "20", "3", "5", "score", "ASC")
        assert result.valid

    def test_int_values_accepted(self):
        assert validate_list_query(page=1, limit=100, min_score=1, max_score=5).valid

    @pytest.mark.parametrize("page", ["0", "-1", "abc", "1.5", "", True])
    def test_invalid_page(self, page):
        assert validate_list_query(page=page).errors == ["Page must be a positive integer"]

    @pytest.mark.parametrize("limit", ["0", "101", "ten"])
    def test_invalid_limit(self, limit):
        assert validate_list_query(limit=limit).errors == [
            "Limit must be a positive integer between 1 and 100"
        ]

    def test_invalid_score_bounds(self):
        result = validate_list_query(min_score="0", max_score="6")
        assert result.errors == [
            "Minimum score must be between 1 and 5",
            "Maximum score must be between 1 and 5",
        ]

    def test_inverted_score_range_is_not_flagged(self):
        assert validate_list_query(min_score="5", max_score="1").valid

    def test_unknown_sort_field(self):
        result = validate_list_query(sort_field="rating")
        assert result.errors == ["Sort field must be one of: score, created_at, updated_at"]

    @pytest.mark.parametrize("field", ["createdAt", "updatedAt", "created_at", "score"])
    def test_camel_case_sort_fields_accepted(self, field):
        assert validate_list_query(sort_field=field).valid

    @pytest.mark.parametrize("order", ["asc", "DESC", "Asc"])
    def test_sort_order_case_insensitive(self, order):
        assert validate_list_query(sort_order=order).valid

    @pytest.mark.parametrize("order", ["up", "", 1])
    def test_invalid_sort_order(self, order):
        assert validate_list_query(sort_order=order).errors == [
            'Sort order must be either "asc" or "desc"'
        ]

    def test_all_violations_in_field_order(self):
        result = validate_list_query("0", "500", "9", "9", "name", "sideways")
        assert len(result.errors) == 6
        assert result.errors[0].startswith("Page")
        assert result.errors[-1].startswith("Sort order")
