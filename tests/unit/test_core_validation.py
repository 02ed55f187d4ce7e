"""Unit tests for the validation framework.

Tests cover:
- Rule functions (Success/Failure, messages, rule names, error codes)
- ValidationResult ordering and short-circuit per field
"""

from decimal import Decimal

import pytest

from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.core.validation import (
    ValidationResult,
    validate_digits,
    validate_exact_length,
    validate_max_length,
    validate_not_empty,
    validate_positive_amount,
)


@pytest.mark.unit
class TestRuleFunctions:
    """Test the single-value rule functions."""

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_not_empty_rejects_missing_values(self, value):
        result = validate_not_empty(value, "uf")

        assert isinstance(result, Failure)
        assert result.error.message == "uf cannot be empty"
        assert result.error.code == ErrorCode.REQUIRED_FIELD_MISSING
        assert result.error.field == "uf"
        assert result.error.rule == "required"

    def test_not_empty_accepts_non_string_values(self):
        result = validate_not_empty(Decimal("0"), "payment_value")

        assert result == Success(value=Decimal("0"))

    def test_max_length_boundary(self):
        assert isinstance(validate_max_length("a" * 100, 100, "country_name"), Success)

        result = validate_max_length("a" * 101, 100, "country_name")

        assert isinstance(result, Failure)
        assert result.error.message == "country_name must be at most 100 characters"
        assert result.error.rule == "max_length"

    def test_exact_length(self):
        result = validate_exact_length("S", 2, "uf")

        assert isinstance(result, Failure)
        assert result.error.message == "uf must be exactly 2 characters"
        assert result.error.code == ErrorCode.INVALID_LENGTH

    @pytest.mark.parametrize("value", ["12a4", "12 4", "١٢٣٤"])
    def test_digits_rejects_non_ascii_digits(self, value):
        result = validate_digits(value, "cnpj")

        assert isinstance(result, Failure)
        assert result.error.message == "cnpj must contain only digits"

    @pytest.mark.parametrize("value", [Decimal("0"), Decimal("-0.01")])
    def test_positive_amount_rejects_zero_and_negative(self, value):
        result = validate_positive_amount(value, "payment_value")

        assert isinstance(result, Failure)
        assert result.error.message == "payment_value must be greater than zero"
        assert result.error.code == ErrorCode.INVALID_AMOUNT

    @pytest.mark.parametrize(
        "value", [Decimal("NaN"), Decimal("sNaN"), Decimal("Infinity"), Decimal("-Infinity")]
    )
    def test_positive_amount_rejects_non_finite(self, value):
        result = validate_positive_amount(value, "payment_value")

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_AMOUNT


@pytest.mark.unit
class TestValidationResult:
    """Test ValidationResult collection behavior."""

    def test_new_result_is_valid(self):
        result = ValidationResult()

        assert result.is_valid is True
        assert result.messages == []

    def test_check_records_failures_in_order(self):
        result = ValidationResult()

        assert result.check(validate_not_empty("", "first")) is False
        assert result.check(validate_not_empty("ok", "second")) is True
        assert result.check(validate_not_empty(None, "third")) is False

        assert result.messages == ["first cannot be empty", "third cannot be empty"]

    def test_require_text_stops_at_first_violation(self):
        """An empty value reports only the required rule."""
        result = ValidationResult()

        passed = result.require_text("", "cnpj", exact_length=14, digits=True)

        assert passed is False
        assert result.messages == ["cnpj cannot be empty"]

    def test_require_text_checks_length_before_digits(self):
        result = ValidationResult()

        result.require_text("12ab", "cnpj", exact_length=14, digits=True)

        assert result.messages == ["cnpj must be exactly 14 characters"]

    def test_require_text_checks_digits_last(self):
        result = ValidationResult()

        result.require_text("1234567800019X", "cnpj", exact_length=14, digits=True)

        assert result.messages == ["cnpj must contain only digits"]

    def test_require_text_records_missing_value_once(self):
        result = ValidationResult()

        passed = result.require_text(None, "uf", exact_length=2)

        assert passed is False
        assert result.messages == ["uf cannot be empty"]

    def test_require_text_passes_valid_value(self):
        result = ValidationResult()

        assert result.require_text("SP", "uf", exact_length=2) is True
        assert result.is_valid
