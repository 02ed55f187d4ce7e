"""Validation framework for command and query input.

Rule functions check a single value and return a Result. Rule sets (one per
command, see src/application/validators/) run the rules for every field and
collect the failures into a ValidationResult, preserving the order in which
the rules ran. Responses copy ValidationResult.messages verbatim.

Usage:
    from src.core.validation import ValidationResult, validate_not_empty

    result = ValidationResult()
    result.check(validate_not_empty(cmd.uf, "uf"))
    if not result.is_valid:
        for message in result.messages:
            print(message)
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any

from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success


@dataclass
class ValidationResult:
    """Ordered collection of rule violations.

    Attributes:
        errors: Violations in the order they were recorded.
    """

    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        """True when no rule was violated."""
        return not self.errors

    @property
    def messages(self) -> list[str]:
        """Human-readable messages, one per violation, in order."""
        return [error.message for error in self.errors]

    def check(self, result: Result[Any, ValidationError]) -> bool:
        """Record the outcome of a rule.

        Args:
            result: Outcome of a single rule function.

        Returns:
            True if the rule passed, False if a violation was recorded.
        """
        if isinstance(result, Failure):
            self.errors.append(result.error)
            return False
        return True

    def require_text(
        self,
        value: str | None,
        field_name: str,
        *,
        max_length: int | None = None,
        exact_length: int | None = None,
        digits: bool = False,
    ) -> bool:
        """Run the text rules for one field, stopping at the first violation.

        Args:
            value: Field value.
            field_name: Name reported in the violation.
            max_length: Maximum allowed length, if any.
            exact_length: Required length, if any.
            digits: Whether the value must contain only digits.

        Returns:
            True if every rule passed.
        """
        # `value is None` only narrows the type; validate_not_empty fails on None
        if not self.check(validate_not_empty(value, field_name)) or value is None:
            return False
        if exact_length is not None and not self.check(
            validate_exact_length(value, exact_length, field_name)
        ):
            return False
        if max_length is not None and not self.check(
            validate_max_length(value, max_length, field_name)
        ):
            return False
        if digits:
            return self.check(validate_digits(value, field_name))
        return True


def validate_not_empty(value: Any, field_name: str) -> Result[Any, ValidationError]:
    """Validate that a value is present (not None, not blank).

    Args:
        value: Value to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if present, Failure with ValidationError otherwise.
    """
    if value is None or (isinstance(value, str) and not value.strip()):
        return Failure(
            error=ValidationError(
                code=ErrorCode.REQUIRED_FIELD_MISSING,
                message=f"{field_name} cannot be empty",
                field=field_name,
                rule="required",
            )
        )
    return Success(value=value)


def validate_max_length(
    value: str, max_length: int, field_name: str
) -> Result[str, ValidationError]:
    """Validate maximum string length.

    Args:
        value: String to validate.
        max_length: Maximum allowed length.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if len(value) > max_length:
        return Failure(
            error=ValidationError(
                code=ErrorCode.MAX_LENGTH_EXCEEDED,
                message=f"{field_name} must be at most {max_length} characters",
                field=field_name,
                rule="max_length",
            )
        )
    return Success(value=value)


def validate_exact_length(
    value: str, length: int, field_name: str
) -> Result[str, ValidationError]:
    """Validate that a string has exactly the given length.

    Args:
        value: String to validate.
        length: Required length.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if len(value) != length:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_LENGTH,
                message=f"{field_name} must be exactly {length} characters",
                field=field_name,
                rule="exact_length",
            )
        )
    return Success(value=value)


def validate_digits(value: str, field_name: str) -> Result[str, ValidationError]:
    """Validate that a string contains only ASCII digits.

    Args:
        value: String to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    if not (value.isascii() and value.isdigit()):
        return Failure(
            error=ValidationError(
                code=ErrorCode.DIGITS_ONLY,
                message=f"{field_name} must contain only digits",
                field=field_name,
                rule="digits",
            )
        )
    return Success(value=value)


def validate_positive_amount(
    value: Decimal, field_name: str
) -> Result[Decimal, ValidationError]:
    """Validate that a monetary amount is greater than zero.

    Args:
        value: Amount to validate.
        field_name: Name of the field being validated.

    Returns:
        Success with value if valid, Failure with ValidationError otherwise.
    """
    # NaN and infinities are not comparable amounts
    if not value.is_finite() or value <= 0:
        return Failure(
            error=ValidationError(
                code=ErrorCode.INVALID_AMOUNT,
                message=f"{field_name} must be greater than zero",
                field=field_name,
                rule="positive",
            )
        )
    return Success(value=value)
