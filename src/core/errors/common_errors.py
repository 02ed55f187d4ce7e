"""Common error classes used across all modules and layers.

Error Types:
- ValidationError: A single rule violation (field, rule, message)

Usage:
    from src.core.errors import ValidationError
    from src.core.enums import ErrorCode
    from src.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.REQUIRED_FIELD_MISSING,
        message="uf cannot be empty",
        field="uf",
        rule="required",
    ))
"""

from dataclasses import dataclass

from src.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        rule: Name of the violated rule (required, max_length, ...).
        details: Additional context.
    """

    field: str | None = None
    rule: str | None = None
