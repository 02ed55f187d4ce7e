"""Error codes (machine-readable).

One code per validation rule, carried by ValidationError so callers can
react to the kind of violation without parsing messages.
"""

from enum import Enum


class ErrorCode(Enum):
    """Machine-readable error codes."""

    # Validation errors
    REQUIRED_FIELD_MISSING = "required_field_missing"
    MAX_LENGTH_EXCEEDED = "max_length_exceeded"
    INVALID_LENGTH = "invalid_length"
    DIGITS_ONLY = "digits_only"
    INVALID_AMOUNT = "invalid_amount"
