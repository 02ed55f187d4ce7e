"""Result types for railway-oriented programming.

Validation rules and other operations that can fail as part of normal
business flow return a Result instead of raising. Infrastructure faults
(repository errors) are NOT wrapped in Results; they propagate.

Usage:
    def validate_uf(uf: str) -> Result[str, ValidationError]:
        if len(uf) != 2:
            return Failure(error=ValidationError(...))
        return Success(value=uf.upper())

    match validate_uf("sp"):
        case Success(value=uf):
            print(f"UF: {uf}")
        case Failure(error=error):
            print(f"Error: {error.message}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful outcome.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed outcome.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
