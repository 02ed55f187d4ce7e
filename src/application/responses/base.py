"""Response base classes.

A response is created once per request and carries the request correlation
id, the operation result and zero or more error messages. Callers inspect
`errors` (or `is_valid`) to tell a rejected request from an accepted one;
the operation itself always "succeeds" at the transport level.

Construction paths (every concrete response):
    - from_validation(...): copy every validation message, in order
    - failed(request_id, message): exactly one message, negative result

Usage:
    response = CreateDASResponse.from_validation(command.request_id, result)
    if not response.is_valid:
        for message in response.errors:
            print(message)
"""

from collections.abc import Iterable
from typing import Self
from uuid import UUID

from src.core.validation import ValidationResult


class Response:
    """Ordered, append-only list of error messages."""

    def __init__(self, errors: Iterable[str] = ()) -> None:
        self._errors: list[str] = []
        for message in errors:
            self.add_error(message)

    @property
    def errors(self) -> tuple[str, ...]:
        """Error messages in the order they were added."""
        return tuple(self._errors)

    @property
    def is_valid(self) -> bool:
        """True when no error was recorded."""
        return not self._errors

    def add_error(self, message: str) -> None:
        """Append an error message."""
        self._errors.append(message)


class CreateResponse(Response):
    """Outcome of a create command.

    Attributes:
        request_id: Correlation id of the command.
        entity_id: Identifier of the created record; None when rejected.
    """

    def __init__(
        self,
        request_id: UUID,
        entity_id: UUID | None = None,
        errors: Iterable[str] = (),
    ) -> None:
        super().__init__(errors)
        self._request_id = request_id
        self._entity_id = entity_id

    @property
    def request_id(self) -> UUID:
        """Correlation id of the command."""
        return self._request_id

    @property
    def entity_id(self) -> UUID | None:
        """Identifier of the created record, if any."""
        return self._entity_id

    @classmethod
    def created(cls, request_id: UUID, entity_id: UUID) -> Self:
        """Accepted command: no errors."""
        return cls(request_id, entity_id)

    @classmethod
    def from_validation(
        cls, request_id: UUID, validation_result: ValidationResult
    ) -> Self:
        """Response carrying every validation message verbatim."""
        return cls(request_id, None, validation_result.messages)

    @classmethod
    def failed(cls, request_id: UUID, message: str) -> Self:
        """Rejected command with a single literal message."""
        return cls(request_id, None, (message,))


class CheckExistsResponse(Response):
    """Outcome of an existence check.

    Attributes:
        request_id: Correlation id of the query.
        exists: Whether a matching record exists.
    """

    def __init__(
        self, request_id: UUID, exists: bool = False, errors: Iterable[str] = ()
    ) -> None:
        super().__init__(errors)
        self._request_id = request_id
        self._exists = exists

    @property
    def request_id(self) -> UUID:
        """Correlation id of the query."""
        return self._request_id

    @property
    def exists(self) -> bool:
        """Whether a matching record exists."""
        return self._exists

    @classmethod
    def from_validation(
        cls, request_id: UUID, exists: bool, validation_result: ValidationResult
    ) -> Self:
        """Response with a result flag and every validation message verbatim."""
        return cls(request_id, exists, validation_result.messages)

    @classmethod
    def failed(cls, request_id: UUID, message: str) -> Self:
        """Failed check: exists is False, one literal message."""
        return cls(request_id, False, (message,))
