"""Income-tax declaration queries (CQRS read operations).

Queries are immutable dataclasses with question-like names. They NEVER
change state and do NOT emit domain events.
"""

from dataclasses import dataclass, field
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True)
class CheckDeclaracaoIRExistsByCnpj:
    """Does a declaration exist for this company?

    Attributes:
        cnpj: Company taxpayer id (14 digits).
        request_id: Correlation id of the request.

    Example:
        >>> query = CheckDeclaracaoIRExistsByCnpj(cnpj="12345678000195")
        >>> response = await handler.handle(query)
        >>> response.exists
        True
    """

    cnpj: str
    request_id: UUID = field(default_factory=uuid7)


@dataclass(frozen=True, kw_only=True)
class CheckDeclaracaoIRExistsByDeclarationNumber:
    """Does a declaration exist with this receipt number?

    Attributes:
        declaration_number: Declaration receipt number.
        request_id: Correlation id of the request.
    """

    declaration_number: str
    request_id: UUID = field(default_factory=uuid7)
