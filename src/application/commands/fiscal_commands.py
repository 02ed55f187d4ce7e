"""Fiscal record commands (CQRS write operations).

Commands carry the raw fields of an incoming request. They are immutable
(frozen=True) and keyword-only (kw_only=True).

Pattern:
- Commands are data containers; the only behavior is to_entity()
- Validation rules live in src/application/validators/
- Handlers validate, then hand the command to the application service
- request_id correlates the command with its response; the entity always
  gets a freshly generated id of its own
"""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.entities.das import DAS
from src.domain.entities.declaracao_ir import DeclaracaoIR
from src.domain.entities.ide_nfse import IdeNFSe


@dataclass(frozen=True, kw_only=True)
class CreateDAS:
    """Register a tax-payment slip.

    Attributes:
        reference_month: Month the payment refers to (required, max 20).
        due_date: Payment due date (required).
        reference_year: Year the payment refers to (4 digits).
        payment_value: Amount due (greater than zero).
        document_number: Slip document number (required, digits, max 50).
        bar_code: Slip barcode digits (required, digits, max 48).
        request_id: Correlation id of the request.

    Example:
        >>> command = CreateDAS(
        ...     reference_month="Outubro",
        ...     due_date=date(2023, 11, 20),
        ...     reference_year="2023",
        ...     payment_value=Decimal("2000"),
        ...     document_number="283789234789347",
        ...     bar_code="6587346857969934863",
        ... )
        >>> response = await handler.handle(command)
    """

    reference_month: str
    due_date: date
    reference_year: str
    payment_value: Decimal
    document_number: str
    bar_code: str
    request_id: UUID = field(default_factory=uuid7)

    def to_entity(self) -> DAS:
        """Materialize a new DAS entity with a fresh identifier."""
        return DAS(
            reference_month=self.reference_month,
            due_date=self.due_date,
            reference_year=self.reference_year,
            payment_value=self.payment_value,
            document_number=self.document_number,
            bar_code=self.bar_code,
        )


@dataclass(frozen=True, kw_only=True)
class CreateDeclaracaoIR:
    """Register an income-tax declaration.

    Attributes:
        cnpj: Company taxpayer id (14 digits).
        declaration_number: Receipt number (required, max 50).
        fiscal_year: Fiscal year (4 digits).
        delivery_date: Delivery date (required).
        rectifying: Whether the declaration rectifies a previous one.
        request_id: Correlation id of the request.
    """

    cnpj: str
    declaration_number: str
    fiscal_year: str
    delivery_date: date
    rectifying: bool = False
    request_id: UUID = field(default_factory=uuid7)

    def to_entity(self) -> DeclaracaoIR:
        """Materialize a new DeclaracaoIR entity with a fresh identifier."""
        return DeclaracaoIR(
            cnpj=self.cnpj,
            declaration_number=self.declaration_number,
            fiscal_year=self.fiscal_year,
            delivery_date=self.delivery_date,
            rectifying=self.rectifying,
        )


@dataclass(frozen=True, kw_only=True)
class CreateIdeNFSe:
    """Register the identifying header of an NFSe.

    Attributes:
        number: Invoice number (digits, max 15).
        series: Invoice series (required, max 5).
        type: Invoice type (required, max 20).
        issue_date: Issue date (required).
        municipality_code: IBGE municipality code (7 digits).
        request_id: Correlation id of the request.
    """

    number: str
    series: str
    type: str
    issue_date: date
    municipality_code: str
    request_id: UUID = field(default_factory=uuid7)

    def to_entity(self) -> IdeNFSe:
        """Materialize a new IdeNFSe entity with a fresh identifier."""
        return IdeNFSe(
            number=self.number,
            series=self.series,
            type=self.type,
            issue_date=self.issue_date,
            municipality_code=self.municipality_code,
        )
