"""DAS domain entity.

A DAS ("Documento de Arrecadação do Simples Nacional") is the periodic
tax-payment slip of the Simples Nacional regime. Each slip refers to one
month of one year and is identified externally by its document number and
barcode.

Architecture:
    - Pure domain entity (no infrastructure dependencies)
    - Data container; validation happens on the command side
    - Identity generated at construction, immutable afterwards

Usage:
    from datetime import date
    from decimal import Decimal
    from src.domain.entities import DAS

    das = DAS(
        reference_month="Outubro",
        due_date=date(2023, 11, 20),
        reference_year="2023",
        payment_value=Decimal("2000.00"),
        document_number="283789234789347",
        bar_code="6587346857969934863",
    )
"""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from decimal import Decimal
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True)
class DAS:
    """Tax-payment slip.

    Attributes:
        id: Unique slip identifier (generated).
        reference_month: Month the payment refers to (e.g. "Outubro").
        due_date: Payment due date.
        reference_year: Year the payment refers to (e.g. "2023").
        payment_value: Amount due, in BRL.
        document_number: Number printed on the slip.
        bar_code: Digits of the slip barcode.
        created_at: Record creation timestamp.
    """

    reference_month: str
    due_date: date
    reference_year: str
    payment_value: Decimal
    document_number: str
    bar_code: str

    id: UUID = field(default_factory=uuid7)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def period_label(self) -> str:
        """Return "<month>/<year>" label used on listings.

        Example:
            >>> das.period_label()
            'Outubro/2023'
        """
        return f"{self.reference_month}/{self.reference_year}"
