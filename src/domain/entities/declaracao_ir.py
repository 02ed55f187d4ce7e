"""DeclaracaoIR domain entity.

Income-tax declaration ("Declaração de Imposto de Renda") filed by a company.
Looked up by the company's CNPJ or by the declaration (receipt) number.
"""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True)
class DeclaracaoIR:
    """Income-tax declaration.

    Attributes:
        id: Unique declaration identifier (generated).
        cnpj: 14-digit company taxpayer id.
        declaration_number: Receipt number issued on delivery.
        fiscal_year: Fiscal year ("exercício") the declaration refers to.
        delivery_date: Date the declaration was delivered.
        rectifying: True for a rectifying ("retificadora") declaration.
        created_at: Record creation timestamp.
    """

    cnpj: str
    declaration_number: str
    fiscal_year: str
    delivery_date: date
    rectifying: bool = False

    id: UUID = field(default_factory=uuid7)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
