"""IdeNFSe domain entity.

Identifying header ("identificação") of a municipal electronic service
invoice (NFSe): number, series, type, issue date and the IBGE code of the
issuing municipality.
"""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True)
class IdeNFSe:
    """NFSe identifying header.

    Attributes:
        id: Unique identifier (generated).
        number: Invoice number.
        series: Invoice series.
        type: Invoice type (e.g. "RPS").
        issue_date: Date the invoice was issued.
        municipality_code: 7-digit IBGE code of the issuing municipality.
        created_at: Record creation timestamp.
    """

    number: str
    series: str
    type: str
    issue_date: date
    municipality_code: str

    id: UUID = field(default_factory=uuid7)
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
