"""Fiscal back-office domain events.

Published by the application services after a successful repository write
(*Created) and by the create handlers when a command is turned down
(FiscalCommandRejected). Handlers subscribe by exact event type.

Events:
    - DASCreated
    - DeclaracaoIRCreated
    - IdeNFSeCreated
    - CountryCreated
    - StateCreated
    - DistrictCreated
    - FiscalCommandRejected
"""

from dataclasses import dataclass, field
from uuid import UUID

from src.domain.events.base_event import DomainEvent


# =============================================================================
# Tax records
# =============================================================================


@dataclass(frozen=True, kw_only=True, slots=True)
class DASCreated(DomainEvent):
    """Tax-payment slip persisted.

    Attributes:
        das_id: Identifier of the new slip.
        document_number: Slip document number.
        reference_month: Month the slip refers to.
        reference_year: Year the slip refers to.
    """

    das_id: UUID
    document_number: str
    reference_month: str
    reference_year: str


@dataclass(frozen=True, kw_only=True, slots=True)
class DeclaracaoIRCreated(DomainEvent):
    """Income-tax declaration persisted.

    Attributes:
        declaracao_ir_id: Identifier of the new declaration.
        cnpj: Company taxpayer id.
        declaration_number: Declaration receipt number.
    """

    declaracao_ir_id: UUID
    cnpj: str
    declaration_number: str


@dataclass(frozen=True, kw_only=True, slots=True)
class IdeNFSeCreated(DomainEvent):
    """NFSe identifying header persisted.

    Attributes:
        ide_nfse_id: Identifier of the new header.
        number: Invoice number.
        series: Invoice series.
    """

    ide_nfse_id: UUID
    number: str
    series: str


# =============================================================================
# Geographic master data
# =============================================================================


@dataclass(frozen=True, kw_only=True, slots=True)
class CountryCreated(DomainEvent):
    """Country persisted."""

    country_id: UUID
    country_name: str


@dataclass(frozen=True, kw_only=True, slots=True)
class StateCreated(DomainEvent):
    """State persisted."""

    state_id: UUID
    uf: str
    country_id: UUID | None = None


@dataclass(frozen=True, kw_only=True, slots=True)
class DistrictCreated(DomainEvent):
    """District persisted."""

    district_id: UUID
    name: str


# =============================================================================
# Rejections
# =============================================================================


@dataclass(frozen=True, kw_only=True, slots=True)
class FiscalCommandRejected(DomainEvent):
    """A create command was turned down before reaching the repository.

    Attributes:
        command_name: Command class name (e.g. "CreateDAS").
        request_id: Correlation id of the rejected request.
        reasons: Messages returned to the caller, in order.
    """

    command_name: str
    request_id: UUID
    reasons: tuple[str, ...] = field(default_factory=tuple)
