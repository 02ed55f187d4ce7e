"""Application service contracts.

Protocols the command/query handlers depend on. The concrete services in
this package satisfy them structurally; tests substitute AsyncMocks.
"""

from datetime import date
from typing import Protocol
from uuid import UUID

from src.application.commands.fiscal_commands import (
    CreateDAS,
    CreateDeclaracaoIR,
    CreateIdeNFSe,
)
from src.application.commands.location_commands import (
    CreateCountry,
    CreateDistrict,
    CreateState,
)
from src.application.view_models.fiscal_view_models import (
    DASViewModel,
    DeclaracaoIRViewModel,
    IdeNFSeViewModel,
)
from src.application.view_models.location_view_models import (
    CountryViewModel,
    DistrictViewModel,
    StateViewModel,
)


class DASAppServiceProtocol(Protocol):
    """Tax-payment slip use cases."""

    async def get_by_reference_month(self, reference_month: str) -> DASViewModel | None: ...

    async def get_by_due_date(self, due_date: date) -> DASViewModel | None: ...

    async def get_by_document_number(self, document_number: str) -> DASViewModel | None: ...

    async def get_by_reference_year(self, reference_year: str) -> DASViewModel | None: ...

    async def save(self, command: CreateDAS) -> UUID: ...


class DeclaracaoIRAppServiceProtocol(Protocol):
    """Income-tax declaration use cases."""

    async def get_by_cnpj(self, cnpj: str) -> DeclaracaoIRViewModel | None: ...

    async def get_by_declaration_number(
        self, declaration_number: str
    ) -> DeclaracaoIRViewModel | None: ...

    async def save(self, command: CreateDeclaracaoIR) -> UUID: ...


class IdeNFSeAppServiceProtocol(Protocol):
    """NFSe identifying header use cases."""

    async def get_by_number(self, number: str) -> IdeNFSeViewModel | None: ...

    async def save(self, command: CreateIdeNFSe) -> UUID: ...


class CountryAppServiceProtocol(Protocol):
    """Country use cases."""

    async def get_by_country_name(self, country_name: str) -> CountryViewModel | None: ...

    async def save(self, command: CreateCountry) -> UUID: ...


class StateAppServiceProtocol(Protocol):
    """State use cases."""

    async def get_by_uf(self, uf: str) -> StateViewModel | None: ...

    async def get_by_state_name(self, state_name: str) -> StateViewModel | None: ...

    async def country_exists(self, country_id: UUID) -> bool: ...

    async def save(self, command: CreateState) -> UUID: ...


class DistrictAppServiceProtocol(Protocol):
    """District use cases."""

    async def get_by_name(self, name: str) -> DistrictViewModel | None: ...

    async def save(self, command: CreateDistrict) -> UUID: ...
