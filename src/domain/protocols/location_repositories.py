"""Repository protocols for geographic master data.

Ports for Country, State and District persistence. Infrastructure layer
implements them (see src/infrastructure/persistence/in_memory/).
"""

from typing import Protocol
from uuid import UUID

from src.domain.entities.country import Country
from src.domain.entities.district import District
from src.domain.entities.state import State


class CountryRepository(Protocol):
    """Country repository protocol (port)."""

    async def add(self, country: Country) -> None:
        """Persist a new country."""
        ...

    async def get_by_country_name(self, country_name: str) -> Country | None:
        """Find country by name.

        Returns:
            Country if found, None otherwise.
        """
        ...

    async def get_by_id(self, country_id: UUID) -> Country | None:
        """Find country by identifier.

        Returns:
            Country if found, None otherwise.
        """
        ...


class StateRepository(Protocol):
    """State repository protocol (port)."""

    async def add(self, state: State) -> None:
        """Persist a new state."""
        ...

    async def get_by_uf(self, uf: str) -> State | None:
        """Find state by two-letter code.

        Returns:
            State if found, None otherwise.
        """
        ...

    async def get_by_state_name(self, state_name: str) -> State | None:
        """Find state by name.

        Returns:
            State if found, None otherwise.
        """
        ...


class DistrictRepository(Protocol):
    """District repository protocol (port)."""

    async def add(self, district: District) -> None:
        """Persist a new district."""
        ...

    async def get_by_name(self, name: str) -> District | None:
        """Find district by name.

        Returns:
            District if found, None otherwise.
        """
        ...
