"""In-memory adapters for the geographic repositories."""

from uuid import UUID

from src.domain.entities.country import Country
from src.domain.entities.district import District
from src.domain.entities.state import State
from src.infrastructure.persistence.in_memory.base import InMemoryRepository


class InMemoryCountryRepository(InMemoryRepository[Country]):
    """CountryRepository backed by a list."""

    async def get_by_country_name(self, country_name: str) -> Country | None:
        return self._first(lambda country: country.country_name == country_name)

    async def get_by_id(self, country_id: UUID) -> Country | None:
        return self._first(lambda country: country.id == country_id)


class InMemoryStateRepository(InMemoryRepository[State]):
    """StateRepository backed by a list.

    Lookups by UF are exact: "SP" and "sp" are different keys.
    """

    async def get_by_uf(self, uf: str) -> State | None:
        return self._first(lambda state: state.uf == uf)

    async def get_by_state_name(self, state_name: str) -> State | None:
        return self._first(lambda state: state.state_name == state_name)


class InMemoryDistrictRepository(InMemoryRepository[District]):
    """DistrictRepository backed by a list."""

    async def get_by_name(self, name: str) -> District | None:
        return self._first(lambda district: district.name == name)
