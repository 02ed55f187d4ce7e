"""Application services for geographic master data.

Country, State and District services follow the same pass-through shape
as the fiscal services: project what the repository finds, propagate what
it raises, publish a *Created event after every successful add.
"""

from collections.abc import Callable
from uuid import UUID

from src.application.commands.location_commands import (
    CreateCountry,
    CreateDistrict,
    CreateState,
)
from src.application.mappers.location_mappers import (
    map_country_to_view_model,
    map_district_to_view_model,
    map_state_to_view_model,
)
from src.application.view_models.location_view_models import (
    CountryViewModel,
    DistrictViewModel,
    StateViewModel,
)
from src.domain.entities.country import Country
from src.domain.entities.district import District
from src.domain.entities.state import State
from src.domain.events.fiscal_events import (
    CountryCreated,
    DistrictCreated,
    StateCreated,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.location_repositories import (
    CountryRepository,
    DistrictRepository,
    StateRepository,
)


class CountryAppService:
    """Application service for countries."""

    def __init__(
        self,
        country_repo: CountryRepository,
        event_bus: EventBusProtocol,
        mapper: Callable[[Country], CountryViewModel] = map_country_to_view_model,
    ) -> None:
        self._country_repo = country_repo
        self._event_bus = event_bus
        self._mapper = mapper

    async def get_by_country_name(self, country_name: str) -> CountryViewModel | None:
        """Country by name, or None."""
        country = await self._country_repo.get_by_country_name(country_name)
        return None if country is None else self._mapper(country)

    async def save(self, command: CreateCountry) -> UUID:
        """Materialize, persist and announce a country."""
        country = command.to_entity()
        await self._country_repo.add(country)
        await self._event_bus.publish(
            CountryCreated(country_id=country.id, country_name=country.country_name)
        )
        return country.id


class StateAppService:
    """Application service for states.

    A state saved with a country_id is attached to that country: the direct
    link is set and the state is appended to the country's collection.
    """

    def __init__(
        self,
        state_repo: StateRepository,
        country_repo: CountryRepository,
        event_bus: EventBusProtocol,
        mapper: Callable[[State], StateViewModel] = map_state_to_view_model,
    ) -> None:
        self._state_repo = state_repo
        self._country_repo = country_repo
        self._event_bus = event_bus
        self._mapper = mapper

    async def get_by_uf(self, uf: str) -> StateViewModel | None:
        """State by two-letter code, or None."""
        state = await self._state_repo.get_by_uf(uf)
        return None if state is None else self._mapper(state)

    async def get_by_state_name(self, state_name: str) -> StateViewModel | None:
        """State by name, or None."""
        state = await self._state_repo.get_by_state_name(state_name)
        return None if state is None else self._mapper(state)

    async def country_exists(self, country_id: UUID) -> bool:
        """Whether a country with this identifier is registered."""
        return await self._country_repo.get_by_id(country_id) is not None

    async def save(self, command: CreateState) -> UUID:
        """Materialize, persist, attach and announce a state.

        An unknown country_id is kept on the state but leaves it unattached;
        CreateStateHandler rejects such commands before they get here.
        """
        country: Country | None = None
        if command.country_id is not None:
            country = await self._country_repo.get_by_id(command.country_id)
        state = command.to_entity(country)
        await self._state_repo.add(state)
        if country is not None:
            country.add_state(state)
        await self._event_bus.publish(
            StateCreated(state_id=state.id, uf=state.uf, country_id=state.country_id)
        )
        return state.id


class DistrictAppService:
    """Application service for districts."""

    def __init__(
        self,
        district_repo: DistrictRepository,
        event_bus: EventBusProtocol,
        mapper: Callable[[District], DistrictViewModel] = map_district_to_view_model,
    ) -> None:
        self._district_repo = district_repo
        self._event_bus = event_bus
        self._mapper = mapper

    async def get_by_name(self, name: str) -> DistrictViewModel | None:
        """District by name, or None."""
        district = await self._district_repo.get_by_name(name)
        return None if district is None else self._mapper(district)

    async def save(self, command: CreateDistrict) -> UUID:
        """Materialize, persist and announce a district."""
        district = command.to_entity()
        await self._district_repo.add(district)
        await self._event_bus.publish(
            DistrictCreated(district_id=district.id, name=district.name)
        )
        return district.id
