"""Entity to view model projections for geographic master data."""

from src.application.view_models.location_view_models import (
    CountryViewModel,
    DistrictViewModel,
    StateViewModel,
)
from src.domain.entities.country import Country
from src.domain.entities.district import District
from src.domain.entities.state import State


def map_state_to_view_model(state: State) -> StateViewModel:
    """Project a State entity."""
    return StateViewModel(
        id=state.id,
        uf=state.uf,
        state_name=state.state_name,
        country_id=state.country_id,
    )


def map_country_to_view_model(country: Country) -> CountryViewModel:
    """Project a Country entity with its states, in insertion order."""
    return CountryViewModel(
        id=country.id,
        country_name=country.country_name,
        states=[map_state_to_view_model(state) for state in country.states],
    )


def map_district_to_view_model(district: District) -> DistrictViewModel:
    """Project a District entity."""
    return DistrictViewModel(
        id=district.id,
        name=district.name,
        type=district.type,
        location=district.location,
    )
