"""Geographic master data commands (CQRS write operations)."""

from dataclasses import dataclass, field
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.entities.country import Country
from src.domain.entities.district import District
from src.domain.entities.state import State


@dataclass(frozen=True, kw_only=True)
class CreateCountry:
    """Register a country.

    Attributes:
        country_name: Country name (required, max 100).
        request_id: Correlation id of the request.
    """

    country_name: str
    request_id: UUID = field(default_factory=uuid7)

    def to_entity(self) -> Country:
        """Materialize a new Country entity (no states yet)."""
        return Country(country_name=self.country_name)


@dataclass(frozen=True, kw_only=True)
class CreateState:
    """Register a state of a country.

    Attributes:
        state_name: State name (required, max 100).
        uf: Two-letter state code (required).
        country_id: Owning country identifier, if known.
        request_id: Correlation id of the request.

    Example:
        >>> command = CreateState(state_name="São Paulo", uf="SP", country_id=brazil.id)
        >>> state = command.to_entity()
        >>> state.country_id == brazil.id
        True
    """

    state_name: str
    uf: str
    country_id: UUID | None = None
    request_id: UUID = field(default_factory=uuid7)

    def to_entity(self, country: Country | None = None) -> State:
        """Materialize a new State entity.

        Args:
            country: Loaded owning country; when omitted the direct link
                stays unloaded and only country_id is set.
        """
        return State(
            uf=self.uf,
            state_name=self.state_name,
            country=country,
            country_id=self.country_id,
        )


@dataclass(frozen=True, kw_only=True)
class CreateDistrict:
    """Register a district.

    Attributes:
        name: District name (required, max 450).
        type: District classification (required).
        location: Location description (required, max 100).
        request_id: Correlation id of the request.
    """

    name: str
    type: str
    location: str
    request_id: UUID = field(default_factory=uuid7)

    def to_entity(self) -> District:
        """Materialize a new District entity with a fresh identifier."""
        return District(name=self.name, type=self.type, location=self.location)
