"""Country domain entity (geographic master data).

A Country owns the collection of its States. The collection only grows:
states are appended through add_state() and exposed as an immutable tuple.

Usage:
    from src.domain.entities import Country, State

    brazil = Country(country_name="Brasil")
    brazil.add_state(State(uf="SP", state_name="São Paulo", country_id=brazil.id))
    assert len(brazil.states) == 1
"""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING
from uuid import UUID

from uuid_extensions import uuid7

if TYPE_CHECKING:
    from src.domain.entities.state import State


@dataclass(frozen=True, kw_only=True)
class Country:
    """Country with its owned states.

    Attributes:
        id: Unique identifier (generated).
        country_name: Country name.
        states: Read-only view of the owned states, in insertion order.
    """

    country_name: str

    id: UUID = field(default_factory=uuid7)
    _states: list["State"] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    @property
    def states(self) -> tuple["State", ...]:
        """States of this country (read-only, insertion order)."""
        return tuple(self._states)

    def add_state(self, state: "State") -> None:
        """Append a state to the owned collection.

        Args:
            state: State to attach to this country.
        """
        self._states.append(state)
