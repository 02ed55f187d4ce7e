"""State domain entity (geographic master data).

A State references its Country twice: through the direct `country` link
(when the aggregate is loaded) and through the FK-style `country_id`.
"""

from dataclasses import dataclass, field
from uuid import UUID

from uuid_extensions import uuid7

from src.domain.entities.country import Country


@dataclass(frozen=True, kw_only=True)
class State:
    """Federative unit.

    Attributes:
        id: Unique identifier (generated).
        uf: Two-letter state code (e.g. "SP").
        state_name: State name.
        country: Owning country, when loaded.
        country_id: Owning country identifier.
    """

    uf: str
    state_name: str
    country: Country | None = field(default=None, repr=False, compare=False)
    country_id: UUID | None = None

    id: UUID = field(default_factory=uuid7)
