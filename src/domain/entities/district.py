"""District domain entity (geographic master data)."""

from dataclasses import dataclass, field
from uuid import UUID

from uuid_extensions import uuid7


@dataclass(frozen=True, kw_only=True)
class District:
    """Administrative district.

    Attributes:
        id: Unique identifier (generated).
        name: District name.
        type: District classification (urban, rural, ...).
        location: Free-text location description.
    """

    name: str
    type: str
    location: str

    id: UUID = field(default_factory=uuid7)
