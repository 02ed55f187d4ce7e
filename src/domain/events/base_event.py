"""Base domain event class.

Domain events record "things that happened" after a successful write and
are always named in past tense (DASCreated, CountryCreated). They are
typed, immutable records routed by the event bus.

Architecture:
    - Frozen dataclass (immutable after creation)
    - Auto-generated event_id (UUID) for event tracking
    - occurred_at timestamp (UTC) for event ordering
    - All events inherit from this base class

Usage:
    >>> @dataclass(frozen=True, kw_only=True, slots=True)
    >>> class DASCreated(DomainEvent):
    ...     das_id: UUID
    ...     document_number: str
    >>>
    >>> event = DASCreated(das_id=das.id, document_number="283789234789347")
    >>> print(event.event_id)  # Auto-generated UUID
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from uuid import UUID, uuid4


@dataclass(frozen=True, kw_only=True, slots=True)
class DomainEvent:
    """Base class for all domain events.

    All domain events MUST:
        1. Inherit from this base class
        2. Use past tense naming (DASCreated, NOT CreateDAS)
        3. Be frozen dataclasses (immutable after creation)
        4. Use kw_only=True

    Attributes:
        event_id: Unique identifier for this event instance. Auto-generated
            UUID v4 if not provided.
        occurred_at: Timestamp when the event occurred (UTC). Auto-generated
            if not provided.
    """

    event_id: UUID = field(default_factory=uuid4)
    occurred_at: datetime = field(default_factory=lambda: datetime.now(UTC))
