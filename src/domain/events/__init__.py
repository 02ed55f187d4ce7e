"""Domain events module.

Usage:
    >>> from src.domain.events import DASCreated
    >>> await event_bus.publish(DASCreated(das_id=das.id, ...))
"""

from src.domain.events.base_event import DomainEvent
from src.domain.events.fiscal_events import (
    CountryCreated,
    DASCreated,
    DeclaracaoIRCreated,
    DistrictCreated,
    FiscalCommandRejected,
    IdeNFSeCreated,
    StateCreated,
)

__all__ = [
    "CountryCreated",
    "DASCreated",
    "DeclaracaoIRCreated",
    "DistrictCreated",
    "DomainEvent",
    "FiscalCommandRejected",
    "IdeNFSeCreated",
    "StateCreated",
]
