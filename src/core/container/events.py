"""Event bus dependency factory.

Application-scoped singleton for domain event publishing. Subscribes the
logging handler to every fiscal event at startup.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings
from src.core.container.infrastructure import get_logger

if TYPE_CHECKING:
    from src.domain.protocols.event_bus_protocol import EventBusProtocol


@lru_cache()
def get_event_bus() -> "EventBusProtocol":
    """Get event bus singleton (app-scoped).

    Container owns factory logic - decides which adapter based on
    EVENT_BUS_TYPE:
        - 'in-memory': InMemoryEventBus (single process)

    Returns:
        Event bus implementing EventBusProtocol.

    Raises:
        ValueError: If EVENT_BUS_TYPE names an unsupported adapter.

    Usage:
        event_bus = get_event_bus()
        await event_bus.publish(DASCreated(...))
    """
    from src.infrastructure.events.handlers.logging_event_handler import (
        LoggingEventHandler,
    )
    from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus

    event_bus_type = get_settings().event_bus_type
    if event_bus_type != "in-memory":
        raise ValueError(
            f"Unsupported EVENT_BUS_TYPE: {event_bus_type}. Supported: 'in-memory'"
        )

    logger = get_logger()
    event_bus = InMemoryEventBus(logger=logger)
    LoggingEventHandler(logger=logger).subscribe_all(event_bus)
    return event_bus
