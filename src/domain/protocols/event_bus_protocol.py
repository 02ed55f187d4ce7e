"""Event bus protocol (port) for domain events.

Typed event channel: services publish concrete DomainEvent instances,
subscribers register per event type. The domain defines the port;
infrastructure provides the adapter.

Architecture:
    - Protocol (structural typing, NOT ABC inheritance)
    - Domain layer defines the interface (port)
    - Infrastructure layer implements adapters (in-memory)
    - Container (src/core/container/) provides the factory function

Implementations:
    - InMemoryEventBus: src/infrastructure/events/in_memory_event_bus.py

Usage:
    >>> from src.core.container import get_event_bus
    >>> from src.domain.events import DASCreated
    >>>
    >>> event_bus = get_event_bus()
    >>> await event_bus.publish(DASCreated(das_id=das.id, ...))
    >>>
    >>> async def notify_accounting(event: DASCreated) -> None:
    ...     ...
    >>> event_bus.subscribe(DASCreated, notify_accounting)
"""

from collections.abc import Awaitable, Callable
from typing import Any, Protocol

from src.domain.events.base_event import DomainEvent

# Handlers are typed loosely on the event parameter so subscribers can
# annotate the concrete event class they receive.
EventHandler = Callable[[Any], Awaitable[None]]
"""Async event handler: accepts one event, returns None, side effects only."""


class EventBusProtocol(Protocol):
    """Protocol for event bus implementations.

    Key Requirements:
        1. **Fail-open behavior**: One handler failure must NOT prevent other
           handlers from executing, and must NOT reach the publisher.
        2. **Async support**: All handlers are async.
        3. **Type routing**: Handlers registered for an event type only
           receive events of that exact type.
        4. **No ordering guarantees**: Handlers may execute concurrently.

    Methods:
        subscribe: Register event handler for specific event type
        publish: Publish event to all registered handlers
    """

    def subscribe(
        self,
        event_type: type[DomainEvent],
        handler: EventHandler,
    ) -> None:
        """Register event handler for specific event type.

        Args:
            event_type: Class of event to handle (e.g., DASCreated).
                No inheritance matching.
            handler: Async function called with the published event.
        """
        ...

    async def publish(self, event: DomainEvent) -> None:
        """Publish event to all registered handlers.

        Fire-and-forget from the publisher's point of view: returns once
        every handler has finished, never raises handler exceptions.
        No handlers registered is a no-op.

        Args:
            event: Domain event to publish.
        """
        ...
