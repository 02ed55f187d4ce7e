"""Process-local event bus for fiscal domain events.

Services publish *Created events after a successful add and handlers publish
FiscalCommandRejected when they turn a command down. Subscribers are keyed
by the exact event class; a subscriber that raises is logged and skipped so
the caller that published never sees the failure.
"""

import asyncio
from collections import defaultdict

from src.domain.events.base_event import DomainEvent
from src.domain.protocols.event_bus_protocol import EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol


class InMemoryEventBus:
    """EventBusProtocol adapter backed by a dict of subscriber lists.

    Subscribers of one event run concurrently. Not thread-safe.
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._logger = logger

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """Add a subscriber for events of exactly `event_type`.

        Subclasses of `event_type` are not delivered to it, and subscribing
        the same handler twice delivers each event twice.
        """
        self._handlers[event_type].append(handler)

    async def publish(self, event: DomainEvent) -> None:
        """Deliver an event to its subscribers and wait for all of them."""
        handlers = self._handlers.get(type(event))
        if not handlers:
            return

        event_name = type(event).__name__
        self._logger.debug(
            "event_publishing",
            event_type=event_name,
            event_id=str(event.event_id),
            handler_count=len(handlers),
        )

        outcomes = await asyncio.gather(
            *(handler(event) for handler in handlers), return_exceptions=True
        )
        for handler, outcome in zip(handlers, outcomes, strict=True):
            if isinstance(outcome, Exception):
                self._log_failure(event, event_name, handler, outcome)

    def _log_failure(
        self,
        event: DomainEvent,
        event_name: str,
        handler: EventHandler,
        error: Exception,
    ) -> None:
        self._logger.warning(
            "event_handler_failed",
            event_type=event_name,
            event_id=str(event.event_id),
            handler_name=getattr(handler, "__name__", repr(handler)),
            error_type=type(error).__name__,
            error_message=str(error),
        )
