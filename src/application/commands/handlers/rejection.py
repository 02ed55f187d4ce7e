"""Shared rejection publishing for create handlers."""

from collections.abc import Iterable
from typing import Protocol
from uuid import UUID

from src.domain.events.fiscal_events import FiscalCommandRejected
from src.domain.protocols.event_bus_protocol import EventBusProtocol


class _CorrelatedCommand(Protocol):
    @property
    def request_id(self) -> UUID: ...


async def publish_rejection(
    event_bus: EventBusProtocol,
    command: _CorrelatedCommand,
    reasons: Iterable[str],
) -> None:
    """Publish FiscalCommandRejected for a command that was turned down.

    Args:
        event_bus: Bus to publish on.
        command: The rejected command.
        reasons: Messages returned to the caller, in order.
    """
    await event_bus.publish(
        FiscalCommandRejected(
            command_name=type(command).__name__,
            request_id=command.request_id,
            reasons=tuple(reasons),
        )
    )
