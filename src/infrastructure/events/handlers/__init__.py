"""Event handlers for infrastructure integration.

Handlers:
    - LoggingEventHandler: Structured logging with appropriate severity levels

Handlers are fail-open: the event bus logs a handler failure and keeps going.
"""

from src.infrastructure.events.handlers.logging_event_handler import LoggingEventHandler

__all__ = [
    "LoggingEventHandler",
]
