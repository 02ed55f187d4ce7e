"""LoggerProtocol definition for structured logging.

Backend-agnostic port for structured logs: a short event-style message plus
key-value context. Adapters live in src/infrastructure/logging/.

Log Levels:
    - DEBUG: Detailed diagnostic info (event publishing, handler wiring)
    - INFO: Normal operational events (records created)
    - WARNING: Rejected commands, failed event handlers
    - ERROR: Operation failed, system continues
    - CRITICAL: System-wide failure

Security:
    - NEVER log full barcodes or other payment secrets; ids and document
      numbers are enough for correlation

Usage:
    from src.core.container import get_logger

    logger = get_logger()
    logger.info("das_created", das_id=str(das.id))

    request_logger = logger.bind(request_id=str(command.request_id))
    request_logger.warning("fiscal_command_rejected")
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Protocol for structured logging adapters."""

    def debug(self, message: str, /, **context: Any) -> None:
        """Log a debug-level message."""
        ...

    def info(self, message: str, /, **context: Any) -> None:
        """Log an info-level message."""
        ...

    def warning(self, message: str, /, **context: Any) -> None:
        """Log a warning-level message."""
        ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log an error-level message with optional exception details.

        Args:
            message: Event-style message (avoid f-strings; use context).
            error: Optional exception instance; adapters add error_type and
                error_message fields.
            **context: Structured key-value context fields.
        """
        ...

    def critical(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a critical-level message with optional exception details."""
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return new logger with permanently bound context.

        The original logger instance remains unchanged.
        """
        ...

    def with_context(self, **context: Any) -> LoggerProtocol:
        """Alias for bind()."""
        ...
