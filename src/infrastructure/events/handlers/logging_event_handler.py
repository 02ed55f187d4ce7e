"""Logging event handler for fiscal domain events.

Structured logging for every record created and every rejected command.

Log Levels:
    - INFO: *Created events (normal operations)
    - WARNING: FiscalCommandRejected (rejected input requiring attention)

Structured Fields:
    - event_id: UUID for event correlation
    - occurred_at: ISO 8601 timestamp (UTC)
    - <entity>_id plus the record's natural key (created events)
    - command_name, request_id, error_count (rejections)

Usage:
    >>> event_bus = get_event_bus()
    >>> logging_handler = LoggingEventHandler(logger=get_logger())
    >>> logging_handler.subscribe_all(event_bus)
"""

from src.domain.events.fiscal_events import (
    CountryCreated,
    DASCreated,
    DeclaracaoIRCreated,
    DistrictCreated,
    FiscalCommandRejected,
    IdeNFSeCreated,
    StateCreated,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol


class LoggingEventHandler:
    """Event handler for structured logging of fiscal domain events.

    Attributes:
        _logger: Logger protocol implementation (from container).

    Example:
        >>> handler = LoggingEventHandler(logger=get_logger())
        >>> event_bus.subscribe(DASCreated, handler.handle_das_created)
        >>> await event_bus.publish(DASCreated(das_id=das.id, ...))
        >>> # Log output: {"event": "das_created", "das_id": "...", ...}
    """

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize logging handler with logger.

        Args:
            logger: Logger protocol implementation from container.
        """
        self._logger = logger

    def subscribe_all(self, event_bus: EventBusProtocol) -> None:
        """Subscribe every handler method to its event type.

        Args:
            event_bus: Bus to register on.
        """
        event_bus.subscribe(DASCreated, self.handle_das_created)
        event_bus.subscribe(DeclaracaoIRCreated, self.handle_declaracao_ir_created)
        event_bus.subscribe(IdeNFSeCreated, self.handle_ide_nfse_created)
        event_bus.subscribe(CountryCreated, self.handle_country_created)
        event_bus.subscribe(StateCreated, self.handle_state_created)
        event_bus.subscribe(DistrictCreated, self.handle_district_created)
        event_bus.subscribe(FiscalCommandRejected, self.handle_fiscal_command_rejected)

    # =========================================================================
    # Tax Record Event Handlers
    # =========================================================================

    async def handle_das_created(self, event: DASCreated) -> None:
        """Log a persisted tax-payment slip (INFO level)."""
        self._logger.info(
            "das_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            das_id=str(event.das_id),
            document_number=event.document_number,
            reference_month=event.reference_month,
            reference_year=event.reference_year,
        )

    async def handle_declaracao_ir_created(self, event: DeclaracaoIRCreated) -> None:
        """Log a persisted income-tax declaration (INFO level)."""
        self._logger.info(
            "declaracao_ir_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            declaracao_ir_id=str(event.declaracao_ir_id),
            cnpj=event.cnpj,
            declaration_number=event.declaration_number,
        )

    async def handle_ide_nfse_created(self, event: IdeNFSeCreated) -> None:
        """Log a persisted NFSe header (INFO level)."""
        self._logger.info(
            "ide_nfse_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            ide_nfse_id=str(event.ide_nfse_id),
            number=event.number,
            series=event.series,
        )

    # =========================================================================
    # Location Event Handlers
    # =========================================================================

    async def handle_country_created(self, event: CountryCreated) -> None:
        self._logger.info(
            "country_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            country_id=str(event.country_id),
            country_name=event.country_name,
        )

    async def handle_state_created(self, event: StateCreated) -> None:
        self._logger.info(
            "state_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            state_id=str(event.state_id),
            uf=event.uf,
            country_id=str(event.country_id) if event.country_id else None,
        )

    async def handle_district_created(self, event: DistrictCreated) -> None:
        self._logger.info(
            "district_created",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            district_id=str(event.district_id),
            name=event.name,
        )

    # =========================================================================
    # Rejection Handler
    # =========================================================================

    async def handle_fiscal_command_rejected(
        self,
        event: FiscalCommandRejected,
    ) -> None:
        """Log a rejected command (WARNING level).

        Only the error count is logged; the messages themselves go back to
        the caller in the response.
        """
        self._logger.warning(
            "fiscal_command_rejected",
            event_id=str(event.event_id),
            occurred_at=event.occurred_at.isoformat(),
            command_name=event.command_name,
            request_id=str(event.request_id),
            error_count=len(event.reasons),
        )
