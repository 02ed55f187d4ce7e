"""Unit tests for LoggingEventHandler.

Tests cover:
- *Created events logged at INFO with ids and natural keys
- FiscalCommandRejected logged at WARNING with the error count only
- subscribe_all wires every fiscal event
"""

from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from src.domain.events import (
    CountryCreated,
    DASCreated,
    DeclaracaoIRCreated,
    DistrictCreated,
    FiscalCommandRejected,
    IdeNFSeCreated,
    StateCreated,
)
from src.infrastructure.events.handlers import LoggingEventHandler


@pytest.fixture
def mock_logger():
    """Mock logger."""
    return MagicMock()


@pytest.fixture
def handler(mock_logger):
    """LoggingEventHandler with mock logger."""
    return LoggingEventHandler(logger=mock_logger)


@pytest.mark.unit
class TestLoggingEventHandlerCreatedEvents:
    """Test INFO logging of created events."""

    @pytest.mark.asyncio
    async def test_das_created(self, handler, mock_logger):
        # Arrange
        event = DASCreated(
            das_id=uuid4(),
            document_number="283789234789347",
            reference_month="Outubro",
            reference_year="2023",
        )

        # Act
        await handler.handle_das_created(event)

        # Assert
        mock_logger.info.assert_called_once()
        call_args = mock_logger.info.call_args
        assert call_args[0][0] == "das_created"
        assert call_args[1]["das_id"] == str(event.das_id)
        assert call_args[1]["document_number"] == "283789234789347"
        assert call_args[1]["event_id"] == str(event.event_id)
        assert call_args[1]["occurred_at"] == event.occurred_at.isoformat()

    @pytest.mark.asyncio
    async def test_declaracao_ir_created(self, handler, mock_logger):
        event = DeclaracaoIRCreated(
            declaracao_ir_id=uuid4(), cnpj="12345678000195", declaration_number="DEC-1"
        )

        await handler.handle_declaracao_ir_created(event)

        assert mock_logger.info.call_args[0][0] == "declaracao_ir_created"
        assert mock_logger.info.call_args[1]["cnpj"] == "12345678000195"

    @pytest.mark.asyncio
    async def test_ide_nfse_created(self, handler, mock_logger):
        event = IdeNFSeCreated(ide_nfse_id=uuid4(), number="123", series="A1")

        await handler.handle_ide_nfse_created(event)

        assert mock_logger.info.call_args[0][0] == "ide_nfse_created"

    @pytest.mark.asyncio
    async def test_state_created_without_country(self, handler, mock_logger):
        event = StateCreated(state_id=uuid4(), uf="SP")

        await handler.handle_state_created(event)

        assert mock_logger.info.call_args[0][0] == "state_created"
        assert mock_logger.info.call_args[1]["country_id"] is None

    @pytest.mark.asyncio
    async def test_country_and_district_created(self, handler, mock_logger):
        await handler.handle_country_created(
            CountryCreated(country_id=uuid4(), country_name="Brasil")
        )
        await handler.handle_district_created(DistrictCreated(district_id=uuid4(), name="Sé"))

        messages = [call[0][0] for call in mock_logger.info.call_args_list]
        assert messages == ["country_created", "district_created"]


@pytest.mark.unit
class TestLoggingEventHandlerRejections:
    """Test WARNING logging of rejected commands."""

    @pytest.mark.asyncio
    async def test_fiscal_command_rejected(self, handler, mock_logger):
        # Arrange
        request_id = uuid4()
        event = FiscalCommandRejected(
            command_name="CreateDAS",
            request_id=request_id,
            reasons=("reference_month cannot be empty", "bar_code cannot be empty"),
        )

        # Act
        await handler.handle_fiscal_command_rejected(event)

        # Assert
        mock_logger.warning.assert_called_once()
        call_args = mock_logger.warning.call_args
        assert call_args[0][0] == "fiscal_command_rejected"
        assert call_args[1]["command_name"] == "CreateDAS"
        assert call_args[1]["request_id"] == str(request_id)
        assert call_args[1]["error_count"] == 2
        mock_logger.info.assert_not_called()


@pytest.mark.unit
class TestLoggingEventHandlerSubscriptions:
    """Test subscribe_all."""

    def test_subscribes_every_fiscal_event(self, handler):
        event_bus = MagicMock()

        handler.subscribe_all(event_bus)

        subscribed = {call.args[0] for call in event_bus.subscribe.call_args_list}
        assert subscribed == {
            DASCreated,
            DeclaracaoIRCreated,
            IdeNFSeCreated,
            CountryCreated,
            StateCreated,
            DistrictCreated,
            FiscalCommandRejected,
        }
