"""Unit tests for the create command handlers.

Tests cover:
- Invalid commands return every validation message without touching the
  service and publish FiscalCommandRejected
- Duplicate natural keys return a single literal message
- Valid commands are saved and the new id is returned
- Service faults propagate
"""

from dataclasses import replace
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from src.application.commands.handlers import (
    CreateCountryError,
    CreateCountryHandler,
    CreateDASError,
    CreateDASHandler,
    CreateDeclaracaoIRError,
    CreateDeclaracaoIRHandler,
    CreateDistrictError,
    CreateDistrictHandler,
    CreateIdeNFSeError,
    CreateIdeNFSeHandler,
    CreateStateError,
    CreateStateHandler,
)
from src.domain.events import FiscalCommandRejected


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def mock_service():
    """Mock application service: nothing registered yet."""
    service = AsyncMock()
    for lookup in (
        "get_by_document_number",
        "get_by_declaration_number",
        "get_by_number",
        "get_by_country_name",
        "get_by_uf",
        "get_by_name",
    ):
        getattr(service, lookup).return_value = None
    service.save.return_value = uuid4()
    return service


@pytest.fixture
def mock_event_bus():
    """Mock event bus."""
    return AsyncMock()


# =============================================================================
# CreateDAS
# =============================================================================


@pytest.mark.unit
class TestCreateDASHandler:
    """Test CreateDASHandler."""

    @pytest.mark.asyncio
    async def test_valid_command_is_saved(
        self, mock_service, mock_event_bus, create_das_command
    ):
        # Arrange
        handler = CreateDASHandler(das_service=mock_service, event_bus=mock_event_bus)

        # Act
        response = await handler.handle(create_das_command)

        # Assert
        assert response.is_valid
        assert response.entity_id == mock_service.save.return_value
        assert response.request_id == create_das_command.request_id
        mock_service.get_by_document_number.assert_awaited_once_with("283789234789347")
        mock_service.save.assert_awaited_once_with(create_das_command)
        mock_event_bus.publish.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_command_returns_messages_without_saving(
        self, mock_service, mock_event_bus, create_das_command
    ):
        # Arrange
        handler = CreateDASHandler(das_service=mock_service, event_bus=mock_event_bus)
        command = replace(create_das_command, reference_month="", bar_code="12AB")

        # Act
        response = await handler.handle(command)

        # Assert
        assert response.errors == (
            "reference_month cannot be empty",
            "bar_code must contain only digits",
        )
        assert response.entity_id is None
        mock_service.get_by_document_number.assert_not_awaited()
        mock_service.save.assert_not_awaited()

        event = mock_event_bus.publish.await_args.args[0]
        assert isinstance(event, FiscalCommandRejected)
        assert event.command_name == "CreateDAS"
        assert event.request_id == command.request_id
        assert event.reasons == response.errors

    @pytest.mark.asyncio
    async def test_duplicate_document_number(
        self, mock_service, mock_event_bus, create_das_command
    ):
        mock_service.get_by_document_number.return_value = object()
        handler = CreateDASHandler(das_service=mock_service, event_bus=mock_event_bus)

        response = await handler.handle(create_das_command)

        assert response.errors == (CreateDASError.DOCUMENT_NUMBER_ALREADY_EXISTS,)
        mock_service.save.assert_not_awaited()
        event = mock_event_bus.publish.await_args.args[0]
        assert event.reasons == (CreateDASError.DOCUMENT_NUMBER_ALREADY_EXISTS,)

    @pytest.mark.asyncio
    async def test_service_fault_propagates(
        self, mock_service, mock_event_bus, create_das_command
    ):
        mock_service.save.side_effect = RuntimeError("storage offline")
        handler = CreateDASHandler(das_service=mock_service, event_bus=mock_event_bus)

        with pytest.raises(RuntimeError, match="storage offline"):
            await handler.handle(create_das_command)


# =============================================================================
# Remaining create handlers
# =============================================================================


@pytest.mark.unit
class TestCreateDeclaracaoIRHandler:
    """Test CreateDeclaracaoIRHandler."""

    @pytest.mark.asyncio
    async def test_valid_command_is_saved(
        self, mock_service, mock_event_bus, create_declaracao_ir_command
    ):
        handler = CreateDeclaracaoIRHandler(
            declaracao_ir_service=mock_service, event_bus=mock_event_bus
        )

        response = await handler.handle(create_declaracao_ir_command)

        assert response.entity_id == mock_service.save.return_value

    @pytest.mark.asyncio
    async def test_duplicate_declaration_number(
        self, mock_service, mock_event_bus, create_declaracao_ir_command
    ):
        mock_service.get_by_declaration_number.return_value = object()
        handler = CreateDeclaracaoIRHandler(
            declaracao_ir_service=mock_service, event_bus=mock_event_bus
        )

        response = await handler.handle(create_declaracao_ir_command)

        assert response.errors == (
            CreateDeclaracaoIRError.DECLARATION_NUMBER_ALREADY_EXISTS,
        )
        mock_service.save.assert_not_awaited()


@pytest.mark.unit
class TestCreateIdeNFSeHandler:
    """Test CreateIdeNFSeHandler."""

    @pytest.mark.asyncio
    async def test_duplicate_number(self, mock_service, mock_event_bus, create_ide_nfse_command):
        mock_service.get_by_number.return_value = object()
        handler = CreateIdeNFSeHandler(ide_nfse_service=mock_service, event_bus=mock_event_bus)

        response = await handler.handle(create_ide_nfse_command)

        assert response.errors == (CreateIdeNFSeError.NUMBER_ALREADY_EXISTS,)

    @pytest.mark.asyncio
    async def test_invalid_municipality_code(
        self, mock_service, mock_event_bus, create_ide_nfse_command
    ):
        handler = CreateIdeNFSeHandler(ide_nfse_service=mock_service, event_bus=mock_event_bus)

        response = await handler.handle(
            replace(create_ide_nfse_command, municipality_code="35503AB")
        )

        assert response.errors == ("municipality_code must contain only digits",)
        mock_service.save.assert_not_awaited()


@pytest.mark.unit
class TestCreateLocationHandlers:
    """Test country, state and district handlers."""

    @pytest.mark.asyncio
    async def test_country_saved(self, mock_service, mock_event_bus, create_country_command):
        handler = CreateCountryHandler(country_service=mock_service, event_bus=mock_event_bus)

        response = await handler.handle(create_country_command)

        assert response.is_valid
        mock_service.get_by_country_name.assert_awaited_once_with("Brasil")

    @pytest.mark.asyncio
    async def test_duplicate_country(self, mock_service, mock_event_bus, create_country_command):
        mock_service.get_by_country_name.return_value = object()
        handler = CreateCountryHandler(country_service=mock_service, event_bus=mock_event_bus)

        response = await handler.handle(create_country_command)

        assert response.errors == (CreateCountryError.COUNTRY_NAME_ALREADY_EXISTS,)

    @pytest.mark.asyncio
    async def test_state_with_bad_uf(self, mock_service, mock_event_bus, create_state_command):
        handler = CreateStateHandler(state_service=mock_service, event_bus=mock_event_bus)

        response = await handler.handle(replace(create_state_command, uf="SPX"))

        assert response.errors == ("uf must be exactly 2 characters",)
        event = mock_event_bus.publish.await_args.args[0]
        assert event.command_name == "CreateState"

    @pytest.mark.asyncio
    async def test_duplicate_state(self, mock_service, mock_event_bus, create_state_command):
        mock_service.get_by_uf.return_value = object()
        handler = CreateStateHandler(state_service=mock_service, event_bus=mock_event_bus)

        response = await handler.handle(create_state_command)

        assert response.errors == (CreateStateError.UF_ALREADY_EXISTS,)

    @pytest.mark.asyncio
    async def test_state_with_unknown_country(self, mock_service, mock_event_bus, create_state_command):
        mock_service.country_exists.return_value = False
        handler = CreateStateHandler(state_service=mock_service, event_bus=mock_event_bus)
        country_id = uuid4()

        response = await handler.handle(replace(create_state_command, country_id=country_id))

        assert response.errors == (CreateStateError.COUNTRY_NOT_FOUND,)
        mock_service.country_exists.assert_awaited_once_with(country_id)
        mock_service.save.assert_not_awaited()
        event = mock_event_bus.publish.await_args.args[0]
        assert event.reasons == (CreateStateError.COUNTRY_NOT_FOUND,)

    @pytest.mark.asyncio
    async def test_state_with_known_country_is_saved(
        self, mock_service, mock_event_bus, create_state_command
    ):
        mock_service.country_exists.return_value = True
        handler = CreateStateHandler(state_service=mock_service, event_bus=mock_event_bus)

        response = await handler.handle(replace(create_state_command, country_id=uuid4()))

        assert response.is_valid
        assert response.entity_id == mock_service.save.return_value

    @pytest.mark.asyncio
    async def test_duplicate_district(self, mock_service, mock_event_bus, create_district_command):
        mock_service.get_by_name.return_value = object()
        handler = CreateDistrictHandler(district_service=mock_service, event_bus=mock_event_bus)

        response = await handler.handle(create_district_command)

        assert response.errors == (CreateDistrictError.NAME_ALREADY_EXISTS,)
        mock_service.save.assert_not_awaited()
