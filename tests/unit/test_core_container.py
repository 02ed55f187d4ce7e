"""Unit tests for the dependency injection container.

Tests cover:
- Logger adapter selection and level from settings
- Event bus wiring (logging handler subscribed)
- Adapter selection errors for unsupported backends
- Singleton pattern and cache reset
"""

import os
from unittest.mock import MagicMock, patch
from uuid import uuid4

import pytest

from src.application.commands.handlers import CreateDASHandler
from src.application.queries.handlers import CheckDeclaracaoIRExistsByCnpjHandler
from src.core.container import (
    clear_container_caches,
    get_check_declaracao_ir_exists_by_cnpj_handler,
    get_create_das_handler,
    get_das_app_service,
    get_das_repository,
    get_event_bus,
    get_logger,
    get_state_repository,
)
from src.domain.events import DASCreated, FiscalCommandRejected
from src.infrastructure.events.in_memory_event_bus import InMemoryEventBus
from src.infrastructure.persistence.in_memory import InMemoryDASRepository


@pytest.mark.unit
class TestGetLogger:
    """Test get_logger() container function."""

    @pytest.mark.parametrize(
        ("environment", "use_json"),
        [("development", False), ("testing", True), ("production", True)],
    )
    def test_console_adapter_per_environment(self, environment, use_json):
        env_values = {"ENVIRONMENT": environment, "LOG_LEVEL": "warning"}
        with patch.dict(os.environ, env_values, clear=True):
            with patch(
                "src.infrastructure.logging.console_adapter.ConsoleAdapter"
            ) as mock_console:
                logger = get_logger()

        mock_console.assert_called_once_with(use_json=use_json, level="WARNING")
        assert logger is mock_console.return_value

    def test_logger_is_singleton(self):
        assert get_logger() is get_logger()


@pytest.mark.unit
class TestGetEventBus:
    """Test get_event_bus() container function."""

    def test_returns_in_memory_bus_with_logging_subscriptions(self):
        event_bus = get_event_bus()

        assert isinstance(event_bus, InMemoryEventBus)
        assert len(event_bus._handlers[DASCreated]) == 1
        assert len(event_bus._handlers[FiscalCommandRejected]) == 1

    def test_unsupported_event_bus_type(self):
        with patch.dict(os.environ, {"EVENT_BUS_TYPE": "kafka"}, clear=True):
            with pytest.raises(ValueError, match="Unsupported EVENT_BUS_TYPE"):
                get_event_bus()


@pytest.mark.unit
class TestRepositoriesAndHandlers:
    """Test repository, service and handler factories."""

    def test_repository_is_shared(self):
        assert isinstance(get_das_repository(), InMemoryDASRepository)
        assert get_das_repository() is get_das_repository()

    def test_unsupported_repository_backend(self):
        with patch.dict(os.environ, {"REPOSITORY_BACKEND": "postgres"}, clear=True):
            with pytest.raises(ValueError, match="Unsupported REPOSITORY_BACKEND"):
                get_state_repository()

    def test_service_uses_shared_repository(self):
        service = get_das_app_service()

        assert service._das_repo is get_das_repository()
        assert service._event_bus is get_event_bus()

    def test_handlers_are_wired(self):
        assert isinstance(get_create_das_handler(), CreateDASHandler)
        assert isinstance(
            get_check_declaracao_ir_exists_by_cnpj_handler(),
            CheckDeclaracaoIRExistsByCnpjHandler,
        )

    def test_clear_container_caches_rebuilds_singletons(self):
        first = get_das_repository()

        clear_container_caches()

        assert get_das_repository() is not first


@pytest.mark.unit
class TestEventBusLogging:
    """Test that published events reach the container logger."""

    @pytest.mark.asyncio
    async def test_rejection_is_logged(self):
        mock_logger = MagicMock()
        with patch(
            "src.infrastructure.logging.console_adapter.ConsoleAdapter",
            return_value=mock_logger,
        ):
            event_bus = get_event_bus()

        await event_bus.publish(
            FiscalCommandRejected(command_name="CreateDAS", request_id=uuid4(), reasons=("x",))
        )

        mock_logger.warning.assert_called_once()
        assert mock_logger.warning.call_args[0][0] == "fiscal_command_rejected"
