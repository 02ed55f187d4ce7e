"""Container module - Centralized dependency injection.

Re-exports all factory functions from submodules:

    from src.core.container import get_logger, get_create_das_handler, ...

The container is organized into modules by concern:
- infrastructure: Logging
- events: Event bus and subscriptions
- repositories: Repository factories
- services: Application service factories
- handlers: Command and query handler factories

Tests reset the wiring with clear_container_caches().
"""

from src.core.container.events import get_event_bus
from src.core.container.handlers import (
    get_check_declaracao_ir_exists_by_cnpj_handler,
    get_check_declaracao_ir_exists_by_declaration_number_handler,
    get_create_country_handler,
    get_create_das_handler,
    get_create_declaracao_ir_handler,
    get_create_district_handler,
    get_create_ide_nfse_handler,
    get_create_state_handler,
)
from src.core.container.infrastructure import get_logger
from src.core.container.repositories import (
    get_country_repository,
    get_das_repository,
    get_declaracao_ir_repository,
    get_district_repository,
    get_ide_nfse_repository,
    get_state_repository,
)
from src.core.container.services import (
    get_country_app_service,
    get_das_app_service,
    get_declaracao_ir_app_service,
    get_district_app_service,
    get_ide_nfse_app_service,
    get_state_app_service,
)

_FACTORIES = (
    get_logger,
    get_event_bus,
    get_das_repository,
    get_declaracao_ir_repository,
    get_ide_nfse_repository,
    get_country_repository,
    get_state_repository,
    get_district_repository,
    get_das_app_service,
    get_declaracao_ir_app_service,
    get_ide_nfse_app_service,
    get_country_app_service,
    get_state_app_service,
    get_district_app_service,
    get_create_das_handler,
    get_create_declaracao_ir_handler,
    get_create_ide_nfse_handler,
    get_create_country_handler,
    get_create_state_handler,
    get_create_district_handler,
    get_check_declaracao_ir_exists_by_cnpj_handler,
    get_check_declaracao_ir_exists_by_declaration_number_handler,
)


def clear_container_caches() -> None:
    """Drop every cached singleton so the next call rebuilds the wiring."""
    for factory in _FACTORIES:
        factory.cache_clear()


__all__ = [
    "clear_container_caches",
    # Infrastructure
    "get_logger",
    "get_event_bus",
    # Repositories
    "get_country_repository",
    "get_das_repository",
    "get_declaracao_ir_repository",
    "get_district_repository",
    "get_ide_nfse_repository",
    "get_state_repository",
    # Services
    "get_country_app_service",
    "get_das_app_service",
    "get_declaracao_ir_app_service",
    "get_district_app_service",
    "get_ide_nfse_app_service",
    "get_state_app_service",
    # Handlers
    "get_check_declaracao_ir_exists_by_cnpj_handler",
    "get_check_declaracao_ir_exists_by_declaration_number_handler",
    "get_create_country_handler",
    "get_create_das_handler",
    "get_create_declaracao_ir_handler",
    "get_create_district_handler",
    "get_create_ide_nfse_handler",
    "get_create_state_handler",
]
