"""Command and query handler factories.

Handlers are stateless; each factory returns one shared instance wired
with its application service (and the event bus for command handlers).
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.container.events import get_event_bus
from src.core.container.services import (
    get_country_app_service,
    get_das_app_service,
    get_declaracao_ir_app_service,
    get_district_app_service,
    get_ide_nfse_app_service,
    get_state_app_service,
)

if TYPE_CHECKING:
    from src.application.commands.handlers import (
        CreateCountryHandler,
        CreateDASHandler,
        CreateDeclaracaoIRHandler,
        CreateDistrictHandler,
        CreateIdeNFSeHandler,
        CreateStateHandler,
    )
    from src.application.queries.handlers import (
        CheckDeclaracaoIRExistsByCnpjHandler,
        CheckDeclaracaoIRExistsByDeclarationNumberHandler,
    )


# ============================================================================
# Command Handler Factories
# ============================================================================


@lru_cache()
def get_create_das_handler() -> "CreateDASHandler":
    from src.application.commands.handlers import CreateDASHandler

    return CreateDASHandler(das_service=get_das_app_service(), event_bus=get_event_bus())


@lru_cache()
def get_create_declaracao_ir_handler() -> "CreateDeclaracaoIRHandler":
    from src.application.commands.handlers import CreateDeclaracaoIRHandler

    return CreateDeclaracaoIRHandler(
        declaracao_ir_service=get_declaracao_ir_app_service(),
        event_bus=get_event_bus(),
    )


@lru_cache()
def get_create_ide_nfse_handler() -> "CreateIdeNFSeHandler":
    from src.application.commands.handlers import CreateIdeNFSeHandler

    return CreateIdeNFSeHandler(
        ide_nfse_service=get_ide_nfse_app_service(), event_bus=get_event_bus()
    )


@lru_cache()
def get_create_country_handler() -> "CreateCountryHandler":
    from src.application.commands.handlers import CreateCountryHandler

    return CreateCountryHandler(
        country_service=get_country_app_service(), event_bus=get_event_bus()
    )


@lru_cache()
def get_create_state_handler() -> "CreateStateHandler":
    from src.application.commands.handlers import CreateStateHandler

    return CreateStateHandler(
        state_service=get_state_app_service(), event_bus=get_event_bus()
    )


@lru_cache()
def get_create_district_handler() -> "CreateDistrictHandler":
    from src.application.commands.handlers import CreateDistrictHandler

    return CreateDistrictHandler(
        district_service=get_district_app_service(), event_bus=get_event_bus()
    )


# ============================================================================
# Query Handler Factories
# ============================================================================


@lru_cache()
def get_check_declaracao_ir_exists_by_cnpj_handler() -> (
    "CheckDeclaracaoIRExistsByCnpjHandler"
):
    from src.application.queries.handlers import CheckDeclaracaoIRExistsByCnpjHandler

    return CheckDeclaracaoIRExistsByCnpjHandler(
        declaracao_ir_service=get_declaracao_ir_app_service()
    )


@lru_cache()
def get_check_declaracao_ir_exists_by_declaration_number_handler() -> (
    "CheckDeclaracaoIRExistsByDeclarationNumberHandler"
):
    from src.application.queries.handlers import (
        CheckDeclaracaoIRExistsByDeclarationNumberHandler,
    )

    return CheckDeclaracaoIRExistsByDeclarationNumberHandler(
        declaracao_ir_service=get_declaracao_ir_app_service()
    )
