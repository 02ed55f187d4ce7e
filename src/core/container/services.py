"""Application service dependency factories.

Each service is wired with its repository and the shared event bus.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.container.events import get_event_bus
from src.core.container.repositories import (
    get_country_repository,
    get_das_repository,
    get_declaracao_ir_repository,
    get_district_repository,
    get_ide_nfse_repository,
    get_state_repository,
)

if TYPE_CHECKING:
    from src.application.services import (
        CountryAppService,
        DASAppService,
        DeclaracaoIRAppService,
        DistrictAppService,
        IdeNFSeAppService,
        StateAppService,
    )


@lru_cache()
def get_das_app_service() -> "DASAppService":
    from src.application.services import DASAppService

    return DASAppService(das_repo=get_das_repository(), event_bus=get_event_bus())


@lru_cache()
def get_declaracao_ir_app_service() -> "DeclaracaoIRAppService":
    from src.application.services import DeclaracaoIRAppService

    return DeclaracaoIRAppService(
        declaracao_ir_repo=get_declaracao_ir_repository(),
        event_bus=get_event_bus(),
    )


@lru_cache()
def get_ide_nfse_app_service() -> "IdeNFSeAppService":
    from src.application.services import IdeNFSeAppService

    return IdeNFSeAppService(
        ide_nfse_repo=get_ide_nfse_repository(), event_bus=get_event_bus()
    )


@lru_cache()
def get_country_app_service() -> "CountryAppService":
    from src.application.services import CountryAppService

    return CountryAppService(
        country_repo=get_country_repository(), event_bus=get_event_bus()
    )


@lru_cache()
def get_state_app_service() -> "StateAppService":
    from src.application.services import StateAppService

    return StateAppService(
        state_repo=get_state_repository(),
        country_repo=get_country_repository(),
        event_bus=get_event_bus(),
    )


@lru_cache()
def get_district_app_service() -> "DistrictAppService":
    from src.application.services import DistrictAppService

    return DistrictAppService(
        district_repo=get_district_repository(), event_bus=get_event_bus()
    )
