"""Application services (one per entity) and their contracts."""

from src.application.services.contracts import (
    CountryAppServiceProtocol,
    DASAppServiceProtocol,
    DeclaracaoIRAppServiceProtocol,
    DistrictAppServiceProtocol,
    IdeNFSeAppServiceProtocol,
    StateAppServiceProtocol,
)
from src.application.services.das_app_service import DASAppService
from src.application.services.declaracao_ir_app_service import DeclaracaoIRAppService
from src.application.services.ide_nfse_app_service import IdeNFSeAppService
from src.application.services.location_app_services import (
    CountryAppService,
    DistrictAppService,
    StateAppService,
)

__all__ = [
    "CountryAppService",
    "CountryAppServiceProtocol",
    "DASAppService",
    "DASAppServiceProtocol",
    "DeclaracaoIRAppService",
    "DeclaracaoIRAppServiceProtocol",
    "DistrictAppService",
    "DistrictAppServiceProtocol",
    "IdeNFSeAppService",
    "IdeNFSeAppServiceProtocol",
    "StateAppService",
    "StateAppServiceProtocol",
]
