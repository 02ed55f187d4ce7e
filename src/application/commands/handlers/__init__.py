"""Command handlers (one per create command)."""

from src.application.commands.handlers.create_country_handler import (
    CreateCountryError,
    CreateCountryHandler,
)
from src.application.commands.handlers.create_das_handler import (
    CreateDASError,
    CreateDASHandler,
)
from src.application.commands.handlers.create_declaracao_ir_handler import (
    CreateDeclaracaoIRError,
    CreateDeclaracaoIRHandler,
)
from src.application.commands.handlers.create_district_handler import (
    CreateDistrictError,
    CreateDistrictHandler,
)
from src.application.commands.handlers.create_ide_nfse_handler import (
    CreateIdeNFSeError,
    CreateIdeNFSeHandler,
)
from src.application.commands.handlers.create_state_handler import (
    CreateStateError,
    CreateStateHandler,
)

__all__ = [
    "CreateCountryError",
    "CreateCountryHandler",
    "CreateDASError",
    "CreateDASHandler",
    "CreateDeclaracaoIRError",
    "CreateDeclaracaoIRHandler",
    "CreateDistrictError",
    "CreateDistrictHandler",
    "CreateIdeNFSeError",
    "CreateIdeNFSeHandler",
    "CreateStateError",
    "CreateStateHandler",
]
