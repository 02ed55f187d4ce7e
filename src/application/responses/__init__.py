"""Request responses (correlation id, result, error messages)."""

from src.application.responses.base import (
    CheckExistsResponse,
    CreateResponse,
    Response,
)
from src.application.responses.check_exists_responses import (
    CheckDeclaracaoIRExistsByCnpjResponse,
    CheckDeclaracaoIRExistsByDeclarationNumberResponse,
)
from src.application.responses.create_responses import (
    CreateCountryResponse,
    CreateDASResponse,
    CreateDeclaracaoIRResponse,
    CreateDistrictResponse,
    CreateIdeNFSeResponse,
    CreateStateResponse,
)

__all__ = [
    "CheckDeclaracaoIRExistsByCnpjResponse",
    "CheckDeclaracaoIRExistsByDeclarationNumberResponse",
    "CheckExistsResponse",
    "CreateCountryResponse",
    "CreateDASResponse",
    "CreateDeclaracaoIRResponse",
    "CreateDistrictResponse",
    "CreateIdeNFSeResponse",
    "CreateResponse",
    "CreateStateResponse",
    "Response",
]
