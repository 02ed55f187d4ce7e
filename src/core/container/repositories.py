"""Repository dependency factories.

Application-scoped repository instances. The in-memory adapters hold their
records for the life of the process, so each factory returns one shared
instance.
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from src.core.config import get_settings

if TYPE_CHECKING:
    from src.domain.protocols.das_repository import DASRepository
    from src.domain.protocols.declaracao_ir_repository import DeclaracaoIRRepository
    from src.domain.protocols.ide_nfse_repository import IdeNFSeRepository
    from src.domain.protocols.location_repositories import (
        CountryRepository,
        DistrictRepository,
        StateRepository,
    )


def _require_in_memory_backend() -> None:
    backend = get_settings().repository_backend
    if backend != "in-memory":
        raise ValueError(
            f"Unsupported REPOSITORY_BACKEND: {backend}. Supported: 'in-memory'"
        )


# ============================================================================
# Tax Record Repositories
# ============================================================================


@lru_cache()
def get_das_repository() -> "DASRepository":
    """Get DAS repository (app-scoped).

    Raises:
        ValueError: If REPOSITORY_BACKEND names an unsupported adapter.
    """
    from src.infrastructure.persistence.in_memory import InMemoryDASRepository

    _require_in_memory_backend()
    return InMemoryDASRepository()


@lru_cache()
def get_declaracao_ir_repository() -> "DeclaracaoIRRepository":
    """Get income-tax declaration repository (app-scoped)."""
    from src.infrastructure.persistence.in_memory import (
        InMemoryDeclaracaoIRRepository,
    )

    _require_in_memory_backend()
    return InMemoryDeclaracaoIRRepository()


@lru_cache()
def get_ide_nfse_repository() -> "IdeNFSeRepository":
    """Get NFSe header repository (app-scoped)."""
    from src.infrastructure.persistence.in_memory import InMemoryIdeNFSeRepository

    _require_in_memory_backend()
    return InMemoryIdeNFSeRepository()


# ============================================================================
# Location Repositories
# ============================================================================


@lru_cache()
def get_country_repository() -> "CountryRepository":
    from src.infrastructure.persistence.in_memory import InMemoryCountryRepository

    _require_in_memory_backend()
    return InMemoryCountryRepository()


@lru_cache()
def get_state_repository() -> "StateRepository":
    from src.infrastructure.persistence.in_memory import InMemoryStateRepository

    _require_in_memory_backend()
    return InMemoryStateRepository()


@lru_cache()
def get_district_repository() -> "DistrictRepository":
    from src.infrastructure.persistence.in_memory import InMemoryDistrictRepository

    _require_in_memory_backend()
    return InMemoryDistrictRepository()
