"""In-memory repository adapters."""

from src.infrastructure.persistence.in_memory.fiscal_repositories import (
    InMemoryDASRepository,
    InMemoryDeclaracaoIRRepository,
    InMemoryIdeNFSeRepository,
)
from src.infrastructure.persistence.in_memory.location_repositories import (
    InMemoryCountryRepository,
    InMemoryDistrictRepository,
    InMemoryStateRepository,
)

__all__ = [
    "InMemoryCountryRepository",
    "InMemoryDASRepository",
    "InMemoryDeclaracaoIRRepository",
    "InMemoryDistrictRepository",
    "InMemoryIdeNFSeRepository",
    "InMemoryStateRepository",
]
