"""Domain entities.

Pure business entities with no framework dependencies.
"""

from src.domain.entities.country import Country
from src.domain.entities.das import DAS
from src.domain.entities.declaracao_ir import DeclaracaoIR
from src.domain.entities.district import District
from src.domain.entities.ide_nfse import IdeNFSe
from src.domain.entities.state import State

__all__ = [
    "Country",
    "DAS",
    "DeclaracaoIR",
    "District",
    "IdeNFSe",
    "State",
]
