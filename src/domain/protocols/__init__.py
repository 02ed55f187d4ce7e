"""Domain protocols (ports) package.

Infrastructure adapters implement these protocols without inheritance.

IMPORTANT: Re-exports are ONLY for protocols defined in this package.

Usage:
    from src.domain.protocols import DASRepository, EventBusProtocol
"""

# Service protocols
from src.domain.protocols.event_bus_protocol import EventBusProtocol, EventHandler
from src.domain.protocols.logger_protocol import LoggerProtocol

# Repository protocols
from src.domain.protocols.das_repository import DASRepository
from src.domain.protocols.declaracao_ir_repository import DeclaracaoIRRepository
from src.domain.protocols.ide_nfse_repository import IdeNFSeRepository
from src.domain.protocols.location_repositories import (
    CountryRepository,
    DistrictRepository,
    StateRepository,
)

__all__ = [
    # Service protocols
    "EventBusProtocol",
    "EventHandler",
    "LoggerProtocol",
    # Repository protocols
    "CountryRepository",
    "DASRepository",
    "DeclaracaoIRRepository",
    "DistrictRepository",
    "IdeNFSeRepository",
    "StateRepository",
]
