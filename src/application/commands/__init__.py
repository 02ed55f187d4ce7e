"""Commands - Write operations that change state.

Commands represent user intent to register a record. They are immutable
dataclasses with imperative names (CreateDAS, CreateState).

Each command has a corresponding handler in commands/handlers/.
"""

from src.application.commands.fiscal_commands import (
    CreateDAS,
    CreateDeclaracaoIR,
    CreateIdeNFSe,
)
from src.application.commands.location_commands import (
    CreateCountry,
    CreateDistrict,
    CreateState,
)

__all__ = [
    "CreateCountry",
    "CreateDAS",
    "CreateDeclaracaoIR",
    "CreateDistrict",
    "CreateIdeNFSe",
    "CreateState",
]
