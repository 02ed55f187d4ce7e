"""Queries - Read operations that fetch data.

Queries never change state. Each query has a handler in queries/handlers/.
Plain key lookups go straight to the application services.
"""

from src.application.queries.declaracao_ir_queries import (
    CheckDeclaracaoIRExistsByCnpj,
    CheckDeclaracaoIRExistsByDeclarationNumber,
)

__all__ = [
    "CheckDeclaracaoIRExistsByCnpj",
    "CheckDeclaracaoIRExistsByDeclarationNumber",
]
