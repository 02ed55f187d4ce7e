"""Query handlers."""

from src.application.queries.handlers.check_declaracao_ir_exists_handlers import (
    CheckDeclaracaoIRExistsByCnpjHandler,
    CheckDeclaracaoIRExistsByDeclarationNumberHandler,
)

__all__ = [
    "CheckDeclaracaoIRExistsByCnpjHandler",
    "CheckDeclaracaoIRExistsByDeclarationNumberHandler",
]
