"""Income-tax declaration existence check handlers.

Both handlers validate the query, answer through the declaration
application service and never change state or publish events.

Architecture:
- Application layer handler (orchestrates data retrieval)
- Invalid queries come back as exists=False plus the validation messages
- Repository faults propagate
"""

from src.application.queries.declaracao_ir_queries import (
    CheckDeclaracaoIRExistsByCnpj,
    CheckDeclaracaoIRExistsByDeclarationNumber,
)
from src.application.responses.check_exists_responses import (
    CheckDeclaracaoIRExistsByCnpjResponse,
    CheckDeclaracaoIRExistsByDeclarationNumberResponse,
)
from src.application.services.contracts import DeclaracaoIRAppServiceProtocol
from src.application.validators.fiscal_validators import (
    validate_check_declaracao_ir_exists_by_cnpj,
    validate_check_declaracao_ir_exists_by_declaration_number,
)


class CheckDeclaracaoIRExistsByCnpjHandler:
    """Handler for CheckDeclaracaoIRExistsByCnpj query.

    Dependencies (injected via constructor):
        - DeclaracaoIRAppServiceProtocol: Declaration lookups
    """

    def __init__(self, declaracao_ir_service: DeclaracaoIRAppServiceProtocol) -> None:
        """Initialize handler with dependencies.

        Args:
            declaracao_ir_service: Declaration application service.
        """
        self._declaracao_ir_service = declaracao_ir_service

    async def handle(
        self, query: CheckDeclaracaoIRExistsByCnpj
    ) -> CheckDeclaracaoIRExistsByCnpjResponse:
        """Handle CheckDeclaracaoIRExistsByCnpj query.

        Args:
            query: Query with the company CNPJ.

        Returns:
            Response whose exists flag tells whether a declaration was found.
        """
        validation = validate_check_declaracao_ir_exists_by_cnpj(query)
        if not validation.is_valid:
            return CheckDeclaracaoIRExistsByCnpjResponse.from_validation(
                query.request_id, False, validation
            )

        declaracao_ir = await self._declaracao_ir_service.get_by_cnpj(query.cnpj)
        return CheckDeclaracaoIRExistsByCnpjResponse(
            query.request_id, exists=declaracao_ir is not None
        )


class CheckDeclaracaoIRExistsByDeclarationNumberHandler:
    """Handler for CheckDeclaracaoIRExistsByDeclarationNumber query."""

    def __init__(self, declaracao_ir_service: DeclaracaoIRAppServiceProtocol) -> None:
        self._declaracao_ir_service = declaracao_ir_service

    async def handle(
        self, query: CheckDeclaracaoIRExistsByDeclarationNumber
    ) -> CheckDeclaracaoIRExistsByDeclarationNumberResponse:
        validation = validate_check_declaracao_ir_exists_by_declaration_number(query)
        if not validation.is_valid:
            return CheckDeclaracaoIRExistsByDeclarationNumberResponse.from_validation(
                query.request_id, False, validation
            )

        declaracao_ir = await self._declaracao_ir_service.get_by_declaration_number(
            query.declaration_number
        )
        return CheckDeclaracaoIRExistsByDeclarationNumberResponse(
            query.request_id, exists=declaracao_ir is not None
        )
