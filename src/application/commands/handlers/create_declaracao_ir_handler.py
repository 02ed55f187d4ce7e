"""CreateDeclaracaoIR command handler.

Registers an income-tax declaration. A declaration number can only be
registered once.
"""

from src.application.commands.fiscal_commands import CreateDeclaracaoIR
from src.application.commands.handlers.rejection import publish_rejection
from src.application.responses.create_responses import CreateDeclaracaoIRResponse
from src.application.services.contracts import DeclaracaoIRAppServiceProtocol
from src.application.validators.fiscal_validators import (
    validate_create_declaracao_ir,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol


class CreateDeclaracaoIRError:
    """CreateDeclaracaoIR-specific errors."""

    DECLARATION_NUMBER_ALREADY_EXISTS = (
        "A declaration with this declaration number already exists"
    )


class CreateDeclaracaoIRHandler:
    """Handler for CreateDeclaracaoIR command."""

    def __init__(
        self,
        declaracao_ir_service: DeclaracaoIRAppServiceProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._declaracao_ir_service = declaracao_ir_service
        self._event_bus = event_bus

    async def handle(self, cmd: CreateDeclaracaoIR) -> CreateDeclaracaoIRResponse:
        """Validate, reject duplicates, then save.

        Args:
            cmd: CreateDeclaracaoIR command.

        Returns:
            Response with entity_id set on success, or the rejection messages.
        """
        validation = validate_create_declaracao_ir(cmd)
        if not validation.is_valid:
            await publish_rejection(self._event_bus, cmd, validation.messages)
            return CreateDeclaracaoIRResponse.from_validation(
                cmd.request_id, validation
            )

        existing = await self._declaracao_ir_service.get_by_declaration_number(
            cmd.declaration_number
        )
        if existing is not None:
            message = CreateDeclaracaoIRError.DECLARATION_NUMBER_ALREADY_EXISTS
            await publish_rejection(self._event_bus, cmd, (message,))
            return CreateDeclaracaoIRResponse.failed(cmd.request_id, message)

        declaracao_ir_id = await self._declaracao_ir_service.save(cmd)
        return CreateDeclaracaoIRResponse.created(cmd.request_id, declaracao_ir_id)
