"""CreateIdeNFSe command handler."""

from src.application.commands.fiscal_commands import CreateIdeNFSe
from src.application.commands.handlers.rejection import publish_rejection
from src.application.responses.create_responses import CreateIdeNFSeResponse
from src.application.services.contracts import IdeNFSeAppServiceProtocol
from src.application.validators.fiscal_validators import validate_create_ide_nfse
from src.domain.protocols.event_bus_protocol import EventBusProtocol


class CreateIdeNFSeError:
    """CreateIdeNFSe-specific errors."""

    NUMBER_ALREADY_EXISTS = "An NFSe with this number already exists"


class CreateIdeNFSeHandler:
    """Handler for CreateIdeNFSe command.

    Registers an NFSe identifying header; the NFSe number is unique.
    """

    def __init__(
        self,
        ide_nfse_service: IdeNFSeAppServiceProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._ide_nfse_service = ide_nfse_service
        self._event_bus = event_bus

    async def handle(self, cmd: CreateIdeNFSe) -> CreateIdeNFSeResponse:
        validation = validate_create_ide_nfse(cmd)
        if not validation.is_valid:
            await publish_rejection(self._event_bus, cmd, validation.messages)
            return CreateIdeNFSeResponse.from_validation(cmd.request_id, validation)

        if await self._ide_nfse_service.get_by_number(cmd.number) is not None:
            message = CreateIdeNFSeError.NUMBER_ALREADY_EXISTS
            await publish_rejection(self._event_bus, cmd, (message,))
            return CreateIdeNFSeResponse.failed(cmd.request_id, message)

        ide_nfse_id = await self._ide_nfse_service.save(cmd)
        return CreateIdeNFSeResponse.created(cmd.request_id, ide_nfse_id)
