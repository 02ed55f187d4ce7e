"""CreateDAS command handler.

Registers a tax-payment slip. Validation failures and duplicate document
numbers come back in the response; repository faults propagate.

Flow:
    1. Run the CreateDAS rule set
    2. Reject when the document number is already registered
    3. Save through the DAS application service
"""

from src.application.commands.fiscal_commands import CreateDAS
from src.application.commands.handlers.rejection import publish_rejection
from src.application.responses.create_responses import CreateDASResponse
from src.application.services.contracts import DASAppServiceProtocol
from src.application.validators.fiscal_validators import validate_create_das
from src.domain.protocols.event_bus_protocol import EventBusProtocol


class CreateDASError:
    """CreateDAS-specific errors."""

    DOCUMENT_NUMBER_ALREADY_EXISTS = "A DAS with this document number already exists"


class CreateDASHandler:
    """Handler for CreateDAS command.

    Dependencies (injected via constructor):
        - DASAppServiceProtocol: Lookup and persistence
        - EventBusProtocol: Publishes FiscalCommandRejected
    """

    def __init__(
        self,
        das_service: DASAppServiceProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            das_service: DAS application service.
            event_bus: Event bus for rejection events.
        """
        self._das_service = das_service
        self._event_bus = event_bus

    async def handle(self, cmd: CreateDAS) -> CreateDASResponse:
        """Handle CreateDAS command.

        Args:
            cmd: CreateDAS command.

        Returns:
            Response with entity_id set on success, or the rejection messages.

        Side Effects:
            - Publishes FiscalCommandRejected (on rejection)
            - Persists the slip and publishes DASCreated (on success, via service)
        """
        validation = validate_create_das(cmd)
        if not validation.is_valid:
            await publish_rejection(self._event_bus, cmd, validation.messages)
            return CreateDASResponse.from_validation(cmd.request_id, validation)

        existing = await self._das_service.get_by_document_number(cmd.document_number)
        if existing is not None:
            message = CreateDASError.DOCUMENT_NUMBER_ALREADY_EXISTS
            await publish_rejection(self._event_bus, cmd, (message,))
            return CreateDASResponse.failed(cmd.request_id, message)

        das_id = await self._das_service.save(cmd)
        return CreateDASResponse.created(cmd.request_id, das_id)
