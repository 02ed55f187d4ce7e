"""CreateState command handler.

States are keyed by UF: a second state with the same two-letter code is
rejected. A country_id must name a registered country.
"""

from src.application.commands.handlers.rejection import publish_rejection
from src.application.commands.location_commands import CreateState
from src.application.responses.create_responses import CreateStateResponse
from src.application.services.contracts import StateAppServiceProtocol
from src.application.validators.location_validators import validate_create_state
from src.domain.protocols.event_bus_protocol import EventBusProtocol


class CreateStateError:
    """CreateState-specific errors."""

    UF_ALREADY_EXISTS = "A state with this UF already exists"
    COUNTRY_NOT_FOUND = "No country with this identifier exists"


class CreateStateHandler:
    """Handler for CreateState command.

    Dependencies (injected via constructor):
        - StateAppServiceProtocol: Lookup and persistence
        - EventBusProtocol: Publishes FiscalCommandRejected
    """

    def __init__(
        self,
        state_service: StateAppServiceProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._state_service = state_service
        self._event_bus = event_bus

    async def handle(self, cmd: CreateState) -> CreateStateResponse:
        """Handle CreateState command.

        Args:
            cmd: CreateState command.

        Returns:
            Response with entity_id set on success, or the rejection messages.
        """
        validation = validate_create_state(cmd)
        if not validation.is_valid:
            await publish_rejection(self._event_bus, cmd, validation.messages)
            return CreateStateResponse.from_validation(cmd.request_id, validation)

        if await self._state_service.get_by_uf(cmd.uf) is not None:
            message = CreateStateError.UF_ALREADY_EXISTS
            await publish_rejection(self._event_bus, cmd, (message,))
            return CreateStateResponse.failed(cmd.request_id, message)

        if cmd.country_id is not None and not await self._state_service.country_exists(
            cmd.country_id
        ):
            message = CreateStateError.COUNTRY_NOT_FOUND
            await publish_rejection(self._event_bus, cmd, (message,))
            return CreateStateResponse.failed(cmd.request_id, message)

        state_id = await self._state_service.save(cmd)
        return CreateStateResponse.created(cmd.request_id, state_id)
