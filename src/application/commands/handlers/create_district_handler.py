"""CreateDistrict command handler."""

from src.application.commands.handlers.rejection import publish_rejection
from src.application.commands.location_commands import CreateDistrict
from src.application.responses.create_responses import CreateDistrictResponse
from src.application.services.contracts import DistrictAppServiceProtocol
from src.application.validators.location_validators import (
    validate_create_district,
)
from src.domain.protocols.event_bus_protocol import EventBusProtocol


class CreateDistrictError:
    """CreateDistrict-specific errors."""

    NAME_ALREADY_EXISTS = "A district with this name already exists"


class CreateDistrictHandler:
    """Handler for CreateDistrict command."""

    def __init__(
        self,
        district_service: DistrictAppServiceProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._district_service = district_service
        self._event_bus = event_bus

    async def handle(self, cmd: CreateDistrict) -> CreateDistrictResponse:
        validation = validate_create_district(cmd)
        if not validation.is_valid:
            await publish_rejection(self._event_bus, cmd, validation.messages)
            return CreateDistrictResponse.from_validation(cmd.request_id, validation)

        if await self._district_service.get_by_name(cmd.name) is not None:
            message = CreateDistrictError.NAME_ALREADY_EXISTS
            await publish_rejection(self._event_bus, cmd, (message,))
            return CreateDistrictResponse.failed(cmd.request_id, message)

        district_id = await self._district_service.save(cmd)
        return CreateDistrictResponse.created(cmd.request_id, district_id)
