"""CreateCountry command handler."""

from src.application.commands.handlers.rejection import publish_rejection
from src.application.commands.location_commands import CreateCountry
from src.application.responses.create_responses import CreateCountryResponse
from src.application.services.contracts import CountryAppServiceProtocol
from src.application.validators.location_validators import validate_create_country
from src.domain.protocols.event_bus_protocol import EventBusProtocol


class CreateCountryError:
    """CreateCountry-specific errors."""

    COUNTRY_NAME_ALREADY_EXISTS = "A country with this name already exists"


class CreateCountryHandler:
    """Handler for CreateCountry command."""

    def __init__(
        self,
        country_service: CountryAppServiceProtocol,
        event_bus: EventBusProtocol,
    ) -> None:
        self._country_service = country_service
        self._event_bus = event_bus

    async def handle(self, cmd: CreateCountry) -> CreateCountryResponse:
        validation = validate_create_country(cmd)
        if not validation.is_valid:
            await publish_rejection(self._event_bus, cmd, validation.messages)
            return CreateCountryResponse.from_validation(cmd.request_id, validation)

        if await self._country_service.get_by_country_name(cmd.country_name) is not None:
            message = CreateCountryError.COUNTRY_NAME_ALREADY_EXISTS
            await publish_rejection(self._event_bus, cmd, (message,))
            return CreateCountryResponse.failed(cmd.request_id, message)

        country_id = await self._country_service.save(cmd)
        return CreateCountryResponse.created(cmd.request_id, country_id)
