"""NFSe identifying header application service."""

from collections.abc import Callable
from uuid import UUID

from src.application.commands.fiscal_commands import CreateIdeNFSe
from src.application.mappers.fiscal_mappers import map_ide_nfse_to_view_model
from src.application.view_models.fiscal_view_models import IdeNFSeViewModel
from src.domain.entities.ide_nfse import IdeNFSe
from src.domain.events.fiscal_events import IdeNFSeCreated
from src.domain.protocols.event_bus_protocol import EventBusProtocol
from src.domain.protocols.ide_nfse_repository import IdeNFSeRepository


class IdeNFSeAppService:
    """Application service for NFSe identifying headers."""

    def __init__(
        self,
        ide_nfse_repo: IdeNFSeRepository,
        event_bus: EventBusProtocol,
        mapper: Callable[[IdeNFSe], IdeNFSeViewModel] = map_ide_nfse_to_view_model,
    ) -> None:
        self._ide_nfse_repo = ide_nfse_repo
        self._event_bus = event_bus
        self._mapper = mapper

    async def get_by_number(self, number: str) -> IdeNFSeViewModel | None:
        """NFSe header by invoice number, or None."""
        ide_nfse = await self._ide_nfse_repo.get_by_number(number)
        return None if ide_nfse is None else self._mapper(ide_nfse)

    async def save(self, command: CreateIdeNFSe) -> UUID:
        """Materialize, persist and announce an NFSe header.

        Returns:
            Identifier of the new header.
        """
        ide_nfse = command.to_entity()
        await self._ide_nfse_repo.add(ide_nfse)
        await self._event_bus.publish(
            IdeNFSeCreated(
                ide_nfse_id=ide_nfse.id,
                number=ide_nfse.number,
                series=ide_nfse.series,
            )
        )
        return ide_nfse.id
