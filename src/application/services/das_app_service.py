"""DAS application service.

Thin orchestration layer over the DAS repository: lookups are projected to
view models, saves materialize the entity from the command and announce it
on the event bus.

Architecture:
    - Application service (uses repository and event bus protocols)
    - Stateless: every call is an independent round trip
    - Faults raised by the repository propagate unchanged (no catch,
      no wrap, no retry)
    - A missing record is returned as None, never as an error

Usage:
    service = DASAppService(das_repo=repo, event_bus=bus)

    view_model = await service.get_by_document_number("283789234789347")
    das_id = await service.save(command)
"""

from collections.abc import Callable
from datetime import date
from uuid import UUID

from src.application.commands.fiscal_commands import CreateDAS
from src.application.mappers.fiscal_mappers import map_das_to_view_model
from src.application.view_models.fiscal_view_models import DASViewModel
from src.domain.entities.das import DAS
from src.domain.events.fiscal_events import DASCreated
from src.domain.protocols.das_repository import DASRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol


class DASAppService:
    """Application service for tax-payment slips.

    Dependencies (injected via constructor):
        - DASRepository: Slip persistence
        - EventBusProtocol: Publishes DASCreated after a save
        - mapper: Entity to view model projection
    """

    def __init__(
        self,
        das_repo: DASRepository,
        event_bus: EventBusProtocol,
        mapper: Callable[[DAS], DASViewModel] = map_das_to_view_model,
    ) -> None:
        """Initialize service with dependencies.

        Args:
            das_repo: DAS repository.
            event_bus: Event bus for domain events.
            mapper: Projection applied to every record found.
        """
        self._das_repo = das_repo
        self._event_bus = event_bus
        self._mapper = mapper

    async def get_by_reference_month(self, reference_month: str) -> DASViewModel | None:
        """Slip for a reference month, or None."""
        das = await self._das_repo.get_by_reference_month(reference_month)
        return self._project(das)

    async def get_by_due_date(self, due_date: date) -> DASViewModel | None:
        """Slip due on a date, or None."""
        das = await self._das_repo.get_by_due_date(due_date)
        return self._project(das)

    async def get_by_document_number(self, document_number: str) -> DASViewModel | None:
        """Slip by document number, or None."""
        das = await self._das_repo.get_by_document_number(document_number)
        return self._project(das)

    async def get_by_reference_year(self, reference_year: str) -> DASViewModel | None:
        """Slip for a reference year, or None."""
        das = await self._das_repo.get_by_reference_year(reference_year)
        return self._project(das)

    async def save(self, command: CreateDAS) -> UUID:
        """Materialize and persist a slip.

        Args:
            command: CreateDAS command (already validated by the caller).

        Returns:
            Identifier of the new slip.

        Side Effects:
            - Adds the slip to the repository (exactly once)
            - Publishes DASCreated (only after the add succeeded)
        """
        das = command.to_entity()
        await self._das_repo.add(das)
        await self._event_bus.publish(
            DASCreated(
                das_id=das.id,
                document_number=das.document_number,
                reference_month=das.reference_month,
                reference_year=das.reference_year,
            )
        )
        return das.id

    def _project(self, das: DAS | None) -> DASViewModel | None:
        if das is None:
            return None
        return self._mapper(das)
