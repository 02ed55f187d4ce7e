"""Income-tax declaration application service.

Same shape as the DAS service: lookups by CNPJ or receipt number return
view models (or None); save materializes, persists and publishes
DeclaracaoIRCreated. Repository faults propagate unchanged.
"""

from collections.abc import Callable
from uuid import UUID

from src.application.commands.fiscal_commands import CreateDeclaracaoIR
from src.application.mappers.fiscal_mappers import map_declaracao_ir_to_view_model
from src.application.view_models.fiscal_view_models import DeclaracaoIRViewModel
from src.domain.entities.declaracao_ir import DeclaracaoIR
from src.domain.events.fiscal_events import DeclaracaoIRCreated
from src.domain.protocols.declaracao_ir_repository import DeclaracaoIRRepository
from src.domain.protocols.event_bus_protocol import EventBusProtocol


class DeclaracaoIRAppService:
    """Application service for income-tax declarations."""

    def __init__(
        self,
        declaracao_ir_repo: DeclaracaoIRRepository,
        event_bus: EventBusProtocol,
        mapper: Callable[
            [DeclaracaoIR], DeclaracaoIRViewModel
        ] = map_declaracao_ir_to_view_model,
    ) -> None:
        self._declaracao_ir_repo = declaracao_ir_repo
        self._event_bus = event_bus
        self._mapper = mapper

    async def get_by_cnpj(self, cnpj: str) -> DeclaracaoIRViewModel | None:
        """Declaration filed by a company, or None."""
        declaracao_ir = await self._declaracao_ir_repo.get_by_cnpj(cnpj)
        return None if declaracao_ir is None else self._mapper(declaracao_ir)

    async def get_by_declaration_number(
        self, declaration_number: str
    ) -> DeclaracaoIRViewModel | None:
        """Declaration by receipt number, or None."""
        declaracao_ir = await self._declaracao_ir_repo.get_by_declaration_number(
            declaration_number
        )
        return None if declaracao_ir is None else self._mapper(declaracao_ir)

    async def save(self, command: CreateDeclaracaoIR) -> UUID:
        """Materialize, persist and announce a declaration.

        Returns:
            Identifier of the new declaration.
        """
        declaracao_ir = command.to_entity()
        await self._declaracao_ir_repo.add(declaracao_ir)
        await self._event_bus.publish(
            DeclaracaoIRCreated(
                declaracao_ir_id=declaracao_ir.id,
                cnpj=declaracao_ir.cnpj,
                declaration_number=declaracao_ir.declaration_number,
            )
        )
        return declaracao_ir.id
