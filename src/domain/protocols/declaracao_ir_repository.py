"""DeclaracaoIRRepository protocol for income-tax declaration persistence.

Port (interface) for hexagonal architecture.
"""

from typing import Protocol

from src.domain.entities.declaracao_ir import DeclaracaoIR


class DeclaracaoIRRepository(Protocol):
    """Income-tax declaration repository protocol (port).

    Methods:
        add: Persist a new declaration
        get_by_cnpj: Declaration filed by a company
        get_by_declaration_number: Declaration by receipt number
    """

    async def add(self, declaracao_ir: DeclaracaoIR) -> None:
        """Persist a new declaration."""
        ...

    async def get_by_cnpj(self, cnpj: str) -> DeclaracaoIR | None:
        """Find declaration by company CNPJ.

        Returns:
            DeclaracaoIR if found, None otherwise.
        """
        ...

    async def get_by_declaration_number(
        self, declaration_number: str
    ) -> DeclaracaoIR | None:
        """Find declaration by receipt number.

        Returns:
            DeclaracaoIR if found, None otherwise.
        """
        ...
