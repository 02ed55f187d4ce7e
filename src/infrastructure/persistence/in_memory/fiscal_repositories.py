"""In-memory adapters for the tax record repositories.

These classes do NOT inherit from the protocols (Protocol uses structural
typing).

Example:
    >>> repo = InMemoryDASRepository()
    >>> await repo.add(das)
    >>> await repo.get_by_document_number(das.document_number)
"""

from datetime import date

from src.domain.entities.das import DAS
from src.domain.entities.declaracao_ir import DeclaracaoIR
from src.domain.entities.ide_nfse import IdeNFSe
from src.infrastructure.persistence.in_memory.base import InMemoryRepository


class InMemoryDASRepository(InMemoryRepository[DAS]):
    """DASRepository backed by a list."""

    async def get_by_reference_month(self, reference_month: str) -> DAS | None:
        return self._first(lambda das: das.reference_month == reference_month)

    async def get_by_due_date(self, due_date: date) -> DAS | None:
        return self._first(lambda das: das.due_date == due_date)

    async def get_by_document_number(self, document_number: str) -> DAS | None:
        return self._first(lambda das: das.document_number == document_number)

    async def get_by_reference_year(self, reference_year: str) -> DAS | None:
        return self._first(lambda das: das.reference_year == reference_year)


class InMemoryDeclaracaoIRRepository(InMemoryRepository[DeclaracaoIR]):
    """DeclaracaoIRRepository backed by a list."""

    async def get_by_cnpj(self, cnpj: str) -> DeclaracaoIR | None:
        return self._first(lambda declaracao: declaracao.cnpj == cnpj)

    async def get_by_declaration_number(
        self, declaration_number: str
    ) -> DeclaracaoIR | None:
        return self._first(
            lambda declaracao: declaracao.declaration_number == declaration_number
        )


class InMemoryIdeNFSeRepository(InMemoryRepository[IdeNFSe]):
    """IdeNFSeRepository backed by a list."""

    async def get_by_number(self, number: str) -> IdeNFSe | None:
        return self._first(lambda ide_nfse: ide_nfse.number == number)
