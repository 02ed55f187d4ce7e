"""DASRepository protocol for tax-payment slip persistence.

Port (interface) for hexagonal architecture.
Infrastructure layer implements this protocol.
"""

from datetime import date
from typing import Protocol

from src.domain.entities.das import DAS


class DASRepository(Protocol):
    """DAS repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.

    Every lookup returns None when nothing matches; absence is not an
    error. Persistence faults are raised as exceptions and are expected
    to reach the caller unchanged.

    Methods:
        add: Persist a new slip
        get_by_reference_month: Slip for a reference month
        get_by_due_date: Slip due on a date
        get_by_document_number: Slip by document number
        get_by_reference_year: Slip for a reference year
    """

    async def add(self, das: DAS) -> None:
        """Persist a new slip.

        Args:
            das: DAS entity to persist.
        """
        ...

    async def get_by_reference_month(self, reference_month: str) -> DAS | None:
        """Find slip by reference month (e.g. "Outubro").

        Returns:
            DAS if found, None otherwise.
        """
        ...

    async def get_by_due_date(self, due_date: date) -> DAS | None:
        """Find slip by due date.

        Returns:
            DAS if found, None otherwise.
        """
        ...

    async def get_by_document_number(self, document_number: str) -> DAS | None:
        """Find slip by document number.

        Returns:
            DAS if found, None otherwise.
        """
        ...

    async def get_by_reference_year(self, reference_year: str) -> DAS | None:
        """Find slip by reference year (e.g. "2023").

        Returns:
            DAS if found, None otherwise.
        """
        ...
