"""IdeNFSeRepository protocol for NFSe identifying header persistence."""

from typing import Protocol

from src.domain.entities.ide_nfse import IdeNFSe


class IdeNFSeRepository(Protocol):
    """NFSe identifying header repository protocol (port)."""

    async def add(self, ide_nfse: IdeNFSe) -> None:
        """Persist a new NFSe header."""
        ...

    async def get_by_number(self, number: str) -> IdeNFSe | None:
        """Find NFSe header by invoice number.

        Returns:
            IdeNFSe if found, None otherwise.
        """
        ...
