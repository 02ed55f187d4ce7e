"""Responses returned by the existence check query handlers."""

from src.application.responses.base import CheckExistsResponse


class CheckDeclaracaoIRExistsByCnpjResponse(CheckExistsResponse):
    """Response to CheckDeclaracaoIRExistsByCnpj."""


class CheckDeclaracaoIRExistsByDeclarationNumberResponse(CheckExistsResponse):
    """Response to CheckDeclaracaoIRExistsByDeclarationNumber."""
