"""Responses returned by the create command handlers."""

from src.application.responses.base import CreateResponse


class CreateDASResponse(CreateResponse):
    """Response to CreateDAS."""


class CreateDeclaracaoIRResponse(CreateResponse):
    """Response to CreateDeclaracaoIR."""


class CreateIdeNFSeResponse(CreateResponse):
    """Response to CreateIdeNFSe."""


class CreateCountryResponse(CreateResponse):
    """Response to CreateCountry."""


class CreateStateResponse(CreateResponse):
    """Response to CreateState."""


class CreateDistrictResponse(CreateResponse):
    """Response to CreateDistrict."""
