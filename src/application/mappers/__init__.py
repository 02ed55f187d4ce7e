"""Explicit entity to view model projection functions."""

from src.application.mappers.fiscal_mappers import (
    map_das_to_view_model,
    map_declaracao_ir_to_view_model,
    map_ide_nfse_to_view_model,
)
from src.application.mappers.location_mappers import (
    map_country_to_view_model,
    map_district_to_view_model,
    map_state_to_view_model,
)

__all__ = [
    "map_country_to_view_model",
    "map_das_to_view_model",
    "map_declaracao_ir_to_view_model",
    "map_district_to_view_model",
    "map_ide_nfse_to_view_model",
    "map_state_to_view_model",
]
