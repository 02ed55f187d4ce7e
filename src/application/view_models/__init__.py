"""View models (externally facing projections of entities)."""

from src.application.view_models.fiscal_view_models import (
    DASViewModel,
    DeclaracaoIRViewModel,
    IdeNFSeViewModel,
)
from src.application.view_models.location_view_models import (
    CountryViewModel,
    DistrictViewModel,
    StateViewModel,
)

__all__ = [
    "CountryViewModel",
    "DASViewModel",
    "DeclaracaoIRViewModel",
    "DistrictViewModel",
    "IdeNFSeViewModel",
    "StateViewModel",
]
