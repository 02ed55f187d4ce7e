"""View models for geographic master data.

Length limits are display metadata (`json_schema_extra`), not constraints:
projecting a stored record never fails validation.
"""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from src.core.constants import (
    COUNTRY_NAME_MAX_LENGTH,
    DISTRICT_LOCATION_MAX_LENGTH,
    DISTRICT_NAME_MAX_LENGTH,
    STATE_NAME_MAX_LENGTH,
)


class StateViewModel(BaseModel):
    """State projection."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(..., description="State unique identifier")
    uf: str = Field(..., title="UF", examples=["SP"])
    state_name: str = Field(
        ...,
        title="Nome do Estado",
        json_schema_extra={"maxLength": STATE_NAME_MAX_LENGTH},
    )
    country_id: UUID | None = Field(None, description="Owning country identifier")


class CountryViewModel(BaseModel):
    """Country projection, including its states."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(..., description="Country unique identifier")
    country_name: str = Field(
        ...,
        title="Nome do País",
        json_schema_extra={"maxLength": COUNTRY_NAME_MAX_LENGTH},
    )
    states: list[StateViewModel] = Field(default_factory=list, title="Estados")


class DistrictViewModel(BaseModel):
    """District projection."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(..., description="District unique identifier")
    name: str = Field(
        ...,
        title="Nome do Distrito",
        json_schema_extra={"maxLength": DISTRICT_NAME_MAX_LENGTH},
    )
    type: str = Field(..., title="Tipo do Distrito")
    location: str = Field(
        ...,
        title="Localização do Distrito",
        json_schema_extra={"maxLength": DISTRICT_LOCATION_MAX_LENGTH},
    )
