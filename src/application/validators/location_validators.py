"""Rule sets for geographic master data commands."""

from src.application.commands.location_commands import (
    CreateCountry,
    CreateDistrict,
    CreateState,
)
from src.core.constants import (
    COUNTRY_NAME_MAX_LENGTH,
    DISTRICT_LOCATION_MAX_LENGTH,
    DISTRICT_NAME_MAX_LENGTH,
    STATE_NAME_MAX_LENGTH,
    UF_LENGTH,
)
from src.core.validation import ValidationResult


def validate_create_country(command: CreateCountry) -> ValidationResult:
    """Validate a CreateCountry command."""
    result = ValidationResult()
    result.require_text(
        command.country_name, "country_name", max_length=COUNTRY_NAME_MAX_LENGTH
    )
    return result


def validate_create_state(command: CreateState) -> ValidationResult:
    """Validate a CreateState command.

    The UF must be exactly two characters; case is not normalized.
    """
    result = ValidationResult()
    result.require_text(
        command.state_name, "state_name", max_length=STATE_NAME_MAX_LENGTH
    )
    result.require_text(command.uf, "uf", exact_length=UF_LENGTH)
    return result


def validate_create_district(command: CreateDistrict) -> ValidationResult:
    """Validate a CreateDistrict command."""
    result = ValidationResult()
    result.require_text(command.name, "name", max_length=DISTRICT_NAME_MAX_LENGTH)
    result.require_text(command.type, "type")
    result.require_text(
        command.location, "location", max_length=DISTRICT_LOCATION_MAX_LENGTH
    )
    return result
