"""Command and query rule sets.

Explicit validation functions replace declarative field annotations: each
returns a ValidationResult with (field, rule, message) violations.
"""

from src.application.validators.fiscal_validators import (
    validate_check_declaracao_ir_exists_by_cnpj,
    validate_check_declaracao_ir_exists_by_declaration_number,
    validate_create_das,
    validate_create_declaracao_ir,
    validate_create_ide_nfse,
)
from src.application.validators.location_validators import (
    validate_create_country,
    validate_create_district,
    validate_create_state,
)

__all__ = [
    "validate_check_declaracao_ir_exists_by_cnpj",
    "validate_check_declaracao_ir_exists_by_declaration_number",
    "validate_create_country",
    "validate_create_das",
    "validate_create_declaracao_ir",
    "validate_create_district",
    "validate_create_ide_nfse",
    "validate_create_state",
]
