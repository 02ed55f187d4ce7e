"""Rule sets for fiscal record commands and queries.

Each function runs every rule for its input and returns the collected
violations in field order. Within a field, rules stop at the first
violation.

Usage:
    from src.application.validators import validate_create_das

    result = validate_create_das(command)
    if not result.is_valid:
        return CreateDASResponse.from_validation(command.request_id, result)
"""

from src.application.commands.fiscal_commands import (
    CreateDAS,
    CreateDeclaracaoIR,
    CreateIdeNFSe,
)
from src.application.queries.declaracao_ir_queries import (
    CheckDeclaracaoIRExistsByCnpj,
    CheckDeclaracaoIRExistsByDeclarationNumber,
)
from src.core.constants import (
    BAR_CODE_MAX_LENGTH,
    CNPJ_LENGTH,
    DECLARATION_NUMBER_MAX_LENGTH,
    DOCUMENT_NUMBER_MAX_LENGTH,
    IBGE_CODE_LENGTH,
    NFSE_NUMBER_MAX_LENGTH,
    NFSE_SERIES_MAX_LENGTH,
    NFSE_TYPE_MAX_LENGTH,
    REFERENCE_MONTH_MAX_LENGTH,
    YEAR_LENGTH,
)
from src.core.validation import (
    ValidationResult,
    validate_not_empty,
    validate_positive_amount,
)


def validate_create_das(command: CreateDAS) -> ValidationResult:
    """Validate a CreateDAS command."""
    result = ValidationResult()
    result.require_text(
        command.reference_month,
        "reference_month",
        max_length=REFERENCE_MONTH_MAX_LENGTH,
    )
    result.check(validate_not_empty(command.due_date, "due_date"))
    result.require_text(
        command.reference_year, "reference_year", exact_length=YEAR_LENGTH, digits=True
    )
    if result.check(validate_not_empty(command.payment_value, "payment_value")):
        result.check(validate_positive_amount(command.payment_value, "payment_value"))
    result.require_text(
        command.document_number,
        "document_number",
        max_length=DOCUMENT_NUMBER_MAX_LENGTH,
        digits=True,
    )
    result.require_text(
        command.bar_code, "bar_code", max_length=BAR_CODE_MAX_LENGTH, digits=True
    )
    return result


def validate_create_declaracao_ir(command: CreateDeclaracaoIR) -> ValidationResult:
    """Validate a CreateDeclaracaoIR command."""
    result = ValidationResult()
    result.require_text(command.cnpj, "cnpj", exact_length=CNPJ_LENGTH, digits=True)
    result.require_text(
        command.declaration_number,
        "declaration_number",
        max_length=DECLARATION_NUMBER_MAX_LENGTH,
    )
    result.require_text(
        command.fiscal_year, "fiscal_year", exact_length=YEAR_LENGTH, digits=True
    )
    result.check(validate_not_empty(command.delivery_date, "delivery_date"))
    return result


def validate_create_ide_nfse(command: CreateIdeNFSe) -> ValidationResult:
    """Validate a CreateIdeNFSe command."""
    result = ValidationResult()
    result.require_text(command.number, "number", max_length=NFSE_NUMBER_MAX_LENGTH, digits=True)
    result.require_text(command.series, "series", max_length=NFSE_SERIES_MAX_LENGTH)
    result.require_text(command.type, "type", max_length=NFSE_TYPE_MAX_LENGTH)
    result.check(validate_not_empty(command.issue_date, "issue_date"))
    result.require_text(
        command.municipality_code,
        "municipality_code",
        exact_length=IBGE_CODE_LENGTH,
        digits=True,
    )
    return result


def validate_check_declaracao_ir_exists_by_cnpj(
    query: CheckDeclaracaoIRExistsByCnpj,
) -> ValidationResult:
    """Validate a CheckDeclaracaoIRExistsByCnpj query."""
    result = ValidationResult()
    result.require_text(query.cnpj, "cnpj", exact_length=CNPJ_LENGTH, digits=True)
    return result


def validate_check_declaracao_ir_exists_by_declaration_number(
    query: CheckDeclaracaoIRExistsByDeclarationNumber,
) -> ValidationResult:
    """Validate a CheckDeclaracaoIRExistsByDeclarationNumber query."""
    result = ValidationResult()
    result.require_text(
        query.declaration_number,
        "declaration_number",
        max_length=DECLARATION_NUMBER_MAX_LENGTH,
    )
    return result
