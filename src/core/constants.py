"""Centralized constants for fixed field formats.

These are properties of the fiscal documents themselves, NOT
environment-specific configuration. For settings, use `src/core/config.py`.

Categories:
- Fixed lengths: Codes with a mandated number of characters
- Maximum lengths: Upper bounds for free-text fields

Example:
    >>> from src.core.constants import CNPJ_LENGTH
    >>> result.require_text(cnpj, "cnpj", exact_length=CNPJ_LENGTH, digits=True)
"""

# =============================================================================
# Fixed Lengths
# =============================================================================

CNPJ_LENGTH: int = 14
"""Company taxpayer id: 14 digits, unformatted."""

YEAR_LENGTH: int = 4
"""Reference and fiscal years: 4 digits."""

IBGE_CODE_LENGTH: int = 7
"""IBGE municipality code: 7 digits."""

UF_LENGTH: int = 2
"""Federative unit abbreviation (SP, RJ, ...)."""

# =============================================================================
# Maximum Lengths
# =============================================================================

REFERENCE_MONTH_MAX_LENGTH: int = 20
DOCUMENT_NUMBER_MAX_LENGTH: int = 50
BAR_CODE_MAX_LENGTH: int = 48
DECLARATION_NUMBER_MAX_LENGTH: int = 50
NFSE_NUMBER_MAX_LENGTH: int = 15
NFSE_SERIES_MAX_LENGTH: int = 5
NFSE_TYPE_MAX_LENGTH: int = 20
COUNTRY_NAME_MAX_LENGTH: int = 100
STATE_NAME_MAX_LENGTH: int = 100
DISTRICT_NAME_MAX_LENGTH: int = 450
DISTRICT_LOCATION_MAX_LENGTH: int = 100
