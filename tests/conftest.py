"""Shared pytest fixtures.

Provides ready-to-use commands with valid data and resets the cached
settings/container singletons between tests.
"""

from datetime import date
from decimal import Decimal

import pytest

from src.application.commands import (
    CreateCountry,
    CreateDAS,
    CreateDeclaracaoIR,
    CreateDistrict,
    CreateIdeNFSe,
    CreateState,
)
from src.core.config import get_settings
from src.core.container import clear_container_caches


@pytest.fixture(autouse=True)
def reset_singletons():
    """Clear cached settings and container wiring around every test."""
    get_settings.cache_clear()
    clear_container_caches()
    yield
    get_settings.cache_clear()
    clear_container_caches()


@pytest.fixture
def create_das_command() -> CreateDAS:
    """Valid CreateDAS command (October 2023 slip)."""
    return CreateDAS(
        reference_month="Outubro",
        due_date=date(2023, 11, 20),
        reference_year="2023",
        payment_value=Decimal("2000.00"),
        document_number="283789234789347",
        bar_code="6587346857969934863",
    )


@pytest.fixture
def create_declaracao_ir_command() -> CreateDeclaracaoIR:
    """Valid CreateDeclaracaoIR command."""
    return CreateDeclaracaoIR(
        cnpj="12345678000195",
        declaration_number="DEC-2023-0001",
        fiscal_year="2023",
        delivery_date=date(2023, 5, 31),
    )


@pytest.fixture
def create_ide_nfse_command() -> CreateIdeNFSe:
    """Valid CreateIdeNFSe command (São Paulo municipality)."""
    return CreateIdeNFSe(
        number="202300000000123",
        series="A1",
        type="RPS",
        issue_date=date(2023, 10, 5),
        municipality_code="3550308",
    )


@pytest.fixture
def create_country_command() -> CreateCountry:
    """Valid CreateCountry command."""
    return CreateCountry(country_name="Brasil")


@pytest.fixture
def create_state_command() -> CreateState:
    """Valid CreateState command."""
    return CreateState(state_name="São Paulo", uf="SP")


@pytest.fixture
def create_district_command() -> CreateDistrict:
    """Valid CreateDistrict command."""
    return CreateDistrict(name="Sé", type="Distrito", location="Centro")
