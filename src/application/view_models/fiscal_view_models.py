"""View models for fiscal records.

Externally facing projections of the fiscal entities. Field titles carry
the display names shown by the back office.
"""

from datetime import date
from decimal import Decimal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class DASViewModel(BaseModel):
    """Tax-payment slip projection."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(..., description="DAS unique identifier")
    reference_month: str = Field(
        ..., title="Mês de Referência", examples=["Outubro"]
    )
    due_date: date = Field(..., title="Data de Vencimento")
    reference_year: str = Field(..., title="Ano de Referência", examples=["2023"])
    payment_value: Decimal = Field(..., title="Valor do Pagamento")
    document_number: str = Field(..., title="Número do Documento")
    bar_code: str = Field(..., title="Código de Barras")
    period_label: str = Field(
        ..., description="Month/year label", examples=["Outubro/2023"]
    )


class DeclaracaoIRViewModel(BaseModel):
    """Income-tax declaration projection."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(..., description="Declaration unique identifier")
    cnpj: str = Field(..., title="CNPJ", examples=["12345678000195"])
    declaration_number: str = Field(..., title="Número da Declaração")
    fiscal_year: str = Field(..., title="Exercício", examples=["2023"])
    delivery_date: date = Field(..., title="Data de Entrega")
    rectifying: bool = Field(..., title="Retificadora")


class IdeNFSeViewModel(BaseModel):
    """NFSe identifying header projection."""

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(..., description="NFSe header unique identifier")
    number: str = Field(..., title="Número da NFSe")
    series: str = Field(..., title="Série")
    type: str = Field(..., title="Tipo", examples=["RPS"])
    issue_date: date = Field(..., title="Data de Emissão")
    municipality_code: str = Field(
        ..., title="Código do Município", examples=["3550308"]
    )
