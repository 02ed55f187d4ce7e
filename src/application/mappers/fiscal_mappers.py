"""Entity to view model projections for fiscal records.

Hand-written, one function per pair, so every field mapping is explicit.
Mappers are pure functions: no I/O, no mutation of the entity.
"""

from src.application.view_models.fiscal_view_models import (
    DASViewModel,
    DeclaracaoIRViewModel,
    IdeNFSeViewModel,
)
from src.domain.entities.das import DAS
from src.domain.entities.declaracao_ir import DeclaracaoIR
from src.domain.entities.ide_nfse import IdeNFSe


def map_das_to_view_model(das: DAS) -> DASViewModel:
    """Project a DAS entity."""
    return DASViewModel(
        id=das.id,
        reference_month=das.reference_month,
        due_date=das.due_date,
        reference_year=das.reference_year,
        payment_value=das.payment_value,
        document_number=das.document_number,
        bar_code=das.bar_code,
        period_label=das.period_label(),
    )


def map_declaracao_ir_to_view_model(declaracao_ir: DeclaracaoIR) -> DeclaracaoIRViewModel:
    """Project a DeclaracaoIR entity."""
    return DeclaracaoIRViewModel(
        id=declaracao_ir.id,
        cnpj=declaracao_ir.cnpj,
        declaration_number=declaracao_ir.declaration_number,
        fiscal_year=declaracao_ir.fiscal_year,
        delivery_date=declaracao_ir.delivery_date,
        rectifying=declaracao_ir.rectifying,
    )


def map_ide_nfse_to_view_model(ide_nfse: IdeNFSe) -> IdeNFSeViewModel:
    """Project an IdeNFSe entity."""
    return IdeNFSeViewModel(
        id=ide_nfse.id,
        number=ide_nfse.number,
        series=ide_nfse.series,
        type=ide_nfse.type,
        issue_date=ide_nfse.issue_date,
        municipality_code=ide_nfse.municipality_code,
    )
