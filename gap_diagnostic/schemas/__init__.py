"""
Gap Diagnostic — Schemas de dados

Modelos Pydantic para validação e serialização.

Componentes:
- question_bank.py: Option, Question
- result.py: ImpactLevel, Gap, DiagnosticResult
- consultation.py: ConsultationRequest

Exemplo:
    from gap_diagnostic.schemas import DiagnosticResult

    json_data = result.model_dump_json(by_alias=True)
    loaded = DiagnosticResult.model_validate_json(json_data)
"""

from .question_bank import Option, Question
from .result import ImpactLevel, Gap, DiagnosticResult, round_half_up
from .consultation import ConsultationRequest


__all__ = [
    # Question bank
    "Option",
    "Question",

    # Result
    "ImpactLevel",
    "Gap",
    "DiagnosticResult",
    "round_half_up",

    # Consultation
    "ConsultationRequest",
]
