"""
Gap Diagnostic — Banco de perguntas e catálogo de GAPs

Componentes:
- QuestionBank: lista ordenada e imutável de perguntas
- DEFAULT_QUESTIONS: as 8 perguntas padrão
- gap_catalog: descrições e recomendações por tipo de GAP

Exemplo:
    from gap_diagnostic.question_bank import QuestionBank, get_gap_description

    bank = QuestionBank.default()
    bank = QuestionBank.from_yaml("data/question_bank.yaml")

    print(get_gap_description("processo"))
"""

from .bank import QuestionBank
from .default_bank import DEFAULT_QUESTIONS
from .gap_catalog import (
    GAP_DESCRIPTIONS,
    GAP_RECOMMENDATIONS,
    DEFAULT_DESCRIPTION,
    DEFAULT_RECOMMENDATIONS,
    get_gap_description,
    get_gap_recommendations,
    is_known_gap_type,
)


__all__ = [
    "QuestionBank",
    "DEFAULT_QUESTIONS",
    "GAP_DESCRIPTIONS",
    "GAP_RECOMMENDATIONS",
    "DEFAULT_DESCRIPTION",
    "DEFAULT_RECOMMENDATIONS",
    "get_gap_description",
    "get_gap_recommendations",
    "is_known_gap_type",
]
