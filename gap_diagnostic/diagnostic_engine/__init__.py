"""
Gap Diagnostic — Motor de diagnóstico

Fluxo: QuestionBank → DiagnosticSession → respostas → GapAggregator →
GapScorer → DiagnosticResult

Componentes:
- DiagnosticEngine: fachada principal
- DiagnosticSession: máquina de estados da navegação
- GapAggregator: estatísticas por tipo de GAP
- GapScorer: classificação, pontuação e consultoria

Exemplo:
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine

    engine = DiagnosticEngine()
    session = engine.start_session()

    session.answer("q1", "q1_3")
    ...
    print(session.result.overall_score)
"""

from .aggregator import GapTypeAccumulator, AggregationResult, GapAggregator
from .scorer import (
    GapScore,
    GapScorer,
    classify_impact,
    round_half_up,
    gap_sort_key,
    HIGH_IMPACT_THRESHOLD,
    MEDIUM_IMPACT_THRESHOLD,
)
from .session import DiagnosticSession, SessionStatus
from .engine import DiagnosticEngine


__all__ = [
    # Engine
    "DiagnosticEngine",

    # Session
    "DiagnosticSession",
    "SessionStatus",

    # Aggregator
    "GapTypeAccumulator",
    "AggregationResult",
    "GapAggregator",

    # Scorer
    "GapScore",
    "GapScorer",
    "classify_impact",
    "round_half_up",
    "gap_sort_key",
    "HIGH_IMPACT_THRESHOLD",
    "MEDIUM_IMPACT_THRESHOLD",
]
