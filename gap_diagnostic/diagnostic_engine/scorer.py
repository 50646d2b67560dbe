"""
Gap Diagnostic — Scorer e classificador

Para cada acumulador:
    probability       = 1 - weight_sum / count
    normalized_impact = impact_sum / count
    impact_score      = (probability + normalized_impact) / 2

    impact_score > 0.7 → Alto
    impact_score > 0.4 → Médio
    senão              → Baixo

Pontuação geral (sobre as perguntas respondidas):
    base    = total_weight / question_count * 100
    penalty = min(Σ probability * 0.1, 0.5)
    score   = round(base * (1 - penalty))

Consultoria quando: score < 70, OU >= 3 GAPs Alto, OU alguma
probability > 0.8.

Os limiares são fixos.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional

from gap_diagnostic.question_bank import get_gap_description, get_gap_recommendations
from gap_diagnostic.schemas import DiagnosticResult, Gap, ImpactLevel, round_half_up

from .aggregator import AggregationResult, GapTypeAccumulator


# Classificação de impacto (estritamente maior)
HIGH_IMPACT_THRESHOLD = 0.7
MEDIUM_IMPACT_THRESHOLD = 0.4

# Penalidade da pontuação geral
PENALTY_PER_PROBABILITY = 0.1
MAX_PENALTY = 0.5

# Gatilhos de consultoria
CONSULTATION_SCORE_THRESHOLD = 70
CONSULTATION_HIGH_IMPACT_COUNT = 3
CRITICAL_PROBABILITY = 0.8


def classify_impact(impact_score: float) -> ImpactLevel:
    """Classificar impact_score em Alto / Médio / Baixo"""
    if impact_score > HIGH_IMPACT_THRESHOLD:
        return ImpactLevel.ALTO
    elif impact_score > MEDIUM_IMPACT_THRESHOLD:
        return ImpactLevel.MEDIO
    else:
        return ImpactLevel.BAIXO


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


@dataclass
class GapScore:
    """Métricas intermediárias de um tipo de GAP"""
    type: str
    probability: float
    normalized_impact: float
    impact_score: float
    impact: ImpactLevel

    def to_gap(self) -> Gap:
        return Gap(
            type=self.type,
            probability=self.probability,
            impact=self.impact,
            description=get_gap_description(self.type),
            recommendations=get_gap_recommendations(self.type),
        )


def gap_sort_key(gap: Gap):
    """Severidade decrescente, depois probabilidade decrescente"""
    return (-gap.impact.rank, -gap.probability)


class GapScorer:
    """
    Converte a agregação em DiagnosticResult.

    Exemplo:
        scorer = GapScorer()
        result = scorer.score(aggregation)
        print(result.overall_score, result.needs_consultation)
    """

    def score_gap(self, accumulator: GapTypeAccumulator) -> Optional[GapScore]:
        """Métricas de um acumulador (None se count == 0)"""
        if accumulator.count <= 0:
            return None

        probability = _clamp01(1 - accumulator.weight_sum / accumulator.count)
        normalized_impact = _clamp01(accumulator.impact_sum / accumulator.count)
        impact_score = (probability + normalized_impact) / 2

        return GapScore(
            type=accumulator.type,
            probability=probability,
            normalized_impact=normalized_impact,
            impact_score=impact_score,
            impact=classify_impact(impact_score),
        )

    def build_gaps(self, accumulators: Iterable[GapTypeAccumulator]) -> List[Gap]:
        """GAPs ordenados (sort estável: empates mantêm a ordem de aparição)"""
        gaps = []
        for accumulator in accumulators:
            gap_score = self.score_gap(accumulator)
            if gap_score is not None:
                gaps.append(gap_score.to_gap())
        return sorted(gaps, key=gap_sort_key)

    def overall_score(self, total_weight: float, question_count: int, gaps: List[Gap]) -> int:
        """Pontuação geral 0..100 (0 quando não há respostas)"""
        if question_count <= 0:
            return 0

        base = (total_weight / question_count) * 100
        penalty = min(sum(g.probability * PENALTY_PER_PROBABILITY for g in gaps), MAX_PENALTY)
        score = round_half_up(base * (1 - penalty))

        return min(max(score, 0), 100)

    def needs_consultation(self, overall_score: int, gaps: List[Gap]) -> bool:
        if overall_score < CONSULTATION_SCORE_THRESHOLD:
            return True

        high_impact = sum(1 for g in gaps if g.impact == ImpactLevel.ALTO)
        if high_impact >= CONSULTATION_HIGH_IMPACT_COUNT:
            return True

        return any(g.probability > CRITICAL_PROBABILITY for g in gaps)

    def score(self, aggregation: AggregationResult) -> DiagnosticResult:
        """Resultado completo a partir da agregação"""
        if aggregation.is_empty:
            # Pior caso, não é erro
            return DiagnosticResult(gaps=(), overall_score=0, needs_consultation=True)

        gaps = self.build_gaps(aggregation.accumulators.values())
        overall = self.overall_score(aggregation.total_weight, aggregation.question_count, gaps)

        return DiagnosticResult(
            gaps=tuple(gaps),
            overall_score=overall,
            needs_consultation=self.needs_consultation(overall, gaps),
        )
