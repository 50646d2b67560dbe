"""
Gap Diagnostic — Agregador de GAPs

Dobra o mapa de respostas, agrupado por tag de GAP, em estatísticas por
tipo:

    count       += 1
    weight_sum  += option.weight
    impact_sum  += 1 - option.weight

Alternativas sem tags não criam acumulador, mas o peso delas entra no
total usado na pontuação geral.
"""

from dataclasses import dataclass, field
from typing import Dict, Mapping

from gap_diagnostic.question_bank import QuestionBank


@dataclass
class GapTypeAccumulator:
    """Estatísticas de um tipo de GAP (transitório)"""
    type: str
    count: int = 0
    weight_sum: float = 0.0
    impact_sum: float = 0.0

    def add(self, weight: float) -> None:
        self.count += 1
        self.weight_sum += weight
        self.impact_sum += 1 - weight


@dataclass
class AggregationResult:
    """Saída do agregador"""
    accumulators: Dict[str, GapTypeAccumulator] = field(default_factory=dict)
    total_weight: float = 0.0
    question_count: int = 0

    @property
    def is_empty(self) -> bool:
        return self.question_count == 0


class GapAggregator:
    """
    Agregador de respostas por tipo de GAP.

    Exemplo:
        aggregator = GapAggregator(QuestionBank.default())
        aggregation = aggregator.aggregate({"q1": "q1_2", "q2": "q2_1"})

        acc = aggregation.accumulators["processo"]
        print(acc.count, acc.weight_sum)   # 1 0.6
    """

    def __init__(self, bank: QuestionBank):
        self.bank = bank

    def aggregate(self, answers: Mapping[str, str]) -> AggregationResult:
        """
        Agregar respostas.

        Args:
            answers: {question_id: option_id}, na ordem em que foram dadas

        Raises:
            InvalidAnswerError: pergunta ou alternativa desconhecida
        """
        # Resolve tudo antes de acumular: um id inválido não deixa estado parcial
        options = [self.bank.resolve(q_id, o_id) for q_id, o_id in answers.items()]

        result = AggregationResult()

        for option in options:
            for tag in option.gap_types:
                if tag not in result.accumulators:
                    result.accumulators[tag] = GapTypeAccumulator(type=tag)
                result.accumulators[tag].add(option.weight)

            result.total_weight += option.weight
            result.question_count += 1

        return result
