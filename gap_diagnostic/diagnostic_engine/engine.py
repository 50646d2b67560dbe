"""
Gap Diagnostic — Motor de diagnóstico

DiagnosticEngine liga os componentes:
1. QuestionBank — perguntas e alternativas
2. GapAggregator — estatísticas por tipo de GAP
3. GapScorer — probabilidade, impacto, pontuação e consultoria

O resultado é sempre recalculado do zero a partir do mapa de respostas;
o motor não guarda estado entre sessões.
"""

import logging
from typing import List, Mapping, Optional

from gap_diagnostic.config import DiagnosticConfig
from gap_diagnostic.question_bank import QuestionBank
from gap_diagnostic.schemas import DiagnosticResult

from .aggregator import GapAggregator
from .scorer import GapScorer
from .session import DiagnosticSession

logger = logging.getLogger(__name__)


class DiagnosticEngine:
    """
    Motor do diagnóstico de GAPs.

    Exemplo:
        engine = DiagnosticEngine()

        # === Cálculo direto ===
        result = engine.compute({"q1": "q1_3", "q2": "q2_2"})
        for gap in result.gaps:
            print(f"{gap.type}: {gap.impact.value} ({gap.probability:.0%})")

        # === Sessão interativa ===
        session = engine.start_session()
        while not session.is_completed:
            q = session.current_question
            session.answer(q.id, choose(q))

        print(engine.explain(session.result))
    """

    def __init__(
        self,
        bank: Optional[QuestionBank] = None,
        config: Optional[DiagnosticConfig] = None,
    ):
        self.config = config or DiagnosticConfig()
        self.bank = bank or QuestionBank.default()
        self.aggregator = GapAggregator(self.bank)
        self.scorer = GapScorer()

    @classmethod
    def from_config(cls, config: DiagnosticConfig) -> "DiagnosticEngine":
        """Criar motor carregando o banco indicado na configuração"""
        if config.question_bank_path:
            bank = QuestionBank.from_yaml(config.question_bank_path)
        else:
            bank = QuestionBank.default()
        return cls(bank=bank, config=config)

    def compute(self, answers: Mapping[str, str]) -> DiagnosticResult:
        """
        Calcular o resultado a partir do mapa de respostas.

        Função pura: mesmas respostas → mesmo resultado.

        Raises:
            InvalidAnswerError: pergunta/alternativa desconhecida
        """
        aggregation = self.aggregator.aggregate(answers)
        result = self.scorer.score(aggregation)

        logger.info(
            "Diagnóstico calculado: %d respostas, score=%d, gaps=%d, consultoria=%s",
            aggregation.question_count,
            result.overall_score,
            len(result.gaps),
            result.needs_consultation,
        )
        return result

    def start_session(self, session_id: Optional[str] = None) -> DiagnosticSession:
        """Nova sessão na primeira pergunta, com mapa de respostas vazio"""
        kwargs = {"session_id": session_id} if session_id else {}
        session = DiagnosticSession(bank=self.bank, compute=self.compute, **kwargs)
        logger.debug("Sessão %s iniciada (%d perguntas)", session.session_id, len(self.bank))
        return session

    def score_label(self, result: DiagnosticResult) -> str:
        return result.score_label(self.config.score_bands)

    def explain(self, result: DiagnosticResult) -> str:
        """Texto legível do resultado (CLI/logs)"""
        lines: List[str] = [
            f"Pontuação Geral: {result.overall_score}% — {self.score_label(result)}",
            "",
        ]

        if result.gaps:
            lines.append("GAPs Identificados:")
            for gap in result.gaps:
                lines.append(
                    f"  • {gap.type}: impacto {gap.impact.value}, "
                    f"probabilidade {gap.probability_percent}%"
                )
                lines.append(f"    {gap.description}")
                for rec in gap.recommendations:
                    lines.append(f"      - {rec}")
        else:
            lines.append("Nenhum GAP identificado.")

        lines.append("")
        if result.needs_consultation:
            lines.append("Recomendamos agendar uma reunião com um consultor.")
        else:
            lines.append("Consultoria não é necessária no momento.")

        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DiagnosticEngine(bank={self.bank!r})"
