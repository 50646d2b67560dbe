"""
Gap Diagnostic — Sessão de diagnóstico

DiagnosticSession é a máquina de estados da navegação:
- ASKING(i): aguardando resposta da pergunta i
- COMPLETED(result): resultado calculado, estado terminal

O mapa de respostas pertence à sessão e só ela o altera. Uma resposta
inválida é rejeitada antes de qualquer alteração.
"""

import logging
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Callable, Dict, Optional, Tuple

from gap_diagnostic.exceptions import (
    OutOfOrderAnswerError,
    SessionCompletedError,
    UnknownQuestionError,
)
from gap_diagnostic.question_bank import QuestionBank
from gap_diagnostic.schemas import DiagnosticResult, Question

logger = logging.getLogger(__name__)


class SessionStatus(Enum):
    """Estado da sessão"""
    ASKING = "asking"
    COMPLETED = "completed"


@dataclass
class DiagnosticSession:
    """
    Sessão de diagnóstico.

    Normalmente criada por DiagnosticEngine.start_session().

    Exemplo:
        session = engine.start_session()

        session.answer("q1", "q1_2")
        session.previous()               # volta para q1
        session.answer("q1", "q1_1")     # substitui a resposta anterior

        while not session.is_completed:
            question = session.current_question
            session.answer(question.id, question.options[0].id)

        print(session.result.overall_score)
    """

    bank: QuestionBank
    compute: Callable[[Dict[str, str]], DiagnosticResult] = field(repr=False)

    # Identificador
    session_id: str = field(default_factory=lambda: str(uuid.uuid4())[:8])

    # Respostas {question_id: option_id}, na ordem em que foram dadas
    answers: Dict[str, str] = field(default_factory=dict)

    # Navegação
    current_index: int = 0
    status: SessionStatus = SessionStatus.ASKING
    result: Optional[DiagnosticResult] = None

    # Timestamps
    created_at: datetime = field(default_factory=datetime.now)
    updated_at: datetime = field(default_factory=datetime.now)

    def answer(self, question_id: str, option_id: str) -> Optional[DiagnosticResult]:
        """
        Responder a pergunta atual.

        Args:
            question_id: deve ser a pergunta atual
            option_id: alternativa da pergunta

        Returns:
            DiagnosticResult se esta foi a última pergunta, senão None

        Raises:
            SessionCompletedError: sessão já concluída
            UnknownQuestionError / UnknownOptionError: ids desconhecidos
            OutOfOrderAnswerError: pergunta diferente da atual
        """
        if self.is_completed:
            raise SessionCompletedError(self.session_id)

        if question_id not in self.bank:
            raise UnknownQuestionError(question_id)

        expected = self.bank[self.current_index]
        if question_id != expected.id:
            raise OutOfOrderAnswerError(question_id, expected.id)

        # Valida a alternativa antes de escrever
        self.bank.resolve(question_id, option_id)

        self.answers[question_id] = option_id
        self.updated_at = datetime.now()

        if self.current_index >= len(self.bank) - 1:
            self.result = self.compute(dict(self.answers))
            self.status = SessionStatus.COMPLETED
            logger.debug("Sessão %s concluída (score=%d)", self.session_id, self.result.overall_score)
            return self.result

        self.current_index += 1
        logger.debug("Sessão %s: %s=%s → pergunta %d", self.session_id, question_id, option_id, self.current_index)
        return None

    def previous(self) -> bool:
        """
        Voltar uma pergunta.

        A resposta guardada da pergunta de destino é mantida para
        reexibição. Sem efeito na primeira pergunta ou após concluir.

        Returns:
            True se a navegação aconteceu
        """
        if self.is_completed or self.current_index == 0:
            return False

        self.current_index -= 1
        self.updated_at = datetime.now()
        logger.debug("Sessão %s: voltou para pergunta %d", self.session_id, self.current_index)
        return True

    @property
    def is_completed(self) -> bool:
        return self.status == SessionStatus.COMPLETED

    @property
    def current_question(self) -> Optional[Question]:
        """Pergunta atual (None após concluir)"""
        if self.is_completed:
            return None
        return self.bank[self.current_index]

    @property
    def current_answer(self) -> Optional[str]:
        """Resposta já guardada para a pergunta atual"""
        question = self.current_question
        return self.answers.get(question.id) if question else None

    @property
    def n_answered(self) -> int:
        return len(self.answers)

    @property
    def progress(self) -> Tuple[int, int]:
        """(número da pergunta atual, total) — "Pergunta 3 de 8" """
        total = len(self.bank)
        if self.is_completed:
            return total, total
        return self.current_index + 1, total

    @property
    def progress_ratio(self) -> float:
        """Fração para a barra de progresso"""
        current, total = self.progress
        return current / total if total else 1.0

    def get_summary(self) -> Dict[str, Any]:
        """Resumo da sessão"""
        current, total = self.progress
        return {
            "session_id": self.session_id,
            "status": self.status.value,
            "current_question": current,
            "total_questions": total,
            "answered": self.n_answered,
            "overall_score": self.result.overall_score if self.result else None,
            "needs_consultation": self.result.needs_consultation if self.result else None,
            "duration_seconds": (self.updated_at - self.created_at).total_seconds(),
        }

    def __repr__(self) -> str:
        current, total = self.progress
        return (
            f"DiagnosticSession("
            f"id={self.session_id}, "
            f"status={self.status.value}, "
            f"question={current}/{total}, "
            f"answered={self.n_answered}"
            f")"
        )
