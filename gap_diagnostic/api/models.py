"""
Gap Diagnostic — Modelos da API

Modelos Pydantic de requisição e resposta.
"""

from datetime import datetime
from enum import Enum
from typing import Dict, List, Optional

from pydantic import BaseModel, EmailStr, Field

from gap_diagnostic.schemas import DiagnosticResult, Question


# ============================================================
# Enums
# ============================================================

class SessionStatusEnum(str, Enum):
    """Estado da sessão"""
    ASKING = "asking"
    COMPLETED = "completed"


# ============================================================
# Perguntas
# ============================================================

class OptionResponse(BaseModel):
    """Alternativa exibida ao usuário"""
    id: str
    text: str


class QuestionResponse(BaseModel):
    """Pergunta exibida ao usuário (sem pesos)"""
    id: str
    text: str
    options: List[OptionResponse]

    @classmethod
    def from_question(cls, question: Question) -> "QuestionResponse":
        return cls(
            id=question.id,
            text=question.text,
            options=[OptionResponse(id=o.id, text=o.text) for o in question.options],
        )

    class Config:
        json_schema_extra = {
            "example": {
                "id": "q1",
                "text": "Como você avalia a maturidade do seu processo de vendas?",
                "options": [
                    {"id": "q1_1", "text": "Processo bem definido, documentado e constantemente otimizado"},
                    {"id": "q1_2", "text": "Processo existe mas não está totalmente documentado"},
                    {"id": "q1_3", "text": "Processo informal ou inexistente"},
                ]
            }
        }


class QuestionListResponse(BaseModel):
    questions: List[QuestionResponse]
    total: int


# ============================================================
# Sessões
# ============================================================

class AnswerRequest(BaseModel):
    """Resposta à pergunta atual"""
    question_id: str = Field(..., description="Id da pergunta atual")
    option_id: str = Field(..., description="Id da alternativa escolhida")

    class Config:
        json_schema_extra = {
            "example": {"question_id": "q1", "option_id": "q1_2"}
        }


class SessionResponse(BaseModel):
    """Estado da sessão"""
    session_id: str
    status: SessionStatusEnum

    # Navegação
    question_number: int = Field(..., description="Pergunta atual (1-based)")
    total_questions: int
    progress: float = Field(..., ge=0.0, le=1.0)
    current_question: Optional[QuestionResponse] = None
    current_answer: Optional[str] = Field(
        default=None,
        description="Resposta já dada à pergunta atual (após voltar)"
    )
    answers: Dict[str, str] = Field(default_factory=dict)

    # Resultado (apenas quando concluída)
    result: Optional[DiagnosticResult] = None
    score_label: Optional[str] = None

    created_at: datetime
    updated_at: datetime


class NavigationResponse(BaseModel):
    """Resposta de answer/previous"""
    accepted: bool
    session: SessionResponse


# ============================================================
# Diagnóstico direto
# ============================================================

class DiagnoseRequest(BaseModel):
    """Cálculo direto a partir de um mapa de respostas"""
    answers: Dict[str, str] = Field(..., description="{question_id: option_id}")

    class Config:
        json_schema_extra = {
            "example": {"answers": {"q1": "q1_3", "q2": "q2_2", "q3": "q3_1"}}
        }


class DiagnoseResponse(BaseModel):
    result: DiagnosticResult
    score_label: str


# ============================================================
# Consultoria
# ============================================================

class ConsultationBody(BaseModel):
    """Dados de contato para agendar reunião"""
    name: str
    email: EmailStr
    phone: str = ""
    company_name: str = ""
    company_size: str = ""
    preferred_date: Optional[datetime] = None


class ConsultationResponse(BaseModel):
    accepted: bool
    session_id: str
    needs_consultation: bool


# ============================================================
# Health
# ============================================================

class HealthResponse(BaseModel):
    status: str
    version: str
    engine_loaded: bool
    questions: int = 0
    gap_types: int = 0
    active_sessions: int = 0

    class Config:
        json_schema_extra = {
            "example": {
                "status": "ok",
                "version": "0.1.0",
                "engine_loaded": True,
                "questions": 8,
                "gap_types": 13,
                "active_sessions": 2
            }
        }
