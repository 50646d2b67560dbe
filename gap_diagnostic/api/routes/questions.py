"""
Gap Diagnostic — Perguntas

Banco de perguntas para o questionário.
"""

from fastapi import APIRouter, Depends, HTTPException

from gap_diagnostic.diagnostic_engine import DiagnosticEngine

from ..dependencies import get_engine
from ..models import QuestionListResponse, QuestionResponse

router = APIRouter(prefix="/questions", tags=["Questions"])


@router.get("", response_model=QuestionListResponse)
async def list_questions(
    engine: DiagnosticEngine = Depends(get_engine)
) -> QuestionListResponse:
    """Todas as perguntas, na ordem do questionário"""
    questions = [QuestionResponse.from_question(q) for q in engine.bank]
    return QuestionListResponse(questions=questions, total=len(questions))


@router.get("/{question_id}", response_model=QuestionResponse)
async def get_question(
    question_id: str,
    engine: DiagnosticEngine = Depends(get_engine)
) -> QuestionResponse:
    """Uma pergunta pelo id"""
    question = engine.bank.get_question(question_id)

    if question is None:
        raise HTTPException(
            status_code=404,
            detail=f"Question '{question_id}' not found"
        )

    return QuestionResponse.from_question(question)
