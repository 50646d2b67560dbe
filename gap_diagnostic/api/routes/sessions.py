"""
Gap Diagnostic — Sessões

Endpoints do questionário interativo:
- Criar sessão
- Consultar estado
- Responder / voltar
- Resultado
- Pedido de consultoria
- Encerrar sessão
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from gap_diagnostic.diagnostic_engine import DiagnosticEngine, DiagnosticSession
from gap_diagnostic.exceptions import InvalidAnswerError, SessionCompletedError
from gap_diagnostic.schemas import ConsultationRequest, DiagnosticResult

from ..dependencies import get_engine, get_sessions, SessionManager
from ..models import (
    AnswerRequest,
    ConsultationBody,
    ConsultationResponse,
    NavigationResponse,
    QuestionResponse,
    SessionResponse,
    SessionStatusEnum,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sessions", tags=["Sessions"])


def session_to_response(session: DiagnosticSession, engine: DiagnosticEngine) -> SessionResponse:
    """Converter sessão em modelo Pydantic"""
    current, total = session.progress
    question = session.current_question

    return SessionResponse(
        session_id=session.session_id,
        status=SessionStatusEnum(session.status.value),
        question_number=current,
        total_questions=total,
        progress=session.progress_ratio,
        current_question=QuestionResponse.from_question(question) if question else None,
        current_answer=session.current_answer,
        answers=dict(session.answers),
        result=session.result,
        score_label=engine.score_label(session.result) if session.result else None,
        created_at=session.created_at,
        updated_at=session.updated_at,
    )


def _get_or_404(sessions: SessionManager, session_id: str) -> DiagnosticSession:
    session = sessions.get_session(session_id)

    if not session:
        raise HTTPException(
            status_code=404,
            detail=f"Session {session_id} not found"
        )

    return session


@router.post("", response_model=SessionResponse)
async def create_session(
    engine: DiagnosticEngine = Depends(get_engine),
    sessions: SessionManager = Depends(get_sessions)
) -> SessionResponse:
    """Criar nova sessão na primeira pergunta"""
    session = sessions.create_session(engine)
    return session_to_response(session, engine)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(
    session_id: str,
    engine: DiagnosticEngine = Depends(get_engine),
    sessions: SessionManager = Depends(get_sessions)
) -> SessionResponse:
    """Estado atual: pergunta, progresso e resultado (se concluída)"""
    session = _get_or_404(sessions, session_id)
    return session_to_response(session, engine)


@router.post("/{session_id}/answer", response_model=NavigationResponse)
async def answer_question(
    session_id: str,
    request: AnswerRequest,
    engine: DiagnosticEngine = Depends(get_engine),
    sessions: SessionManager = Depends(get_sessions)
) -> NavigationResponse:
    """
    Responder a pergunta atual.

    Exemplo:
    ```json
    {
        "question_id": "q1",
        "option_id": "q1_2"
    }
    ```
    """
    session = _get_or_404(sessions, session_id)

    try:
        session.answer(request.question_id, request.option_id)
    except SessionCompletedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    except InvalidAnswerError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return NavigationResponse(
        accepted=True,
        session=session_to_response(session, engine)
    )


@router.post("/{session_id}/previous", response_model=NavigationResponse)
async def previous_question(
    session_id: str,
    engine: DiagnosticEngine = Depends(get_engine),
    sessions: SessionManager = Depends(get_sessions)
) -> NavigationResponse:
    """Voltar uma pergunta (sem efeito na primeira ou após concluir)"""
    session = _get_or_404(sessions, session_id)
    moved = session.previous()

    return NavigationResponse(
        accepted=moved,
        session=session_to_response(session, engine)
    )


@router.get("/{session_id}/result", response_model=DiagnosticResult)
async def get_result(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
) -> DiagnosticResult:
    """Resultado do diagnóstico (409 enquanto não concluída)"""
    session = _get_or_404(sessions, session_id)

    if not session.is_completed:
        current, total = session.progress
        raise HTTPException(
            status_code=409,
            detail=f"Session is not completed (question {current} of {total})"
        )

    return session.result


@router.post("/{session_id}/consultation", response_model=ConsultationResponse)
async def request_consultation(
    session_id: str,
    body: ConsultationBody,
    sessions: SessionManager = Depends(get_sessions)
) -> ConsultationResponse:
    """
    Pedido de reunião com consultor.

    Só após concluir a sessão. O pedido é registrado no log; o
    armazenamento fica com quem consome a API.
    """
    session = _get_or_404(sessions, session_id)

    if not session.is_completed:
        raise HTTPException(
            status_code=409,
            detail="Session is not completed"
        )

    try:
        consultation = ConsultationRequest(
            **body.model_dump(),
            diagnostic_result=session.result,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    logger.info(
        "Pedido de consultoria: sessão=%s empresa=%s email=%s score=%d",
        session_id,
        consultation.company_name,
        consultation.email,
        consultation.diagnostic_result.overall_score,
    )

    return ConsultationResponse(
        accepted=True,
        session_id=session_id,
        needs_consultation=session.result.needs_consultation,
    )


@router.delete("/{session_id}")
async def delete_session(
    session_id: str,
    sessions: SessionManager = Depends(get_sessions)
):
    """Encerrar e remover a sessão"""
    if not sessions.delete_session(session_id):
        raise HTTPException(
            status_code=404,
            detail=f"Session {session_id} not found"
        )

    return {"deleted": True, "session_id": session_id}
