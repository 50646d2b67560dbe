"""
Gap Diagnostic — Health

Verificação de estado e informações da API.
"""

from fastapi import APIRouter, Depends

from gap_diagnostic import __version__

from ..dependencies import engine_manager, get_sessions, SessionManager
from ..models import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(
    sessions: SessionManager = Depends(get_sessions)
) -> HealthResponse:
    """
    Estado do servidor:
    - Motor carregado?
    - Número de perguntas e tipos de GAP
    - Sessões ativas
    """
    engine = engine_manager.get_engine()

    return HealthResponse(
        status="ok" if engine is not None else "degraded",
        version=__version__,
        engine_loaded=engine is not None,
        questions=len(engine.bank) if engine else 0,
        gap_types=len(engine.bank.gap_types) if engine else 0,
        active_sessions=sessions.get_active_count()
    )


@router.get("/")
async def root():
    """Página inicial da API"""
    return {
        "name": "Gap Diagnostic API",
        "version": __version__,
        "description": "Diagnóstico de GAPs do funil de vendas",
        "docs": "/docs",
        "health": "/health",
    }
