"""
Gap Diagnostic — Rotas da API

Exporta todos os routers.
"""

from .health import router as health_router
from .questions import router as questions_router
from .sessions import router as sessions_router
from .diagnosis import router as diagnosis_router

__all__ = [
    'health_router',
    'questions_router',
    'sessions_router',
    'diagnosis_router',
]
