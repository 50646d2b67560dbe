"""
Gap Diagnostic — API REST

FastAPI para o questionário de GAPs.

Componentes:
- app.py: aplicação FastAPI
- routes/: endpoints
- models.py: modelos Pydantic
- dependencies.py: motor e registro de sessões

Execução:
    uvicorn gap_diagnostic.api.app:app --reload --port 8000

Documentação:
    http://localhost:8000/docs (Swagger UI)
    http://localhost:8000/redoc (ReDoc)

Endpoints:
    GET    /                                   - Informações
    GET    /health                             - Health check

    GET    /api/questions                      - Banco de perguntas
    GET    /api/questions/{id}                 - Uma pergunta

    POST   /api/sessions                       - Iniciar sessão
    GET    /api/sessions/{id}                  - Estado da sessão
    POST   /api/sessions/{id}/answer           - Responder pergunta atual
    POST   /api/sessions/{id}/previous         - Voltar uma pergunta
    GET    /api/sessions/{id}/result           - Resultado
    POST   /api/sessions/{id}/consultation     - Pedido de consultoria
    DELETE /api/sessions/{id}                  - Encerrar sessão

    POST   /api/diagnose                       - Cálculo direto
"""

from .app import app
from .dependencies import engine_manager, session_manager, get_engine, get_sessions


__all__ = [
    "app",
    "engine_manager",
    "session_manager",
    "get_engine",
    "get_sessions",
]
