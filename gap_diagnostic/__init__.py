"""
Gap Diagnostic — Diagnóstico de GAPs do funil de vendas

Arquitetura: Banco de perguntas + Sessão sequencial + Agregação e pontuação

Módulos:
- config: Configuração do sistema e logging
- schemas: Modelos Pydantic (perguntas, resultado, consultoria)
- question_bank: Banco de perguntas padrão e catálogo de GAPs
- diagnostic_engine: Sessão, agregador, scorer e motor de diagnóstico
- api: Backend REST (FastAPI)
"""

__version__ = "0.1.0"

from .config import DiagnosticConfig, get_default_config, configure_logging
from .exceptions import (
    DiagnosticError,
    QuestionBankError,
    InvalidAnswerError,
)
from .diagnostic_engine import DiagnosticEngine, DiagnosticSession
