"""
Gap Diagnostic — Dependências da API

Injeção de dependências para o FastAPI: motor (carregado uma vez) e
registro de sessões em memória.
"""

import logging
import threading
from datetime import datetime, timedelta
from typing import Dict, Optional

import yaml
from fastapi import HTTPException

from gap_diagnostic.config import DiagnosticConfig, load_config
from gap_diagnostic.diagnostic_engine import DiagnosticEngine, DiagnosticSession

from .config import config

logger = logging.getLogger(__name__)


def resolve_diagnostic_config() -> DiagnosticConfig:
    """
    Configuração do diagnóstico usada pela API.

    Arquivo YAML indicado em DIAGNOSTIC_CONFIG, senão variáveis de ambiente.
    QUESTION_BANK_PATH da API tem precedência sobre o arquivo.
    """
    if config.diagnostic_config_path:
        diagnostic_config = load_config(config.diagnostic_config_path)
    else:
        diagnostic_config = DiagnosticConfig.from_env()
    if config.question_bank_path:
        diagnostic_config.question_bank_path = config.question_bank_path
    return diagnostic_config


class EngineManager:
    """Carrega o DiagnosticEngine uma única vez"""

    def __init__(self):
        self.engine: Optional[DiagnosticEngine] = None
        self.error: Optional[str] = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        return self.engine is not None

    def load(self, diagnostic_config: Optional[DiagnosticConfig] = None) -> bool:
        """Carregar o banco de perguntas e criar o motor"""
        if self.is_loaded:
            return True

        with self._lock:
            if self.is_loaded:
                return True
            try:
                if diagnostic_config is None:
                    diagnostic_config = resolve_diagnostic_config()
                self.engine = DiagnosticEngine.from_config(diagnostic_config)
                self.error = None
                logger.info("Motor carregado: %r", self.engine)
                return True
            except (OSError, ValueError, yaml.YAMLError) as e:
                self.error = str(e)
                logger.error("Falha ao carregar o banco de perguntas: %s", e)
                return False

    def get_engine(self) -> DiagnosticEngine:
        if not self.is_loaded:
            self.load()
        return self.engine

    def reset(self):
        """Descartar o motor carregado (o próximo acesso recarrega)"""
        with self._lock:
            self.engine = None
            self.error = None


class SessionManager:
    """
    Registro de sessões de diagnóstico.

    Cada sessão é independente; o registro só guarda as referências.
    """

    def __init__(self):
        self.sessions: Dict[str, DiagnosticSession] = {}
        self.lock = threading.Lock()

    def create_session(self, engine: DiagnosticEngine) -> DiagnosticSession:
        """Criar nova sessão"""
        session = engine.start_session()

        with self.lock:
            self._cleanup_old_sessions()

            if len(self.sessions) >= config.max_sessions:
                oldest = min(self.sessions.values(), key=lambda s: s.updated_at)
                del self.sessions[oldest.session_id]

            self.sessions[session.session_id] = session

        logger.info("Sessão criada: %s", session.session_id)
        return session

    def get_session(self, session_id: str) -> Optional[DiagnosticSession]:
        return self.sessions.get(session_id)

    def delete_session(self, session_id: str) -> bool:
        with self.lock:
            if session_id in self.sessions:
                del self.sessions[session_id]
                return True
        return False

    def get_active_count(self) -> int:
        return len(self.sessions)

    def clear(self) -> None:
        with self.lock:
            self.sessions.clear()

    def _cleanup_old_sessions(self):
        """Remover sessões expiradas"""
        timeout = timedelta(minutes=config.session_timeout_minutes)
        now = datetime.now()

        expired = [
            sid for sid, session in self.sessions.items()
            if now - session.updated_at > timeout
        ]

        for sid in expired:
            del self.sessions[sid]

        if expired:
            logger.info("Sessões expiradas removidas: %d", len(expired))


# Gerenciadores globais
engine_manager = EngineManager()
session_manager = SessionManager()


def get_engine() -> DiagnosticEngine:
    """Dependency: motor de diagnóstico"""
    engine = engine_manager.get_engine()
    if engine is None:
        raise HTTPException(
            status_code=503,
            detail=f"Question bank not available: {engine_manager.error}"
        )
    return engine


def get_sessions() -> SessionManager:
    """Dependency: registro de sessões"""
    return session_manager
