"""
Gap Diagnostic — Configuração da API

Servidor FastAPI, CORS e sessões.
"""

from dataclasses import dataclass, field
from typing import Optional
import os


@dataclass
class APIConfig:
    """Configuração do servidor da API"""

    # Servidor
    host: str = "0.0.0.0"
    port: int = 8000
    debug: bool = False
    log_level: str = "INFO"

    # CORS
    cors_origins: list = field(default_factory=lambda: ["*"])
    cors_allow_credentials: bool = True
    cors_allow_methods: list = field(default_factory=lambda: ["*"])
    cors_allow_headers: list = field(default_factory=lambda: ["*"])

    # Configuração do diagnóstico (YAML); None = variáveis de ambiente
    diagnostic_config_path: Optional[str] = None

    # Banco de perguntas (None = banco padrão)
    question_bank_path: Optional[str] = None

    # Sessões
    max_sessions: int = 1000
    session_timeout_minutes: int = 60

    # API
    api_prefix: str = "/api"
    api_title: str = "Gap Diagnostic API"
    api_description: str = "Diagnóstico de GAPs do funil de vendas"

    @classmethod
    def from_env(cls) -> "APIConfig":
        """Criar configuração a partir de variáveis de ambiente"""
        return cls(
            host=os.getenv("API_HOST", "0.0.0.0"),
            port=int(os.getenv("API_PORT", "8000")),
            debug=os.getenv("API_DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            diagnostic_config_path=os.getenv("DIAGNOSTIC_CONFIG"),
            question_bank_path=os.getenv("QUESTION_BANK_PATH"),
            session_timeout_minutes=int(os.getenv("SESSION_TIMEOUT_MINUTES", "60")),
        )


# Configuração global
config = APIConfig.from_env()
