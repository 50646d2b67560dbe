"""Gap Diagnostic — Módulo de configuração"""
from .settings import (
    DiagnosticConfig,
    ScoreBandsConfig,
    get_default_config,
)
from .loader import save_config, load_config, save_yaml, load_yaml
from .logging_setup import configure_logging

__all__ = [
    "DiagnosticConfig",
    "ScoreBandsConfig",
    "get_default_config",
    "save_config",
    "load_config",
    "save_yaml",
    "load_yaml",
    "configure_logging",
]
