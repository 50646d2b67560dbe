"""
Gap Diagnostic — Configurações do sistema

Todos os parâmetros ficam em dataclasses para:
- Tipagem e acesso simples (config.score_bands.excellent)
- Serialização em YAML

Os limiares de classificação de impacto (0.7 / 0.4) e de consultoria NÃO
ficam aqui: são constantes fixas do scorer.
"""

import os
from dataclasses import dataclass, field
from typing import Optional


# =============================================================================
# SCORE BANDS
# =============================================================================

@dataclass
class ScoreBandsConfig:
    """Faixas de rótulo da pontuação geral (apresentação)"""
    excellent: int = 80    # >= 80 → "Excelente"
    good: int = 60         # >= 60 → "Bom"

    def label(self, score: int) -> str:
        """Rótulo exibido junto da pontuação geral"""
        if score >= self.excellent:
            return "Excelente"
        elif score >= self.good:
            return "Bom"
        else:
            return "Precisa de Atenção"


# =============================================================================
# MAIN CONFIGURATION
# =============================================================================

@dataclass
class DiagnosticConfig:
    """
    Configuração principal do Gap Diagnostic.

    Exemplo:
        config = DiagnosticConfig()
        print(config.score_bands.excellent)  # 80
        print(config.question_bank_path)     # None → banco padrão
    """

    # Metadados
    version: str = "0.1.0"
    project_name: str = "Gap Diagnostic"

    # Banco de perguntas (YAML); None = banco embutido
    question_bank_path: Optional[str] = None

    # Logging
    log_level: str = "INFO"

    # Apresentação
    score_bands: ScoreBandsConfig = field(default_factory=ScoreBandsConfig)

    @classmethod
    def from_dict(cls, data: dict) -> "DiagnosticConfig":
        """Criar configuração a partir de um dicionário (ex.: YAML carregado)"""
        data = dict(data or {})
        bands = data.pop("score_bands", None) or {}
        bands = {k: v for k, v in bands.items() if k in ScoreBandsConfig.__dataclass_fields__}
        known = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(score_bands=ScoreBandsConfig(**bands), **known)

    @classmethod
    def from_env(cls) -> "DiagnosticConfig":
        """Criar configuração a partir de variáveis de ambiente"""
        bands = ScoreBandsConfig()
        return cls(
            question_bank_path=os.getenv("QUESTION_BANK_PATH"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            score_bands=ScoreBandsConfig(
                excellent=int(os.getenv("SCORE_BAND_EXCELLENT", bands.excellent)),
                good=int(os.getenv("SCORE_BAND_GOOD", bands.good)),
            ),
        )


def get_default_config() -> DiagnosticConfig:
    """Configuração padrão (banco de 8 perguntas embutido)"""
    return DiagnosticConfig()
