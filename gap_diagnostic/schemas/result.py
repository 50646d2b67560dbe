"""
Gap Diagnostic — Schemas do resultado

Modelos Pydantic para:
- ImpactLevel: severidade do GAP (Alto / Médio / Baixo)
- Gap: GAP identificado com probabilidade e recomendações
- DiagnosticResult: resultado final entregue ao apresentador

O resultado é imutável e passado por valor; a formatação (porcentagens,
cores) fica a cargo de quem exibe.
"""

import math
from enum import Enum
from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field

from gap_diagnostic.config import ScoreBandsConfig


class ImpactLevel(str, Enum):
    """Severidade do GAP"""
    ALTO = "Alto"
    MEDIO = "Médio"
    BAIXO = "Baixo"

    @property
    def rank(self) -> int:
        """Ordem de severidade: Alto=3, Médio=2, Baixo=1"""
        return _IMPACT_RANK[self]


_IMPACT_RANK = {
    ImpactLevel.ALTO: 3,
    ImpactLevel.MEDIO: 2,
    ImpactLevel.BAIXO: 1,
}


def round_half_up(value: float) -> int:
    """Arredondamento .5 para cima (round() do Python arredonda para o par)"""
    return int(math.floor(value + 0.5))


class Gap(BaseModel):
    """
    GAP identificado.

    Exemplo:
        gap = Gap(
            type="processo",
            probability=0.8,
            impact=ImpactLevel.ALTO,
            description="Falta de processos estruturados...",
            recommendations=["Mapear e documentar todo o processo de vendas"],
        )
    """
    model_config = ConfigDict(frozen=True)

    type: str = Field(..., description="Tag do GAP")
    probability: float = Field(..., ge=0.0, le=1.0, description="Probabilidade [0, 1]")
    impact: ImpactLevel = Field(..., description="Severidade")
    description: str = Field(default="")
    recommendations: Tuple[str, ...] = Field(default=())

    @property
    def probability_percent(self) -> int:
        """Probabilidade em % (arredondada) para exibição"""
        return round_half_up(self.probability * 100)


class DiagnosticResult(BaseModel):
    """
    Resultado final do diagnóstico.

    gaps vem ordenado por severidade (Alto > Médio > Baixo) e, em caso de
    empate, por probabilidade decrescente. Cada tipo aparece uma vez.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    gaps: Tuple[Gap, ...] = Field(default=())
    overall_score: int = Field(..., ge=0, le=100, alias="overallScore")
    needs_consultation: bool = Field(..., alias="needsConsultation")

    @property
    def high_impact_gaps(self) -> List[Gap]:
        return [g for g in self.gaps if g.impact == ImpactLevel.ALTO]

    @property
    def top_gap(self) -> Optional[Gap]:
        return self.gaps[0] if self.gaps else None

    def get_gap(self, gap_type: str) -> Optional[Gap]:
        for gap in self.gaps:
            if gap.type == gap_type:
                return gap
        return None

    def score_label(self, bands: Optional[ScoreBandsConfig] = None) -> str:
        """Rótulo da pontuação: Excelente / Bom / Precisa de Atenção"""
        return (bands or ScoreBandsConfig()).label(self.overall_score)

    def to_summary(self) -> Dict:
        """Resumo curto para UI/logs"""
        return {
            "overall_score": self.overall_score,
            "score_label": self.score_label(),
            "needs_consultation": self.needs_consultation,
            "gaps": len(self.gaps),
            "high_impact": len(self.high_impact_gaps),
            "top_gap": self.top_gap.type if self.top_gap else None,
        }
