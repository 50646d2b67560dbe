"""
Gap Diagnostic — Schemas do banco de perguntas

Modelos Pydantic imutáveis para:
- Option: alternativa de resposta com peso e tags de GAP
- Question: pergunta com alternativas ordenadas
"""

from typing import Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_validator


class Option(BaseModel):
    """
    Alternativa de resposta.

    weight: 1 = resposta ideal, 0 = pior resposta.
    gap_types: tags de GAP implicadas quando a alternativa é escolhida
    (únicas, na ordem em que foram declaradas).

    Exemplo:
        option = Option(
            id="q1_2",
            text="Processo existe mas não está totalmente documentado",
            weight=0.6,
            gap_types=("processo", "documentação"),
        )
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Id da alternativa")
    text: str = Field(default="", description="Texto exibido")
    weight: float = Field(..., ge=0.0, le=1.0, description="Peso [0, 1]")
    gap_types: Tuple[str, ...] = Field(
        default=(),
        description="Tags de GAP implicadas"
    )

    @field_validator("gap_types", mode="before")
    @classmethod
    def unique_tags(cls, v):
        """Remove tags repetidas mantendo a ordem"""
        if v is None:
            return ()
        seen = []
        for tag in v:
            tag = str(tag).strip()
            if tag and tag not in seen:
                seen.append(tag)
        return tuple(seen)


class Question(BaseModel):
    """
    Pergunta do diagnóstico.

    Exemplo:
        question = Question(
            id="q1",
            text="Como você avalia a maturidade do seu processo de vendas?",
            options=[...],
        )
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, description="Id da pergunta")
    text: str = Field(default="", description="Texto da pergunta")
    options: Tuple[Option, ...] = Field(..., min_length=1)

    @field_validator("options")
    @classmethod
    def unique_option_ids(cls, v: Tuple[Option, ...]) -> Tuple[Option, ...]:
        ids = [o.id for o in v]
        duplicated = sorted({i for i in ids if ids.count(i) > 1})
        if duplicated:
            raise ValueError(f"Alternativas duplicadas: {duplicated}")
        return v

    def get_option(self, option_id: str) -> Optional[Option]:
        """Alternativa pelo id (None se não existir)"""
        for option in self.options:
            if option.id == option_id:
                return option
        return None

    @property
    def option_ids(self) -> Tuple[str, ...]:
        return tuple(o.id for o in self.options)
