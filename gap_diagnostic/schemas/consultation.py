"""
Gap Diagnostic — Pedido de consultoria

Dados de contato enviados junto com o resultado quando o usuário pede
uma reunião com um consultor.
"""

from datetime import datetime
from typing import Optional
from pydantic import BaseModel, EmailStr, Field, field_validator

from .result import DiagnosticResult


class ConsultationRequest(BaseModel):
    """
    Pedido de consultoria.

    Exemplo:
        request = ConsultationRequest(
            name="Ana Souza",
            email="ana@empresa.com.br",
            phone="+55 11 99999-0000",
            company_name="Empresa",
            company_size="11-50",
            preferred_date=datetime(2026, 11, 3, 10, 0),
            diagnostic_result=result,
        )
    """
    name: str = Field(..., min_length=1)
    email: EmailStr
    phone: str = Field(default="")
    company_name: str = Field(default="")
    company_size: str = Field(default="")
    preferred_date: Optional[datetime] = Field(default=None)
    diagnostic_result: DiagnosticResult

    @field_validator("email", mode="before")
    @classmethod
    def normalize_email(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v
