"""
Gap Diagnostic — Diagnóstico direto

Cálculo do resultado a partir de um mapa de respostas completo, sem
sessão.
"""

from fastapi import APIRouter, Depends, HTTPException

from gap_diagnostic.diagnostic_engine import DiagnosticEngine
from gap_diagnostic.exceptions import InvalidAnswerError

from ..dependencies import get_engine
from ..models import DiagnoseRequest, DiagnoseResponse

router = APIRouter(tags=["Diagnosis"])


@router.post("/diagnose", response_model=DiagnoseResponse)
async def diagnose(
    request: DiagnoseRequest,
    engine: DiagnosticEngine = Depends(get_engine)
) -> DiagnoseResponse:
    """
    Calcular o diagnóstico.

    Exemplo:
    ```json
    {
        "answers": {"q1": "q1_3", "q2": "q2_2"}
    }
    ```
    """
    try:
        result = engine.compute(request.answers)
    except InvalidAnswerError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return DiagnoseResponse(result=result, score_label=engine.score_label(result))
