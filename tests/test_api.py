"""
Testes da API

Execução: pytest tests/test_api.py -v
"""

import pytest


@pytest.fixture
def client():
    from fastapi.testclient import TestClient
    from gap_diagnostic.api import app, session_manager

    session_manager.clear()
    with TestClient(app) as test_client:
        yield test_client
    session_manager.clear()


def _answer_all(client, session_id, suffix="_1"):
    response = None
    for i in range(1, 9):
        response = client.post(
            f"/api/sessions/{session_id}/answer",
            json={"question_id": f"q{i}", "option_id": f"q{i}{suffix}"},
        )
        assert response.status_code == 200
    return response.json()


def test_app_creation():
    """Aplicação FastAPI"""
    from fastapi import FastAPI
    from gap_diagnostic.api import app

    assert isinstance(app, FastAPI)
    assert app.title == "Gap Diagnostic API"


def test_root_and_health(client):
    """/ e /health"""
    response = client.get("/")
    assert response.status_code == 200
    assert response.json()["name"] == "Gap Diagnostic API"

    response = client.get("/health")
    data = response.json()

    assert response.status_code == 200
    assert data["status"] == "ok"
    assert data["engine_loaded"] is True
    assert data["questions"] == 8
    assert data["gap_types"] == 13
    assert data["active_sessions"] == 0


def test_list_questions(client):
    """Perguntas sem pesos"""
    response = client.get("/api/questions")
    data = response.json()

    assert response.status_code == 200
    assert data["total"] == 8
    assert data["questions"][0]["id"] == "q1"
    assert "weight" not in data["questions"][0]["options"][0]

    assert client.get("/api/questions/q2").json()["id"] == "q2"
    assert client.get("/api/questions/q99").status_code == 404


def test_session_flow(client):
    """Criar sessão, responder, voltar, concluir"""
    response = client.post("/api/sessions")
    state = response.json()
    session_id = state["session_id"]

    assert response.status_code == 200
    assert state["status"] == "asking"
    assert state["question_number"] == 1
    assert state["total_questions"] == 8
    assert state["current_question"]["id"] == "q1"
    assert state["result"] is None

    # Responde q1 e volta
    response = client.post(
        f"/api/sessions/{session_id}/answer",
        json={"question_id": "q1", "option_id": "q1_3"},
    )
    assert response.json()["session"]["question_number"] == 2

    response = client.post(f"/api/sessions/{session_id}/previous")
    data = response.json()
    assert data["accepted"] is True
    assert data["session"]["current_answer"] == "q1_3"

    # Resultado ainda não disponível
    assert client.get(f"/api/sessions/{session_id}/result").status_code == 409

    final = _answer_all(client, session_id)
    session = final["session"]

    assert session["status"] == "completed"
    assert session["current_question"] is None
    assert session["result"]["overallScore"] == 100
    assert session["result"]["needsConsultation"] is False
    assert session["score_label"] == "Excelente"

    response = client.get(f"/api/sessions/{session_id}/result")
    assert response.status_code == 200
    assert response.json()["overallScore"] == 100
    assert len(response.json()["gaps"]) == 8


def test_invalid_answers(client):
    """Resposta inválida → 400, sessão concluída → 409"""
    session_id = client.post("/api/sessions").json()["session_id"]

    response = client.post(
        f"/api/sessions/{session_id}/answer",
        json={"question_id": "q2", "option_id": "q2_1"},
    )
    assert response.status_code == 400

    response = client.post(
        f"/api/sessions/{session_id}/answer",
        json={"question_id": "q1", "option_id": "q9_9"},
    )
    assert response.status_code == 400

    state = client.get(f"/api/sessions/{session_id}").json()
    assert state["question_number"] == 1
    assert state["answers"] == {}

    _answer_all(client, session_id, suffix="_3")

    response = client.post(
        f"/api/sessions/{session_id}/answer",
        json={"question_id": "q8", "option_id": "q8_1"},
    )
    assert response.status_code == 409

    response = client.post(f"/api/sessions/{session_id}/previous")
    assert response.json()["accepted"] is False


def test_unknown_session(client):
    """Sessão inexistente → 404"""
    assert client.get("/api/sessions/nope").status_code == 404
    assert client.post("/api/sessions/nope/previous").status_code == 404
    assert client.delete("/api/sessions/nope").status_code == 404


def test_consultation(client):
    """Pedido de consultoria só após concluir"""
    session_id = client.post("/api/sessions").json()["session_id"]
    body = {
        "name": "Ana Souza",
        "email": "ana@empresa.com.br",
        "company_name": "Empresa",
        "preferred_date": "2026-11-03T10:00:00",
    }

    response = client.post(f"/api/sessions/{session_id}/consultation", json=body)
    assert response.status_code == 409

    _answer_all(client, session_id, suffix="_3")

    response = client.post(
        f"/api/sessions/{session_id}/consultation",
        json={**body, "email": "invalido"},
    )
    assert response.status_code == 422

    response = client.post(f"/api/sessions/{session_id}/consultation", json=body)
    data = response.json()

    assert response.status_code == 200
    assert data["accepted"] is True
    assert data["needs_consultation"] is True


def test_delete_session(client):
    session_id = client.post("/api/sessions").json()["session_id"]

    assert client.get("/health").json()["active_sessions"] == 1

    response = client.delete(f"/api/sessions/{session_id}")
    assert response.status_code == 200
    assert client.get(f"/api/sessions/{session_id}").status_code == 404


def test_diagnose(client):
    """Cálculo direto"""
    response = client.post(
        "/api/diagnose",
        json={"answers": {f"q{i}": f"q{i}_2" for i in range(1, 9)}},
    )
    data = response.json()

    assert response.status_code == 200
    assert data["result"]["overallScore"] == 31
    assert data["result"]["needsConsultation"] is True
    assert data["score_label"] == "Precisa de Atenção"

    response = client.post("/api/diagnose", json={"answers": {"q1": "x"}})
    assert response.status_code == 400

    response = client.post("/api/diagnose", json={"answers": {}})
    assert response.json()["result"]["overallScore"] == 0


def test_score_bands_from_config_file(tmp_path, monkeypatch):
    """Faixas do rótulo vêm da configuração do diagnóstico"""
    from fastapi.testclient import TestClient
    from gap_diagnostic.api import app, engine_manager
    from gap_diagnostic.api.config import config
    from gap_diagnostic.config import DiagnosticConfig, ScoreBandsConfig, save_config

    path = tmp_path / "diagnostic.yaml"
    save_config(DiagnosticConfig(score_bands=ScoreBandsConfig(excellent=101, good=90)), str(path))
    monkeypatch.setattr(config, "diagnostic_config_path", str(path))

    answers = {f"q{i}": f"q{i}_1" for i in range(1, 9)}
    engine_manager.reset()
    try:
        with TestClient(app) as test_client:
            data = test_client.post("/api/diagnose", json={"answers": answers}).json()
    finally:
        engine_manager.reset()

    assert data["result"]["overallScore"] == 100
    assert data["score_label"] == "Bom"


def test_score_bands_from_env(monkeypatch):
    """Sem arquivo, as faixas vêm das variáveis de ambiente"""
    from fastapi.testclient import TestClient
    from gap_diagnostic.api import app, engine_manager
    from gap_diagnostic.api.config import config

    monkeypatch.setattr(config, "diagnostic_config_path", None)
    monkeypatch.setenv("SCORE_BAND_GOOD", "5")

    answers = {f"q{i}": f"q{i}_3" for i in range(1, 9)}
    engine_manager.reset()
    try:
        with TestClient(app) as test_client:
            data = test_client.post("/api/diagnose", json={"answers": answers}).json()
    finally:
        engine_manager.reset()

    assert data["result"]["overallScore"] == 10
    assert data["score_label"] == "Bom"


def test_run_api_single_process(monkeypatch):
    """Sessões em memória: o servidor sobe com um único worker"""
    import runpy
    import sys
    from pathlib import Path
    import uvicorn

    calls = {}
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.update(kwargs, app=app))
    script = str(Path(__file__).parent.parent / "scripts" / "run_api.py")

    monkeypatch.setattr(sys, "argv", ["run_api.py", "--port", "8080"])
    runpy.run_path(script, run_name="__main__")

    assert calls["app"] == "gap_diagnostic.api.app:app"
    assert calls["port"] == 8080
    assert calls["workers"] == 1

    monkeypatch.setattr(sys, "argv", ["run_api.py", "--workers", "4"])
    with pytest.raises(SystemExit):
        runpy.run_path(script, run_name="__main__")
