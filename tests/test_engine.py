"""
Testes do motor de diagnóstico

Execução: pytest tests/test_engine.py -v
"""

import random

import pytest


def _two_option_bank():
    from gap_diagnostic.question_bank import QuestionBank

    return QuestionBank.from_dicts([
        {"id": "q1", "text": "Pergunta única", "options": [
            {"id": "A", "weight": 1, "gap_types": []},
            {"id": "B", "weight": 0, "gap_types": ["processo"]},
        ]},
    ])


def _is_sorted(gaps):
    keys = [(g.impact.rank, g.probability) for g in gaps]
    return all(a >= b for a, b in zip(keys, keys[1:]))


def test_scenario_worst_single_answer():
    """Alternativa B (peso 0, tag processo)"""
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine
    from gap_diagnostic.schemas import ImpactLevel

    result = DiagnosticEngine(bank=_two_option_bank()).compute({"q1": "B"})

    assert result.overall_score == 0
    assert len(result.gaps) == 1
    assert result.gaps[0].type == "processo"
    assert result.gaps[0].probability == 1
    assert result.gaps[0].impact == ImpactLevel.ALTO
    assert result.needs_consultation is True


def test_scenario_best_single_answer():
    """Alternativa A (peso 1, sem tags)"""
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine

    result = DiagnosticEngine(bank=_two_option_bank()).compute({"q1": "A"})

    assert result.overall_score == 100
    assert result.gaps == ()
    assert result.needs_consultation is False


def test_scenario_two_untagged_answers():
    """Duas respostas com peso 0.6, sem tags → 60, consultoria"""
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine
    from gap_diagnostic.question_bank import QuestionBank

    bank = QuestionBank.from_dicts([
        {"id": "q1", "options": [{"id": "a", "weight": 0.6}]},
        {"id": "q2", "options": [{"id": "b", "weight": 0.6}]},
    ])
    result = DiagnosticEngine(bank=bank).compute({"q1": "a", "q2": "b"})

    assert result.overall_score == 60
    assert result.gaps == ()
    assert result.needs_consultation is True


def test_boundary_through_pipeline():
    """impact_score exatamente 0.4 → Baixo"""
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine
    from gap_diagnostic.question_bank import QuestionBank
    from gap_diagnostic.schemas import ImpactLevel

    bank = QuestionBank.from_dicts([
        {"id": "q1", "options": [{"id": "a", "weight": 0.6, "gap_types": ["metas"]}]},
    ])
    result = DiagnosticEngine(bank=bank).compute({"q1": "a"})

    assert result.gaps[0].probability == 0.4
    assert result.gaps[0].impact == ImpactLevel.BAIXO


def test_all_zero_weights():
    """Todos os pesos 0 → score 0 e consultoria"""
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine
    from gap_diagnostic.question_bank import QuestionBank

    bank = QuestionBank.from_dicts([
        {"id": f"q{i}", "options": [{"id": "x", "weight": 0, "gap_types": ["a", f"t{i}"]}]}
        for i in range(5)
    ])
    result = DiagnosticEngine(bank=bank).compute({f"q{i}": "x" for i in range(5)})

    assert result.overall_score == 0
    assert result.needs_consultation is True
    assert len(result.gaps) == 6


def test_no_answers():
    """Mapa vazio → pior caso, sem erro"""
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine

    result = DiagnosticEngine().compute({})

    assert result.overall_score == 0
    assert result.gaps == ()
    assert result.needs_consultation is True


def test_default_bank_best_answers():
    """Melhores respostas: 100, GAPs só Baixo"""
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine
    from gap_diagnostic.schemas import ImpactLevel

    engine = DiagnosticEngine()
    result = engine.compute({f"q{i}": f"q{i}_1" for i in range(1, 9)})

    assert result.overall_score == 100
    assert result.needs_consultation is False
    assert len(result.gaps) == 8
    assert all(g.impact == ImpactLevel.BAIXO for g in result.gaps)
    assert all(g.probability == 0 for g in result.gaps)
    assert engine.score_label(result) == "Excelente"


def test_default_bank_worst_answers():
    """Piores respostas: todos os 13 GAPs Alto, penalidade máxima"""
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine
    from gap_diagnostic.schemas import ImpactLevel

    result = DiagnosticEngine().compute({f"q{i}": f"q{i}_3" for i in range(1, 9)})

    assert len(result.gaps) == 13
    assert all(g.impact == ImpactLevel.ALTO for g in result.gaps)
    assert all(g.probability == pytest.approx(0.8) for g in result.gaps)
    assert result.overall_score == 10    # 20 * (1 - 0.5)
    assert result.needs_consultation is True


def test_default_bank_middle_answers():
    """Respostas intermediárias: 60 * (1 - 12 * 0.04) = 31.2 → 31"""
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine

    result = DiagnosticEngine().compute({f"q{i}": f"q{i}_2" for i in range(1, 9)})

    assert len(result.gaps) == 12
    assert result.overall_score == 31
    assert result.needs_consultation is True


def test_partial_answers():
    """Perguntas não respondidas não contam"""
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine

    result = DiagnosticEngine().compute({"q1": "q1_1", "q2": "q2_1"})

    assert result.overall_score == 100
    assert {g.type for g in result.gaps} == {"processo", "monitoramento"}


def test_compute_idempotent():
    """Mesmas respostas → resultado idêntico"""
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine

    engine = DiagnosticEngine()
    answers = {"q1": "q1_3", "q2": "q2_2", "q3": "q3_1", "q4": "q4_3", "q5": "q5_2"}

    first = engine.compute(answers)
    second = engine.compute(answers)

    assert first == second
    assert first.model_dump_json() == second.model_dump_json()
    assert answers == {"q1": "q1_3", "q2": "q2_2", "q3": "q3_1", "q4": "q4_3", "q5": "q5_2"}


def test_compute_invalid_answers():
    """Ids desconhecidos → InvalidAnswerError"""
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine
    from gap_diagnostic.exceptions import InvalidAnswerError

    engine = DiagnosticEngine()

    with pytest.raises(InvalidAnswerError):
        engine.compute({"q1": "q2_1"})

    with pytest.raises(InvalidAnswerError):
        engine.compute({"q0": "q1_1"})


def test_result_invariants_random_maps():
    """Sem tipos duplicados, ordenado, score inteiro em [0, 100]"""
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine

    engine = DiagnosticEngine()
    rng = random.Random(42)

    for _ in range(300):
        questions = [q for q in engine.bank if rng.random() < 0.8]
        answers = {q.id: rng.choice(q.options).id for q in questions}

        result = engine.compute(answers)
        types = [g.type for g in result.gaps]

        assert len(types) == len(set(types))
        assert _is_sorted(result.gaps)
        assert isinstance(result.overall_score, int)
        assert 0 <= result.overall_score <= 100

        if result.overall_score < 70:
            assert result.needs_consultation


def test_from_config(tmp_path):
    """Banco carregado do caminho da configuração"""
    import yaml
    from gap_diagnostic.config import DiagnosticConfig
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine

    path = tmp_path / "bank.yaml"
    path.write_text(yaml.safe_dump({"questions": [
        {"id": "x1", "options": [{"id": "o1", "weight": 0.5, "gap_types": ["metas"]}]},
    ]}), encoding="utf-8")

    engine = DiagnosticEngine.from_config(DiagnosticConfig(question_bank_path=str(path)))

    assert engine.bank.question_ids == ["x1"]
    assert DiagnosticEngine.from_config(DiagnosticConfig()).bank.question_ids[0] == "q1"


def test_explain():
    """Texto legível do resultado"""
    from gap_diagnostic.diagnostic_engine import DiagnosticEngine

    engine = DiagnosticEngine()
    result = engine.compute({f"q{i}": f"q{i}_3" for i in range(1, 9)})
    text = engine.explain(result)

    assert "Pontuação Geral: 10%" in text
    assert "Precisa de Atenção" in text
    assert "processo" in text
    assert "consultor" in text

    print(text)
