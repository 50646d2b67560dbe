#!/usr/bin/env python3
"""
Gap Diagnostic — Questionário no terminal

Percorre o banco de perguntas uma pergunta por vez e mostra o resultado.

Execução:
    python scripts/run_diagnostic.py
    python scripts/run_diagnostic.py --bank data/question_bank.yaml
    python scripts/run_diagnostic.py --config config.yaml --log-level DEBUG

Comandos: número da alternativa, "v" para voltar, "s" para sair.
"""

import argparse
import sys

from gap_diagnostic.config import DiagnosticConfig, configure_logging, load_config
from gap_diagnostic.diagnostic_engine import DiagnosticEngine
from gap_diagnostic.exceptions import InvalidAnswerError


def print_header(text):
    print("\n" + "=" * 60)
    print(f" {text}")
    print("=" * 60)


def ask(session) -> bool:
    """Uma rodada de pergunta; False se o usuário saiu"""
    question = session.current_question
    current, total = session.progress

    print(f"\nPergunta {current} de {total}")
    print(question.text)
    for i, option in enumerate(question.options, 1):
        marker = "*" if option.id == session.current_answer else " "
        print(f"  {marker}{i}. {option.text}")

    choice = input("> ").strip().lower()

    if choice == "s":
        return False
    if choice == "v":
        if not session.previous():
            print("Já está na primeira pergunta.")
        return True

    if not choice.isdigit() or not 1 <= int(choice) <= len(question.options):
        print("Opção inválida.")
        return True

    try:
        session.answer(question.id, question.options[int(choice) - 1].id)
    except InvalidAnswerError as e:
        print(f"Erro: {e}")

    return True


def main():
    parser = argparse.ArgumentParser(description='Gap Diagnostic — questionário')
    parser.add_argument('--config', help='Arquivo YAML de configuração')
    parser.add_argument('--bank', help='Arquivo YAML do banco de perguntas')
    parser.add_argument('--log-level', default=None, help='Nível de log (INFO, DEBUG...)')

    args = parser.parse_args()

    config = load_config(args.config) if args.config else DiagnosticConfig()
    if args.bank:
        config.question_bank_path = args.bank
    if args.log_level:
        config.log_level = args.log_level

    configure_logging(config.log_level)

    engine = DiagnosticEngine.from_config(config)
    session = engine.start_session()

    print_header("Diagnóstico de GAPs")

    while not session.is_completed:
        if not ask(session):
            print("Diagnóstico interrompido.")
            sys.exit(1)

    print_header("Resultado da Análise")
    print(engine.explain(session.result))


if __name__ == "__main__":
    main()
