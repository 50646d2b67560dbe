"""
Gap Diagnostic — Banco de perguntas

QuestionBank guarda a lista ordenada e imutável de perguntas e resolve
(pergunta, alternativa) → Option.
"""

import logging
from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional, Tuple, Union

import yaml
from pydantic import ValidationError

from gap_diagnostic.exceptions import (
    QuestionBankError,
    UnknownOptionError,
    UnknownQuestionError,
)
from gap_diagnostic.schemas import Option, Question

from .default_bank import DEFAULT_QUESTIONS

logger = logging.getLogger(__name__)


class QuestionBank:
    """
    Banco de perguntas ordenado.

    Exemplo:
        bank = QuestionBank.default()
        print(len(bank))              # 8
        question = bank[0]            # q1
        option = bank.resolve("q1", "q1_2")
        print(option.weight)          # 0.6
    """

    def __init__(self, questions: Iterable[Question]):
        self._questions: Tuple[Question, ...] = tuple(questions)
        self._index: Dict[str, int] = {}

        for i, question in enumerate(self._questions):
            if question.id in self._index:
                raise QuestionBankError(f"Pergunta duplicada: '{question.id}'")
            self._index[question.id] = i

    @classmethod
    def from_dicts(cls, data: List[dict]) -> "QuestionBank":
        """Criar banco a partir de uma lista de dicionários"""
        if not isinstance(data, list):
            raise QuestionBankError("O banco de perguntas deve ser uma lista")
        try:
            questions = [Question.model_validate(q) for q in data]
        except ValidationError as e:
            raise QuestionBankError(f"Banco de perguntas inválido: {e}") from e
        return cls(questions)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "QuestionBank":
        """
        Carregar banco de um arquivo YAML.

        Formato aceito: uma lista de perguntas ou {"questions": [...]}.
        """
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)

        if isinstance(data, dict):
            data = data.get("questions")

        bank = cls.from_dicts(data)
        logger.info("Banco de perguntas carregado de %s: %d perguntas", path, len(bank))
        return bank

    @classmethod
    def default(cls) -> "QuestionBank":
        """Banco padrão com 8 perguntas"""
        return cls.from_dicts(DEFAULT_QUESTIONS)

    def to_dicts(self) -> List[dict]:
        return [q.model_dump(mode="json") for q in self._questions]

    # ------------------------------------------------------------------
    # Acesso
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._questions)

    def __iter__(self) -> Iterator[Question]:
        return iter(self._questions)

    def __getitem__(self, index: int) -> Question:
        return self._questions[index]

    def __contains__(self, question_id: str) -> bool:
        return question_id in self._index

    @property
    def questions(self) -> Tuple[Question, ...]:
        return self._questions

    @property
    def question_ids(self) -> List[str]:
        return [q.id for q in self._questions]

    @property
    def gap_types(self) -> List[str]:
        """Todas as tags de GAP do banco (ordem da primeira ocorrência)"""
        tags: List[str] = []
        for question in self._questions:
            for option in question.options:
                for tag in option.gap_types:
                    if tag not in tags:
                        tags.append(tag)
        return tags

    def index_of(self, question_id: str) -> int:
        if question_id not in self._index:
            raise UnknownQuestionError(question_id)
        return self._index[question_id]

    def get_question(self, question_id: str) -> Optional[Question]:
        i = self._index.get(question_id)
        return self._questions[i] if i is not None else None

    def resolve(self, question_id: str, option_id: str) -> Option:
        """
        Resolver a alternativa escolhida.

        Raises:
            UnknownQuestionError: pergunta fora do banco
            UnknownOptionError: alternativa não pertence à pergunta
        """
        question = self.get_question(question_id)
        if question is None:
            raise UnknownQuestionError(question_id)

        option = question.get_option(option_id)
        if option is None:
            raise UnknownOptionError(question_id, option_id)

        return option

    def __repr__(self) -> str:
        return f"QuestionBank(questions={len(self)}, gap_types={len(self.gap_types)})"
