"""Gap Diagnostic — Exceções"""


class DiagnosticError(Exception):
    """Erro base do diagnóstico"""


class QuestionBankError(DiagnosticError, ValueError):
    """Banco de perguntas inválido (ids duplicados, pergunta sem opções...)"""


class InvalidAnswerError(DiagnosticError, ValueError):
    """
    Uso inválido do protocolo de respostas.

    Sempre levantada ANTES de qualquer alteração no mapa de respostas.
    """


class UnknownQuestionError(InvalidAnswerError):
    """Pergunta não existe no banco"""

    def __init__(self, question_id: str):
        self.question_id = question_id
        super().__init__(f"Pergunta desconhecida: '{question_id}'")


class UnknownOptionError(InvalidAnswerError):
    """Opção não pertence à pergunta"""

    def __init__(self, question_id: str, option_id: str):
        self.question_id = question_id
        self.option_id = option_id
        super().__init__(
            f"Opção '{option_id}' não pertence à pergunta '{question_id}'"
        )


class OutOfOrderAnswerError(InvalidAnswerError):
    """Resposta para uma pergunta que não é a atual"""

    def __init__(self, question_id: str, expected_id: str):
        self.question_id = question_id
        self.expected_id = expected_id
        super().__init__(
            f"Resposta fora de ordem: recebida '{question_id}', "
            f"esperada '{expected_id}'"
        )


class SessionCompletedError(InvalidAnswerError):
    """Sessão já concluída — nenhuma transição sai de COMPLETED"""

    def __init__(self, session_id: str):
        self.session_id = session_id
        super().__init__(f"Sessão {session_id} já foi concluída")
