"""Gap Diagnostic — Configuração de logging"""
import logging

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configurar o logging raiz (scripts e API)"""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
    logging.getLogger("gap_diagnostic").setLevel(level.upper())
