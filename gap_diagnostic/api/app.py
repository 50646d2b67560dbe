"""
Gap Diagnostic — Aplicação FastAPI

Execução:
    uvicorn gap_diagnostic.api.app:app --reload --host 0.0.0.0 --port 8000

    ou:

    python scripts/run_api.py
"""

import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from gap_diagnostic import __version__
from gap_diagnostic.config import configure_logging

from .config import config
from .dependencies import engine_manager
from .routes import (
    health_router,
    questions_router,
    sessions_router,
    diagnosis_router,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Carrega o banco de perguntas na inicialização"""
    configure_logging(config.log_level)
    logger.info("Gap Diagnostic API iniciando...")

    if engine_manager.load():
        configure_logging(engine_manager.engine.config.log_level)
        logger.info("API pronta: %r", engine_manager.engine)
    else:
        logger.warning("API em modo limitado: %s", engine_manager.error)

    logger.info("Swagger UI: http://%s:%s/docs", config.host, config.port)

    yield

    logger.info("Gap Diagnostic API encerrando...")


app = FastAPI(
    title=config.api_title,
    description=config.api_description,
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=config.cors_allow_methods,
    allow_headers=config.cors_allow_headers,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time

    if request.url.path.startswith(config.api_prefix):
        logger.info(
            "%s %s → %d (%.1fms)",
            request.method, request.url.path, response.status_code, process_time * 1000
        )

    return response


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    logger.exception("Erro não tratado em %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=500,
        content={
            "error": "Internal server error",
            "detail": str(exc) if config.debug else None
        }
    )


app.include_router(health_router)
app.include_router(questions_router, prefix=config.api_prefix)
app.include_router(sessions_router, prefix=config.api_prefix)
app.include_router(diagnosis_router, prefix=config.api_prefix)
