import logging
from contextlib import asynccontextmanager
from typing import Dict

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.vapi.interview import interview_router
from app.core.config import settings
from app.core.db import init_db
from app.core.exceptions import AppError, app_error_handler, global_exception_handler, http_exception_handler
from app.core.logger import set_correlation_id, setup_logger
from app.services.pipeline.response_formatter import OutputMode, ResponseFormatter

setup_logger(log_level=logging.DEBUG if settings.DEBUG_MODE else logging.INFO, use_json=settings.LOG_JSON)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(
        f"Application startup: Interview Question Generator "
        f"(provider={settings.LLM_PROVIDER}, response_mode={app.state.response_formatter.mode.value})"
    )
    await init_db()
    yield
    logger.info("Application shutdown")

app = FastAPI(
    title="Interview Question Generator",
    description="Generates spoken interview questions for a voice assistant.",
    version="1.0.0",
    lifespan=lifespan
)

# Resolved once per deployment; shared by the route and the exception handlers
app.state.response_formatter = ResponseFormatter(OutputMode(settings.RESPONSE_MODE.strip().lower()))

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(StarletteHTTPException, http_exception_handler)
app.add_exception_handler(Exception, global_exception_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def correlation_id_middleware(request: Request, call_next):
    correlation_id = set_correlation_id(request.headers.get("X-Correlation-ID"))
    response = await call_next(request)
    response.headers["X-Correlation-ID"] = correlation_id
    return response


app.include_router(interview_router, prefix="/api/vapi", tags=["interview"])


@app.get("/health")
async def health() -> Dict[str, str]:
    return {"status": "ok"}
