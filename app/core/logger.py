import inspect
import json
import logging
import re
import sys
import time
import uuid
from contextvars import ContextVar
from functools import wraps
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Callable, Optional

# Context variable for the per-request correlation ID
correlation_id_var: ContextVar[Optional[str]] = ContextVar('correlation_id', default=None)

# Patterns for provider credentials that must never reach a log line
SECRET_PATTERNS = [
    (re.compile(r'(bearer\s+)[\w.-]{16,}', re.IGNORECASE), r'\1***MASKED***'),
    (re.compile(r'\bhf_[A-Za-z0-9]{16,}'), '***MASKED***'),
    (re.compile(r'\bAIza[\w-]{30,}'), '***MASKED***'),
    (re.compile(r'(api[_-]?key\s*[=:]\s*)["\']?[\w-]{16,}["\']?', re.IGNORECASE), r'\1***MASKED***'),
]

BASE_DIR = Path(__file__).resolve().parent.parent.parent
LOGS_DIR = BASE_DIR / "logs"
LOG_FORMAT = "%(asctime)s - [%(correlation_id)s] - %(name)s - %(levelname)s - %(message)s"


def mask_secrets(text: str) -> str:
    """Mask API keys and bearer tokens in text."""
    for pattern, replacement in SECRET_PATTERNS:
        text = pattern.sub(replacement, text)
    return text


class SecretMaskingFilter(logging.Filter):
    """Filter to mask secrets in log messages."""

    def filter(self, record):
        if isinstance(record.msg, str):
            record.msg = mask_secrets(record.msg)
        if record.args:
            record.args = tuple(
                mask_secrets(arg) if isinstance(arg, str) else arg
                for arg in record.args
            )
        return True


class CorrelationIdFilter(logging.Filter):
    """Filter to inject correlation ID into log records."""

    def filter(self, record):
        correlation_id = correlation_id_var.get()
        record.correlation_id = correlation_id if correlation_id else "N/A"
        return True


class JsonFormatter(logging.Formatter):
    """Formatter for structured JSON logging."""

    def format(self, record):
        log_data = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "correlation_id": getattr(record, 'correlation_id', 'N/A'),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        if hasattr(record, 'extra_data'):
            log_data.update(record.extra_data)
        return json.dumps(log_data)


class ColorFormatter(logging.Formatter):
    """Custom formatter to add colors to console output."""

    grey = "\x1b[38;20m"
    yellow = "\x1b[33;20m"
    red = "\x1b[31;20m"
    bold_red = "\x1b[31;1m"
    reset = "\x1b[0m"

    FORMATS = {
        logging.DEBUG: grey + LOG_FORMAT + reset,
        logging.INFO: grey + LOG_FORMAT + reset,
        logging.WARNING: yellow + LOG_FORMAT + reset,
        logging.ERROR: red + LOG_FORMAT + reset,
        logging.CRITICAL: bold_red + LOG_FORMAT + reset
    }

    def format(self, record):
        log_fmt = self.FORMATS.get(record.levelno)
        formatter = logging.Formatter(log_fmt, datefmt="%Y-%m-%d %H:%M:%S")
        return formatter.format(record)


def setup_logger(name: str = "app", log_level: int = logging.INFO, use_json: bool = False) -> logging.Logger:
    """
    Sets up the application logger with a colored console handler and a
    rotating file handler under logs/.

    Both handlers carry the correlation ID and secret masking filters.
    Calling it twice is a no-op.
    """
    logger = logging.getLogger(name)
    logger.setLevel(log_level)

    if logger.hasHandlers():
        return logger

    LOGS_DIR.mkdir(exist_ok=True)
    correlation_filter = CorrelationIdFilter()
    secret_filter = SecretMaskingFilter()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(ColorFormatter())
    console_handler.addFilter(correlation_filter)
    console_handler.addFilter(secret_filter)
    logger.addHandler(console_handler)

    # Rotate after 5MB, keep 5 backup files
    file_handler = RotatingFileHandler(
        LOGS_DIR / "app.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8"
    )
    if use_json:
        file_handler.setFormatter(JsonFormatter(datefmt="%Y-%m-%d %H:%M:%S"))
    else:
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    file_handler.addFilter(correlation_filter)
    file_handler.addFilter(secret_filter)
    logger.addHandler(file_handler)

    return logger


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """Set the correlation ID for the current context, generating one if missing."""
    correlation_id = correlation_id or str(uuid.uuid4())
    correlation_id_var.set(correlation_id)
    return correlation_id


def get_correlation_id() -> Optional[str]:
    """Get the correlation ID for the current context."""
    return correlation_id_var.get()


logger = logging.getLogger(__name__)


def log_async_execution_time(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Decorator to log the execution time of a coroutine function.
    """
    if not inspect.iscoroutinefunction(func):
        raise TypeError(f"{func.__name__} is not a coroutine function")

    @wraps(func)
    async def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        logger.info(f"Starting async execution of: {func.__qualname__}")
        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            duration = time.perf_counter() - start_time
            logger.error(f"Error in async {func.__qualname__} after {duration:.4f} seconds: {e}")
            raise
        duration = time.perf_counter() - start_time
        logger.info(f"Finished async execution of: {func.__qualname__} in {duration:.4f} seconds")
        return result
    return wrapper
