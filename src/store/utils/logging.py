"""Logging for the store.

Records flow through stdlib logging, which owns the handlers: stdout, a
rotating `store.log` and a rotating `store_error.log` for errors only.
structlog wraps it, adding request context bound by the API middleware
(`request_id`, `method`, `path`) and rendering JSON in production/staging
or a readable console line elsewhere.

Environment variables: `LOG_LEVEL` overrides the per-environment level and
`LOG_DIR` moves the log files (default `logs/`).
"""

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

_LEVEL_BY_ENVIRONMENT = {
    "production": "INFO",
    "staging": "INFO",
    "development": "DEBUG",
    "test": "WARNING",
}

_STRUCTURED_ENVIRONMENTS = ("production", "staging")

_MAX_FILE_BYTES = 10 * 1024 * 1024
_BACKUP_COUNT = 5

# Libraries that are noisy below WARNING
_QUIET_LOGGERS = ("protean", "multipart", "asyncio", "uvicorn.access")


def get_environment() -> str:
    return (os.getenv("ENV") or os.getenv("ENVIRONMENT") or os.getenv("PROTEAN_ENV") or "development").lower()


def get_log_level() -> str:
    return os.getenv("LOG_LEVEL", _LEVEL_BY_ENVIRONMENT.get(get_environment(), "INFO")).upper()


def _rotating_file(path: Path, level: int | str) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        filename=path,
        maxBytes=_MAX_FILE_BYTES,
        backupCount=_BACKUP_COUNT,
        encoding="utf-8",
    )
    handler.setLevel(level)
    return handler


def _handlers(level: str, log_dir: Path, prefix: str) -> list[logging.Handler]:
    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    return [
        console,
        _rotating_file(log_dir / f"{prefix}.log", level),
        _rotating_file(log_dir / f"{prefix}_error.log", logging.ERROR),
    ]


def _renderer() -> Any:
    if get_environment() in _STRUCTURED_ENVIRONMENTS:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(
        colors=sys.stdout.isatty(),
        exception_formatter=structlog.dev.plain_traceback,
    )


def configure_logging(level: str | None = None, log_dir: str = "logs", log_file_prefix: str = "store") -> None:
    """Install the stdlib handlers and the structlog pipeline on top of them."""
    log_level = level or get_log_level()
    log_path = Path(os.getenv("LOG_DIR", log_dir))
    log_path.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    root.setLevel(log_level)
    root.handlers = _handlers(log_level, log_path, log_file_prefix)
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


def add_context(**kwargs: Any) -> None:
    """Bind key/values onto every log line emitted in the current context."""
    structlog.contextvars.bind_contextvars(**kwargs)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()
