"""Loguru setup for the Bookstore API.

One colourised stderr sink, plus a rotating file sink when
``logging.file`` is configured. Uvicorn's stdlib loggers are forwarded
into loguru; its access log is silenced because the request middleware
logs every request with its ``request_id``.
"""

import logging
import sys
from pathlib import Path

from loguru import logger

from src.bookstore.runtime.config.config_data import ConfigData, LoggingConfig
from src.bookstore.runtime.context import get_config

PLAIN_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<level>{level: <8}</level> | "
    "[<cyan>{extra[request_id]}</cyan>] | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - "
    "<level>{message}</level>"
)

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error")


class UvicornInterceptHandler(logging.Handler):
    """Forward stdlib records into loguru at the matching level."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame is not None and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back
            depth += 1

        logger.opt(depth=depth, exception=record.exc_info).bind(
            logger_name=record.name
        ).log(level, record.getMessage())


def _add_file_sink(cfg: LoggingConfig, verbose_errors: bool) -> None:
    path = Path(cfg.file)
    path.parent.mkdir(parents=True, exist_ok=True)
    as_json = cfg.format == "json"
    logger.add(
        str(path),
        level=cfg.level,
        format="{message}" if as_json else PLAIN_FORMAT,
        serialize=as_json,
        rotation=f"{cfg.max_size_mb} MB",
        retention=cfg.backup_count,
        compression="zip",
        enqueue=True,
        backtrace=verbose_errors,
        diagnose=verbose_errors,
    )


def _route_uvicorn_logs(level: str) -> None:
    handler = UvicornInterceptHandler()
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        uvicorn_logger.handlers = [handler] if name == "uvicorn" else []
        uvicorn_logger.propagate = name != "uvicorn"
        uvicorn_logger.setLevel(level.upper())

    access = logging.getLogger("uvicorn.access")
    access.handlers = []
    access.propagate = False
    access.disabled = True


def configure_logging(config: ConfigData | None = None) -> None:
    """(Re)build every loguru sink from ``config`` or the current configuration."""
    config = config or get_config()
    cfg = config.logging
    verbose_errors = config.app.environment != "production"

    logger.remove()
    # Records logged outside a request still render the request id column.
    logger.configure(extra={"request_id": "-"})

    logger.add(
        sys.stderr,
        level=cfg.level,
        format=PLAIN_FORMAT,
        colorize=True,
        backtrace=verbose_errors,
        diagnose=verbose_errors,
    )
    if cfg.file:
        _add_file_sink(cfg, verbose_errors)

    _route_uvicorn_logs(cfg.level)

    logger.info(
        "Logging configured",
        log_level=cfg.level,
        log_file=cfg.file,
        environment=config.app.environment,
    )
