"""Structlog setup for the CLI.

Log records go to stderr so they never mix with the translated messages on
stdout. ``LOG_LEVEL`` defaults to WARNING, which keeps an ordinary run quiet;
``ENVIRONMENT=production`` switches the renderer to JSON.
"""

import inspect
import logging
import sys
from typing import Optional

import structlog
from structlog.stdlib import BoundLogger

from typeorm_extender.infrastructure.configuration import Settings
from typeorm_extender.infrastructure.logging.formatters import mask_sensitive_data

SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    return "pytest" in sys.modules


def configure_logging(
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the root logger for one process.

    Args:
        log_level: Overrides ``LOG_LEVEL``.
        is_production: Overrides ``ENVIRONMENT``; True renders JSON lines.

    Returns:
        The root structlog logger.
    """
    if _is_test_environment():
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", level=SILENT, force=True)
        logging.root.setLevel(SILENT)
        return structlog.stdlib.get_logger()

    settings = Settings()
    if is_production is None:
        is_production = settings.is_production

    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        mask_sensitive_data(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer()
        if is_production
        else structlog.dev.ConsoleRenderer(),
    ]
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    level_name = (log_level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level_name, logging.WARNING),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module.

    ``component`` is the last segment of the module name, so records of
    ``modules/database/migrations.py`` carry ``component="migrations"``.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    module = inspect.getmodule(caller) if caller is not None else None
    if module is None:
        return logger.bind(component="unknown")

    name = module.__name__
    return logger.bind(component=name.rpartition(".")[2], module_path=name)
