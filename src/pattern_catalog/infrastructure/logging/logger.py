"""Structured logging for the catalog using structlog over stdlib logging."""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, Any, List, Optional

import structlog

if TYPE_CHECKING:
    from pattern_catalog.config.schemas.logging_schema import LoggingConfig

_SHARED_PROCESSORS: List[Any] = [
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.stdlib.PositionalArgumentsFormatter(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
]


def setup_logging(config: Optional["LoggingConfig"] = None) -> structlog.stdlib.BoundLogger:
    """
    Set up structured logging for the application using structlog.

    Handlers never write to stdout: example output owns stdout, logs go to
    stderr and/or a rotating file.

    Args:
        config: Logging configuration. If None, schema defaults are used.

    Returns:
        Configured structlog logger instance.
    """
    if config is None:
        from pattern_catalog.config.schemas.logging_schema import LoggingConfig

        config = LoggingConfig()

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level.upper()))

    if config.renderer == "json":
        renderer: Any = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=False)

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_SHARED_PROCESSORS,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    handlers: List[logging.Handler] = []

    if config.destination in ("file", "both"):
        log_path = os.path.expandvars(config.file_path)
        log_dir = os.path.dirname(log_path)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    if config.destination in ("console", "both"):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    # Remove any existing handlers and add new ones
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)
        handler.close()

    for handler in handlers:
        root_logger.addHandler(handler)

    _configure_structlog()

    logger = get_logger("pattern_catalog")
    logger.debug(
        "Logging configured",
        log_level=config.level,
        log_destination=config.destination,
        renderer=config.renderer,
    )
    return logger


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a named structlog logger."""
    return structlog.get_logger(name)


def _configure_structlog() -> None:
    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            *_SHARED_PROCESSORS,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=False,
    )


# Route structlog through stdlib before setup_logging() runs, so early log
# calls never land on stdout.
_configure_structlog()
