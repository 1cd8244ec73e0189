"""
Structured logging setup for PhishScope.

Wraps the standard library logging with structlog processors so every module
gets a bound logger through ``get_logger(__name__)``.
"""

import logging
import sys
from typing import Optional

import structlog

from phishscope.config.settings import LogFormat, Settings, get_settings

_configured = False


def configure_logging(settings: Optional[Settings] = None, force: bool = False) -> None:
    """Configure structlog and the root stdlib handler once per process."""
    global _configured
    if _configured and not force:
        return

    settings = settings or get_settings()
    log_level = getattr(logging, settings.LOG_LEVEL, logging.WARNING)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root = logging.getLogger("phishscope")
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(log_level)
    root.propagate = False

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if settings.LOG_FORMAT == LogFormat.JSON:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=False))

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    _configured = True


def get_logger(name: Optional[str] = None) -> structlog.stdlib.BoundLogger:
    """
    Return a structlog logger bound to ``name``.

    Does not touch the global structlog configuration; entry points call
    ``configure_logging()`` once at startup.
    """
    return structlog.get_logger(name)
