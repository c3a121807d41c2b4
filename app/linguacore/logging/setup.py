"""Structlog configuration for linguacore.

Catalog loads, language switches and lookup misses are logged as
snake_case events with keyword fields. The host application decides
where they go; under pytest everything is silenced.

Usage:
    from linguacore.logging import configure_logging, get_module_logger

    configure_logging(log_level="DEBUG")

    logger = get_module_logger()
    logger.info("loaded_translations", language="ar", entry_count=42)
"""

import inspect
import logging
import sys
from typing import List, Optional

import structlog
from structlog.stdlib import BoundLogger
from structlog.typing import Processor

from linguacore.configuration import Settings, get_settings

SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """True when running under pytest."""
    return "pytest" in sys.modules


def _base_processors() -> List[Processor]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.MODULE,
                structlog.processors.CallsiteParameter.FUNC_NAME,
                structlog.processors.CallsiteParameter.LINENO,
            ]
        ),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]


def _install(processors: List[Processor], level: int, force: bool = False) -> None:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(format="%(message)s", level=level, force=force)


def configure_logging(
    settings: Optional[Settings] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog on top of the standard logging module.

    Production renders one JSON object per event; elsewhere the console
    renderer is used. Under pytest the root logger is raised above
    CRITICAL and the settings are not consulted.

    Args:
        settings: Settings to read LOG_LEVEL and ENVIRONMENT from
            (default: get_settings()).
        log_level: Overrides settings.LOG_LEVEL.
        is_production: Overrides settings.is_production.

    Returns:
        The configured root BoundLogger.
    """
    if _is_test_environment():
        logging.root.setLevel(SILENT_LEVEL)
        _install(
            [structlog.stdlib.add_log_level, structlog.processors.JSONRenderer()],
            SILENT_LEVEL,
            force=True,
        )
        return structlog.stdlib.get_logger()

    settings = settings or get_settings()
    if is_production is None:
        is_production = settings.is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()

    processors = _base_processors()
    if is_production:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    _install(processors, getattr(logging, level_name, logging.INFO))
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def _caller_module_name() -> Optional[str]:
    # Two frames up: past this helper and the public get_* function.
    frame = inspect.currentframe()
    for _ in range(2):
        if frame is None:
            return None
        frame = frame.f_back
    if frame is None:
        return None
    module = inspect.getmodule(frame)
    return module.__name__ if module else None


def get_logger(name: Optional[str] = None) -> BoundLogger:
    """Logger bound to ``logger_name`` (the caller's module when name is omitted)."""
    return logger.bind(logger_name=name or _caller_module_name() or "unknown")


def get_module_logger() -> BoundLogger:
    """Logger bound to the calling module.

    Binds ``component`` (last dotted part) and ``module_path``, e.g.
    ``component="loader", module_path="linguacore.i18n.loader"``.
    """
    module_name = _caller_module_name()
    if module_name is None:
        return logger.bind(component="unknown")
    return logger.bind(component=module_name.rsplit(".", 1)[-1], module_path=module_name)
