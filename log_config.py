"""
📝 LOGGING — structlog, configured from SchedulerSettings
=========================================================
Console lines while developing, JSON lines when SCHEDULER_LOG_JSON=true.
Every event carries the configured seed (if any) so a logged timetable can be
regenerated exactly. Modules call get_logger(__name__) instead of print().
"""

import logging
import sys
from typing import Optional

import structlog

from settings import SchedulerSettings, get_settings

# Streamlit's file watcher is chatty at DEBUG; keep it at WARNING.
QUIET_LOGGERS = ("watchdog", "streamlit.watcher", "PIL")


def _renderer(json_output: bool):
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def setup_logging(settings: Optional[SchedulerSettings] = None) -> None:
    """Configure structlog from settings (SCHEDULER_LOG_LEVEL, SCHEDULER_LOG_JSON)."""
    settings = settings or get_settings()
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.format_exc_info,
            _renderer(settings.log_json),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.contextvars.clear_contextvars()
    if settings.random_seed is not None:
        structlog.contextvars.bind_contextvars(seed=settings.random_seed)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))


def get_logger(name: str) -> structlog.BoundLogger:
    return structlog.get_logger(name)
