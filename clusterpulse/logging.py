"""
ClusterPulse Logging

structlog configuration shared by every module. Modules obtain loggers
with ``structlog.get_logger(__name__)`` and log dotted event names with
keyword context.
"""

from __future__ import annotations

import logging
import sys
from typing import Literal, Optional, Union

import structlog

from clusterpulse.config import LogLevel, get_config


def setup_logging(
    log_level: Optional[Union[LogLevel, str]] = None,
    log_format: Optional[Literal["json", "console"]] = None,
) -> None:
    """Configure structured logging; unset arguments come from the global config."""
    config = get_config()
    if log_level is None:
        log_level = config.log_level
    if log_format is None:
        log_format = config.log_format

    level = LogLevel(log_level.upper() if isinstance(log_level, str) else log_level)

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, level.value),
    )
    logging.getLogger().setLevel(getattr(logging, level.value))

    renderer = (
        structlog.dev.ConsoleRenderer()
        if log_format == "console"
        else structlog.processors.JSONRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
