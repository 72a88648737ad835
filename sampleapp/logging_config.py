"""
Structured logging setup shared by scripts and embedding applications
"""

import logging
from typing import Optional

import structlog

from sampleapp.config import Settings, settings as default_settings


def configure_logging(app_settings: Optional[Settings] = None) -> None:
    """Configure structlog: console output in development, JSON elsewhere"""
    app_settings = app_settings or default_settings

    structlog.configure(
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.dev.ConsoleRenderer() if app_settings.is_development else structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, app_settings.log_level.upper(), logging.INFO)
        ),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )
