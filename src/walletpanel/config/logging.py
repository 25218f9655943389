"""structlog setup for the wallet panel.

Events are JSON lines unless ``DEBUG`` is on, in which case they go through
structlog's console renderer. Every event carries the app name and wallet
mode so simulated and real sessions can be told apart in one stream.
"""

import logging
import sys

import structlog
from structlog.typing import Processor

from walletpanel.config.settings import Settings, get_settings


def select_renderer(debug: bool) -> Processor:
    """Pick the final processor: readable console lines or JSON."""
    if debug:
        return structlog.dev.ConsoleRenderer()
    return structlog.processors.JSONRenderer()


def build_processors(settings: Settings) -> list[Processor]:
    """Processor chain for panel events, renderer last."""
    return [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.StackInfoRenderer(),
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso"),
        select_renderer(settings.debug),
    ]


def configure_logging() -> None:
    """Configure structlog and the stdlib root logger from settings."""
    settings = get_settings()
    log_level = getattr(logging, settings.log_level)

    structlog.contextvars.clear_contextvars()
    structlog.contextvars.bind_contextvars(
        app=settings.app_name,
        wallet_mode=settings.wallet_mode,
    )

    structlog.configure(
        processors=build_processors(settings),
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    # gradio, uvicorn and httpx log through the stdlib
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=log_level,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger named after the calling module."""
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
