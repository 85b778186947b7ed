"""Standard Python logging configuration."""
from __future__ import annotations

import logging
import sys

from floatstats.config import Settings, get_settings


def setup_logging(settings: Settings | None = None) -> None:
    """Configure standard Python logging.

    Call **exactly once** at startup; later calls are no-ops.
    """
    if getattr(setup_logging, "_configured", False):  # type: ignore[attr-defined]
        return
    settings = settings or get_settings()

    formatter = logging.Formatter(
        fmt=settings.log_format,
        datefmt=settings.log_datefmt,
    )

    # Configure stdout handler
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    # Configure root logger
    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(settings.log_level)

    # Library loggers defer to the root logger
    package_logger = logging.getLogger("floatstats")
    package_logger.handlers.clear()
    package_logger.propagate = True

    setup_logging._configured = True  # type: ignore[attr-defined]
