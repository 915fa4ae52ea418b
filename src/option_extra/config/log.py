"""Logging setup for the ``option_extra`` logger hierarchy."""

from __future__ import annotations

import logging

from .settings import OptionExtraSettings, get_settings

ROOT_LOGGER = "option_extra"


def configure_logging(settings: OptionExtraSettings | None = None) -> logging.Logger:
    """Apply the configured level to the library logger and return it.

    ``debug=True`` forces DEBUG regardless of ``logging.level``. Handlers are left
    to the application; only a NullHandler is attached when none exists.
    """
    settings = settings or get_settings()
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel("DEBUG" if settings.debug else settings.logging.level)
    if not logger.handlers:
        logger.addHandler(logging.NullHandler())
    return logger
