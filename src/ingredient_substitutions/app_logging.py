"""Logging configuration helpers."""

import logging

PACKAGE_LOGGER = "ingredient_substitutions"


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure package logging with a single stream handler.

    Calling it again only updates the level.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    logger.setLevel(level)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s: %(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
