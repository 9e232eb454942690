"""Logging configuration helpers."""

import logging

# httpx logs every request at INFO; one per scanned menu item is too chatty.
_NOISY_LOGGERS = ("httpx", "httpcore")


def configure_logging(level: str | int = logging.INFO) -> None:
    """Configure the menu_ranker logger with a single stream handler.

    ``level`` accepts a name such as "DEBUG" or a numeric level. Calling this
    again only updates the level.
    """
    logger = logging.getLogger("menu_ranker")
    logger.setLevel(level.upper() if isinstance(level, str) else level)
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    if logger.handlers:
        return
    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s: %(name)s: %(message)s")
    )
    logger.addHandler(handler)
    logger.propagate = False
