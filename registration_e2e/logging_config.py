"""Console logging setup shared by the scenario, fixtures and CLI."""

import logging

LOGGER_NAME = "registration_e2e"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str | int = "INFO") -> logging.Logger:
    """Attach a single console handler to the package logger.

    Calling this again only updates the level, so handlers are never
    duplicated across tests.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False

    handler = next(
        (h for h in logger.handlers if getattr(h, "_registration_e2e", False)),
        None,
    )
    if handler is None:
        handler = logging.StreamHandler()
        handler._registration_e2e = True  # type: ignore[attr-defined]
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(handler)
    handler.setLevel(level)

    return logger

