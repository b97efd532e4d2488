"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain package loggers.
    - Allow an opt-in verbose/debug mode for the command line.

Notes/Edge cases:
    - Configuration is idempotent; calling :func:`configure` twice does not
      attach a second handler.
    - Library use never emits output unless the host application configures
      logging, because the package logger only carries a ``NullHandler``.
"""

from __future__ import annotations

import logging

__all__ = ["PACKAGE_LOGGER", "get_logger", "configure"]

PACKAGE_LOGGER = "edtf_converter"

_FORMAT = "%(levelname)s %(name)s: %(message)s"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger nested under the package logger."""

    if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def configure(verbose: bool = False) -> logging.Logger:
    """Enable debug output on stderr when ``verbose`` is set.

    Without ``verbose`` the package logger is left as configured by the host
    application.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    if not verbose:
        return logger
    if not any(getattr(h, "_edtf_converter", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
        handler._edtf_converter = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    return logger
