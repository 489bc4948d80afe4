"""Console diagnostics for command line runs."""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER_NAME = "workflow_xml_generator"


class LabeledFormatter(logging.Formatter):
    """Prefix each message with a short level label."""

    LEVEL_LABELS = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARN",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
    }

    def format(self, record: logging.LogRecord) -> str:
        label = self.LEVEL_LABELS.get(record.levelno, record.levelname)
        return f"{label} {record.getMessage()}"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Attach a single labeled stderr handler to the package logger.

    A handler from an earlier call is replaced, so the logger always writes to
    the current ``sys.stderr``.
    """
    level = logging.DEBUG if verbose else logging.INFO
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_labeled_handlers(logger)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(LabeledFormatter())
    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger


def reset_logging() -> None:
    """Undo ``configure_logging``. Mainly for testing purposes."""
    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    _remove_labeled_handlers(logger)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


def _remove_labeled_handlers(logger: logging.Logger) -> None:
    for handler in logger.handlers[:]:
        if isinstance(handler.formatter, LabeledFormatter):
            logger.removeHandler(handler)
