"""Logging setup shared by the entry points."""

import logging

LOG_FORMAT = "%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def setup_logging(level: str = "WARNING", filename: str | None = None) -> None:
    """
    Call once at program start.

    With a filename the log goes to that file, otherwise to stderr. The
    terminal table redraws over stdout, so keep stderr quiet unless asked.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
        filename=filename,
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)
