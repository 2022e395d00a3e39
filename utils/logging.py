from __future__ import annotations

import logging
import pprint
import traceback
from pathlib import Path
from typing import Any

from config import config

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"


def configure_logger(
    name: str, log_file: Path, level: int = logging.INFO
) -> logging.Logger:
    """Return a configured logger that writes to the given file."""

    logger = logging.getLogger(name)
    if not logger.handlers:
        try:
            log_file.parent.mkdir(parents=True, exist_ok=True)
            handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
        except OSError:
            handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    logger.setLevel(level)
    return logger


logger = configure_logger(
    "elife",
    Path(config.LOG_DIR) / "elife.log",
    getattr(logging, config.LOG_LEVEL, logging.INFO),
)


def to_str(obj: Any) -> Any:
    """Return a printable form of ``obj``, with the traceback for exceptions.

    Falsy values and strings are returned unchanged.
    """

    if not obj:
        return obj
    if isinstance(obj, str):
        return obj
    text = pprint.pformat(obj)
    if isinstance(obj, BaseException) and obj.__traceback__ is not None:
        text += "\n" + "".join(
            traceback.format_exception(type(obj), obj, obj.__traceback__)
        )
    return text


def show_msg(msg: Any) -> None:
    """Log an informational message or object."""
    logger.info("%s", to_str(msg))


def show_err(err: Any) -> None:
    """Log an error message or object on the error channel."""
    logger.error("%s", to_str(err))
