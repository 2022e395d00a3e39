"""Shared utility helpers for elife nodes."""

from .fs import ensure_exists, remove_dir
from .logging import configure_logger, show_err, show_msg, to_str
from .net import get_ips
from .objects import shallow_clone

__all__ = [
    "configure_logger",
    "ensure_exists",
    "get_ips",
    "remove_dir",
    "shallow_clone",
    "show_err",
    "show_msg",
    "to_str",
]
