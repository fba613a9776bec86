"""Simple logging abstraction for recipebook."""

import sys
from typing import Optional
from loguru import logger as _logger

from .profile import Profile

_logger_configured: bool = False


def get_logger(component: Optional[str] = None):
    """Get a logger instance, labelled with `component` when given."""
    if not _logger_configured:
        configure_logging()

    if component:
        return _logger.bind(component=component)
    return _logger


def configure_logging(profile: Optional[Profile] = None) -> None:
    """(Re)configure the loguru sinks for the given profile."""
    global _logger_configured

    profile = profile or Profile.current()
    _logger.remove()

    # Stderr handler - ERROR and above unless overridden
    _logger.add(
        sys.stderr,
        level=profile.log_level,
        format="<red>{time:HH:mm:ss}</red> | <level>{level: <8}</level> | <cyan>{extra[component]}</cyan> | <level>{message}</level>",
        colorize=True,
    )

    if profile.file_logging:
        profile.ensure_directories()
        _logger.add(
            profile.log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {extra[component]} | {message}",
            rotation="10 MB",
            retention="30 days",
            compression="zip",
        )

    _logger.configure(patcher=_add_context)
    _logger_configured = True


def _add_context(record):
    """Label records logged without a component."""
    record["extra"].setdefault("component", "recipebook")


logger = get_logger()

__all__ = [
    "logger",
    "get_logger",
    "configure_logging",
]
