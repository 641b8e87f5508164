"""Logging setup for pipeline_hooks.

The package logs through loguru but stays silent until the embedding
application opts in with ``configure_logging()``.
"""

import sys
from typing import Optional

from loguru import logger

from .config import LoggingConfig, config

_sink_id: Optional[int] = None


def configure_logging(level: Optional[str] = None, sink=None) -> int:
    """Enable the package's log output.

    Args:
        level: Minimum level, defaults to ``HOOKS_LOG_LEVEL``.
        sink: Any loguru sink, defaults to stderr.

    Returns:
        The loguru handler id of the installed sink.
    """
    global _sink_id

    settings = config.logging if level is None else LoggingConfig(level=level, format=config.logging.format)

    if _sink_id is not None:
        logger.remove(_sink_id)
    _sink_id = logger.add(
        sink or sys.stderr,
        level=settings.level,
        format=settings.format,
        filter="pipeline_hooks",
    )
    logger.enable("pipeline_hooks")
    return _sink_id


def disable_logging() -> None:
    """Remove the sink installed by configure_logging() and mute the package."""
    global _sink_id

    if _sink_id is not None:
        logger.remove(_sink_id)
        _sink_id = None
    logger.disable("pipeline_hooks")
