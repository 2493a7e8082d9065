"""Central logging setup for the project."""
from __future__ import annotations
import logging
import sys

def setup_logging(level: int | str = logging.WARNING) -> None:
    """
    Configure root logger with sane defaults.

    Logs go to stderr; stdout is reserved for the chat itself.

    Args:
        level: Logging level, as an int or a level name such as "DEBUG".
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.WARNING
    handler = logging.StreamHandler(sys.stderr)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)
