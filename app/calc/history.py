"""
History Module

Appends every entered expression to a per-user history file.
History is best effort: if there is nowhere to write, the
expression is still evaluated.
"""

import logging
import os
from pathlib import Path
from typing import Optional, Union

logger = logging.getLogger(__name__)

HISTORY_FILENAME = ".calchistory"


def default_history_path() -> Optional[Path]:
    """~/.calchistory, or None when HOME is not set."""
    home = os.environ.get("HOME")
    if not home:
        return None
    return Path(home) / HISTORY_FILENAME


def write_history(expression: str, path: Optional[Union[str, Path]] = None) -> bool:
    """
    Append an expression to the history file.

    Args:
        expression: Raw input line, written unmodified
        path: History file (default: ~/.calchistory)

    Returns:
        True if the line was written
    """
    if not expression:
        return False

    path = Path(path) if path else default_history_path()
    if path is None:
        logger.debug("No history path available, skipping")
        return False

    try:
        with open(path, "a", encoding="utf-8") as f:
            f.write(expression + "\n")
    except OSError as e:
        logger.debug(f"Could not write history to {path}: {e}")
        return False
    return True
