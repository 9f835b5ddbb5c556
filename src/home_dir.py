"""Lookup of the current user's home directory."""

import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)


def home_dir() -> str:
    """Return $HOME, or the account home when $HOME is unset or empty.

    Returns an empty string when neither is available, so theme roots
    degrade to paths that simply do not exist.
    """
    home = os.getenv("HOME")
    if home:
        return home
    try:
        return str(Path.home())
    except RuntimeError as e:
        logger.warning(f"Could not determine home directory: {e}")
        return ""
