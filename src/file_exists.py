"""Filesystem existence probe used by the icon resolver."""

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


def file_exists(path: str) -> bool:
    """Check whether a file, directory or symlink target exists at path.

    Probe errors (permission denied, embedded NUL bytes) count as missing.
    """
    try:
        return Path(path).exists()
    except (OSError, ValueError) as e:
        logger.debug(f"Probe failed for {path!r}: {e}")
        return False
