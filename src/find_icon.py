"""First-match icon path resolution."""

import logging
from collections.abc import Callable
from typing import Any

from src.file_exists import file_exists
from src.home_dir import home_dir
from src.icon_axes import candidate_paths

logger = logging.getLogger(__name__)


def find_icon(
    app_class: str,
    home: str | None = None,
    config: dict[str, Any] | None = None,
    exists: Callable[[str], bool] = file_exists,
) -> str:
    """Resolve an application class to the first existing icon path.

    Candidates are probed one at a time in priority order and the scan stops
    at the first hit. Returns an empty string when nothing exists; callers
    pick their own fallback icon.
    """
    if home is None:
        home = home_dir()

    for path in candidate_paths(app_class, home, config):
        try:
            found = exists(path)
        except (OSError, ValueError) as e:
            logger.debug(f"Probe failed for {path!r}: {e}")
            continue
        if found:
            logger.debug(f"Icon for {app_class!r}: {path}")
            return path

    logger.debug(f"No icon found for {app_class!r}")
    return ""
