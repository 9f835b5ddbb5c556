"""Axis definitions and candidate path generation for icon lookup."""

from typing import Any

from src.cartesian_product import cartesian_product
from src.load_config import DEFAULT_CONFIG


def build_icon_axes(
    app_class: str, home: str, config: dict[str, Any] | None = None
) -> list[list[str]]:
    """Build the four lookup axes, highest priority axis first.

    Order: theme root, resolution bucket, subdirectory, file name. Each
    literal ``{home}`` in a theme root is replaced by home; any other braces
    are kept as-is. Every fragment already carries its own separator, so
    candidates are formed by plain concatenation.
    """
    icons = (config or DEFAULT_CONFIG)["icons"]
    roots = [*icons["theme_roots"], *icons.get("extra_theme_roots", [])]
    return [
        [root.replace("{home}", home) for root in roots],
        list(icons["resolutions"]),
        list(icons["subdirs"]),
        [app_class + ext for ext in icons["extensions"]],
    ]


def candidate_paths(
    app_class: str, home: str, config: dict[str, Any] | None = None
) -> list[str]:
    """Return every candidate icon path in lookup priority order."""
    axes = build_icon_axes(app_class, home, config)
    return ["".join(combo) for combo in cartesian_product(axes)]
