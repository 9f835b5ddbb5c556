"""Tests for icon lookup axes and candidate generation."""

from pathlib import Path

from src.icon_axes import build_icon_axes, candidate_paths
from src.load_config import load_config


def test_axes_default_order() -> None:
    """Verify the four default axes and their fragment order."""
    axes = build_icon_axes("foo", "/home/u")
    assert axes == [
        [
            "/home/u/.local/share/icons/WhiteSur/",
            "/home/u/.local/share/icons/WhiteSur-dark/",
        ],
        ["512x512/", "128x128/", "64x64/", "96x96/", "72x72/", "48x48/", "36x36/"],
        ["apps/", ""],
        ["foo.png", "foo.svg", "foo.xpm"],
    ]


def test_first_candidate() -> None:
    """Verify the highest-priority candidate path."""
    paths = candidate_paths("foo", "/home/u")
    assert paths[0] == "/home/u/.local/share/icons/WhiteSur/512x512/apps/foo.png"
    assert paths[1] == "/home/u/.local/share/icons/WhiteSur/512x512/apps/foo.svg"
    assert paths[3] == "/home/u/.local/share/icons/WhiteSur/512x512/foo.png"


def test_candidate_count_and_last() -> None:
    """Verify the full candidate list covers every axis combination."""
    paths = candidate_paths("foo", "/home/u")
    assert len(paths) == 2 * 7 * 2 * 3
    assert paths[-1] == "/home/u/.local/share/icons/WhiteSur-dark/36x36/foo.xpm"


def test_light_theme_exhausted_before_dark() -> None:
    """Verify every light-theme candidate precedes the dark theme."""
    paths = candidate_paths("foo", "/home/u")
    dark = [i for i, p in enumerate(paths) if "/WhiteSur-dark/" in p]
    assert dark[0] == 42
    assert dark == list(range(42, 84))


def test_empty_app_class_still_generates() -> None:
    """Verify an empty class is not rejected up front."""
    paths = candidate_paths("", "/home/u")
    assert paths[0] == "/home/u/.local/share/icons/WhiteSur/512x512/apps/.png"


def test_extra_theme_roots_follow_defaults(tmp_path: Path) -> None:
    """Verify configured extra theme roots are tried after the defaults."""
    config_file = tmp_path / "icons.yml"
    config_file.write_text(
        "icons:\n"
        "  extra_theme_roots: ['/usr/share/icons/hicolor/']\n"
        "  resolutions: ['48x48/']\n"
        "  extensions: ['.png']\n"
    )
    config = load_config(str(config_file))

    paths = candidate_paths("foo", "/h", config)
    assert paths == [
        "/h/.local/share/icons/WhiteSur/48x48/apps/foo.png",
        "/h/.local/share/icons/WhiteSur/48x48/foo.png",
        "/h/.local/share/icons/WhiteSur-dark/48x48/apps/foo.png",
        "/h/.local/share/icons/WhiteSur-dark/48x48/foo.png",
        "/usr/share/icons/hicolor/48x48/apps/foo.png",
        "/usr/share/icons/hicolor/48x48/foo.png",
    ]


def test_empty_axis_in_config_yields_no_candidates() -> None:
    """Verify an empty configured axis empties the candidate list."""
    config = load_config(None)
    config["icons"]["extensions"] = []
    assert candidate_paths("foo", "/h", config) == []


def test_axes_rebuilt_per_call() -> None:
    """Verify returned axes are fresh lists, not shared config state."""
    config = load_config(None)
    axes = build_icon_axes("foo", "/h", config)
    axes[1].clear()
    assert build_icon_axes("foo", "/h", config)[1][0] == "512x512/"


def test_theme_root_braces_kept_literally() -> None:
    """Verify only {home} is substituted; other braces stay in the path."""
    config = load_config(None)
    config["icons"]["theme_roots"] = ["{HOME}/.icons/Papirus/", "/opt/icons{v2}/"]
    config["icons"]["extra_theme_roots"] = ["{home}/{home}/x/", "/opt/{0}/{}/"]

    axes = build_icon_axes("foo", "/h", config)
    assert axes[0] == [
        "{HOME}/.icons/Papirus/",
        "/opt/icons{v2}/",
        "/h//h/x/",
        "/opt/{0}/{}/",
    ]
