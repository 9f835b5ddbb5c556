"""Command-line interface for resolving application icons."""

import argparse
import logging
import sys

import yaml

from src.find_icon import find_icon
from src.home_dir import home_dir
from src.icon_axes import candidate_paths
from src.load_config import load_config


def main(argv: list[str] | None = None) -> int:
    """Resolve an icon and print its path.

    Exit status is 0 when an icon was found, 1 when none exists and 2 when the
    configuration could not be loaded.
    """
    parser = argparse.ArgumentParser(
        description="Find the icon file for a window manager application class."
    )
    parser.add_argument("app_class", help="Application class, e.g. 'firefox'")
    parser.add_argument(
        "--home",
        help="Home directory used to build theme roots (default: $HOME)",
    )
    parser.add_argument(
        "--config",
        help="Path to a YAML file overriding the lookup axes",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Print every candidate path in priority order without probing",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_config(args.config)
    except (OSError, ValueError, yaml.YAMLError) as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 2

    home = args.home if args.home is not None else home_dir()

    if args.list:
        for path in candidate_paths(args.app_class, home, config):
            print(path)
        return 0

    icon = find_icon(args.app_class, home, config)
    if not icon:
        return 1
    print(icon)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
