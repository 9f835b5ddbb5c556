"""Run the icon lookup CLI from a source checkout."""

from src.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
