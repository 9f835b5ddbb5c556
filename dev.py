"""Development script to run checks (formatting, linting, tests) and a sample lookup."""

import argparse
import shlex
import subprocess
import sys


def run_command(command: list[str], step_name: str) -> None:
    """Run one check program without a shell; exit with its status on failure."""
    print(f"\n--- {step_name} ---")
    print(f"$ {shlex.join(command)}")
    result = subprocess.run(command, check=False)
    if result.returncode != 0:
        print(f"\n❌ {step_name} failed (exit {result.returncode})")
        sys.exit(result.returncode)


def main() -> None:
    """Run the development checks and optionally a sample icon lookup."""
    parser = argparse.ArgumentParser(
        description="Run development checks and a sample lookup."
    )
    parser.add_argument(
        "--ci", action="store_true", help="Run checks and tests only, skip the lookup"
    )
    args = parser.parse_args()

    if not args.ci:
        run_command(["uv", "run", "ruff", "format"], "Ruff Formatting")
        run_command(["uv", "run", "ruff", "check", "--fix"], "Ruff Linting & Fixes")

    run_command(["uv", "run", "ruff", "format", "--check"], "Ruff Format Check")
    run_command(["uv", "run", "ruff", "check"], "Ruff Lint Check")
    run_command(["uv", "run", "pytest"], "Tests")

    if args.ci:
        print("\n✅ CI checks passed successfully. Skipping sample lookup.")
        return

    # main.py exits 1 when no icon is installed, which is not a failure here
    subprocess.run(["uv", "run", "python", "main.py", "--list", "firefox"], check=False)

    print("\n✅ All development checks passed successfully.")


if __name__ == "__main__":
    main()
