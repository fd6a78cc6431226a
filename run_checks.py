#!/usr/bin/env python3
"""Run formatters, linters and the test suite, then print a summary.

Steps: Black check, isort check, Ruff, Pylint, pytest.
"""

from pathlib import Path
import subprocess
import sys

COMMANDS: list[tuple[list[str], str]] = [
    (["python", "-m", "black", ".", "--check"], "Black"),
    (["python", "-m", "isort", ".", "--check-only"], "isort"),
    (["python", "-m", "ruff", "check", "."], "Ruff"),
    (["python", "-m", "pylint", "app", "core", "infrastructure"], "Pylint"),
    (["python", "-m", "pytest", "-q"], "pytest"),
]


def run_command(cmd: list[str], description: str) -> tuple[bool, str]:
    """Run `cmd` from the project root; return (success, combined output)."""
    print(f"\n{'=' * 60}\n{description}: {' '.join(cmd)}\n{'=' * 60}")
    try:
        result = subprocess.run(
            cmd, capture_output=True, text=True, check=False, cwd=Path(__file__).parent
        )
    except OSError as e:
        print(f"could not run: {e}")
        return False, str(e)

    output = result.stdout + result.stderr
    print("ok" if result.returncode == 0 else "FAILED")
    if output.strip():
        print(output)
    return result.returncode == 0, output


def main() -> None:
    results = [(description, *run_command(cmd, description)) for cmd, description in COMMANDS]

    print(f"\n{'=' * 60}\nSummary\n{'=' * 60}")
    for description, success, _ in results:
        print(f"{description}: {'ok' if success else 'FAILED'}")

    sys.exit(0 if all(success for _, success, _ in results) else 1)


if __name__ == "__main__":
    main()
