"""`python -m capital_weather` entry point."""

from __future__ import annotations

import sys

# Windows consoles default to cp1252, which cannot encode "°".
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from capital_weather.cli.main import run


def main() -> None:
    run()


if __name__ == "__main__":
    main()
