"""Run capital-weather straight from a checkout: `python main.py [doctor] [-v]`.

The package sits in `src/capital_weather`, which is not importable from the
repository root until `pip install -e .` has run. This script adds `src/` to
`sys.path` and hands over to the same entry point as `python -m capital_weather`,
so the Windows UTF-8 console fix for the `°C` lines applies here too.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"

if __name__ == "__main__":
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))

    from capital_weather.__main__ import main

    main()
