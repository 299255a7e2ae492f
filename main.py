"""Run the CLI straight from a checkout: `python -m main split`.

Without `pip install -e .` the `src/` directory is not importable, so it is
put at the front of `sys.path` before the CLI is loaded.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def main() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path[:0] = [str(SRC_DIR)]

    from cli.main import app  # noqa: PLC0415

    app(prog_name="split-it")


if __name__ == "__main__":
    main()
