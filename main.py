"""Run gh-user-status from a checkout: `python main.py get octocat`.

Puts `src/` on `sys.path` and then goes through `cli.main.run`, the same
function the installed `gh-user-status` console script calls.
"""

from __future__ import annotations

import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def _use_checkout_sources() -> None:
    if str(SRC_DIR) not in sys.path:
        sys.path.insert(0, str(SRC_DIR))


def main(argv: list[str] | None = None) -> None:
    _use_checkout_sources()

    from cli.main import run  # noqa: PLC0415

    run(argv)


if __name__ == "__main__":
    main()
