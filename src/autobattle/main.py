"""Run ``python -m autobattle.main`` to watch one battle in the console."""
from __future__ import annotations

from autobattle.presentation.cli.app import main

if __name__ == "__main__":
    main()
