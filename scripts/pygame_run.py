#!/usr/bin/env python3
"""Pygame visualization launcher for the wildfire simulation.

Accepts the same options as ``run_simulation.py`` and shows the grid in a
Pygame window instead of the terminal.

Usage:
    python scripts/pygame_run.py [-bN] [-cN] [-dN] [-nN] [-pN] [-sN] [-L[X]]
"""

import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from wildfire.cli import main


if __name__ == "__main__":
    sys.exit(main([*sys.argv[1:], "--gui"]))
