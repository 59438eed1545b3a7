#!/usr/bin/env python3
"""Main script to run the wildfire simulation in the terminal.

Usage:
    python scripts/run_simulation.py [-bN] [-cN] [-dN] [-nN] [-pN] [-sN] [-L[X]] [-H]
"""

import sys
from pathlib import Path

# Add the src directory to the Python path
project_root = Path(__file__).parent.parent
src_path = project_root / "src"
sys.path.insert(0, str(src_path))

from wildfire.cli import main


if __name__ == "__main__":
    sys.exit(main())
