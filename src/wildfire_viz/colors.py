"""Color definitions and constants for the wildfire window display.

This module contains the RGB color tuples and default configuration values
used by the Pygame renderer.
"""

from typing import Tuple

# Type alias for RGB color tuples
Color = Tuple[int, int, int]

# ============================================================================
# CELL STATE COLORS
# ============================================================================

EMPTY_COLOR: Color = (201, 181, 140)                # sand (bare ground)
TREE_COLOR: Color = (2, 168, 2)                     # green
BURNING_COLOR: Color = (255, 0, 0)                  # red (on fire)
BURNED_COLOR: Color = (0, 0, 0)                     # black (burned out)

# ============================================================================
# UI COLORS
# ============================================================================

BLACK: Color = (0, 0, 0)                            # Grid lines
WHITE: Color = (255, 255, 255)                      # Background

# ============================================================================
# DEFAULT WINDOW PARAMETERS
# ============================================================================

DEFAULT_CELL_SIZE: int = 16                         # Cell size in pixels
DEFAULT_FPS: int = 5                                # Default frames per second
