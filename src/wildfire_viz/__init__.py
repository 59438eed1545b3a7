"""Display package for the wildfire simulation: terminal and Pygame window."""

import os

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from .colors import *
from .terminal import TerminalRenderer, render_grid, status_line
from .renderer import WindowClosed, WindowRenderer

__all__ = [
    # Renderers
    'TerminalRenderer',
    'WindowRenderer',
    'WindowClosed',

    # Text helpers
    'render_grid',
    'status_line',

    # Cell state colors
    'EMPTY_COLOR',
    'TREE_COLOR',
    'BURNING_COLOR',
    'BURNED_COLOR',

    # UI colors
    'BLACK',
    'WHITE',

    # Default parameters
    'DEFAULT_CELL_SIZE',
    'DEFAULT_FPS',
]
