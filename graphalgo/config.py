"""
Configuration constants for the GraphAlgo project.

All paths, pacing settings, and palette colours are defined here.
Overrides are read from environment variables (a local .env is honoured).
"""

import os
from pathlib import Path

from dotenv import load_dotenv

# Project root is parent of graphalgo/
PROJECT_ROOT = Path(__file__).parent.parent

load_dotenv(PROJECT_ROOT / ".env")

# =============================================================================
# Path Configuration
# =============================================================================

# Sample graphs shipped with the project
DATA_DIR = PROJECT_ROOT / "data"
SAMPLE_GRAPH_PATH = DATA_DIR / "sample_graph.json"

# Where the CLI writes HTML animations by default
RESULTS_DIR = PROJECT_ROOT / "results"

# =============================================================================
# Search Pacing Configuration
# =============================================================================


def env_milliseconds(name: str, default: float) -> float:
    """Read a non-negative millisecond setting from the environment."""
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number of milliseconds, got {raw!r}") from None
    if not value >= 0 or value == float("inf"):
        raise ValueError(f"{name} must be a finite number >= 0, got {raw!r}")
    return value


# Default delay between visualization frames (milliseconds)
DEFAULT_FRAME_DELAY_MS = env_milliseconds("FRAME_DELAY_MS", 500)

# Speed multipliers offered by the speed up / slow down controls
SPEED_OPTIONS = (0.35, 0.5, 0.75, 1, 1.5, 2, 3.5, 5, 7.5, 10)

# Strategy used when none is given
DEFAULT_STRATEGY = "bfs"

# =============================================================================
# Palette Configuration
# =============================================================================

# Node fill colour per node type (DEFAULT, SOURCE, TARGET)
NODE_TYPE_COLORS = (0x777777, 0x3333FF, 0xFFFF33)

DEFAULT_EDGE_COLOR = 0x000000
NODE_STROKE_COLOR = 0x000000

# Search visualization colours
COLOR_CURRENT = 0x00FF00
COLOR_CURRENT_ARROW = 0x00AAAA
COLOR_OPEN = 0x00FFFF
COLOR_CLOSED = 0xAAAAFF
COLOR_VISITED_ARROW = 0x0000FF
COLOR_SOLUTION_ARROW = 0xFF0000
COLOR_SOLUTION = 0xFFAAAA

# =============================================================================
# Rendering Configuration
# =============================================================================

NODE_RADIUS = 15
ARROW_SPACING = 4
FIGURE_HEIGHT = 600

# =============================================================================
# Logging Configuration
# =============================================================================

# Log level (DEBUG, INFO, WARNING, ERROR)
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"


def to_hex(color: int) -> str:
    """Convert a 0xRRGGBB integer into a CSS hex string."""
    return f"#{color:06x}"
