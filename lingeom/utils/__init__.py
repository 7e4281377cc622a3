"""
Utility functions for lingeom.

Includes configuration management, logging setup, and plotting helpers.
"""

from .config import Config, load_config, save_config
from .logging_config import setup_logging
from .visualization import (
    PlotStyle,
    line_segment_in_box,
    plot_lines,
    plot_distance_field,
)

__all__ = [
    # Config
    "Config",
    "load_config",
    "save_config",
    # Logging
    "setup_logging",
    # Visualization
    "PlotStyle",
    "line_segment_in_box",
    "plot_lines",
    "plot_distance_field",
]
