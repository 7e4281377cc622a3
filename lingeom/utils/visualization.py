"""
Visualization utilities for lingeom.

Provides plotting helpers for 2-D lines:
- Lines clipped to a bounding box, with optional query points
- Signed distance field of a single line
"""

import warnings
from dataclasses import dataclass
from typing import Any, Optional, Sequence, Tuple, Union

import numpy as np
import torch

from ..core.constants import EPSILON
from ..primitives.line import Line


# =============================================================================
# Configuration and Style
# =============================================================================

@dataclass
class PlotStyle:
    """Global plotting style configuration."""
    figsize: Tuple[int, int] = (8, 8)
    dpi: int = 100
    cmap_diverging: str = 'RdBu'
    line_width: float = 2.0
    point_size: float = 40.0
    point_color: str = '#FF6B6B'
    grid_alpha: float = 0.3
    font_size: int = 12


DEFAULT_STYLE = PlotStyle()


def _ensure_matplotlib():
    """Ensure matplotlib is available."""
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError:
        raise ImportError(
            "matplotlib is required for visualization. "
            "Install with: pip install matplotlib"
        )


def _ensure_numpy(tensor: Union[torch.Tensor, np.ndarray, Sequence]) -> np.ndarray:
    """Convert tensor to numpy array."""
    if isinstance(tensor, torch.Tensor):
        return tensor.detach().cpu().numpy()
    return np.asarray(tensor, dtype=np.float64)


def line_segment_in_box(
    line: Line,
    bounds: Tuple[float, float, float, float],
) -> Optional[np.ndarray]:
    """
    Clip a line to an axis-aligned box.

    Args:
        line: Valid Line
        bounds: (xmin, xmax, ymin, ymax)

    Returns:
        (2, 2) array of segment endpoints, or None if the line misses the box
    """
    a0, a1, a2 = line.get_coefficients()
    xmin, xmax, ymin, ymax = bounds

    candidates = []
    # Intersections with the vertical box edges
    if abs(a2) > EPSILON:
        for x in (xmin, xmax):
            y = -(a1 * x + a0) / a2
            if ymin - EPSILON <= y <= ymax + EPSILON:
                candidates.append((x, y))
    # Intersections with the horizontal box edges
    if abs(a1) > EPSILON:
        for y in (ymin, ymax):
            x = -(a2 * y + a0) / a1
            if xmin - EPSILON <= x <= xmax + EPSILON:
                candidates.append((x, y))

    if len(candidates) < 2:
        return None

    # Corners can be hit twice; keep the two farthest-apart points
    pts = np.array(candidates)
    diffs = pts[:, None, :] - pts[None, :, :]
    dists = np.linalg.norm(diffs, axis=-1)
    i, j = np.unravel_index(np.argmax(dists), dists.shape)
    return np.stack([pts[i], pts[j]])


# =============================================================================
# Line Plots
# =============================================================================

def plot_lines(
    lines: Sequence[Line],
    points: Optional[Union[torch.Tensor, np.ndarray, Sequence]] = None,
    bounds: Tuple[float, float, float, float] = (-5.0, 5.0, -5.0, 5.0),
    ax: Any = None,
    title: str = 'Lines',
    style: PlotStyle = None,
):
    """
    Plot 2-D lines clipped to a bounding box.

    Invalid or disposed lines are skipped with a warning.

    Args:
        lines: Lines to draw
        points: Optional (N, 2) query points
        bounds: (xmin, xmax, ymin, ymax)
        ax: Existing matplotlib axis (creates new figure if None)
        title: Plot title
        style: PlotStyle configuration

    Returns:
        Tuple of (figure, axis) or axis if ax was provided
    """
    plt = _ensure_matplotlib()
    style = style or DEFAULT_STYLE

    created_fig = ax is None
    if created_fig:
        fig, ax = plt.subplots(1, 1, figsize=style.figsize, dpi=style.dpi)
    else:
        fig = ax.get_figure()

    for line in lines:
        if line.disposed:
            warnings.warn(f"Skipping disposed Line #{line.id}")
            continue
        if not line.is_valid():
            warnings.warn(f"Skipping invalid Line #{line.id}")
            continue

        segment = line_segment_in_box(line, bounds)
        if segment is None:
            continue
        ax.plot(
            segment[:, 0], segment[:, 1],
            linewidth=style.line_width,
            label=f"#{line.id}: {line.equation()}",
        )

    if points is not None:
        points = _ensure_numpy(points).reshape(-1, 2)
        ax.scatter(points[:, 0], points[:, 1], s=style.point_size, c=style.point_color, zorder=3)

    ax.set_xlim(bounds[0], bounds[1])
    ax.set_ylim(bounds[2], bounds[3])
    ax.set_xlabel('X', fontsize=style.font_size)
    ax.set_ylabel('Y', fontsize=style.font_size)
    ax.set_title(title, fontsize=style.font_size + 2)
    ax.grid(True, alpha=style.grid_alpha)
    ax.set_aspect('equal')
    if ax.get_legend_handles_labels()[0]:
        ax.legend(fontsize=style.font_size - 2)

    if created_fig:
        return fig, ax
    return ax


def plot_distance_field(
    line: Line,
    resolution: int = 128,
    bounds: Tuple[float, float] = (-5.0, 5.0),
    signed: bool = True,
    cmap: str = None,
    ax: Any = None,
    title: str = None,
    style: PlotStyle = None,
):
    """
    Plot the (signed) distance to a line over a square grid.

    Args:
        line: Valid Line
        resolution: Grid resolution per axis
        bounds: (min, max) bounds for both axes
        signed: Plot signed distance instead of unsigned
        cmap: Colormap name (defaults to style.cmap_diverging)
        ax: Existing matplotlib axis (creates new figure if None)
        title: Plot title
        style: PlotStyle configuration

    Returns:
        Tuple of (figure, axis) or axis if ax was provided

    Raises:
        InvalidStateError: if the line is invalid
    """
    plt = _ensure_matplotlib()
    style = style or DEFAULT_STYLE
    cmap = cmap or style.cmap_diverging

    coords = torch.linspace(bounds[0], bounds[1], resolution, dtype=torch.float64)
    x, y = torch.meshgrid(coords, coords, indexing='ij')
    grid = torch.stack([x, y], dim=-1)

    distances = line.distances_to_points(grid)
    if signed:
        distances = torch.copysign(distances, line.evaluate_points(grid))
    field = distances.numpy()

    created_fig = ax is None
    if created_fig:
        fig, ax = plt.subplots(1, 1, figsize=style.figsize, dpi=style.dpi)
    else:
        fig = ax.get_figure()

    vmax = max(abs(field.min()), abs(field.max()), 0.01)
    im = ax.imshow(
        field.T,
        origin='lower',
        extent=[bounds[0], bounds[1], bounds[0], bounds[1]],
        cmap=cmap,
        vmin=-vmax if signed else 0.0,
        vmax=vmax,
    )

    ax.set_xlabel('X', fontsize=style.font_size)
    ax.set_ylabel('Y', fontsize=style.font_size)
    ax.set_title(title or f'Distance to Line #{line.id}', fontsize=style.font_size + 2)

    plt.colorbar(im, ax=ax, label='Signed distance' if signed else 'Distance')
    ax.set_aspect('equal')

    if created_fig:
        return fig, ax
    return ax
