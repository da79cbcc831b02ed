"""
matplotlib renderer for a Scene.

Uses the non-interactive Agg backend so images can be produced without a
display. Primitives are drawn in scene order (connectors beneath boxes) on a
blank frame: no axes, no legend. Requires the "render" extra.
"""

from pathlib import Path
from typing import Optional, Union

# Use non-interactive backend before importing pyplot
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.patches import Polygon

from .shared.types import ConnectorLine, RectNode, Scene

DEFAULT_DPI = 150
MARGIN = 0.25


def draw_scene(scene: Scene, ax=None):
    """Draw scene onto ax (a new figure if None). Returns the Axes."""
    if ax is None:
        _, ax = plt.subplots()

    for z, prim in enumerate(scene.primitives):
        if isinstance(prim, ConnectorLine):
            ax.plot(
                [prim.start.x, prim.end.x],
                [prim.start.y, prim.end.y],
                color=prim.color,
                linewidth=1,
                zorder=z,
            )
        elif isinstance(prim, RectNode):
            ax.add_patch(Polygon(
                [(p.x, p.y) for p in prim.corners],
                closed=True,
                facecolor=prim.fill_color,
                edgecolor="none",
                alpha=prim.opacity,
                zorder=z,
            ))
            ax.text(
                prim.label_anchor.x,
                prim.label_anchor.y,
                prim.label,
                color=prim.label_color,
                fontsize=prim.label_size,
                ha="center",
                va="center",
                zorder=z,
            )

    min_x, min_y, max_x, max_y = scene.bounds()
    ax.set_xlim(min_x - MARGIN, max_x + MARGIN)
    ax.set_ylim(min_y - MARGIN, max_y + MARGIN)
    ax.set_aspect("equal")
    ax.set_axis_off()
    return ax


def save_scene(scene: Scene, path: Union[str, Path], dpi: Optional[int] = None) -> Path:
    """Render scene to an image file (format from the suffix)."""
    path = Path(path)
    fig, ax = plt.subplots()
    try:
        draw_scene(scene, ax)
        fig.savefig(path, dpi=dpi or DEFAULT_DPI, bbox_inches="tight")
    finally:
        plt.close(fig)
    return path
