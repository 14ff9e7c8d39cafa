"""Network diagram rendering for reference-game conditions."""

import math
from pathlib import Path
from typing import List, Optional, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.lines import Line2D
from matplotlib.patches import Circle, Patch

from .model import Condition, INCENTIVE_WORDS
from .network import NetworkTable, network_for
from .plot_style import DiagramStyle, apply_style, default_style

X_LIMITS = (-0.25, 1.25)
Y_LIMITS = (-0.25, 1.1)


def _save(fig: plt.Figure, path: str) -> Path:
    """Write ``path`` as PDF plus a PNG sibling; return the PNG path."""

    pdf_path = Path(path).with_suffix(".pdf")
    png_path = pdf_path.with_suffix(".png")
    try:
        pdf_path.parent.mkdir(parents=True, exist_ok=True)
        fig.savefig(pdf_path, dpi=300, bbox_inches="tight", format="pdf")
        fig.savefig(png_path, dpi=300, bbox_inches="tight", format="png")
    finally:
        plt.close(fig)
    print(f"✓ Generated: {pdf_path}")
    return png_path


def legend_handles(style: Optional[DiagramStyle] = None) -> List[object]:
    """Knowledge patches followed by incentive line handles."""

    style = style or default_style()
    handles: List[object] = [
        Patch(facecolor=color, edgecolor="black", label=f"knowledge: {label}")
        for label, color in style.knowledge_colors.items()
    ]
    handles.extend(
        Line2D(
            [0],
            [0],
            color=style.incentive_colors[label],
            linestyle=style.incentive_linestyles[label],
            linewidth=style.edge_width,
            label=f"{label} ({INCENTIVE_WORDS[label]})",
        )
        for label in style.incentive_colors
    )
    return handles


def plot_network(
    ax: plt.Axes,
    table: NetworkTable,
    style: Optional[DiagramStyle] = None,
    legend: bool = True,
    title: Optional[str] = None,
) -> None:
    """Draw one node/edge table onto ``ax``."""

    style = style or default_style()

    for row, (mx, my) in zip(table.edges, table.midpoints()):
        ax.plot(
            [row.x, row.xend],
            [row.y, row.yend],
            color=style.incentive_colors[row.incentive],
            linestyle=style.incentive_linestyles[row.incentive],
            linewidth=style.edge_width,
            zorder=1,
        )
        ax.text(
            mx,
            my,
            row.incentive,
            ha="center",
            va="center",
            fontsize=style.edge_fontsize,
            fontweight="bold",
            color=style.incentive_colors[row.incentive],
            bbox=dict(boxstyle="round,pad=0.2", facecolor="white", edgecolor="none", alpha=0.9),
            zorder=2,
        )

    for row in table.nodes:
        ax.add_patch(
            Circle(
                (row.x, row.y),
                style.node_radius,
                facecolor=style.knowledge_colors[row.knowledge],
                edgecolor="black",
                linewidth=1.2,
                zorder=3,
            )
        )
        ax.text(
            row.x,
            row.y,
            row.name,
            ha="center",
            va="center",
            fontsize=style.node_fontsize,
            fontweight="bold",
            color="white" if row.knowledge == "full" else "black",
            zorder=4,
        )

    ax.set_xlim(X_LIMITS)
    ax.set_ylim(Y_LIMITS)
    ax.set_aspect("equal")
    ax.axis("off")
    if title:
        ax.set_title(title)
    if legend:
        ax.legend(
            handles=legend_handles(style),
            loc="upper left",
            bbox_to_anchor=(1.0, 1.0),
            fontsize=8,
            frameon=False,
        )


def _panel_title(condition: Condition) -> str:
    return f"{condition.incentives} / {condition.knowledge}\n{condition.describe()}"


def figure_condition(path: str, condition: Condition, legend: bool = True) -> Path:
    """Single diagram for one condition."""

    apply_style()
    style = default_style()
    table = network_for(condition)
    width, height = style.panel_size
    fig, ax = plt.subplots(figsize=(width * (1.8 if legend else 1.0), height))
    plot_network(ax, table, style=style, legend=legend, title=_panel_title(condition))
    return _save(fig, path)


def figure_gallery(
    path: str,
    conditions: Sequence[Condition],
    title: Optional[str] = None,
    ncols: int = 3,
    legend: bool = True,
) -> Path:
    """Grid of diagrams sharing one figure-level legend, saved to ``path``."""

    fig = build_gallery(conditions, title=title, ncols=ncols, legend=legend)
    return _save(fig, path)


def build_gallery(
    conditions: Sequence[Condition],
    title: Optional[str] = None,
    ncols: int = 3,
    legend: bool = True,
) -> plt.Figure:
    if not conditions:
        raise ValueError("figure_gallery needs at least one condition")

    apply_style()
    style = default_style()
    ncols = max(1, min(ncols, len(conditions)))
    nrows = math.ceil(len(conditions) / ncols)
    width, height = style.panel_size
    fig, axes = plt.subplots(nrows, ncols, figsize=(width * ncols, height * nrows), squeeze=False)
    flat_axes = np.ravel(axes)

    for ax, condition in zip(flat_axes, conditions):
        plot_network(ax, network_for(condition), style=style, legend=False, title=_panel_title(condition))
    for ax in flat_axes[len(conditions):]:
        ax.set_visible(False)

    if title:
        fig.suptitle(title, fontsize=13, fontweight="bold")
    if legend:
        fig.legend(
            handles=legend_handles(style),
            loc="lower center",
            bbox_to_anchor=(0.5, -0.04),
            ncol=6,
            fontsize=8,
            frameon=True,
        )
    fig.tight_layout()
    return fig
