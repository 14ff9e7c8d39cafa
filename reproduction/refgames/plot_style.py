"""Matplotlib styling helpers for reference-game diagrams."""

from dataclasses import dataclass, field
from typing import Dict, Tuple

import matplotlib.pyplot as plt


@dataclass
class DiagramStyle:
    """Colour and size bundle for network diagrams.

    Mutable because the colour maps are dicts; ``default_style()`` returns a
    fresh instance each call.
    """

    node_radius: float = 0.11
    node_fontsize: float = 11
    edge_fontsize: float = 12
    edge_width: float = 3.0
    panel_size: Tuple[float, float] = (3.2, 3.0)
    knowledge_colors: Dict[str, str] = field(
        default_factory=lambda: {
            "full": "#1e3a8a",
            "partial": "#60a5fa",
            "none": "#e5e7eb",
        }
    )
    incentive_colors: Dict[str, str] = field(
        default_factory=lambda: {
            "+": "#16a34a",
            "-": "#dc2626",
            "0": "#6b7280",
        }
    )
    incentive_linestyles: Dict[str, str] = field(
        default_factory=lambda: {"+": "-", "-": "-", "0": "--"}
    )


def default_style() -> DiagramStyle:
    """Default diagram palette used for every gallery."""

    return DiagramStyle()


def apply_style() -> None:
    """Apply a lightweight style for consistent plots."""

    plt.rcParams.update({
        "figure.dpi": 150,
        "font.size": 10,
        "axes.titlesize": 10,
        "axes.labelsize": 10,
        "legend.fontsize": 9,
        "xtick.labelsize": 9,
        "ytick.labelsize": 9,
    })
