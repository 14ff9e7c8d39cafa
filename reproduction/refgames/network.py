"""Fixed-topology node/edge tables for dyad and triad diagrams."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from .model import (
    Condition,
    INCENTIVE_SIGNS,
    KNOWLEDGE_STATES,
    SUPPORTED_PLAYER_COUNTS,
    pair_count,
    player_pairs,
    players,
    validate_condition,
)

# Literal layouts; no layout algorithm is involved.
LAYOUTS: Dict[int, Dict[str, Tuple[float, float]]] = {
    2: {"A": (0.0, 0.5), "B": (1.0, 0.5)},
    3: {"A": (0.0, 0.0), "B": (1.0, 0.0), "C": (0.5, 0.866)},
}


@dataclass(frozen=True)
class LayoutRow:
    """A node (zero-length segment) or an edge between two node positions."""

    x: float
    y: float
    xend: float
    yend: float
    name: str
    knowledge: Optional[str] = None
    incentive: Optional[str] = None

    @property
    def is_edge(self) -> bool:
        return self.incentive is not None


@dataclass
class NetworkTable:
    n_players: int
    rows: List[LayoutRow] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.rows)

    @property
    def nodes(self) -> List[LayoutRow]:
        return [row for row in self.rows if not row.is_edge]

    @property
    def edges(self) -> List[LayoutRow]:
        return [row for row in self.rows if row.is_edge]

    @property
    def edge_count(self) -> int:
        return len(self.edges)

    def coordinates(self) -> np.ndarray:
        return np.array([(row.x, row.y) for row in self.nodes], dtype=float)

    def midpoints(self) -> np.ndarray:
        starts = np.array([(row.x, row.y) for row in self.edges], dtype=float)
        ends = np.array([(row.xend, row.yend) for row in self.edges], dtype=float)
        return (starts + ends) / 2.0


def make_network(
    n: int,
    knowledge: Sequence[str],
    incentives: Sequence[str],
) -> NetworkTable:
    """Build the node/edge table for a dyad (n=2) or triad (n=3).

    ``knowledge`` holds one label per player and ``incentives`` one label per
    player pair, in the order given by :func:`player_pairs`. Node rows come
    first, then edge rows.
    """

    if n not in SUPPORTED_PLAYER_COUNTS:
        raise ValueError(f"Unsupported player count: {n} (expected one of {SUPPORTED_PLAYER_COUNTS})")
    knowledge = list(knowledge)
    incentives = list(incentives)
    if len(knowledge) != n:
        raise ValueError(f"Expected {n} knowledge labels, got {len(knowledge)}")
    if len(incentives) != pair_count(n):
        raise ValueError(f"Expected {pair_count(n)} incentive labels, got {len(incentives)}")
    for label in knowledge:
        if label not in KNOWLEDGE_STATES:
            raise ValueError(f"Unknown knowledge label {label!r} (expected one of {KNOWLEDGE_STATES})")
    for label in incentives:
        if label not in INCENTIVE_SIGNS:
            raise ValueError(f"Unknown incentive label {label!r} (expected one of {INCENTIVE_SIGNS})")

    layout = LAYOUTS[n]
    table = NetworkTable(n_players=n)
    for name, label in zip(players(n), knowledge):
        x, y = layout[name]
        table.rows.append(LayoutRow(x=x, y=y, xend=x, yend=y, name=name, knowledge=label))
    for (a, b), label in zip(player_pairs(n), incentives):
        x, y = layout[a]
        xend, yend = layout[b]
        table.rows.append(
            LayoutRow(x=x, y=y, xend=xend, yend=yend, name=f"{a}-{b}", incentive=label)
        )
    return table


def network_for(condition: Condition) -> NetworkTable:
    validate_condition(condition)
    return make_network(
        condition.n_players,
        condition.knowledge_labels,
        condition.incentive_labels,
    )
