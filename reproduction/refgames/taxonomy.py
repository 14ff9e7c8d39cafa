"""Hand-authored galleries and commentary for the reference-game memo."""

from dataclasses import dataclass
from typing import List, Tuple

from .model import (
    Condition,
    INCENTIVE_CODES,
    KNOWLEDGE_CODES,
    all_codes,
    enumerate_conditions,
)


@dataclass(frozen=True)
class Gallery:
    """One set of diagrams plus the prose that accompanies it."""

    slug: str
    title: str
    conditions: Tuple[Condition, ...]
    commentary: str
    legend: bool = True


def _gallery(slug: str, title: str, conditions: List[Condition], commentary: str, legend: bool = True) -> Gallery:
    return Gallery(
        slug=slug,
        title=title,
        conditions=tuple(conditions),
        commentary=commentary.strip(),
        legend=legend,
    )


INTRODUCTION = """
A reference game has a set of referents, each carrying a utility value that
players do not observe until a referent is chosen. Players exchange signals
about the referents and one of them eventually picks. Two things vary across
the games below: how much each player knows about the referent values
(full, partial or none) and whether the payoffs of each pair of players move
together (+), against each other (-) or independently (0).

Each diagram is a small network. Node colour encodes a player's knowledge;
edge colour and label encode the incentive sign of the pair.
"""

GALLERIES: List[Gallery] = [
    _gallery(
        "dyad_baselines",
        "Dyads: incentive sign with a fixed knowledge gap",
        enumerate_conditions(2, ["+", "-", "0"], "fp"),
        """
With one informed speaker and one partially informed listener, the sign of
the single edge decides the whole game. Aligned payoffs give the classic
cooperative reference game. Disaligned payoffs make the speaker's signals
suspect, and the listener's partial knowledge is the only check on deception.
Neutral payoffs leave the speaker with nothing to gain or lose by being
informative, so behaviour depends on norms rather than incentives.
""",
    ),
    _gallery(
        "dyad_knowledge",
        "Dyads: aligned incentives across knowledge states",
        enumerate_conditions(2, "+", ["ff", "fp", "fn", "pp", "pn", "nn"]),
        """
Holding incentives aligned, the interesting cases are the asymmetric ones.
When both players know everything there is nothing to communicate; when
neither knows anything there is nothing to say. Partial knowledge on both
sides is the case where pooling information helps most.
""",
    ),
    _gallery(
        "triad_alignment",
        "Triads: patterns of pairwise alignment",
        enumerate_conditions(3, ["+++", "++-", "+--", "---", "++0", "+00"], "fpp"),
        """
With a third player the incentive structure can no longer be summarised by a
single sign. All-aligned triads behave like a larger cooperative game. Two
aligned edges and one disaligned edge produce a player who sits between two
rivals. One aligned pair with both other edges disaligned is a coalition
against an outsider. All-disaligned triads have no stable partnership.
""",
    ),
    _gallery(
        "triad_knowledge",
        "Triads: who holds the information",
        enumerate_conditions(3, "+++", ["fnn", "ffn", "fpn", "ppp", "pnn"]),
        """
In a fully aligned triad the question is how information flows. A single
expert (f, n, n) must broadcast to two novices; two experts may compete to be
heard; a chain of full, partial and no knowledge invites relaying.
""",
    ),
    _gallery(
        "triad_coalition",
        "Triads: coalition against an informed outsider",
        enumerate_conditions(3, "+--", ["nnf", "ppf", "ffn"]),
        """
When A and B are aligned with each other and both disaligned with C, C's
knowledge becomes a resource they must extract without trusting it. If the
coalition itself is informed, C is the one left guessing.
""",
    ),
    _gallery(
        "dyad_overview",
        "Dyads: every incentive and knowledge combination",
        enumerate_conditions(2, all_codes(INCENTIVE_CODES, 1), all_codes(KNOWLEDGE_CODES, 2)),
        """
The full dyad space is 3 incentive signs by 9 knowledge pairs. Most cells are
mirror images of each other; the galleries above pick the representative ones.
""",
        legend=False,
    ),
]

GLOSSARY: List[Tuple[str, str]] = [
    ("Referent", "An option or item with an associated utility value, unknown to players until chosen."),
    ("Incentive sign", "Aligned (+), disaligned (-) or neutral (0) payoff relationship between two players."),
    ("Knowledge state", "Full, partial or none: a player's certainty about referent values."),
    ("Dyad / Triad", "2-player / 3-player game configuration."),
]

OPEN_QUESTIONS: List[str] = [
    "What should discretised knowledge and utility levels model: noise in "
    "observation, coverage of the referent set, or something else?",
    "How do the pairwise incentive signs generalise to 4-player games, where "
    "coalitions can split two against two?",
    "Is a neutral (0) edge a real third category, or a limit of weakly aligned "
    "and weakly disaligned payoffs?",
]


def gallery_by_slug(slug: str) -> Gallery:
    for gallery in GALLERIES:
        if gallery.slug == slug:
            return gallery
    raise KeyError(f"Unknown gallery: {slug}")
