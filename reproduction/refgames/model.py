"""Condition codes and label tables for the reference-game taxonomy."""

from dataclasses import dataclass
from itertools import combinations, product
from typing import Iterable, List, Sequence, Tuple, Union

PLAYERS: Tuple[str, ...] = ("A", "B", "C")
SUPPORTED_PLAYER_COUNTS: Tuple[int, ...] = (2, 3)

KNOWLEDGE_CODES = "fpn"
INCENTIVE_CODES = "+-0"

KNOWLEDGE_LABELS = {"f": "full", "p": "partial"}
INCENTIVE_LABELS = {"+": "+", "-": "-"}

KNOWLEDGE_FALLBACK = "none"
INCENTIVE_FALLBACK = "0"

KNOWLEDGE_STATES: Tuple[str, ...] = ("full", "partial", "none")
INCENTIVE_SIGNS: Tuple[str, ...] = ("+", "-", "0")

INCENTIVE_WORDS = {"+": "aligned", "-": "disaligned", "0": "neutral"}
INCENTIVE_KEYS = {"+": "p", "-": "m", "0": "0"}


def expand_knowledge(codes: str) -> List[str]:
    """Map knowledge codes to labels: f -> full, p -> partial, else none."""

    return [KNOWLEDGE_LABELS.get(code, KNOWLEDGE_FALLBACK) for code in codes]


def expand_incentives(codes: str) -> List[str]:
    """Map incentive codes to labels: + -> +, - -> -, else 0."""

    return [INCENTIVE_LABELS.get(code, INCENTIVE_FALLBACK) for code in codes]


def players(n_players: int) -> Tuple[str, ...]:
    return PLAYERS[:n_players]


def player_pairs(n_players: int) -> List[Tuple[str, str]]:
    """Unordered player pairs in edge order (AB, AC, BC for a triad)."""

    return list(combinations(players(n_players), 2))


def pair_count(n_players: int) -> int:
    return n_players * (n_players - 1) // 2


@dataclass(frozen=True)
class Condition:
    """One game configuration: player count plus incentive and knowledge codes."""

    n_players: int
    incentives: str
    knowledge: str

    @property
    def knowledge_labels(self) -> List[str]:
        return expand_knowledge(self.knowledge)

    @property
    def incentive_labels(self) -> List[str]:
        return expand_incentives(self.incentives)

    @property
    def key(self) -> str:
        """Filename-safe identifier built from the expanded labels, e.g. ``n3_pp0_fpp``."""

        incentive_key = "".join(INCENTIVE_KEYS[label] for label in self.incentive_labels)
        knowledge_key = "".join(label[0] for label in self.knowledge_labels)
        return f"n{self.n_players}_{incentive_key}_{knowledge_key}"

    def describe(self) -> str:
        """Plain-language summary of pair incentives and player knowledge."""

        pair_parts = [
            f"{a}-{b} {INCENTIVE_WORDS[label]}"
            for (a, b), label in zip(player_pairs(self.n_players), self.incentive_labels)
        ]
        player_parts = [
            f"{name} {label}"
            for name, label in zip(players(self.n_players), self.knowledge_labels)
        ]
        return "; ".join([", ".join(pair_parts), ", ".join(player_parts)])


def validate_condition(condition: Condition) -> None:
    """Raise ValueError when codes do not match the player count."""

    n = condition.n_players
    if n not in SUPPORTED_PLAYER_COUNTS:
        raise ValueError(f"Unsupported player count: {n} (expected one of {SUPPORTED_PLAYER_COUNTS})")
    if len(condition.knowledge) != n:
        raise ValueError(
            f"Knowledge codes '{condition.knowledge}' need {n} characters, got {len(condition.knowledge)}"
        )
    if len(condition.incentives) != pair_count(n):
        raise ValueError(
            f"Incentive codes '{condition.incentives}' need {pair_count(n)} characters, "
            f"got {len(condition.incentives)}"
        )


def _as_list(value: Union[int, str, Iterable]) -> list:
    if isinstance(value, (int, str)):
        return [value]
    return list(value)


def enumerate_conditions(
    n_players: Union[int, Sequence[int]],
    incentive_codes: Union[str, Sequence[str]],
    knowledge_codes: Union[str, Sequence[str]],
) -> List[Condition]:
    """Cross product of player counts, incentive strings and knowledge strings.

    Order follows the arguments: player count outermost, knowledge innermost.
    Unsupported player counts and combinations whose code lengths do not fit
    the player count are skipped, so dyad and triad strings can be mixed in
    one call.
    """

    conditions: List[Condition] = []
    for n, incentives, knowledge in product(
        _as_list(n_players), _as_list(incentive_codes), _as_list(knowledge_codes)
    ):
        if n not in SUPPORTED_PLAYER_COUNTS:
            continue
        if len(incentives) != pair_count(n) or len(knowledge) != n:
            continue
        conditions.append(Condition(n_players=n, incentives=incentives, knowledge=knowledge))
    return conditions


def all_codes(alphabet: str, length: int) -> List[str]:
    """Every code string of ``length`` over ``alphabet``."""

    return ["".join(chars) for chars in product(alphabet, repeat=length)]
