"""
Order Relations Between Short Games

Games are partially ordered by "Left does at least as well in G as in H":

    G ≤ H  ⟺  no Left option gL of G has H ≤ gL,
              and no Right option hR of H has hR ≤ G

and G ⧏ H ("less or fuzzy") is the complement ¬(H ≤ G). The two relations
are defined by mutual recursion; every recursive call replaces one side by
one of its options, so the combined birthday of the pair strictly
decreases and the recursion terminates on short games.

This module provides:
1. Relation: the four mutually exclusive outcomes of a comparison
2. Outcome: who wins a single game under optimal play
3. SolverConfig: limits and caching shared by the oracle and evaluator
4. ShortGameOracle: memoised, stack-based decision procedure
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import IntEnum
from typing import Dict, List, Optional, Set, Tuple

from .gametree import GameTree, check_short, zero


class Relation(IntEnum):
    """
    Result of comparing G with H. Exactly one holds for short games.

    The usual relation names map onto these tags as follows:
    - LE (G ≤ H) is `is_le`: LT or EQUIV
    - LT (G < H) is LT: G ≤ H and not H ≤ G
    - EQUIV (G ≈ H) is EQUIV: G ≤ H and H ≤ G
    - FUZZY (G ‖ H) is FUZZY: neither G ≤ H nor H ≤ G
    - LF (G ⧏ H) is `is_lf`: LT or FUZZY

    LE and LF overlap, so they are predicates rather than tags. GT is the
    fourth tag, G > H, which completes the partition.
    """
    LT = 0       # G < H
    EQUIV = 1    # G ≈ H
    GT = 2       # G > H
    FUZZY = 3    # G ‖ H: incomparable

    @property
    def is_le(self) -> bool:
        """G ≤ H."""
        return self in (Relation.LT, Relation.EQUIV)

    @property
    def is_ge(self) -> bool:
        """G ≥ H."""
        return self in (Relation.GT, Relation.EQUIV)

    @property
    def is_lf(self) -> bool:
        """G ⧏ H, i.e. not H ≤ G."""
        return self in (Relation.LT, Relation.FUZZY)

    def flip(self) -> Relation:
        """Relation of H to G."""
        if self == Relation.LT:
            return Relation.GT
        if self == Relation.GT:
            return Relation.LT
        return self

    @property
    def symbol(self) -> str:
        return {Relation.LT: "<", Relation.EQUIV: "≈", Relation.GT: ">", Relation.FUZZY: "‖"}[self]


class Outcome(IntEnum):
    """Outcome class of a game under optimal play."""
    PREVIOUS_PLAYER = 0  # G ≈ 0: the player to move loses
    NEXT_PLAYER = 1      # G ‖ 0: the player to move wins
    LEFT_WINS = 2        # G > 0: Left wins moving first or second
    RIGHT_WINS = 3       # G < 0: Right wins moving first or second


@dataclass
class SolverConfig:
    """Configuration for the oracle and the Grundy evaluator."""
    # Positions with more distinct sub-positions are rejected as not short.
    # None disables the check.
    max_positions: Optional[int] = 100_000

    use_cache: bool = True          # Keep memo tables between calls
    check_impartial: bool = True    # Verify impartiality before Grundy evaluation

    @classmethod
    def default(cls) -> SolverConfig:
        return cls()

    @classmethod
    def unbounded(cls) -> SolverConfig:
        """No size cap. Evaluation cost is then the caller's concern."""
        return cls(max_positions=None)

    @classmethod
    def strict(cls, max_positions: int = 1_000) -> SolverConfig:
        """Small cap and no cache reuse, for untrusted input."""
        return cls(max_positions=max_positions, use_cache=False)


class ShortGameOracle:
    """
    Decides ≤, ⧏, <, ≈ and ‖ between short games.

    Results of the base relation ≤ are memoised per pair of sub-positions,
    keyed structurally, so repeated comparisons of shared sub-games are
    answered from the table.
    """

    def __init__(self, config: Optional[SolverConfig] = None):
        self.config = config or SolverConfig()
        self._le_cache: Dict[Tuple[GameTree, GameTree], bool] = {}
        self._short: Set[GameTree] = set()

    def clear_cache(self) -> None:
        self._le_cache.clear()
        self._short.clear()

    @property
    def cache_size(self) -> int:
        return len(self._le_cache)

    def _require_short(self, game: GameTree) -> None:
        if not isinstance(game, GameTree):
            raise TypeError(f"Expected a GameTree, got {type(game).__name__}")
        limit = self.config.max_positions
        if limit is None or game in self._short:
            return
        check_short(game, limit)
        if self.config.use_cache:
            self._short.add(game)

    def _le(self, first: GameTree, second: GameTree) -> bool:
        memo = self._le_cache if self.config.use_cache else {}
        root = (first, second)
        if root in memo:
            return memo[root]

        # Frames are [pair, dependencies, index of the next one to check].
        stack = [[root, _le_dependencies(first, second), 0]]
        while stack:
            frame = stack[-1]
            pair, dependencies, index = frame
            result = True
            pending = None
            # G ≤ H fails as soon as some H ≤ gL or some hR ≤ G holds.
            while index < len(dependencies):
                known = memo.get(dependencies[index])
                if known is None:
                    pending = dependencies[index]
                    break
                if known:
                    result = False
                    break
                index += 1

            if pending is not None:
                frame[2] = index
                stack.append([pending, _le_dependencies(*pending), 0])
                continue

            memo[pair] = result
            stack.pop()

        return memo[root]

    def le(self, first: GameTree, second: GameTree) -> bool:
        """G ≤ H."""
        self._require_short(first)
        self._require_short(second)
        return self._le(first, second)

    def lf(self, first: GameTree, second: GameTree) -> bool:
        """G ⧏ H: not H ≤ G."""
        return not self.le(second, first)

    def lt(self, first: GameTree, second: GameTree) -> bool:
        return self.compare(first, second) == Relation.LT

    def equiv(self, first: GameTree, second: GameTree) -> bool:
        return self.compare(first, second) == Relation.EQUIV

    def fuzzy(self, first: GameTree, second: GameTree) -> bool:
        return self.compare(first, second) == Relation.FUZZY

    def compare(self, first: GameTree, second: GameTree) -> Relation:
        """Decide which of <, ≈, >, ‖ holds between two games."""
        le = self.le(first, second)
        ge = self.le(second, first)
        if le and ge:
            return Relation.EQUIV
        if le:
            return Relation.LT
        if ge:
            return Relation.GT
        return Relation.FUZZY

    def outcome(self, game: GameTree) -> Outcome:
        """Outcome class, from comparing the game with 0."""
        relation = self.compare(game, zero())
        return {
            Relation.EQUIV: Outcome.PREVIOUS_PLAYER,
            Relation.FUZZY: Outcome.NEXT_PLAYER,
            Relation.GT: Outcome.LEFT_WINS,
            Relation.LT: Outcome.RIGHT_WINS,
        }[relation]


def _le_dependencies(g: GameTree, h: GameTree) -> List[Tuple[GameTree, GameTree]]:
    """Pairs whose ≤ must all be false for G ≤ H: (H, gL) and (hR, G)."""
    return [(h, option) for option in g.left] + [(option, g) for option in h.right]


# Convenience functions
def compare(first: GameTree, second: GameTree) -> Relation:
    """Compare two games with a fresh oracle."""
    return ShortGameOracle().compare(first, second)


def outcome(game: GameTree) -> Outcome:
    return ShortGameOracle().outcome(game)
