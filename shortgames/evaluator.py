"""
Grundy Values of Impartial Games

For an impartial short game G,

    grundy(G) = mex{ grundy(g) : g a Left option of G }

and, by the Sprague-Grundy theorem, G is equivalent to the nim heap of
that size. For sums the values combine by nim-sum:

    grundy(G + H) = grundy(G) XOR grundy(H)

This module provides:
1. GrundyEvaluator: memoised, stack-based Grundy computation with shortness
   and impartiality checks
2. Strategy helpers: winning moves and moves to a chosen Grundy value
3. Sprague-Grundy verification against the order oracle
"""

from __future__ import annotations
from typing import Dict, List, Optional, Set

from .errors import NotImpartialError
from .gametree import GameTree, check_short, first_partizan_position
from .mex import mex
from .nim import NimHeap, nim_heap, nim_sum
from .oracle import ShortGameOracle, SolverConfig


class GrundyEvaluator:
    """
    Computes Grundy values of impartial short games.

    Nim heaps answer in constant time; every other position is evaluated
    bottom-up with an explicit work stack, so deep positions do not hit the
    interpreter recursion limit.
    """

    def __init__(
        self,
        config: Optional[SolverConfig] = None,
        oracle: Optional[ShortGameOracle] = None,
    ):
        self.config = config or SolverConfig()
        self.oracle = oracle or ShortGameOracle(self.config)
        self._values: Dict[GameTree, int] = {}
        self._validated: Set[GameTree] = set()

    def clear_cache(self) -> None:
        self._values.clear()
        self._validated.clear()

    def _validate(self, game: GameTree) -> None:
        if not isinstance(game, GameTree):
            raise TypeError(f"Expected a GameTree, got {type(game).__name__}")
        if game in self._validated:
            return

        if self.config.max_positions is not None:
            check_short(game, self.config.max_positions)
        if self.config.check_impartial:
            partizan = first_partizan_position(game)
            if partizan is not None:
                raise NotImpartialError(partizan)

        if self.config.use_cache:
            self._validated.add(game)

    def _grundy(self, game: GameTree) -> int:
        memo = self._values if self.config.use_cache else {}
        stack = [game]

        while stack:
            position = stack[-1]
            if position in memo:
                stack.pop()
                continue
            if isinstance(position, NimHeap):
                memo[position] = position.heap
                stack.pop()
                continue

            missing = [option for option in position.left if option not in memo]
            if missing:
                stack.extend(missing)
                continue

            memo[position] = mex(memo[option] for option in position.left)
            stack.pop()

        return memo[game]

    def grundy_value(self, game: GameTree) -> int:
        """Grundy value of an impartial short game."""
        if isinstance(game, NimHeap):
            return game.heap
        self._validate(game)
        return self._grundy(game)

    def equivalent_nim_heap(self, game: GameTree) -> int:
        """Size of the nim heap equivalent to `game`."""
        return self.grundy_value(game)

    def nim_equivalent(self, game: GameTree) -> NimHeap:
        return nim_heap(self.grundy_value(game))

    @staticmethod
    def grundy_sum(n: int, m: int) -> int:
        """Grundy value of NimHeap(n) + NimHeap(m), i.e. n XOR m."""
        return nim_sum(n, m)

    def grundy_of_sum(self, first: GameTree, second: GameTree) -> int:
        """Grundy value of first + second without building the sum."""
        return self.grundy_value(first) ^ self.grundy_value(second)

    def winning_moves(self, game: GameTree) -> List[GameTree]:
        """Options with Grundy value 0: the moves that leave the opponent lost."""
        self.grundy_value(game)
        return [option for option in game.left if self._grundy(option) == 0]

    def move_to_value(self, game: GameTree, value: int) -> GameTree:
        """
        Find an option with the given Grundy value.

        Such an option exists for every value below grundy(game), by the
        definition of mex.
        """
        current = self.grundy_value(game)
        if not 0 <= value < current:
            raise ValueError(f"No move to Grundy value {value} from a position of value {current}")
        for option in game.left:
            if self._grundy(option) == value:
                return option
        raise AssertionError(f"mex invariant violated at {game!r}")

    def verify_equivalence(self, game: GameTree) -> bool:
        """Check G ≈ *grundy(G) with the order oracle."""
        return self.oracle.equiv(game, self.nim_equivalent(game))


# Convenience functions
def grundy_value(game: GameTree) -> int:
    return GrundyEvaluator().grundy_value(game)


def grundy_sum(n: int, m: int) -> int:
    return GrundyEvaluator.grundy_sum(n, m)


def equivalent_nim_heap(game: GameTree) -> int:
    return GrundyEvaluator().equivalent_nim_heap(game)


if __name__ == "__main__":
    from .gametree import disjoint_sum

    evaluator = GrundyEvaluator()

    print("=== Grundy Values of Heap Sums ===\n")
    for n, m in [(1, 2), (3, 3), (3, 5), (4, 7)]:
        total = disjoint_sum(nim_heap(n), nim_heap(m))
        value = evaluator.grundy_value(total)
        print(f"*{n} + *{m}: grundy {value}, XOR {n ^ m}, "
              f"equivalent to *{value}: {evaluator.verify_equivalence(total)}")
