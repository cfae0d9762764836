"""
shortgames: Evaluation of Finite Combinatorial Games

Decides who wins sums of short two-player games:
1. Conway's order on games (≤, <, ≈, ‖) for finite game trees
2. Grundy values of impartial games via the minimum excludant (mex)
3. Nim heaps and the nim-sum (bitwise XOR) law for disjoint sums

This package provides:
- GameTree: immutable finite positions, negation and disjoint sum
- mex: minimum excludant of naturals (or ordinals)
- NimHeap / nim_heap: the canonical impartial game
- ShortGameOracle: decides order relations between short games
- GrundyEvaluator: Grundy values, nim equivalents and winning moves
- Ordinal: Cantor normal form for the ordinal reading of mex

Example usage:
    from shortgames import GrundyEvaluator, ShortGameOracle, nim_heap, zero

    evaluator = GrundyEvaluator()
    game = nim_heap(1) + nim_heap(2)
    print(evaluator.grundy_value(game))               # 3

    oracle = ShortGameOracle()
    print(oracle.compare(nim_heap(3) + nim_heap(3), zero()))  # Relation.EQUIV
"""

__version__ = "0.1.0"

from .errors import (
    GameError,
    NotShortError,
    NotImpartialError,
)

from .ordinals import (
    Ordinal,
    cantor_normal_form,
)

from .gametree import (
    GameTree,
    negate,
    disjoint_sum,
    is_terminal,
    zero,
    star,
    integer,
    iter_positions,
    count_positions,
    check_short,
    first_partizan_position,
    is_impartial,
)

from .mex import mex

from .nim import (
    NimHeap,
    nim_heap,
    nim_sum,
    nim_sum_table,
    nim_position,
    nim_winning_move,
)

from .oracle import (
    Relation,
    Outcome,
    SolverConfig,
    ShortGameOracle,
    compare,
    outcome,
)

from .evaluator import (
    GrundyEvaluator,
    grundy_value,
    grundy_sum,
    equivalent_nim_heap,
)

__all__ = [
    # Errors
    "GameError",
    "NotShortError",
    "NotImpartialError",
    # Ordinals
    "Ordinal",
    "cantor_normal_form",
    # Game trees
    "GameTree",
    "negate",
    "disjoint_sum",
    "is_terminal",
    "zero",
    "star",
    "integer",
    "iter_positions",
    "count_positions",
    "check_short",
    "first_partizan_position",
    "is_impartial",
    # Mex
    "mex",
    # Nim
    "NimHeap",
    "nim_heap",
    "nim_sum",
    "nim_sum_table",
    "nim_position",
    "nim_winning_move",
    # Oracle
    "Relation",
    "Outcome",
    "SolverConfig",
    "ShortGameOracle",
    "compare",
    "outcome",
    # Evaluator
    "GrundyEvaluator",
    "grundy_value",
    "grundy_sum",
    "equivalent_nim_heap",
]
