"""
Nim Heaps and Nim-Sums

Nim is the canonical impartial game: a heap of n counters from which a
player may leave any smaller heap. Every impartial short game is
equivalent to a single nim heap (Sprague-Grundy), and the heap equivalent
to a sum of heaps is given by the nim-sum, the bitwise XOR of the sizes.

This module provides:
1. NimHeap: the game *n = { *0, ..., *(n-1) | *0, ..., *(n-1) }
2. nim_heap(n): shared construction of heaps, built bottom-up
3. nim_sum / nim_sum_table: XOR of heap sizes, scalar and tabulated
4. nim_position / nim_winning_move: multi-heap Nim as a game and its strategy
"""

from __future__ import annotations
import functools
import operator
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from .gametree import GameTree, disjoint_sum, zero


@dataclass(frozen=True, eq=False, repr=False)
class NimHeap(GameTree):
    """
    A single nim heap.

    Structurally identical to the GameTree with both option collections
    equal to the smaller heaps, so it compares equal to such a tree; the
    heap size is carried alongside so its Grundy value is known at once.
    Build instances with nim_heap(n).
    """
    heap: int = 0

    def __post_init__(self, max_options: int):
        super().__post_init__(max_options)
        if self.heap < 0:
            raise ValueError(f"Heap size must be non-negative, got {self.heap}")
        sizes = tuple(getattr(option, "heap", None) for option in self.left)
        if self.left != self.right or sizes != tuple(range(self.heap)):
            raise ValueError(f"Options do not describe a nim heap of size {self.heap}")

    def __repr__(self) -> str:
        if self.heap == 0:
            return "0"
        if self.heap == 1:
            return "*"
        return f"*{self.heap}"


_heaps: List[NimHeap] = [NimHeap(heap=0)]


def nim_heap(n: int) -> NimHeap:
    """Return the nim heap of size n. Heaps are built once and shared."""
    if n < 0:
        raise ValueError(f"Heap size must be non-negative, got {n}")
    while len(_heaps) <= n:
        options = tuple(_heaps)
        _heaps.append(NimHeap(options, options, heap=len(options)))
    return _heaps[n]


def nim_sum(*heaps: int) -> int:
    """Bitwise XOR of heap sizes: the Grundy value of their disjoint sum."""
    for heap in heaps:
        if heap < 0:
            raise ValueError(f"Heap size must be non-negative, got {heap}")
    return functools.reduce(operator.xor, heaps, 0)


def nim_sum_table(size: int) -> np.ndarray:
    """table[n, m] = n XOR m for 0 ≤ n, m < size."""
    values = np.arange(size, dtype=np.int64)
    return np.bitwise_xor.outer(values, values)


def nim_position(heaps: Sequence[int]) -> GameTree:
    """Multi-heap Nim as a single game: the disjoint sum of its heaps."""
    if not heaps:
        return zero()
    position: GameTree = nim_heap(heaps[0])
    for heap in heaps[1:]:
        position = disjoint_sum(position, nim_heap(heap))
    return position


def nim_winning_move(heaps: Sequence[int]) -> Optional[Tuple[int, int]]:
    """
    Find a move to a position with nim-sum zero.

    Returns (heap index, new heap size), or None when the nim-sum is
    already zero and every move loses.
    """
    total = nim_sum(*heaps)
    if total == 0:
        return None
    for index, heap in enumerate(heaps):
        target = heap ^ total
        if target < heap:
            return index, target
    # The heap holding the top bit of `total` always qualifies.
    raise AssertionError(f"No winning move found for {tuple(heaps)}")


if __name__ == "__main__":
    print("=== Nim-Sum Table ===\n")
    print(nim_sum_table(8))

    print("\n=== Winning Moves ===")
    for heaps in [(3, 4, 5), (1, 2, 3), (7, 7)]:
        print(f"heaps {heaps}: nim-sum {nim_sum(*heaps)}, move {nim_winning_move(heaps)}")
