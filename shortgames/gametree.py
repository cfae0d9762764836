"""
Finite Two-Player Game Trees

A position in a combinatorial game is a pair of option collections: the
positions Left can move to and the positions Right can move to. Positions
are built bottom-up from the terminal position 0 = { | } and never mutated.

This module provides:
1. GameTree: immutable position with structural equality and cached hash
2. negate / disjoint_sum: the two ways positions are combined
3. Standard positions: zero, star, integer
4. Tree analysis: birthday, distinct sub-positions, shortness and
   impartiality checks

Shortness (finitely many moves from every reachable position) holds by
construction for trees built from tuples. Options supplied as arbitrary
iterables are materialised up to a cap, so an unbounded generator is
rejected with NotShortError instead of hanging.
"""

from __future__ import annotations
import itertools
import sys
from contextlib import contextmanager
from dataclasses import dataclass, field, InitVar
from typing import Dict, Iterable, Iterator, Optional, Set, Tuple

from .errors import NotShortError

DEFAULT_MAX_OPTIONS = 100_000

# Python frames consumed per level of game-tree recursion, with slack.
_FRAMES_PER_LEVEL = 4

_REPR_DEPTH = 6


@dataclass(frozen=True)
class GameTree:
    """
    A short two-player game position.

    `left` and `right` are the positions reachable by a Left move and by a
    Right move. Equality is structural: two independently built trees with
    the same shape compare (and hash) equal.
    """
    left: Tuple[GameTree, ...] = ()
    right: Tuple[GameTree, ...] = ()
    _hash: int = field(default=0, init=False, repr=False, compare=False)
    _birthday: int = field(default=0, init=False, repr=False, compare=False)
    _size: int = field(default=1, init=False, repr=False, compare=False)
    max_options: InitVar[int] = DEFAULT_MAX_OPTIONS

    def __post_init__(self, max_options: int):
        left = _materialize(self.left, max_options)
        right = _materialize(self.right, max_options)
        options = left + right

        object.__setattr__(self, "left", left)
        object.__setattr__(self, "right", right)
        object.__setattr__(self, "_hash", hash((left, right)))
        object.__setattr__(
            self, "_birthday",
            1 + max(option._birthday for option in options) if options else 0
        )
        object.__setattr__(self, "_size", 1 + sum(option._size for option in options))

    @property
    def is_terminal(self) -> bool:
        """True iff neither player has a move."""
        return not self.left and not self.right

    @property
    def birthday(self) -> int:
        """
        Rank of the game tree.

        birthday(0) = 0
        birthday(G) = max{birthday(option) + 1 : option of G}
        """
        return self._birthday

    @property
    def size(self) -> int:
        """Number of nodes in the tree, counting shared sub-trees each time."""
        return self._size

    def options(self) -> Tuple[GameTree, ...]:
        """All options, Left's first."""
        return self.left + self.right

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if not isinstance(other, GameTree):
            return NotImplemented
        return _structurally_equal(self, other)

    def __neg__(self) -> GameTree:
        return negate(self)

    def __add__(self, other: GameTree) -> GameTree:
        if not isinstance(other, GameTree):
            return NotImplemented
        return disjoint_sum(self, other)

    def __sub__(self, other: GameTree) -> GameTree:
        if not isinstance(other, GameTree):
            return NotImplemented
        return disjoint_sum(self, negate(other))

    def __repr__(self) -> str:
        return _format(self, _REPR_DEPTH)


def _format(game: GameTree, depth: int) -> str:
    """Conway notation {L | R}, elided below `depth` levels."""
    if type(game).__repr__ is not GameTree.__repr__:
        return repr(game)
    if game.is_terminal:
        return "0"
    if depth == 0:
        return "{…}"
    left = ", ".join(_format(option, depth - 1) for option in game.left)
    right = ", ".join(_format(option, depth - 1) for option in game.right)
    return f"{{{left} | {right}}}"


def _materialize(options: Iterable[GameTree], limit: int) -> Tuple[GameTree, ...]:
    if isinstance(options, tuple) and len(options) <= limit:
        materialized = options
    else:
        materialized = tuple(itertools.islice(iter(options), limit + 1))
        if len(materialized) > limit:
            raise NotShortError(limit, f"more than {limit} options at a single position")

    for option in materialized:
        if not isinstance(option, GameTree):
            raise TypeError(f"Options must be GameTree instances, got {type(option).__name__}")
    return materialized


def _structurally_equal(first: GameTree, second: GameTree) -> bool:
    stack = [(first, second)]
    seen: Set[Tuple[int, int]] = set()
    while stack:
        a, b = stack.pop()
        if a is b:
            continue
        if (a._hash != b._hash or
                len(a.left) != len(b.left) or
                len(a.right) != len(b.right)):
            return False
        key = (id(a), id(b))
        if key in seen:
            continue
        seen.add(key)
        stack.extend(zip(a.left, b.left))
        stack.extend(zip(a.right, b.right))
    return True


@contextmanager
def recursion_headroom(depth: int):
    """Temporarily raise the interpreter recursion limit for `depth` levels."""
    previous = sys.getrecursionlimit()
    needed = previous + depth * _FRAMES_PER_LEVEL
    if depth * _FRAMES_PER_LEVEL > previous // 2:
        sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


# Operations

def is_terminal(game: GameTree) -> bool:
    return game.is_terminal


def _intern(table: Dict[Tuple[Tuple[GameTree, ...], Tuple[GameTree, ...]], GameTree],
            left: Tuple[GameTree, ...], right: Tuple[GameTree, ...]) -> GameTree:
    """Return the one node in `table` with these options, creating it if needed."""
    key = (left, right)
    node = table.get(key)
    if node is None:
        node = GameTree(left, right)
        table[key] = node
    return node


def negate(game: GameTree) -> GameTree:
    """
    Swap the roles of Left and Right.

    -G = { -r : r in right(G) | -l : l in left(G) }

    Equal sub-positions of the result are a single shared object.
    """
    memo: Dict[GameTree, GameTree] = {}
    nodes: Dict[Tuple[Tuple[GameTree, ...], Tuple[GameTree, ...]], GameTree] = {}

    def go(position: GameTree) -> GameTree:
        negated = memo.get(position)
        if negated is None:
            negated = _intern(
                nodes,
                tuple([go(option) for option in position.right]),
                tuple([go(option) for option in position.left]),
            )
            memo[position] = negated
        return negated

    with recursion_headroom(game.birthday):
        return go(game)


def disjoint_sum(first: GameTree, second: GameTree) -> GameTree:
    """
    Sum of two games: a move is a move in exactly one component.

    G + H = { gL + H, G + hL | gR + H, G + hR }

    Commutative and associative up to equivalence, not up to identity.
    Equal sub-positions of the result are a single shared object, and a
    sub-position equal to one of the operands' positions (such as 0 + *n)
    is that operand's own object.
    """
    memo: Dict[Tuple[GameTree, GameTree], GameTree] = {}
    nodes: Dict[Tuple[Tuple[GameTree, ...], Tuple[GameTree, ...]], GameTree] = {}
    for component in (first, second):
        for position in iter_positions(component):
            nodes.setdefault((position.left, position.right), position)

    def go(g: GameTree, h: GameTree) -> GameTree:
        key = (g, h)
        total = memo.get(key)
        if total is None:
            left = [go(option, h) for option in g.left] + [go(g, option) for option in h.left]
            right = [go(option, h) for option in g.right] + [go(g, option) for option in h.right]
            total = _intern(nodes, tuple(left), tuple(right))
            memo[key] = total
        return total

    with recursion_headroom(first.birthday + second.birthday):
        return go(first, second)


# Standard positions

def zero() -> GameTree:
    """The terminal position { | }: whoever is to move loses."""
    return GameTree()


def star() -> GameTree:
    """* = { 0 | 0 }: whoever is to move wins."""
    terminal = zero()
    return GameTree((terminal,), (terminal,))


def integer(n: int) -> GameTree:
    """The integer game n: n free moves for Left (or -n for Right)."""
    position = zero()
    for _ in range(abs(n)):
        position = GameTree((position,), ())
    return negate(position) if n < 0 else position


# Tree analysis

def iter_positions(game: GameTree) -> Iterator[GameTree]:
    """Iterate over distinct positions reachable from `game` (including itself)."""
    seen: Set[GameTree] = {game}
    stack = [game]
    while stack:
        position = stack.pop()
        yield position
        for option in position.options():
            if option not in seen:
                seen.add(option)
                stack.append(option)


def count_positions(game: GameTree) -> int:
    """Number of distinct reachable positions."""
    return sum(1 for _ in iter_positions(game))


def check_short(game: GameTree, max_positions: int) -> int:
    """
    Bounded traversal of the reachable positions.

    Returns the number of distinct positions, or raises NotShortError as
    soon as more than `max_positions` have been seen.
    """
    count = 0
    for _ in iter_positions(game):
        count += 1
        if count > max_positions:
            raise NotShortError(
                max_positions, f"more than {max_positions} distinct reachable positions"
            )
    return count


def first_partizan_position(game: GameTree) -> Optional[GameTree]:
    """
    Find a reachable position whose Left and Right options differ.

    A position is impartial when at every reachable position both players
    have the same set of options; returns None in that case.
    """
    for position in iter_positions(game):
        if set(position.left) != set(position.right):
            return position
    return None


def is_impartial(game: GameTree) -> bool:
    return first_partizan_position(game) is None
