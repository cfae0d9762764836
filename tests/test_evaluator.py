"""
Tests for Grundy value evaluation and the Sprague-Grundy theorem.
"""

import time

import pytest

from shortgames.errors import NotImpartialError, NotShortError
from shortgames.evaluator import (
    GrundyEvaluator, grundy_value, grundy_sum, equivalent_nim_heap,
)
from shortgames.gametree import GameTree, disjoint_sum, negate, zero, star, integer
from shortgames.nim import nim_heap, nim_position
from shortgames.oracle import Relation, ShortGameOracle, SolverConfig


def impartial_game():
    """{0, *2 | 0, *2}, Grundy value mex{0, 2} = 1."""
    options = (zero(), nim_heap(2))
    return GameTree(options, options)


def impartial_chain(depth):
    """Impartial game where each move leads one step down a chain."""
    position = zero()
    for _ in range(depth):
        position = GameTree((position,), (position,))
    return position


@pytest.fixture
def evaluator():
    return GrundyEvaluator()


class TestGrundyValue:
    """Tests for grundy_value."""

    def test_nim_heaps(self, evaluator):
        """Test grundy(*n) = n."""
        for n in range(12):
            assert evaluator.grundy_value(nim_heap(n)) == n

    def test_heap_shaped_trees(self, evaluator):
        """Test plain trees shaped like heaps are evaluated recursively."""
        for n in range(8):
            plain = negate(nim_heap(n))
            assert type(plain) is GameTree
            assert evaluator.grundy_value(plain) == n

    def test_heap_sums(self, evaluator):
        """Test grundy(*1 + *2) = 3 and grundy(*3 + *3) = 0."""
        assert evaluator.grundy_value(disjoint_sum(nim_heap(1), nim_heap(2))) == 3
        assert evaluator.grundy_value(disjoint_sum(nim_heap(3), nim_heap(3))) == 0

    def test_sum_is_xor(self, evaluator):
        """Test grundy(*n + *m) = n XOR m."""
        for n in range(6):
            for m in range(6):
                total = disjoint_sum(nim_heap(n), nim_heap(m))
                assert evaluator.grundy_value(total) == n ^ m

    def test_mex_of_options(self, evaluator):
        """Test a non-heap impartial game."""
        assert evaluator.grundy_value(impartial_game()) == 1
        assert evaluator.grundy_value(star()) == 1
        assert evaluator.grundy_value(zero()) == 0

    def test_negation_invariant(self, evaluator):
        """Test grundy(-G) = grundy(G)."""
        for g in [impartial_game(), nim_position([1, 2, 4]), impartial_chain(5)]:
            assert evaluator.grundy_value(negate(g)) == evaluator.grundy_value(g)

    def test_deep_chain(self, evaluator):
        """Test evaluation deeper than the recursion limit."""
        assert evaluator.grundy_value(impartial_chain(3000)) == 0
        assert evaluator.grundy_value(impartial_chain(3001)) == 1

    def test_module_functions(self):
        """Test convenience wrappers."""
        assert grundy_value(nim_position([1, 2])) == 3
        assert equivalent_nim_heap(impartial_game()) == 1


class TestGrundySum:
    """Tests for grundy_sum."""

    def test_known_values(self):
        """Test 3 XOR 5 = 6."""
        assert grundy_sum(3, 5) == 6
        assert GrundyEvaluator.grundy_sum(1, 2) == 3

    def test_algebraic_laws(self):
        """Test commutativity, self-inverse, identity and associativity."""
        for n in range(16):
            assert grundy_sum(n, n) == 0
            assert grundy_sum(n, 0) == n
            for m in range(16):
                assert grundy_sum(n, m) == grundy_sum(m, n)
                for p in range(0, 16, 5):
                    assert grundy_sum(grundy_sum(n, m), p) == grundy_sum(n, grundy_sum(m, p))

    def test_negative_rejected(self):
        """Test heap sizes must be natural."""
        with pytest.raises(ValueError):
            grundy_sum(-1, 2)

    def test_grundy_of_sum(self, evaluator):
        """Test grundy(G + H) = grundy(G) XOR grundy(H) without building G + H."""
        g, h = impartial_game(), nim_position([2, 3])
        assert evaluator.grundy_of_sum(g, h) == evaluator.grundy_value(disjoint_sum(g, h))
        assert evaluator.grundy_of_sum(g, h) == 1 ^ 1


class TestSpragueGrundy:
    """Tests for nim equivalents and strategy."""

    def test_equivalent_nim_heap(self, evaluator):
        """Test G ≈ *grundy(G)."""
        games = [
            impartial_game(),
            nim_position([1, 2]),
            nim_position([3, 3]),
            nim_position([1, 2, 4]),
            impartial_chain(4),
        ]
        for g in games:
            assert evaluator.equivalent_nim_heap(g) == evaluator.grundy_value(g)
            assert evaluator.nim_equivalent(g) is nim_heap(evaluator.grundy_value(g))
            assert evaluator.verify_equivalence(g)

    def test_winning_moves(self, evaluator):
        """Test winning moves lead to Grundy value 0."""
        game = nim_position([1, 2])
        moves = evaluator.winning_moves(game)
        assert moves == [disjoint_sum(nim_heap(1), nim_heap(1))]
        assert evaluator.winning_moves(nim_position([3, 3])) == []

    def test_move_to_value(self, evaluator):
        """Test every smaller Grundy value is reachable in one move."""
        game = nim_position([2, 5])
        value = evaluator.grundy_value(game)
        for target in range(value):
            option = evaluator.move_to_value(game, target)
            assert option in game.left
            assert evaluator.grundy_value(option) == target
        with pytest.raises(ValueError):
            evaluator.move_to_value(game, value)


class TestErrors:
    """Tests for rejected inputs."""

    def test_partizan_rejected(self, evaluator):
        """Test partizan games raise NotImpartialError."""
        with pytest.raises(NotImpartialError) as info:
            evaluator.grundy_value(integer(1))
        assert info.value.position == integer(1)
        assert info.value.to_dict()["type"] == "NotImpartialError"

    def test_hidden_partizan_position(self, evaluator):
        """Test impartiality is required at every reachable position."""
        game = GameTree((integer(1), star()), (star(), integer(1)))
        with pytest.raises(NotImpartialError):
            evaluator.grundy_value(game)

    def test_impartial_check_can_be_disabled(self):
        """Test the check is skipped when configured off."""
        evaluator = GrundyEvaluator(SolverConfig(check_impartial=False))
        assert evaluator.grundy_value(integer(1)) == 1

    def test_size_cap(self):
        """Test oversized positions raise NotShortError."""
        evaluator = GrundyEvaluator(SolverConfig(max_positions=5))
        with pytest.raises(NotShortError):
            evaluator.grundy_value(nim_position([3, 3]))
        # Heaps carry their value and need no traversal.
        assert evaluator.grundy_value(nim_heap(100)) == 100

    def test_rejects_non_games(self, evaluator):
        """Test inputs must be game trees."""
        with pytest.raises(TypeError):
            evaluator.grundy_value("*3")


class TestCaching:
    """Tests for memo tables."""

    def test_uncached_matches_cached(self):
        """Test results do not depend on caching."""
        cached = GrundyEvaluator()
        uncached = GrundyEvaluator(SolverConfig(use_cache=False))
        for heaps in [[1, 2], [3, 5, 6], [4, 4]]:
            game = nim_position(heaps)
            assert cached.grundy_value(game) == uncached.grundy_value(game)

    def test_clear_cache(self):
        """Test clearing keeps results intact."""
        evaluator = GrundyEvaluator()
        game = nim_position([2, 3])
        first = evaluator.grundy_value(game)
        evaluator.clear_cache()
        assert evaluator.grundy_value(game) == first


class TestLargeSums:
    """Tests for sums with thousands of positions."""

    def test_wide_heap_sum(self):
        """Test *60 + *60 is compared and evaluated within a few seconds."""
        total = nim_heap(60) + nim_heap(60)

        start = time.perf_counter()
        assert ShortGameOracle().compare(total, zero()) == Relation.EQUIV
        assert time.perf_counter() - start < 5.0

        start = time.perf_counter()
        assert GrundyEvaluator().grundy_value(total) == 0
        assert time.perf_counter() - start < 5.0

    def test_wide_comparisons_without_cache(self):
        """Test *n + *m ≈ *(n XOR m) for wide heaps with fresh tables."""
        oracle = ShortGameOracle(SolverConfig(use_cache=False))
        for n, m in [(20, 13), (31, 17), (24, 24)]:
            total = nim_heap(n) + nim_heap(m)
            assert oracle.equiv(total, nim_heap(n ^ m))
            assert oracle.fuzzy(total, nim_heap((n ^ m) + 1))


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
