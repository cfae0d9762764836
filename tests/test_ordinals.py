"""
Tests for Cantor normal form ordinals.
"""

import pytest

from shortgames.ordinals import Ordinal, cantor_normal_form, EXAMPLE_ORDINALS


class TestOrdinal:
    """Tests for Ordinal class."""

    def test_finite_ordinal(self):
        """Test finite ordinal creation and properties."""
        o = Ordinal.from_natural(42)
        assert o.finite_part == 42
        assert o.degree == 0
        assert o.is_finite()
        assert not o.is_limit()
        assert o.to_natural() == 42
        assert str(o) == "42"

    def test_zero(self):
        """Test the empty normal form is zero."""
        o = Ordinal.from_natural(0)
        assert o == Ordinal()
        assert o.is_zero()
        assert o.is_finite()
        assert str(o) == "0"

    def test_omega_ordinal(self):
        """Test omega ordinal creation."""
        o = Ordinal.omega()
        assert o.degree == 1
        assert o.finite_part == 0
        assert not o.is_finite()
        assert o.is_limit()
        assert str(o) == "ω"

    def test_omega_plus_n(self):
        """Test omega + n ordinal."""
        o = Ordinal.omega(1, 5)
        assert o.finite_part == 5
        assert not o.is_limit()
        assert str(o) == "ω + 5"

    def test_omega_times_n(self):
        """Test omega × n ordinal."""
        assert str(Ordinal.omega(3)) == "ω·3"

    def test_omega_powers(self):
        """Test powers of omega print with superscripts."""
        assert str(Ordinal.omega_power(2)) == "ω²"
        assert str(Ordinal.omega_power(3)) == "ω³"
        assert str(Ordinal.omega_power(12, 2)) == "ω¹²·2"
        assert str(Ordinal(((3, 1), (1, 1)))) == "ω³ + ω"

    def test_invalid_normal_forms(self):
        """Test malformed normal forms are rejected."""
        with pytest.raises(ValueError):
            Ordinal(((1, 1), (2, 1)))
        with pytest.raises(ValueError):
            Ordinal(((1, 0),))
        with pytest.raises(ValueError):
            Ordinal(((-1, 1),))
        with pytest.raises(ValueError):
            Ordinal.from_natural(-3)

    def test_transfinite_has_no_natural(self):
        """Test to_natural rejects transfinite ordinals."""
        with pytest.raises(ValueError):
            Ordinal.omega().to_natural()

    def test_successor(self):
        """Test successor ordinal."""
        assert Ordinal.from_natural(5).successor() == Ordinal.from_natural(6)
        assert Ordinal.omega().successor() == Ordinal.omega(1, 1)
        assert Ordinal.omega(1, 1).successor() == Ordinal.omega(1, 2)

    def test_naturals_interoperate(self):
        """Test finite ordinals compare and hash like ints."""
        assert Ordinal.from_natural(7) == 7
        assert hash(Ordinal.from_natural(7)) == hash(7)
        assert len({Ordinal.from_natural(7), 7}) == 1
        assert 3 < Ordinal.omega()
        assert Ordinal.omega() > 1000


class TestOrdinalOrdering:
    """Tests for ordinal ordering properties."""

    def test_natural_number_ordering(self):
        """Test that finite ordinals preserve natural number ordering."""
        ordinals = [Ordinal.from_natural(i) for i in range(100)]

        for i in range(99):
            assert ordinals[i] < ordinals[i + 1]

    def test_omega_dominates_finite(self):
        """Test that ω > n for all finite n."""
        omega = Ordinal.omega()

        for n in [0, 1, 10, 100, 1000, 10000]:
            assert Ordinal.from_natural(n) < omega

    def test_transfinite_ordering(self):
        """Test complete transfinite ordering."""
        ordinals = [
            Ordinal.from_natural(100),
            Ordinal.omega(),
            Ordinal.omega(1, 5),
            Ordinal.omega(2),
            Ordinal.omega(10),
            Ordinal.omega_power(2),
            Ordinal(((2, 1), (1, 5))),
            Ordinal.omega_power(2, 2),
            Ordinal.omega_power(3),
        ]

        for i in range(len(ordinals) - 1):
            assert ordinals[i] < ordinals[i + 1], \
                f"{ordinals[i]} should be < {ordinals[i+1]}"

    def test_examples_sorted(self):
        """Test the example table is listed in increasing order."""
        values = list(EXAMPLE_ORDINALS.values())
        assert values == sorted(values)


class TestCantorNormalForm:
    """Tests for base-b normal forms of naturals."""

    def test_small_cases(self):
        """Test known expansions."""
        assert cantor_normal_form(0) == []
        assert cantor_normal_form(10, 3) == [(2, 1), (0, 1)]
        assert cantor_normal_form(10, 2) == [(3, 1), (1, 1)]
        assert cantor_normal_form(305, 10) == [(2, 3), (0, 5)]

    def test_expansion_reconstructs_value(self):
        """Test Σ c·b^e gives back n with digits below the base."""
        for base in range(2, 6):
            for n in range(200):
                terms = cantor_normal_form(n, base)
                assert sum(c * base ** e for e, c in terms) == n
                assert all(0 < c < base for _, c in terms)
                exponents = [e for e, _ in terms]
                assert exponents == sorted(exponents, reverse=True)

    def test_invalid_arguments(self):
        """Test base and value validation."""
        with pytest.raises(ValueError):
            cantor_normal_form(5, 1)
        with pytest.raises(ValueError):
            cantor_normal_form(-1, 2)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
