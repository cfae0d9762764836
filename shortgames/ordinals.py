"""
Ordinals in Cantor Normal Form (illustrative, below ω^ω)

Grundy values of finite games are natural numbers, but the minimum
excludant is classically defined over ordinals. This module provides just
enough of the ordinals to state that generalisation:

1. Ordinal: ω^e₁·c₁ + ω^e₂·c₂ + ... + ω^e_k·c_k with natural exponents
   e₁ > e₂ > ... > e_k ≥ 0 and positive coefficients c_i
2. Ordering (lexicographic on the normal form), successor, finite part
3. cantor_normal_form(n, base): base-b Cantor normal form of a natural

There is deliberately no ordinal arithmetic beyond the successor.
"""

from __future__ import annotations
from dataclasses import dataclass
from functools import total_ordering
from typing import List, Tuple, Union

_SUPERSCRIPTS = str.maketrans("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹")


@dataclass(frozen=True)
@total_ordering
class Ordinal:
    """
    An ordinal below ω^ω, stored as its Cantor normal form.

    `terms` holds (exponent, coefficient) pairs with strictly decreasing
    exponents. The empty tuple is zero.
    """
    terms: Tuple[Tuple[int, int], ...] = ()

    def __post_init__(self):
        terms = tuple((int(e), int(c)) for e, c in self.terms)
        previous = None
        for exponent, coefficient in terms:
            if exponent < 0:
                raise ValueError("Exponents must be non-negative")
            if coefficient <= 0:
                raise ValueError("Coefficients must be positive")
            if previous is not None and exponent >= previous:
                raise ValueError("Exponents must be strictly decreasing")
            previous = exponent
        object.__setattr__(self, "terms", terms)

    @classmethod
    def from_natural(cls, n: int) -> Ordinal:
        """Create the finite ordinal n."""
        if n < 0:
            raise ValueError(f"Ordinals are non-negative, got {n}")
        return cls(((0, n),)) if n else cls()

    @classmethod
    def omega(cls, coefficient: int = 1, plus: int = 0) -> Ordinal:
        """Create ω·n + k."""
        terms: List[Tuple[int, int]] = []
        if coefficient:
            terms.append((1, coefficient))
        if plus:
            terms.append((0, plus))
        return cls(tuple(terms))

    @classmethod
    def omega_power(cls, exponent: int, coefficient: int = 1) -> Ordinal:
        """Create ω^e·c."""
        return cls(((exponent, coefficient),))

    @property
    def degree(self) -> int:
        """Leading exponent (0 for finite ordinals)."""
        return self.terms[0][0] if self.terms else 0

    @property
    def finite_part(self) -> int:
        """Coefficient of ω⁰."""
        if self.terms and self.terms[-1][0] == 0:
            return self.terms[-1][1]
        return 0

    def is_zero(self) -> bool:
        return not self.terms

    def is_finite(self) -> bool:
        """Check if ordinal is a natural number."""
        return self.degree == 0

    def is_limit(self) -> bool:
        """Nonzero with no predecessor."""
        return bool(self.terms) and self.finite_part == 0

    def to_natural(self) -> int:
        if not self.is_finite():
            raise ValueError(f"{self} is transfinite")
        return self.finite_part

    def successor(self) -> Ordinal:
        """Compute α + 1."""
        if self.finite_part:
            return Ordinal(self.terms[:-1] + ((0, self.finite_part + 1),))
        return Ordinal(self.terms + ((0, 1),))

    def __lt__(self, other: Union[Ordinal, int]) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        # Lexicographic order on (exponent, coefficient) pairs is the ordinal order.
        return self.terms < other.terms

    def __eq__(self, other) -> bool:
        other = _coerce(other)
        if other is NotImplemented:
            return NotImplemented
        return self.terms == other.terms

    def __hash__(self) -> int:
        if self.is_finite():
            return hash(self.finite_part)
        return hash(self.terms)

    def __repr__(self) -> str:
        if not self.terms:
            return "0"

        parts = []
        for exponent, coefficient in self.terms:
            if exponent == 0:
                parts.append(str(coefficient))
                continue
            base = "ω" if exponent == 1 else "ω" + str(exponent).translate(_SUPERSCRIPTS)
            parts.append(base if coefficient == 1 else f"{base}·{coefficient}")
        return " + ".join(parts)


def _coerce(value):
    if isinstance(value, Ordinal):
        return value
    if isinstance(value, int) and not isinstance(value, bool) and value >= 0:
        return Ordinal.from_natural(value)
    return NotImplemented


def cantor_normal_form(n: int, base: int = 2) -> List[Tuple[int, int]]:
    """
    Base-b Cantor normal form of a natural number.

    Returns (exponent, coefficient) pairs, largest exponent first, such that
    n = Σ coefficient · base^exponent with 0 < coefficient < base.

    >>> cantor_normal_form(10, 3)
    [(2, 1), (0, 1)]
    """
    if base < 2:
        raise ValueError(f"Base must be at least 2, got {base}")
    if n < 0:
        raise ValueError(f"Expected a natural number, got {n}")

    digits = []
    exponent = 0
    while n:
        n, digit = divmod(n, base)
        if digit:
            digits.append((exponent, digit))
        exponent += 1
    return list(reversed(digits))


EXAMPLE_ORDINALS = {
    "zero": Ordinal(),
    "seven": Ordinal.from_natural(7),
    "omega": Ordinal.omega(),
    "omega_plus_3": Ordinal.omega(1, 3),
    "omega_times_2": Ordinal.omega(2),
    "omega_squared": Ordinal.omega_power(2),
    "omega_cubed_plus_omega": Ordinal(((3, 1), (1, 1))),
}


if __name__ == "__main__":
    print("=== Ordinals in Cantor Normal Form ===\n")
    for name, ordinal in EXAMPLE_ORDINALS.items():
        print(f"{name}: {ordinal} (finite: {ordinal.is_finite()})")

    print("\n=== Base-b normal forms ===")
    for n, base in [(10, 2), (10, 3), (100, 10)]:
        print(f"{n} in base {base}: {cantor_normal_form(n, base)}")
