"""
Minimum excludant.

mex(S) is the least natural number not in S. For a finite set of ordinals
the answer is still a natural number: S cannot contain every natural, and
transfinite members never block a finite candidate.
"""

from __future__ import annotations
from typing import Iterable, Set, Union

import numpy as np

from .ordinals import Ordinal


def mex(values: Iterable[Union[int, Ordinal]]) -> int:
    """
    Smallest n ≥ 0 with n not in `values`.

    mex(S) ≤ |S|, so a presence array of |S| + 1 slots always has a gap.

    >>> mex({0, 1, 3})
    2
    """
    elements: Set[int] = set()
    for value in values:
        if isinstance(value, Ordinal):
            if value.is_finite():
                elements.add(value.finite_part)
            continue
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise TypeError(f"mex expects naturals or ordinals, got {type(value).__name__}")
        if value < 0:
            raise ValueError(f"mex expects non-negative values, got {value}")
        elements.add(int(value))

    bound = len(elements)
    candidates = [v for v in elements if v <= bound]
    present = np.zeros(bound + 1, dtype=bool)
    present[np.fromiter(candidates, dtype=np.intp, count=len(candidates))] = True
    return int(np.argmin(present))
