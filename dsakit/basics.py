"""Small routines illustrating growth rates, the call stack and recursion."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from typing import Hashable


def linear_items(n: int) -> Iterator[str]:
    """Yield one line per number below ``n``: O(n) work."""
    for i in range(n):
        yield str(i)


def two_linear_passes(n: int) -> Iterator[str]:
    """Yield the numbers below ``n`` twice: O(2n), which is still O(n)."""
    for _ in range(2):
        yield from linear_items(n)


def quadratic_then_linear(n: int) -> Iterator[str]:
    """Yield every pair ``ij`` below ``n``, then every ``k`` below ``n``.

    The nested pass dominates, so the whole is O(n^2).
    """
    for i in range(n):
        for j in range(n):
            yield f"{i}{j}"
    yield from linear_items(n)


def func_three() -> list[str]:
    """Innermost call: report itself."""
    return ["Three"]


def func_two() -> list[str]:
    """Call ``func_three`` first, then report itself."""
    return [*func_three(), "Two"]


def func_one() -> list[str]:
    """Call ``func_two`` first, then report itself."""
    return [*func_two(), "One"]


def factorial(n: int) -> int:
    """Return ``n!`` for a positive integer ``n``."""
    if n < 1:
        raise ValueError(f"factorial needs a positive integer, got {n}")
    return math.prod(range(1, n + 1))


def item_in_common_nested(first: Iterable[object], second: Iterable[object]) -> bool:
    """Report whether the inputs share an item, comparing every pair: O(n*m)."""
    others = list(second)
    return any(a == b for a in first for b in others)


def item_in_common(first: Iterable[Hashable], second: Iterable[Hashable]) -> bool:
    """Report whether the inputs share an item, using a set lookup: O(n+m)."""
    seen = set(first)
    return any(item in seen for item in second)