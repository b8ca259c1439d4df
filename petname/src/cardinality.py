"""Saturating arithmetic for counting word combinations."""

from __future__ import annotations

from collections.abc import Iterable

# Counts never grow past this; it is the largest unsigned 128-bit value.
CARDINALITY_MAX = 2**128 - 1


def saturating_mul(a: int, b: int, limit: int = CARDINALITY_MAX) -> int:
    """Multiply two non-negative integers, clamping the result at `limit`."""
    product = a * b
    return limit if product > limit else product


def saturating_product(sizes: Iterable[int], limit: int = CARDINALITY_MAX) -> int:
    """Product of `sizes`, clamped at `limit`. Zero when `sizes` is empty."""
    total = None
    for size in sizes:
        total = size if total is None else saturating_mul(total, size, limit)
    return min(total, limit) if total is not None else 0
