"""Ordering helpers for ring tokens.

All wraparound handling lives in ``RingRange`` and ``SegmentGenerator``;
these are plain integer comparisons so that every caller expresses its
ring logic through the same few primitives. Tokens are Python ints, which
are arbitrary precision, so 127-bit token spaces need no special care.
"""

from __future__ import annotations


def greater_than_or_equal(a: int, b: int) -> bool:
    return a >= b


def lower_than_or_equal(a: int, b: int) -> bool:
    return a <= b


def greater_than(a: int, b: int) -> bool:
    return a > b


def lower_than(a: int, b: int) -> bool:
    return a < b


def max_token(a: int, b: int) -> int:
    return a if greater_than_or_equal(a, b) else b


def min_token(a: int, b: int) -> int:
    return a if lower_than_or_equal(a, b) else b
