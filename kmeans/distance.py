"""
Squared Euclidean distance and the nearest-candidate comparator.
"""

from __future__ import annotations
from typing import Callable, Iterable, Optional, TypeVar

import numpy as np

from .point import DataPoint

T = TypeVar("T")


def _accumulator_dtype(a: np.dtype, b: np.dtype) -> np.dtype:
    dtype = np.result_type(a, b)
    if dtype.kind == "f":
        return dtype
    # Integers are differenced in signed arithmetic so unsigned coordinates
    # cannot wrap around.
    if dtype == np.uint64:
        return np.dtype(np.float64)
    return np.dtype(np.int64)


def sqr_distance(a: DataPoint, b: DataPoint):
    """Squared Euclidean distance between two points of the same dimension.

    Args:
        a: First point.
        b: Second point.

    Returns:
        A numpy scalar whose type can hold both operands' coordinates.
    """
    if a.dim != b.dim:
        raise ValueError(f"Dimension mismatch: {a.dim} != {b.dim}")
    acc = _accumulator_dtype(a.dtype, b.dtype)
    diff = a.to_numpy().astype(acc) - b.to_numpy().astype(acc)
    return np.sum(diff * diff, dtype=acc)


class DistanceFrom(object):
    """Compares candidates by their squared distance to a reference point.

    ``DistanceFrom(p)(c1, c2)`` is ``True`` when ``c1`` is strictly closer to
    ``p`` than ``c2``. Equal distances compare ``False``, so a linear scan
    keeps the first of several equally close candidates.

    Args:
        reference: The point distances are measured from.
    """

    __slots__ = ("_reference",)

    def __init__(self, reference: DataPoint) -> None:
        self._reference = reference

    @property
    def reference(self) -> DataPoint:
        return self._reference

    def distance(self, candidate: DataPoint):
        return sqr_distance(candidate, self._reference)

    def __call__(self, c1: DataPoint, c2: DataPoint) -> bool:
        return self.distance(c1) < self.distance(c2)


def min_element(
    candidates: Iterable[T],
    less: Callable[[DataPoint, DataPoint], bool],
    key: Optional[Callable[[T], DataPoint]] = None,
) -> T:
    """Return the first smallest candidate under ``less``.

    Args:
        candidates: Non-empty iterable to scan.
        less: Strict weak ordering on the projected values.
        key: Projection applied to each candidate before comparing.

    Returns:
        The earliest candidate no other candidate is ``less`` than.
    """
    if key is None:
        key = lambda c: c
    it = iter(candidates)
    try:
        best = next(it)
    except StopIteration:
        raise ValueError("min_element() arg is an empty iterable") from None
    best_value = key(best)
    for candidate in it:
        value = key(candidate)
        if less(value, best_value):
            best, best_value = candidate, value
    return best
