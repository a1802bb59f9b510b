"""
Fixed-dimension numeric point type and the centroid promotion rule.
"""

from __future__ import annotations
from functools import total_ordering
from typing import Iterator, List, Union

import numpy as np

DTypeLike = Union[np.dtype, type, str, None]

# Signed int, unsigned int and floating point dtypes.
_NUMERIC_KINDS = "iuf"


def _check_numeric(dtype: np.dtype) -> np.dtype:
    dtype = np.dtype(dtype)
    if dtype.kind not in _NUMERIC_KINDS:
        raise TypeError(f"DataPoint requires an integer or floating dtype, got {dtype}")
    return dtype


def centroid_dtype(dtype: DTypeLike) -> np.dtype:
    """Element type of a centroid built from points of the given dtype.

    The mean of integers is generally not an integer, so integral dtypes are
    promoted to ``float64``. Floating dtypes are kept as they are.

    Args:
        dtype: The points' element type.

    Returns:
        The centroid's element type.
    """
    dtype = _check_numeric(dtype)
    if dtype.kind == "f":
        return dtype
    return np.dtype(np.float64)


@total_ordering
class DataPoint(object):
    """An immutable point with a fixed number of numeric coordinates.

    Coordinates are kept in a read-only numpy array. Equality and ordering
    compare coordinates lexicographically.

    Args:
        *coords: The coordinates, given positionally.
        dtype: Element type. Inferred by numpy from ``coords`` if omitted.

    Example:

        .. code-block:: python

            p = DataPoint(1, 2, 3)
            p.dtype            # dtype('int64')
            p / 2              # DataPoint(0.5, 1.0, 1.5)
    """

    __slots__ = ("_coords",)

    def __init__(self, *coords, dtype: DTypeLike = None) -> None:
        if not coords:
            raise ValueError("DataPoint needs at least one coordinate")
        if dtype is not None:
            dtype = _check_numeric(dtype)
        values = np.array(coords, dtype=dtype)
        if values.ndim != 1:
            raise ValueError("DataPoint coordinates must be scalars")
        _check_numeric(values.dtype)
        values.setflags(write=False)
        self._coords = values

    @classmethod
    def from_array(cls, values, dtype: DTypeLike = None) -> DataPoint:
        """Create a point from a 1-D array-like."""
        values = np.asarray(values, dtype=dtype)
        if values.ndim != 1:
            raise ValueError(f"Expected a 1-D array, got shape {values.shape}")
        return cls(*values, dtype=values.dtype)

    @classmethod
    def zeros(cls, dim: int, dtype: DTypeLike = np.float64) -> DataPoint:
        """The origin of a ``dim``-dimensional space."""
        return cls.from_array(np.zeros(dim, dtype=dtype))

    @property
    def dtype(self) -> np.dtype:
        return self._coords.dtype

    @property
    def dim(self) -> int:
        return self._coords.shape[0]

    def to_numpy(self) -> np.ndarray:
        """Return a writable copy of the coordinates."""
        return self._coords.copy()

    def astype(self, dtype: DTypeLike) -> DataPoint:
        """Cast every coordinate to ``dtype``."""
        return DataPoint.from_array(self._coords.astype(_check_numeric(dtype)))

    def __len__(self) -> int:
        return self.dim

    def __getitem__(self, i):
        return self._coords[i]

    def __iter__(self) -> Iterator:
        return iter(self._coords)

    def __add__(self, other: DataPoint) -> DataPoint:
        if not isinstance(other, DataPoint):
            return NotImplemented
        if other.dim != self.dim:
            raise ValueError(
                f"Cannot add points of dimension {self.dim} and {other.dim}"
            )
        return DataPoint.from_array(self._coords + other._coords)

    def __truediv__(self, n) -> DataPoint:
        # Floating points keep their dtype, integral points become float64.
        dtype = centroid_dtype(self.dtype)
        return DataPoint.from_array(self._coords.astype(dtype) / dtype.type(n))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataPoint):
            return NotImplemented
        return tuple(self._coords) == tuple(other._coords)

    def __lt__(self, other: DataPoint) -> bool:
        if not isinstance(other, DataPoint):
            return NotImplemented
        return tuple(self._coords) < tuple(other._coords)

    def __hash__(self) -> int:
        return hash(tuple(self._coords))

    def __setattr__(self, name, value) -> None:
        if hasattr(self, "_coords"):
            raise AttributeError("DataPoint is immutable")
        object.__setattr__(self, name, value)

    def __repr__(self) -> str:
        return "DataPoint({})".format(", ".join(repr(c) for c in self._coords.tolist()))

    def __str__(self) -> str:
        return "({})".format(", ".join(str(c) for c in self._coords.tolist()))


def as_points(values, dtype: DTypeLike = None) -> List[DataPoint]:
    """Convert a 2-D array-like of shape (n_points, dim) into data points.

    Args:
        values: Rows are points.
        dtype: Optional element type for every point.

    Returns:
        A list of ``DataPoint``, one per row.
    """
    values = np.asarray(values, dtype=dtype)
    if values.ndim != 2:
        raise ValueError(f"Expected a 2-D array, got shape {values.shape}")
    return [DataPoint.from_array(row) for row in values]
