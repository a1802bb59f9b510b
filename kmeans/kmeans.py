"""
Lloyd's k-means on fixed-dimension data points.

The engine seeds k centroids from a random sample of the input, labels every
point with the identifier of its nearest centroid and then runs a fixed number
of update/relabel passes. There is no convergence test: the caller decides the
number of passes up front.
"""

from __future__ import annotations
import numbers
from typing import List, MutableSequence, Optional, Sequence, Tuple

import numpy as np
from sklearn.utils import check_random_state

from .distance import DistanceFrom, min_element
from .point import DataPoint, centroid_dtype
from .result import KMeansResult, iter_satellites

# Unsigned type used for point counts and cluster sizes.
SIZE_TYPE = np.uint64

IndexedCentroids = List[Tuple[int, DataPoint]]


def _check_points(points: Sequence[DataPoint]) -> None:
    if not hasattr(points, "__len__") or not hasattr(points, "__getitem__"):
        raise TypeError("points must be a sized sequence of DataPoint")
    first = None
    for point in points:
        if not isinstance(point, DataPoint):
            raise TypeError(f"points must hold DataPoint values, got {type(point).__name__}")
        if first is None:
            first = point
        elif point.dim != first.dim or point.dtype != first.dtype:
            raise TypeError(
                "points must share one dimension and dtype, got "
                f"({first.dim}, {first.dtype}) and ({point.dim}, {point.dtype})"
            )


def _check_out_indices(out_indices) -> None:
    if not hasattr(out_indices, "__len__") or not hasattr(out_indices, "__setitem__"):
        raise TypeError("out_indices must be a mutable sequence")
    if isinstance(out_indices, np.ndarray) and out_indices.dtype.kind != "u":
        raise TypeError(
            f"out_indices must have an unsigned integer dtype, got {out_indices.dtype}"
        )


def _size_overflows(n_points: int, k: int, out_indices) -> bool:
    if n_points > np.iinfo(SIZE_TYPE).max:
        return True
    # Identifiers 1..k must be representable in the output array.
    if isinstance(out_indices, np.ndarray):
        return k > np.iinfo(out_indices.dtype).max
    return False


def init_centroids(
    points: Sequence[DataPoint], k: int, random_state=None
) -> IndexedCentroids:
    """Seed k centroids with a uniform sample of distinct input points.

    Args:
        points: The input points. Must hold at least ``k`` elements.
        k: Number of centroids.
        random_state: ``None``, an int seed or a ``numpy.random.RandomState``.

    Returns:
        ``[(1, c1), ..., (k, ck)]`` in sampling order, each centroid cast to
        the promoted centroid dtype.
    """
    rng = check_random_state(random_state)
    sample = rng.choice(len(points), size=k, replace=False)
    dtype = centroid_dtype(points[0].dtype)
    return [
        (cent_id, points[int(i)].astype(dtype))
        for cent_id, i in enumerate(sample, start=1)
    ]


def find_nearest_id(point: DataPoint, indexed_centroids: IndexedCentroids) -> int:
    """Identifier of the centroid closest to ``point``, earliest on ties."""
    cent_id, _ = min_element(
        indexed_centroids, DistanceFrom(point), key=lambda id_c: id_c[1]
    )
    return cent_id


def index_points_by_centroids(
    out_indices: MutableSequence[int],
    points: Sequence[DataPoint],
    indexed_centroids: IndexedCentroids,
) -> None:
    """Write the nearest centroid's identifier for every point into ``out_indices``."""
    for i, point in enumerate(points):
        out_indices[i] = find_nearest_id(point, indexed_centroids)


def _mean(points, dtype: np.dtype, dim: int) -> Optional[DataPoint]:
    total = DataPoint.zeros(dim, dtype)
    count = 0
    for point in points:
        total = total + point
        count += 1
    if count == 0:
        return None
    return total / count


def update_centroids(
    points: Sequence[DataPoint],
    out_indices: Sequence[int],
    indexed_centroids: IndexedCentroids,
) -> List[int]:
    """Replace every centroid with the mean of the points labelled with its id.

    A centroid whose cluster has no points keeps its previous position.

    Returns:
        Identifiers of the clusters that were empty.
    """
    empty = []
    for pos, (cent_id, centroid) in enumerate(indexed_centroids):
        mean = _mean(
            iter_satellites(out_indices, points, cent_id), centroid.dtype, centroid.dim
        )
        if mean is None:
            empty.append(cent_id)
            continue
        indexed_centroids[pos] = (cent_id, mean)
    return empty


def clusters_histogram(indices: Sequence[int], k: int) -> np.ndarray:
    """Count the points per identifier; entry i counts identifier i + 1."""
    labels = np.asarray(indices, dtype=np.int64) - 1
    sizes = np.bincount(labels, minlength=k).astype(SIZE_TYPE)
    sizes.setflags(write=False)
    return sizes


def k_means(
    points: Sequence[DataPoint],
    out_indices: MutableSequence[int],
    k: int,
    n: int,
    *,
    random_state=None,
    verbose: bool = False,
) -> Optional[KMeansResult]:
    """Partition ``points`` into ``k`` clusters with ``n`` Lloyd refinement passes.

    Args:
        points: Sequence of ``DataPoint`` sharing one dimension and dtype.
        out_indices: Mutable sequence with one slot per point. Receives the
            1-based identifier of each point's cluster. A numpy array must
            have an unsigned integer dtype.
        k: Number of clusters.
        n: Number of update/relabel passes after the initial labelling.
        random_state: Seed or ``RandomState`` used to sample the initial
            centroids.
        verbose: Print progress information.

    Returns:
        A :class:`KMeansResult`, or ``None`` when ``k < 2``, when there are
        fewer points than clusters, when ``out_indices`` and ``points``
        differ in length, or when the sizes overflow the counting type.
        ``out_indices`` is left untouched in that case.
    """
    _check_points(points)
    _check_out_indices(out_indices)
    if not isinstance(k, numbers.Integral) or not isinstance(n, numbers.Integral):
        raise TypeError("k and n must be integers")
    if n < 0:
        raise ValueError("n must be a non-negative integer")

    if k < 2:
        return None
    n_points = len(points)
    if _size_overflows(n_points, k, out_indices):
        return None
    if n_points < k or n_points != len(out_indices):
        return None

    if verbose:
        print(f"Seeding {k} centroids from {n_points} points...")
    indexed_centroids = init_centroids(points, k, random_state)
    index_points_by_centroids(out_indices, points, indexed_centroids)

    for iteration in range(n):
        empty = update_centroids(points, out_indices, indexed_centroids)
        if verbose and empty:
            print(f"Iteration {iteration + 1}: clusters {empty} are empty, keeping their centroids")
        index_points_by_centroids(out_indices, points, indexed_centroids)
        if verbose:
            print(f"Iteration {iteration + 1}/{n} done")

    cluster_sizes = clusters_histogram(out_indices, k)
    if verbose:
        print(f"Cluster sizes: {cluster_sizes.tolist()}")

    return KMeansResult(
        [centroid for _, centroid in indexed_centroids],
        cluster_sizes,
        points,
        out_indices,
    )
