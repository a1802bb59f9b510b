"""
Result of a k-means run and the lazy per-cluster views over it.
"""

from __future__ import annotations
from typing import Iterator, NamedTuple, Sequence, Tuple

import numpy as np

from .distance import sqr_distance
from .point import DataPoint


def iter_satellites(out_indices, points, cluster_id: int) -> Iterator[DataPoint]:
    """Yield the points whose assignment equals ``cluster_id``, in input order."""
    for assigned, point in zip(out_indices, points):
        if assigned == cluster_id:
            yield point


class SatelliteView(object):
    """Points currently assigned to one cluster.

    The view holds references only. Every iteration filters the zipped
    (assignment, point) sequence again, so it always reflects the current
    contents of the assignment array and nothing is cached.
    """

    __slots__ = ("_out_indices", "_points", "_cluster_id")

    def __init__(self, out_indices, points, cluster_id: int) -> None:
        self._out_indices = out_indices
        self._points = points
        self._cluster_id = cluster_id

    @property
    def cluster_id(self) -> int:
        return self._cluster_id

    def __iter__(self) -> Iterator[DataPoint]:
        return iter_satellites(self._out_indices, self._points, self._cluster_id)

    def __repr__(self) -> str:
        return f"SatelliteView(cluster_id={self._cluster_id})"


class Cluster(NamedTuple):
    centroid: DataPoint
    satellites: SatelliteView


class KMeansResult(object):
    """Outcome of :func:`kmeans.k_means`.

    Bundles the final centroids (ordered by identifier), the cluster size
    histogram, and references to the caller's points and assignment array.
    Iterating yields one :class:`Cluster` per identifier, in identifier order.

    Args:
        centroids: Final centroids, the i-th one carrying identifier i + 1.
        cluster_sizes: Histogram of the assignment array.
        points: The input points, as passed to ``k_means``.
        out_indices: The assignment array, as passed to ``k_means``.
    """

    __slots__ = ("_centroids", "_cluster_sizes", "_points", "_out_indices")

    def __init__(
        self,
        centroids: Sequence[DataPoint],
        cluster_sizes: np.ndarray,
        points: Sequence[DataPoint],
        out_indices,
    ) -> None:
        self._centroids = tuple(centroids)
        self._cluster_sizes = cluster_sizes
        self._points = points
        self._out_indices = out_indices

    def centroids(self) -> Tuple[DataPoint, ...]:
        return self._centroids

    def cluster_sizes(self) -> np.ndarray:
        return self._cluster_sizes

    def points(self) -> Sequence[DataPoint]:
        return self._points

    def out_indices(self):
        return self._out_indices

    def inertia(self) -> float:
        """Sum of squared distances from each point to its assigned centroid."""
        return float(
            sum(
                sqr_distance(point, self._centroids[int(assigned) - 1])
                for assigned, point in zip(self._out_indices, self._points)
            )
        )

    def __len__(self) -> int:
        return len(self._centroids)

    def __getitem__(self, cluster_idx: int) -> Cluster:
        if cluster_idx < 0:
            cluster_idx += len(self)
        if not 0 <= cluster_idx < len(self):
            raise IndexError("cluster index out of range")
        return Cluster(
            self._centroids[cluster_idx],
            SatelliteView(self._out_indices, self._points, cluster_idx + 1),
        )

    def __iter__(self) -> Iterator[Cluster]:
        for cluster_idx in range(len(self)):
            yield self[cluster_idx]

    def __repr__(self) -> str:
        return (
            f"KMeansResult(k={len(self)}, n_points={len(self._points)}, "
            f"cluster_sizes={self._cluster_sizes.tolist()})"
        )
