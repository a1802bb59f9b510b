"""
Lloyd's k-means clustering for fixed-dimension numeric points.
"""

from .point import DataPoint, as_points, centroid_dtype
from .distance import DistanceFrom, sqr_distance
from .kmeans import (
    clusters_histogram,
    index_points_by_centroids,
    init_centroids,
    k_means,
    update_centroids,
)
from .result import Cluster, KMeansResult, SatelliteView
from .estimator import KMeans
from .config import KMeansConfig
from .display import format_result, print_result
from .version import __version__

__all__ = [
    "DataPoint", "as_points", "centroid_dtype",
    "DistanceFrom", "sqr_distance",
    "init_centroids", "index_points_by_centroids", "update_centroids",
    "clusters_histogram", "k_means",
    "Cluster", "KMeansResult", "SatelliteView",
    "KMeans", "KMeansConfig",
    "format_result", "print_result",
]
