"""
Estimator-style wrapper around the fixed-iteration k-means engine.
"""

from typing import List, Optional, Sequence, Union

import numpy as np
from sklearn.utils import check_random_state

from .config import KMeansConfig
from .kmeans import find_nearest_id, k_means
from .point import DataPoint, as_points


class KMeans:
    """
    K-means clustering with a fixed number of Lloyd passes.

    Features:
    - Random initialization by sampling distinct input points
    - Multiple initialization attempts, keeping the lowest inertia
    - Integral data is clustered with float64 centroids
    """

    def __init__(
        self,
        n_clusters: int,
        n_iter: int = 10,
        n_init: int = 1,
        random_state: Optional[int] = None,
        verbose: bool = False
    ):
        """
        Initialize K-means clustering.

        Args:
            n_clusters: Number of clusters
            n_iter: Number of update/relabel passes per run
            n_init: Number of different initializations to try
            random_state: Random seed for reproducibility
            verbose: Whether to print progress information
        """
        self.n_clusters = n_clusters
        self.n_iter = n_iter
        self.n_init = n_init
        self.random_state = random_state
        self.verbose = verbose

        # Results
        self.cluster_centers_ = None
        self.labels_ = None
        self.inertia_ = None
        self.n_iter_ = None
        self.result_ = None

    @classmethod
    def from_config(cls, config: KMeansConfig) -> 'KMeans':
        return cls(
            n_clusters=config.n_clusters,
            n_iter=config.n_iter,
            n_init=config.n_init,
            random_state=config.random_state,
            verbose=config.verbose,
        )

    @staticmethod
    def _to_points(X: Union[np.ndarray, Sequence[DataPoint]]) -> List[DataPoint]:
        if len(X) and isinstance(X[0], DataPoint):
            return list(X)
        return as_points(X)

    def fit(self, X: Union[np.ndarray, Sequence[DataPoint]]) -> 'KMeans':
        """
        Fit K-means clustering to the data.

        Args:
            X: Input data of shape (n_samples, n_features), or data points

        Returns:
            self
        """
        points = self._to_points(X)
        rng = check_random_state(self.random_state)

        if self.verbose:
            print(f"Fitting K-means with {self.n_clusters} clusters on {len(points)} samples...")

        best_inertia = float('inf')
        best_result = None

        # Try multiple initializations
        for init_run in range(self.n_init):
            if self.verbose and self.n_init > 1:
                print(f"Initialization {init_run + 1}/{self.n_init}")

            out_indices = np.zeros(len(points), dtype=np.uint64)
            result = k_means(points, out_indices, self.n_clusters, self.n_iter,
                             random_state=rng, verbose=self.verbose)
            if result is None:
                raise ValueError(
                    f"Cannot cluster {len(points)} samples into {self.n_clusters} clusters"
                )

            inertia = result.inertia()
            if inertia < best_inertia:
                best_inertia = inertia
                best_result = result

        self.result_ = best_result
        self.cluster_centers_ = np.vstack([c.to_numpy() for c in best_result.centroids()])
        self.labels_ = best_result.out_indices().astype(np.int64) - 1
        self.inertia_ = best_inertia
        self.n_iter_ = self.n_iter

        if self.verbose:
            print(f"Final inertia: {self.inertia_:.2f}")

        return self

    def predict(self, X: Union[np.ndarray, Sequence[DataPoint]]) -> np.ndarray:
        """
        Predict cluster labels for new data.

        Args:
            X: Input data of shape (n_samples, n_features), or data points

        Returns:
            Cluster labels (0-based)
        """
        if self.result_ is None:
            raise ValueError("Model must be fitted before prediction")

        indexed_centroids = list(enumerate(self.result_.centroids(), start=1))
        points = self._to_points(X)
        return np.array(
            [find_nearest_id(p, indexed_centroids) - 1 for p in points], dtype=np.int64
        )

    def fit_predict(self, X: Union[np.ndarray, Sequence[DataPoint]]) -> np.ndarray:
        """
        Fit the model and predict cluster labels.

        Args:
            X: Input data of shape (n_samples, n_features), or data points

        Returns:
            Cluster labels (0-based)
        """
        return self.fit(X).labels_

    def get_cluster_info(self) -> dict:
        """Get information about the clustering results."""
        if self.result_ is None:
            raise ValueError("Model must be fitted first")

        cluster_sizes = self.result_.cluster_sizes().astype(np.int64)

        return {
            'n_clusters': self.n_clusters,
            'inertia': self.inertia_,
            'n_iterations': self.n_iter_,
            'cluster_sizes': dict(enumerate(cluster_sizes.tolist())),
            'avg_cluster_size': float(np.mean(cluster_sizes)),
            'std_cluster_size': float(np.std(cluster_sizes)),
            'min_cluster_size': int(np.min(cluster_sizes)),
            'max_cluster_size': int(np.max(cluster_sizes))
        }
