"""
Cluster a small sample of 3-D points and print the result.

Usage:
    python -m kmeans --k 4 --n-iter 10 --dtype float32 --seed 42
"""

import argparse
import sys
from typing import List, Optional

import numpy as np

from .config import KMeansConfig
from .display import print_result
from .kmeans import k_means
from .point import DataPoint, as_points

# Rows of (3i + 1, 3i + 2, 3i + 3), deliberately out of order.
SAMPLE_ROWS = [
    (1, 2, 3), (4, 5, 6), (7, 8, 9), (28, 29, 30),
    (31, 32, 33), (34, 35, 36), (19, 20, 21), (22, 23, 24),
    (25, 26, 27), (10, 11, 12), (13, 14, 15), (16, 17, 18),
    (37, 38, 39), (40, 41, 42),
]


def sample_points(dtype: str = "int64") -> List[DataPoint]:
    return as_points(SAMPLE_ROWS, dtype=dtype)


def parse_args(argv: Optional[List[str]] = None) -> KMeansConfig:
    p = argparse.ArgumentParser(description="Fixed-iteration k-means demo")
    p.add_argument('--k', type=int, default=4, help='Number of clusters')
    p.add_argument('--n-iter', type=int, default=10, help='Update/relabel passes after the first labelling')
    p.add_argument('--dtype', default='int64', choices=['int64', 'float32', 'float64'],
                   help='Element type of the sample points')
    p.add_argument('--seed', type=int, default=None, help='Seed for the centroid sample')
    p.add_argument('--verbose', action='store_true', help='Print progress information')
    args = p.parse_args(argv)
    try:
        return KMeansConfig(
            n_clusters=args.k,
            n_iter=args.n_iter,
            random_state=args.seed,
            verbose=args.verbose,
            dtype=args.dtype,
        )
    except ValueError as e:
        p.error(str(e))


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    points = sample_points(config.dtype)
    out_indices = np.zeros(len(points), dtype=np.uint64)

    result = k_means(points, out_indices, config.n_clusters, config.n_iter,
                     random_state=config.random_state, verbose=config.verbose)
    print_result(result)
    return 0 if result is not None else 1


if __name__ == "__main__":
    sys.exit(main())
