"""
Configuration for clustering runs.
"""

from dataclasses import dataclass
from typing import Optional

import numpy as np


@dataclass
class KMeansConfig:
    """Configuration for a k-means run."""
    # Clustering parameters
    n_clusters: int = 4
    n_iter: int = 10  # Update/relabel passes after the initial labelling
    n_init: int = 1   # Independent seedings, the lowest inertia wins

    # Experimental settings
    random_state: Optional[int] = None
    verbose: bool = False
    dtype: str = "int64"  # Element type of the demo points

    def __post_init__(self):
        """Normalise the dtype name and reject impossible run counts."""
        self.dtype = np.dtype(self.dtype).name
        if self.n_iter < 0:
            raise ValueError(f"n_iter must be >= 0, got {self.n_iter}")
        if self.n_init < 1:
            raise ValueError(f"n_init must be >= 1, got {self.n_init}")
