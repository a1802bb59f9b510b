"""
Text rendering of a k-means result.
"""

import sys
from typing import Iterable, List, Optional, TextIO

from .result import KMeansResult

DECORATOR_WIDTH = 77


def _format_sequence(items: Iterable) -> str:
    return "[{}]".format(", ".join(str(item) for item in items))


def format_result(result: KMeansResult, width: int = DECORATOR_WIDTH) -> str:
    """Render the inputs, labels, centroids, sizes and clusters of ``result``."""
    lines: List[str] = []

    def block(title: str, body: str) -> None:
        lines.append(f"{title:-^{width}}")
        lines.append("")
        lines.append(body)
        lines.append("")

    block(" Input data points ", _format_sequence(result.points()))
    block(
        " Cluster indices for each point ",
        _format_sequence(int(i) for i in result.out_indices()),
    )
    block(" Centroids ", _format_sequence(result.centroids()))
    block(" Cluster Sizes ", _format_sequence(int(s) for s in result.cluster_sizes()))

    lines.append(f"{' CLUSTERS ':*^{width}}")
    lines.append("")
    for i, (centroid, satellites) in enumerate(result, start=1):
        block(f" Centroid {i}: {centroid} ", _format_sequence(satellites))
    return "\n".join(lines)


def print_result(result: Optional[KMeansResult], file: Optional[TextIO] = None) -> None:
    """Print ``result``, or a notice when ``k_means`` rejected its input."""
    if file is None:
        file = sys.stdout
    if result is None:
        print("k_means returned None", file=file)
        return
    print(format_result(result), file=file)
