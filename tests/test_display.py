import io

import numpy as np
import pytest

from kmeans.__main__ import SAMPLE_ROWS, main, sample_points
from kmeans.display import DECORATOR_WIDTH, format_result, print_result
from kmeans.kmeans import k_means


def _run_sample(k=4, n=10, dtype="int64"):
    points = sample_points(dtype)
    out = np.zeros(len(points), dtype=np.uint64)
    return k_means(points, out, k, n, random_state=0)


def test_format_result_blocks():
    result = _run_sample()
    text = format_result(result)
    for title in (" Input data points ", " Cluster indices for each point ",
                  " Centroids ", " Cluster Sizes ", " CLUSTERS "):
        assert title in text
    assert "(1, 2, 3)" in text
    for i in range(1, 5):
        assert f" Centroid {i}: " in text
    # Decorated title lines span the full width.
    decorated = [line for line in text.splitlines() if line.startswith(("-", "*"))]
    assert len(decorated) == 4 + 1 + 4
    assert all(len(line) == DECORATOR_WIDTH for line in decorated)


def test_format_result_lists_satellites():
    result = _run_sample(k=2, n=3)
    text = format_result(result)
    for centroid, satellites in result:
        members = ", ".join(str(p) for p in satellites)
        assert f"[{members}]" in text


def test_print_result(capsys):
    print_result(_run_sample())
    assert "CLUSTERS" in capsys.readouterr().out

    buf = io.StringIO()
    print_result(None, file=buf)
    assert buf.getvalue() == "k_means returned None\n"


def test_sample_points():
    points = sample_points("float32")
    assert len(points) == len(SAMPLE_ROWS) == 14
    assert all(p.dtype == np.float32 and p.dim == 3 for p in points)


@pytest.mark.parametrize("dtype", ["int64", "float32", "float64"])
def test_main(dtype, capsys):
    assert main(["--seed", "3", "--dtype", dtype]) == 0
    assert "Centroid 4:" in capsys.readouterr().out


def test_main_rejected(capsys):
    assert main(["--k", "1"]) == 1
    assert main(["--k", "15"]) == 1
    assert "k_means returned None" in capsys.readouterr().out


def test_main_bad_arguments():
    with pytest.raises(SystemExit):
        main(["--n-iter", "-1"])
