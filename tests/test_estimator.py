import numpy as np
import pytest
from sklearn.metrics import pairwise_distances_argmin

from kmeans.config import KMeansConfig
from kmeans.estimator import KMeans
from kmeans.point import as_points


def _make_blobs(seed=42):
    rng = np.random.default_rng(seed)
    return np.vstack([
        rng.normal(loc=0.0, scale=0.5, size=(40, 4)),
        rng.normal(loc=6.0, scale=0.5, size=(40, 4)),
        rng.normal(loc=-6.0, scale=0.5, size=(40, 4)),
    ])


def test_fit_attributes():
    X = _make_blobs()
    km = KMeans(n_clusters=3, n_iter=10, random_state=0).fit(X)
    assert km.cluster_centers_.shape == (3, 4)
    assert km.labels_.shape == (120,)
    assert km.labels_.min() >= 0 and km.labels_.max() < 3
    assert km.inertia_ == pytest.approx(km.result_.inertia())
    assert km.n_iter_ == 10
    assert np.array_equal(km.labels_ + 1, km.result_.out_indices().astype(np.int64))


def test_labels_match_nearest_center():
    X = _make_blobs(seed=1)
    km = KMeans(n_clusters=4, n_iter=5, random_state=3).fit(X)
    # The final labelling is made against the final centroids.
    assert np.array_equal(km.labels_, pairwise_distances_argmin(X, km.cluster_centers_))
    assert np.array_equal(km.predict(X), km.labels_)


def test_predict_new_points():
    X = _make_blobs()
    km = KMeans(n_clusters=3, random_state=0).fit(X)
    queries = np.array([[0.1, 0.0, -0.1, 0.0], [6.1, 5.9, 6.0, 6.0]])
    expected = pairwise_distances_argmin(queries, km.cluster_centers_)
    assert np.array_equal(km.predict(queries), expected)
    assert np.array_equal(km.predict(as_points(queries)), expected)


def test_integer_data_gets_double_centers():
    X = np.arange(30).reshape(10, 3)
    km = KMeans(n_clusters=2, n_iter=3, random_state=0).fit(X)
    assert km.cluster_centers_.dtype == np.float64


def test_multiple_inits_keep_best():
    X = _make_blobs(seed=5)
    km = KMeans(n_clusters=3, n_iter=5, n_init=4, random_state=2).fit(X)
    assert km.inertia_ == pytest.approx(km.result_.inertia())
    assert len(km.fit_predict(X)) == len(X)


def test_errors():
    km = KMeans(n_clusters=3)
    with pytest.raises(ValueError):
        km.predict(np.zeros((2, 2)))
    with pytest.raises(ValueError):
        km.get_cluster_info()
    with pytest.raises(ValueError):
        km.fit(np.zeros((2, 2)))
    with pytest.raises(ValueError):
        KMeans(n_clusters=1).fit(np.zeros((5, 2)))


def test_cluster_info():
    X = _make_blobs()
    km = KMeans(n_clusters=3, random_state=0).fit(X)
    info = km.get_cluster_info()
    assert info['n_clusters'] == 3
    assert sum(info['cluster_sizes'].values()) == len(X)
    assert info['min_cluster_size'] <= info['avg_cluster_size'] <= info['max_cluster_size']


def test_from_config():
    config = KMeansConfig(n_clusters=5, n_iter=7, n_init=2, random_state=9)
    km = KMeans.from_config(config)
    assert (km.n_clusters, km.n_iter, km.n_init, km.random_state) == (5, 7, 2, 9)


def test_config_validation():
    assert KMeansConfig(dtype="float32").dtype == "float32"
    assert KMeansConfig(dtype=np.int64).dtype == "int64"
    with pytest.raises(ValueError):
        KMeansConfig(n_iter=-1)
    with pytest.raises(ValueError):
        KMeansConfig(n_init=0)
