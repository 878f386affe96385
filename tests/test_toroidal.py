import numpy as np

from tilesampling.analysis.toroidal import (
    check_min_distance,
    min_toroidal_distance,
    pairwise_toroidal_sq_dist,
    toroidal_delta,
    toroidal_sq_dist,
    toroidal_sq_dist_by_translation,
    wrap_crossing_pairs,
    wrap_unit,
)


def test_wrap_unit_maps_into_half_open_square():
    v = wrap_unit(np.array([-0.25, 0.0, 0.5, 1.0, 1.25]))
    assert np.allclose(v, [0.75, 0.0, 0.5, 0.0, 0.25])


def test_wrap_unit_tiny_negative_does_not_round_to_one():
    v = wrap_unit(np.array([-1e-18, -1e-17]))
    assert np.all(v >= 0.0)
    assert np.all(v < 1.0)


def test_delta_takes_shorter_way_around():
    d = toroidal_delta([0.05, 0.5], [0.95, 0.5])
    assert np.allclose(d, [0.1, 0.0])
    assert np.isclose(toroidal_sq_dist([0.05, 0.02], [0.95, 0.98]), 0.1 ** 2 + 0.04 ** 2)


def test_closed_form_matches_translation_definition():
    rng = np.random.default_rng(0)
    p = rng.random((500, 2))
    q = rng.random((500, 2))
    assert np.allclose(toroidal_sq_dist(p, q), toroidal_sq_dist_by_translation(p, q))


def test_pairwise_matrix_is_symmetric_with_inf_diagonal():
    pts = np.array([[0.1, 0.1], [0.9, 0.1], [0.5, 0.5]])
    d2 = pairwise_toroidal_sq_dist(pts)
    assert d2.shape == (3, 3)
    assert np.all(np.isinf(np.diag(d2)))
    assert np.allclose(d2, d2.T)
    assert np.isclose(d2[0, 1], 0.2 ** 2)


def test_min_distance_helpers():
    assert min_toroidal_distance(np.array([[0.5, 0.5]])) == float("inf")
    pts = np.array([[0.01, 0.5], [0.99, 0.5], [0.5, 0.5]])
    assert np.isclose(min_toroidal_distance(pts), 0.02)
    assert check_min_distance(pts, 0.019)
    assert not check_min_distance(pts, 0.05)
    assert check_min_distance(np.empty((0, 2)), 0.5)


def test_wrap_crossing_pairs():
    pts = np.array([[0.05, 0.5], [0.95, 0.5], [0.5, 0.5]])
    pairs = wrap_crossing_pairs(pts)
    assert pairs.tolist() == [[0, 1]]
