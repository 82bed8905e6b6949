import numpy as np
import pytest

from spgkit.algebra import (
    ShapeMismatchError,
    assign,
    clone,
    combine,
    empty_like,
    scale,
    swap,
    update,
)


@pytest.fixture
def poisoned() -> np.ndarray:
    return np.full(4, np.nan)


def test_combine_zero_fills_without_reading_source(poisoned):
    dst = np.arange(4, dtype=float)
    combine(dst, 0, poisoned)
    assert np.array_equal(dst, np.zeros(4))


def test_combine_unit_coefficients():
    x = np.array([1.0, -2.0, 3.5])
    dst = np.empty(3)
    combine(dst, 1, x)
    assert np.array_equal(dst, x)
    combine(dst, -1, x)
    assert np.array_equal(dst, -x)
    combine(dst, 2.5, x)
    assert np.allclose(dst, 2.5 * x)


def test_combine_returns_destination():
    x = np.ones(2)
    dst = np.empty(2)
    assert combine(dst, 3.0, x) is dst
    assert combine(dst, 1, x, 1, x) is dst
    assert update(dst, 1, x) is dst


def test_update_with_zero_leaves_destination_unchanged(poisoned):
    dst = np.array([1.0, 2.0, 3.0, 4.0])
    update(dst, 0, poisoned)
    assert np.array_equal(dst, [1.0, 2.0, 3.0, 4.0])


@pytest.mark.parametrize("alpha", [1.0, -1.0, 0.25, -3.0])
def test_update_matches_axpy(rng, alpha):
    dst = rng.standard_normal(5)
    x = rng.standard_normal(5)
    expected = dst + alpha * x
    update(dst, alpha, x)
    assert np.allclose(dst, expected)


@pytest.mark.parametrize("alpha", [0.0, 1.0, -1.0, 0.5])
@pytest.mark.parametrize("beta", [0.0, 1.0, -1.0, -2.0])
def test_combine_two_sources_matches_reference(rng, alpha, beta):
    x = rng.standard_normal((2, 3))
    y = rng.standard_normal((2, 3))
    dst = np.empty((2, 3))
    combine(dst, alpha, x, beta, y)
    assert np.allclose(dst, alpha * x + beta * y)


def test_combine_two_sources_skips_zero_coefficient_source(poisoned):
    x = np.array([1.0, 2.0, 3.0, 4.0])
    dst = np.empty(4)
    combine(dst, 2.0, x, 0.0, poisoned)
    assert np.array_equal(dst, 2.0 * x)
    combine(dst, 0.0, poisoned, -1.0, x)
    assert np.array_equal(dst, -x)


@pytest.mark.parametrize("stp", [1.0, -1.0, 0.3])
def test_combine_in_place_advance_matches_fresh_buffer(rng, stp):
    x = rng.standard_normal(6)
    d = rng.standard_normal(6)
    fresh = np.empty(6)
    combine(fresh, 1, x, stp, d)
    combine(x, 1, x, stp, d)
    assert np.allclose(x, fresh)


@pytest.mark.parametrize("alpha,beta", [(0.5, 2.0), (1.0, 3.0), (-1.0, 0.5), (2.0, -1.0)])
def test_combine_destination_aliasing_second_source(rng, alpha, beta):
    x = rng.standard_normal(6)
    y = rng.standard_normal(6)
    expected = alpha * x + beta * y
    combine(y, alpha, x, beta, y)
    assert np.allclose(y, expected)


def test_combine_with_all_arguments_aliased():
    x = np.array([1.0, -2.0, 4.0])
    combine(x, 0.5, x, 2.0, x)
    assert np.allclose(x, [2.5, -5.0, 10.0])


def test_combine_requires_both_second_coefficient_and_vector():
    x = np.ones(2)
    with pytest.raises(TypeError):
        combine(x, 1.0, x, 2.0)


def test_combine_rejects_shape_mismatch():
    with pytest.raises(ShapeMismatchError):
        combine(np.empty(3), 1.0, np.ones(3), 1.0, np.ones(2))
    with pytest.raises(ShapeMismatchError):
        update(np.empty(3), 1.0, np.ones(4))


def test_combine_keeps_single_precision():
    x = np.array([1.0, 2.0], dtype=np.float32)
    dst = np.empty(2, dtype=np.float32)
    combine(dst, 0.1, x, 0.2, x)
    assert dst.dtype == np.float32
    assert np.allclose(dst, 0.3 * x)


def test_swap_exchanges_contents():
    x = np.array([[1.0, 2.0], [3.0, 4.0]])
    y = np.array([[5.0, 6.0], [7.0, 8.0]])
    swap(x, y)
    assert np.array_equal(x, [[5.0, 6.0], [7.0, 8.0]])
    assert np.array_equal(y, [[1.0, 2.0], [3.0, 4.0]])


def test_swap_with_itself_is_a_no_op():
    x = np.array([1.0, 2.0])
    swap(x, x)
    assert np.array_equal(x, [1.0, 2.0])


def test_scale_and_assign():
    x = np.array([1.0, -2.0])
    scale(x, -3.0)
    assert np.array_equal(x, [-3.0, 6.0])
    dst = np.zeros(2)
    assign(dst, x)
    assert np.array_equal(dst, x)


def test_empty_like_and_clone_are_contiguous_and_independent():
    x = np.asfortranarray(np.arange(6, dtype=float).reshape(2, 3))
    y = clone(x)
    assert y.flags.c_contiguous
    assert np.array_equal(y, x)
    y[0, 0] = 100.0
    assert x[0, 0] == 0.0
    e = empty_like(x)
    assert e.shape == x.shape and e.dtype == x.dtype and e.flags.c_contiguous


def test_update_writes_through_views():
    base = np.zeros((3, 3))
    column = base[:, 1]
    update(column, 2.0, np.ones(3))
    assert np.array_equal(base[:, 1], [2.0, 2.0, 2.0])
    assert np.array_equal(base[:, 0], np.zeros(3))


@pytest.mark.parametrize(
    "operation",
    [
        lambda dst, x: update(dst, 0.5, x),
        lambda dst, x: combine(dst, 2.0, x),
        lambda dst, x: combine(dst, 1, x, -1, x),
        lambda dst, x: scale(dst, 3),
    ],
)
def test_integer_destination_is_rejected(operation):
    dst = np.array([1, 2, 3])
    with pytest.raises(TypeError, match="floating-point"):
        operation(dst, np.ones(3))
    assert np.array_equal(dst, [1, 2, 3])


def test_integer_vectors_are_valid_sources():
    dst = np.zeros(3)
    update(dst, 0.5, np.array([2, 4, 6]))
    assert np.array_equal(dst, [1.0, 2.0, 3.0])
