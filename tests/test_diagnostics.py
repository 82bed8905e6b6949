"""Tests for callback diagnostics and debug mode."""

import numpy as np
import pytest
import torch

from spgkit.diagnostics import (
    approx_grad,
    assert_idempotent,
    check_gradient,
    debug_context,
    is_debug_enabled,
    is_idempotent,
    set_debug_enabled,
)
from spgkit.optimize import identity, nonnegative, spg


def quadratic(x, g):
    g[...] = np.array([2.0, 6.0]) * x
    return float(x[0] ** 2 + 3 * x[1] ** 2)


def test_approx_grad_matches_linear_function():
    def fg(x, g):
        g[...] = 0.0
        return float(3 * x[0] - 2 * x[1])

    grad = approx_grad(fg, np.array([0.2, -0.1]))
    assert np.allclose(grad, np.array([3.0, -2.0]), atol=1e-6)


def test_approx_grad_does_not_modify_point():
    x = np.array([0.5, -1.5])
    approx_grad(quadratic, x)
    assert np.array_equal(x, [0.5, -1.5])


def test_approx_grad_invalid_eps():
    with pytest.raises(ValueError):
        approx_grad(quadratic, np.array([0.0, 0.0]), eps=0.0)


def test_check_gradient_accepts_correct_gradient():
    assert check_gradient(quadratic, np.array([0.5, -1.5])) < 1e-6


def test_check_gradient_detects_wrong_gradient():
    def wrong(x, g):
        g[...] = x
        return float(x @ x)

    assert check_gradient(wrong, np.array([1.0, 2.0])) > 0.5


def test_check_gradient_on_torch_matrix():
    def fg(x, g):
        g.copy_(2 * x)
        return float(torch.sum(x * x))

    x = torch.arange(6, dtype=torch.float64).reshape(2, 3)
    assert check_gradient(fg, x) < 1e-6


def test_idempotence_checks():
    x = np.array([-1.0, 2.0])
    assert is_idempotent(nonnegative, x)

    def halve(dst, src):
        np.multiply(src, 0.5, out=dst)
        return dst

    assert not is_idempotent(halve, x)
    with pytest.raises(ValueError):
        assert_idempotent(halve, x)
    assert_idempotent(identity, x)


def test_debug_context_restores_previous_state():
    set_debug_enabled(False)
    with debug_context(True):
        assert is_debug_enabled()
    assert not is_debug_enabled()


def test_debug_mode_rejects_non_idempotent_projector():
    def halve(dst, src):
        np.multiply(src, 0.5, out=dst)
        return dst

    def fg(x, g):
        g[...] = 2 * x
        return float(x @ x)

    with debug_context(True):
        with pytest.raises(ValueError):
            spg(fg, halve, np.array([4.0]), m=1)


def test_debug_mode_rejects_non_finite_initial_objective():
    def fg(x, g):
        g[...] = 0.0
        return float("nan")

    with debug_context(True):
        with pytest.raises(ValueError):
            spg(fg, identity, np.array([1.0]), m=1)
