"""SPG on torch tensors."""

import torch

from spgkit.optimize import Status, box_projector, identity, spg


def test_torch_unconstrained_quadratic():
    def fg(x: torch.Tensor, g: torch.Tensor) -> float:
        g.copy_(2 * x)
        return float(torch.sum(x * x))

    res = spg(fg, identity, torch.tensor([10.0], dtype=torch.float64), m=1)
    assert res.status in (Status.INFNORM_CONVERGENCE, Status.TWONORM_CONVERGENCE)
    assert isinstance(res.x, torch.Tensor)
    assert torch.allclose(res.x, torch.zeros(1, dtype=torch.float64), atol=1e-8)


def test_torch_box_constrained_least_squares(torch_rng):
    a = torch.randn(30, 4, generator=torch_rng, dtype=torch.float64)
    b = torch.randn(30, generator=torch_rng, dtype=torch.float64)

    def fg(x: torch.Tensor, g: torch.Tensor) -> float:
        r = a @ x - b
        g.copy_(a.T @ r)
        return 0.5 * float(r @ r)

    prj = box_projector(-0.1, 0.1)
    res = spg(
        fg, prj, torch.zeros(4, dtype=torch.float64), m=10, eps1=1e-10, eps2=1e-10, eps3=0.0
    )
    assert res.success
    assert torch.all(res.x <= 0.1) and torch.all(res.x >= -0.1)

    # Optimality: the projected gradient step leaves the solution in place.
    g = torch.empty(4, dtype=torch.float64)
    fg(res.x, g)
    moved = torch.clamp(res.x - g, -0.1, 0.1)
    assert torch.allclose(moved, res.x, atol=1e-8)


def test_torch_input_requiring_grad_is_supported():
    x0 = torch.tensor([3.0, -4.0], dtype=torch.float64, requires_grad=True)

    def fg(x: torch.Tensor, g: torch.Tensor) -> float:
        g.copy_(x)
        return 0.5 * float(x @ x)

    res = spg(fg, identity, x0, m=2)
    assert torch.allclose(res.x, torch.zeros(2, dtype=torch.float64), atol=1e-6)
    assert torch.equal(x0.detach(), torch.tensor([3.0, -4.0], dtype=torch.float64))
