"""
Example: Box-constrained fitting with torch tensors

The objective and gradient are computed with torch autograd; the solver
works directly on the tensor variables through the generic vector algebra.
"""

import torch

from spgkit import box_projector, norm_inf, spg


def main() -> None:
    torch.manual_seed(0)
    a_mat = torch.randn(50, 6, dtype=torch.float64)
    b_vec = torch.randn(50, dtype=torch.float64)

    def fg(x: torch.Tensor, g: torch.Tensor) -> float:
        xv = x.detach().requires_grad_(True)
        loss = 0.5 * torch.sum((a_mat @ xv - b_vec) ** 2) + 0.05 * torch.sum(xv**4)
        (grad,) = torch.autograd.grad(loss, xv)
        g.copy_(grad)
        return float(loss)

    prj = box_projector(-0.25, 0.25)
    result = spg(fg, prj, torch.zeros(6, dtype=torch.float64), m=10, eps1=1e-9, eps2=1e-9)

    g = torch.empty_like(result.x)
    fg(result.x, g)
    step = result.x - torch.clamp(result.x - g, -0.25, 0.25)
    print(f"Status: {result.message}")
    print(f"Solution: {result.x.numpy().round(4)}")
    print(f"Objective: {result.fun:.6e}")
    print(f"Projected gradient inf-norm: {norm_inf(step):.2e}")
    if result.success:
        print("SPG torch box demo converged")


if __name__ == "__main__":
    main()
