"""Vector validation for the algebra layer.

A *vector* is a NumPy array or a torch tensor of real elements, of any rank.
Vectors combined by one operation must be of the same kind and have the same
shape.
"""

from __future__ import annotations

from typing import Union

import numpy as np
import torch

Vector = Union[np.ndarray, torch.Tensor]


class ShapeMismatchError(ValueError):
    """Raised when vectors combined by one operation do not have the same shape."""

    def __init__(self, expected: tuple[int, ...], actual: tuple[int, ...]) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Vector shape mismatch: expected {expected}, got {actual}."
        )


def is_vector(x: object) -> bool:
    """Return True if ``x`` is a NumPy array or torch tensor with real elements."""
    if isinstance(x, np.ndarray):
        return x.dtype.kind in "fiu"
    if isinstance(x, torch.Tensor):
        return not x.is_complex() and x.dtype != torch.bool
    return False


def shape_of(x: Vector) -> tuple[int, ...]:
    return tuple(x.shape)


def check_vector(x: object, name: str = "x") -> None:
    """Raise TypeError unless ``x`` is a real NumPy array or torch tensor."""
    if is_vector(x):
        return
    if isinstance(x, (np.ndarray, torch.Tensor)):
        raise TypeError(
            f"{name} must have real elements, got dtype {x.dtype}."
        )
    raise TypeError(
        f"{name} must be a numpy.ndarray or torch.Tensor, got {type(x).__name__}."
    )


def check_compatible(*vectors: Vector) -> None:
    """
    Check that all arguments are vectors of the same kind and shape.

    Raises
    ------
    TypeError
        If an argument is not a real vector or if NumPy arrays and torch
        tensors are mixed.
    ShapeMismatchError
        If two vectors have different shapes.
    """
    if not vectors:
        return
    first = vectors[0]
    check_vector(first, "argument 0")
    expected = shape_of(first)
    for k, other in enumerate(vectors[1:], start=1):
        check_vector(other, f"argument {k}")
        if isinstance(other, np.ndarray) != isinstance(first, np.ndarray):
            raise TypeError(
                "Cannot combine numpy.ndarray and torch.Tensor vectors."
            )
        actual = shape_of(other)
        if actual != expected:
            raise ShapeMismatchError(expected, actual)


def is_floating(x: Vector) -> bool:
    if isinstance(x, np.ndarray):
        return x.dtype.kind == "f"
    return x.is_floating_point()


def check_floating(x: Vector, name: str = "dst") -> None:
    """Raise TypeError unless ``x`` can hold the result of a scaled update."""
    check_vector(x, name)
    if not is_floating(x):
        raise TypeError(
            f"{name} must have a floating-point dtype to be written in place, "
            f"got {x.dtype}."
        )


def same_buffer(a: Vector, b: Vector) -> bool:
    """Return True if ``a`` and ``b`` address exactly the same elements."""
    if a is b:
        return True
    if isinstance(a, np.ndarray):
        return (
            a.__array_interface__["data"][0] == b.__array_interface__["data"][0]
            and a.strides == b.strides
            and a.dtype == b.dtype
        )
    return (
        a.data_ptr() == b.data_ptr()
        and a.stride() == b.stride()
        and a.dtype == b.dtype
    )


__all__ = [
    "Vector",
    "ShapeMismatchError",
    "is_vector",
    "check_vector",
    "check_compatible",
    "check_floating",
    "is_floating",
    "same_buffer",
    "shape_of",
]
