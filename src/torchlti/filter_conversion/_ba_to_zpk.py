"""Factorization of a transfer function into zeros, poles and gain."""

from typing import Tuple

import torch
from torch import Tensor

from torchlti._tensor import as_float64_tensor
from torchlti.polynomial import polynomial_roots, trim_zeros


def ba_to_zpk(numerator, denominator) -> Tuple[Tensor, Tensor, Tensor]:
    """Factor B(z) / A(z) as ``k * prod(z - z_i) / prod(z - p_i)``.

    Parameters
    ----------
    numerator, denominator : Tensor or array_like
        Coefficients in descending powers of z.

    Returns
    -------
    zeros, poles : Tensor
        Roots of the numerator and denominator, complex128, equally many.
    gain : Tensor
        ``b[0] / a[0]`` after leading zeros are removed.

    Raises
    ------
    ValueError
        If either polynomial is identically zero.

    Notes
    -----
    Coefficients are powers of :math:`z^{-1}`, so a numerator shorter than
    the denominator means extra zeros at :math:`z = 0` (and vice versa).
    The shorter polynomial is extended with trailing zeros to make those
    origin roots explicit.
    """
    b = trim_zeros(as_float64_tensor(numerator).reshape(-1), "f")
    a = trim_zeros(as_float64_tensor(denominator).reshape(-1), "f")

    if b.numel() == 0 or a.numel() == 0:
        raise ValueError(
            "numerator and denominator must each have a nonzero coefficient"
        )

    length = max(b.numel(), a.numel())
    b = torch.nn.functional.pad(b, (0, length - b.numel()))
    a = torch.nn.functional.pad(a, (0, length - a.numel()))

    return polynomial_roots(b), polynomial_roots(a), b[0] / a[0]
