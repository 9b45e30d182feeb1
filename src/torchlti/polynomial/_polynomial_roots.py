"""Roots of polynomials given in descending powers."""

import torch
from torch import Tensor

from ._trim_zeros import trim_zeros


def polynomial_roots(coefficients: Tensor) -> Tensor:
    """Find the roots of a polynomial from its coefficients.

    Parameters
    ----------
    coefficients : Tensor
        1-D coefficients in descending order ``[c_n, c_{n-1}, ..., c_0]``
        representing ``c_n x^n + ... + c_0``. Real or complex.

    Returns
    -------
    Tensor
        Complex128 roots. Leading zero coefficients are ignored, each trailing
        zero coefficient contributes a root at the origin. Constant and zero
        polynomials have no roots.

    Notes
    -----
    The roots are the eigenvalues of the companion matrix of the monic
    polynomial obtained after stripping leading and trailing zeros.

    Examples
    --------
    >>> polynomial_roots(torch.tensor([1.0, -3.0, 2.0]))
    tensor([2.+0.j, 1.+0.j], dtype=torch.complex128)
    """
    c = coefficients.reshape(-1)
    dtype = torch.complex128 if c.is_complex() else torch.float64
    c = c.to(dtype)

    core = trim_zeros(c, "fb")
    if core.numel() == 0:
        return torch.zeros(0, dtype=torch.complex128, device=c.device)

    n_origin = c.numel() - int((c != 0).nonzero()[-1, 0]) - 1
    origin = torch.zeros(n_origin, dtype=torch.complex128, device=c.device)

    n = core.numel() - 1
    if n == 0:
        return origin

    core = core / core[0]

    # Companion matrix: ones on the subdiagonal, negated coefficients on the
    # first row. Real polynomials keep a real matrix so that complex roots
    # come out as exact conjugate pairs.
    companion = torch.zeros((n, n), dtype=dtype, device=c.device)
    if n > 1:
        companion[1:, :-1] = torch.eye(n - 1, dtype=dtype, device=c.device)
    companion[0, :] = -core[1:]

    return torch.cat([torch.linalg.eigvals(companion), origin])
