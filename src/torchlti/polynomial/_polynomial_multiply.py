"""Multiplication of polynomials given as coefficient vectors."""

import torch
from torch import Tensor


def polynomial_multiply(x: Tensor, y: Tensor) -> Tensor:
    """Multiply two polynomials (full linear convolution of coefficients).

    Parameters
    ----------
    x, y : Tensor
        1-D coefficient vectors in the same power ordering.

    Returns
    -------
    Tensor
        Product coefficients of length ``len(x) + len(y) - 1``, in the
        promoted dtype of the inputs.

    Examples
    --------
    >>> polynomial_multiply(torch.tensor([1.0, 1.0]), torch.tensor([1.0, -1.0]))
    tensor([ 1.,  0., -1.])
    """
    n = x.numel()
    m = y.numel()
    dtype = torch.promote_types(x.dtype, y.dtype)
    result = torch.zeros(n + m - 1, dtype=dtype, device=x.device)

    for i in range(n):
        result[i : i + m] += x[i] * y

    return result
