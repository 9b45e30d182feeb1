"""Conversion of coefficient arguments to double-precision tensors."""

import torch
from torch import Tensor


def as_float64_tensor(x) -> Tensor:
    """Return ``x`` as a float64 tensor, or complex128 if ``x`` is complex.

    Python and NumPy inputs are converted directly at double precision, so
    float literals are not rounded through the default dtype first.
    """
    if isinstance(x, Tensor):
        return x.to(torch.complex128 if x.is_complex() else torch.float64)

    dtype = (
        torch.complex128 if torch.as_tensor(x).is_complex() else torch.float64
    )
    return torch.as_tensor(x, dtype=dtype)
