"""Cascade of biquads multiplied out into a single transfer function."""

from typing import Tuple

import torch
from torch import Tensor

from torchlti.polynomial import polynomial_multiply, trim_zeros


def sos_to_ba(sos: Tensor) -> Tuple[Tensor, Tensor]:
    """Multiply second-order sections out into (b, a).

    Parameters
    ----------
    sos : Tensor
        Sections of shape (n_sections, 6), rows ``[b0, b1, b2, a0, a1, a2]``.
        Rows need not be normalized to ``a0 = 1``.

    Returns
    -------
    b, a : Tensor
        Products of the section numerators and of the section denominators,
        highest power of z first, with trailing zeros removed (at least one
        coefficient is kept). An empty cascade is the identity ``([1], [1])``.

    Examples
    --------
    >>> import torch
    >>> from torchlti.filter_conversion import sos_to_ba
    >>> sos_to_ba(torch.tensor([[1.0, 1.0, 0.0, 1.0, -0.5, 0.0]] * 2))
    (tensor([1., 2., 1.]), tensor([ 1.0000, -1.0000,  0.2500]))
    """
    if sos.numel() == 0:
        one = torch.ones(1, dtype=sos.dtype, device=sos.device)
        return one, one.clone()

    numerator, denominator = sos[0, :3], sos[0, 3:]
    for row in sos[1:]:
        numerator = polynomial_multiply(numerator, row[:3])
        denominator = polynomial_multiply(denominator, row[3:])

    return _drop_trailing_zeros(numerator), _drop_trailing_zeros(denominator)


def _drop_trailing_zeros(coefficients: Tensor) -> Tensor:
    trimmed = trim_zeros(coefficients, "b")
    if trimmed.numel() == 0:
        return coefficients[:1].clone()
    return trimmed
