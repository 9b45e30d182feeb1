"""Transfer function to cascade of biquads."""

import torch
from torch import Tensor

from torchlti._tensor import as_float64_tensor

from ._ba_to_zpk import ba_to_zpk
from ._zpk_to_sos import zpk_to_sos


def ba_to_sos(numerator, denominator) -> Tensor:
    """Split a real transfer function into second-order sections.

    Parameters
    ----------
    numerator, denominator : Tensor or array_like
        Real coefficients in descending powers of z. Complex tensors are
        accepted when every imaginary part is zero.

    Returns
    -------
    Tensor
        Sections of shape (n_sections, 6), see :func:`zpk_to_sos`.

    Raises
    ------
    ValueError
        If a coefficient has a nonzero imaginary part, or the roots do not
        pair into conjugates.

    Notes
    -----
    The polynomials are factored with :func:`ba_to_zpk` and the roots are
    grouped by :func:`zpk_to_sos`, so a conjugate pair always shares a
    section.

    Examples
    --------
    >>> import torch
    >>> from torchlti.filter_conversion import ba_to_sos
    >>> ba_to_sos(torch.tensor([1.0, 0.0, 0.0]), torch.tensor([1.0, 0.0, 0.25]))
    tensor([[1.0000, 0.0000, 0.0000, 1.0000, 0.0000, 0.2500]], dtype=torch.float64)
    """
    polynomials = []
    for coefficients in (numerator, denominator):
        coefficients = as_float64_tensor(coefficients)
        if coefficients.is_complex():
            if torch.any(coefficients.imag != 0):
                raise ValueError(
                    "complex coefficients cannot be converted to real "
                    "second-order sections"
                )
            coefficients = coefficients.real
        polynomials.append(coefficients)

    return zpk_to_sos(*ba_to_zpk(*polynomials))
