"""Group delay of digital filters."""

from __future__ import annotations

import math
import warnings
from typing import Optional

import torch
from torch import Tensor

from torchlti._constants import DEFAULT_FREQUENCY_POINTS
from torchlti._tensor import as_float64_tensor
from torchlti.polynomial import polynomial_multiply

from ._exceptions import SingularGroupDelayWarning
from ._frequency_response import _horner, frequency_grid


def group_delay(
    numerator,
    denominator=None,
    n_points: int = DEFAULT_FREQUENCY_POINTS,
    whole: bool = False,
    sampling_frequency: Optional[float] = None,
) -> tuple[Tensor, Tensor]:
    """
    Delay, in samples, that each frequency component experiences.

    Parameters
    ----------
    numerator : Tensor or array_like
        Numerator coefficients b, highest power of z first.
    denominator : Tensor or array_like, optional
        Denominator coefficients a. Omitted for FIR filters.
    n_points : int, default 512
        Number of samples.
    whole : bool, default False
        Sample [0, 2*pi) rather than [0, pi).
    sampling_frequency : float, optional
        Report frequencies in Hz for this sampling rate.

    Returns
    -------
    frequencies : Tensor
        Sample frequencies, float64.
    delay : Tensor
        Group delay at each frequency, float64.

    Warns
    -----
    SingularGroupDelayWarning
        If the response vanishes at some frequencies. The delay is reported
        as 0 there.

    Notes
    -----
    The group delay :math:`\\tau(\\omega) = -d\\phi / d\\omega` is found
    without differentiating the phase. Let :math:`M` be the denominator
    degree and

    .. math::
        C(z) = B(z) \\, z^{-M} \\overline{A}(1 / \\overline{z}),

    whose phase is that of :math:`H` minus :math:`M\\omega`. For a
    polynomial, :math:`-d\\phi/d\\omega` is the real part of
    :math:`\\sum_k k c_k x^k / \\sum_k c_k x^k` with :math:`x = e^{-j\\omega}`,
    which gives the delay after subtracting :math:`M`. This is the method of
    :func:`scipy.signal.group_delay`.

    Examples
    --------
    >>> import torch
    >>> from torchlti.filter_analysis import group_delay
    >>> w, delay = group_delay(torch.tensor([0.0, 0.0, 1.0]), n_points=4)
    >>> delay
    tensor([2., 2., 2., 2.], dtype=torch.float64)
    """
    b = as_float64_tensor(numerator).reshape(-1).to(torch.complex128)
    if denominator is None:
        a = torch.ones(1, dtype=torch.complex128, device=b.device)
    else:
        a = as_float64_tensor(denominator).reshape(-1).to(torch.complex128)

    w = frequency_grid(n_points, whole, device=b.device)
    x = torch.exp(-1j * w)

    c = polynomial_multiply(b, a.flip(0).conj())
    ramp = torch.arange(c.numel(), dtype=torch.float64, device=b.device)

    num = _horner(c * ramp, x)
    den = _horner(c, x)

    singular = den.abs() < 10 * torch.finfo(torch.float64).eps
    if torch.any(singular):
        warnings.warn(
            f"The group delay is singular at {int(singular.sum())} "
            f"frequencies; setting it to 0 there.",
            SingularGroupDelayWarning,
        )
        den = torch.where(singular, torch.ones_like(den), den)

    delay = (num / den).real - (a.numel() - 1)
    delay = torch.where(singular, torch.zeros_like(delay), delay)

    if sampling_frequency is not None:
        w = w * (sampling_frequency / (2 * math.pi))

    return w, delay
