"""Sampling of a transfer function on the unit circle."""

import math
from typing import Optional, Tuple

import torch
from torch import Tensor

from torchlti._constants import DEFAULT_FREQUENCY_POINTS
from torchlti._tensor import as_float64_tensor


def frequency_response(
    numerator,
    denominator=None,
    n_points: int = DEFAULT_FREQUENCY_POINTS,
    whole: bool = False,
    sampling_frequency: Optional[float] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Evaluate B(z) / A(z) at equally spaced points of the unit circle.

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
        Report frequencies in Hz for this sampling rate instead of in
        radians per sample.

    Returns
    -------
    frequencies : Tensor
        Sample frequencies, float64, increasing, without the endpoint.
    response : Tensor
        H(e^{jw}) at each frequency, complex128.

    Raises
    ------
    ValueError
        If ``n_points`` is not a positive integer.

    Notes
    -----
    With :math:`x = e^{-j\\omega}`,

    .. math::
        H(e^{j\\omega}) = \\frac{b_0 + b_1 x + \\dots + b_N x^N}
                               {a_0 + a_1 x + \\dots + a_M x^M}

    and both polynomials are evaluated by Horner's rule. The grid matches
    :func:`scipy.signal.freqz` with an integer ``worN``.

    Examples
    --------
    >>> import torch
    >>> from torchlti.filter_analysis import frequency_response
    >>> w, h = frequency_response(torch.tensor([1.0]), torch.tensor([1.0, -0.5]), 4)
    >>> h[0]
    tensor(2.+0.j, dtype=torch.complex128)
    """
    b = as_float64_tensor(numerator).reshape(-1).to(torch.complex128)
    w = frequency_grid(n_points, whole, device=b.device)
    x = torch.exp(-1j * w)

    response = _horner(b, x)
    if denominator is not None:
        a = as_float64_tensor(denominator).reshape(-1).to(torch.complex128)
        response = response / _horner(a, x)

    if sampling_frequency is not None:
        w = w * (sampling_frequency / (2 * math.pi))

    return w, response


def frequency_grid(
    n_points: int,
    whole: bool = False,
    *,
    device: Optional[torch.device] = None,
) -> Tensor:
    """Angular frequencies ``k * w_max / n_points`` for ``k < n_points``.

    ``w_max`` is 2*pi when ``whole`` is True and pi otherwise.
    """
    if isinstance(n_points, bool) or not isinstance(n_points, int):
        raise ValueError(f"n_points must be an int, got {n_points!r}")
    if n_points < 1:
        raise ValueError(f"n_points must be positive, got {n_points}")

    span = 2 * math.pi if whole else math.pi
    step = span / n_points

    return step * torch.arange(n_points, dtype=torch.float64, device=device)


def _horner(coefficients: Tensor, x: Tensor) -> Tensor:
    """Sum of ``coefficients[k] * x**k``; an empty polynomial evaluates to 1."""
    if coefficients.numel() == 0:
        return torch.ones_like(x)

    value = torch.zeros_like(x, dtype=coefficients.dtype)
    for c in coefficients.flip(0):
        value = value * x + c

    return value
