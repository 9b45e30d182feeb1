"""Impulse response of digital filters and the length needed to capture it."""

import math
import warnings
from typing import Optional, Tuple, Union

import torch
from torch import Tensor

from torchlti._constants import MAX_IMPULSE_RESPONSE_LENGTH
from torchlti._tensor import as_float64_tensor
from torchlti.polynomial import polynomial_roots, trim_zeros

from ._exceptions import ImpulseResponseTruncationWarning
from ._representation import validate_tolerance


def impulse_response(
    numerator,
    denominator=None,
    n_samples: Optional[int] = None,
    tolerance: Optional[Union[float, Tensor]] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Response of a digital filter to a unit impulse.

    Parameters
    ----------
    numerator : Tensor or array_like
        Numerator coefficients b, highest power of z first.
    denominator : Tensor or array_like, optional
        Denominator coefficients a. Omitted for FIR filters.
    n_samples : int, optional
        Length of the response. Chosen by :func:`impulse_response_length`
        when omitted.
    tolerance : float or Tensor, optional
        Decay level passed to :func:`impulse_response_length`.

    Returns
    -------
    time : Tensor
        Sample indices 0, 1, ..., n_samples - 1 as float64.
    response : Tensor
        h[n], float64 (complex128 when a coefficient is complex).

    Raises
    ------
    ValueError
        If ``a[0]`` is zero or ``n_samples`` is less than one.

    Notes
    -----
    After dividing both polynomials by :math:`a_0`, the samples follow the
    recursion

    .. math::
        h[n] = b_n - \\sum_{k=1}^{M} a_k h[n - k]

    with :math:`b_n = 0` beyond the numerator. Without feedback terms this
    is the numerator itself, zero-padded to ``n_samples``.

    Examples
    --------
    >>> import torch
    >>> from torchlti.filter_analysis import impulse_response
    >>> t, h = impulse_response(torch.tensor([1.0]), torch.tensor([1.0, -0.5]), 4)
    >>> h
    tensor([1.0000, 0.5000, 0.2500, 0.1250], dtype=torch.float64)
    """
    b = as_float64_tensor(numerator).reshape(-1)
    if denominator is None:
        a = torch.ones(1, dtype=torch.float64, device=b.device)
    else:
        a = as_float64_tensor(denominator).reshape(-1)

    if a[0] == 0:
        raise ValueError(
            "the leading denominator coefficient must be nonzero"
        )

    dtype = (
        torch.complex128
        if b.is_complex() or a.is_complex()
        else torch.float64
    )
    a0 = a[0].to(dtype)
    b = b.to(dtype) / a0
    a = a.to(dtype) / a0

    if n_samples is None:
        n_samples = impulse_response_length(b, a, tolerance)
    elif n_samples < 1:
        raise ValueError(f"n_samples must be positive, got {n_samples}")

    response = torch.zeros(n_samples, dtype=dtype, device=b.device)
    n_b = min(b.numel(), n_samples)
    response[:n_b] = b[:n_b]

    a = trim_zeros(a, "b")
    if a.numel() > 1:
        feedback = a[1:]
        for i in range(1, n_samples):
            k = min(i, feedback.numel())
            response[i] = response[i] - torch.dot(
                feedback[:k], response[i - k : i].flip(0)
            )

    t = torch.arange(n_samples, dtype=torch.float64, device=b.device)

    return t, response


def impulse_response_length(
    numerator: Tensor,
    denominator: Optional[Tensor] = None,
    tolerance: Optional[Union[float, Tensor]] = None,
) -> int:
    """
    Number of impulse response samples needed to capture a filter.

    Parameters
    ----------
    numerator : Tensor
        Numerator coefficients (b).
    denominator : Tensor, optional
        Denominator coefficients (a). Defaults to [1].
    tolerance : float or Tensor, optional
        Relative envelope level at which the response is considered to have
        decayed. Defaults to :data:`~torchlti.DEFAULT_TOLERANCE`.

    Returns
    -------
    int
        - FIR filters (including poles only at the origin): the length of
          the longer polynomial.
        - Stable IIR filters: the number of samples for the envelope of the
          slowest pole, ``|p|^n``, to fall below ``tolerance``, plus the
          numerator length.
        - Unstable IIR filters: the number of samples for the envelope to
          grow beyond ``1 / tolerance``.
        - Poles on the unit circle: five periods of the slowest oscillating
          pole, and at least 30 samples.

    Warns
    -----
    ImpulseResponseTruncationWarning
        If the length exceeds ``MAX_IMPULSE_RESPONSE_LENGTH`` and is capped.
    """
    tolerance = validate_tolerance(tolerance)

    b = as_float64_tensor(numerator).reshape(-1)
    if denominator is None:
        return b.numel()
    a = as_float64_tensor(denominator).reshape(-1)

    roots = polynomial_roots(a)
    magnitudes = roots.abs()
    if magnitudes.numel() == 0 or float(magnitudes.max()) == 0.0:
        return max(b.numel(), a.numel())

    max_pole = float(magnitudes.max())
    log_tolerance = math.log(max(tolerance, torch.finfo(torch.float64).tiny))
    precision = 1e-10

    if max_pole < 1.0 - precision:
        length = math.ceil(log_tolerance / math.log(max_pole)) + b.numel()
    elif max_pole > 1.0 + precision:
        length = math.ceil(-log_tolerance / math.log(max_pole))
    else:
        on_circle = (roots.abs() - 1.0).abs() <= precision
        angles = torch.angle(roots[on_circle]).abs()
        angles = angles[angles > precision]
        length = 30
        if angles.numel() > 0:
            period = 2 * math.pi / float(angles.min())
            length = max(length, math.ceil(5 * period))

    if length > MAX_IMPULSE_RESPONSE_LENGTH:
        warnings.warn(
            f"Impulse response needs {length} samples to decay; truncating "
            f"to {MAX_IMPULSE_RESPONSE_LENGTH}.",
            ImpulseResponseTruncationWarning,
        )
        length = MAX_IMPULSE_RESPONSE_LENGTH

    return max(length, 1)
