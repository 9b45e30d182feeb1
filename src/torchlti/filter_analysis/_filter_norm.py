"""L2 and L-infinity norms of digital filters."""

import math
import warnings
from typing import Optional, Union

import torch
from torch import Tensor

from torchlti._constants import INFINITY_NORM_POINTS
from torchlti.polynomial import polynomial_roots

from ._exceptions import ArityError, InvalidNormError, UnstableFilterWarning
from ._frequency_response import frequency_response
from ._impulse_response import impulse_response
from ._representation import as_filter_representation, validate_tolerance


def filter_norm(
    numerator,
    denominator=None,
    p: Union[int, float] = 2,
    tolerance: Optional[Union[float, Tensor]] = None,
) -> Tensor:
    """
    Compute the 2-norm or infinity-norm of a digital filter.

    Parameters
    ----------
    numerator : Tensor or array_like
        Numerator coefficients (b).
    denominator : Tensor or array_like
        Denominator coefficients (a). Required.
    p : int or float, default 2
        Either 2 or ``math.inf``.
    tolerance : float or Tensor, optional
        Decay threshold for truncating the impulse response of IIR filters
        (2-norm only, ignored for ``p = inf``). Defaults to
        :data:`~torchlti.DEFAULT_TOLERANCE`.

    Returns
    -------
    Tensor
        Non-negative 0-d float64 tensor. ``inf`` for the 2-norm of a filter
        whose largest pole magnitude is 1 or more.

    Raises
    ------
    ArityError
        If the denominator is omitted.
    ShapeError
        If numerator or denominator is not a vector.
    ToleranceShapeError
        If the 2-norm is requested with a tolerance that is not a
        non-negative scalar.
    InvalidNormError
        If ``p`` is neither 2 nor infinity.

    Warns
    -----
    UnstableFilterWarning
        If the 2-norm of a filter with a pole on or outside the unit circle
        is requested. The tolerance plays no part in this test.

    Notes
    -----
    By Parseval's theorem, the L2 norm of the frequency response equals the
    energy of the impulse response:

    .. math::
        \\|H\\|_2 = \\sqrt{\\sum_n |h[n]|^2}

    The infinity norm is the peak magnitude response,

    .. math::
        \\|H\\|_\\infty = \\max_{0 \\le \\omega < \\pi} |H(e^{j\\omega})|

    approximated on a grid of 1024 frequencies.

    Examples
    --------
    >>> import torch
    >>> from torchlti.filter_analysis import filter_norm
    >>> filter_norm(torch.tensor([1.0, 0.0]), torch.tensor([1.0, 0.5]))
    tensor(1.1547, dtype=torch.float64)
    """
    if denominator is None:
        raise ArityError("filter_norm requires both numerator and denominator")

    b, a = as_filter_representation(numerator, denominator)

    if p == 2:
        tolerance = validate_tolerance(tolerance)

        poles = polynomial_roots(a)
        if poles.numel() > 0 and float(poles.abs().max()) >= 1.0:
            warnings.warn(
                "The filter is not stable; its 2-norm is infinite.",
                UnstableFilterWarning,
            )
            return torch.tensor(math.inf, dtype=torch.float64)

        _, h = impulse_response(b, a, tolerance=tolerance)
        return torch.linalg.vector_norm(h).to(torch.float64)

    if p == math.inf:
        _, response = frequency_response(b, a, INFINITY_NORM_POINTS)
        return response.abs().max()

    raise InvalidNormError(f"p must be either 2 or inf, got {p!r}")
