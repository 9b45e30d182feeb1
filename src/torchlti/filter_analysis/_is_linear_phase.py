"""Linear-phase test for digital filters."""

from typing import Optional, Union

import torch
from torch import Tensor

from torchlti._constants import LINEAR_PHASE_GROUP_DELAY_POINTS
from torchlti.polynomial import trim_zeros

from ._exceptions import ShapeError
from ._group_delay import group_delay
from ._representation import resolve_transfer_function, validate_tolerance


def is_linear_phase(
    numerator,
    denominator=None,
    tolerance: Optional[Union[float, Tensor]] = None,
) -> bool:
    """
    Determine whether a digital filter has linear phase.

    Parameters
    ----------
    numerator : Tensor or array_like
        Numerator coefficients (b), or a second-order sections matrix of
        shape (n_sections, 6) when ``denominator`` is omitted.
    denominator : Tensor or array_like, optional
        Denominator coefficients (a). Defaults to [1].
    tolerance : float or Tensor, optional
        Allowed deviation of the group delay from its mean (IIR filters).
        Defaults to :data:`~torchlti.DEFAULT_TOLERANCE`.

    Returns
    -------
    bool
        For FIR filters, whether the coefficients are symmetric. For IIR
        filters, whether the group delay is constant within ``tolerance``.

    Raises
    ------
    ShapeError
        If the coefficients do not describe a filter, or the numerator or
        denominator is all zeros.
    ToleranceShapeError
        If the tolerance is not a non-negative scalar.

    Notes
    -----
    Leading and trailing zeros are removed from both polynomials first. If
    the denominator is then a single coefficient, the filter is FIR and has
    linear phase when its coefficients read the same in both directions (the
    centre tap of an odd-length filter is not compared). The comparison is
    exact.

    Otherwise the group delay is sampled at 128 frequencies in [0, pi) and
    every sample must differ from the mean by less than ``tolerance``.

    References
    ----------
    A. V. Oppenheim and R. W. Schafer, Discrete-Time Signal Processing,
    3rd ed., Pearson, 2009.

    S. Paquelet and V. Savaux, "On the symmetry of FIR filter with linear
    phase," Digital Signal Processing, vol. 81, pp. 57-60, 2018.

    Examples
    --------
    >>> import torch
    >>> from torchlti.filter_analysis import is_linear_phase
    >>> is_linear_phase(torch.tensor([1.0, 2.0, 4.0, 4.0, 2.0, 1.0]))
    True
    """
    b, a = resolve_transfer_function(numerator, denominator)
    tolerance = validate_tolerance(tolerance)

    b = _trim(b, "numerator")
    a = _trim(a, "denominator")

    if a.numel() == 1:
        half = b.numel() // 2
        return bool(torch.equal(b[:half], b[b.numel() - half :].flip(0)))

    _, gd = group_delay(b, a, LINEAR_PHASE_GROUP_DELAY_POINTS)

    return bool(((gd - gd.mean()).abs() < tolerance).all())


def _trim(coefficients: Tensor, name: str) -> Tensor:
    trimmed = trim_zeros(coefficients)
    if trimmed.numel() == 0:
        raise ShapeError(f"the {name} has no nonzero coefficient")
    return trimmed
