"""Minimum-phase test for digital filters."""

from typing import Optional, Union

from torch import Tensor

from ._representation import resolve_transfer_function, validate_tolerance
from ._root_classification import classify_roots


def is_minimum_phase(
    numerator,
    denominator=None,
    tolerance: Optional[Union[float, Tensor]] = None,
) -> bool:
    """
    Determine whether a digital filter is minimum phase.

    Parameters
    ----------
    numerator : Tensor or array_like
        Numerator coefficients (b), or a second-order sections matrix of
        shape (n_sections, 6) when ``denominator`` is omitted.
    denominator : Tensor or array_like, optional
        Denominator coefficients (a). If not specified and ``numerator`` is
        a vector, the filter is FIR (denominator = [1]).
    tolerance : float or Tensor, optional
        Guard band around the unit circle. Defaults to
        :data:`~torchlti.DEFAULT_TOLERANCE`.

    Returns
    -------
    bool
        True if all zeros and all poles satisfy ``|z| < 1 - tolerance``.

    Raises
    ------
    ShapeError
        If the coefficients do not describe a filter.
    ToleranceShapeError
        If the tolerance is not a non-negative scalar.

    Notes
    -----
    A minimum-phase system is stable and has a stable, causal inverse. A
    numerator or denominator without roots never violates the condition.

    References
    ----------
    A. V. Oppenheim and R. W. Schafer, Discrete-Time Signal Processing,
    3rd ed., Pearson, 2009.

    Examples
    --------
    >>> import torch
    >>> from torchlti.filter_analysis import is_minimum_phase
    >>> is_minimum_phase(torch.tensor([3.0, 1.0]), torch.tensor([1.0, 0.5]))
    True
    """
    b, a = resolve_transfer_function(numerator, denominator)
    tolerance = validate_tolerance(tolerance)

    zeros_inside, _ = classify_roots(b, tolerance)
    poles_inside, _ = classify_roots(a, tolerance)

    return zeros_inside and poles_inside
