"""Maximum-phase test for digital filters."""

from typing import Optional, Union

from torch import Tensor

from ._representation import resolve_transfer_function, validate_tolerance
from ._root_classification import classify_roots


def is_maximum_phase(
    numerator,
    denominator=None,
    tolerance: Optional[Union[float, Tensor]] = None,
) -> bool:
    """
    Determine whether a digital filter is maximum phase (maximum energy-delay).

    Parameters
    ----------
    numerator : Tensor or array_like
        Numerator coefficients (b), or a second-order sections matrix of
        shape (n_sections, 6) when ``denominator`` is omitted.
    denominator : Tensor or array_like, optional
        Denominator coefficients (a). Defaults to [1].
    tolerance : float or Tensor, optional
        Guard band around the unit circle. Defaults to
        :data:`~torchlti.DEFAULT_TOLERANCE`.

    Returns
    -------
    bool
        True if all zeros satisfy ``|z| > 1 + tolerance`` and all poles
        satisfy ``|z| < 1 - tolerance``.

    Raises
    ------
    ShapeError
        If the coefficients do not describe a filter.
    ToleranceShapeError
        If the tolerance is not a non-negative scalar.

    Examples
    --------
    >>> import torch
    >>> from torchlti.filter_analysis import is_maximum_phase
    >>> is_maximum_phase(torch.tensor([1.0, -2.0]))
    True
    """
    b, a = resolve_transfer_function(numerator, denominator)
    tolerance = validate_tolerance(tolerance)

    _, zeros_outside = classify_roots(b, tolerance)
    poles_inside, _ = classify_roots(a, tolerance)

    return zeros_outside and poles_inside
