"""Allpass test for digital filters."""

from typing import Optional, Union

from torch import Tensor

from torchlti.filter_conversion import sos_to_ba
from torchlti.polynomial import trim_zeros

from ._exceptions import ShapeError
from ._representation import (
    SecondOrderSections,
    TransferFunction,
    as_filter_representation,
    validate_tolerance,
)


def is_allpass(
    numerator,
    denominator=None,
    tolerance: Optional[Union[float, Tensor]] = None,
) -> bool:
    """
    Determine whether a digital filter is allpass.

    Parameters
    ----------
    numerator : Tensor or array_like
        Numerator coefficients (b), or a second-order sections matrix of
        shape (n_sections, 6) when ``denominator`` is omitted.
    denominator : Tensor or array_like, optional
        Denominator coefficients (a). Required unless ``numerator`` is a
        second-order sections matrix.
    tolerance : float or Tensor, optional
        Largest coefficient difference treated as equal. Defaults to
        :data:`~torchlti.DEFAULT_TOLERANCE`.

    Returns
    -------
    bool
        True if, after removing leading and trailing zeros and scaling the
        numerator by its last and the denominator by its first coefficient,
        the numerator equals the conjugated, reversed denominator or its
        negative. Numerator and denominator of different lengths are never
        allpass.

    Raises
    ------
    ShapeError
        If a single argument is not a second-order sections matrix, two
        arguments are not vectors, or a polynomial is all zeros.
    ToleranceShapeError
        If the tolerance is not a non-negative scalar.

    Notes
    -----
    An allpass filter has the form

    .. math::
        H(z) = \\pm \\frac{z^{-N} \\overline{A}(1/\\overline{z})}{A(z)}

    so its numerator is the conjugate of its denominator in reverse order,
    up to sign and scale.

    References
    ----------
    J.-J. Shyu and S.-C. Pei, "A new approach to the design of complex
    all-pass IIR digital filters," Signal Processing, 40(2-3), 207-215, 1994.

    P. P. Vaidyanathan, Multirate Systems and Filter Banks, Prentice Hall,
    1992.

    Examples
    --------
    >>> import torch
    >>> from torchlti.filter_analysis import is_allpass
    >>> is_allpass(torch.tensor([3.0, 2.0, 1.0]), torch.tensor([1.0, 2.0, 3.0]))
    True
    """
    if denominator is None:
        representation = as_filter_representation(numerator)
        if isinstance(representation, TransferFunction):
            raise ShapeError(
                "a second-order sections matrix is required when no "
                "denominator is given"
            )
    else:
        representation = as_filter_representation(numerator, denominator)
    tolerance = validate_tolerance(tolerance)

    if isinstance(representation, SecondOrderSections):
        b, a = sos_to_ba(representation.sections)
    else:
        b, a = representation
        if b.numel() != a.numel():
            return False

    b = trim_zeros(b)
    a = trim_zeros(a)
    if b.numel() == 0 or a.numel() == 0:
        raise ShapeError("numerator and denominator must not be all zeros")
    if b.numel() != a.numel():
        return False

    b = b / b[-1]
    a = a / a[0]
    reference = a.conj().flip(0)

    return bool(
        ((b - reference).abs() <= tolerance).all()
        or ((b + reference).abs() <= tolerance).all()
    )
