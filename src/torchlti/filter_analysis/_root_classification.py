"""Classification of polynomial roots against the unit circle."""

from typing import Tuple

from torch import Tensor

from torchlti.polynomial import polynomial_roots


def classify_roots(
    coefficients: Tensor,
    tolerance: float,
) -> Tuple[bool, bool]:
    """Test whether all roots lie strictly inside or outside the unit circle.

    Parameters
    ----------
    coefficients : Tensor
        1-D polynomial coefficients in descending order.
    tolerance : float
        Width of the guard band around the unit circle.

    Returns
    -------
    inside : bool
        True if every root satisfies ``|z| < 1 - tolerance``.
    outside : bool
        True if every root satisfies ``|z| > 1 + tolerance``.

    Notes
    -----
    A polynomial without roots (degree 0) satisfies both conditions. A root
    within ``tolerance`` of the unit circle satisfies neither.
    """
    magnitudes = polynomial_roots(coefficients).abs()

    if magnitudes.numel() == 0:
        return True, True

    inside = bool((magnitudes < 1.0 - tolerance).all())
    outside = bool((magnitudes > 1.0 + tolerance).all())

    return inside, outside
