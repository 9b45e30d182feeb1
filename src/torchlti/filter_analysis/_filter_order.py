"""Order of digital filters."""

from ._representation import SecondOrderSections, as_filter_representation


def filter_order(numerator, denominator=None) -> int:
    """
    Return the order of a digital filter.

    Parameters
    ----------
    numerator : Tensor or array_like
        Numerator coefficients (b), or a second-order sections matrix of
        shape (n_sections, 6) when ``denominator`` is omitted.
    denominator : Tensor or array_like, optional
        Denominator coefficients (a). Defaults to [1].

    Returns
    -------
    int
        For coefficients, ``max(len(b) - 1, len(a) - 1)`` as given (zeros
        are not trimmed). For second-order sections, two per section before
        the last, plus the degree implied by the number of nonzero
        coefficients in the numerator or denominator of the last section.

    Raises
    ------
    ShapeError
        If the coefficients do not describe a filter.

    Examples
    --------
    >>> import torch
    >>> from torchlti.filter_analysis import filter_order
    >>> filter_order(torch.tensor([1.0, 0.0, 0.0]), torch.tensor([1.0, 0.0, 0.0, 0.0]))
    3
    """
    representation = as_filter_representation(numerator, denominator)

    if isinstance(representation, SecondOrderSections):
        sos = representation.sections
        last = sos[-1]
        nonzero = max(
            int((last[:3] != 0).sum()),
            int((last[3:] != 0).sum()),
        )
        return (sos.shape[0] - 1) * 2 + nonzero - 1

    b, a = representation

    return max(b.numel() - 1, a.numel() - 1)
