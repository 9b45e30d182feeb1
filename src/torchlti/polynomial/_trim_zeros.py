"""Removal of leading and trailing zero coefficients."""

from torch import Tensor


def trim_zeros(coefficients: Tensor, trim: str = "fb") -> Tensor:
    """Remove exact zeros from the front and/or back of a coefficient vector.

    Parameters
    ----------
    coefficients : Tensor
        1-D coefficient vector.
    trim : str, default "fb"
        ``"f"`` trims leading zeros, ``"b"`` trims trailing zeros,
        ``"fb"`` trims both.

    Returns
    -------
    Tensor
        View of ``coefficients`` without the requested zero runs. An all-zero
        input yields an empty tensor.

    Examples
    --------
    >>> trim_zeros(torch.tensor([0.0, 1.0, 2.0, 0.0]))
    tensor([1., 2.])
    """
    if trim not in ("f", "b", "fb", "bf"):
        raise ValueError(f"trim must be 'f', 'b' or 'fb', got {trim!r}")

    nonzero = (coefficients != 0).nonzero()
    if nonzero.numel() == 0:
        return coefficients[:0]

    start = int(nonzero[0, 0]) if "f" in trim else 0
    stop = int(nonzero[-1, 0]) + 1 if "b" in trim else coefficients.numel()

    return coefficients[start:stop]
