"""Normalization of the accepted filter representations."""

from typing import NamedTuple, Optional, Union

import torch
from torch import Tensor

from torchlti._constants import DEFAULT_TOLERANCE
from torchlti._tensor import as_float64_tensor
from torchlti.filter_conversion import sos_to_ba

from ._exceptions import ShapeError, ToleranceShapeError


class TransferFunction(NamedTuple):
    """Numerator and denominator coefficients in descending powers of z^-1."""

    numerator: Tensor
    denominator: Tensor


class SecondOrderSections(NamedTuple):
    """Cascade of biquads, shape (n_sections, 6), rows [b0, b1, b2, a0, a1, a2]."""

    sections: Tensor


FilterRepresentation = Union[TransferFunction, SecondOrderSections]


def as_filter_representation(
    numerator,
    denominator=None,
) -> FilterRepresentation:
    """Classify filter coefficients as a transfer function or a cascade.

    Parameters
    ----------
    numerator : Tensor or array_like
        Numerator coefficients, or a second-order sections matrix when
        ``denominator`` is omitted.
    denominator : Tensor or array_like, optional
        Denominator coefficients. Defaults to ``[1]`` for a vector numerator.

    Returns
    -------
    TransferFunction or SecondOrderSections
        Coefficients converted to float64 (complex128 for complex input).
        Vectors are flattened to 1-D.

    Raises
    ------
    ShapeError
        If two arguments are given and either is not a vector, or a single
        argument is neither a vector nor a matrix of more than one section
        with six columns.

    Notes
    -----
    A vector is a 0-d or 1-d tensor, or a 2-d tensor with a single row. The
    vector test runs before the matrix test, so a single row of six
    coefficients is an FIR filter rather than a one-section cascade.
    """
    b = _as_coefficients(numerator)

    if denominator is None:
        if _is_vector(b):
            return TransferFunction(
                b.reshape(-1), torch.ones(1, dtype=b.dtype, device=b.device)
            )
        if b.ndim == 2 and b.shape[0] > 1 and b.shape[1] > 1:
            if b.shape[1] != 6:
                raise ShapeError(
                    f"second-order sections must have 6 columns, "
                    f"got shape {tuple(b.shape)}"
                )
            return SecondOrderSections(b)
        raise ShapeError(
            f"expected a coefficient vector or a second-order sections "
            f"matrix, got shape {tuple(b.shape)}"
        )

    a = _as_coefficients(denominator)
    if not (_is_vector(b) and _is_vector(a)):
        raise ShapeError(
            f"numerator and denominator must be vectors, got shapes "
            f"{tuple(b.shape)} and {tuple(a.shape)}"
        )

    return TransferFunction(b.reshape(-1), a.reshape(-1))


def resolve_transfer_function(
    numerator,
    denominator=None,
) -> TransferFunction:
    """Return the transfer function of either accepted representation.

    Second-order sections are multiplied out once with
    :func:`~torchlti.filter_conversion.sos_to_ba`.
    """
    representation = as_filter_representation(numerator, denominator)

    if isinstance(representation, SecondOrderSections):
        return TransferFunction(*sos_to_ba(representation.sections))

    return representation


def validate_tolerance(tolerance: Optional[Union[float, Tensor]]) -> float:
    """Return ``tolerance`` as a float, or the default when it is None.

    Raises
    ------
    ToleranceShapeError
        If the tolerance has more than one element, is complex, or is
        negative or NaN.
    """
    if tolerance is None:
        return DEFAULT_TOLERANCE

    t = as_float64_tensor(tolerance)
    if t.numel() != 1:
        raise ToleranceShapeError(
            f"a scalar is expected as the tolerance value, got shape "
            f"{tuple(t.shape)}"
        )
    if t.is_complex():
        raise ToleranceShapeError("the tolerance must be real")

    value = float(t.reshape(()))
    if not value >= 0.0:
        raise ToleranceShapeError(
            f"the tolerance must be non-negative, got {value}"
        )

    return value


def _as_coefficients(x) -> Tensor:
    x = as_float64_tensor(x)
    if x.numel() == 0:
        raise ShapeError("coefficient arrays must not be empty")
    return x


def _is_vector(x: Tensor) -> bool:
    return x.ndim <= 1 or (x.ndim == 2 and x.shape[0] == 1)
