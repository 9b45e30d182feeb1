"""Phase response computation for digital filters."""

from __future__ import annotations

from typing import Optional

import torch
from torch import Tensor

from torchlti._constants import DEFAULT_FREQUENCY_POINTS

from ._frequency_response import frequency_response
from ._representation import SecondOrderSections, as_filter_representation
from ._unwrap_phase import unwrap_phase


def phase_response(
    numerator,
    denominator=None,
    n_points: int = DEFAULT_FREQUENCY_POINTS,
    whole: bool = False,
    sampling_frequency: Optional[float] = None,
) -> tuple[Tensor, Tensor]:
    """
    Compute the unwrapped phase response of a digital filter.

    Parameters
    ----------
    numerator : Tensor or array_like
        Numerator coefficients (b), or a second-order sections matrix of
        shape (n_sections, 6) when ``denominator`` is omitted.
    denominator : Tensor or array_like, optional
        Denominator coefficients (a). Defaults to [1].
    n_points : int, default 512
        Number of frequency points.
    whole : bool, default False
        If True, evaluate over [0, 2*pi) instead of [0, pi).
    sampling_frequency : float, optional
        If given, frequencies are returned in Hz.

    Returns
    -------
    phase : Tensor
        Unwrapped phase in radians (float64).
    frequencies : Tensor
        Frequencies in radians/sample, or Hz if ``sampling_frequency`` is
        given.

    Raises
    ------
    ShapeError
        If the coefficients do not describe a filter.
    ValueError
        If ``n_points`` is not a positive integer.

    Notes
    -----
    The phase of each representation is unwrapped with
    :func:`unwrap_phase`. For second-order sections the unwrapped phases of
    the individual sections are summed, since the phases of cascaded filters
    add.

    References
    ----------
    A. V. Oppenheim and R. W. Schafer, Discrete-Time Signal Processing,
    3rd ed., Pearson, 2009.

    Examples
    --------
    >>> import torch
    >>> from torchlti.filter_analysis import phase_response
    >>> # Moving average: phase is -w * (N - 1) / 2
    >>> phi, w = phase_response(torch.ones(4) / 4)
    """
    representation = as_filter_representation(numerator, denominator)

    if isinstance(representation, SecondOrderSections):
        phase = None
        for section in representation.sections:
            w, response = frequency_response(
                section[:3], section[3:], n_points, whole, sampling_frequency
            )
            section_phase = unwrap_phase(torch.angle(response))
            phase = section_phase if phase is None else phase + section_phase
        return phase, w

    w, response = frequency_response(
        representation.numerator,
        representation.denominator,
        n_points,
        whole,
        sampling_frequency,
    )

    return unwrap_phase(torch.angle(response)), w
