"""Removal of jumps from sampled phase responses."""

import math

import torch
from torch import Tensor

from torchlti._constants import PHASE_UNWRAP_THRESHOLD
from torchlti._tensor import as_float64_tensor


def unwrap_phase(
    phase: Tensor,
    threshold: float = PHASE_UNWRAP_THRESHOLD,
) -> Tensor:
    """
    Remove jumps of about pi or more from a phase sequence.

    Parameters
    ----------
    phase : Tensor
        1-D phase samples in radians, ordered by frequency.
    threshold : float, default pi - 0.05
        Adjacent samples differing by more than this are a jump.

    Returns
    -------
    Tensor
        Phase with every jump removed (float64). The input is not modified.

    Raises
    ------
    ValueError
        If a sample is infinite. NaN samples are left in place and never
        count as a jump.

    Notes
    -----
    The first jump found is removed by shifting every later sample by pi
    against the direction of the jump, then the sequence is scanned again
    from the start. Shifting by pi rather than 2*pi also removes the jumps
    caused by sign changes of a real-valued amplitude response, such as at
    the zeros of a linear-phase FIR filter. The result is a fixed point:
    unwrapping it again returns it unchanged.

    Examples
    --------
    >>> import torch
    >>> from torchlti.filter_analysis import unwrap_phase
    >>> unwrap_phase(torch.tensor([0.0, 0.1, 3.3, 3.4]))
    tensor([0.0000, 0.1000, 0.1584, 0.2584], dtype=torch.float64)
    """
    phase = as_float64_tensor(phase).clone()
    if bool(torch.isinf(phase).any()):
        raise ValueError("phase samples must not be infinite")

    while True:
        jumps = torch.diff(phase)
        found = (jumps.abs() > threshold).nonzero()
        if found.numel() == 0:
            return phase

        index = int(found[0, 0])
        if jumps[index] > 0:
            phase[index + 1 :] -= math.pi
        else:
            phase[index + 1 :] += math.pi
