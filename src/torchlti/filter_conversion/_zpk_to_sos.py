"""Grouping of zeros and poles into real second-order sections."""

from typing import List, Optional, Tuple

import torch
from torch import Tensor

from torchlti._tensor import as_float64_tensor

def zpk_to_sos(
    zeros: Tensor,
    poles: Tensor,
    gain: Tensor,
) -> Tensor:
    """
    Group zeros and poles into real biquads.

    Parameters
    ----------
    zeros : Tensor
        Zeros of the filter. Complex zeros must come in conjugate pairs.
    poles : Tensor
        Poles of the filter. Complex poles must come in conjugate pairs.
    gain : Tensor
        System gain (real).

    Returns
    -------
    sos : Tensor
        Second-order sections, shape (n_sections, 6), float64.
        Each row is [b0, b1, b2, a0, a1, a2] with a0 = 1.

    Raises
    ------
    ValueError
        If the zeros or poles do not form conjugate pairs.

    Notes
    -----
    The shorter of ``zeros`` and ``poles`` is padded with roots at the origin.
    Conjugate pairs are kept together, remaining real roots are paired in
    order of increasing magnitude, and quadratic pole factors are ordered so
    that the poles closest to the unit circle come last. For odd orders the
    single first-order factor forms the last section, [b0, b1, 0, 1, a1, 0].
    The gain is applied to the numerator of the first section.
    """
    zeros = zeros.to(torch.complex128)
    poles = poles.to(torch.complex128)
    gain = as_float64_tensor(gain)
    if gain.is_complex():
        gain = gain.real

    n = max(zeros.numel(), poles.numel())
    zeros = _pad_with_origin(zeros, n)
    poles = _pad_with_origin(poles, n)

    if n == 0:
        sos = torch.tensor(
            [[1.0, 0.0, 0.0, 1.0, 0.0, 0.0]], dtype=torch.float64
        )
        sos[0, 0] = gain
        return sos

    zero_quadratics, zero_linear = _factors(zeros, "zeros")
    pole_quadratics, pole_linear = _factors(poles, "poles")

    # Poles closest to the unit circle last
    pole_quadratics.sort(key=lambda factor: factor[1])
    zero_quadratics.sort(key=lambda factor: factor[1])

    sections = [
        torch.cat([z, p])
        for (z, _), (p, _) in zip(zero_quadratics, pole_quadratics)
    ]
    if pole_linear is not None:
        sections.append(torch.cat([zero_linear, pole_linear]))

    sos = torch.stack(sections)

    numerator = sos[:, :3].clone()
    numerator[0] = numerator[0] * gain

    return torch.cat([numerator, sos[:, 3:]], dim=1)


def _pad_with_origin(roots: Tensor, length: int) -> Tensor:
    padding = torch.zeros(
        length - roots.numel(), dtype=roots.dtype, device=roots.device
    )
    return torch.cat([roots, padding])


def _factors(
    roots: Tensor, name: str
) -> Tuple[List[Tuple[Tensor, float]], Optional[Tensor]]:
    """Group roots into real quadratic factors and at most one linear factor.

    Returns a list of ``(coefficients, magnitude)`` for the quadratic factors,
    and the linear factor coefficients (or None when the count is even).
    """
    real_roots, complex_roots = _split_conjugates(roots, name)

    quadratics = []
    for r in complex_roots:
        quadratics.append(
            (
                torch.stack(
                    [
                        torch.ones((), dtype=torch.float64),
                        -2 * r.real,
                        r.real**2 + r.imag**2,
                    ]
                ),
                float(r.abs()),
            )
        )

    real_roots = real_roots[torch.argsort(real_roots.abs())]
    while real_roots.numel() >= 2:
        r1, r2 = real_roots[0], real_roots[1]
        real_roots = real_roots[2:]
        quadratics.append(
            (
                torch.stack(
                    [torch.ones((), dtype=torch.float64), -(r1 + r2), r1 * r2]
                ),
                float(max(r1.abs(), r2.abs())),
            )
        )

    linear = None
    if real_roots.numel() == 1:
        linear = torch.stack(
            [
                torch.ones((), dtype=torch.float64),
                -real_roots[0],
                torch.zeros((), dtype=torch.float64),
            ]
        )

    return quadratics, linear


def _split_conjugates(roots: Tensor, name: str) -> Tuple[Tensor, Tensor]:
    """Return the real roots and one representative of each conjugate pair.

    Roots whose imaginary part is below 1e-6 of their real part, and roots
    within 1e-6 of the origin, count as real. Each pair is represented by
    its member in the upper half plane.
    """
    if roots.numel() == 0:
        return roots.real, roots

    tiny = roots.abs() < 1e-6
    real = tiny | (roots.imag.abs() < 1e-6 * roots.real.abs() + 1e-10)

    upper = ~real & (roots.imag > 0)
    if int(upper.sum()) != int((~real & (roots.imag < 0)).sum()):
        raise ValueError(
            f"complex {name} must come in conjugate pairs to form real "
            f"second-order sections"
        )

    return roots[real].real, roots[upper]
