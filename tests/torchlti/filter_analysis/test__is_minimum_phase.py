"""Tests for is_minimum_phase."""

import numpy as np
import pytest
import torch
from scipy import signal as scipy_signal

from torchlti.filter_analysis import (
    ShapeError,
    ToleranceShapeError,
    is_minimum_phase,
)


def _zeros(*radius_angle):
    roots = []
    for radius, angle in radius_angle:
        roots.append(radius * np.exp(1j * angle * np.pi))
        roots.append(radius * np.exp(-1j * angle * np.pi))
    return roots


class TestIsMinimumPhase:
    """Tests for is_minimum_phase."""

    def test_first_order(self):
        assert is_minimum_phase(torch.tensor([3.0, 1.0]), torch.tensor([1.0, 0.5]))

    def test_zero_outside(self):
        assert not is_minimum_phase(
            torch.tensor([1.0, 3.0]), torch.tensor([1.0, 0.5])
        )

    def test_pole_outside(self):
        assert not is_minimum_phase(
            torch.tensor([3.0, 1.0]), torch.tensor([1.0, -2.0])
        )

    def test_zero_on_unit_circle(self):
        b, a = scipy_signal.butter(1, 0.5)

        assert not is_minimum_phase(b, a)

    def test_butterworth(self):
        b, a = scipy_signal.butter(8, 0.5)

        assert not is_minimum_phase(b, a)

    def test_complex_zeros_inside(self):
        b = 1.25**2 * np.poly(_zeros((0.9, 0.6), (0.8, 0.8)))

        assert is_minimum_phase(torch.from_numpy(b), torch.tensor([1.0]))

    def test_fir_without_denominator(self):
        assert is_minimum_phase(torch.tensor([1.0, -0.5, 0.06]))
        assert not is_minimum_phase(torch.tensor([0.06, -0.5, 1.0]))

    def test_no_roots(self):
        assert is_minimum_phase(torch.tensor([2.0]), torch.tensor([4.0]))
        assert is_minimum_phase(torch.tensor([1.0]), torch.tensor([1.0, -0.5]))

    def test_second_order_sections(self):
        sos = torch.tensor(
            [[1.0, 0.5, 0.0, 1.0, -0.2, 0.0], [1.0, -0.3, 0.1, 1.0, 0.4, 0.3]]
        )

        assert is_minimum_phase(sos)

    def test_tolerance_guard_band(self):
        b = torch.tensor([1.0, -0.99])

        assert is_minimum_phase(b)
        assert is_minimum_phase(b, tolerance=1e-3)
        assert not is_minimum_phase(b, tolerance=0.1)

    def test_list_coefficients_keep_double_precision(self):
        assert is_minimum_phase([1.0, -(1 - 1e-9)], tolerance=0.0)
        assert not is_minimum_phase([1.0, -(1 + 1e-9)], tolerance=0.0)

    def test_complex_coefficients(self):
        b = torch.tensor([1.0, -0.5j], dtype=torch.complex128)

        assert is_minimum_phase(b)

    def test_invalid_tolerance(self):
        with pytest.raises(ToleranceShapeError):
            is_minimum_phase(torch.tensor([1.0]), torch.tensor([1.0]), [0.1, 0.2])

    @pytest.mark.parametrize(
        "numerator, denominator",
        [
            (torch.arange(1.0, 11.0).reshape(10, 1), torch.tensor([1.0])),
            (torch.tensor([1.0]), torch.arange(1.0, 11.0).reshape(10, 1)),
            (torch.ones(3, 3), torch.ones(3, 3)),
        ],
    )
    def test_invalid_shapes(self, numerator, denominator):
        with pytest.raises(ShapeError):
            is_minimum_phase(numerator, denominator)
