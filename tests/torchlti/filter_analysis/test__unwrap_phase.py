"""Tests for unwrap_phase."""

import math

import pytest
import torch
from torch.testing import assert_close

from torchlti.filter_analysis import unwrap_phase


class TestUnwrapPhase:
    """Tests for unwrap_phase."""

    def test_positive_jump(self):
        phase = unwrap_phase(torch.tensor([0.0, 0.1, 3.3, 3.4], dtype=torch.float64))

        expected = torch.tensor(
            [0.0, 0.1, 3.3 - math.pi, 3.4 - math.pi], dtype=torch.float64
        )
        assert_close(phase, expected)

    def test_negative_jump(self):
        phase = unwrap_phase(torch.tensor([0.0, -3.3, -3.2], dtype=torch.float64))

        expected = torch.tensor(
            [0.0, -3.3 + math.pi, -3.2 + math.pi], dtype=torch.float64
        )
        assert_close(phase, expected)

    def test_smooth_phase_unchanged(self):
        phase = torch.linspace(0.0, -2.5, 50, dtype=torch.float64)

        assert torch.equal(unwrap_phase(phase), phase)

    def test_wrapped_ramp(self):
        w = torch.linspace(0.0, 4 * math.pi, 2000, dtype=torch.float64)
        wrapped = torch.angle(torch.exp(3j * w))

        assert_close(unwrap_phase(wrapped), 3 * w)

    def test_idempotent(self):
        w = torch.linspace(0.0, 4 * math.pi, 2000, dtype=torch.float64)
        once = unwrap_phase(torch.angle(torch.exp(-5j * w)))

        assert torch.equal(unwrap_phase(once), once)

    def test_custom_threshold(self):
        phase = unwrap_phase(torch.tensor([0.0, 2.0]), threshold=1.5)

        assert_close(
            phase, torch.tensor([0.0, 2.0 - math.pi], dtype=torch.float64)
        )

    def test_input_not_modified(self):
        phase = torch.tensor([0.0, 3.3], dtype=torch.float64)

        unwrap_phase(phase)

        assert phase.tolist() == [0.0, 3.3]

    def test_returns_float64(self):
        assert unwrap_phase(torch.tensor([0.0, 0.5])).dtype == torch.float64

    def test_single_sample(self):
        phase = torch.tensor([2.0], dtype=torch.float64)

        assert torch.equal(unwrap_phase(phase), phase)

    @pytest.mark.parametrize("value", [math.inf, -math.inf])
    def test_infinite_sample(self, value):
        with pytest.raises(ValueError):
            unwrap_phase(torch.tensor([0.0, value, 0.5], dtype=torch.float64))

    def test_nan_left_in_place(self):
        phase = unwrap_phase(
            torch.tensor([0.0, math.nan, 0.5, 3.8], dtype=torch.float64)
        )

        assert math.isnan(phase[1].item())
        assert phase[2].item() == 0.5
        assert phase[3].item() == pytest.approx(3.8 - math.pi)
