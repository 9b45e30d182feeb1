"""Tests for group_delay."""

import pytest
import torch
from numpy.testing import assert_allclose
from scipy import signal as scipy_signal

from torchlti.filter_analysis import SingularGroupDelayWarning, group_delay


class TestGroupDelay:
    """Tests for group_delay."""

    def test_symmetric_fir_is_constant(self):
        b = torch.tensor([0.25, 0.5, 0.25])

        _, gd = group_delay(b)

        assert_allclose(gd.numpy(), 1.0, atol=1e-8)

    def test_pure_delay(self):
        _, gd = group_delay(torch.tensor([0.0, 0.0, 0.0, 1.0]), n_points=32)

        assert_allclose(gd.numpy(), 3.0, atol=1e-12)

    def test_matches_scipy(self):
        b = [1.0, 0.5]
        a = [1.0, -0.8, 0.3]

        w, gd = group_delay(b, a)
        w_ref, gd_ref = scipy_signal.group_delay((b, a), w=512)

        assert_allclose(w.numpy(), w_ref, rtol=1e-12, atol=1e-14)
        assert_allclose(gd.numpy(), gd_ref, rtol=1e-8, atol=1e-10)

    def test_butterworth(self):
        b, a = scipy_signal.butter(4, 0.3)

        _, gd = group_delay(torch.from_numpy(b), torch.from_numpy(a), 128)
        _, gd_ref = scipy_signal.group_delay((b, a), w=128)

        # Exclude the bins next to the zeros at z = -1
        assert_allclose(gd.numpy()[:-5], gd_ref[:-5], rtol=1e-6, atol=1e-8)

    def test_whole_and_sampling_frequency(self):
        b = [1.0, 0.5]
        a = [1.0, -0.8, 0.3]

        w, gd = group_delay(
            torch.tensor(b, dtype=torch.float64),
            torch.tensor(a, dtype=torch.float64),
            64,
            whole=True,
            sampling_frequency=8.0,
        )
        w_ref, gd_ref = scipy_signal.group_delay((b, a), w=64, whole=True, fs=8.0)

        assert_allclose(w.numpy(), w_ref, rtol=1e-12)
        assert_allclose(gd.numpy(), gd_ref, rtol=1e-8, atol=1e-10)

    def test_singular_frequency(self):
        with pytest.warns(SingularGroupDelayWarning):
            _, gd = group_delay(torch.tensor([1.0, 1.0]), n_points=4, whole=True)

        assert gd[2].item() == 0.0
        assert_allclose(gd.numpy()[[0, 1, 3]], 0.5, atol=1e-12)
