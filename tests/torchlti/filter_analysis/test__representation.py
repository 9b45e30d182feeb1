"""Tests for filter representation normalization and tolerance checks."""

import math

import pytest
import torch

from torchlti import DEFAULT_TOLERANCE
from torchlti.filter_analysis import (
    SecondOrderSections,
    ShapeError,
    ToleranceShapeError,
    TransferFunction,
    as_filter_representation,
    resolve_transfer_function,
    validate_tolerance,
)


class TestAsFilterRepresentation:
    """Tests for as_filter_representation."""

    def test_single_vector_is_fir(self):
        representation = as_filter_representation(torch.tensor([1.0, 2.0]))

        assert isinstance(representation, TransferFunction)
        assert representation.numerator.tolist() == [1.0, 2.0]
        assert representation.denominator.tolist() == [1.0]

    def test_two_vectors(self):
        b, a = as_filter_representation([1, 2], [1, 0.5])

        assert b.dtype == torch.float64
        assert a.tolist() == [1.0, 0.5]

    def test_scalar_coefficients(self):
        b, a = as_filter_representation(2.0, 1.0)

        assert b.tolist() == [2.0]
        assert a.tolist() == [1.0]

    def test_row_matrix_is_a_vector(self):
        b, a = as_filter_representation(
            torch.tensor([[1.0, 2.0, 3.0]]), torch.tensor([[1.0, 0.5]])
        )

        assert b.shape == (3,)
        assert a.shape == (2,)

    def test_single_row_of_six_is_fir(self):
        representation = as_filter_representation(torch.ones(1, 6))

        assert isinstance(representation, TransferFunction)
        assert representation.numerator.numel() == 6

    def test_sections_matrix(self):
        sos = torch.tensor(
            [[1.0, 2.0, 1.0, 1.0, -0.5, 0.1], [1.0, 0.0, -1.0, 1.0, 0.2, 0.3]]
        )

        representation = as_filter_representation(sos)

        assert isinstance(representation, SecondOrderSections)
        assert representation.sections.dtype == torch.float64
        assert representation.sections.shape == (2, 6)

    def test_complex_coefficients_kept_complex(self):
        b, _ = as_filter_representation(
            torch.tensor([1.0, 1.0j], dtype=torch.complex64)
        )

        assert b.dtype == torch.complex128

    @pytest.mark.parametrize(
        "numerator, denominator",
        [
            (torch.arange(1.0, 11.0).reshape(10, 1), torch.tensor([1.0])),
            (torch.tensor([1.0]), torch.arange(1.0, 11.0).reshape(10, 1)),
            (torch.ones(3, 3), torch.ones(3, 3)),
            (torch.ones(2, 6), torch.tensor([1.0])),
            (torch.ones(2, 2, 2), torch.tensor([1.0])),
        ],
    )
    def test_two_arguments_must_be_vectors(self, numerator, denominator):
        with pytest.raises(ShapeError):
            as_filter_representation(numerator, denominator)

    @pytest.mark.parametrize(
        "numerator",
        [
            torch.ones(3, 3),
            torch.arange(1.0, 11.0).reshape(10, 1),
            torch.ones(2, 2, 6),
            torch.zeros(0),
        ],
    )
    def test_single_argument_must_be_vector_or_sections(self, numerator):
        with pytest.raises(ShapeError):
            as_filter_representation(numerator)


class TestResolveTransferFunction:
    """Tests for resolve_transfer_function."""

    def test_sections_are_multiplied_out(self):
        sos = torch.tensor(
            [[1.0, 1.0, 0.0, 1.0, -0.5, 0.0], [1.0, -1.0, 0.0, 1.0, 0.5, 0.0]]
        )

        b, a = resolve_transfer_function(sos)

        assert b.tolist() == [1.0, 0.0, -1.0]
        assert a.tolist() == [1.0, 0.0, -0.25]

    def test_transfer_function_passes_through(self):
        b, a = resolve_transfer_function([1.0, 2.0], [1.0, 0.1])

        assert b.tolist() == [1.0, 2.0]
        assert a.tolist() == [1.0, 0.1]


class TestValidateTolerance:
    """Tests for validate_tolerance."""

    def test_default(self):
        assert validate_tolerance(None) == DEFAULT_TOLERANCE
        assert DEFAULT_TOLERANCE == pytest.approx(
            torch.finfo(torch.float64).eps ** 0.75
        )

    @pytest.mark.parametrize(
        "tolerance", [0.1, torch.tensor(0.1), torch.tensor([0.1])]
    )
    def test_scalar(self, tolerance):
        assert validate_tolerance(tolerance) == pytest.approx(0.1)

    def test_zero_is_allowed(self):
        assert validate_tolerance(0) == 0.0

    @pytest.mark.parametrize(
        "tolerance",
        [torch.tensor([0.1, 0.2]), [0.1, 0.2], -1.0, math.nan, 1.0j],
    )
    def test_invalid(self, tolerance):
        with pytest.raises(ToleranceShapeError):
            validate_tolerance(tolerance)
