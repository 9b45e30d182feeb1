"""Polynomial helpers for coefficient vectors in descending powers."""

from ._polynomial_multiply import polynomial_multiply
from ._polynomial_roots import polynomial_roots
from ._trim_zeros import trim_zeros

__all__ = [
    "polynomial_multiply",
    "polynomial_roots",
    "trim_zeros",
]
