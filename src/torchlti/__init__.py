"""torchlti: property analysis of discrete-time LTI filters in PyTorch."""

from . import (
    filter_analysis,
    filter_conversion,
    polynomial,
)
from ._constants import DEFAULT_TOLERANCE

__all__ = [
    "DEFAULT_TOLERANCE",
    "filter_analysis",
    "filter_conversion",
    "polynomial",
]

__version__ = "0.1.0"
