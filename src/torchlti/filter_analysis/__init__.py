"""Filter analysis functions for phase properties, order, norms and responses."""

from ._exceptions import (
    ArityError,
    FilterAnalysisError,
    FilterAnalysisWarning,
    ImpulseResponseTruncationWarning,
    InvalidNormError,
    ShapeError,
    SingularGroupDelayWarning,
    ToleranceShapeError,
    UnstableFilterWarning,
)
from ._filter_norm import filter_norm
from ._filter_order import filter_order
from ._frequency_response import frequency_response
from ._group_delay import group_delay
from ._impulse_response import impulse_response, impulse_response_length
from ._is_allpass import is_allpass
from ._is_linear_phase import is_linear_phase
from ._is_maximum_phase import is_maximum_phase
from ._is_minimum_phase import is_minimum_phase
from ._phase_response import phase_response
from ._representation import (
    FilterRepresentation,
    SecondOrderSections,
    TransferFunction,
    as_filter_representation,
    resolve_transfer_function,
    validate_tolerance,
)
from ._root_classification import classify_roots
from ._unwrap_phase import unwrap_phase

__all__ = [
    # Property tests
    "is_allpass",
    "is_linear_phase",
    "is_maximum_phase",
    "is_minimum_phase",
    # Measures
    "filter_norm",
    "filter_order",
    # Responses
    "frequency_response",
    "group_delay",
    "impulse_response",
    "impulse_response_length",
    "phase_response",
    "unwrap_phase",
    # Representations
    "FilterRepresentation",
    "SecondOrderSections",
    "TransferFunction",
    "as_filter_representation",
    "classify_roots",
    "resolve_transfer_function",
    "validate_tolerance",
    # Exceptions
    "ArityError",
    "FilterAnalysisError",
    "InvalidNormError",
    "ShapeError",
    "ToleranceShapeError",
    # Warnings
    "FilterAnalysisWarning",
    "ImpulseResponseTruncationWarning",
    "SingularGroupDelayWarning",
    "UnstableFilterWarning",
]
