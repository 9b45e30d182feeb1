"""Exceptions and warnings for filter analysis module."""


class FilterAnalysisError(Exception):
    """Base exception for filter analysis errors."""

    pass


class ArityError(FilterAnalysisError):
    """Raised when an operation receives the wrong set of arguments.

    This occurs when:
    - filter_norm is called without a denominator
    """

    pass


class ShapeError(FilterAnalysisError):
    """Raised when filter coefficients have an unusable shape.

    This occurs when:
    - Numerator or denominator is not a vector when both are given
    - A single argument is a matrix that is not a second-order sections
      matrix (n_sections > 1 rows of 6 columns)
    - is_allpass receives a single vector instead of a sections matrix
    - A polynomial has no nonzero coefficient where one must be trimmed
    """

    pass


class ToleranceShapeError(FilterAnalysisError):
    """Raised when the tolerance is not a non-negative scalar."""

    pass


class InvalidNormError(FilterAnalysisError):
    """Raised when the requested filter norm is neither 2 nor infinity."""

    pass


class FilterAnalysisWarning(UserWarning):
    """Base warning for numerically questionable analysis results."""

    pass


class SingularGroupDelayWarning(FilterAnalysisWarning):
    """Emitted when the group delay is undefined at some frequencies.

    The group delay at frequencies where the frequency response vanishes
    is reported as zero.
    """

    pass


class UnstableFilterWarning(FilterAnalysisWarning):
    """Emitted when a filter has poles on or outside the unit circle and a
    quantity that only exists for stable filters is requested."""

    pass


class ImpulseResponseTruncationWarning(FilterAnalysisWarning):
    """Emitted when an impulse response is cut short before it has decayed
    below the requested tolerance."""

    pass
