"""Default numerical settings shared by the filter analysis functions."""

import math

import torch

# Closeness threshold for unit-circle, symmetry and group-delay comparisons
DEFAULT_TOLERANCE: float = torch.finfo(torch.float64).eps ** 0.75

# Adjacent phase samples further apart than this are treated as a jump
PHASE_UNWRAP_THRESHOLD: float = math.pi - 0.05

# Frequency grid sizes
DEFAULT_FREQUENCY_POINTS: int = 512
LINEAR_PHASE_GROUP_DELAY_POINTS: int = 128
INFINITY_NORM_POINTS: int = 1024

# Upper bound on the number of impulse response samples used by filter_norm
MAX_IMPULSE_RESPONSE_LENGTH: int = 65536
