"""
Numerical precision constants.

Default tolerances used by approximate comparisons (Matrix.allclose) and
the float64 exact-integer limit checked on array conversion. Exact
equality never consults these.
"""

# Default tolerance for numerical comparisons (relative)
DEFAULT_RTOL: float = 1e-12

# Default tolerance for considering values as zero (absolute)
DEFAULT_ATOL: float = 1e-14

# Largest integer magnitude float64 represents exactly
MAX_EXACT_INTEGER: int = 2 ** 53
