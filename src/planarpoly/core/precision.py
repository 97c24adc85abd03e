"""
Numerical tolerance shared by every geometric predicate.
"""

# Default tolerance for equality, containment and parallelism tests.
# Every predicate accepts an ``epsilon`` argument to override it per call.
PRECISION = 1e-6
