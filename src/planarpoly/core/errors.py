"""
Exception types raised by planarpoly.
"""


class GeometryError(Exception):
    """Base class for all planarpoly errors."""


class InvalidOperationError(GeometryError):
    """An operation was requested against an object it does not apply to."""


class DimensionalityMismatchError(GeometryError, ValueError):
    """Input is degenerate: zero-length direction, collinear points, etc."""


class UnsupportedOperandError(GeometryError, TypeError):
    """An operation has no definition for the kind of operand it was given."""


class TriangulationError(GeometryError, RuntimeError):
    """Ear clipping could not find an ear. This is always a bug."""
