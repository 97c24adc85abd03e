"""
Core geometry: tolerances, errors, vectors, the vertex ring and planes.
"""

from .errors import (
    GeometryError,
    InvalidOperationError,
    DimensionalityMismatchError,
    UnsupportedOperandError,
    TriangulationError,
)
from .kinds import Kind, kind_of, dispatch
from .plane import Plane
from .precision import PRECISION
from .ring import Ring, RingNode
from .vectors import (
    I,
    J,
    K,
    to3d,
    modulus,
    unit_vector,
    angle_between,
    is_parallel,
    is_antiparallel,
    is_perpendicular,
    points_equal,
    rotation_matrix,
    newell_normal,
)

__all__ = [
    'GeometryError',
    'InvalidOperationError',
    'DimensionalityMismatchError',
    'UnsupportedOperandError',
    'TriangulationError',
    'Kind',
    'kind_of',
    'dispatch',
    'Plane',
    'PRECISION',
    'Ring',
    'RingNode',
    'I',
    'J',
    'K',
    'to3d',
    'modulus',
    'unit_vector',
    'angle_between',
    'is_parallel',
    'is_antiparallel',
    'is_perpendicular',
    'points_equal',
    'rotation_matrix',
    'newell_normal',
]
