"""
Core module for lingeom.

Contains:
- Constants: Epsilon policy and primitive layout
- Types: Type aliases for points and coefficient vectors
- Exceptions: InvalidArgument / InvalidState / DisposedAccess errors
- Counter: Injectable instance counter for entity ids
- Base: Abstract GeometricEntity defining the shared contract
"""

from .constants import (
    EPSILON,
    DEFAULT_DTYPE,
    LINE_DIMENSION,
    LINE_NUM_COEFFICIENTS,
    HYPERPLANE_DIMENSION,
    HYPERPLANE_NUM_COEFFICIENTS,
    SUPPORTED_DIMENSIONS,
    PROBE_POINTS,
)

from .types import (
    ArrayLike,
    PointLike,
    CoefficientsLike,
    Coefficients,
    PointBatch,
)

from .exceptions import (
    GeometryError,
    InvalidArgumentError,
    InvalidStateError,
    DisposedAccessError,
)

from .counter import InstanceCounter, DEFAULT_COUNTER, creation_total
from .similarity import coefficients_proportional
from .base import GeometricEntity

__all__ = [
    # Constants
    "EPSILON",
    "DEFAULT_DTYPE",
    "LINE_DIMENSION",
    "LINE_NUM_COEFFICIENTS",
    "HYPERPLANE_DIMENSION",
    "HYPERPLANE_NUM_COEFFICIENTS",
    "SUPPORTED_DIMENSIONS",
    "PROBE_POINTS",
    # Types
    "ArrayLike",
    "PointLike",
    "CoefficientsLike",
    "Coefficients",
    "PointBatch",
    # Exceptions
    "GeometryError",
    "InvalidArgumentError",
    "InvalidStateError",
    "DisposedAccessError",
    # Identity
    "InstanceCounter",
    "DEFAULT_COUNTER",
    "creation_total",
    # Similarity
    "coefficients_proportional",
    # Base class
    "GeometricEntity",
]
