"""
lingeom: Linear Geometric Primitives

A small PyTorch-backed library for lines in the plane and hyperplanes in
four-dimensional space, each defined by the coefficients of one implicit
linear equation.

Key Features:
- Point containment, signed and unsigned distance (single points and batches)
- Validation of coefficient sets with fixed, per-variant messages
- Proportional-similarity comparison and deep cloning
- Explicit Active -> Disposed lifecycle with context-manager support
- GeometryCollection owner with per-entity error isolation

API Design:
- Coefficients are ordered (a0, a1, ..., aD); a0 is the constant term
- All near-zero comparisons use EPSILON = 1e-10
- Errors derive from GeometryError: InvalidArgumentError, InvalidStateError,
  DisposedAccessError

Example:
    >>> import lingeom
    >>> with lingeom.GeometryCollection() as collection:
    ...     collection.add(lingeom.Line(0.0, 1.0, 0.0))
    ...     results = collection.check_point([5.0, 0.0])
    >>> results[0].distance
    5.0
"""

__version__ = "0.1.0"
__author__ = "lingeom Contributors"

from . import core
from . import primitives
from . import collection
from . import utils

from .core import (
    EPSILON,
    GeometricEntity,
    GeometryError,
    InvalidArgumentError,
    InvalidStateError,
    DisposedAccessError,
    InstanceCounter,
    DEFAULT_COUNTER,
)
from .primitives import Line, Hyperplane
from .collection import GeometryCollection

__all__ = [
    # Subpackages
    "core",
    "primitives",
    "collection",
    "utils",
    # Entities
    "GeometricEntity",
    "Line",
    "Hyperplane",
    "GeometryCollection",
    # Errors
    "GeometryError",
    "InvalidArgumentError",
    "InvalidStateError",
    "DisposedAccessError",
    # Identity and tolerance
    "InstanceCounter",
    "DEFAULT_COUNTER",
    "EPSILON",
]
