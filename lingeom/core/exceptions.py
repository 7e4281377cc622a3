"""
Exception hierarchy for lingeom.

Every error the primitives raise derives from GeometryError and also from
the builtin exception of the same category, so callers may catch either.
"""


class GeometryError(Exception):
    """Base class for all lingeom errors."""


class InvalidArgumentError(GeometryError, ValueError):
    """Missing input, or a point/coefficient vector of the wrong length."""


class InvalidStateError(GeometryError, RuntimeError):
    """Operation requires a valid entity (non-degenerate directional coefficients)."""


class DisposedAccessError(GeometryError, RuntimeError):
    """Operation on an entity or collection that has already been disposed."""
