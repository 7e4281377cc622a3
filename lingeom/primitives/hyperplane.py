"""
Hyperplane in four-dimensional space.

Equation: a1*x1 + a2*x2 + a3*x3 + a4*x4 + a0 = 0, stored as (a0, ..., a4).
Behaves like a Line with two extra directional terms, but keeps its own
five-element coefficient vector rather than extending Line.
"""

from __future__ import annotations

from typing import Optional

from ..core.base import GeometricEntity, requires_active
from ..core.constants import (
    HYPERPLANE_DIMENSION,
    HYPERPLANE_NUM_COEFFICIENTS,
    OBJECT_TYPE_HYPERPLANE,
)
from ..core.counter import InstanceCounter
from ..core.exceptions import InvalidArgumentError


class Hyperplane(GeometricEntity):
    """
    4-D hyperplane a1*x1 + a2*x2 + a3*x3 + a4*x4 + a0 = 0.

    Constructors:
        Hyperplane()                          -> all zeros, invalid
        Hyperplane(a0, a1, a2, a3, a4)        -> warns if invalid
        Hyperplane.from_hyperplane(other)     -> deep copy with a new id
    """

    DIMENSION = HYPERPLANE_DIMENSION
    OBJECT_TYPE = OBJECT_TYPE_HYPERPLANE
    VARIABLE_NAMES = ("x1", "x2", "x3", "x4")
    VALID_MESSAGE = "Hyperplane is valid"
    INVALID_MESSAGE = "Hyperplane is invalid: a1, a2, a3 and a4 cannot all be zero"

    def __init__(self, *coefficients: float, counter: Optional[InstanceCounter] = None):
        if coefficients and len(coefficients) != HYPERPLANE_NUM_COEFFICIENTS:
            raise InvalidArgumentError(
                f"Hyperplane(a0, a1, a2, a3, a4) takes {HYPERPLANE_NUM_COEFFICIENTS} "
                f"coefficients, got {len(coefficients)}"
            )
        super().__init__(coefficients or None, counter)
        if coefficients:
            self._warn_if_invalid()

    @classmethod
    def from_hyperplane(
        cls,
        other: Hyperplane,
        counter: Optional[InstanceCounter] = None,
    ) -> Hyperplane:
        """
        Copy constructor. The source must itself be a Hyperplane.

        Raises:
            InvalidArgumentError: if other is None or not a Hyperplane
            DisposedAccessError: if other has been disposed
        """
        if other is None:
            raise InvalidArgumentError("Source hyperplane must not be None")
        if not isinstance(other, Hyperplane):
            raise InvalidArgumentError(
                f"Source must be a Hyperplane, got {type(other).__name__}"
            )
        coefficients = other.get_coefficients()
        return cls._from_coefficients(
            coefficients, counter if counter is not None else other.counter
        )

    @property
    def a0(self) -> float:
        return self._coefficient(0)

    @property
    def a1(self) -> float:
        return self._coefficient(1)

    @property
    def a2(self) -> float:
        return self._coefficient(2)

    @property
    def a3(self) -> float:
        return self._coefficient(3)

    @property
    def a4(self) -> float:
        return self._coefficient(4)

    @requires_active
    def clone(self) -> Hyperplane:
        return Hyperplane.from_hyperplane(self)
