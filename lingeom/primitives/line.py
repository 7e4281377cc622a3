"""
Line in the plane.

Equation: a1*x + a2*y + a0 = 0, stored as (a0, a1, a2).
The line is valid when a1 and a2 are not both zero.
"""

from __future__ import annotations

from typing import Optional

from ..core.base import GeometricEntity, requires_active
from ..core.constants import LINE_DIMENSION, LINE_NUM_COEFFICIENTS, OBJECT_TYPE_LINE
from ..core.counter import InstanceCounter
from ..core.exceptions import InvalidArgumentError


class Line(GeometricEntity):
    """
    2-D line a1*x + a2*y + a0 = 0.

    Constructors:
        Line()                  -> (0, 0, 0), invalid, no warning
        Line(a0, a1, a2)        -> warns if invalid
        Line.from_line(other)   -> deep copy with a new id

    Example:
        >>> line = Line(0.0, 1.0, 1.0)        # x + y = 0
        >>> line.contains_point([1.0, -1.0])
        True
        >>> Line(0.0, 1.0, 0.0).distance_to_point([5.0, 0.0])
        5.0
    """

    DIMENSION = LINE_DIMENSION
    OBJECT_TYPE = OBJECT_TYPE_LINE
    VARIABLE_NAMES = ("x", "y")
    VALID_MESSAGE = "Line is valid"
    INVALID_MESSAGE = "Line is invalid: a1 and a2 cannot both be zero"

    def __init__(self, *coefficients: float, counter: Optional[InstanceCounter] = None):
        if coefficients and len(coefficients) != LINE_NUM_COEFFICIENTS:
            raise InvalidArgumentError(
                f"Line(a0, a1, a2) takes {LINE_NUM_COEFFICIENTS} coefficients, "
                f"got {len(coefficients)}"
            )
        super().__init__(coefficients or None, counter)
        if coefficients:
            self._warn_if_invalid()

    @classmethod
    def from_line(cls, other: Line, counter: Optional[InstanceCounter] = None) -> Line:
        """
        Copy constructor.

        Args:
            other: Source line
            counter: Id source; the source's counter if None

        Raises:
            InvalidArgumentError: if other is None or not a Line
            DisposedAccessError: if other has been disposed
        """
        if other is None:
            raise InvalidArgumentError("Source line must not be None")
        if not isinstance(other, Line):
            raise InvalidArgumentError(
                f"Source must be a Line, got {type(other).__name__}"
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

    @requires_active
    def clone(self) -> Line:
        return Line.from_line(self)
