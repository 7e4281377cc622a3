"""
Abstract base class for linear geometric entities.

An entity is the zero set of one linear equation

    a1*x1 + ... + aD*xD + a0 = 0

stored as the coefficient vector (a0, a1, ..., aD). The base class owns
everything that does not depend on D: identity, the Active -> Disposed
lifecycle, coefficient storage and the distance/containment math.

Class Hierarchy:
    GeometricEntity (abstract)
    ├── Line        (D = 2)
    └── Hyperplane  (D = 4)

Each variant stores its own coefficient vector; Hyperplane does not inherit
from Line.
"""

from __future__ import annotations

import functools
import logging
from abc import ABC, abstractmethod
from typing import Optional, Tuple

import torch

from .constants import CONSTANT_TERM_INDEX, DEFAULT_DTYPE, EPSILON
from .counter import DEFAULT_COUNTER, InstanceCounter, creation_total, record_creation
from .exceptions import DisposedAccessError, InvalidArgumentError, InvalidStateError
from .similarity import coefficients_proportional
from .types import Coefficients, CoefficientsLike, PointBatch, PointLike

logger = logging.getLogger(__name__)


def requires_active(method):
    """Raise DisposedAccessError before running `method` on a disposed entity."""

    @functools.wraps(method)
    def wrapper(self, *args, **kwargs):
        if self._disposed:
            raise DisposedAccessError(
                f"{self.OBJECT_TYPE} #{self._id} has been disposed"
            )
        return method(self, *args, **kwargs)

    return wrapper


def as_vector(values, name: str) -> torch.Tensor:
    """
    Convert `values` to a detached 1-D float64 tensor that owns its storage.

    Raises:
        InvalidArgumentError: if values is None, non-numeric or not 1-D
    """
    if values is None:
        raise InvalidArgumentError(f"{name} must not be None")
    try:
        tensor = torch.as_tensor(values, dtype=DEFAULT_DTYPE)
    except (TypeError, ValueError, RuntimeError) as e:
        raise InvalidArgumentError(f"{name} must be a sequence of real numbers: {e}") from e
    if tensor.ndim != 1:
        raise InvalidArgumentError(
            f"{name} must be one-dimensional, got shape {tuple(tensor.shape)}"
        )
    return tensor.detach().cpu().clone()


class GeometricEntity(ABC):
    """
    Shared contract for Line and Hyperplane.

    Subclasses set the class attributes below and implement clone().

    Class Attributes:
        DIMENSION: Number of coordinates of a point (2 or 4)
        OBJECT_TYPE: Human-readable variant name
        VARIABLE_NAMES: Coordinate names used by equation()
        VALID_MESSAGE / INVALID_MESSAGE: get_validation_message() results

    Lifecycle:
        Every operation except dispose() raises DisposedAccessError once the
        entity has been disposed. id, dimension and disposed stay readable.
    """

    DIMENSION: int = 0
    OBJECT_TYPE: str = "GeometricEntity"
    VARIABLE_NAMES: Tuple[str, ...] = ()
    VALID_MESSAGE: str = ""
    INVALID_MESSAGE: str = ""

    def __init__(
        self,
        coefficients: Optional[CoefficientsLike] = None,
        counter: Optional[InstanceCounter] = None,
    ):
        """
        Args:
            coefficients: Initial (a0, ..., aD); zeros if None
            counter: Id source; DEFAULT_COUNTER if None
        """
        if coefficients is None:
            values = torch.zeros(self.num_coefficients, dtype=DEFAULT_DTYPE)
        else:
            values = self._check_coefficients(coefficients)

        counter = counter if counter is not None else DEFAULT_COUNTER
        self._id = counter.next_id()
        self._counter = counter
        self._disposed = False
        self._coefficients = values
        record_creation()

        logger.debug(f"Created {self.OBJECT_TYPE} #{self._id}")

    @classmethod
    def _from_coefficients(
        cls,
        coefficients: CoefficientsLike,
        counter: Optional[InstanceCounter],
    ) -> 'GeometricEntity':
        """Build an instance without the variant constructor's validity warning."""
        entity = cls.__new__(cls)
        GeometricEntity.__init__(entity, coefficients, counter)
        return entity

    # === Identity and lifecycle ===

    @property
    def id(self) -> int:
        """Unique id drawn from the instance counter at construction."""
        return self._id

    @property
    def dimension(self) -> int:
        return self.DIMENSION

    @property
    def num_coefficients(self) -> int:
        return self.DIMENSION + 1

    @property
    def object_type(self) -> str:
        return self.OBJECT_TYPE

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def counter(self) -> InstanceCounter:
        return self._counter

    @staticmethod
    def total_created() -> int:
        """Number of entities ever constructed, whichever counter supplied their ids."""
        return creation_total()

    def dispose(self) -> None:
        """Mark the entity disposed. Calling it again is a no-op."""
        if self._disposed:
            return
        self._disposed = True
        logger.debug(f"Disposed {self.OBJECT_TYPE} #{self._id}")

    def __enter__(self) -> 'GeometricEntity':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.dispose()
        return False

    # === Coefficient management ===

    def _check_coefficients(self, values: CoefficientsLike) -> torch.Tensor:
        tensor = as_vector(values, "coefficients")
        if tensor.shape[0] != self.num_coefficients:
            raise InvalidArgumentError(
                f"{self.OBJECT_TYPE} requires {self.num_coefficients} coefficients, "
                f"got {tensor.shape[0]}"
            )
        return tensor

    def _warn_if_invalid(self) -> None:
        if not self.is_valid():
            logger.warning(f"{self.OBJECT_TYPE} #{self._id}: {self.INVALID_MESSAGE}")

    @requires_active
    def set_coefficients(self, values: CoefficientsLike) -> None:
        """
        Replace all coefficients at once.

        Args:
            values: (a0, a1, ..., aD)

        Raises:
            InvalidArgumentError: if values is None or has the wrong length;
                the stored coefficients are left unchanged
        """
        self._coefficients = self._check_coefficients(values)
        self._warn_if_invalid()

    @requires_active
    def get_coefficients(self) -> Coefficients:
        """Return (a0, a1, ..., aD) as a tuple of floats."""
        return tuple(self._coefficients.tolist())

    @requires_active
    def coefficients_tensor(self) -> torch.Tensor:
        """Return a copy of the coefficient vector as a float64 tensor."""
        return self._coefficients.clone()

    @requires_active
    def normal(self) -> Coefficients:
        """Return the directional coefficients (a1, ..., aD)."""
        return tuple(self._coefficients[CONSTANT_TERM_INDEX + 1:].tolist())

    @requires_active
    def _coefficient(self, index: int) -> float:
        return float(self._coefficients[index])

    # === Validation ===

    @requires_active
    def is_valid(self) -> bool:
        """True iff some directional coefficient exceeds EPSILON in magnitude."""
        directional = self._coefficients[CONSTANT_TERM_INDEX + 1:]
        return bool((directional.abs() > EPSILON).any())

    @requires_active
    def get_validation_message(self) -> str:
        return self.VALID_MESSAGE if self.is_valid() else self.INVALID_MESSAGE

    # === Evaluation ===

    def _check_point(self, point: PointLike) -> torch.Tensor:
        tensor = as_vector(point, "point")
        if tensor.shape[0] != self.DIMENSION:
            raise InvalidArgumentError(
                f"{self.OBJECT_TYPE} requires exactly {self.DIMENSION} coordinates, "
                f"got {tensor.shape[0]}"
            )
        return tensor

    def _check_point_batch(self, points: PointBatch) -> torch.Tensor:
        if points is None:
            raise InvalidArgumentError("points must not be None")
        try:
            tensor = torch.as_tensor(points, dtype=DEFAULT_DTYPE)
        except (TypeError, ValueError, RuntimeError) as e:
            raise InvalidArgumentError(f"points must be an array of real numbers: {e}") from e
        if tensor.ndim == 0 or tensor.shape[-1] != self.DIMENSION:
            raise InvalidArgumentError(
                f"{self.OBJECT_TYPE} expects points of shape (..., {self.DIMENSION}), "
                f"got {tuple(tensor.shape)}"
            )
        return tensor.detach().cpu()

    def _require_valid(self) -> None:
        if not self.is_valid():
            raise InvalidStateError(self.INVALID_MESSAGE)

    def _normal_norm(self) -> torch.Tensor:
        return torch.linalg.vector_norm(self._coefficients[CONSTANT_TERM_INDEX + 1:])

    @requires_active
    def evaluate(self, point: PointLike) -> float:
        """
        Evaluate the left-hand side of the equation at a point.

        Args:
            point: D coordinates

        Returns:
            a1*x1 + ... + aD*xD + a0
        """
        p = self._check_point(point)
        a0 = self._coefficients[CONSTANT_TERM_INDEX]
        return float(torch.dot(self._coefficients[CONSTANT_TERM_INDEX + 1:], p) + a0)

    @requires_active
    def evaluate_points(self, points: PointBatch) -> torch.Tensor:
        """
        Evaluate the equation for a batch of points.

        Args:
            points: Array of shape (..., D)

        Returns:
            Tensor of shape (...)
        """
        p = self._check_point_batch(points)
        a0 = self._coefficients[CONSTANT_TERM_INDEX]
        return p @ self._coefficients[CONSTANT_TERM_INDEX + 1:] + a0

    @requires_active
    def contains_point(self, point: PointLike) -> bool:
        """
        True iff the equation evaluates to less than EPSILON in magnitude.

        Defined for invalid entities too.
        """
        return abs(self.evaluate(point)) < EPSILON

    @requires_active
    def signed_distance_to_point(self, point: PointLike) -> float:
        """
        Signed distance: positive on the side the normal (a1..aD) points to.

        Raises:
            InvalidStateError: if the entity is invalid
            InvalidArgumentError: if the point has the wrong dimension
        """
        self._require_valid()
        return self.evaluate(point) / float(self._normal_norm())

    @requires_active
    def distance_to_point(self, point: PointLike) -> float:
        """
        Unsigned Euclidean distance |a . x + a0| / ||(a1..aD)||.

        Raises:
            InvalidStateError: if the entity is invalid
            InvalidArgumentError: if the point has the wrong dimension
        """
        return abs(self.signed_distance_to_point(point))

    @requires_active
    def distances_to_points(self, points: PointBatch) -> torch.Tensor:
        """Unsigned distances for a batch of points of shape (..., D)."""
        self._require_valid()
        return self.evaluate_points(points).abs() / self._normal_norm()

    # === Comparison and copying ===

    @requires_active
    def is_similar(self, other: Optional['GeometricEntity']) -> bool:
        """
        True iff `other` is the same variant with proportional coefficients.

        Raises:
            DisposedAccessError: if other has been disposed
        """
        if other is None or type(other) is not type(self):
            return False
        return coefficients_proportional(self.get_coefficients(), other.get_coefficients())

    @abstractmethod
    def clone(self) -> 'GeometricEntity':
        """Deep copy with a new id from the same counter."""
        pass

    # === Formatting ===

    @requires_active
    def equation(self) -> str:
        """Equation text, e.g. '(1.0)*x + (2.0)*y + (3.0) = 0'."""
        coeffs = self._coefficients.tolist()
        terms = [
            f"({a})*{name}"
            for a, name in zip(coeffs[CONSTANT_TERM_INDEX + 1:], self.VARIABLE_NAMES)
        ]
        terms.append(f"({coeffs[CONSTANT_TERM_INDEX]})")
        return " + ".join(terms) + " = 0"

    def __str__(self) -> str:
        if self._disposed:
            return f"{self.OBJECT_TYPE} #{self._id} (disposed)"
        return f"{self.OBJECT_TYPE} #{self._id}: {self.equation()}"

    def __repr__(self) -> str:
        name = type(self).__name__
        if self._disposed:
            return f"{name}(id={self._id}, disposed)"
        values = ", ".join(
            f"a{i}={a}" for i, a in enumerate(self._coefficients.tolist())
        )
        return f"{name}(id={self._id}, {values})"
