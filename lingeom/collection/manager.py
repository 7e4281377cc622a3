"""
Owning collection of geometric entities.

The collection takes ownership of every entity it accepts and disposes all
of them exactly once on teardown. Bulk operations catch failures per entity
so one bad entity never aborts the rest of the pass.
"""

import logging
from typing import Iterator, List, Optional, Tuple

from ..core.base import GeometricEntity, as_vector
from ..core.constants import PROBE_POINTS
from ..core.counter import DEFAULT_COUNTER, InstanceCounter
from ..core.exceptions import DisposedAccessError, GeometryError, InvalidArgumentError
from ..core.types import PointLike
from .types import (
    CollectionStatistics,
    DemonstrationReport,
    PointCheckResult,
    STATUS_CHECKED,
    STATUS_DIMENSION_MISMATCH,
    STATUS_DISPOSED,
    STATUS_ERROR,
)

logger = logging.getLogger(__name__)


class GeometryCollection:
    """
    Ordered owner of Line / Hyperplane instances.

    Insertion order is kept and nothing is deduplicated. None and disposed
    entities are rejected with a warning rather than an exception.

    Example:
        >>> with GeometryCollection() as collection:
        ...     collection.add(Line(0.0, 1.0, 1.0))
        ...     results = collection.check_point([1.0, -1.0])
        # every owned entity is disposed when the block exits
    """

    def __init__(self, counter: Optional[InstanceCounter] = None):
        """
        Args:
            counter: Counter whose total statistics() reports;
                     DEFAULT_COUNTER if None
        """
        self._entities: List[GeometricEntity] = []
        self._counter = counter if counter is not None else DEFAULT_COUNTER
        self._disposed = False
        logger.debug("Created GeometryCollection")

    # === Ownership ===

    @property
    def disposed(self) -> bool:
        return self._disposed

    @property
    def entities(self) -> Tuple[GeometricEntity, ...]:
        return tuple(self._entities)

    def _require_active(self) -> None:
        if self._disposed:
            raise DisposedAccessError("GeometryCollection has been torn down")

    def add(self, entity: Optional[GeometricEntity]) -> bool:
        """
        Take ownership of an entity.

        Returns:
            True if the entity was appended, False if it was rejected

        Raises:
            DisposedAccessError: if the collection has been torn down
        """
        self._require_active()

        if entity is None:
            logger.warning("Rejected None entity")
            return False
        if not isinstance(entity, GeometricEntity):
            logger.warning(f"Rejected non-geometric object of type {type(entity).__name__}")
            return False
        if entity.disposed:
            logger.warning(f"Rejected disposed {entity.object_type} #{entity.id}")
            return False

        self._entities.append(entity)
        logger.info(f"Added {entity}")
        return True

    def count_objects(self) -> int:
        return len(self._entities)

    def __len__(self) -> int:
        return len(self._entities)

    def __iter__(self) -> Iterator[GeometricEntity]:
        return iter(tuple(self._entities))

    def list_objects(self) -> List[str]:
        """One description line per owned entity, in insertion order."""
        return [str(entity) for entity in self._entities]

    def statistics(self) -> CollectionStatistics:
        return CollectionStatistics(
            object_count=len(self._entities),
            total_created=self._counter.total_created,
            disposed_count=sum(1 for entity in self._entities if entity.disposed),
        )

    # === Bulk operations ===

    def check_point(self, point: PointLike) -> List[PointCheckResult]:
        """
        Test a point against every owned entity.

        Entities of another dimension are reported as mismatched, disposed
        ones as disposed. Errors from an individual entity (for example an
        invalid line asked for a distance) are recorded in its result. A
        point that is None or not a 1-D array of reals is recorded as an
        error on every active entity. This method never raises.

        Args:
            point: Coordinates of any supported dimension

        Returns:
            One PointCheckResult per owned entity
        """
        try:
            p = as_vector(point, "point")
            point_error = None
        except InvalidArgumentError as e:
            logger.warning(f"check_point: {e}")
            p = None
            point_error = str(e)
        results = []

        for entity in self._entities:
            result = PointCheckResult(
                entity_id=entity.id,
                object_type=entity.object_type,
                status=STATUS_CHECKED,
                description=str(entity),
                required_dimension=entity.dimension,
            )

            if entity.disposed:
                logger.warning(f"Skipping disposed {entity.object_type} #{entity.id}")
                result.status = STATUS_DISPOSED
                results.append(result)
                continue

            if p is None:
                result.status = STATUS_ERROR
                result.error = point_error
                results.append(result)
                continue

            if p.shape[0] != entity.dimension:
                logger.info(
                    f"{entity.object_type} #{entity.id}: dimension mismatch "
                    f"(requires {entity.dimension}D, got {p.shape[0]}D)"
                )
                result.status = STATUS_DIMENSION_MISMATCH
                results.append(result)
                continue

            try:
                result.contains = entity.contains_point(p)
                result.distance = entity.distance_to_point(p)
            except GeometryError as e:
                logger.warning(f"{entity.object_type} #{entity.id}: {e}")
                result.status = STATUS_ERROR
                result.error = str(e)

            results.append(result)

        return results

    def demonstrate(self) -> List[DemonstrationReport]:
        """
        Exercise the full contract on every owned entity.

        For each active entity: validity, coefficients, containment and
        distance at the origin of its dimension, and a clone (disposed
        right after inspection). Disposed entities are skipped untouched.
        """
        reports = []

        for entity in self._entities:
            report = DemonstrationReport(
                entity_id=entity.id,
                object_type=entity.object_type,
            )

            if entity.disposed:
                logger.warning(f"Skipping disposed {entity.object_type} #{entity.id}")
                report.skipped = True
                reports.append(report)
                continue

            report.description = str(entity)
            report.probe_point = PROBE_POINTS[entity.dimension]

            try:
                report.is_valid = entity.is_valid()
                report.validation_message = entity.get_validation_message()
                report.coefficients = entity.get_coefficients()
                report.contains_probe = entity.contains_point(report.probe_point)
                report.distance_to_probe = entity.distance_to_point(report.probe_point)
            except GeometryError as e:
                logger.warning(f"{entity.object_type} #{entity.id}: {e}")
                report.error = str(e)

            with entity.clone() as clone:
                report.clone_id = clone.id
                report.clone_description = str(clone)

            reports.append(report)

        return reports

    # === Teardown ===

    def teardown(self) -> None:
        """Dispose every owned entity and clear the collection. Idempotent."""
        if self._disposed:
            return

        count = len(self._entities)
        for entity in self._entities:
            entity.dispose()
        self._entities.clear()
        self._disposed = True

        logger.info(f"GeometryCollection torn down, released {count} entities")

    def __enter__(self) -> 'GeometryCollection':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> bool:
        self.teardown()
        return False

    def __repr__(self) -> str:
        state = "torn down" if self._disposed else f"{len(self._entities)} entities"
        return f"GeometryCollection({state})"
