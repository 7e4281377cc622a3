"""
Result types for bulk collection operations.

The collection returns raw values; turning them into text is left to the
console helpers.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

# PointCheckResult.status values
STATUS_CHECKED = "checked"
STATUS_DIMENSION_MISMATCH = "dimension_mismatch"
STATUS_ERROR = "error"
STATUS_DISPOSED = "disposed"


@dataclass
class PointCheckResult:
    """Outcome of checking one point against one owned entity."""
    entity_id: int
    object_type: str
    status: str
    description: str = ""                 # str(entity) at check time
    required_dimension: int = 0
    contains: Optional[bool] = None
    distance: Optional[float] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == STATUS_CHECKED


@dataclass
class DemonstrationReport:
    """Full-contract walk over one owned entity."""
    entity_id: int
    object_type: str
    skipped: bool = False
    description: str = ""
    is_valid: Optional[bool] = None
    validation_message: Optional[str] = None
    coefficients: Optional[Tuple[float, ...]] = None
    probe_point: Optional[Tuple[float, ...]] = None
    contains_probe: Optional[bool] = None
    distance_to_probe: Optional[float] = None
    error: Optional[str] = None
    clone_id: Optional[int] = None
    clone_description: Optional[str] = None


@dataclass
class CollectionStatistics:
    """Counts reported by GeometryCollection.statistics()."""
    object_count: int
    total_created: int
    disposed_count: int
