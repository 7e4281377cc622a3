"""
Collection owner for geometric entities.

Provides GeometryCollection plus the result types of its bulk operations.
"""

from .types import (
    PointCheckResult,
    DemonstrationReport,
    CollectionStatistics,
    STATUS_CHECKED,
    STATUS_DIMENSION_MISMATCH,
    STATUS_ERROR,
    STATUS_DISPOSED,
)
from .manager import GeometryCollection

__all__ = [
    "GeometryCollection",
    "PointCheckResult",
    "DemonstrationReport",
    "CollectionStatistics",
    "STATUS_CHECKED",
    "STATUS_DIMENSION_MISMATCH",
    "STATUS_ERROR",
    "STATUS_DISPOSED",
]
