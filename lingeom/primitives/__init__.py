"""
Concrete linear primitives.

- Line: a1*x + a2*y + a0 = 0
- Hyperplane: a1*x1 + a2*x2 + a3*x3 + a4*x4 + a0 = 0
"""

from .line import Line
from .hyperplane import Hyperplane

# Known variant set, keyed by dimension
PRIMITIVES_BY_DIMENSION = {
    Line.DIMENSION: Line,
    Hyperplane.DIMENSION: Hyperplane,
}

__all__ = [
    "Line",
    "Hyperplane",
    "PRIMITIVES_BY_DIMENSION",
]
