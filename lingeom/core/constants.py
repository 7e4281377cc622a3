"""
Centralized constants for lingeom.

This module defines the tolerance policy and the fixed layout of every
primitive. Using these constants keeps the 2-D and 4-D variants consistent.

Usage:
    from lingeom.core.constants import EPSILON

    if abs(value) < EPSILON:
        ...
"""

import torch

# =============================================================================
# Numeric Constants
# =============================================================================

# Absolute tolerance for every comparison against zero
# (containment, validity, coefficient ratios)
EPSILON: float = 1e-10

# Storage dtype for coefficients and evaluated points
DEFAULT_DTYPE: torch.dtype = torch.float64


# =============================================================================
# Primitive Layout
# =============================================================================

# Line: a1*x + a2*y + a0 = 0
LINE_DIMENSION: int = 2
LINE_NUM_COEFFICIENTS: int = LINE_DIMENSION + 1

# Hyperplane: a1*x1 + a2*x2 + a3*x3 + a4*x4 + a0 = 0
HYPERPLANE_DIMENSION: int = 4
HYPERPLANE_NUM_COEFFICIENTS: int = HYPERPLANE_DIMENSION + 1

SUPPORTED_DIMENSIONS = (LINE_DIMENSION, HYPERPLANE_DIMENSION)

# Index of the constant term in every coefficient vector
CONSTANT_TERM_INDEX: int = 0


# =============================================================================
# Probe Points
# =============================================================================

# Canonical probe point used by the collection demonstration (origin)
LINE_PROBE_POINT = (0.0, 0.0)
HYPERPLANE_PROBE_POINT = (0.0, 0.0, 0.0, 0.0)

PROBE_POINTS = {
    LINE_DIMENSION: LINE_PROBE_POINT,
    HYPERPLANE_DIMENSION: HYPERPLANE_PROBE_POINT,
}


# =============================================================================
# Object Type Names
# =============================================================================

OBJECT_TYPE_LINE: str = "Line"
OBJECT_TYPE_HYPERPLANE: str = "Hyperplane"
