"""
Type aliases for lingeom.

Points and coefficient vectors are accepted in any of the array forms the
library works with and normalized to 1-D float64 tensors internally.
"""

from typing import Sequence, Tuple, Union

import numpy as np
import torch

# Anything that can be converted to a 1-D tensor of reals
ArrayLike = Union[Sequence[float], np.ndarray, torch.Tensor]

# A point in R^D, length D
PointLike = ArrayLike

# A coefficient vector (a0, a1, ..., aD), length D + 1
CoefficientsLike = ArrayLike

# Read-only snapshot returned by get_coefficients()
Coefficients = Tuple[float, ...]

# Batch of points, shape (..., D)
PointBatch = Union[np.ndarray, torch.Tensor, Sequence[Sequence[float]]]
