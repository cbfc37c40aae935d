"""Define type aliases purely for documentation purposes."""
import numpy as np
from typing import Sequence, Tuple, Union

# Complex128 numpy arrays of any shape, including 0-d for scalars.
ComplexArray = np.ndarray
# Real numpy arrays of any shape.
RealArray = np.ndarray
BoolArray = np.ndarray

Shape = Tuple[int, ...]

# Anything np.asarray turns into a complex array.
Numeric = Union[complex, float, np.ndarray, Sequence[complex], Sequence[Sequence[complex]]]
