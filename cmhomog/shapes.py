"""Shape reconciliation for homogeneous coordinate arrays.

Only scalar expansion is supported: two shapes are compatible if they are equal or if either describes a single
element. This is stricter than numpy broadcasting on purpose - a (2, 2) array combined with a (2, 1) array is an error.
"""
from typing import Sequence
import numpy as np
from .types import Shape

__all__ = ['ShapeMismatchError', 'ConcatenationShapeError', 'broadcast_shapes', 'check_concatenation_shapes']


class ShapeMismatchError(ValueError):
    pass


class ConcatenationShapeError(ValueError):
    pass


def broadcast_shapes(shape1: Shape, shape2: Shape) -> Shape:
    """Reconcile two array shapes allowing scalar expansion only.

    Args:
        shape1, shape2: Shapes to reconcile.

    Returns:
        The common shape. If one shape is single-element, the other one is returned.

    Raises:
        ShapeMismatchError: If the shapes differ and neither is single-element.
    """
    shape1 = tuple(shape1)
    shape2 = tuple(shape2)
    if shape1 == shape2:
        return shape1
    if np.prod(shape2, dtype=int) == 1:
        return shape1
    if np.prod(shape1, dtype=int) == 1:
        return shape2
    raise ShapeMismatchError('Shapes %s and %s must be equal or one must be single-element.'%(shape1, shape2))


def expand(array: np.ndarray, shape: Shape) -> np.ndarray:
    """Copy array expanded to shape, which must be a result of broadcast_shapes."""
    if array.shape == tuple(shape):
        return array.copy()
    assert array.size == 1
    return np.full(shape, array.reshape(()), array.dtype)


def check_concatenation_shapes(shapes: Sequence[Shape], axis: int) -> Shape:
    """Check shapes agree on all axes but the concatenation axis.

    Returns:
        Shape of the concatenated array.

    Raises:
        ConcatenationShapeError: If the shapes are inconsistent, or axis is out of range.
    """
    if len(shapes) == 0:
        raise ConcatenationShapeError('Need at least one array to concatenate.')
    ndim = len(shapes[0])
    if any(len(shape) != ndim for shape in shapes):
        raise ConcatenationShapeError('All arrays must have the same number of dimensions, got %s.'%(list(shapes),))
    if not -ndim <= axis < ndim:
        raise ConcatenationShapeError('Axis %d out of range for %d-dimensional arrays.'%(axis, ndim))
    axis %= ndim
    for shape in shapes[1:]:
        for dim, (n0, n) in enumerate(zip(shapes[0], shape)):
            if dim != axis and n != n0:
                raise ConcatenationShapeError('Argument dimensions are not consistent: %s and %s along axis %d.'%(
                    shapes[0], shape, dim))
    total = sum(shape[axis] for shape in shapes)
    return shapes[0][:axis] + (total,) + shapes[0][axis + 1:]
