"""Classification of index expressions accepted by Homog.

Homog instances support positional indexing only. A selector is one of three kinds:

    LINEAR: integer, or integer or boolean array (positions picked individually),
    RANGE: slice with at least one bound or a step,
    ALL: the full slice ``:`` or ``...``.

Reads accept a tuple of these (one per axis). Assignment accepts a single selector only.
"""
import enum
import numbers
from typing import Tuple
import numpy as np

__all__ = ['IndexKind', 'UnsupportedIndexingError', 'LinearIndexOnlyError', 'classify', 'read_selector',
    'assign_selector']


class UnsupportedIndexingError(IndexError):
    pass


class LinearIndexOnlyError(IndexError):
    pass


class IndexKind(enum.Enum):
    LINEAR = 'linear'
    RANGE = 'range'
    ALL = 'all'


def classify(selector) -> IndexKind:
    """Determine the kind of a single (non-tuple) selector.

    Raises:
        UnsupportedIndexingError: For anything other than integers, integer/boolean arrays, slices and Ellipsis. In
            particular field names, None (new axis) and floats are rejected.
    """
    if selector is Ellipsis:
        return IndexKind.ALL
    if isinstance(selector, slice):
        if selector == slice(None):
            return IndexKind.ALL
        return IndexKind.RANGE
    # bool is an Integral but numpy treats a bare bool as a new-axis mask.
    if isinstance(selector, (numbers.Integral, np.integer)) and not isinstance(selector, (bool, np.bool_)):
        return IndexKind.LINEAR
    if isinstance(selector, (list, np.ndarray)):
        array = np.asarray(selector)
        if array.dtype == bool or np.issubdtype(array.dtype, np.integer):
            return IndexKind.LINEAR
        # Empty lists come out as float64.
        if array.size == 0:
            return IndexKind.LINEAR
    raise UnsupportedIndexingError('Indexing with %r is not supported by Homog objects.'%(selector,))


def _normalize(selector):
    if isinstance(selector, list):
        array = np.asarray(selector)
        return array.astype(int) if array.size == 0 else array
    return selector


def read_selector(selector) -> Tuple:
    """Validate an index expression used for reading and return it as a tuple ready for numpy."""
    if not isinstance(selector, tuple):
        selector = selector,
    for item in selector:
        classify(item)
    return tuple(_normalize(item) for item in selector)


def assign_selector(selector):
    """Validate an index expression used for assignment.

    Raises:
        LinearIndexOnlyError: If more than one selector is given.
    """
    if isinstance(selector, tuple):
        if len(selector) != 1:
            raise LinearIndexOnlyError('Homog objects support assignment with a single selector only, got %d.'%
                len(selector))
        selector, = selector
    classify(selector)
    return _normalize(selector)
