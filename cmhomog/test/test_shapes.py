import numpy as np
import pytest
from cmhomog import shapes, indexing
from cmhomog.indexing import IndexKind


def test_broadcast_shapes():
    assert shapes.broadcast_shapes((2, 2), (2, 2)) == (2, 2)
    assert shapes.broadcast_shapes((2, 2), (1, 1)) == (2, 2)
    assert shapes.broadcast_shapes((), (3,)) == (3,)
    assert shapes.broadcast_shapes((1,), ()) == (1,)
    assert shapes.broadcast_shapes((0,), (1,)) == (0,)
    for shape1, shape2 in (((2, 2), (3, 1)), ((2, 2), (2, 1)), ((3,), (1, 3))):
        with pytest.raises(shapes.ShapeMismatchError):
            shapes.broadcast_shapes(shape1, shape2)


def test_expand():
    array = shapes.expand(np.array([[1j]]), (2, 3))
    assert array.shape == (2, 3)
    assert np.all(array == 1j)
    source = np.arange(3)
    array = shapes.expand(source, (3,))
    array[0] = 5
    assert source[0] == 0


def test_check_concatenation_shapes():
    assert shapes.check_concatenation_shapes([(2, 1), (2, 3)], 1) == (2, 4)
    assert shapes.check_concatenation_shapes([(2, 1), (3, 1)], -2) == (5, 1)
    for shapes_, axis in ((((2, 1), (3, 2)), 0), (((2,), (2, 1)), 0), (((2,), (2,)), 1), (((), ()), 0), ((), 0)):
        with pytest.raises(shapes.ConcatenationShapeError):
            shapes.check_concatenation_shapes(shapes_, axis)


def test_classify():
    assert indexing.classify(3) == IndexKind.LINEAR
    assert indexing.classify(np.int64(-1)) == IndexKind.LINEAR
    assert indexing.classify([0, 2]) == IndexKind.LINEAR
    assert indexing.classify(np.array([True, False])) == IndexKind.LINEAR
    assert indexing.classify([]) == IndexKind.LINEAR
    assert indexing.classify(slice(1, None)) == IndexKind.RANGE
    assert indexing.classify(slice(None)) == IndexKind.ALL
    assert indexing.classify(...) == IndexKind.ALL
    for selector in ('name', None, 1.5, True, [0.5], {'a': 1}):
        with pytest.raises(indexing.UnsupportedIndexingError):
            indexing.classify(selector)


def test_selectors():
    assert indexing.read_selector(1) == (1,)
    assert indexing.read_selector((1, slice(None))) == (1, slice(None))
    assert indexing.read_selector([])[0].dtype == int
    assert indexing.assign_selector((2,)) == 2
    with pytest.raises(indexing.LinearIndexOnlyError):
        indexing.assign_selector((0, 1))
    with pytest.raises(indexing.LinearIndexOnlyError):
        indexing.assign_selector(())
