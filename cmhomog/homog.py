"""Homogeneous coordinates on the complex projective line.

A Homog represents the complex number numerator/denominator elementwise. If the denominator is zero the element is
infinity, and the numerator is the tangent direction in the complex plane from which infinity is approached. This is
useful for specifying lines, as e.g. there are infinitely many lines through any fixed finite point and infinity.

Arithmetic is done by cross-multiplication, so infinite operands propagate through sums and products without ever
dividing by zero. Only to_complex (and the functions built on it) actually divide.

Instances interoperate with plain numbers and numpy arrays, which are promoted with denominator 1:

>>> h = Homog([1, 2]) + 1j
>>> h.to_complex()
array([1.+1.j, 2.+1.j])
"""
import logging
from typing import Sequence
import numpy as np
from . import formatting
from ._utility import Delegate, get_precision
from .indexing import read_selector, assign_selector
from .shapes import ShapeMismatchError, broadcast_shapes, expand, check_concatenation_shapes
from .types import ComplexArray, RealArray, BoolArray, Numeric

__all__ = ['Homog', 'promote', 'concatenate', 'hstack', 'vstack', 'left_divide', 'right_divide']

logger = logging.getLogger(__name__)


def _canonicalize(numerator: ComplexArray, denominator: ComplexArray):
    """Replace floating-point infinities by their structural representation, in place."""
    # There is no unique direction for a complex infinity, so we arbitrarily pick one of the eight multiples of 45
    # degrees based on the signs of the parts.
    infinite = np.isinf(numerator)
    if np.any(infinite):
        direction = np.nan_to_num(np.sign(numerator.real[infinite])) + 1j*np.nan_to_num(
            np.sign(numerator.imag[infinite]))
        numerator[infinite] = direction/abs(direction)
        denominator[infinite] = 0
    # Finite over infinite is zero.
    zero = np.isinf(denominator) & ~infinite
    if np.any(zero):
        numerator[zero] = 0
        denominator[zero] = 1


def _complex_sign(z: ComplexArray) -> ComplexArray:
    """z/|z|, or 0 where z is 0."""
    with np.errstate(divide='ignore', invalid='ignore'):
        return np.where(z == 0, 0, z/abs(z))


class Homog:
    """Array of homogeneous coordinates representing numerator/denominator.

    Homog(numerator) uses denominator 1. A single-element denominator is expanded to the shape of the numerator.
    Floating-point infinities in the numerator are replaced by a unit direction (based on the signs of the real and
    imaginary parts) over zero. The input arrays are copied.

    Operators act elementwise except @, which is matrix multiplication of numerators and denominators separately.

    Attributes:
        numerator (complex array): Read-only.
        denominator (complex array): Read-only, same shape as numerator.
    """
    # Make numpy defer to our reflected operators.
    __array_ufunc__ = None

    shape = Delegate('numerator', 'shape')
    ndim = Delegate('numerator', 'ndim')
    size = Delegate('numerator', 'size')

    def __init__(self, numerator: Numeric, denominator: Numeric = None):
        if isinstance(numerator, Homog):
            if denominator is not None:
                raise TypeError('Cannot give a denominator with a Homog numerator.')
            numerator, denominator = numerator.numerator, numerator.denominator
        numerator = np.array(numerator, complex)
        if denominator is None:
            denominator = np.ones(numerator.shape, complex)
        else:
            denominator = np.array(denominator, complex)
        shape = broadcast_shapes(numerator.shape, denominator.shape)
        numerator = expand(numerator, shape)
        denominator = expand(denominator, shape)
        _canonicalize(numerator, denominator)
        numerator.flags.writeable = False
        denominator.flags.writeable = False
        self.numerator = numerator
        self.denominator = denominator

    @classmethod
    def infinity(cls, angle=0.) -> 'Homog':
        """Infinity approached from direction exp(1j*angle).

        Array angles give an array of infinities.
        """
        numerator = np.exp(1j*np.asarray(angle, float))
        return cls(numerator, np.zeros(numerator.shape))

    @classmethod
    def parse(cls, text: str) -> 'Homog':
        """Inverse of format() up to display precision."""
        return cls(*formatting.parse(text))

    def numer(self) -> ComplexArray:
        return self.numerator

    def denom(self) -> ComplexArray:
        return self.denominator

    # Arithmetic.

    def __add__(self, other) -> 'Homog':
        a1, a2, b1, b2 = _operands(self, other)
        return _result(a1*b2 + a2*b1, a2*b2)

    def __radd__(self, other) -> 'Homog':
        return promote(other) + self

    def __neg__(self) -> 'Homog':
        return Homog(-self.numerator, self.denominator)

    def __sub__(self, other) -> 'Homog':
        return self + (-promote(other))

    def __rsub__(self, other) -> 'Homog':
        return promote(other) + (-self)

    def __mul__(self, other) -> 'Homog':
        a1, a2, b1, b2 = _operands(self, other)
        return _result(a1*b1, a2*b2)

    def __rmul__(self, other) -> 'Homog':
        return promote(other)*self

    def inv(self) -> 'Homog':
        """Return 1/self by swapping numerator and denominator."""
        return Homog(self.denominator, self.numerator)

    def __truediv__(self, other) -> 'Homog':
        return self*promote(other).inv()

    def __rtruediv__(self, other) -> 'Homog':
        return promote(other)*self.inv()

    def __matmul__(self, other) -> 'Homog':
        other = promote(other)
        try:
            numerator = np.matmul(self.numerator, other.numerator)
            denominator = np.matmul(self.denominator, other.denominator)
        except ValueError as e:
            raise ShapeMismatchError('Cannot matrix multiply shapes %s and %s: %s'%(self.shape, other.shape, e)) from e
        # Matrix products are wrapped as computed, without rescaling infinite directions.
        return _result(numerator, denominator, rescale=False)

    def __rmatmul__(self, other) -> 'Homog':
        return promote(other) @ self

    def conj(self) -> 'Homog':
        return Homog(self.numerator.conj(), self.denominator.conj())

    def transpose(self) -> 'Homog':
        return Homog(self.numerator.T, self.denominator.T)

    def ctranspose(self) -> 'Homog':
        """Conjugate transpose."""
        return Homog(self.numerator.conj().T, self.denominator.conj().T)

    @property
    def T(self) -> 'Homog':
        return self.transpose()

    @property
    def H(self) -> 'Homog':
        return self.ctranspose()

    # Conversion and introspection.

    def isinf(self) -> BoolArray:
        return (self.denominator == 0) & (self.numerator != 0)

    def to_complex(self) -> ComplexArray:
        """Divide out.

        Every infinite element becomes inf + 0j regardless of direction, so results compare predictably. Elements with
        zero numerator and denominator become nan.
        """
        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            z = self.numerator/self.denominator
        z = np.where(self.isinf() | np.isinf(z), complex(np.inf, 0), z)
        indeterminate = (self.denominator == 0) & (self.numerator == 0)
        return np.where(indeterminate, complex(np.nan, np.nan), z)

    def __complex__(self):
        if self.size != 1:
            raise TypeError('Only single-element Homog objects can be converted to complex.')
        return complex(self.to_complex().reshape(()))

    def abs(self) -> RealArray:
        return abs(self.to_complex())

    __abs__ = abs

    def angle(self) -> RealArray:
        """Phase angle in [-pi, pi).

        For infinite elements this is the direction from which infinity is approached.
        """
        return np.mod(np.angle(self.numerator) - np.angle(self.denominator) + np.pi, 2*np.pi) - np.pi

    @property
    def real(self) -> RealArray:
        return self.to_complex().real

    @property
    def imag(self) -> RealArray:
        return self.to_complex().imag

    def sign(self) -> ComplexArray:
        """Elementwise z/|z| (0 for 0). For infinite elements this is the unit direction."""
        return np.where(self.isinf(), _complex_sign(self.numerator), _complex_sign(self.to_complex()))

    # Structure.

    def __len__(self):
        return len(self.numerator)

    def __iter__(self):
        if self.ndim == 0:
            raise TypeError('Iteration over a 0-d Homog.')
        for num in range(len(self)):
            yield self[num]

    def __getitem__(self, selector) -> 'Homog':
        selector = read_selector(selector)
        return Homog(self.numerator[selector], self.denominator[selector])

    def index_assign(self, selector, value) -> 'Homog':
        """Copy self with elements at selector replaced by value.

        Only a single selector (integer, integer or boolean array, or slice) is supported. It is a linear index into
        the flattened (row-major) array, so for a 2x2 array index 3 is the bottom right element. Boolean masks are
        flattened too. value is promoted and must have the shape of the selected elements or be single-element.
        """
        selector = assign_selector(selector)
        if isinstance(selector, np.ndarray) and selector.dtype == bool:
            selector = selector.reshape(-1)
        value = promote(value)
        numerator = np.array(self.numerator, order='C')
        denominator = np.array(self.denominator, order='C')
        # Views, since the copies are contiguous.
        flat_numerator = numerator.reshape(-1)
        flat_denominator = denominator.reshape(-1)
        target_shape = flat_numerator[selector].shape
        if broadcast_shapes(target_shape, value.shape) != target_shape:
            raise ShapeMismatchError('Cannot assign shape %s to selection of shape %s.'%(value.shape, target_shape))
        flat_numerator[selector] = expand(value.numerator, target_shape)
        flat_denominator[selector] = expand(value.denominator, target_shape)
        return Homog(numerator, denominator)

    @property
    def flat(self) -> 'Homog':
        """1-d copy in row-major order, the order used by index_assign."""
        return Homog(self.numerator.reshape(-1), self.denominator.reshape(-1))

    def format(self, precision: int = None) -> str:
        """Render values, with infinite elements shown as inf@(<direction angle>pi)."""
        if precision is None:
            precision = get_precision()
        return formatting.format_arrays(self.numerator, self.denominator, precision)

    def __str__(self):
        return self.format()

    def __repr__(self):
        return 'Homog(%s, %s)'%(np.array2string(self.numerator, separator=', '),
            np.array2string(self.denominator, separator=', '))

    def describe(self, precision: int = None) -> str:
        if self.ndim <= 1:
            header = '%d-element array'%self.size
        else:
            header = '-by-'.join(str(n) for n in self.shape) + ' array'
        return header + ' of homogeneous coordinates:\n\n' + self.format(precision) + '\n'


def promote(value) -> Homog:
    """Convert value to Homog. A Homog is returned unchanged."""
    if isinstance(value, Homog):
        return value
    return Homog(value)


def _operands(a, b):
    """Promote two elementwise operands and expand their arrays to the common shape."""
    a = promote(a)
    b = promote(b)
    shape = broadcast_shapes(a.shape, b.shape)
    return expand(a.numerator, shape), expand(a.denominator, shape), expand(b.numerator, shape), \
        expand(b.denominator, shape)


def _result(numerator: ComplexArray, denominator: ComplexArray, rescale: bool = True) -> Homog:
    """Wrap the raw numerator and denominator of an arithmetic result.

    If rescale is True, infinite elements get their direction scaled to unit magnitude. Indeterminate (0, 0)
    elements, from e.g. inf + inf or 0*inf, are kept.
    """
    numerator = np.array(numerator, complex)
    denominator = np.array(denominator, complex)
    if rescale:
        direction = (denominator == 0) & (numerator != 0) & np.isfinite(numerator)
        numerator[direction] /= abs(numerator[direction])
    if logger.isEnabledFor(logging.DEBUG):
        num_indeterminate = np.count_nonzero((denominator == 0) & (numerator == 0))
        if num_indeterminate:
            logger.debug('Arithmetic produced %d indeterminate element(s).', num_indeterminate)
    return Homog(numerator, denominator)


def left_divide(a, b) -> Homog:
    """Matrix left division inv(a) @ b, with inv the elementwise inverse."""
    return promote(a).inv() @ b


def right_divide(a, b) -> Homog:
    """Matrix right division a @ inv(b), with inv the elementwise inverse."""
    return promote(a) @ promote(b).inv()


def concatenate(homogs: Sequence, axis: int = 0) -> Homog:
    """Join a sequence of Homog (or promotable) arrays along an existing axis.

    Scalars are treated as 1-element arrays.

    Raises:
        ConcatenationShapeError: If shapes disagree on any other axis.
    """
    homogs = [promote(h) for h in homogs]
    homogs = [Homog(np.atleast_1d(h.numerator), np.atleast_1d(h.denominator)) if h.ndim == 0 else h for h in homogs]
    shape = check_concatenation_shapes([h.shape for h in homogs], axis)
    numerator = np.empty(shape, complex)
    denominator = np.empty(shape, complex)
    np.concatenate([h.numerator for h in homogs], axis, out=numerator)
    np.concatenate([h.denominator for h in homogs], axis, out=denominator)
    return Homog(numerator, denominator)


def hstack(homogs: Sequence) -> Homog:
    """Stack horizontally (column wise) with numpy.hstack conventions."""
    homogs = [promote(h) for h in homogs]
    homogs = [Homog(np.atleast_1d(h.numerator), np.atleast_1d(h.denominator)) for h in homogs]
    if homogs and homogs[0].ndim == 1:
        return concatenate(homogs, 0)
    else:
        return concatenate(homogs, 1)


def vstack(homogs: Sequence) -> Homog:
    """Stack vertically (row wise) with numpy.vstack conventions."""
    homogs = [promote(h) for h in homogs]
    return concatenate([Homog(np.atleast_2d(h.numerator), np.atleast_2d(h.denominator)) for h in homogs], 0)
