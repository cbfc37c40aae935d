"""Text rendering of homogeneous coordinate arrays and parsing it back.

Finite elements are written as Python complex literals, e.g. ``1.5-2j``. Infinite elements are written with their
direction angle as a multiple of pi, e.g. ``inf@(0.5pi)`` is infinity approached along the positive imaginary axis.
Indeterminate elements (zero numerator and denominator) are written ``nan+nanj``. Arrays use nested brackets like
numpy, with columns padded to a common width.
"""
import re
from typing import Tuple
import numpy as np
from .types import ComplexArray

__all__ = ['ParseError', 'format_element', 'format_arrays', 'parse']


class ParseError(ValueError):
    pass


_TOKEN = re.compile(r'\s*(?:(?P<open>\[)|(?P<close>\])|inf@\((?P<angle>[^)]*)pi\)|(?P<value>[^\s\[\]]+))')


def format_element(numerator: complex, denominator: complex, precision: int) -> str:
    if denominator == 0:
        if numerator == 0:
            return 'nan+nanj'
        return 'inf@(%spi)'%format(np.angle(numerator)/np.pi, '.%dg'%precision)
    z = numerator/denominator
    return format(z.real, '.%dg'%precision) + format(z.imag, '+.%dg'%precision) + 'j'


def _render(cells: np.ndarray, width: int, depth: int) -> str:
    if cells.ndim == 1:
        return '[' + '  '.join(cell.rjust(width) for cell in cells) + ']'
    separator = '\n'*(cells.ndim - 1) + ' '*(depth + 1)
    return '[' + separator.join(_render(sub, width, depth + 1) for sub in cells) + ']'


def format_arrays(numerator: ComplexArray, denominator: ComplexArray, precision: int) -> str:
    """Render a numerator/denominator pair elementwise.

    Args:
        numerator, denominator: Arrays of the same shape.
        precision: Significant digits for values and infinity angles.

    Returns:
        Deterministic text which parse() reads back.
    """
    assert numerator.shape == denominator.shape
    if numerator.size == 0:
        return '[]'
    cells = np.empty(numerator.shape, object)
    for index in np.ndindex(numerator.shape):
        cells[index] = format_element(numerator[index], denominator[index], precision)
    if cells.ndim == 0:
        return cells[()]
    width = max(len(cell) for cell in cells.flat)
    return _render(cells, width, 0)


def _parse_value(token: str) -> Tuple[complex, complex]:
    try:
        z = complex(token)
    except ValueError:
        raise ParseError('Could not parse %r as a complex number.'%token) from None
    if np.isnan(z):
        return 0j, 0j
    return z, 1 + 0j


def _parse_angle(token: str) -> Tuple[complex, complex]:
    try:
        turns = float(token)
    except ValueError:
        raise ParseError('Could not parse %r as an infinity angle.'%token) from None
    return np.exp(1j*np.pi*turns), 0j


def parse(text: str) -> Tuple[ComplexArray, ComplexArray]:
    """Read the output of format_arrays.

    Returns:
        numerator, denominator: complex arrays of the same shape.

    Raises:
        ParseError: If text is malformed or ragged.
    """
    stack = [[]]
    position = 0
    text = text.strip()
    while position < len(text):
        match = _TOKEN.match(text, position)
        if match is None:
            raise ParseError('Unexpected text at position %d: %r.'%(position, text[position:]))
        position = match.end()
        if match.group('open'):
            stack.append([])
        elif match.group('close'):
            if len(stack) == 1:
                raise ParseError('Unbalanced ] at position %d.'%match.start())
            items = stack.pop()
            stack[-1].append(items)
        elif match.group('angle') is not None:
            stack[-1].append(_parse_angle(match.group('angle')))
        else:
            stack[-1].append(_parse_value(match.group('value')))
    if len(stack) != 1:
        raise ParseError('Unbalanced [.')
    if len(stack[0]) != 1:
        raise ParseError('Expected a single top-level value or array, got %d.'%len(stack[0]))
    root = stack[0][0]
    if root == []:
        empty = np.zeros((0,), complex)
        return empty, empty.copy()
    try:
        pairs = np.array(root, complex)
    except ValueError:
        raise ParseError('Array rows have inconsistent lengths.') from None
    if pairs.shape[-1] != 2:
        raise ParseError('Array rows have inconsistent lengths.')
    return pairs[..., 0].copy(), pairs[..., 1].copy()
