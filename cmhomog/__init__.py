"""Homogeneous coordinates on the complex projective line (Riemann sphere)."""
from .homog import *
from .shapes import ShapeMismatchError, ConcatenationShapeError, broadcast_shapes
from .indexing import UnsupportedIndexingError, LinearIndexOnlyError
from .formatting import ParseError
