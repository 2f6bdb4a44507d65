"""Affine transformation matrix of the 2D plane."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple, Union

import numpy as np
from fontTools.misc.transform import Transform
from numpy.typing import NDArray

from avsvg.bound import AvBound
from avsvg.common import NonInvertibleMatrixError, format_number
from avsvg.consts import MATRIX_ATOL, MATRIX_RTOL
from avsvg.geom import GeomMath

Number = Union[int, float]


###############################################################################
# AvMatrix
###############################################################################


class AvMatrix:
    """
    Affine transformation matrix(a, b, c, d, tx, ty) of the 2D plane.

    A point is mapped as
        | x' |   | a  c  tx |   | x |
        | y' | = | b  d  ty | * | y |
        | 1  |   | 0  0  1  |   | 1 |
    i.e. (x, y) -> (a*x + c*y + tx, b*x + d*y + ty).
    The component order is the same as SVG's matrix() and fontTools' Transform.

    All mutating methods work in place and return self for chaining.
    multiply() composes on the right, so the latest added transformation is
    applied first to the points (like a canvas transformation stack):
        AvMatrix().translate(10, 0).scale(2, 2)  maps (1, 1) to (12, 2)
    """

    _m: NDArray[np.float64]  # shape (3, 3)
    _stack: List[NDArray[np.float64]]  # saved states

    def __init__(
        # pylint: disable=too-many-arguments,too-many-positional-arguments
        self,
        a: float = 1.0,
        b: float = 0.0,
        c: float = 0.0,
        d: float = 1.0,
        tx: float = 0.0,
        ty: float = 0.0,
    ):
        self._m = self._to_array((a, b, c, d, tx, ty))
        self._stack = []

    @staticmethod
    def _to_array(values: Sequence[Number]) -> NDArray[np.float64]:
        if len(values) != 6:
            raise ValueError(f"Affine matrix needs 6 values, got {len(values)}")
        a, b, c, d, tx, ty = (float(v) for v in values)
        return np.array([[a, c, tx], [b, d, ty], [0.0, 0.0, 1.0]], dtype=np.float64)

    # -------------------------------------------------------------------------
    # Construction
    # -------------------------------------------------------------------------

    @classmethod
    def identity(cls) -> AvMatrix:
        """Return a new identity matrix."""
        return cls()

    @classmethod
    def from_values(cls, values: Sequence[Number]) -> AvMatrix:
        """Create a matrix from the 6 values [a, b, c, d, tx, ty]."""
        matrix = cls()
        matrix._m = cls._to_array(values)
        return matrix

    @classmethod
    def flip_horizontal(cls) -> AvMatrix:
        """Return a new matrix mirroring at the y-axis."""
        return cls(-1.0, 0.0, 0.0, 1.0, 0.0, 0.0)

    @classmethod
    def flip_vertical(cls) -> AvMatrix:
        """Return a new matrix mirroring at the x-axis."""
        return cls(1.0, 0.0, 0.0, -1.0, 0.0, 0.0)

    @classmethod
    def flip_central(cls) -> AvMatrix:
        """Return a new matrix mirroring at the origin."""
        return cls(-1.0, 0.0, 0.0, -1.0, 0.0, 0.0)

    def copy(self) -> AvMatrix:
        """Return an independent copy (the save/restore stack is not copied)."""
        return AvMatrix.from_values(self.values)

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def values(self) -> Tuple[float, float, float, float, float, float]:
        """Tuple (a, b, c, d, tx, ty)"""
        m = self._m
        return (
            float(m[0, 0]),
            float(m[1, 0]),
            float(m[0, 1]),
            float(m[1, 1]),
            float(m[0, 2]),
            float(m[1, 2]),
        )

    @property
    def array(self) -> NDArray[np.float64]:
        """Copy of the homogeneous 3x3 matrix."""
        return self._m.copy()

    @property
    def determinant(self) -> float:
        """float: a*d - b*c"""
        a, b, c, d, _, _ = self.values
        return a * d - b * c

    @property
    def is_identity(self) -> bool:
        """bool: True if the matrix is exactly the identity."""
        return bool(np.array_equal(self._m, np.eye(3)))

    # -------------------------------------------------------------------------
    # Mutating operations
    # -------------------------------------------------------------------------

    def reset(self) -> AvMatrix:
        """Reset to the identity."""
        self._m = np.eye(3, dtype=np.float64)
        return self

    def set_values(self, values: Sequence[Number]) -> AvMatrix:
        """Replace the values by [a, b, c, d, tx, ty]."""
        self._m = self._to_array(values)
        return self

    def multiply(self, other: Union[AvMatrix, Sequence[Number]]) -> AvMatrix:
        """
        Compose with _other_ on the right: self = self * other.
        _other_ is either an AvMatrix or the 6 values [a, b, c, d, tx, ty].
        """
        other_m = other._m if isinstance(other, AvMatrix) else self._to_array(other)
        self._m = self._m @ other_m
        return self

    def translate(self, x: float = 0.0, y: float = 0.0) -> AvMatrix:
        """Append a translation by (x, y)."""
        return self.multiply((1.0, 0.0, 0.0, 1.0, x, y))

    def rotate(self, degrees: float) -> AvMatrix:
        """Append a rotation by _degrees_ around the origin."""
        rad = GeomMath.deg_to_rad(degrees)
        cos_r = math.cos(rad)
        sin_r = math.sin(rad)
        return self.multiply((cos_r, sin_r, -sin_r, cos_r, 0.0, 0.0))

    def scale(self, x: float = 1.0, y: float | None = None) -> AvMatrix:
        """Append a scaling by (x, y); y defaults to x."""
        if y is None:
            y = x
        return self.multiply((x, 0.0, 0.0, y, 0.0, 0.0))

    def skew(self, degrees_x: float = 0.0, degrees_y: float = 0.0) -> AvMatrix:
        """Append a skew by the given angles (degrees) along x and y."""
        tan_x = math.tan(GeomMath.deg_to_rad(degrees_x))
        tan_y = math.tan(GeomMath.deg_to_rad(degrees_y))
        return self.multiply((1.0, tan_y, tan_x, 1.0, 0.0, 0.0))

    def save(self) -> AvMatrix:
        """Push the current values onto the stack."""
        self._stack.append(self._m.copy())
        return self

    def restore(self) -> AvMatrix:
        """
        Pop the most recently saved values from the stack.

        Raises:
            IndexError: if there is no saved state.
        """
        if not self._stack:
            raise IndexError("restore() without matching save()")
        self._m = self._stack.pop()
        return self

    # -------------------------------------------------------------------------
    # Non-mutating operations
    # -------------------------------------------------------------------------

    def invert(self) -> AvMatrix:
        """
        Return the inverse as a new matrix.

        Raises:
            NonInvertibleMatrixError: if the determinant is zero (or not finite).
        """
        a, b, c, d, tx, ty = self.values
        det = a * d - b * c
        if det == 0.0 or not math.isfinite(det):
            raise NonInvertibleMatrixError(f"Matrix {self} is not invertible (determinant {det})")
        inv = 1.0 / det
        return AvMatrix(
            d * inv,
            -b * inv,
            -c * inv,
            a * inv,
            inv * (c * ty - d * tx),
            inv * (b * tx - a * ty),
        )

    def transform_point(self, x: float = 0.0, y: float = 0.0) -> Tuple[float, float]:
        """Map the point (x, y)."""
        a, b, c, d, tx, ty = self.values
        return (x * a + y * c + tx, x * b + y * d + ty)

    def transform_vector(self, x: float = 0.0, y: float = 0.0) -> Tuple[float, float]:
        """Map the vector (x, y), i.e. ignoring the translation."""
        a, b, c, d, _, _ = self.values
        return (x * a + y * c, x * b + y * d)

    def map_points(self, points: Union[Sequence[Sequence[Number]], NDArray[np.float64]]) -> NDArray[np.float64]:
        """
        Map an array of points.

        Args:
            points: array-like of shape (n, 2)

        Returns:
            NDArray[np.float64]: the mapped points, shape (n, 2)
        """
        arr = np.asarray(points, dtype=np.float64).reshape(-1, 2)
        return arr @ self._m[:2, :2].T + self._m[:2, 2]

    def map_bound(self, bound: AvBound) -> AvBound:
        """Map the four corners of _bound_ and return the bound around them."""
        if bound.is_empty:
            return AvBound.empty()
        corners = (
            (bound.left, bound.top),
            (bound.right, bound.top),
            (bound.right, bound.bottom),
            (bound.left, bound.bottom),
        )
        return AvBound.from_points(self.map_points(corners))

    def approx_equal(self, other: AvMatrix, rtol: float = MATRIX_RTOL, atol: float = MATRIX_ATOL) -> bool:
        """True if all values are equal within the given tolerances."""
        return bool(np.allclose(self._m, other._m, rtol=rtol, atol=atol))

    def to_transform(self) -> Transform:
        """Return the equivalent fontTools Transform."""
        return Transform(*self.values)

    def to_svg_transform(self) -> str:
        """Return the SVG transform attribute value "matrix(a,b,c,d,e,f)"."""
        return "matrix(" + ",".join(format_number(value) for value in self.values) + ")"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AvMatrix):
            return NotImplemented
        return bool(np.array_equal(self._m, other._m))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return "AvMatrix(" + ", ".join(f"{value:g}" for value in self.values) + ")"

    def __str__(self) -> str:
        return ",".join(f"{value:g}" for value in self.values)
