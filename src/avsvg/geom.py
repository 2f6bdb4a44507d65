"""Numeric helpers for 2D geometry, all computed in double precision."""

from __future__ import annotations

import math
from typing import Sequence, Tuple, Union

Number = Union[int, float]


###############################################################################
# GeomMath
###############################################################################
class GeomMath:
    """Class to provide various static methods related to geometry handling."""

    @staticmethod
    def clamp(value: float, lower: float, upper: float) -> float:
        """Clamp _value_ into the closed interval [_lower_, _upper_]."""
        return max(lower, min(upper, value))

    @staticmethod
    def deg_to_rad(degrees: float) -> float:
        """Convert an angle given in degrees to radians."""
        return degrees * math.pi / 180.0

    @staticmethod
    def reflect_point(point: Sequence[Number], center: Sequence[Number]) -> Tuple[float, float]:
        """
        Reflect _point_ through _center_, i.e. return 2*center - point.

        Used for the implicit control points of the smooth curve commands (S, T).

        Args:
            point (Tuple/List[float]): the point to reflect - (x, y)
            center (Tuple/List[float]): the reflection center - (x, y)

        Returns:
            Tuple[float, float]: the reflected point
        """
        return (2.0 * center[0] - point[0], 2.0 * center[1] - point[1])

    @staticmethod
    def interpolate(
        point0: Sequence[Number], point1: Sequence[Number], factor: float
    ) -> Tuple[float, float]:
        """Return the point point0 + factor * (point1 - point0)."""
        return (
            point0[0] + factor * (point1[0] - point0[0]),
            point0[1] + factor * (point1[1] - point0[1]),
        )

    @staticmethod
    def unit_vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
        """
        Signed angle in radians from unit vector u to unit vector v.

        The vectors are expected to be (nearly) normalized, so the length
        normalization is skipped. The dot product is clamped to [-1, 1] because
        rounding errors (e.g. -1.0000000000000002) would make acos fail.
        """
        sign = -1.0 if ux * vy - uy * vx < 0.0 else 1.0
        dot = GeomMath.clamp(ux * vx + uy * vy, -1.0, 1.0)
        return sign * math.acos(dot)
