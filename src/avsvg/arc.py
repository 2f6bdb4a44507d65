"""Conversion of SVG elliptical arcs into cubic Bezier curves.

The conversion follows the endpoint to center parameterization of the SVG
implementation notes (https://www.w3.org/TR/SVG/implnote.html#ArcImplementationNotes).
The arc is split into segments of at most 90 degrees, each approximated by one cubic.
"""

from __future__ import annotations

import logging
import math
from typing import List, Tuple

from avsvg.consts import ARC_SEGMENT_MAX_ANGLE, TAU
from avsvg.geom import GeomMath

logger = logging.getLogger(__name__)

# (x0, y0, c1x, c1y, c2x, c2y, x, y)
CubicSegment = Tuple[float, float, float, float, float, float, float, float]


class ArcConverter:
    """Static methods converting elliptical arcs into cubic Bezier segments."""

    @staticmethod
    def get_arc_center(
        # pylint: disable=too-many-arguments,too-many-positional-arguments,too-many-locals
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        large_arc_flag: float,
        sweep_flag: float,
        rx: float,
        ry: float,
        sin_phi: float,
        cos_phi: float,
    ) -> Tuple[float, float, float, float]:
        """
        Convert from endpoint to center parameterization.
        The radii must already be corrected (positive and large enough for the chord).

        Returns:
            Tuple[float, float, float, float]: (cx, cy, theta1, delta_theta)
        """
        # Move the origin to the middle between both points,
        # then rotate so that the ellipse axes line up with the coordinate axes.
        x1p = cos_phi * (x1 - x2) / 2.0 + sin_phi * (y1 - y2) / 2.0
        y1p = -sin_phi * (x1 - x2) / 2.0 + cos_phi * (y1 - y2) / 2.0

        rx_sq = rx * rx
        ry_sq = ry * ry
        x1p_sq = x1p * x1p
        y1p_sq = y1p * y1p

        # Center (cx', cy') in the rotated coordinate system.
        # Rounding errors can make the radicand slightly negative, e.g. -1.3877787807814457e-17
        radicand = max((rx_sq * ry_sq) - (rx_sq * y1p_sq) - (ry_sq * x1p_sq), 0.0)
        radicand /= (rx_sq * y1p_sq) + (ry_sq * x1p_sq)
        radicand = math.sqrt(radicand) * (-1.0 if large_arc_flag == sweep_flag else 1.0)

        cxp = radicand * rx / ry * y1p
        cyp = radicand * -ry / rx * x1p

        # Back to the original coordinate system
        cx = cos_phi * cxp - sin_phi * cyp + (x1 + x2) / 2.0
        cy = sin_phi * cxp + cos_phi * cyp + (y1 + y2) / 2.0

        v1x = (x1p - cxp) / rx
        v1y = (y1p - cyp) / ry
        v2x = (-x1p - cxp) / rx
        v2y = (-y1p - cyp) / ry

        theta1 = GeomMath.unit_vector_angle(1.0, 0.0, v1x, v1y)
        delta_theta = GeomMath.unit_vector_angle(v1x, v1y, v2x, v2y)

        if sweep_flag == 0 and delta_theta > 0.0:
            delta_theta -= TAU
        if sweep_flag == 1 and delta_theta < 0.0:
            delta_theta += TAU

        return cx, cy, theta1, delta_theta

    @staticmethod
    def approximate_unit_arc(theta1: float, delta_theta: float) -> CubicSegment:
        """
        Approximate an arc of the unit circle, starting at angle _theta1_ and
        spanning _delta_theta_ (at most 90 degrees), by one cubic Bezier curve.
        """
        alpha = 4.0 / 3.0 * math.tan(delta_theta / 4.0)

        x1 = math.cos(theta1)
        y1 = math.sin(theta1)
        x2 = math.cos(theta1 + delta_theta)
        y2 = math.sin(theta1 + delta_theta)

        return (
            x1,
            y1,
            x1 - y1 * alpha,
            y1 + x1 * alpha,
            x2 + y2 * alpha,
            y2 - x2 * alpha,
            x2,
            y2,
        )

    @classmethod
    def arc_to_curves(
        # pylint: disable=too-many-arguments,too-many-positional-arguments,too-many-locals
        cls,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        large_arc_flag: float,
        sweep_flag: float,
        rx: float,
        ry: float,
        rotation_degrees: float,
    ) -> List[CubicSegment]:
        """
        Convert the SVG arc from (x1, y1) to (x2, y2) into cubic Bezier segments.

        Args:
            x1, y1: start point (current point)
            x2, y2: end point
            large_arc_flag: 0 or 1
            sweep_flag: 0 (negative angle direction) or 1 (positive angle direction)
            rx, ry: radii, scaled up if too small for the chord
            rotation_degrees: rotation of the ellipse x-axis

        Returns:
            List[CubicSegment]: one 8-tuple (start, control1, control2, end) per segment.
                Empty if the arc is degenerate (start equals end, or a radius is zero).
        """
        # any non-zero flag counts as set
        large_arc_flag = 1.0 if large_arc_flag else 0.0
        sweep_flag = 1.0 if sweep_flag else 0.0

        sin_phi = math.sin(rotation_degrees * TAU / 360.0)
        cos_phi = math.cos(rotation_degrees * TAU / 360.0)

        x1p = cos_phi * (x1 - x2) / 2.0 + sin_phi * (y1 - y2) / 2.0
        y1p = -sin_phi * (x1 - x2) / 2.0 + cos_phi * (y1 - y2) / 2.0

        # line to itself
        if x1p == 0.0 and y1p == 0.0:
            logger.debug("Dropping arc with identical start and end point (%g, %g)", x1, y1)
            return []

        if rx == 0.0 or ry == 0.0:
            logger.debug("Dropping arc with zero radius (rx=%g, ry=%g)", rx, ry)
            return []

        # compensate out-of-range radii
        rx = abs(rx)
        ry = abs(ry)
        lambda_sq = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
        if lambda_sq > 1.0:
            rx *= math.sqrt(lambda_sq)
            ry *= math.sqrt(lambda_sq)

        cx, cy, theta1, delta_theta = cls.get_arc_center(
            x1, y1, x2, y2, large_arc_flag, sweep_flag, rx, ry, sin_phi, cos_phi
        )

        segments = max(math.ceil(abs(delta_theta) / ARC_SEGMENT_MAX_ANGLE), 1)
        delta_theta /= segments

        curves: List[CubicSegment] = []
        for _ in range(segments):
            unit_curve = cls.approximate_unit_arc(theta1, delta_theta)
            theta1 += delta_theta

            # unit circle -> ellipse: scale, rotate, translate
            mapped: List[float] = []
            for i in range(0, 8, 2):
                x = unit_curve[i] * rx
                y = unit_curve[i + 1] * ry
                mapped.append(cos_phi * x - sin_phi * y + cx)
                mapped.append(sin_phi * x + cos_phi * y + cy)
            curves.append(tuple(mapped))  # type: ignore[arg-type]

        # land exactly on the commanded end point
        last = curves[-1]
        curves[-1] = (last[0], last[1], last[2], last[3], last[4], last[5], x2, y2)

        logger.debug("Arc (%g, %g) -> (%g, %g) converted into %d cubic segment(s)", x1, y1, x2, y2, segments)
        return curves
