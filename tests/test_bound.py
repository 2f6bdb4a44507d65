"""Test module for avsvg.bound

The tests are run using pytest.
"""

import math

import pytest
from fontTools.pens.boundsPen import ControlBoundsPen

from avsvg.bound import AvBound, BoundCalculator
from avsvg.matrix import AvMatrix
from avsvg.path import AvPath
from avsvg.svgpath import AvSvgPath


def normalized_of(path_string):
    """Parse, absolutize and normalize a path string."""
    return AvSvgPath.normalize(AvSvgPath.absolutize(AvSvgPath.parse(path_string)))


###############################################################################
# AvBound
###############################################################################


class TestAvBound:
    """Tests for the AvBound value object."""

    def test_empty(self):
        """Test the empty bound with its infinite sentinels."""
        bound = AvBound.empty()
        assert bound.is_empty
        assert bound.extent == (math.inf, math.inf, -math.inf, -math.inf)
        assert bound.width == 0.0
        assert bound.height == 0.0

    def test_properties(self):
        """Test width, height and centroid."""
        bound = AvBound(1, 2, 11, 22)
        assert not bound.is_empty
        assert bound.width == 10
        assert bound.height == 20
        assert bound.centroid == (6, 12)

    def test_single_point_is_not_empty(self):
        """Test that a bound around one point has zero size but is not empty."""
        bound = AvBound.from_points([(3, 4)])
        assert not bound.is_empty
        assert bound.extent == (3, 4, 3, 4)

    def test_from_points(self):
        """Test the tightest bound around points."""
        assert AvBound.from_points([(1, 5), (-2, 3), (4, -1)]).extent == (-2, -1, 4, 5)
        assert AvBound.from_points([]).is_empty

    def test_union(self):
        """Test the union of two bounds and the empty bound as neutral element."""
        first = AvBound(0, 0, 10, 10)
        second = AvBound(5, -5, 20, 5)
        assert first.union(second).extent == (0, -5, 20, 10)
        assert first.union(AvBound.empty()) == first
        assert AvBound.empty().union(first) == first

    def test_include_point(self):
        """Test extending a bound by a point."""
        assert AvBound.empty().include_point(1, 2).extent == (1, 2, 1, 2)
        assert AvBound(0, 0, 1, 1).include_point(-1, 5).extent == (-1, 0, 1, 5)

    def test_transform_affine(self):
        """Test mapping the corners of a bound."""
        bound = AvBound(0, 0, 10, 10).transform_affine(AvMatrix().translate(5, 5).scale(2))
        assert bound.extent == pytest.approx((5, 5, 25, 25))

    def test_immutable(self):
        """Test that a bound can not be changed."""
        bound = AvBound(0, 0, 1, 1)
        with pytest.raises(AttributeError):
            bound.left = 5  # type: ignore[misc]

    def test_dict_serialization(self):
        """Test the conversion to and from a dictionary."""
        bound = AvBound(1, 2, 3, 4)
        assert bound.to_dict() == {"left": 1, "top": 2, "right": 3, "bottom": 4}
        assert AvBound.from_dict(bound.to_dict()) == bound
        assert AvBound.from_dict({}).is_empty

    def test_str(self):
        """Test the string representation."""
        assert str(AvBound(1, 2, 3, 4)) == "1,2,3,4"


###############################################################################
# BoundCalculator
###############################################################################


class TestBoundCalculator:
    """Tests for BoundCalculator.compute_bound"""

    def test_square(self):
        """Test the bound of a closed square."""
        bound = BoundCalculator.compute_bound(normalized_of("M0,0 L10,0 L10,10 L0,10 Z"), AvMatrix())
        assert bound.extent == (0, 0, 10, 10)

    def test_without_matrix(self):
        """Test that no matrix means identity."""
        assert BoundCalculator.compute_bound(normalized_of("M-1,2 L3,-4")).extent == (-1, -4, 3, 2)

    def test_with_matrix(self):
        """Test that the coordinates are transformed before measuring."""
        bound = BoundCalculator.compute_bound(normalized_of("M0,0 L10,10"), AvMatrix().translate(5, 0).scale(2))
        assert bound.extent == (5, 0, 25, 20)

    def test_rotation_is_tight(self):
        """Test that the rotated points (not the rotated rectangle) are measured."""
        bound = BoundCalculator.compute_bound(normalized_of("M0,0 L10,10"), AvMatrix().rotate(-45))
        assert bound.extent == pytest.approx((0, 0, math.sqrt(200), 0), abs=1e-9)

    def test_control_points_included(self):
        """Test that control points count, even if the curve does not reach them."""
        bound = BoundCalculator.compute_bound(normalized_of("M0,0 C0,10 10,10 10,0"))
        assert bound.extent == (0, 0, 10, 10)

    def test_no_commands(self):
        """Test that no commands give the empty bound."""
        assert BoundCalculator.compute_bound([]).is_empty
        assert BoundCalculator.compute_bound(normalized_of("")).is_empty

    def test_odd_number_of_coordinates(self):
        """Test that commands without coordinate pairs are rejected."""
        with pytest.raises(ValueError):
            BoundCalculator.compute_bound(AvSvgPath.parse("M0,0 H5"))

    def test_union(self):
        """Test the union of several bounds."""
        bounds = [AvBound(0, 0, 1, 1), AvBound.empty(), AvBound(-1, 2, 0, 3)]
        assert BoundCalculator.union(bounds).extent == (-1, 0, 1, 3)
        assert BoundCalculator.union([]).is_empty

    @pytest.mark.parametrize(
        "path_string",
        [
            "M0,0 L10,0 L10,10 L0,10 Z",
            "M2,5 A 5 25 0 0 1 8 8",
            "M2,2 Q5,2 5,5 T8,8 S20,0 12,-4",
            "m10,10 a3,6 45 1 0 4,4 h-20 v5 z m-3,-3 l1,1",
        ],
    )
    def test_matches_fonttools_control_bounds(self, path_string):
        """Test against the control bounds fontTools computes for the drawn path."""
        path = AvPath(path_string)
        path.rotate(20).scale(1.5, 0.5)
        pen = ControlBoundsPen(None)
        path.draw(pen)
        assert path.bound.extent == pytest.approx(pen.bounds, abs=1e-9)
