"""Test module for avsvg.matrix

The tests are run using pytest.
"""

import math

import numpy as np
import pytest
from fontTools.misc.transform import Transform

from avsvg.bound import AvBound
from avsvg.common import NonInvertibleMatrixError
from avsvg.matrix import AvMatrix

###############################################################################
# Construction and properties
###############################################################################


class TestAvMatrixBasics:
    """Tests for construction, values and comparison."""

    def test_identity(self):
        """Test the default matrix."""
        matrix = AvMatrix()
        assert matrix.values == (1.0, 0.0, 0.0, 1.0, 0.0, 0.0)
        assert matrix.is_identity
        assert AvMatrix.identity() == matrix

    def test_values_order(self):
        """Test the order (a, b, c, d, tx, ty) of the values."""
        matrix = AvMatrix(1, 2, 3, 4, 5, 6)
        assert matrix.values == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
        assert np.array_equal(matrix.array, [[1, 3, 5], [2, 4, 6], [0, 0, 1]])

    def test_from_values(self):
        """Test the creation from a sequence of 6 values."""
        assert AvMatrix.from_values([1, 2, 3, 4, 5, 6]) == AvMatrix(1, 2, 3, 4, 5, 6)
        with pytest.raises(ValueError):
            AvMatrix.from_values([1, 2, 3])

    def test_flips(self):
        """Test the mirroring matrices."""
        assert AvMatrix.flip_horizontal().transform_point(2, 3) == (-2.0, 3.0)
        assert AvMatrix.flip_vertical().transform_point(2, 3) == (2.0, -3.0)
        assert AvMatrix.flip_central().transform_point(2, 3) == (-2.0, -3.0)

    def test_copy_is_independent(self):
        """Test that changing a copy does not change the original."""
        matrix = AvMatrix().translate(1, 2)
        copy = matrix.copy()
        copy.scale(3)
        assert matrix == AvMatrix(1, 0, 0, 1, 1, 2)

    def test_determinant(self):
        """Test the determinant a*d - b*c."""
        assert AvMatrix(1, 2, 3, 4, 5, 6).determinant == pytest.approx(-2.0)

    def test_equality(self):
        """Test exact and approximate comparison."""
        assert AvMatrix(1, 2, 3, 4, 5, 6) == AvMatrix(1, 2, 3, 4, 5, 6)
        assert AvMatrix(1, 2, 3, 4, 5, 6) != AvMatrix(1, 2, 3, 4, 5, 7)
        assert AvMatrix().rotate(360).approx_equal(AvMatrix())
        assert not AvMatrix().approx_equal(AvMatrix(1, 0, 0, 1, 0.1, 0))

    def test_not_hashable(self):
        """Test that the mutable matrix can not be used as dict key."""
        with pytest.raises(TypeError):
            hash(AvMatrix())

    def test_string_representations(self):
        """Test str(), repr() and the SVG transform attribute."""
        matrix = AvMatrix(2, 0, 0, 2, 10, 20.5)
        assert str(matrix) == "2,0,0,2,10,20.5"
        assert repr(matrix) == "AvMatrix(2, 0, 0, 2, 10, 20.5)"
        assert matrix.to_svg_transform() == "matrix(2,0,0,2,10,20.5)"

    def test_svg_transform_full_precision(self):
        """Test that the SVG transform attribute keeps all digits of the values."""
        matrix = AvMatrix(1, 0, 0, 1, 1234567.125, 0.1 + 0.2)
        assert matrix.to_svg_transform() == "matrix(1,0,0,1,1234567.125,0.30000000000000004)"


###############################################################################
# Transformations
###############################################################################


class TestAvMatrixTransformations:
    """Tests for the chained transformations."""

    def test_translate(self):
        """Test a translation."""
        assert AvMatrix().translate(10, 20).transform_point(1, 2) == (11.0, 22.0)

    def test_scale_default_y(self):
        """Test that the y factor defaults to the x factor."""
        assert AvMatrix().scale(3).transform_point(1, 2) == (3.0, 6.0)
        assert AvMatrix().scale(3, 4).transform_point(1, 2) == (3.0, 8.0)

    def test_rotate(self):
        """Test a rotation by 90 degrees."""
        assert AvMatrix().rotate(90).transform_point(1, 0) == pytest.approx((0, 1))

    def test_skew(self):
        """Test a skew along x by 45 degrees."""
        assert AvMatrix().skew(45, 0).transform_point(0, 1) == pytest.approx((1, 1))
        assert AvMatrix().skew(0, 45).transform_point(1, 0) == pytest.approx((1, 1))

    def test_right_composition(self):
        """Test that the latest added transformation is applied first."""
        assert AvMatrix().translate(10, 0).scale(2, 2).transform_point(1, 1) == (12.0, 2.0)
        assert AvMatrix().scale(2, 2).translate(10, 0).transform_point(1, 1) == (22.0, 2.0)

    def test_multiply_with_values(self):
        """Test multiplying with 6 plain values."""
        assert AvMatrix().multiply([1, 0, 0, 1, 5, 6]) == AvMatrix().translate(5, 6)
        with pytest.raises(ValueError):
            AvMatrix().multiply([1, 0, 0])

    def test_associativity(self):
        """Test (A*B)*C == A*(B*C) on a point."""
        a = AvMatrix().translate(3, -4)
        b = AvMatrix().rotate(30)
        c = AvMatrix().scale(2, 3).skew(10, 5)

        left = a.copy().multiply(b).multiply(c)
        right = a.copy().multiply(b.copy().multiply(c))

        assert left.transform_point(7, 11) == pytest.approx(right.transform_point(7, 11))
        assert left.approx_equal(right)

    def test_invert(self):
        """Test that M * M^-1 is the identity."""
        matrix = AvMatrix(2, 1, -1, 3, 10, -5).rotate(17).scale(0.5, 4)
        inverse = matrix.invert()
        assert matrix.copy().multiply(inverse).approx_equal(AvMatrix())
        assert inverse.copy().multiply(matrix).approx_equal(AvMatrix())
        assert inverse.transform_point(*matrix.transform_point(3, 4)) == pytest.approx((3, 4))

    def test_invert_singular(self):
        """Test that a matrix with zero determinant can not be inverted."""
        with pytest.raises(NonInvertibleMatrixError):
            AvMatrix().scale(0, 1).invert()
        with pytest.raises(ValueError):
            AvMatrix(1, 2, 2, 4, 0, 0).invert()

    def test_invert_does_not_change_matrix(self):
        """Test that invert() returns a new matrix."""
        matrix = AvMatrix().translate(1, 1)
        matrix.invert()
        assert matrix == AvMatrix().translate(1, 1)

    def test_save_restore(self):
        """Test the save/restore stack."""
        matrix = AvMatrix().translate(1, 2)
        matrix.save()
        matrix.scale(5).rotate(10)
        matrix.save()
        matrix.reset()
        matrix.restore()
        assert matrix.approx_equal(AvMatrix().translate(1, 2).scale(5).rotate(10))
        matrix.restore()
        assert matrix == AvMatrix().translate(1, 2)

    def test_restore_without_save(self):
        """Test that restore() without save() raises."""
        with pytest.raises(IndexError):
            AvMatrix().restore()

    def test_set_values_and_reset(self):
        """Test replacing all values."""
        matrix = AvMatrix().set_values((1, 2, 3, 4, 5, 6))
        assert matrix.values == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0)
        assert matrix.reset().is_identity


###############################################################################
# Mapping
###############################################################################


class TestAvMatrixMapping:
    """Tests for mapping points, vectors and bounds."""

    def test_transform_vector_ignores_translation(self):
        """Test that vectors are not translated."""
        assert AvMatrix().translate(10, 10).scale(2).transform_vector(1, 1) == (2.0, 2.0)

    def test_map_points(self):
        """Test mapping an array of points."""
        points = AvMatrix().translate(1, 1).map_points([[0, 0], [1, 2], [3, 4]])
        assert points.shape == (3, 2)
        assert np.allclose(points, [[1, 1], [2, 3], [4, 5]])

    def test_map_points_matches_transform_point(self):
        """Test that array and single point mapping agree."""
        matrix = AvMatrix(1.5, 0.2, -0.3, 0.8, 4, 5)
        points = matrix.map_points([[2, 3], [-1, 7]])
        assert tuple(points[1]) == pytest.approx(matrix.transform_point(-1, 7))

    def test_map_bound(self):
        """Test mapping a bound by its corners."""
        bound = AvBound(0, 0, 10, 20)
        assert AvMatrix().rotate(90).map_bound(bound).extent == pytest.approx((-20, 0, 0, 10))
        assert AvMatrix().map_bound(AvBound.empty()).is_empty

    def test_fonttools_transform_agrees(self):
        """Test that the fontTools Transform composes the same way."""
        matrix = AvMatrix().translate(10, 0).scale(2).rotate(30)
        transform = Transform().translate(10, 0).scale(2).rotate(math.radians(30))
        assert tuple(matrix.to_transform()) == pytest.approx(tuple(transform))
        assert matrix.to_transform().transformPoint((3, 4)) == pytest.approx(matrix.transform_point(3, 4))
