"""
Tests for the Vector3D and Point3D value types.
"""

import math

import numpy as np
import pytest

from primitives.tuples import Point3D, Vector3D


class TestConstruction:

    def test_point_of_floats(self):
        point = Point3D(0.0, -2.28, 0.0)
        assert point.x == 0.0
        assert point.y == -2.28
        assert point.z == 0.0

    def test_point_of_ints(self):
        point = Point3D(0, -2, 0)
        assert point.y == -2.0
        assert isinstance(point.y, float)

    def test_homogeneous_coordinate(self):
        assert Vector3D(1, 2, 3).w == 0.0
        assert Point3D(1, 2, 3).w == 1.0

    def test_iteration_and_indexing(self):
        v = Vector3D(1, 2, 3)
        assert list(v) == [1.0, 2.0, 3.0]
        assert v[2] == 3.0
        assert v[-1] == 3.0
        with pytest.raises(IndexError):
            v[3]

    def test_components_are_read_only(self):
        v = Vector3D(1, 2, 3)
        with pytest.raises(AttributeError):
            v.x = 5.0
        with pytest.raises(ValueError):
            v.xyz[0] = 5.0

    def test_point_and_vector_are_never_equal(self):
        assert Point3D(1, 2, 3) != Vector3D(1, 2, 3)


class TestEquality:

    def test_equal_within_tolerance(self):
        assert Vector3D(1.0, 2.0, 3.0) == Vector3D(1.000001, 2.0, 2.999999)

    def test_tolerance_is_symmetric(self):
        assert Point3D(1.0, 2.0, 3.0) != Point3D(1.1, 2.0, 3.0)
        assert Point3D(1.1, 2.0, 3.0) != Point3D(1.0, 2.0, 3.0)

    def test_unhashable(self):
        with pytest.raises(TypeError):
            hash(Vector3D(1, 2, 3))


class TestArithmetic:

    def test_adding_two_vectors(self):
        a = Vector3D(1.0, 2.0, 3.0)
        b = Vector3D(4.0, 5.0, 6.0)
        assert a + b == Vector3D(5.0, 7.0, 9.0)
        assert b + a == Vector3D(5.0, 7.0, 9.0)

    def test_adding_a_vector_to_a_point(self):
        point = Point3D(3.0, -2.0, 5.0)
        vector = Vector3D(-2.0, 3.0, 1.0)
        assert point + vector == Point3D(1.0, 1.0, 6.0)
        assert vector + point == Point3D(1.0, 1.0, 6.0)
        assert isinstance(vector + point, Point3D)

    def test_adding_two_points_fails(self):
        with pytest.raises(TypeError):
            Point3D(1, 2, 3) + Point3D(1, 2, 3)

    def test_subtracting_two_points_is_a_vector(self):
        result = Point3D(3.0, 2.0, 1.0) - Point3D(5.0, 6.0, 7.0)
        assert isinstance(result, Vector3D)
        assert result == Vector3D(-2.0, -4.0, -6.0)

    def test_subtracting_a_vector_from_a_point(self):
        result = Point3D(3.0, 2.0, 1.0) - Vector3D(5.0, 6.0, 7.0)
        assert isinstance(result, Point3D)
        assert result == Point3D(-2.0, -4.0, -6.0)

    def test_subtracting_a_point_from_a_vector_fails(self):
        with pytest.raises(TypeError):
            Vector3D(1, 2, 3) - Point3D(1, 2, 3)

    def test_subtracting_two_vectors(self):
        assert Vector3D(3.0, 2.0, 1.0) - Vector3D(5.0, 6.0, 7.0) == Vector3D(-2.0, -4.0, -6.0)

    def test_negation(self):
        assert -Vector3D(1.0, -2.0, 3.0) == Vector3D(-1.0, 2.0, -3.0)
        assert Vector3D(0, 0, 0) - Vector3D(1.0, -2.0, 3.0) == Vector3D(-1.0, 2.0, -3.0)

    def test_scaling(self):
        assert Vector3D(1.0, -2.0, 3.0) * 3.5 == Vector3D(3.5, -7.0, 10.5)
        assert 0.5 * Vector3D(1.0, -2.0, 3.0) == Vector3D(0.5, -1.0, 1.5)

    def test_numpy_scalar_on_the_left(self):
        result = np.float64(2.0) * Vector3D(1.0, 2.0, 3.0)
        assert isinstance(result, Vector3D)
        assert result == Vector3D(2.0, 4.0, 6.0)

    def test_numpy_scalar_from_a_product(self):
        a = Vector3D(1.0, 0.0, 0.0)
        result = a.dot(a) * a + np.sqrt(4.0) * a
        assert isinstance(result, Vector3D)
        assert result == Vector3D(3.0, 0.0, 0.0)

    def test_dividing(self):
        assert Vector3D(1.0, -2.0, 3.0) / 2.0 == Vector3D(0.5, -1.0, 1.5)

    def test_dividing_by_zero_fails(self):
        with pytest.raises(ZeroDivisionError):
            Vector3D(1.0, 2.0, 3.0) / 0

    def test_point_round_trip(self):
        p = Point3D(0.3, -7.1, 12.25)
        v = Vector3D(-4.4, 0.01, 3.3)
        assert (p + v) - v == p


class TestMagnitude:

    @pytest.mark.parametrize("vector", [
        Vector3D(1, 0, 0), Vector3D(0, 1, 0), Vector3D(0, 0, 1),
    ])
    def test_unit_vectors(self, vector):
        assert vector.magnitude() == 1.0

    def test_magnitude(self):
        assert math.isclose(Vector3D(1, 2, 3).magnitude(), math.sqrt(14))
        assert math.isclose(Vector3D(-1, -2, -3).magnitude(), math.sqrt(14))

    def test_normalize(self):
        assert Vector3D(4, 0, 0).normalize() == Vector3D(1, 0, 0)
        root = math.sqrt(14)
        assert Vector3D(1, 2, 3).normalize() == Vector3D(1 / root, 2 / root, 3 / root)

    @pytest.mark.parametrize("vector", [
        Vector3D(0, 0, 4), Vector3D(1, 2, 3), Vector3D(-1, -2, -3), Vector3D(0.001, 0, 0),
    ])
    def test_normalized_magnitude_is_one(self, vector):
        assert abs(vector.normalize().magnitude() - 1.0) <= 1e-5

    def test_normalizing_zero_vector_fails(self):
        with pytest.raises(ValueError):
            Vector3D(0, 0, 0).normalize()


class TestProducts:

    def test_dot(self):
        a = Vector3D(1, 2, 3)
        b = Vector3D(2, 3, 4)
        assert a.dot(b) == 20.0
        assert b.dot(a) == 20.0

    def test_cross(self):
        a = Vector3D(1, 2, 3)
        b = Vector3D(2, 3, 4)
        assert a.cross(b) == Vector3D(-1, 2, -1)
        assert b.cross(a) == Vector3D(1, -2, 1)

    def test_cross_is_anti_commutative(self):
        a = Vector3D(0.5, -3.25, 7.0)
        b = Vector3D(-2.0, 1.5, 0.75)
        assert a.cross(b) == -b.cross(a)

    def test_cross_of_axes_is_right_handed(self):
        assert Vector3D(1, 0, 0).cross(Vector3D(0, 1, 0)) == Vector3D(0, 0, 1)


class TestDisplay:

    def test_point(self):
        assert str(Point3D(1, 2, 3)) == "[1.0000, 2.0000, 3.0000]"

    def test_vector(self):
        assert str(Vector3D(1, 2, 3)) == "<1.0000, 2.0000, 3.0000>"

    def test_repr_names_type(self):
        assert repr(Point3D(1, 2, 3)) == "Point3D(1.0, 2.0, 3.0)"
