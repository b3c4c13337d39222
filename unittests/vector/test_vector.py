from unittest import TestCase

import numpy as np

from gfxmath import vector
from gfxmath.angle import Radians
from gfxmath.utilities.contracts import contract_mode, ContractViolationError


class TestProducts(TestCase):

    def test_dot(self):

        self.assertEqual(vector.dot([1, 2, 3], [4, 5, 6]), 32)
        self.assertEqual(vector.dot([1, 2], [3, 4]), 11)

        np.testing.assert_array_equal(vector.dot(np.eye(3), [1, 2, 3]), [1, 2, 3])

        with self.assertRaises(ValueError):
            vector.dot([1, 2], [1, 2, 3])

        with self.assertRaises(ValueError):
            vector.dot([1, 2, 3, 4, 5], [1, 2, 3, 4, 5])

    def test_cross(self):

        np.testing.assert_array_equal(vector.cross([1, 0, 0], [0, 1, 0]), [0, 0, 1])
        np.testing.assert_array_equal(vector.cross([0, 1, 0], [1, 0, 0]), [0, 0, -1])

        columns = vector.cross(np.eye(3), [0, 0, 1])
        np.testing.assert_array_equal(columns, [[0, 1, 0], [-1, 0, 0], [0, 0, 0]])

        with self.assertRaises(ValueError):
            vector.cross([1, 0], [0, 1])

    def test_perp_dot(self):

        self.assertEqual(vector.perp_dot([1, 0], [0, 1]), 1)
        self.assertEqual(vector.perp_dot([0, 1], [1, 0]), -1)
        self.assertEqual(vector.perp_dot([2, 0], [3, 0]), 0)


class TestMagnitude(TestCase):

    def test_magnitude(self):

        self.assertEqual(vector.magnitude2([1, 2, 2]), 9)
        self.assertEqual(vector.magnitude([1, 2, 2]), 3)
        self.assertEqual(vector.magnitude([3, 4]), 5)

        np.testing.assert_array_almost_equal(vector.magnitude([[3, 0], [4, 2]]), [5, 2])

    def test_normalize(self):

        np.testing.assert_array_almost_equal(vector.normalize([3, 4]), [0.6, 0.8])
        np.testing.assert_array_almost_equal(vector.normalize([[0, 2], [5, 0], [0, 0]]), [[0, 1], [1, 0], [0, 0]])

        self.assertEqual(vector.normalize(np.array([3, 4], dtype=np.float32)).dtype, np.float32)

    def test_normalize_zero(self):

        self.assertTrue(np.isnan(vector.normalize([0, 0, 0])).all())

        with contract_mode('raise'):
            with self.assertRaises(ContractViolationError):
                vector.normalize([0, 0, 0])


class TestInterpolation(TestCase):

    def test_lerp(self):

        np.testing.assert_array_almost_equal(vector.lerp([0, 0, 0], [2, 4, 6], 0.5), [1, 2, 3])
        np.testing.assert_array_almost_equal(vector.lerp([1, 1], [3, 3], 0), [1, 1])
        np.testing.assert_array_almost_equal(vector.lerp([1, 1], [3, 3], 1), [3, 3])

    def test_angle_between(self):

        result = vector.angle_between([1, 0, 0], [0, 1, 0])
        self.assertIsInstance(result, Radians)
        self.assertEqual(result, Radians(np.pi / 2))

        self.assertEqual(vector.angle_between([1, 0], [-1, 0]), Radians(np.pi))
        self.assertEqual(vector.angle_between([1, 1], [2, 2]), Radians(0))
        self.assertEqual(vector.angle_between([1, 0], [1, -1]), Radians(np.pi / 4))

        # accurate for nearly parallel vectors
        self.assertAlmostEqual(vector.angle_between([1, 0, 0], [1, 1e-9, 0]).value, 1e-9, places=15)


class TestHomogeneous(TestCase):

    def test_to_homogeneous(self):

        np.testing.assert_array_equal(vector.to_homogeneous([1, 2, 3]), [1, 2, 3, 1])
        np.testing.assert_array_equal(vector.to_homogeneous([1, 2], is_point=False), [1, 2, 0])
        np.testing.assert_array_equal(vector.to_homogeneous([[1, 2], [3, 4]]), [[1, 2], [3, 4], [1, 1]])

    def test_from_homogeneous(self):

        np.testing.assert_array_equal(vector.from_homogeneous([2, 4, 6, 2]), [1, 2, 3])
        np.testing.assert_array_equal(vector.from_homogeneous([2, 4, 0]), [2, 4])


class TestUnitVectors(TestCase):

    def test_units(self):

        np.testing.assert_array_equal(vector.unit_x(), [1, 0, 0])
        np.testing.assert_array_equal(vector.unit_y(), [0, 1, 0])
        np.testing.assert_array_equal(vector.unit_z(), [0, 0, 1])
        np.testing.assert_array_equal(vector.unit_x(2), [1, 0])
        np.testing.assert_array_equal(vector.unit_y(2), [0, 1])

        self.assertEqual(vector.unit_x(dtype=np.float32).dtype, np.float32)
