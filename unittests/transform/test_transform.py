from unittest import TestCase

import numpy as np

from gfxmath.angle import Degrees
from gfxmath.rotations import Quaternion, Basis2, Basis3, apply, rot_z
from gfxmath.transform import Transform, DecomposedTransform, AffineTransform
from gfxmath.utilities.contracts import contract_mode, ContractViolationError


POINTS = np.random.default_rng(11).normal(size=(3, 6))


class TestDecomposedTransform(TestCase):

    def setUp(self):

        self.transform = DecomposedTransform(Quaternion.from_angle_z(Degrees(90)), [1, 0, 0], 2)

    def test_identity(self):

        for identity in (DecomposedTransform(), DecomposedTransform.identity()):
            with self.subTest(identity=identity):
                self.assertEqual(identity.dimension, 3)
                np.testing.assert_array_almost_equal(identity.transform_point(POINTS), POINTS)
                np.testing.assert_array_almost_equal(identity.to_matrix(), np.eye(4))

        self.assertIsInstance(DecomposedTransform(), Transform)

    def test_parts(self):

        self.assertEqual(self.transform.rotation, Quaternion.from_angle_z(Degrees(90)))
        np.testing.assert_array_equal(self.transform.translation, [1, 0, 0])
        self.assertEqual(self.transform.scale, 2)
        self.assertTrue(self.transform.is_uniform)

        with self.assertRaises(ValueError):
            self.transform.translation[0] = 5

    def test_transform_point(self):

        # scale, then rotate, then translate
        np.testing.assert_array_almost_equal(self.transform.transform_point([1, 0, 0]), [1, 2, 0])
        np.testing.assert_array_almost_equal(self.transform.transform_as_point([1, 0, 0]), [1, 2, 0])

        expected = rot_z(np.pi / 2) @ (2 * POINTS) + np.array([[1], [0], [0]])
        np.testing.assert_array_almost_equal(self.transform.transform_point(POINTS), expected)

    def test_transform_vector(self):

        # vectors are not translated
        np.testing.assert_array_almost_equal(self.transform.transform_vector([1, 0, 0]), [0, 2, 0])
        np.testing.assert_array_almost_equal(apply(self.transform, [1, 0, 0]), [0, 2, 0])

        np.testing.assert_array_almost_equal(self.transform.transform_vector(POINTS), rot_z(np.pi / 2) @ (2 * POINTS))

    def test_shape_errors(self):

        with self.assertRaises(ValueError):
            self.transform.transform_point([1, 0])

        with self.assertRaises(ValueError):
            DecomposedTransform(Quaternion.identity(), [1, 2])

        with self.assertRaises(ValueError):
            DecomposedTransform(Quaternion.identity(), [1, 2, 3], [1, 2])

        with self.assertRaises(TypeError):
            DecomposedTransform(np.eye(3))

    def test_to_matrix(self):

        transform = DecomposedTransform(Basis3.from_euler(0.1, 0.2, 0.3), [1, -2, 3], [1, 2, 3])

        matrix = transform.to_matrix()

        self.assertEqual(matrix.shape, (4, 4))
        np.testing.assert_array_almost_equal(matrix[:3, :3],
                                             Basis3.from_euler(0.1, 0.2, 0.3).matrix @ np.diag([1, 2, 3]))
        np.testing.assert_array_equal(matrix[:3, 3], [1, -2, 3])
        np.testing.assert_array_equal(matrix[3], [0, 0, 0, 1])

        homogeneous = matrix @ np.vstack([POINTS, np.ones(POINTS.shape[1])])
        np.testing.assert_array_almost_equal(homogeneous[:3], transform.transform_point(POINTS))

    def test_non_uniform_scale(self):

        transform = DecomposedTransform(Quaternion.identity(), None, [1, 2, 3])

        self.assertFalse(transform.is_uniform)
        np.testing.assert_array_almost_equal(transform.transform_vector([1, 1, 1]), [1, 2, 3])

        self.assertTrue(DecomposedTransform(Quaternion.identity(), None, [2, 2, 2]).is_uniform)

    def test_invert_uniform(self):

        transform = DecomposedTransform(Quaternion.from_euler(0.3, -0.2, 0.9), [1, 2, 3], 0.5)

        inverse = transform.invert()

        self.assertIsInstance(inverse, DecomposedTransform)
        self.assertAlmostEqual(inverse.scale, 2)
        np.testing.assert_array_almost_equal(inverse.transform_point(transform.transform_point(POINTS)), POINTS)
        np.testing.assert_array_almost_equal(transform.transform_point(inverse.transform_point(POINTS)), POINTS)
        np.testing.assert_array_almost_equal(inverse.to_matrix(), np.linalg.inv(transform.to_matrix()))

    def test_invert_non_uniform(self):

        transform = DecomposedTransform(Quaternion.from_euler(0.3, -0.2, 0.9), [1, 2, 3], [1, 2, 4])

        inverse = transform.invert()

        self.assertIsInstance(inverse, AffineTransform)
        np.testing.assert_array_almost_equal(inverse.transform_point(transform.transform_point(POINTS)), POINTS)

    def test_invert_zero_scale(self):

        transform = DecomposedTransform(Quaternion.identity(), [1, 2, 3], 0)

        with contract_mode('raise'):
            with self.assertRaises(ContractViolationError):
                transform.invert()

        with contract_mode('raise'):
            with self.assertRaises(ContractViolationError):
                DecomposedTransform(Quaternion.identity(), [1, 2, 3], [1, 0, 1]).invert()

    def test_compose_uniform(self):

        first = DecomposedTransform(Quaternion.from_angle_x(0.4), [0, 1, 0], 3)
        second = DecomposedTransform(Basis3.from_angle_y(-0.7), [2, 0, -1], [1, 2, 0.5])

        composed = first * second

        self.assertIsInstance(composed, DecomposedTransform)
        np.testing.assert_array_almost_equal(composed.scale, [3, 6, 1.5])
        np.testing.assert_array_almost_equal(composed.transform_point(POINTS),
                                             first.transform_point(second.transform_point(POINTS)))
        np.testing.assert_array_almost_equal(composed.to_matrix(), first.to_matrix() @ second.to_matrix())

        np.testing.assert_array_almost_equal(first.compose(second).to_matrix(), composed.to_matrix())

    def test_compose_non_uniform(self):

        first = DecomposedTransform(Quaternion.from_angle_x(0.4), [0, 1, 0], [1, 2, 3])
        second = DecomposedTransform(Quaternion.from_angle_y(-0.7), [2, 0, -1], 2)

        composed = first * second

        self.assertIsInstance(composed, AffineTransform)
        np.testing.assert_array_almost_equal(composed.transform_point(POINTS),
                                             first.transform_point(second.transform_point(POINTS)))

    def test_compose_inverse(self):

        self.assertEqual(self.transform * self.transform.invert(), DecomposedTransform.identity())

    def test_compose_errors(self):

        with self.assertRaises(ValueError):
            self.transform.compose(DecomposedTransform.identity(2))

        with self.assertRaises(TypeError):
            self.transform * 2

    def test_look_at(self):

        eye = np.array([0., 0, 5])

        view = DecomposedTransform.look_at(eye, [0, 0, 0], [0, 1, 0])

        np.testing.assert_array_almost_equal(view.transform_point(eye), [0, 0, 0])
        np.testing.assert_array_almost_equal(view.transform_point([0, 0, 0]), [0, 0, 5])
        np.testing.assert_array_almost_equal(view.transform_vector([0, 1, 0]), [0, 1, 0])

        view = DecomposedTransform.look_at([1, 2, 3], [4, 6, 3], [0, 0, 1])
        np.testing.assert_array_almost_equal(view.transform_point([4, 6, 3]), [0, 0, 5])

    def test_two_dimensions(self):

        transform = DecomposedTransform(Basis2.from_angle(Degrees(90)), [1, 1], 2)

        self.assertEqual(transform.dimension, 2)
        np.testing.assert_array_almost_equal(transform.transform_point([1, 0]), [1, 3])
        np.testing.assert_array_almost_equal(transform.transform_vector([1, 0]), [0, 2])
        np.testing.assert_array_almost_equal(transform.invert().transform_point([1, 3]), [1, 0])

        self.assertEqual(transform.to_matrix().shape, (3, 3))

        translation_only = DecomposedTransform(translation=[1, 2])
        self.assertEqual(translation_only.dimension, 2)
        np.testing.assert_array_almost_equal(translation_only.transform_point([1, 1]), [2, 3])

        self.assertEqual(DecomposedTransform.identity(2).dimension, 2)

    def test_float32(self):

        transform = DecomposedTransform(Basis3.from_matrix_unchecked(np.eye(3, dtype=np.float32)),
                                        np.ones(3, dtype=np.float32))

        self.assertEqual(transform.transform_point(np.ones(3, dtype=np.float32)).dtype, np.float32)
        self.assertEqual(transform.to_matrix().dtype, np.float32)

    def test_equality(self):

        self.assertEqual(self.transform,
                         DecomposedTransform(Quaternion.from_angle_z(Degrees(90)), [1, 1e-12, 0], 2))
        self.assertNotEqual(self.transform,
                            DecomposedTransform(Quaternion.from_angle_z(Degrees(90)), [1, 0, 0], 3))
        self.assertNotEqual(self.transform,
                            DecomposedTransform(Quaternion.from_angle_z(Degrees(90)), [1, 0, 0], [2, 2, 2]))
        self.assertNotEqual(self.transform, AffineTransform(self.transform.to_matrix()))

        with self.assertRaises(TypeError):
            hash(self.transform)


class TestAffineTransform(TestCase):

    def setUp(self):

        self.matrix = np.array([[0, -2, 0, 1],
                                [2, 0, 0, 0],
                                [0, 0, 2, 0],
                                [0, 0, 0, 1]], dtype=float)

        self.transform = AffineTransform(self.matrix)

    def test_identity(self):

        np.testing.assert_array_equal(AffineTransform.identity().matrix, np.eye(4))
        np.testing.assert_array_equal(AffineTransform.identity(2).matrix, np.eye(3))
        self.assertEqual(AffineTransform.identity(2).dimension, 2)

    def test_invalid(self):

        with self.assertRaises(ValueError):
            AffineTransform(np.eye(2))

        with self.assertRaises(ValueError):
            AffineTransform(np.eye(5))

    def test_immutable(self):

        self.matrix[0, 0] = 10
        self.assertEqual(self.transform.matrix[0, 0], 0)

        with self.assertRaises(ValueError):
            self.transform.matrix[0, 0] = 10

        copy = self.transform.to_matrix()
        copy[0, 0] = 10
        self.assertEqual(self.transform.matrix[0, 0], 0)

    def test_transform(self):

        np.testing.assert_array_almost_equal(self.transform.transform_point([1, 0, 0]), [1, 2, 0])
        np.testing.assert_array_almost_equal(self.transform.transform_vector([1, 0, 0]), [0, 2, 0])

        decomposed = DecomposedTransform(Quaternion.from_angle_z(Degrees(90)), [1, 0, 0], 2)
        np.testing.assert_array_almost_equal(self.transform.transform_point(POINTS), decomposed.transform_point(POINTS))
        np.testing.assert_array_almost_equal(self.transform.transform_vector(POINTS),
                                             decomposed.transform_vector(POINTS))

    def test_invert(self):

        inverse = self.transform.invert()

        self.assertIsInstance(inverse, AffineTransform)
        np.testing.assert_array_almost_equal(inverse.transform_point(self.transform.transform_point(POINTS)), POINTS)

    def test_invert_singular(self):

        singular = AffineTransform(np.diag([0., 1, 1, 1]))

        with contract_mode('raise'):
            with self.assertRaises(ContractViolationError):
                singular.invert()

        self.assertTrue(np.isnan(singular.invert().matrix).all())

    def test_compose(self):

        other = DecomposedTransform(Quaternion.from_angle_x(0.3), [0, 0, 1], 0.5)

        composed = self.transform * other

        self.assertIsInstance(composed, AffineTransform)
        np.testing.assert_array_almost_equal(composed.transform_point(POINTS),
                                             self.transform.transform_point(other.transform_point(POINTS)))

        composed = other * self.transform
        self.assertIsInstance(composed, AffineTransform)
        np.testing.assert_array_almost_equal(composed.transform_point(POINTS),
                                             other.transform_point(self.transform.transform_point(POINTS)))

        with self.assertRaises(ValueError):
            self.transform.compose(AffineTransform.identity(2))

    def test_two_dimensions(self):

        transform = AffineTransform([[0, -1, 1], [1, 0, 2], [0, 0, 1]])

        np.testing.assert_array_almost_equal(transform.transform_point([1, 0]), [1, 3])
        np.testing.assert_array_almost_equal(transform.transform_vector([[1, 0], [0, 1]]), [[0, -1], [1, 0]])

    def test_equality(self):

        self.assertEqual(self.transform, AffineTransform(self.matrix + 1e-12))
        self.assertNotEqual(self.transform, AffineTransform.identity())
