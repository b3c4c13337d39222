from unittest import TestCase

import numpy as np

from scipy.spatial.transform import Rotation as ScipyRotation

from gfxmath.angle import Degrees, Radians
from gfxmath.numeric import FLOAT32, FLOAT64
from gfxmath.rotations import Quaternion, Basis3, Rotation3, apply, rot_x, rot_z


class TestConstruction(TestCase):

    def test_init(self):

        q = Quaternion()
        np.testing.assert_array_equal(q.components, [1, 0, 0, 0])

        q = Quaternion(0.5, -0.5, 0.5, -0.5)
        self.assertEqual(q.s, 0.5)
        self.assertEqual(q.x, -0.5)
        self.assertEqual(q.y, 0.5)
        self.assertEqual(q.z, -0.5)
        np.testing.assert_array_equal(q.v, [-0.5, 0.5, -0.5])
        self.assertEqual(list(q), [0.5, -0.5, 0.5, -0.5])
        self.assertEqual(len(q), 4)

        self.assertIsInstance(q, Rotation3)

    def test_immutable(self):

        q = Quaternion(1, 0, 0, 0)

        with self.assertRaises(ValueError):
            q.components[0] = 2

        with self.assertRaises(AttributeError):
            q.s = 2

        source = np.array([1., 0, 0, 0])
        q = Quaternion.from_array(source)
        source[0] = 5
        self.assertEqual(q.s, 1)

    def test_from_array(self):

        np.testing.assert_array_equal(Quaternion.from_array([1, 2, 3, 4]).components, [1, 2, 3, 4])

        with self.assertRaises(ValueError):
            Quaternion.from_array([1, 2, 3])

        with self.assertRaises(ValueError):
            Quaternion.from_array(np.ones((4, 2)))

    def test_from_sv(self):

        np.testing.assert_array_equal(Quaternion.from_sv(1, [2, 3, 4]).components, [1, 2, 3, 4])

    def test_identity_zero(self):

        np.testing.assert_array_equal(Quaternion.identity().components, [1, 0, 0, 0])
        np.testing.assert_array_equal(Quaternion.zero().components, [0, 0, 0, 0])

    def test_from_axis_angle(self):

        q = Quaternion.from_axis_angle([0, 0, 1], Degrees(90))
        np.testing.assert_array_almost_equal(q.components, [np.sqrt(0.5), 0, 0, np.sqrt(0.5)])

        q = Quaternion.from_axis_angle([0, 0, 1], np.pi / 2)
        np.testing.assert_array_almost_equal(q.components, [np.sqrt(0.5), 0, 0, np.sqrt(0.5)])

    def test_from_angle_axes(self):

        np.testing.assert_array_almost_equal(Quaternion.from_angle_x(0.3).to_matrix(), rot_x(0.3))
        np.testing.assert_array_almost_equal(Quaternion.from_angle_y(0.3).to_matrix(),
                                             ScipyRotation.from_euler('y', 0.3).as_matrix())
        np.testing.assert_array_almost_equal(Quaternion.from_angle_z(Degrees(30)).to_matrix(), rot_z(np.pi / 6))

    def test_from_euler(self):

        q = Quaternion.from_euler(0.1, -0.2, 0.3, 'zyx')
        np.testing.assert_array_almost_equal(q.to_matrix(), ScipyRotation.from_euler('zyx', [0.1, -0.2, 0.3]).as_matrix())

        q = Quaternion.from_euler(Degrees(90), 0, 0)
        np.testing.assert_array_almost_equal(q.to_matrix(), rot_x(np.pi / 2))

        with self.assertRaises(ValueError):
            Quaternion.from_euler(0, 0, 0, 'xyy')

    def test_from_matrix(self):

        matrix = ScipyRotation.from_rotvec([0.2, -0.1, 0.4]).as_matrix()

        q = Quaternion.from_matrix(matrix)
        np.testing.assert_array_almost_equal(q.to_matrix(), matrix)
        self.assertGreaterEqual(q.s, 0)

        np.testing.assert_array_almost_equal(Quaternion.from_matrix(Basis3.from_matrix_unchecked(matrix)).components,
                                             q.components)

    def test_from_rotation_vector(self):

        q = Quaternion.from_rotation_vector([0.2, -0.1, 0.4])
        np.testing.assert_array_almost_equal(q.to_rotation_vector(), [0.2, -0.1, 0.4])

    def test_look_at(self):

        q = Quaternion.look_at([1, 0, 0], [0, 0, 1])

        np.testing.assert_array_almost_equal(q.rotate_vector([1, 0, 0]), [0, 0, 1])
        np.testing.assert_array_almost_equal(q.rotate_vector([0, 0, 1]), [0, 1, 0])

    def test_between_vectors(self):

        first = np.array([1., 2, 3])
        second = np.array([-2., 0.5, 1])

        q = Quaternion.between_vectors(first, second)

        np.testing.assert_array_almost_equal(q.rotate_vector(first / np.linalg.norm(first)),
                                             second / np.linalg.norm(second))

        # antiparallel vectors give a half turn
        q = Quaternion.between_vectors([0, 0, 1], [0, 0, -1])
        np.testing.assert_array_almost_equal(q.rotate_vector([0, 0, 1]), [0, 0, -1])
        self.assertAlmostEqual(q.magnitude(), 1)

    def test_float32(self):

        q = Quaternion(np.float32(1), np.float32(0), np.float32(0), np.float32(0))
        self.assertIs(q.kind, FLOAT32)
        self.assertIs(Quaternion(1, 0, 0, 0).kind, FLOAT64)

        rotated = q.rotate_vector(np.array([1, 0, 0], dtype=np.float32))
        self.assertEqual(rotated.dtype, np.float32)

        self.assertEqual((q * q).components.dtype, np.float32)
        self.assertEqual(q.to_matrix().dtype, np.float32)


class TestAlgebra(TestCase):

    def test_add_sub_scale(self):

        q1 = Quaternion(1, 2, 3, 4)
        q2 = Quaternion(0.5, 0.5, 0.5, 0.5)

        np.testing.assert_array_equal((q1 + q2).components, [1.5, 2.5, 3.5, 4.5])
        np.testing.assert_array_equal((q1 - q2).components, [0.5, 1.5, 2.5, 3.5])
        np.testing.assert_array_equal((-q1).components, [-1, -2, -3, -4])
        np.testing.assert_array_equal((q1 * 2).components, [2, 4, 6, 8])
        np.testing.assert_array_equal((2 * q1).components, [2, 4, 6, 8])
        np.testing.assert_array_equal((q1 / 2).components, [0.5, 1, 1.5, 2])

        with self.assertRaises(TypeError):
            q1 + 1

    def test_dot_magnitude(self):

        q = Quaternion(1, 1, 1, 1)

        self.assertEqual(q.dot(Quaternion(1, 0, 0, 0)), 1)
        self.assertEqual(q.magnitude2(), 4)
        self.assertEqual(q.magnitude(), 2)

    def test_normalize(self):

        q = Quaternion(-2, 0, 0, 0).normalize()
        np.testing.assert_array_equal(q.components, [-1, 0, 0, 0])

        self.assertTrue(np.isnan(Quaternion.zero().normalize().components).all())

    def test_canonical(self):

        np.testing.assert_array_equal(Quaternion(-1, 1, 0, 0).canonical().components, [1, -1, 0, 0])
        np.testing.assert_array_equal(Quaternion(1, 1, 0, 0).canonical().components, [1, 1, 0, 0])

    def test_conjugate_invert(self):

        q = Quaternion(1, 2, 3, 4)

        np.testing.assert_array_equal(q.conjugate().components, [1, -2, -3, -4])
        np.testing.assert_array_almost_equal((q * q.invert()).components, [1, 0, 0, 0])

        unit = q.normalize()
        np.testing.assert_array_almost_equal(unit.invert().components, unit.conjugate().components)

    def test_compose_order(self):

        x_turn = Quaternion.from_angle_x(Degrees(90))
        z_turn = Quaternion.from_angle_z(Degrees(90))

        # z_turn * x_turn applies x_turn first
        composed = z_turn * x_turn
        np.testing.assert_array_almost_equal(composed.rotate_vector([0, 1, 0]),
                                             z_turn.rotate_vector(x_turn.rotate_vector([0, 1, 0])))
        np.testing.assert_array_almost_equal(composed.to_matrix(), z_turn.to_matrix() @ x_turn.to_matrix())

        self.assertFalse(composed.same_rotation(x_turn * z_turn))

        np.testing.assert_array_almost_equal(z_turn.compose(x_turn).components, composed.components)

    def test_quarter_turns_compose_to_half_turn(self):

        quarter = Quaternion.from_angle_z(Degrees(90))

        half = quarter * quarter

        self.assertEqual(half, Quaternion.from_angle_z(Degrees(180)))
        self.assertTrue(half.same_rotation(Basis3.from_angle_z(Degrees(180))))
        np.testing.assert_array_almost_equal(half.rotate_vector([1, 0, 0]), [-1, 0, 0])
        np.testing.assert_array_almost_equal(half.to_matrix(), np.diag([-1, -1, 1]))

    def test_compose_matches_matrices(self):

        rng = np.random.default_rng(21)

        vectors = rng.normal(size=(3, 4))

        for pair in range(8):
            first = Quaternion.from_array(rng.normal(size=4)).normalize()
            second = Quaternion.from_array(rng.normal(size=4)).normalize()

            with self.subTest(pair=pair):
                composed = first * second
                matrix = Basis3.from_quaternion(first) * Basis3.from_quaternion(second)

                np.testing.assert_array_almost_equal(composed.to_matrix(), matrix.matrix)
                np.testing.assert_array_almost_equal(composed.rotate_vector(vectors), matrix.rotate_vector(vectors))
                np.testing.assert_array_almost_equal(composed.rotate_vector(vectors),
                                                     first.rotate_vector(second.rotate_vector(vectors)))

    def test_compose_other_rotations(self):

        x_turn = Quaternion.from_angle_x(0.4)
        basis = Basis3.from_angle_y(0.7)

        composed = x_turn * basis
        self.assertIsInstance(composed, Quaternion)
        np.testing.assert_array_almost_equal(composed.to_matrix(), x_turn.to_matrix() @ basis.to_matrix())

        with self.assertRaises(TypeError):
            x_turn.compose('not a rotation')

    def test_inverse_rotation(self):

        q = Quaternion.from_axis_angle(np.array([1, 2, 2]) / 3, 1.2)
        vector = np.array([0.3, -1, 2])

        np.testing.assert_array_almost_equal(q.invert().rotate_vector(q.rotate_vector(vector)), vector)
        self.assertTrue((q * q.invert()).same_rotation(Quaternion.identity()))


class TestComparison(TestCase):

    def test_equality(self):

        q = Quaternion.from_angle_z(0.3)

        self.assertEqual(q, Quaternion.from_angle_z(0.3 + 1e-12))
        self.assertNotEqual(q, Quaternion.from_angle_z(0.31))

        # value equality does not identify q and -q
        self.assertNotEqual(q, -q)
        self.assertTrue(q.same_rotation(-q))

        # equality with other representations compares the rotation
        self.assertEqual(q, Basis3.from_angle_z(0.3))

        with self.assertRaises(TypeError):
            hash(q)

    def test_same_rotation_half_turn(self):

        half = Quaternion(0, 0, 0, 1)

        self.assertTrue(half.same_rotation(Quaternion(0, 0, 0, -1)))
        self.assertTrue(half.same_rotation(Quaternion(0, 0, 0, 3)))
        self.assertFalse(half.same_rotation(Quaternion(0, 1, 0, 0)))

    def test_approx_eq_epsilon(self):

        q = Quaternion(1, 0, 0, 0)

        self.assertTrue(q.approx_eq(Quaternion(1.05, 0, 0, 0), epsilon=0.1))
        self.assertFalse(q.approx_eq(Quaternion(1.05, 0, 0, 0)))


class TestRotation(TestCase):

    def test_rotate_vector(self):

        q = Quaternion.from_axis_angle([0, 0, 1], Degrees(90))

        np.testing.assert_array_almost_equal(q.rotate_vector([1, 0, 0]), [0, 1, 0])
        np.testing.assert_array_almost_equal(q.rotate_point([1, 0, 0]), [0, 1, 0])
        np.testing.assert_array_almost_equal(q.rotate_vector(np.eye(3)), [[0, -1, 0], [1, 0, 0], [0, 0, 1]])
        np.testing.assert_array_almost_equal(apply(q, [1, 0, 0]), [0, 1, 0])

        # non unit quaternions are normalized before rotating
        np.testing.assert_array_almost_equal((q * 3).rotate_vector([1, 0, 0]), [0, 1, 0])

    def test_scipy(self):

        rotvec = np.array([0.3, 0.1, -0.8])
        q = Quaternion.from_rotation_vector(rotvec)
        vectors = np.random.default_rng(4).normal(size=(3, 5))

        np.testing.assert_array_almost_equal(q.rotate_vector(vectors), ScipyRotation.from_rotvec(rotvec).apply(vectors.T).T)

    def test_interpolation(self):

        start = Quaternion.identity()
        end = Quaternion.from_angle_z(Degrees(90))

        self.assertTrue(start.slerp(end, 0.5).same_rotation(Quaternion.from_angle_z(Degrees(45))))
        self.assertTrue(start.nlerp(end, 0.5).same_rotation(Quaternion.from_angle_z(Degrees(45))))
        self.assertTrue(start.slerp(-end, 0.5).same_rotation(Quaternion.from_angle_z(Degrees(45))))
        self.assertTrue(start.slerp(end, 2, 0, 4).same_rotation(Quaternion.from_angle_z(Degrees(45))))


class TestConversions(TestCase):

    def test_to_matrix(self):

        q = Quaternion.from_angle_x(Degrees(90))

        np.testing.assert_array_almost_equal(q.to_matrix(), rot_x(np.pi / 2))

        matrix4 = q.to_matrix4()
        self.assertEqual(matrix4.shape, (4, 4))
        np.testing.assert_array_almost_equal(matrix4[:3, :3], rot_x(np.pi / 2))
        np.testing.assert_array_equal(matrix4[3], [0, 0, 0, 1])
        np.testing.assert_array_equal(matrix4[:3, 3], [0, 0, 0])

    def test_to_basis(self):

        q = Quaternion.from_euler(0.1, 0.2, 0.3)
        basis = q.to_basis()

        self.assertIsInstance(basis, Basis3)
        np.testing.assert_array_almost_equal(basis.matrix, q.to_matrix())
        self.assertTrue(basis.to_quaternion().same_rotation(q))

    def test_to_axis_angle(self):

        axis, angle = Quaternion.from_axis_angle([0, 1, 0], -0.5).to_axis_angle()

        np.testing.assert_array_almost_equal(axis, [0, -1, 0])
        self.assertIsInstance(angle, Radians)
        self.assertEqual(angle, Radians(0.5))

        axis, angle = Quaternion.identity().to_axis_angle()
        np.testing.assert_array_equal(axis, [1, 0, 0])
        self.assertEqual(angle, Radians(0))

    def test_to_euler(self):

        q = Quaternion.from_euler(0.1, -0.2, 0.3, 'yxz')

        angles = q.to_euler('yxz')
        for result, expected in zip(angles, (0.1, -0.2, 0.3)):
            self.assertIsInstance(result, Radians)
            self.assertAlmostEqual(result.value, expected)

    def test_to_quaternion(self):

        q = Quaternion.from_angle_x(0.2)
        self.assertIs(q.to_quaternion(), q)

    def test_array(self):

        q = Quaternion(1, 2, 3, 4)

        np.testing.assert_array_equal(np.asarray(q), [1, 2, 3, 4])
        self.assertEqual(repr(q), 'Quaternion(1.0, 2.0, 3.0, 4.0)')
