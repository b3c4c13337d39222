r"""
This module provides the :class:`Quaternion` class, the canonical rotation representation in gfxmath.

A quaternion :math:`q = s + xi + yj + zk` is stored scalar first as ``[s, x, y, z]``.  Rotation quaternions have unit
length and are of the form

.. math::
    \mathbf{q}=\left[\begin{array}{c}\text{cos}(\frac{\theta}{2})\\
    \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\end{array}\right]

where :math:`\hat{\mathbf{x}}` is the unit rotation axis and :math:`\theta` the rotation angle.  :math:`\mathbf{q}` and
:math:`-\mathbf{q}` represent the same rotation.

Non-unit quaternions are perfectly valid values (they show up when adding, scaling or interpolating) and the class
supports the full quaternion algebra on them.  Anything that uses a quaternion *as a rotation*
(:meth:`~Quaternion.rotate_vector`, :meth:`~Quaternion.to_matrix`, :meth:`~Quaternion.to_axis_angle`, ...)
renormalizes first.

Quaternions are immutable.  Every operation returns a new quaternion::

    >>> from gfxmath.rotations import Quaternion
    >>> from gfxmath.angle import Degrees
    >>> quarter = Quaternion.from_axis_angle([0, 0, 1], Degrees(90))
    >>> quarter.rotate_vector([1, 0, 0]).round(12)
    array([0., 1., 0.])
    >>> (quarter * quarter).same_rotation(Quaternion.from_axis_angle([0, 0, 1], Degrees(180)))
    True
"""

from numbers import Real

from typing import Any, Iterator, Self

import numpy as np

from gfxmath._typing import ARRAY_LIKE, FLOAT_ARRAY, EULER_ORDERS, DatetimeLike
from gfxmath.angle import Angle, Radians
from gfxmath.numeric import ScalarKind, kind_of, result_kind
from gfxmath.rotations.rotation import Rotation, Rotation3
from gfxmath.rotations.core._helpers import _check_array_and_shape, _check_vector_array_and_shape
from gfxmath.rotations.core.quaternion_math import (quaternion_multiplication, quaternion_conjugate,
                                                    quaternion_inverse, quaternion_normalize, quaternion_canonical,
                                                    quaternion_rotate, nlerp, slerp)
from gfxmath.rotations.core.conversions import (axis_angle_to_quaternion, euler_to_quaternion, rotmat_to_quaternion,
                                                rotvec_to_quaternion, quaternion_to_rotmat, quaternion_to_axis_angle,
                                                quaternion_to_euler, quaternion_to_rotvec)
from gfxmath.rotations.frames import look_at, between_vectors


__all__ = ['Quaternion']


def _is_scalar(value: Any) -> bool:
    return isinstance(value, (Real, np.floating, np.integer)) or (isinstance(value, np.ndarray) and value.ndim == 0)


class Quaternion(Rotation3):
    """
    An immutable quaternion stored scalar first.

    Construct one directly from its components, ``Quaternion(s, x, y, z)``, or with one of the ``from_*``
    constructors.  The components keep the precision of the inputs (float32 in, float32 out); mixed or python inputs
    give double precision.
    """

    __slots__ = ('_components',)

    def __init__(self, s: float = 1.0, x: float = 0.0, y: float = 0.0, z: float = 0.0):
        """
        :param s: the scalar part
        :param x: the ``i`` component of the vector part
        :param y: the ``j`` component of the vector part
        :param z: the ``k`` component of the vector part
        """

        kind = result_kind(s, x, y, z)

        components = np.array([s, x, y, z], dtype=kind.dtype)
        components.flags.writeable = False

        self._components = components

    # constructors

    @classmethod
    def from_array(cls, components: ARRAY_LIKE) -> Self:
        """
        Build a quaternion from a length 4 scalar first array.

        :param components: ``[s, x, y, z]``
        :return: the quaternion
        :raises ValueError: if ``components`` does not have exactly 4 elements
        """

        components = _check_array_and_shape(components, first_axis_length=4)

        if components.shape != (4,):
            raise ValueError('The quaternion must be a length 4 array')

        out = cls.__new__(cls)
        frozen = components.copy()
        frozen.flags.writeable = False
        out._components = frozen
        return out

    @classmethod
    def from_sv(cls, s: float, v: ARRAY_LIKE) -> Self:
        """
        Build a quaternion from its scalar and vector parts.

        :param s: the scalar part
        :param v: the length 3 vector part
        :return: the quaternion
        """

        v = _check_vector_array_and_shape(v)

        return cls.from_array(np.concatenate([np.asarray([s], dtype=result_kind(s, v).dtype), v]))

    @classmethod
    def identity(cls) -> Self:
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def zero(cls) -> Self:
        """
        :return: the additive identity, which is not a rotation
        """

        return cls(0.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_axis_angle(cls, axis: ARRAY_LIKE, angle: Angle | float) -> Self:
        """
        Build the rotation quaternion :math:`(\\cos(\\theta/2), \\sin(\\theta/2)\\hat{\\mathbf{x}})`.

        The axis must be unit length.  This is a contract of the caller and is not corrected here (see
        :mod:`gfxmath.utilities.contracts` to have it checked).

        :param axis: the unit rotation axis
        :param angle: the rotation angle as an :class:`.Angle` or a raw value in radians
        :return: the rotation quaternion
        """

        return cls.from_array(axis_angle_to_quaternion(axis, angle))

    @classmethod
    def from_euler(cls, a: Angle | float, b: Angle | float, c: Angle | float, order: EULER_ORDERS = 'xyz') -> Self:
        """
        Build the rotation quaternion from three euler angles.

        The result is the product :math:`\\mathbf{q}_c\\otimes\\mathbf{q}_b\\otimes\\mathbf{q}_a` of the three
        elemental quaternions so that the rotation about the first axis of ``order`` is applied first.

        :param a: the angle about the first axis of ``order``
        :param b: the angle about the second axis of ``order``
        :param c: the angle about the third axis of ``order``
        :param order: the axes in the order they are applied
        :return: the rotation quaternion
        :raises ValueError: if the order is not recognized
        """

        return cls.from_array(euler_to_quaternion([a, b, c], order))

    @classmethod
    def from_matrix(cls, matrix: ARRAY_LIKE | Rotation3) -> Self:
        """
        Build the rotation quaternion for a rotation matrix.

        The quaternion is canonical (non-negative scalar part).  See :func:`.rotmat_to_quaternion`.

        :param matrix: the 3x3 rotation matrix or any spatial rotation
        :return: the rotation quaternion
        """

        if isinstance(matrix, Rotation3):
            matrix = matrix.to_matrix()

        return cls.from_array(rotmat_to_quaternion(matrix))

    @classmethod
    def from_rotation_vector(cls, vector: ARRAY_LIKE) -> Self:
        """
        Build the rotation quaternion for a rotation vector (the axis scaled by the angle in radians).
        """

        return cls.from_array(rotvec_to_quaternion(vector))

    @classmethod
    def look_at(cls, direction: ARRAY_LIKE, up: ARRAY_LIKE) -> Self:
        return cls.from_matrix(look_at(direction, up))

    @classmethod
    def between_vectors(cls, first: ARRAY_LIKE, second: ARRAY_LIKE) -> Self:
        return cls.from_array(between_vectors(first, second))

    # accessors

    @property
    def s(self) -> float:
        """
        The scalar part.
        """

        return self._components[0]

    @property
    def x(self) -> float:
        return self._components[1]

    @property
    def y(self) -> float:
        return self._components[2]

    @property
    def z(self) -> float:
        return self._components[3]

    @property
    def v(self) -> FLOAT_ARRAY:
        """
        The vector part as a read only length 3 array.
        """

        return self._components[1:]

    @property
    def components(self) -> FLOAT_ARRAY:
        """
        The read only scalar first ``[s, x, y, z]`` array.
        """

        return self._components

    @property
    def kind(self) -> ScalarKind:
        return kind_of(self._components)

    def __iter__(self) -> Iterator[float]:
        return iter(self._components)

    def __len__(self) -> int:
        return 4

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._components, dtype=dtype)

    # quaternion algebra

    def dot(self, other: 'Quaternion') -> float:
        """
        :return: the 4D dot product of the components
        """

        return self._components @ other.components

    def magnitude2(self) -> float:
        return self.dot(self)

    def magnitude(self) -> float:
        return np.sqrt(self.magnitude2())

    def normalize(self) -> Self:
        """
        Scale to unit length.

        Normalizing the zero quaternion is a contract violation and gives ``nan`` components.

        :return: the unit quaternion
        """

        return type(self).from_array(quaternion_normalize(self._components))

    def canonical(self) -> Self:
        """
        :return: this quaternion or its negation, whichever has a non-negative scalar part
        """

        return type(self).from_array(quaternion_canonical(self._components))

    def conjugate(self) -> Self:
        """
        :return: the quaternion with the vector part negated
        """

        return type(self).from_array(quaternion_conjugate(self._components))

    def invert(self) -> Self:
        """
        The multiplicative inverse, the conjugate over the squared magnitude.

        For a rotation quaternion this is the conjugate, the opposite rotation.

        :return: the inverse quaternion
        """

        return type(self).from_array(quaternion_inverse(self._components))

    def compose(self, other: Rotation) -> Self:
        """
        The Hamilton product ``self * other``, the rotation applying ``other`` first and then ``self``.

        :param other: a quaternion or any other spatial rotation
        :return: the product
        """

        if not isinstance(other, Quaternion):
            if not isinstance(other, Rotation3):
                raise TypeError(f'cannot compose a quaternion with {type(other).__name__}')
            other = other.to_quaternion()

        return type(self).from_array(quaternion_multiplication(self._components, other.components))

    def same_rotation(self, other: Rotation3, epsilon: float | None = None) -> bool:
        """
        Check whether two quaternions represent the same rotation, that is, are equal up to sign after normalizing.

        :param other: the rotation to compare with
        :param epsilon: the tolerance on each component.  If ``None`` the epsilon of the scalar kind is used
        :return: ``True`` if the rotations agree
        """

        if not isinstance(other, Quaternion):
            other = other.to_quaternion()

        first = self.normalize().canonical().components
        second = other.normalize().canonical().components

        kind = result_kind(first, second)

        # canonical form is ambiguous for half turns where the scalar part is 0
        return kind.approx_eq(first, second, epsilon) or (abs(first[0]) <= kind.epsilon and
                                                         kind.approx_eq(first, -second, epsilon))

    def approx_eq(self, other: Rotation, epsilon: float | None = None) -> bool:
        """
        Compare two quaternions component by component.

        This is value equality, so ``q`` and ``-q`` are *not* equal (see :meth:`same_rotation`).  Comparing with a
        rotation that is not a quaternion compares the rotations they represent.

        :param other: the value to compare with
        :param epsilon: the tolerance on each component.  If ``None`` the epsilon of the scalar kind is used
        :return: ``True`` if the values agree within tolerance
        """

        if isinstance(other, Quaternion):
            return result_kind(self, other).approx_eq(self._components, other.components, epsilon)

        return super().approx_eq(other, epsilon)

    def __add__(self, other: Any) -> Self:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return type(self).from_array(self._components + other.components)

    def __sub__(self, other: Any) -> Self:
        if not isinstance(other, Quaternion):
            return NotImplemented
        return type(self).from_array(self._components - other.components)

    def __neg__(self) -> Self:
        return type(self).from_array(-self._components)

    def __mul__(self, other: Any) -> Self:
        if isinstance(other, Rotation3):
            return self.compose(other)

        if _is_scalar(other):
            return type(self).from_array(self._components * other)

        return NotImplemented

    def __rmul__(self, other: Any) -> Self:
        if _is_scalar(other):
            return type(self).from_array(other * self._components)

        return NotImplemented

    def __truediv__(self, other: Any) -> Self:
        if _is_scalar(other):
            return type(self).from_array(self._components / other)

        return NotImplemented

    # rotation

    def rotate_vector(self, vector: ARRAY_LIKE) -> FLOAT_ARRAY:
        """
        Rotate 3-vector(s) by this rotation.

        The quaternion is normalized first.

        :param vector: a length 3 vector or 3xn array of vectors
        :return: the rotated vector(s)
        """

        return quaternion_rotate(quaternion_normalize(self._components), vector)

    def nlerp(self, other: 'Quaternion', time: float | DatetimeLike,
              time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> Self:
        """
        Normalized linear interpolation from this quaternion towards ``other``.

        See :func:`.nlerp`.
        """

        return type(self).from_array(nlerp(self._components, other.components, time, time0, time1))

    def slerp(self, other: 'Quaternion', time: float | DatetimeLike,
              time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> Self:
        """
        Spherical linear interpolation from this quaternion towards ``other`` along the shortest arc.

        See :func:`.slerp`.
        """

        return type(self).from_array(slerp(self._components, other.components, time, time0, time1))

    # conversions

    def to_quaternion(self) -> Self:
        return self

    def to_matrix(self) -> FLOAT_ARRAY:
        """
        :return: the 3x3 rotation matrix (the quaternion is normalized first)
        """

        return quaternion_to_rotmat(self._components)

    def to_matrix4(self) -> FLOAT_ARRAY:
        """
        :return: the 4x4 homogeneous rotation matrix
        """

        out = np.eye(4, dtype=self._components.dtype)
        out[:3, :3] = self.to_matrix()
        return out

    def to_basis(self):
        """
        :return: this rotation as a :class:`.Basis3`
        """

        # basis builds on quaternion so it is imported here
        from gfxmath.rotations.basis import Basis3

        return Basis3.from_quaternion(self)

    def to_axis_angle(self) -> tuple[FLOAT_ARRAY, Radians]:
        """
        Convert to a unit axis and an angle in :math:`[0, 2\\pi]`.

        A quaternion built from a negative angle comes back as the opposite axis with a positive angle.  The identity
        gives the ``x`` axis and a zero angle.  See :func:`.quaternion_to_axis_angle`.

        :return: the axis and the angle
        """

        axis, angle = quaternion_to_axis_angle(self._components)

        return axis, Radians(angle)

    def to_euler(self, order: EULER_ORDERS = 'xyz') -> tuple[Radians, Radians, Radians]:
        a, b, c = quaternion_to_euler(self._components, order)

        return Radians(a), Radians(b), Radians(c)

    def to_rotation_vector(self) -> FLOAT_ARRAY:
        """
        :return: the rotation vector, with an angle in :math:`[0, \\pi]`
        """

        return quaternion_to_rotvec(self._components)

    def __repr__(self) -> str:
        return 'Quaternion({0!r}, {1!r}, {2!r}, {3!r})'.format(*(float(c) for c in self._components))

    def __str__(self) -> str:
        return str(self._components)
