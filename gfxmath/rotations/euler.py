"""
This module provides the human facing rotation inputs, :class:`Euler` angles and :class:`AxisAngle` pairs.

Neither is used to compute with directly.  They are converted to a :class:`.Quaternion` or :class:`.Basis3` (and back)
at the edges of an application, for instance when reading a user's yaw/pitch/roll or reporting an orientation.

Euler angles are ambiguous in general.  The axis order is part of the value (changing it changes the rotation) and
converting a rotation back to angles has to pick one of the possible answers.  See :meth:`Euler.from_quaternion`.
"""

from typing import Any, Iterator, Self

import numpy as np

from gfxmath._typing import ARRAY_LIKE, FLOAT_ARRAY, EULER_ORDERS
from gfxmath.angle import Angle, Radians
from gfxmath.numeric import result_kind
from gfxmath.rotations.rotation import Rotation3
from gfxmath.rotations.quaternion import Quaternion
from gfxmath.rotations.basis import Basis3
from gfxmath.rotations.core._helpers import _check_vector_array_and_shape
from gfxmath.rotations.core.conversions import (parse_euler_order, euler_to_rotmat, rotmat_to_euler,
                                                axis_angle_to_rotmat, rotmat_to_axis_angle)


__all__ = ['Euler', 'AxisAngle']


class Euler:
    """
    Three angles applied about fixed axes in a given order.

    ``Euler(a, b, c, 'xyz')`` rotates about ``x`` by ``a``, then about ``y`` by ``b``, then about ``z`` by ``c``.  The
    angles may be :class:`.Angle` values or raw radians and are stored as :class:`.Radians`.

        >>> from gfxmath.rotations import Euler
        >>> from gfxmath.angle import Degrees
        >>> Euler(Degrees(90), 0, 0).to_matrix().round(12)
        array([[ 1.,  0.,  0.],
               [ 0.,  0., -1.],
               [ 0.,  1.,  0.]])
    """

    __slots__ = ('_a', '_b', '_c', '_order')

    def __init__(self, a: Angle | float, b: Angle | float, c: Angle | float, order: EULER_ORDERS = 'xyz'):
        """
        :param a: the angle about the first axis of ``order``
        :param b: the angle about the second axis of ``order``
        :param c: the angle about the third axis of ``order``
        :param order: the axes in the order they are applied
        :raises ValueError: if the order is not recognized
        """

        parse_euler_order(order)

        self._a = Radians(a)
        self._b = Radians(b)
        self._c = Radians(c)
        self._order = order.lower()

    @property
    def a(self) -> Radians:
        return self._a

    @property
    def b(self) -> Radians:
        return self._b

    @property
    def c(self) -> Radians:
        return self._c

    @property
    def order(self) -> str:
        return self._order

    @property
    def angles(self) -> tuple[Radians, Radians, Radians]:
        return self._a, self._b, self._c

    def __iter__(self) -> Iterator[Radians]:
        return iter(self.angles)

    @classmethod
    def from_matrix(cls, matrix: ARRAY_LIKE | Rotation3, order: EULER_ORDERS = 'xyz') -> Self:
        """
        Extract euler angles from a rotation matrix.

        See :func:`.rotmat_to_euler` for the formulas and angle ranges.

        :param matrix: the 3x3 rotation matrix or any spatial rotation
        :param order: the axes in the order they are applied
        :return: the euler angles
        """

        if isinstance(matrix, Rotation3):
            matrix = matrix.to_matrix()

        a, b, c = rotmat_to_euler(matrix, order)

        return cls(a, b, c, order)

    @classmethod
    def from_quaternion(cls, quaternion: Quaternion, order: EULER_ORDERS = 'xyz') -> Self:
        """
        Extract euler angles from a rotation quaternion.

        At gimbal lock (the middle angle lines the first and third axes up) only the sum or difference of the outer
        angles is determined by the rotation.  The third angle is then set to 0 and the first angle carries the whole
        remaining rotation, so the result still reproduces the rotation exactly even though it is not the only answer.

        :param quaternion: the rotation quaternion
        :param order: the axes in the order they are applied
        :return: the euler angles
        """

        return cls.from_matrix(quaternion.to_matrix(), order)

    from_basis = from_matrix

    def to_matrix(self) -> FLOAT_ARRAY:
        return euler_to_rotmat(self.angles, self._order)

    def to_quaternion(self) -> Quaternion:
        return Quaternion.from_euler(self._a, self._b, self._c, self._order)

    def to_basis(self) -> Basis3:
        return Basis3.from_euler(self._a, self._b, self._c, self._order)

    def approx_eq(self, other: 'Euler', epsilon: float | None = None) -> bool:
        """
        Compare the raw angles and the order.

        Two different triples can describe the same rotation.  Compare ``to_quaternion()`` results with
        :meth:`.Quaternion.same_rotation` to check that instead.
        """

        return (self._order == other.order and
                all(mine.approx_eq(theirs, epsilon) for mine, theirs in zip(self.angles, other.angles)))

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Euler):
            return NotImplemented
        return self.approx_eq(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'Euler({self._a!r}, {self._b!r}, {self._c!r}, {self._order!r})'


class AxisAngle:
    """
    A rotation by an angle about an axis.

    The axis is expected to be unit length.  This is a contract of the caller that is checked (when contract checking
    is enabled) at the point of use, not on construction.
    """

    __slots__ = ('_axis', '_angle')

    def __init__(self, axis: ARRAY_LIKE, angle: Angle | float):
        """
        :param axis: the unit rotation axis
        :param angle: the rotation angle as an :class:`.Angle` or raw radians
        """

        axis = _check_vector_array_and_shape(axis, return_copy=True)
        if axis.shape != (3,):
            raise ValueError('The axis must be a length 3 vector')

        axis.flags.writeable = False

        self._axis = axis
        self._angle = Radians(angle)

    @property
    def axis(self) -> FLOAT_ARRAY:
        return self._axis

    @property
    def angle(self) -> Radians:
        return self._angle

    def __iter__(self) -> Iterator[Any]:
        return iter((self._axis, self._angle))

    @classmethod
    def from_quaternion(cls, quaternion: Quaternion) -> Self:
        """
        See :meth:`.Quaternion.to_axis_angle`.
        """

        return cls(*quaternion.to_axis_angle())

    @classmethod
    def from_matrix(cls, matrix: ARRAY_LIKE | Rotation3) -> Self:
        """
        The angle is in :math:`[0, \\pi]`.
        """

        if isinstance(matrix, Rotation3):
            matrix = matrix.to_matrix()

        axis, angle = rotmat_to_axis_angle(matrix)

        return cls(axis, angle)

    from_basis = from_matrix

    def to_quaternion(self) -> Quaternion:
        return Quaternion.from_axis_angle(self._axis, self._angle)

    def to_matrix(self) -> FLOAT_ARRAY:
        return axis_angle_to_rotmat(self._axis, self._angle)

    def to_basis(self) -> Basis3:
        return Basis3.from_axis_angle(self._axis, self._angle)

    def to_rotation_vector(self) -> FLOAT_ARRAY:
        return self._axis * self._angle.radians

    def approx_eq(self, other: 'AxisAngle', epsilon: float | None = None) -> bool:
        kind = result_kind(self._axis, other.axis)
        return kind.approx_eq(self._axis, other.axis, epsilon) and self._angle.approx_eq(other.angle, epsilon)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, AxisAngle):
            return NotImplemented
        return self.approx_eq(other)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f'AxisAngle({np.array2string(self._axis, separator=", ")}, {self._angle!r})'
