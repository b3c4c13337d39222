"""
This module defines the interface shared by every rotation type in gfxmath.

A rotation is an immutable value that acts on vectors and points from the left.  All rotation types agree on
composition order: ``a.compose(b)`` (equivalently ``a * b``) is the rotation that applies ``b`` first and ``a``
second, which is the order in which the corresponding matrices multiply.  Because of this, composing two
:class:`.Quaternion` objects and composing the two equivalent :class:`.Basis3` objects always give the same rotation.

Rotations are compared approximately.  ``a == b`` is ``True`` when the two rotations move vectors the same way within
the epsilon of their scalar kind, regardless of how they are represented.
"""

from abc import ABCMeta, abstractmethod

from typing import Any, Self, ClassVar

import numpy as np

from gfxmath._typing import ARRAY_LIKE, FLOAT_ARRAY, SCALAR_OR_ARRAY, EULER_ORDERS
from gfxmath.angle import Angle, Radians
from gfxmath.numeric import ScalarKind, kind_of, result_kind


__all__ = ['Rotation', 'Rotation2', 'Rotation3', 'apply']


class Rotation(metaclass=ABCMeta):
    """
    The abstract base class for rotations.
    """

    __slots__ = ()

    DIMENSION: ClassVar[int]
    """
    The dimension of the space the rotation acts in.
    """

    @classmethod
    @abstractmethod
    def identity(cls) -> Self:
        """
        :return: the rotation that leaves every vector unchanged
        """

    @property
    def kind(self) -> ScalarKind:
        """
        The scalar kind of the rotation's storage.
        """

        return kind_of(self.to_matrix())

    @abstractmethod
    def rotate_vector(self, vector: ARRAY_LIKE) -> FLOAT_ARRAY:
        """
        Rotate vector(s).

        :param vector: a single vector or multiple vectors as the columns of a ``d x n`` array
        :return: the rotated vector(s)
        """

    def rotate_point(self, point: ARRAY_LIKE) -> FLOAT_ARRAY:
        """
        Rotate point(s) about the origin.

        A pure rotation moves points and vectors identically.  The separate method exists so that code reads the same
        for rotations and for transforms, where the two differ.

        :param point: a single point or multiple points as the columns of a ``d x n`` array
        :return: the rotated point(s)
        """

        return self.rotate_vector(point)

    @abstractmethod
    def compose(self, other: 'Rotation') -> Self:
        """
        Compose two rotations.

        :param other: the rotation to apply first
        :return: the rotation applying ``other`` and then ``self``
        """

    @abstractmethod
    def invert(self) -> Self:
        """
        :return: the rotation undoing this one
        """

    @abstractmethod
    def to_matrix(self) -> FLOAT_ARRAY:
        """
        :return: the ``d x d`` rotation matrix as a new array
        """

    def approx_eq(self, other: 'Rotation', epsilon: float | None = None) -> bool:
        """
        Check whether two rotations move vectors the same way.

        :param other: the rotation to compare with
        :param epsilon: the tolerance on each matrix element.  If ``None`` the epsilon of the scalar kind is used
        :return: ``True`` if the rotation matrices agree within tolerance
        """

        if not isinstance(other, Rotation) or other.DIMENSION != self.DIMENSION:
            return False

        first = self.to_matrix()
        second = other.to_matrix()

        return result_kind(first, second).approx_eq(first, second, epsilon)

    def __mul__(self, other: Any) -> Self:
        if isinstance(other, Rotation) and other.DIMENSION == self.DIMENSION:
            return self.compose(other)

        return NotImplemented

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Rotation):
            return NotImplemented

        return self.approx_eq(other)

    __hash__ = None  # type: ignore[assignment]


class Rotation2(Rotation):
    """
    The abstract base class for planar rotations.

    Positive angles rotate counter clockwise.
    """

    __slots__ = ()

    DIMENSION = 2

    @classmethod
    @abstractmethod
    def from_angle(cls, angle: Angle | SCALAR_OR_ARRAY) -> Self:
        """
        Build the rotation by an angle.

        :param angle: the angle as an :class:`.Angle` or a raw value in radians
        :return: the rotation
        """

    @abstractmethod
    def to_angle(self) -> Radians:
        """
        :return: the rotation angle in :math:`(-\\pi, \\pi]`
        """


class Rotation3(Rotation):
    """
    The abstract base class for spatial rotations.
    """

    __slots__ = ()

    DIMENSION = 3

    @classmethod
    @abstractmethod
    def from_axis_angle(cls, axis: ARRAY_LIKE, angle: Angle | float) -> Self:
        """
        Build the rotation by an angle about an axis.

        :param axis: the unit rotation axis.  Unit length is a contract of the caller
        :param angle: the angle as an :class:`.Angle` or a raw value in radians
        :return: the rotation
        """

    @classmethod
    @abstractmethod
    def from_euler(cls, a: Angle | float, b: Angle | float, c: Angle | float, order: EULER_ORDERS = 'xyz') -> Self:
        """
        Build the rotation from three euler angles.

        :param a: the angle about the first axis of ``order`` (applied first)
        :param b: the angle about the second axis of ``order``
        :param c: the angle about the third axis of ``order`` (applied last)
        :param order: the axes in the order they are applied
        :return: the rotation
        """

    @classmethod
    @abstractmethod
    def look_at(cls, direction: ARRAY_LIKE, up: ARRAY_LIKE) -> Self:
        """
        Build the rotation that maps ``direction`` onto the ``+z`` axis and puts ``up`` in the upper ``y-z`` plane.

        See :func:`.frames.look_at`.
        """

    @classmethod
    @abstractmethod
    def between_vectors(cls, first: ARRAY_LIKE, second: ARRAY_LIKE) -> Self:
        """
        Build the shortest arc rotation taking ``first`` onto ``second``.

        See :func:`.frames.between_vectors`.
        """

    @abstractmethod
    def to_quaternion(self):
        """
        :return: this rotation as a :class:`.Quaternion`
        """

    @classmethod
    def _from_axis_index(cls, index: int, angle: Angle | float) -> Self:
        axis = np.zeros(3, dtype=kind_of(angle).dtype)
        axis[index] = 1
        return cls.from_axis_angle(axis, angle)

    @classmethod
    def from_angle_x(cls, angle: Angle | float) -> Self:
        """
        Build the rotation by ``angle`` about the ``x`` axis.
        """

        return cls._from_axis_index(0, angle)

    @classmethod
    def from_angle_y(cls, angle: Angle | float) -> Self:
        """
        Build the rotation by ``angle`` about the ``y`` axis.
        """

        return cls._from_axis_index(1, angle)

    @classmethod
    def from_angle_z(cls, angle: Angle | float) -> Self:
        """
        Build the rotation by ``angle`` about the ``z`` axis.
        """

        return cls._from_axis_index(2, angle)

    def to_euler(self, order: EULER_ORDERS = 'xyz') -> tuple[Radians, Radians, Radians]:
        """
        Express this rotation as euler angles.

        See :func:`.rotmat_to_euler` for the ranges of the angles and how gimbal lock is resolved.

        :param order: the axes in the order they are applied
        :return: the three angles
        """

        return self.to_quaternion().to_euler(order)

    def to_axis_angle(self) -> tuple[FLOAT_ARRAY, Radians]:
        """
        Express this rotation as a unit axis and an angle.

        :return: the axis and the angle
        """

        return self.to_quaternion().to_axis_angle()


def apply(rotation: Rotation, vector: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Apply a rotation to vector(s).

    This is the same as ``rotation.rotate_vector(vector)`` and accepts any :class:`Rotation` (or any transform, see
    :mod:`gfxmath.transform`, in which case the vector is not translated).

    :param rotation: the rotation to apply
    :param vector: a single vector or multiple vectors as the columns of a ``d x n`` array
    :return: the rotated vector(s)
    """

    transform_vector = getattr(rotation, 'transform_vector', None)
    if transform_vector is not None:
        return transform_vector(vector)

    return rotation.rotate_vector(vector)
