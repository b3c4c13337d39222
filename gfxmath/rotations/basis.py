r"""
This module provides the orthonormal rotation matrix types :class:`Basis2` and :class:`Basis3`.

A basis wraps a rotation matrix that is orthonormal with a determinant of +1 at all times it is visible to callers.
There is no public way to build one from an arbitrary matrix except

* :meth:`~Basis3.from_matrix_orthonormalized`, which projects the matrix onto the nearest rotation, and
* :meth:`~Basis3.from_matrix_unchecked`, the explicit "trust me" path that stores the matrix as given.  Only the
  optional contract checks of :mod:`gfxmath.utilities.contracts` look at it.

Composing rotation matrices accumulates rounding error, so after many compositions the product drifts away from
orthonormal.  This is not corrected implicitly (it would cost a decomposition on every product).  Instead
:meth:`~Basis3.orthonormality_error` reports the drift as

.. math::
    \epsilon = \max\left|\mathbf{R}^T\mathbf{R}-\mathbf{I}\right|

and :meth:`~Basis3.orthonormalize` removes it by replacing :math:`\mathbf{R}` with the orthogonal factor of its polar
decomposition, the closest rotation matrix in the Frobenius norm.
"""

from typing import Self

import numpy as np

from scipy.linalg import polar, svd

from gfxmath._typing import ARRAY_LIKE, FLOAT_ARRAY, EULER_ORDERS
from gfxmath.angle import Angle, Radians
from gfxmath.numeric import ScalarKind, kind_of
from gfxmath.utilities.contracts import CONTRACTS
from gfxmath.rotations.rotation import Rotation, Rotation2, Rotation3
from gfxmath.rotations.quaternion import Quaternion
from gfxmath.rotations.core._helpers import _check_array_and_shape
from gfxmath.rotations.core.elementals import rot_2d
from gfxmath.rotations.core.conversions import (quaternion_to_rotmat, axis_angle_to_rotmat, euler_to_rotmat,
                                                rotmat_to_quaternion)
from gfxmath.rotations.frames import look_at, between_vectors


__all__ = ['Basis2', 'Basis3']


def _nearest_rotation(matrix: FLOAT_ARRAY) -> FLOAT_ARRAY:
    # orthogonal factor of the polar decomposition
    unitary, _ = polar(np.asarray(matrix, dtype=np.float64))

    if np.linalg.det(unitary) < 0:
        # polar gives a reflection for matrices with a negative determinant, flip the weakest direction instead
        left, _, right = svd(matrix)
        left[:, -1] *= -1
        unitary = left @ right

    return unitary.astype(kind_of(matrix).dtype)


def _orthonormality_error(matrix: FLOAT_ARRAY) -> float:
    return float(np.abs(matrix.T @ matrix - np.eye(matrix.shape[0])).max())


class _Basis(Rotation):
    """
    The shared implementation of the basis types.
    """

    __slots__ = ('_matrix',)

    def __init__(self):
        matrix = np.eye(self.DIMENSION)
        matrix.flags.writeable = False
        self._matrix = matrix

    @classmethod
    def _wrap(cls, matrix: FLOAT_ARRAY) -> Self:
        out = cls.__new__(cls)
        frozen = np.array(matrix, dtype=kind_of(matrix).dtype)
        frozen.flags.writeable = False
        out._matrix = frozen
        return out

    @classmethod
    def identity(cls) -> Self:
        return cls()

    @classmethod
    def from_matrix_unchecked(cls, matrix: ARRAY_LIKE) -> Self:
        """
        Wrap a matrix that the caller guarantees is a rotation.

        The matrix is stored as given and never re-validated, except by the optional contract checks.

        :param matrix: the rotation matrix
        :return: the basis
        :raises ValueError: if the matrix has the wrong shape
        """

        matrix = _check_array_and_shape(matrix, second_last_axis_length=cls.DIMENSION,
                                        last_axis_length=cls.DIMENSION)

        if matrix.ndim != 2:
            raise ValueError(f'The matrix must be {cls.DIMENSION}x{cls.DIMENSION}')

        CONTRACTS.check_orthonormal(matrix)

        return cls._wrap(matrix)

    @classmethod
    def from_matrix_orthonormalized(cls, matrix: ARRAY_LIKE) -> Self:
        """
        Build the basis of the rotation closest to an arbitrary matrix.

        :param matrix: any non-singular square matrix of the right size
        :return: the basis
        :raises ValueError: if the matrix has the wrong shape
        """

        matrix = _check_array_and_shape(matrix, second_last_axis_length=cls.DIMENSION,
                                        last_axis_length=cls.DIMENSION)

        if matrix.ndim != 2:
            raise ValueError(f'The matrix must be {cls.DIMENSION}x{cls.DIMENSION}')

        return cls._wrap(_nearest_rotation(matrix))

    @property
    def matrix(self) -> FLOAT_ARRAY:
        """
        The read only rotation matrix.
        """

        return self._matrix

    @property
    def kind(self) -> ScalarKind:
        return kind_of(self._matrix)

    def to_matrix(self) -> FLOAT_ARRAY:
        return self._matrix.copy()

    def rotate_vector(self, vector: ARRAY_LIKE) -> FLOAT_ARRAY:
        vector = _check_array_and_shape(vector, first_axis_length=self.DIMENSION)

        return self._matrix @ vector

    def compose(self, other: Rotation) -> Self:
        """
        The matrix product ``self.matrix @ other.matrix``, the rotation applying ``other`` first and then ``self``.

        :param other: a rotation of the same dimension
        :return: the product, without re-orthonormalization
        """

        if not isinstance(other, Rotation) or other.DIMENSION != self.DIMENSION:
            raise TypeError(f'cannot compose a {type(self).__name__} with {type(other).__name__}')

        return self._wrap(self._matrix @ other.to_matrix())

    def invert(self) -> Self:
        """
        :return: the inverse rotation, the transpose
        """

        return self._wrap(self._matrix.T)

    def orthonormality_error(self) -> float:
        """
        :return: the largest absolute element of :math:`\\mathbf{R}^T\\mathbf{R}-\\mathbf{I}`
        """

        return _orthonormality_error(self._matrix)

    def orthonormalize(self) -> Self:
        """
        :return: the basis of the rotation matrix closest to this one
        """

        return self._wrap(_nearest_rotation(self._matrix))

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.array(self._matrix, dtype=dtype)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({np.array2string(self._matrix, separator=", ")})'


class Basis2(_Basis, Rotation2):
    """
    An orthonormal 2x2 rotation matrix.

        >>> from gfxmath.rotations import Basis2
        >>> from gfxmath.angle import Degrees
        >>> Basis2.from_angle(Degrees(90)).rotate_vector([1, 0]).round(12)
        array([0., 1.])
    """

    __slots__ = ()

    DIMENSION = 2

    @classmethod
    def from_angle(cls, angle: Angle | float) -> Self:
        return cls._wrap(rot_2d(angle))

    def to_angle(self) -> Radians:
        return Radians(np.arctan2(self._matrix[1, 0], self._matrix[0, 0]))


class Basis3(_Basis, Rotation3):
    """
    An orthonormal 3x3 rotation matrix.

        >>> from gfxmath.rotations import Basis3
        >>> from gfxmath.angle import Degrees
        >>> Basis3.from_angle_z(Degrees(90)).rotate_vector([1, 0, 0]).round(12)
        array([0., 1., 0.])
    """

    __slots__ = ()

    DIMENSION = 3

    @classmethod
    def from_quaternion(cls, quaternion: Quaternion | ARRAY_LIKE) -> Self:
        """
        The quaternion is normalized first.
        """

        if isinstance(quaternion, Quaternion):
            quaternion = quaternion.components

        return cls._wrap(quaternion_to_rotmat(quaternion))

    @classmethod
    def from_axis_angle(cls, axis: ARRAY_LIKE, angle: Angle | float) -> Self:
        return cls._wrap(axis_angle_to_rotmat(axis, angle))

    @classmethod
    def from_euler(cls, a: Angle | float, b: Angle | float, c: Angle | float, order: EULER_ORDERS = 'xyz') -> Self:
        return cls._wrap(euler_to_rotmat([a, b, c], order))

    @classmethod
    def look_at(cls, direction: ARRAY_LIKE, up: ARRAY_LIKE) -> Self:
        return cls._wrap(look_at(direction, up))

    @classmethod
    def between_vectors(cls, first: ARRAY_LIKE, second: ARRAY_LIKE) -> Self:
        return cls._wrap(quaternion_to_rotmat(between_vectors(first, second)))

    def to_quaternion(self) -> Quaternion:
        return Quaternion.from_array(rotmat_to_quaternion(self._matrix))

    def to_matrix4(self) -> FLOAT_ARRAY:
        out = np.eye(4, dtype=self._matrix.dtype)
        out[:3, :3] = self._matrix
        return out
