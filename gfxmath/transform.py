r"""
This module provides composite transforms, rotations paired with a translation and a scale.

A :class:`DecomposedTransform` keeps its three parts separate and applies them in a fixed order, scale first, then
rotation, then translation:

.. math::
    \mathbf{p}' = \mathbf{R}(\mathbf{S}\mathbf{p}) + \mathbf{t}

Vectors (directions) are scaled and rotated but never translated.

An :class:`AffineTransform` stores the equivalent :math:`(d+1)\times(d+1)` homogeneous matrix.  It can represent things
a decomposed transform cannot, in particular the inverse of a non-uniformly scaled transform (which shears), so those
operations return an :class:`AffineTransform`.

Both follow the composition order of the rotation types: ``t1.compose(t2)`` (and ``t1 * t2``) applies ``t2`` first.

    >>> from gfxmath.transform import DecomposedTransform
    >>> from gfxmath.rotations import Quaternion
    >>> from gfxmath.angle import Degrees
    >>> move = DecomposedTransform(Quaternion.from_angle_z(Degrees(90)), [1, 0, 0], 2)
    >>> move.transform_point([1, 0, 0]).round(12)
    array([1., 2., 0.])
    >>> move.invert().transform_point([1, 2, 0]).round(12)
    array([1., 0., 0.])
"""

from abc import ABCMeta, abstractmethod

from typing import Any, Self

import numpy as np

from gfxmath._typing import ARRAY_LIKE, FLOAT_ARRAY, SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY
from gfxmath.numeric import kind_of, as_kind_array, result_kind
from gfxmath.utilities.contracts import CONTRACTS
from gfxmath.utilities.mixin_classes import AttributeEqualityComparison
from gfxmath.rotations.rotation import Rotation
from gfxmath.rotations.quaternion import Quaternion
from gfxmath.rotations.basis import Basis2


__all__ = ['Transform', 'DecomposedTransform', 'AffineTransform']


def _check_points(points: ARRAY_LIKE, dimension: int) -> FLOAT_ARRAY:
    points = as_kind_array(points)

    if points.ndim == 0 or points.ndim > 2 or points.shape[0] != dimension:
        raise ValueError(f'The points/vectors must have a first axis of length {dimension}')

    return points


def _column(values: FLOAT_ARRAY, like: FLOAT_ARRAY) -> FLOAT_ARRAY:
    # reshape a length d array so it broadcasts down the columns of a d or d x n array
    return values.reshape((-1,) + (1,) * (like.ndim - 1))


class Transform(AttributeEqualityComparison, metaclass=ABCMeta):
    """
    The abstract base class for transforms of points and vectors.
    """

    @property
    @abstractmethod
    def dimension(self) -> int:
        """
        The dimension of the points the transform acts on (2 or 3).
        """

    @abstractmethod
    def transform_point(self, point: ARRAY_LIKE) -> FLOAT_ARRAY:
        """
        Transform point(s), including the translation.

        :param point: a single point or multiple points as the columns of a ``d x n`` array
        :return: the transformed point(s)
        """

    @abstractmethod
    def transform_vector(self, vector: ARRAY_LIKE) -> FLOAT_ARRAY:
        """
        Transform vector(s), skipping the translation.

        :param vector: a single vector or multiple vectors as the columns of a ``d x n`` array
        :return: the transformed vector(s)
        """

    def transform_as_point(self, vector: ARRAY_LIKE) -> FLOAT_ARRAY:
        """
        Transform a displacement vector as though it were the point it reaches from the origin.

        :param vector: the vector(s)
        :return: the transformed point(s)
        """

        return self.transform_point(vector)

    @abstractmethod
    def compose(self, other: 'Transform') -> 'Transform':
        """
        :param other: the transform to apply first
        :return: the transform applying ``other`` and then ``self``
        """

    @abstractmethod
    def invert(self) -> 'Transform':
        """
        :return: the transform undoing this one
        """

    @abstractmethod
    def to_matrix(self) -> FLOAT_ARRAY:
        """
        :return: the ``(d+1)x(d+1)`` homogeneous matrix of the transform
        """

    def __mul__(self, other: Any) -> 'Transform':
        if not isinstance(other, Transform):
            return NotImplemented

        return self.compose(other)


class DecomposedTransform(Transform):
    """
    A transform stored as a separate scale, rotation and translation.

    The rotation can be any :class:`.Rotation` (2D or 3D) and sets the dimension of the transform.  The scale is either
    a single number (uniform) or one number per axis.
    """

    def __init__(self, rotation: Rotation | None = None, translation: ARRAY_LIKE | None = None,
                 scale: SCALAR_OR_ARRAY = 1.0):
        """
        :param rotation: the rotation.  If ``None`` the identity of the dimension of ``translation`` (3D by default)
        :param translation: the translation.  If ``None`` no translation
        :param scale: the uniform scale or per axis scales
        :raises ValueError: if the parts do not share a dimension
        """

        if rotation is None:
            rotation = Basis2.identity() if translation is not None and np.size(translation) == 2 else \
                Quaternion.identity()

        if not isinstance(rotation, Rotation):
            raise TypeError(f'rotation must be a Rotation, not {type(rotation).__name__}')

        dimension = rotation.DIMENSION

        if translation is None:
            translation = np.zeros(dimension)

        translation = np.array(translation, dtype=kind_of(translation).dtype)
        if translation.shape != (dimension,):
            raise ValueError(f'The translation must be a length {dimension} vector')
        translation.flags.writeable = False

        if np.ndim(scale) == 0:
            scale = scale if isinstance(scale, np.floating) else float(scale)
        else:
            scale = np.array(scale, dtype=kind_of(scale).dtype)
            if scale.shape != (dimension,):
                raise ValueError(f'The scale must be a single value or a length {dimension} vector')
            scale.flags.writeable = False

        self._rotation = rotation
        self._translation = translation
        self._scale = scale

    @classmethod
    def identity(cls, dimension: int = 3) -> Self:
        """
        :param dimension: 2 or 3
        :return: the transform that leaves everything unchanged
        """

        return cls(Basis2.identity() if dimension == 2 else Quaternion.identity())

    @classmethod
    def look_at(cls, eye: ARRAY_LIKE, center: ARRAY_LIKE, up: ARRAY_LIKE) -> Self:
        """
        Build the view transform of a camera at ``eye`` looking at ``center``.

        The transform moves ``eye`` to the origin and turns the viewing direction onto ``+z`` with ``up`` in the upper
        ``y-z`` plane.

        :param eye: the camera position
        :param center: the point the camera looks at
        :param up: the approximate up direction
        :return: the view transform
        """

        eye = as_kind_array(eye)

        rotation = Quaternion.look_at(np.asarray(center) - eye, up)

        return cls(rotation, rotation.rotate_vector(-eye))

    @property
    def rotation(self) -> Rotation:
        return self._rotation

    @property
    def translation(self) -> FLOAT_ARRAY:
        return self._translation

    @property
    def scale(self) -> F_SCALAR_OR_ARRAY:
        return self._scale

    @property
    def dimension(self) -> int:
        return self._rotation.DIMENSION

    @property
    def is_uniform(self) -> bool:
        """
        Whether the scale is the same along every axis.
        """

        return np.ndim(self._scale) == 0 or bool(np.all(self._scale == self._scale[0]))

    @property
    def uniform_scale(self) -> F_SCALAR_OR_ARRAY:
        return self._scale if np.ndim(self._scale) == 0 else self._scale[0]

    def _scaled(self, values: FLOAT_ARRAY) -> FLOAT_ARRAY:
        if np.ndim(self._scale) == 0:
            return values * self._scale
        return values * _column(self._scale, values)

    def transform_vector(self, vector: ARRAY_LIKE) -> FLOAT_ARRAY:
        vector = _check_points(vector, self.dimension)

        return self._rotation.rotate_vector(self._scaled(vector))

    def transform_point(self, point: ARRAY_LIKE) -> FLOAT_ARRAY:
        point = _check_points(point, self.dimension)

        return self.transform_vector(point) + _column(self._translation, point)

    def compose(self, other: Transform) -> Transform:
        """
        Compose two transforms, ``other`` applied first.

        When this transform has a uniform scale the result is again decomposed, with

        .. math::
            \\mathbf{S} = s_1\\mathbf{S}_2, \\quad \\mathbf{R} = \\mathbf{R}_1\\mathbf{R}_2, \\quad
            \\mathbf{t} = s_1\\mathbf{R}_1\\mathbf{t}_2 + \\mathbf{t}_1

        A non-uniform scale does not commute with the rotation of ``other``, so in that case (or when ``other`` is not
        decomposed) the exact product is returned as an :class:`AffineTransform`.

        :param other: the transform to apply first
        :return: the composed transform
        :raises ValueError: if the dimensions differ
        """

        if other.dimension != self.dimension:
            raise ValueError('cannot compose transforms of different dimensions')

        if isinstance(other, DecomposedTransform) and self.is_uniform:
            return DecomposedTransform(self._rotation.compose(other.rotation),
                                       self.transform_point(other.translation),
                                       self.uniform_scale * other.scale)

        return AffineTransform(self.to_matrix() @ other.to_matrix())

    def invert(self) -> Transform:
        """
        Invert the transform.

        A uniformly scaled transform inverts to a decomposed transform with

        .. math::
            s' = 1/s, \\quad \\mathbf{R}' = \\mathbf{R}^{-1}, \\quad \\mathbf{t}' = -s'\\mathbf{R}^{-1}\\mathbf{t}

        The inverse of a non-uniformly scaled transform is not of the scale-rotate-translate form and is returned as
        an exact :class:`AffineTransform`.  A zero scale is a contract violation.

        :return: the inverse transform
        """

        CONTRACTS.check_nonzero(self._scale, 'the transform scale')

        if not self.is_uniform:
            return AffineTransform(self.to_matrix()).invert()

        with np.errstate(divide='ignore', invalid='ignore'):
            inverse_scale = 1 / self.uniform_scale

        inverse_rotation = self._rotation.invert()

        return DecomposedTransform(inverse_rotation,
                                   -inverse_scale * inverse_rotation.rotate_vector(self._translation),
                                   inverse_scale)

    def to_matrix(self) -> FLOAT_ARRAY:
        dimension = self.dimension
        dtype = result_kind(self._rotation, self._translation).dtype

        matrix = np.eye(dimension + 1, dtype=dtype)
        matrix[:dimension, :dimension] = self._rotation.to_matrix() * self._scale
        matrix[:dimension, dimension] = self._translation

        return matrix

    def __repr__(self) -> str:
        return f'DecomposedTransform({self._rotation!r}, {self._translation!r}, {self._scale!r})'


class AffineTransform(Transform):
    """
    A transform stored as a homogeneous matrix.

    The last row of the matrix is expected to be ``[0, ..., 0, 1]``.
    """

    def __init__(self, matrix: ARRAY_LIKE):
        """
        :param matrix: the 3x3 (2D) or 4x4 (3D) homogeneous matrix
        :raises ValueError: if the matrix is not 3x3 or 4x4
        """

        matrix = np.array(matrix, dtype=kind_of(matrix).dtype)

        if matrix.shape not in ((3, 3), (4, 4)):
            raise ValueError('The matrix must be 3x3 or 4x4')

        matrix.flags.writeable = False

        self._matrix = matrix

    @classmethod
    def identity(cls, dimension: int = 3) -> Self:
        return cls(np.eye(dimension + 1))

    @property
    def matrix(self) -> FLOAT_ARRAY:
        return self._matrix

    @property
    def dimension(self) -> int:
        return self._matrix.shape[0] - 1

    def transform_vector(self, vector: ARRAY_LIKE) -> FLOAT_ARRAY:
        vector = _check_points(vector, self.dimension)

        return self._matrix[:-1, :-1] @ vector

    def transform_point(self, point: ARRAY_LIKE) -> FLOAT_ARRAY:
        point = _check_points(point, self.dimension)

        return self._matrix[:-1, :-1] @ point + _column(self._matrix[:-1, -1], point)

    def compose(self, other: Transform) -> 'AffineTransform':
        if other.dimension != self.dimension:
            raise ValueError('cannot compose transforms of different dimensions')

        return AffineTransform(self._matrix @ other.to_matrix())

    def invert(self) -> 'AffineTransform':
        """
        Invert the matrix.  A singular matrix (for instance from a zero scale) is a contract violation.
        """

        CONTRACTS.check_nonzero(np.linalg.det(self._matrix), 'the transform determinant')

        try:
            return AffineTransform(np.linalg.inv(self._matrix))
        except np.linalg.LinAlgError:
            # exactly singular, the inverse is undefined
            return AffineTransform(np.full_like(self._matrix, np.nan))

    def to_matrix(self) -> FLOAT_ARRAY:
        return self._matrix.copy()

    def __repr__(self) -> str:
        return f'AffineTransform({np.array2string(self._matrix, separator=", ")})'
