"""
This module provides the small set of vector and point operations the rotation and transform types are built on.

Vectors are plain numpy arrays.  A single vector is a length 2 or 3 array and multiple vectors are given as the
columns of a ``2 x n`` or ``3 x n`` array, matching the layout used throughout :mod:`gfxmath.rotations`.  Every
function here works column wise on such arrays.

Points and vectors share a storage type but not semantics: translating a point moves it while translating a
direction does nothing.  :func:`to_homogeneous` makes the difference explicit by appending a 1 (point) or a 0
(vector) so that a homogeneous transform matrix treats each correctly.
"""

import numpy as np

from gfxmath._typing import ARRAY_LIKE, FLOAT_ARRAY, F_SCALAR_OR_ARRAY, SCALAR_OR_ARRAY
from gfxmath.angle import Radians
from gfxmath.numeric import as_kind_array, result_kind
from gfxmath.utilities.contracts import CONTRACTS


__all__ = ['dot', 'cross', 'perp_dot', 'magnitude', 'magnitude2', 'normalize', 'lerp', 'angle_between',
           'to_homogeneous', 'from_homogeneous', 'unit_x', 'unit_y', 'unit_z']


def _as_vectors(vector: ARRAY_LIKE, lengths: tuple[int, ...] = (2, 3, 4)) -> FLOAT_ARRAY:
    vector = as_kind_array(vector)

    if vector.ndim == 0 or vector.ndim > 2 or vector.shape[0] not in lengths:
        raise ValueError(f'vectors must have a first axis of length {" or ".join(map(str, lengths))}')

    return vector


def dot(first: ARRAY_LIKE, second: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    Compute the dot product of vector(s), column wise.

    :param first: the first vector(s)
    :param second: the second vector(s)
    :return: the dot product(s)
    """

    first = _as_vectors(first)
    second = _as_vectors(second)

    if first.shape[0] != second.shape[0]:
        raise ValueError('both vectors must have the same dimension')

    if first.ndim != second.ndim:
        first = first.reshape(first.shape[0], -1)
        second = second.reshape(second.shape[0], -1)

    return (first * second).sum(axis=0)


def cross(first: ARRAY_LIKE, second: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Compute the cross product of 3-vector(s), column wise.

    :param first: the first vector(s)
    :param second: the second vector(s)
    :return: the cross product(s)
    """

    first = _as_vectors(first, (3,))
    second = _as_vectors(second, (3,))

    if first.ndim != second.ndim:
        first = first.reshape(3, -1)
        second = second.reshape(3, -1)

    return np.cross(first, second, axis=0)


def perp_dot(first: ARRAY_LIKE, second: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    Compute the perpendicular dot product (the z component of the cross product) of 2-vector(s).

    The result is positive when ``second`` is counter clockwise from ``first``.

    :param first: the first vector(s)
    :param second: the second vector(s)
    :return: the perpendicular dot product(s)
    """

    first = _as_vectors(first, (2,))
    second = _as_vectors(second, (2,))

    return first[0] * second[1] - first[1] * second[0]


def magnitude2(vector: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    Compute the squared magnitude of vector(s).
    """

    vector = _as_vectors(vector)

    return (vector * vector).sum(axis=0)


def magnitude(vector: ARRAY_LIKE) -> F_SCALAR_OR_ARRAY:
    """
    Compute the magnitude (2-norm) of vector(s).
    """

    return np.sqrt(magnitude2(vector))


def normalize(vector: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Scale vector(s) to unit length.

    Normalizing a zero vector is a contract violation and produces ``nan``.

    :param vector: the vector(s) to normalize
    :return: the unit vector(s)
    """

    vector = _as_vectors(vector)

    length = magnitude(vector)

    CONTRACTS.check_nonzero(length, 'the vector magnitude')

    with np.errstate(invalid='ignore', divide='ignore'):
        return vector / length


def lerp(start: ARRAY_LIKE, end: ARRAY_LIKE, amount: SCALAR_OR_ARRAY) -> FLOAT_ARRAY:
    """
    Linearly interpolate between vector(s) or point(s).

    :param start: the value at ``amount == 0``
    :param end: the value at ``amount == 1``
    :param amount: the fraction of the way from ``start`` to ``end``
    :return: the interpolated vector(s)
    """

    start = _as_vectors(start)
    end = _as_vectors(end)

    return start + (end - start) * amount


def angle_between(first: ARRAY_LIKE, second: ARRAY_LIKE) -> Radians:
    """
    Compute the unsigned angle between vector(s).

    ``atan2`` of the cross and dot products is used rather than ``acos`` of the normalized dot product since it stays
    accurate for nearly parallel vectors.  The result is in :math:`[0, \\pi]`.

    :param first: the first vector(s)
    :param second: the second vector(s)
    :return: the angle(s) between the vectors
    """

    first = _as_vectors(first, (2, 3))
    second = _as_vectors(second, (2, 3))

    if first.shape[0] == 2:
        sine = np.abs(perp_dot(first, second))
    else:
        sine = magnitude(cross(first, second))

    return Radians(np.arctan2(sine, dot(first, second)))


def to_homogeneous(vector: ARRAY_LIKE, is_point: bool = True) -> FLOAT_ARRAY:
    """
    Append the homogeneous coordinate to vector(s).

    :param vector: the 2 or 3 dimensional vector(s)
    :param is_point: append 1 (a point, affected by translation) if ``True`` or 0 (a direction) if ``False``
    :return: the homogeneous vector(s) with one more row
    """

    vector = _as_vectors(vector, (2, 3))

    extra = np.full((1,) + vector.shape[1:], 1 if is_point else 0, dtype=vector.dtype)

    return np.concatenate([vector, extra], axis=0)


def from_homogeneous(vector: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Drop the homogeneous coordinate from vector(s).

    Points (non-zero last coordinate) are divided by it.  Directions (zero last coordinate) are returned unscaled.

    :param vector: the 3 or 4 dimensional homogeneous vector(s)
    :return: the vector(s) with one less row
    """

    vector = _as_vectors(vector, (3, 4))

    w = vector[-1]

    return vector[:-1] / np.where(w == 0, 1, w)


def _unit(index: int, dimension: int, dtype) -> FLOAT_ARRAY:
    out = np.zeros(dimension, dtype=result_kind(dtype).dtype)
    out[index] = 1
    return out


def unit_x(dimension: int = 3, dtype=np.float64) -> FLOAT_ARRAY:
    return _unit(0, dimension, dtype)


def unit_y(dimension: int = 3, dtype=np.float64) -> FLOAT_ARRAY:
    return _unit(1, dimension, dtype)


def unit_z(dtype=np.float64) -> FLOAT_ARRAY:
    return _unit(2, 3, dtype)
