import numpy as np

from gfxmath._typing import ARRAY_LIKE, FLOAT_ARRAY, AXES
from gfxmath.numeric import result_kind
from gfxmath.utilities.contracts import CONTRACTS
from gfxmath.rotations.core._helpers import _check_vector_array_and_shape
from gfxmath.rotations.core.quaternion_math import quaternion_normalize


__all__ = ['two_vector_frame', 'look_at', 'between_vectors']


_AXES: tuple[str, str, str] = ('x', 'y', 'z')


def two_vector_frame(primary_vector: ARRAY_LIKE, secondary_vector: ARRAY_LIKE,
                     primary_axis: AXES, secondary_axis: AXES) -> FLOAT_ARRAY:
    """
    Compute a 2-vector frame given primary and secondary vectors and their corresponding axes.

    The primary axis of the frame points exactly along ``primary_vector``.  The secondary axis is the part of
    ``secondary_vector`` perpendicular to it, and the third axis completes a right handed frame.

    The rows of the returned matrix are the frame axes, so the matrix rotates ``primary_vector`` onto the primary axis
    and ``secondary_vector`` into the half plane of the primary and (positive) secondary axes.

    :param primary_vector: The vector defining the primary axis
    :param secondary_vector: The vector providing the constraint for the secondary axis.  It must not be parallel to
                             the primary vector
    :param primary_axis: The axis corresponding to the primary vector (must be x, y, or z)
    :param secondary_axis: The axis corresponding to the secondary vector (must be x, y, or z)
    :return: the 3x3 rotation matrix from the frame the vectors are expressed in to the 2-vector frame
    :raises ValueError: if the axes are not distinct axis letters
    """

    primary_axis_str = primary_axis.lower() if isinstance(primary_axis, str) else primary_axis
    secondary_axis_str = secondary_axis.lower() if isinstance(secondary_axis, str) else secondary_axis

    if primary_axis_str not in _AXES or secondary_axis_str not in _AXES:
        raise ValueError('The primary and secondary axes must each be one of x, y, or z')

    if primary_axis_str == secondary_axis_str:
        raise ValueError('The primary and secondary axes must be different')

    primary_vector = _check_vector_array_and_shape(primary_vector)
    secondary_vector = _check_vector_array_and_shape(secondary_vector)
    dtype = result_kind(primary_vector, secondary_vector).dtype

    # Normalize the vectors
    primary_norm = np.linalg.norm(primary_vector)
    CONTRACTS.check_nonzero(primary_norm, 'the primary vector')
    primary = (primary_vector / primary_norm).astype(dtype)
    secondary_v = secondary_vector.astype(dtype)

    # Determine the third axis based on the right-hand rule
    third_axis = [ax for ax in _AXES if ax not in (primary_axis_str, secondary_axis_str)][0]

    cyclic = (_AXES.index(primary_axis_str) + 1) % 3 == _AXES.index(secondary_axis_str)

    # Compute the third vector using cross product
    if cyclic:
        third = np.cross(primary, secondary_v)
    else:
        third = np.cross(secondary_v, primary)

    third_norm = np.linalg.norm(third)
    CONTRACTS.check_nonzero(third_norm, 'the cross product of the primary and secondary vectors')

    third = third / third_norm

    # Compute the actual secondary vector so the frame stays right handed
    if cyclic:
        secondary = np.cross(third, primary)
    else:
        secondary = np.cross(primary, third)

    frame = np.array([primary, secondary, third], dtype=dtype)

    # Rearrange the rows to match the specified axes
    row_order = [_AXES.index(primary_axis_str), _AXES.index(secondary_axis_str), _AXES.index(third_axis)]

    return frame[np.argsort(row_order)]


def look_at(direction: ARRAY_LIKE, up: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Compute the rotation matrix that points the ``+z`` axis along ``direction``.

    The matrix rotates ``direction`` onto ``+z`` and ``up`` into the ``y-z`` plane with a positive ``y`` component.
    ``up`` must not be parallel to ``direction``.

    :param direction: the viewing direction
    :param up: the approximate up direction
    :return: the 3x3 rotation matrix
    """

    return two_vector_frame(direction, up, 'z', 'y')


def between_vectors(first: ARRAY_LIKE, second: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    Compute the quaternion of the shortest arc rotation taking ``first`` onto ``second``.

    The rotation axis is perpendicular to both vectors and the angle is the angle between them.  The quaternion is
    formed without any trigonometry as

    .. math::
        \mathbf{q} = \frac{\left[\begin{array}{c}\left\|\mathbf{a}\right\|\left\|\mathbf{b}\right\| +
        \mathbf{a}^T\mathbf{b}\\ \mathbf{a}\times\mathbf{b}\end{array}\right]}{\left\|\bullet\right\|}

    For antiparallel vectors every perpendicular axis gives a shortest arc, so one is picked (perpendicular to
    ``first``) and the rotation is half a turn about it.

    :param first: the vector to rotate from
    :param second: the vector to rotate onto
    :return: the scalar first unit quaternion as a length 4 array
    """

    first = _check_vector_array_and_shape(first)
    second = _check_vector_array_and_shape(second)
    dtype = result_kind(first, second).dtype

    norms = np.linalg.norm(first) * np.linalg.norm(second)
    CONTRACTS.check_nonzero(norms, 'the vectors to rotate between')

    scalar = norms + first @ second

    if scalar <= 1e-6 * norms:
        # antiparallel, rotate half a turn about any axis perpendicular to first
        helper = np.array([1, 0, 0]) if abs(first[0]) < 0.9 * np.linalg.norm(first) else np.array([0, 1, 0])
        axis = np.cross(first, helper)
        return np.concatenate([[0], axis / np.linalg.norm(axis)]).astype(dtype)

    return quaternion_normalize(np.concatenate([[scalar], np.cross(first, second)]).astype(dtype))
