# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.

r"""
Core conversion routines for rotation representations

This module contains core routines for converting between different rotation representations.
All routines are implemented purely on numpy arrays (or array like objects).

The representations and their array layouts are

============================  =============================================================================
Representation                Layout
============================  =============================================================================
quaternion                    ``[s, x, y, z]`` (scalar first), or ``4 x n`` with one quaternion per column
rotation matrix               ``3 x 3``, or ``n x 3 x 3`` with one matrix per entry of the first axis
axis-angle                    a unit axis (``3`` or ``3 x n``) and an angle in radians (scalar or ``n``)
rotation vector               the axis scaled by the angle (``3`` or ``3 x n``)
euler angles                  three angles (scalars or length ``n`` arrays) plus an order string
============================  =============================================================================

Euler orders name the fixed (extrinsic) axes in the order the rotations are applied.  ``'xyz'`` with angles
``(a, b, c)`` rotates about ``x`` by ``a``, then about ``y`` by ``b``, then about ``z`` by ``c``, which is the matrix
:math:`\mathbf{R}_z(c)\mathbf{R}_y(b)\mathbf{R}_x(a)`.  The twelve valid orders are the six Tait-Bryan orders
(three distinct axes) and the six proper Euler orders (first and last axis the same).
"""

from typing import Sequence, get_args

import numpy as np

from gfxmath._typing import ARRAY_LIKE, F_SCALAR_OR_ARRAY, FLOAT_ARRAY, EULER_ORDERS, SCALAR_OR_ARRAY
from gfxmath.numeric import result_kind, kind_of
from gfxmath.utilities.contracts import CONTRACTS

from gfxmath.rotations.core._helpers import (_check_matrix_array_and_shape,
                                             _check_vector_array_and_shape, _angle_array)
from gfxmath.rotations.core.elementals import rot_axis, skew, AXIS_INDEX
from gfxmath.rotations.core.quaternion_math import (quaternion_normalize, quaternion_canonical,
                                                    quaternion_multiplication)


__all__ = ['VALID_EULER_ORDERS', 'parse_euler_order',
           'quaternion_to_rotmat', 'quaternion_to_axis_angle', 'quaternion_to_rotvec', 'quaternion_to_euler',
           'axis_angle_to_quaternion', 'axis_angle_to_rotmat',
           'rotvec_to_quaternion', 'rotvec_to_rotmat',
           'rotmat_to_quaternion', 'rotmat_to_axis_angle', 'rotmat_to_rotvec', 'rotmat_to_euler',
           'euler_to_rotmat', 'euler_to_quaternion']


VALID_EULER_ORDERS: tuple[str, ...] = get_args(EULER_ORDERS)
"""
The twelve recognized euler orders.
"""


_SMALL_ANGLE = 1e-15


def parse_euler_order(order: str) -> tuple[int, int, int]:
    """
    Turn an euler order string into the indices of its three axes.

    :param order: the order string, for instance ``'xyz'`` or ``'zxz'``
    :return: the axis indices in application order
    :raises ValueError: if the order is not one of :data:`VALID_EULER_ORDERS`
    """

    fixed_order = order.lower() if isinstance(order, str) else order

    if fixed_order not in VALID_EULER_ORDERS:
        raise ValueError(f'Invalid euler order {order!r}.  Must be one of {", ".join(VALID_EULER_ORDERS)}')

    return AXIS_INDEX[fixed_order[0]], AXIS_INDEX[fixed_order[1]], AXIS_INDEX[fixed_order[2]]


def _broadcast_axis_angle(axis: ARRAY_LIKE,
                          angle: SCALAR_OR_ARRAY) -> tuple[FLOAT_ARRAY, FLOAT_ARRAY, bool]:
    # returns a 3xn axis array, a length n angle array, and whether the caller gave a single pair
    axis = _check_vector_array_and_shape(axis)
    angle = _angle_array(angle)

    kind = result_kind(axis, angle)

    single = axis.ndim == 1 and angle.size == 1

    axis = axis.reshape(3, -1)

    n = max(axis.shape[1], angle.size)

    try:
        axis = np.broadcast_to(axis, (3, n)).astype(kind.dtype)
        angle = np.broadcast_to(angle, (n,)).astype(kind.dtype)
    except ValueError:
        raise ValueError('the number of axes and angles must match (or one of them must be single)') from None

    return axis, angle, single


def quaternion_to_rotmat(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    This function converts a rotation quaternion into its equivalent rotation matrix.

    Rotation quaternions are converted to rotation matrices by using:

    .. math::
        \mathbf{q}=\left[\begin{array}{c}q_s \\ \mathbf{q}_v\end{array}\right] \\
        \mathbf{T} = (q_s^2-\mathbf{q}_v^T\mathbf{q}_v)\mathbf{I}_{3\times 3}+2\mathbf{q}_v\mathbf{q}_v^T+2q_s
        \left[\mathbf{q}_v\times\right]

    where :math:`\mathbf{q}_v` is the vector portion of the quaternion, :math:`q_s` is the scalar portion of the
    quaternion, :math:`\left[\bullet\times\right]` is the skew symmetric cross product matrix (see :func:`.skew`), and
    :math:`\mathbf{I}_{3\times 3}` is a :math:`3\times 3` identity matrix.

    The formula only holds for unit quaternions, so the input is normalized first.

    This function is vectorized, meaning that you can specify multiple rotation quaternions to be converted to matrices
    by specifying each quaternion as a column.  When converting multiple quaternions, each rotation matrix is stacked
    along the first axis.  For example::

        >>> from gfxmath.rotations import quaternion_to_rotmat
        >>> quaternion_to_rotmat([[0, 0.5], [1, 0.5], [0, 0.5], [0, 0.5]])
        array([[[ 1.,  0.,  0.],
                [ 0., -1.,  0.],
                [ 0.,  0., -1.]],
               [[ 0.,  0.,  1.],
                [ 1.,  0.,  0.],
                [ 0.,  1.,  0.]]])

    :param quaternion: The rotation quaternion(s) to be converted to the rotation matrix(ces)
    :return: a numpy array containing the rotation matrix(ces) corresponding to the input quaternion(s)
    """

    # retrieve the numpy array of the input quaternion(s)
    quaternion = quaternion_normalize(quaternion)

    # extract the scalar and vector portion of the quaternion(s)
    qs = quaternion[0].reshape(-1, 1, 1)
    qv = quaternion[1:].reshape(3, -1)

    # form the rotation matrix
    rotation = ((qs ** 2 - (qv * qv).sum(axis=0).reshape(-1, 1, 1)) * np.eye(3, dtype=qv.dtype) +
                2 * np.einsum('in,jn->nij', qv, qv) +
                2 * qs * skew(qv).reshape(-1, 3, 3))

    return rotation[0] if quaternion.ndim == 1 else rotation


def quaternion_to_axis_angle(quaternion: ARRAY_LIKE) -> tuple[FLOAT_ARRAY, F_SCALAR_OR_ARRAY]:
    r"""
    This function converts a rotation quaternion into a unit rotation axis and a rotation angle.

    .. math::
        \theta = 2\text{atan2}(\left\|\mathbf{q}_v\right\|, q_s) \\
        \hat{\mathbf{x}} = \frac{\mathbf{q}_v}{\left\|\mathbf{q}_v\right\|}

    The quaternion is normalized first.  The angle is in :math:`[0, 2\pi]` and the axis is always unit length, so a
    quaternion built from a negative angle comes back as the flipped axis with a positive angle (the same rotation).
    The identity rotation has no well defined axis; the ``x`` axis with an angle of 0 is returned for it.

    This function is vectorized, meaning that you can specify multiple quaternions as the columns of a 4xn array in
    which case the axes are returned as a 3xn array and the angles as a length n array.

    :param quaternion: the rotation quaternion(s) to convert
    :return: the unit axis(es) and the angle(s) in radians
    """

    quaternion = quaternion_normalize(quaternion)

    qs = quaternion[0]
    qv = quaternion[1:]

    vector_norm = np.linalg.norm(qv, axis=0)

    angle = 2 * np.arctan2(vector_norm, qs)

    small_angle_check = vector_norm < _SMALL_ANGLE

    with np.errstate(invalid='ignore', divide='ignore'):
        axis = qv / np.where(small_angle_check, 1, vector_norm)

    # the identity rotation gets the x axis
    x_axis = np.array([1, 0, 0], dtype=axis.dtype)
    if quaternion.ndim > 1:
        axis[:, small_angle_check] = x_axis.reshape(3, 1)
        angle = np.where(small_angle_check, 0, angle).astype(axis.dtype)

    elif small_angle_check:
        axis = x_axis
        angle = axis.dtype.type(0)

    return axis, angle


def quaternion_to_rotvec(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    This function converts a rotation quaternion into a rotation vector.

    The rotation vector is the unit rotation axis scaled by the rotation angle.  The quaternion is made canonical (see
    :func:`.quaternion_canonical`) first so that the angle is in :math:`[0, \pi]`.

    :param quaternion: the rotation quaternion(s) to be converted to the rotation vector(s)
    :return: The rotation vector(s) corresponding to the input rotation quaternion(s)
    """

    axis, angle = quaternion_to_axis_angle(quaternion_canonical(quaternion))

    return axis * angle


def quaternion_to_euler(quaternion: ARRAY_LIKE,
                        order: EULER_ORDERS = 'xyz') -> tuple[F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY]:
    """
    This function converts a rotation quaternion to 3 euler angles to be applied to the axes specified in order.

    This function works by first converting the quaternion to a rotation matrix using :func:`quaternion_to_rotmat` and
    then using the function :func:`rotmat_to_euler` to find the euler angles.  See the documentation for those two
    functions for more information.

    This function is vectorized so multiple quaternions can be converted simultaneously by specifying them as columns.

    :param quaternion: The quaternion(s) to be converted to euler angles
    :param order: The order of the rotations
    :return: The euler angles corresponding to the rotation quaternion(s) according to order
    """

    return rotmat_to_euler(quaternion_to_rotmat(quaternion), order=order)


def axis_angle_to_quaternion(axis: ARRAY_LIKE, angle: SCALAR_OR_ARRAY) -> FLOAT_ARRAY:
    r"""
    This function converts a unit rotation axis and an angle into a rotation quaternion.

    .. math::
        \mathbf{q} = \left[\begin{array}{c} \text{cos}(\frac{\theta}{2}) \\
        \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\end{array}\right]

    The axis must be unit length.  This is a contract of the caller and is not corrected here; a non-unit axis gives
    a non-unit (and therefore not a rotation) quaternion.

    Either the axis or the angle (or both, pairwise) may be given as multiple values, a 3xn array of axes and/or a
    length n sequence of angles, in which case a 4xn array is returned.

    :param axis: the unit rotation axis(es)
    :param angle: the rotation angle(s) in radians or as :class:`.Angle` values
    :return: the rotation quaternion(s)
    """

    axis, angle, single = _broadcast_axis_angle(axis, angle)

    CONTRACTS.check_unit(axis, 'the rotation axis')

    half = angle / 2

    quaternion = np.vstack([np.cos(half), axis * np.sin(half)])

    return quaternion[:, 0] if single else quaternion


def axis_angle_to_rotmat(axis: ARRAY_LIKE, angle: SCALAR_OR_ARRAY) -> FLOAT_ARRAY:
    r"""
    This function converts a unit rotation axis and an angle into a rotation matrix using the Rodrigues formula.

    .. math::
        \mathbf{T} = \text{cos}(\theta)\mathbf{I}_{3\times 3}+\text{sin}(\theta)\left[\hat{\mathbf{x}}\times\right]+
        (1-\text{cos}(\theta))\hat{\mathbf{x}}\hat{\mathbf{x}}^T

    where :math:`\theta` is the rotation angle, :math:`\hat{\mathbf{x}}` is the rotation axis,
    :math:`\left[\bullet\times\right]` is the skew symmetric cross product matrix (see :func:`.skew`), and
    :math:`\mathbf{I}_{3\times 3}` is a :math:`3\times 3` identity matrix.

    As with :func:`axis_angle_to_quaternion` the axis must be unit length.

    :param axis: the unit rotation axis(es)
    :param angle: the rotation angle(s) in radians or as :class:`.Angle` values
    :return: the rotation matrix(ces)
    """

    axis, angle, single = _broadcast_axis_angle(axis, angle)

    CONTRACTS.check_unit(axis, 'the rotation axis')

    # compute the sine and cosine values of the angle(s)
    ctheta = np.cos(angle).reshape(-1, 1, 1)
    stheta = np.sin(angle).reshape(-1, 1, 1)

    rotation = (ctheta * np.eye(3, dtype=axis.dtype) +
                stheta * skew(axis).reshape(-1, 3, 3) +
                (1 - ctheta) * np.einsum('in,jn->nij', axis, axis))

    return rotation[0] if single else rotation


def _rotvec_split(vector: ARRAY_LIKE) -> tuple[FLOAT_ARRAY, FLOAT_ARRAY, bool]:
    vector = _check_vector_array_and_shape(vector)

    single = vector.ndim == 1

    vector = vector.reshape(3, -1)

    # get the rotation angle(s)
    theta = np.linalg.norm(vector, axis=0)

    # check for empty rotation vectors and give them an arbitrary axis
    small_angle_check = theta < _SMALL_ANGLE

    axis = vector / np.where(small_angle_check, 1, theta)
    axis[:, small_angle_check] = np.array([[1], [0], [0]], dtype=axis.dtype)

    return axis, np.where(small_angle_check, 0, theta).astype(axis.dtype), single


def rotvec_to_quaternion(rot_vec: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    This function converts a rotation vector into a rotation quaternion.

    .. math::
        \theta = \left\|\mathbf{v}\right\| \\
        \hat{\mathbf{x}} = \frac{\mathbf{v}}{\theta} \\
        \mathbf{q} = \left[\begin{array}{c} \text{cos}(\frac{\theta}{2}) \\
        \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\end{array}\right]

    A zero rotation vector gives the identity quaternion ``[1, 0, 0, 0]``.

    :param rot_vec: The rotation vector(s) to convert to a rotation quaternion
    :return: the rotation quaternion(s) corresponding to the input rotation vector(s)
    """

    axis, theta, single = _rotvec_split(rot_vec)

    quaternion = axis_angle_to_quaternion(axis, theta)

    return quaternion[:, 0] if single else quaternion


def rotvec_to_rotmat(rot_vec: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    This function converts a rotation vector into a rotation matrix.

    See :func:`axis_angle_to_rotmat`.  A zero rotation vector gives the identity matrix.

    :param rot_vec: The rotation vector(s) to convert
    :return: The rotation matrix(ces) corresponding to the rotation vector(s)
    """

    axis, theta, single = _rotvec_split(rot_vec)

    rotation = axis_angle_to_rotmat(axis, theta)

    return rotation[0] if single else rotation


def rotmat_to_quaternion(rotation_matrix: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    This function converts a rotation matrix into a rotation quaternion.

    The conversion uses the method of Shepperd: of the four quantities

    .. math::
        4q_s^2 = 1+\text{Tr}(\mathbf{T}), \qquad 4q_i^2 = 1-\text{Tr}(\mathbf{T})+2t_{ii}

    the largest is used to recover its component directly and the remaining components are recovered from sums and
    differences of the off diagonal elements of :math:`\mathbf{T}` divided by it.  This keeps the division away from
    zero for every rotation, including half turns where the trace is -1.  The result is normalized and made canonical
    (a non-negative scalar part).

    This function is also vectorized, meaning that you can specify multiple rotation matrices to be converted to
    quaternions by specifying each matrix along the first axis.  Regardless of whether you are converting 1 or many
    matrices the last two axes must have a length of 3.

    :param rotation_matrix: The rotation matrix to convert to a rotation quaternion
    :return: the rotation quaternion(s) corresponding to the input rotation matrix(ces)
    """

    rotation_matrix = _check_matrix_array_and_shape(rotation_matrix)

    CONTRACTS.check_orthonormal(rotation_matrix)

    single = rotation_matrix.ndim == 2

    matrix = rotation_matrix.reshape(-1, 3, 3)

    diagonal = np.diagonal(matrix, axis1=1, axis2=2)
    trace = diagonal.sum(axis=-1)

    # pick the largest of the four pivots for each matrix
    decision = np.hstack([diagonal, trace.reshape(-1, 1)])
    choice = decision.argmax(axis=-1)

    quaternion = np.empty((4, matrix.shape[0]), dtype=matrix.dtype)

    # the scalar part is the largest pivot
    scalar = choice == 3
    if scalar.any():
        sub = matrix[scalar]
        quaternion[0, scalar] = 1 + trace[scalar]
        quaternion[1, scalar] = sub[:, 2, 1] - sub[:, 1, 2]
        quaternion[2, scalar] = sub[:, 0, 2] - sub[:, 2, 0]
        quaternion[3, scalar] = sub[:, 1, 0] - sub[:, 0, 1]

    # one of the vector parts is the largest pivot
    vector = ~scalar
    if vector.any():
        sub = matrix[vector]
        rows = np.arange(sub.shape[0])
        i = choice[vector]
        j = (i + 1) % 3
        k = (i + 2) % 3

        pivot = np.empty((4, sub.shape[0]), dtype=matrix.dtype)
        pivot[1 + i, rows] = 1 - trace[vector] + 2 * sub[rows, i, i]
        pivot[1 + j, rows] = sub[rows, j, i] + sub[rows, i, j]
        pivot[1 + k, rows] = sub[rows, k, i] + sub[rows, i, k]
        pivot[0, rows] = sub[rows, k, j] - sub[rows, j, k]

        quaternion[:, vector] = pivot

    quaternion = quaternion_canonical(quaternion_normalize(quaternion))

    return quaternion[:, 0] if single else quaternion


def rotmat_to_axis_angle(matrix: ARRAY_LIKE) -> tuple[FLOAT_ARRAY, F_SCALAR_OR_ARRAY]:
    """
    Converts a rotation matrix to a unit axis and an angle in :math:`[0, \\pi]`.

    This calls :func:`rotmat_to_quaternion` followed by :func:`quaternion_to_axis_angle`.

    :param matrix: The matrix(ces) to convert
    :returns: The axis(es) and angle(s)
    """

    return quaternion_to_axis_angle(rotmat_to_quaternion(matrix))


def rotmat_to_rotvec(matrix: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Converts a rotation matrix to a rotation vector.

    This calls :func:`rotmat_to_quaternion` followed by :func:`quaternion_to_rotvec`.

    :param matrix: The matrix(ces) to convert
    :returns: The rotation vector(s)
    """

    return quaternion_to_rotvec(rotmat_to_quaternion(matrix))


def rotmat_to_euler(matrix: ARRAY_LIKE,
                    order: EULER_ORDERS = 'xyz') -> tuple[F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY]:
    r"""
    This function converts a rotation matrix to 3 euler angles to be applied to the axes specified in order.

    Order specifies both the axes of the euler angles, and the order they should be applied.  The order is applied left
    to right about the fixed axes.  That is, for an order of xyz the rotation will be applied about x, then about y,
    then about z, and the returned angles ``(a, b, c)`` satisfy
    :math:`\mathbf{T}=\mathbf{R}_z(c)\mathbf{R}_y(b)\mathbf{R}_x(a)`.  The angles are returned in radians.

    Writing the order as axis indices :math:`(i, j, k)` and :math:`\sigma=\pm 1` for an even or odd permutation
    (for proper orders :math:`(i, j, i)` the permutation is that of :math:`i, j` and the unused axis :math:`k`), the
    angles are extracted as

    ===========  ==============================================================  ========================================
    Angle        Tait-Bryan                                                      Proper
    ===========  ==============================================================  ========================================
    :math:`b`    :math:`\text{atan2}(-\sigma t_{ki}, \sqrt{t_{ii}^2+t_{ji}^2})`  :math:`\text{cos}^{-1}(t_{ii})`
    :math:`a`    :math:`\text{atan2}(\sigma t_{kj}, t_{kk})`                     :math:`\text{atan2}(t_{ij}, \sigma t_{ik})`
    :math:`c`    :math:`\text{atan2}(\sigma t_{ji}, t_{ii})`                     :math:`\text{atan2}(t_{ji}, -\sigma t_{ki})`
    ===========  ==============================================================  ========================================

    so that :math:`a, c \in (-\pi, \pi]` and :math:`b\in[-\pi/2, \pi/2]` (Tait-Bryan) or :math:`b\in[0, \pi]` (proper).

    When :math:`b` puts the first and third axes on top of each other (gimbal lock) only the sum or difference of
    :math:`a` and :math:`c` is observable.  In this case :math:`c` is set to 0 and
    :math:`a=\text{atan2}(-\sigma t_{jk}, t_{jj})` absorbs the whole residual rotation, so that the returned angles
    still reproduce the matrix exactly.

    This function is vectorized, therefore you can input matrix as a nx3x3 stack of rotation matrices down the first
    axis and the results will return the angles for each matrix.  There can only be a single input for order which will
    apply to all cases in this case.

    :param matrix: The matrix(ces) to convert to euler angles
    :param order: The order of the rotations
    :return: The euler angles corresponding to the rotation matrix(ces)
    :raises ValueError: if the order is not recognized
    """

    i, j, k = parse_euler_order(order)

    matrix = _check_matrix_array_and_shape(matrix)

    proper = i == k
    if proper:
        # the axis not named in the order
        k = 3 - i - j

    # +1 for an even (cyclic) permutation, -1 for an odd one
    sign = 1 if (j - i) % 3 == 1 else -1

    tolerance = 10 * np.sqrt(np.finfo(matrix.dtype).eps)

    if proper:
        second = np.arccos(np.clip(matrix[..., i, i], -1, 1))
        first = np.arctan2(matrix[..., i, j], sign * matrix[..., i, k])
        third = np.arctan2(matrix[..., j, i], -sign * matrix[..., k, i])
        locked = np.hypot(matrix[..., i, j], matrix[..., i, k]) < tolerance

    else:
        cos_second = np.hypot(matrix[..., i, i], matrix[..., j, i])
        second = np.arctan2(-sign * matrix[..., k, i], cos_second)
        first = np.arctan2(sign * matrix[..., k, j], matrix[..., k, k])
        third = np.arctan2(sign * matrix[..., j, i], matrix[..., i, i])
        locked = cos_second < tolerance

    # in gimbal lock the third angle is fixed at 0 and the first absorbs the remaining rotation
    locked_first = np.arctan2(-sign * matrix[..., j, k], matrix[..., j, j])

    first = np.where(locked, locked_first, first)
    third = np.where(locked, 0, third)

    return first[()], second[()], third.astype(matrix.dtype)[()]


def euler_to_rotmat(angles: Sequence[SCALAR_OR_ARRAY] | FLOAT_ARRAY, order: EULER_ORDERS = 'xyz') -> FLOAT_ARRAY:
    """
    This function converts a sequence of 3 euler angles into a rotation matrix.

    The order of the rotations is specified using the `order` keyword argument which recognizes x, y, and z
    for axes of rotation.  For instance, say you have a rotation sequence of (1) rotate about x by xr, (2) rotate about
    y by yr, and (3) rotate about z by zr then you would specify order as 'xyz', and the angles as [xr, yr, zr] (order
    should correspond to the indices of angles).

    The rotation matrix is formed using :func:`.rot_axis` for each angle, each new rotation multiplied on the left.
    Each angle may be an array of n values, in which case an nx3x3 stack is returned.

    :param angles: The euler angles
    :param order: The order to apply the rotations in
    :return: The rotation matrix formed by the euler angles
    :raises ValueError: When the ``order`` string is not a recognized euler order
    """

    parse_euler_order(order)

    if len(angles) != 3:
        raise ValueError('exactly three euler angles are required')

    rotation = None

    # loop through the angles and their axes and update the total rotation matrix
    for angle, axis in zip(angles, order.lower()):

        update = rot_axis(axis, angle)

        rotation = update if rotation is None else update @ rotation

    return rotation


def euler_to_quaternion(angles: Sequence[SCALAR_OR_ARRAY] | FLOAT_ARRAY, order: EULER_ORDERS = 'xyz') -> FLOAT_ARRAY:
    r"""
    This function converts Euler angles into a rotation quaternion.

    The quaternion is the Hamilton product of the three elemental quaternions,
    :math:`\mathbf{q}_c\otimes\mathbf{q}_b\otimes\mathbf{q}_a`, so that (reading right to left) the rotation about the
    first axis in ``order`` is applied first.

    :param angles: The angles to convert
    :param order: the order of the angles
    :returns: The rotation quaternion(s)
    :raises ValueError: When the ``order`` string is not a recognized euler order
    """

    parse_euler_order(order)

    if len(angles) != 3:
        raise ValueError('exactly three euler angles are required')

    quaternion = None

    for angle, axis in zip(angles, order.lower()):

        unit = np.zeros(3, dtype=kind_of(angle).dtype)
        unit[AXIS_INDEX[axis]] = 1

        update = axis_angle_to_quaternion(unit, angle)

        quaternion = update if quaternion is None else quaternion_multiplication(update, quaternion)

    return quaternion
