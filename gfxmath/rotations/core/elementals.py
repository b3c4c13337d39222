import numpy as np

from gfxmath._typing import SCALAR_OR_ARRAY, ARRAY_LIKE, FLOAT_ARRAY, AXES
from gfxmath.rotations.core._helpers import _check_vector_array_and_shape, _angle_array


__all__ = ["rot_x", "rot_y", "rot_z", "rot_axis", "rot_2d", "skew", "AXIS_INDEX"]


AXIS_INDEX: dict[str, int] = {'x': 0, 'y': 1, 'z': 2}
"""
Map from an axis letter to its index in a 3-vector.
"""


def _elemental(theta: SCALAR_OR_ARRAY, axis: int) -> FLOAT_ARRAY:
    # ensure we have an array of theta(s)
    theta = _angle_array(theta)

    ctheta = np.cos(theta)
    stheta = np.sin(theta)

    # start from a stack of identities and fill in the plane of rotation
    out = np.zeros((theta.size, 3, 3), dtype=theta.dtype)
    out[:, axis, axis] = 1

    first, second = (axis + 1) % 3, (axis + 2) % 3

    out[:, first, first] = ctheta
    out[:, first, second] = -stheta
    out[:, second, first] = stheta
    out[:, second, second] = ctheta

    return out.squeeze(axis=0) if theta.size == 1 else out


def rot_x(theta: SCALAR_OR_ARRAY) -> FLOAT_ARRAY:
    r"""
    This function performs a right handed rotation about the x axis by angle theta.

    Mathematically this rotation is defined as:

    .. math::
        \mathbf{R}_x(\theta)=\left[\begin{array}{ccc} 1 & 0 & 0 \\
        0 & \text{cos}(\theta) & -\text{sin}(\theta) \\
        0 & \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    Theta should be in units of radians (or an :class:`.Angle`) and can be a scalar or a vector.  If theta is a vector
    then each theta value will have a corresponding rotation matrix down the first axis of the output.  For example::

        >>> from gfxmath.rotations import rot_x
        >>> rot_x([2, 0.5])
        array([[[ 1.        ,  0.        ,  0.        ],
                [ 0.        , -0.41614684, -0.90929743],
                [ 0.        ,  0.90929743, -0.41614684]],
               [[ 1.        ,  0.        ,  0.        ],
                [ 0.        ,  0.87758256, -0.47942554],
                [ 0.        ,  0.47942554,  0.87758256]]])

    :param theta: The angles to form the rotation matrix(ces) for
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    """

    return _elemental(theta, 0)


def rot_y(theta: SCALAR_OR_ARRAY) -> FLOAT_ARRAY:
    r"""
    This function performs a right handed rotation about the y axis by angle theta.

    This rotation is defined as:

    .. math::
        \mathbf{R}_y(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & 0 & \text{sin}(\theta) \\
        0 & 1 & 0 \\
        -\text{sin}(\theta) & 0 & \text{cos}(\theta) \end{array}\right]

    :param theta: The angles to form the rotation matrix(ces) for
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    """

    return _elemental(theta, 1)


def rot_z(theta: SCALAR_OR_ARRAY) -> FLOAT_ARRAY:
    r"""
    This function performs a right handed rotation about the z axis by angle theta.

    This rotation is defined as:

    .. math::
        \mathbf{R}_z(\theta)=\left[\begin{array}{ccc} \text{cos}(\theta) & -\text{sin}(\theta) & 0 \\
        \text{sin}(\theta) & \text{cos}(\theta) & 0 \\
        0 & 0 & 1 \end{array}\right]

    :param theta: The angles to form the rotation matrix(ces) for
    :return: The rotation matrix(ces) corresponding to the rotation angle(s)
    """

    return _elemental(theta, 2)


def rot_axis(axis: AXES, theta: SCALAR_OR_ARRAY) -> FLOAT_ARRAY:
    """
    Form the elemental rotation matrix(ces) about the axis named by ``axis``.

    :param axis: ``'x'``, ``'y'`` or ``'z'``
    :param theta: The angles to form the rotation matrix(ces) for
    :return: The rotation matrix(ces)
    :raises ValueError: if ``axis`` is not one of the three axis letters
    """

    try:
        index = AXIS_INDEX[axis.lower()]
    except (KeyError, AttributeError):
        raise ValueError(f'axis must be one of x, y, z, not {axis!r}') from None

    return _elemental(theta, index)


def rot_2d(theta: SCALAR_OR_ARRAY) -> FLOAT_ARRAY:
    r"""
    Form the counter clockwise planar rotation matrix(ces) for angle(s) theta.

    .. math::
        \mathbf{R}(\theta)=\left[\begin{array}{cc} \text{cos}(\theta) & -\text{sin}(\theta) \\
        \text{sin}(\theta) & \text{cos}(\theta) \end{array}\right]

    This is the upper left block of :func:`rot_z`.

    :param theta: The angles to form the rotation matrix(ces) for
    :return: The ``2x2`` (or ``nx2x2``) rotation matrix(ces)
    """

    return rot_z(theta)[..., :2, :2]


def skew(vector: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    This function returns a numpy array with the skew symmetric cross product matrix for vector.

    The skew symmetric cross product matrix is defined such that:

    .. math::
        \mathbf{a}\times\mathbf{b}=\left[\mathbf{a}\times\right]\mathbf{b} \\
        \left[\mathbf{a}\times\right] = \left[\begin{array}{ccc} 0 & -a_3 & a_2 \\
        a_3 & 0 & -a_1 \\
        -a_2 & a_1 & 0 \end{array}\right]

    This function is vectorized, therefore you can input multiple vectors as a 3xn array where each column is an
    independent vector.  The resulting skew matrix output will be nx3x3 where the first axis stores each matrix

    :param vector: The vector to compute a skew symmetric matrix for
    :return: The skew symmetric cross product matrix(ces) corresponding to the vector(s)
    """

    vector = _check_vector_array_and_shape(vector)

    if vector.ndim > 1:
        zeros = np.zeros(vector.shape[-1], dtype=vector.dtype)

    else:
        zeros = vector.dtype.type(0)

    return np.array([zeros, -vector[2], vector[1],
                     vector[2], zeros, -vector[0],
                     -vector[1], vector[0], zeros], dtype=vector.dtype).T.reshape(-1, 3, 3).squeeze()
