import numpy as np

from gfxmath._typing import ARRAY_LIKE, FLOAT_ARRAY, DatetimeLike
from gfxmath.utilities.contracts import CONTRACTS
from gfxmath.rotations.core._helpers import _check_quaternion_array_and_shape, _check_vector_array_and_shape

__all__ = ["quaternion_normalize", "quaternion_canonical", "quaternion_conjugate", "quaternion_inverse",
           "quaternion_multiplication", "quaternion_dot", "quaternion_magnitude", "quaternion_rotate",
           "nlerp", "slerp", "SLERP_DOT_THRESHOLD"]


SLERP_DOT_THRESHOLD: float = 0.9995
"""
When the (sign corrected) dot product of two quaternions exceeds this value :func:`slerp` falls back to :func:`nlerp`.

Above this threshold the angle between the quaternions is small enough that ``sin`` of it is a poor denominator while
the linear and spherical paths are indistinguishable.
"""


def _fraction(time: float | DatetimeLike, time0: float | DatetimeLike, time1: float | DatetimeLike) -> float:
    # compute the fractional percent we are interpolating at
    try:
        return float((time - time0) / (time1 - time0))  # type: ignore
    except TypeError:
        raise TypeError('time, time0, and time1 must support subtraction resulting in a type that supports true '
                        'division. Typically this means they should all be floats or all be DatetimeLike '
                        'objects') from None


def quaternion_magnitude(quaternion: ARRAY_LIKE) -> float | FLOAT_ARRAY:
    """
    Compute the magnitude (2-norm) of the quaternion(s).

    :param quaternion: the quaternion(s) as a length 4 array or 4xn array
    :return: the magnitude(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)

    return np.linalg.norm(quaternion, axis=0)


def quaternion_dot(quaternion_1: ARRAY_LIKE, quaternion_2: ARRAY_LIKE) -> float | FLOAT_ARRAY:
    """
    Compute the 4D dot product of quaternion(s).

    Multiple quaternions can be given as columns of 4xn arrays, in which case the dot product is computed column wise.

    :param quaternion_1: the first quaternion(s)
    :param quaternion_2: the second quaternion(s)
    :return: the dot product(s)
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2)

    return (quaternion_1 * quaternion_2).sum(axis=0)


def quaternion_normalize(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Normalizes the quaternion(s) so that the length is 1.

    The sign of the quaternion is left untouched (see :func:`quaternion_canonical`).  A quaternion with a zero
    magnitude cannot be normalized; doing so is a contract violation and produces ``nan``.

    :param quaternion: the quaternion(s) to normalize
    :returns: The normalized quaternions
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    magnitude = np.linalg.norm(work_quaternion, axis=0, keepdims=True)

    CONTRACTS.check_nonzero(magnitude, 'the quaternion magnitude')

    with np.errstate(invalid='ignore', divide='ignore'):
        work_quaternion /= magnitude

    return work_quaternion


def quaternion_canonical(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Flip the sign of the quaternion(s) so that the scalar term is non-negative.

    ``q`` and ``-q`` represent the same rotation.  This picks the one with a non-negative scalar part.

    :param quaternion: the quaternion(s) to make canonical
    :returns: the canonical quaternion(s)
    """

    work_quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    signs = np.where(work_quaternion[0] < 0, -1, 1).astype(work_quaternion.dtype)

    work_quaternion *= signs

    return work_quaternion


def quaternion_conjugate(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    """
    Negate the vector portion of the quaternion(s).

    For unit quaternions this is the inverse.

    :param quaternion: the quaternion(s) to conjugate
    :return: the conjugate quaternion(s)
    """

    # ensure the value is an array and break mutability
    quaternion = _check_quaternion_array_and_shape(quaternion, return_copy=True)

    # negate the vector portion
    quaternion[1:] *= -1

    return quaternion


def quaternion_inverse(quaternion: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    This function provides the inverse of a quaternion.

    The inverse is defined such that :math:`\mathbf{q}\otimes\mathbf{q}^{-1}=\mathbf{q}_I` where
    :math:`\mathbf{q}_I=\left[\begin{array}{cccc}1&0&0&0\end{array}\right]^T` is the identity quaternion and
    :math:`\otimes` indicates quaternion multiplication.  In general this is the conjugate divided by the squared
    magnitude:

    .. math::
        \mathbf{q}^{-1}=\frac{\mathbf{q}^*}{\left\|\mathbf{q}\right\|^2}

    which for a unit rotation quaternion is simply the conjugate.  Inverting a zero quaternion is a contract violation.

    This function is also vectorized, meaning that you can specify multiple quaternions to be inverted by specifying
    each quaternion as a column.

    :param quaternion: The quaternion(s) to be inverted
    :return: a numpy array representing the inverse quaternion corresponding to the input quaternion
    """

    conjugate = quaternion_conjugate(quaternion)

    magnitude2 = (conjugate * conjugate).sum(axis=0)

    CONTRACTS.check_nonzero(magnitude2, 'the quaternion magnitude')

    with np.errstate(invalid='ignore', divide='ignore'):
        return conjugate / magnitude2


def quaternion_multiplication(quaternion_1_in: ARRAY_LIKE,
                              quaternion_2_in: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    This function performs the Hamilton quaternion product.

    The product composes rotations right to left, so that ``quaternion_multiplication(q1, q2)`` is the rotation that
    applies ``q2`` first and ``q1`` second.

    Mathematically this is given by:

    .. math::
        \mathbf{q}_1\otimes\mathbf{q}_2=\left[\begin{array}{c}q_{s1}q_{s2}-\mathbf{q}_{v1}^T\mathbf{q}_{v2}\\
        q_{s1}\mathbf{q}_{v2} + q_{s2}\mathbf{q}_{v1} + \mathbf{q}_{v1}\times\mathbf{q}_{v2}\end{array}\right]

    This function is vectorized, therefore you can input multiple quaternions as a 4xn array where each column is an
    independent quaternion.  A single quaternion is broadcast against a 4xn array.

    :param quaternion_1_in: The first quaternion to multiply
    :param quaternion_2_in: The second quaternion to multiply
    :return: The Hamilton product of quaternion_1 and quaternion_2
    """

    quaternion_1 = _check_quaternion_array_and_shape(quaternion_1_in)
    quaternion_2 = _check_quaternion_array_and_shape(quaternion_2_in)

    if quaternion_1.ndim != quaternion_2.ndim:
        quaternion_1 = quaternion_1.reshape(4, -1)
        quaternion_2 = quaternion_2.reshape(4, -1)

    qs1 = quaternion_1[0]
    qv1 = quaternion_1[1:]

    qs2 = quaternion_2[0]
    qv2 = quaternion_2[1:]

    qout = np.concatenate([[qs1 * qs2 - (qv1 * qv2).sum(axis=0)],
                           qs1 * qv2 + qs2 * qv1 + np.cross(qv1, qv2, axis=0)], axis=0)

    return qout


def quaternion_rotate(quaternion: ARRAY_LIKE, vector: ARRAY_LIKE) -> FLOAT_ARRAY:
    r"""
    Rotate 3-vector(s) by unit quaternion(s).

    This evaluates :math:`\mathbf{q}\otimes[0, \mathbf{v}]\otimes\mathbf{q}^*` in the expanded form

    .. math::
        \mathbf{v}'=\mathbf{v}+2q_s(\mathbf{q}_v\times\mathbf{v})+2\mathbf{q}_v\times(\mathbf{q}_v\times\mathbf{v})

    A single quaternion may rotate a 3xn array of vectors, a 4xn array of quaternions may rotate a single vector, or
    both may be given column for column.

    :param quaternion: the unit rotation quaternion(s)
    :param vector: the vector(s) to rotate
    :return: the rotated vector(s)
    """

    quaternion = _check_quaternion_array_and_shape(quaternion)
    vector = _check_vector_array_and_shape(vector)

    qs = quaternion[0]
    qv = quaternion[1:]

    if quaternion.ndim == 1 and vector.ndim > 1:
        qv = qv.reshape(3, 1)

    elif quaternion.ndim > 1 and vector.ndim == 1:
        vector = vector.reshape(3, 1)

    cross = np.cross(qv, vector, axis=0)

    return vector + 2 * qs * cross + 2 * np.cross(qv, cross, axis=0)


def nlerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> FLOAT_ARRAY:
    r"""
    This function performs normalized linear interpolation of quaternions.

    NLERP of quaternions involves first performing a linear interpolation between the two vectors, and then normalizing
    the interpolated result to have unit length.  That is:

    .. math::
        \mathbf{q}=\frac{\mathbf{q}_0(1-p)+\mathbf{q}_1p}
        {\left\|\mathbf{q}_0(1-p)+\mathbf{q}_1p\right\|}

    where :math:`\mathbf{q}` is the interpolated quaternion, :math:`\mathbf{q}_0` is the starting quaternion,
    :math:`\mathbf{q}_1` is the ending quaternion, and :math:`p` is the fractional percent of the way between
    :math:`\mathbf{q}_0` and :math:`\mathbf{q}_1` that we want to interpolate at (:math:`p\in[0, 1]`)

    When using this function you can either specify the argument `time` as the fractional percent that you want to
    interpolate at, or specify the keyword arguments `time0` and `time1` to be the times corresponding to the first and
    second quaternion respectively and the function will compute the fractional percent for you.  When using this method
    it is also possible to specify all three of `time`, `time0`, and `time1` as python datetime objects.

    NLERP does not correct the sign of the inputs, so it follows whichever arc the two quaternions as given lie on.

    .. warning::
        NLERP is a very fast and efficient interpolation method that is fine for short interpolation intervals; however,
        it does not perform a constant angular velocity interpolation (and instead performs a constant linear velocity
        interpolation), therefore it is not well suited to interpolating over long time intervals. If you need to
        interpolate over larger time intervals it is better to use the :func:`slerp` function which does perform
        constant angular velocity interpolation (but is less efficient).

    :param quaternion0: The starting quaternion(s)
    :param quaternion1: The ending quaternion(s)
    :param time: The time to interpolate the quaternions at, as a fractional percent or as the actual time between
                `time0` and `time1`
    :param time0: the time(s) corresponding to the first quaternion(s). Leave at 0 if you are specifying `time` as a
                  fractional percent
    :param time1: the time(s) corresponding to the second quaternion(s). Leave at 1 if you are specifying `time` as a
                  fractional percent
    :return: The interpolated quaternion(s)
    """

    dt = _fraction(time, time0, time1)

    # extract the quaternion values as arrays
    q0 = _check_quaternion_array_and_shape(quaternion0)
    q1 = _check_quaternion_array_and_shape(quaternion1)

    # perform the linear interpolation and the normalization
    return quaternion_normalize(q0 * (1 - dt) + q1 * dt)


def slerp(quaternion0: ARRAY_LIKE, quaternion1: ARRAY_LIKE,
          time: float | DatetimeLike,
          time0: float | DatetimeLike = 0, time1: float | DatetimeLike = 1) -> FLOAT_ARRAY:
    r"""
    This function performs spherical linear interpolation of rotation quaternions.

    SLERP of quaternions involves performing a linear interpolation along the great circle arc connecting the two
    quaternions. That is:

    .. math::
        \omega = \text{cos}^{-1}(\mathbf{q}_0^T\mathbf{q}_1)\\
        \mathbf{q}=\mathbf{q}_0\text{cos}(p\omega)+
        \text{sin}(p\omega)\frac{\mathbf{q}_1-\mathbf{q}_0\text{cos}(\omega)}
        {\left\|\mathbf{q}_1-\mathbf{q}_0\text{cos}(\omega)\right\|}\\
        \mathbf{q} = \frac{\mathbf{q}}{\left\|\mathbf{q}\right\|}

    where :math:`\mathbf{q}` is the interpolated quaternion, :math:`\mathbf{q}_0` is the starting quaternion,
    :math:`\mathbf{q}_1` is the ending quaternion, :math:`\omega` is the angle between the first and second quaternion,
    and :math:`p` is the fractional percent of the way between
    :math:`\mathbf{q}_0` and :math:`\mathbf{q}_1` that we want to interpolate at (:math:`p\in[0, 1]`)

    Because :math:`\mathbf{q}` and :math:`-\mathbf{q}` are the same rotation there are two arcs between any pair of
    rotations.  When the dot product of the inputs is negative the ending quaternion is negated first so that the
    shorter arc is always taken.  If the (corrected) dot product is above :data:`SLERP_DOT_THRESHOLD` the quaternions
    are so close that :func:`nlerp` is used instead.  Both decisions are made independently for each column when 4xn
    arrays are given.

    When using this function you can either specify the argument `time` as the fractional percent that you want to
    interpolate at, or specify the keyword arguments `time0` and `time1` to be the times corresponding to the first and
    second quaternion respectively and the function will compute the fractional percent for you.  When using this method
    it is also possible to specify all three of `time`, `time0`, and `time1` as python datetime objects.

    :param quaternion0: The starting quaternion(s)
    :param quaternion1: The ending quaternion(s)
    :param time: The time to interpolate the quaternions at, as a fractional percent or as the actual time between
                `time0` and `time1`
    :param time0: the time(s) corresponding to the first quaternion(s). Leave at 0 if you are specifying `time` as a
                  fractional percent
    :param time1: the time(s) corresponding to the second quaternion(s). Leave at 1 if you are specifying `time` as a
                  fractional percent
    :return: The interpolated quaternion(s)
    """

    dt = _fraction(time, time0, time1)

    # enforce unit normalization
    q0 = quaternion_normalize(quaternion0)
    q1 = quaternion_normalize(quaternion1)

    single = q0.ndim == 1 and q1.ndim == 1

    q0, q1 = np.broadcast_arrays(q0.reshape(4, -1), q1.reshape(4, -1))
    q1 = q1.copy()

    # get the cosine of the angle between the quaternions
    cos_angle = (q0 * q1).sum(axis=0)

    # if the dot product is negative negate the second quaternion to ensure the shorter path is taken
    flip = cos_angle < 0
    q1[:, flip] *= -1
    cos_angle = np.abs(cos_angle)

    # if the quaternions are really close revert to nlerp
    close = cos_angle > SLERP_DOT_THRESHOLD

    cos_angle = np.clip(cos_angle, -1, 1)  # ensure the domain for acos (only will leave due to numerical issues)

    angle0 = np.arccos(cos_angle)  # angle between q0 and q1
    angle = angle0 * dt  # angle between q0 and q

    # form an orthonormal basis, guarding the columns that are handled by nlerp
    qb = q1 - q0 * cos_angle
    qb_norm = np.linalg.norm(qb, axis=0)
    qb /= np.where(close, 1, qb_norm)

    # perform the interpolation
    q = np.where(close, q0 * (1 - dt) + q1 * dt, q0 * np.cos(angle) + qb * np.sin(angle))
    q /= np.linalg.norm(q, axis=0, keepdims=True)

    return q.ravel() if single else q
