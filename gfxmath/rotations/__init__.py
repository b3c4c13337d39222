r"""
This package defines the rotation types of gfxmath together with the array routines for converting between the various
rotation representations.

There are a few different rotation representations that are used in this package and their format is described as
follows:

.. _rotation-representation-table:

=================  =====================================================================================================
Representation     Description
=================  =====================================================================================================
quaternion         A 4 element rotation quaternion stored scalar first,
                   :math:`\mathbf{q}=\left[\begin{array}{c} q_s \\ q_x \\ q_y \\ q_z\end{array}\right]=
                   \left[\begin{array}{c}\text{cos}(\frac{\theta}{2})\\
                   \text{sin}(\frac{\theta}{2})\hat{\mathbf{x}}\end{array}\right]`
                   where :math:`\hat{\mathbf{x}}` is a 3 element unit vector representing the axis of rotation and
                   :math:`\theta` is the total angle to rotate about that vector.  Note that quaternions are not unique
                   in that the rotation represented by :math:`\mathbf{q}` is the same rotation represented by
                   :math:`-\mathbf{q}`.
axis-angle         A unit axis :math:`\hat{\mathbf{x}}` and an angle :math:`\theta`.  The axis must be unit length; this
                   is a contract of the caller.
rotation vector    A 3 element rotation vector of the form :math:`\mathbf{v}=\theta\hat{\mathbf{x}}` where
                   :math:`\theta` is the total angle to rotate by in radians and :math:`\hat{\mathbf{x}}` is the
                   rotation axis.
rotation matrix    A :math:`3\times 3` orthonormal matrix :math:`\mathbf{T}` with determinant 1 that rotates column
                   vectors from the left, :math:`\mathbf{y}'=\mathbf{T}\mathbf{y}`.  Rotation matrices uniquely
                   represent a single rotation.  In 2D the matrix is :math:`2\times 2`.
euler angles       A sequence of 3 angles corresponding to a rotation about 3 fixed axes.  There are 12 different axis
                   orders for euler angles.  Mathematically they relate to the rotation matrix as
                   :math:`\mathbf{T}=\mathbf{R}_3(c)\mathbf{R}_2(b)\mathbf{R}_1(a)` where :math:`\mathbf{R}_i(\theta)`
                   represents a rotation about axis :math:`i` (either x, y, or z) by angle :math:`\theta`, :math:`a` is
                   the angle to rotate about the first axis, :math:`b` is angle to rotate about the second axis, and
                   :math:`c` is the angle to rotate about the third axis.
=================  =====================================================================================================

All rotations are active and compose right to left: ``a * b`` applies ``b`` first.  This holds for
:class:`.Quaternion` (the Hamilton product), :class:`.Basis2` and :class:`.Basis3` (the matrix product) alike, so that
converting either factor between representations never changes the result of a composition.

The :class:`.Quaternion` is the canonical representation.  :class:`.Basis3` is the matrix form, cheaper to apply to many
vectors.  :class:`.Euler` and :class:`.AxisAngle` are conversion endpoints for human facing input and output.

In addition, the array routines in :mod:`gfxmath.rotations.core` work directly on (stacks of) numpy arrays.
"""

import gfxmath.rotations.core
import gfxmath.rotations.frames
import gfxmath.rotations.rotation
import gfxmath.rotations.quaternion
import gfxmath.rotations.basis
import gfxmath.rotations.euler

from gfxmath.rotations.core import *
from gfxmath.rotations.frames import two_vector_frame, look_at, between_vectors
from gfxmath.rotations.rotation import Rotation, Rotation2, Rotation3, apply
from gfxmath.rotations.quaternion import Quaternion
from gfxmath.rotations.basis import Basis2, Basis3
from gfxmath.rotations.euler import Euler, AxisAngle

__all__ = ['VALID_EULER_ORDERS', 'parse_euler_order',
           'quaternion_to_rotmat', 'quaternion_to_axis_angle', 'quaternion_to_rotvec', 'quaternion_to_euler',
           'axis_angle_to_quaternion', 'axis_angle_to_rotmat', 'rotvec_to_quaternion', 'rotvec_to_rotmat',
           'rotmat_to_quaternion', 'rotmat_to_axis_angle', 'rotmat_to_rotvec', 'rotmat_to_euler',
           'euler_to_rotmat', 'euler_to_quaternion',
           'rot_x', 'rot_y', 'rot_z', 'rot_axis', 'rot_2d', 'skew',
           'quaternion_normalize', 'quaternion_canonical', 'quaternion_conjugate', 'quaternion_inverse',
           'quaternion_multiplication', 'quaternion_dot', 'quaternion_magnitude', 'quaternion_rotate',
           'nlerp', 'slerp', 'SLERP_DOT_THRESHOLD',
           'two_vector_frame', 'look_at', 'between_vectors',
           'Rotation', 'Rotation2', 'Rotation3', 'apply',
           'Quaternion', 'Basis2', 'Basis3', 'Euler', 'AxisAngle']
