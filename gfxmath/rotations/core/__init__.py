"""
This module contains fundamental mathematical operations and utilities for rotation
calculations. It has no dependencies on other rotation modules to avoid circular imports.
All functions here are pure mathematical operations on numpy arrays that can be used as building blocks
for higher-level rotation representations and conversions.
"""

import gfxmath.rotations.core.conversions
import gfxmath.rotations.core.elementals
import gfxmath.rotations.core.quaternion_math

from gfxmath.rotations.core.conversions import (VALID_EULER_ORDERS, parse_euler_order,
                                                quaternion_to_rotmat, quaternion_to_axis_angle, quaternion_to_rotvec,
                                                quaternion_to_euler, axis_angle_to_quaternion, axis_angle_to_rotmat,
                                                rotvec_to_quaternion, rotvec_to_rotmat,
                                                rotmat_to_quaternion, rotmat_to_axis_angle, rotmat_to_rotvec,
                                                rotmat_to_euler, euler_to_rotmat, euler_to_quaternion)

from gfxmath.rotations.core.elementals import rot_x, rot_y, rot_z, rot_axis, rot_2d, skew

from gfxmath.rotations.core.quaternion_math import (quaternion_normalize, quaternion_canonical, quaternion_conjugate,
                                                    quaternion_inverse, quaternion_multiplication, quaternion_dot,
                                                    quaternion_magnitude, quaternion_rotate, nlerp, slerp,
                                                    SLERP_DOT_THRESHOLD)

__all__ = ['VALID_EULER_ORDERS', 'parse_euler_order',
           'quaternion_to_rotmat', 'quaternion_to_axis_angle', 'quaternion_to_rotvec', 'quaternion_to_euler',
           'axis_angle_to_quaternion', 'axis_angle_to_rotmat', 'rotvec_to_quaternion', 'rotvec_to_rotmat',
           'rotmat_to_quaternion', 'rotmat_to_axis_angle', 'rotmat_to_rotvec', 'rotmat_to_euler',
           'euler_to_rotmat', 'euler_to_quaternion',
           'rot_x', 'rot_y', 'rot_z', 'rot_axis', 'rot_2d', 'skew',
           'quaternion_normalize', 'quaternion_canonical', 'quaternion_conjugate', 'quaternion_inverse',
           'quaternion_multiplication', 'quaternion_dot', 'quaternion_magnitude', 'quaternion_rotate',
           'nlerp', 'slerp', 'SLERP_DOT_THRESHOLD']
