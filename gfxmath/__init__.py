# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
gfxmath is a small numeric kernel for rotations and transforms in 2D and 3D graphics.

It provides

* unit tagged angles (:mod:`gfxmath.angle`),
* the scalar kinds that let every kernel run in single or double precision (:mod:`gfxmath.numeric`),
* free vector functions (:mod:`gfxmath.vector`),
* the rotation types and array conversion routines (:mod:`gfxmath.rotations`),
* composite scale/rotate/translate transforms (:mod:`gfxmath.transform`), and
* optional checking of the numeric preconditions of all of the above (:mod:`gfxmath.utilities.contracts`).
"""

from gfxmath import numeric, angle, vector, rotations, transform, utilities

from gfxmath.angle import Angle, Radians, Degrees
from gfxmath.numeric import FLOAT32, FLOAT64, ScalarKind
from gfxmath.rotations import Rotation, Rotation2, Rotation3, Quaternion, Basis2, Basis3, Euler, AxisAngle
from gfxmath.transform import Transform, DecomposedTransform, AffineTransform
from gfxmath.utilities.contracts import CONTRACTS, contract_mode

__version__ = '1.0.0'

__all__ = ['numeric', 'angle', 'vector', 'rotations', 'transform', 'utilities',
           'Angle', 'Radians', 'Degrees', 'FLOAT32', 'FLOAT64', 'ScalarKind',
           'Rotation', 'Rotation2', 'Rotation3', 'Quaternion', 'Basis2', 'Basis3', 'Euler', 'AxisAngle',
           'Transform', 'DecomposedTransform', 'AffineTransform', 'CONTRACTS', 'contract_mode']
