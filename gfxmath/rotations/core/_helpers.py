import numpy as np

from gfxmath._typing import ARRAY_LIKE, FLOAT_ARRAY
from gfxmath.numeric import kind_of, as_kind_array, ScalarKind


def _check_array_and_shape(input: ARRAY_LIKE,
                           return_copy: bool = False,
                           first_axis_length: int | tuple[int, ...] | None = None,
                           second_last_axis_length: int | None = None,
                           last_axis_length: int | None = None,
                           kind: ScalarKind | None = None) -> FLOAT_ARRAY:
    in_shape = np.shape(input)

    if not in_shape:
        raise ValueError('The input must be shaped')

    if first_axis_length is not None:
        allowed = first_axis_length if isinstance(first_axis_length, tuple) else (first_axis_length,)
        if in_shape[0] not in allowed:
            raise ValueError(f'The length of the first axis must be {" or ".join(map(str, allowed))}')

    if second_last_axis_length is not None:
        if len(in_shape) < 2 or in_shape[-2] != second_last_axis_length:
            raise ValueError(f'The length of the second to last axis must be {second_last_axis_length}')

    if last_axis_length is not None and in_shape[-1] != last_axis_length:
        raise ValueError(f'The length of the last axis must be {last_axis_length}')

    if kind is None:
        kind = kind_of(input)

    # float32 input stays float32, everything else is promoted to float64
    if return_copy:
        return np.array(input, dtype=kind.dtype)

    return as_kind_array(input, kind)


def _check_quaternion_array_and_shape(quaternion: ARRAY_LIKE, return_copy: bool = False) -> FLOAT_ARRAY:
    return _check_array_and_shape(quaternion, return_copy, first_axis_length=4)


def _check_vector_array_and_shape(vector: ARRAY_LIKE, return_copy: bool = False) -> FLOAT_ARRAY:
    return _check_array_and_shape(vector, return_copy, first_axis_length=3)


def _check_matrix_array_and_shape(matrix: ARRAY_LIKE, return_copy: bool = False) -> FLOAT_ARRAY:
    return _check_array_and_shape(matrix, return_copy, second_last_axis_length=3, last_axis_length=3)


def _angle_array(theta) -> FLOAT_ARRAY:
    # accepts raw radians, Angle objects, or sequences of either
    radians = getattr(theta, 'radians', None)
    if radians is not None:
        theta = radians
    elif isinstance(theta, (list, tuple)):
        theta = [getattr(t, 'radians', t) for t in theta]

    return np.atleast_1d(np.asarray(theta, dtype=kind_of(theta).dtype)).ravel()
