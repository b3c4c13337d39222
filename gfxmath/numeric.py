r"""
This module defines the numeric contract that every scalar type participating in the gfxmath algebra must satisfy.

The contract is split into small capability sets rather than one deep hierarchy:

======================  ================================================================================================
Capability              Description
======================  ================================================================================================
:class:`FieldArithmetic` Addition, subtraction, multiplication, division, negation and ordering.  Python floats and
                         numpy floating scalars/arrays satisfy this natively.
:class:`TrigCapable`     ``sqrt``, ``sin``, ``cos``, ``tan``, ``asin``, ``acos``, ``atan`` and ``atan2`` evaluated in
                         the precision of the scalar kind.
:class:`ApproxComparable` A fixed ``epsilon`` and an ``approx_eq`` comparison built on it.
:class:`DoubleConvertible` Conversion to and from a double precision value for interop between kinds.
======================  ================================================================================================

:class:`ScalarContract` is the intersection of the last three and is implemented by :class:`ScalarKind`.  Two
concrete kinds are provided, :data:`FLOAT32` and :data:`FLOAT64`.  Every kernel in gfxmath is written once against
numpy and asks :func:`kind_of` which kind its inputs belong to, so the same code produces float32 results for
float32 inputs and float64 results for everything else.
"""

from dataclasses import dataclass

from typing import Any, Protocol, runtime_checkable

import numpy as np
import numpy.typing as npt

from gfxmath._typing import ARRAY_LIKE, SCALAR_OR_ARRAY


__all__ = ['FieldArithmetic', 'TrigCapable', 'ApproxComparable', 'DoubleConvertible', 'ScalarContract',
           'ScalarKind', 'FLOAT32', 'FLOAT64', 'SCALAR_KINDS', 'kind_of', 'result_kind', 'approx_eq', 'as_kind_array']


@runtime_checkable
class FieldArithmetic(Protocol):
    """
    The arithmetic and ordering operations a raw scalar value must support.
    """

    def __add__(self, other: Any, /) -> Any: ...

    def __sub__(self, other: Any, /) -> Any: ...

    def __mul__(self, other: Any, /) -> Any: ...

    def __truediv__(self, other: Any, /) -> Any: ...

    def __neg__(self) -> Any: ...

    def __lt__(self, other: Any, /) -> Any: ...

    def __le__(self, other: Any, /) -> Any: ...


@runtime_checkable
class TrigCapable(Protocol):
    """
    Square root and trigonometric functions evaluated in a fixed precision.
    """

    def sqrt(self, value: SCALAR_OR_ARRAY) -> Any: ...

    def sin(self, value: SCALAR_OR_ARRAY) -> Any: ...

    def cos(self, value: SCALAR_OR_ARRAY) -> Any: ...

    def tan(self, value: SCALAR_OR_ARRAY) -> Any: ...

    def asin(self, value: SCALAR_OR_ARRAY) -> Any: ...

    def acos(self, value: SCALAR_OR_ARRAY) -> Any: ...

    def atan(self, value: SCALAR_OR_ARRAY) -> Any: ...

    def atan2(self, y: SCALAR_OR_ARRAY, x: SCALAR_OR_ARRAY) -> Any: ...


@runtime_checkable
class ApproxComparable(Protocol):
    """
    Approximate equality with a fixed tolerance.
    """

    @property
    def epsilon(self) -> float: ...

    def approx_eq(self, first: ARRAY_LIKE, second: ARRAY_LIKE, epsilon: float | None = None) -> bool: ...


@runtime_checkable
class DoubleConvertible(Protocol):
    """
    Conversion to and from double precision.
    """

    def from_double(self, value: SCALAR_OR_ARRAY) -> Any: ...

    def to_double(self, value: SCALAR_OR_ARRAY) -> Any: ...


@runtime_checkable
class ScalarContract(TrigCapable, ApproxComparable, DoubleConvertible, Protocol):
    """
    The full capability set required of a scalar kind.
    """


@dataclass(frozen=True)
class ScalarKind:
    """
    A concrete scalar kind backed by a numpy floating dtype.

    All of the trigonometric methods cast their inputs into :attr:`dtype` before evaluating so that the result has the
    precision of this kind regardless of what the caller passed in.
    """

    name: str
    """
    A short name for the kind (``'float32'`` or ``'float64'``)
    """

    dtype: type[np.floating]
    """
    The numpy scalar type used for storage and computation
    """

    epsilon: float
    """
    The absolute tolerance used for approximate equality.
    """

    def cast(self, value: SCALAR_OR_ARRAY) -> Any:
        """
        Cast ``value`` into this kind without copying if it already is one.

        Scalars are returned as numpy scalars of :attr:`dtype`, arrays as arrays of :attr:`dtype`.

        :param value: the value to cast
        :return: the value in this kind's precision
        """

        array = np.asarray(value, dtype=self.dtype)

        if array.ndim == 0:
            return self.dtype(array)

        return array

    from_double = cast

    def to_double(self, value: SCALAR_OR_ARRAY) -> Any:
        """
        Widen ``value`` to double precision.

        :param value: the value to widen
        :return: a float (for scalars) or float64 array
        """

        array = np.asarray(value, dtype=np.float64)

        if array.ndim == 0:
            return float(array)

        return array

    def sqrt(self, value: SCALAR_OR_ARRAY) -> Any:
        return np.sqrt(self.cast(value))

    def sin(self, value: SCALAR_OR_ARRAY) -> Any:
        return np.sin(self.cast(value))

    def cos(self, value: SCALAR_OR_ARRAY) -> Any:
        return np.cos(self.cast(value))

    def tan(self, value: SCALAR_OR_ARRAY) -> Any:
        return np.tan(self.cast(value))

    def asin(self, value: SCALAR_OR_ARRAY) -> Any:
        # clip to stay within the domain when rounding pushes us just past 1
        return np.arcsin(np.clip(self.cast(value), -1, 1))

    def acos(self, value: SCALAR_OR_ARRAY) -> Any:
        return np.arccos(np.clip(self.cast(value), -1, 1))

    def atan(self, value: SCALAR_OR_ARRAY) -> Any:
        return np.arctan(self.cast(value))

    def atan2(self, y: SCALAR_OR_ARRAY, x: SCALAR_OR_ARRAY) -> Any:
        return np.arctan2(self.cast(y), self.cast(x))

    def approx_eq(self, first: ARRAY_LIKE, second: ARRAY_LIKE, epsilon: float | None = None) -> bool:
        """
        Check whether all elements of ``first`` and ``second`` are within ``epsilon`` of each other.

        :param first: the first value(s)
        :param second: the second value(s)
        :param epsilon: the absolute tolerance to use.  If ``None`` then :attr:`epsilon` is used
        :return: ``True`` if every pair of elements is within tolerance
        """

        if epsilon is None:
            epsilon = self.epsilon

        first = np.asarray(first, dtype=np.float64)
        second = np.asarray(second, dtype=np.float64)

        if first.shape != second.shape:
            return False

        return bool(np.all(np.abs(first - second) <= epsilon))


FLOAT32 = ScalarKind('float32', np.float32, 1e-5)
"""
The single precision scalar kind.
"""

FLOAT64 = ScalarKind('float64', np.float64, 1e-8)
"""
The double precision scalar kind.
"""

SCALAR_KINDS: dict[np.dtype, ScalarKind] = {np.dtype(np.float32): FLOAT32, np.dtype(np.float64): FLOAT64}
"""
Lookup from numpy dtype to scalar kind.
"""


def kind_of(value: Any) -> ScalarKind:
    """
    Determine the scalar kind of a value, array, dtype or gfxmath value type.

    Anything carrying a float32 dtype is :data:`FLOAT32`.  Everything else (python numbers, integer arrays, float64
    arrays, lists) is :data:`FLOAT64`.

    :param value: the value to inspect
    :return: the scalar kind for the value
    """

    kind = getattr(value, 'kind', None)
    if isinstance(kind, ScalarKind):
        return kind

    if isinstance(value, ScalarKind):
        return value

    try:
        dtype = np.dtype(value) if isinstance(value, (type, np.dtype)) else getattr(value, 'dtype', None)
    except TypeError:
        dtype = None

    if dtype is None:
        return FLOAT64

    return SCALAR_KINDS.get(np.dtype(dtype), FLOAT64)


def result_kind(*values: Any) -> ScalarKind:
    """
    Determine the scalar kind for the result of an operation on several values.

    The result is :data:`FLOAT32` only if every input is float32, otherwise it is :data:`FLOAT64`.

    :param values: the operands
    :return: the widest kind among the operands
    """

    kinds = [kind_of(value) for value in values]

    if kinds and all(kind is FLOAT32 for kind in kinds):
        return FLOAT32

    return FLOAT64


def approx_eq(first: ARRAY_LIKE, second: ARRAY_LIKE, epsilon: float | None = None) -> bool:
    """
    Approximate elementwise equality using the epsilon of the widest kind of the inputs.

    :param first: the first value(s)
    :param second: the second value(s)
    :param epsilon: an explicit tolerance overriding the kind epsilon
    :return: ``True`` if the inputs agree within tolerance
    """

    return result_kind(first, second).approx_eq(first, second, epsilon)


def as_kind_array(value: ARRAY_LIKE, kind: ScalarKind | None = None) -> npt.NDArray[np.floating]:
    """
    Convert ``value`` to an array of ``kind`` (or of its own kind when ``kind`` is ``None``).

    :param value: the value to convert
    :param kind: the kind to convert to
    :return: the converted array
    """

    if kind is None:
        kind = kind_of(value)

    return np.asarray(value, dtype=kind.dtype)
