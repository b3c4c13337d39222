r"""
This module provides unit tagged angle values for type-safe, self-documenting code.

An angle is a single scalar (or array of scalars) tagged with its unit, either :class:`Radians` or :class:`Degrees`.
Angles are immutable; every operation returns a new angle.

Arithmetic between two angles is always allowed.  When the units differ the right hand operand is converted into the
unit of the left hand operand, so ``Degrees(90) + Radians(pi/2)`` is ``Degrees(180)``.  Angles may be scaled by plain
numbers, but a plain number may not be added to an angle since its unit would be ambiguous.

The stored value is never range restricted.  The normalization methods reduce an angle to a canonical range:

=========================  ==================================  ===================================================
Method                     :class:`Radians`                    :class:`Degrees`
=========================  ==================================  ===================================================
:meth:`~Angle.normalize`           :math:`(-\pi, \pi]`                 :math:`(-180, 180]`
:meth:`~Angle.normalize_positive`  :math:`[0, 2\pi)`                   :math:`[0, 360)`
=========================  ==================================  ===================================================

The signed range is the canonical one throughout gfxmath as it matches the range of :func:`atan2` which every angle
extraction routine is built on.

Equality between angles is approximate, using the epsilon of the scalar kind of the stored value (see
:mod:`gfxmath.numeric`), and compares the raw (unnormalized) values.  Use :meth:`~Angle.equiv` to check whether two
angles point the same direction.
"""

from abc import ABCMeta, abstractmethod

from numbers import Real

from typing import Any, Self, ClassVar

import numpy as np

from gfxmath._typing import SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY
from gfxmath.numeric import kind_of, ScalarKind


__all__ = ['Angle', 'Radians', 'Degrees', 'as_radians', 'sin', 'cos', 'tan', 'sin_cos', 'cot', 'sec', 'csc',
           'asin', 'acos', 'atan', 'atan2', 'bisect']


def _freeze(value: Any) -> F_SCALAR_OR_ARRAY:
    # arrays are copied and locked so the angle cannot be changed through an alias
    if isinstance(value, np.ndarray):
        if value.ndim == 0:
            return value.dtype.type(value) if np.issubdtype(value.dtype, np.floating) else float(value)

        value = np.array(value, dtype=kind_of(value).dtype)
        value.flags.writeable = False
        return value

    if isinstance(value, np.floating):
        return value

    if isinstance(value, Real):
        return float(value)

    if isinstance(value, (list, tuple)):
        return _freeze(np.asarray(value, dtype=np.float64))

    raise TypeError(f'angles must be built from real numbers or arrays, not {type(value).__name__}')


class Angle(metaclass=ABCMeta):
    """
    The base class for unit tagged angles.
    """

    __slots__ = ('_value',)

    FULL_TURN: ClassVar[float]
    """
    The size of a full turn in this unit.
    """

    UNIT: ClassVar[str]

    def __init__(self, value: SCALAR_OR_ARRAY | 'Angle'):
        """
        :param value: the raw value in this unit, or another angle which is converted into this unit
        """

        if isinstance(value, Angle):
            value = self._from_radians(value.radians) if not isinstance(value, type(self)) else value.value

        self._value = _freeze(value)

    @staticmethod
    @abstractmethod
    def _from_radians(value: F_SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
        """
        Convert a raw radian value into this unit.
        """

    @property
    def value(self) -> F_SCALAR_OR_ARRAY:
        """
        The raw value in this angle's unit.
        """

        return self._value

    @property
    def kind(self) -> ScalarKind:
        """
        The scalar kind of the stored value.
        """

        return kind_of(self._value)

    @property
    @abstractmethod
    def radians(self) -> F_SCALAR_OR_ARRAY:
        """
        The raw value of this angle in radians.
        """

    @property
    @abstractmethod
    def degrees(self) -> F_SCALAR_OR_ARRAY:
        """
        The raw value of this angle in degrees.
        """

    def to_radians(self) -> 'Radians':
        """
        :return: this angle expressed in radians
        """

        return Radians(self.radians)

    def to_degrees(self) -> 'Degrees':
        """
        :return: this angle expressed in degrees
        """

        return Degrees(self.degrees)

    def _coerce(self, other: Any) -> F_SCALAR_OR_ARRAY | None:
        # the raw value of other in our unit, or None if other is not an angle
        if isinstance(other, type(self)):
            return other.value

        if isinstance(other, Angle):
            return self._from_radians(other.radians)

        return None

    # constructors for common angles

    @classmethod
    def zero(cls) -> Self:
        return cls(0.0)

    @classmethod
    def full_turn(cls) -> Self:
        return cls(cls.FULL_TURN)

    @classmethod
    def turn_div_2(cls) -> Self:
        return cls(cls.FULL_TURN / 2)

    @classmethod
    def turn_div_3(cls) -> Self:
        return cls(cls.FULL_TURN / 3)

    @classmethod
    def turn_div_4(cls) -> Self:
        return cls(cls.FULL_TURN / 4)

    @classmethod
    def turn_div_6(cls) -> Self:
        return cls(cls.FULL_TURN / 6)

    # arithmetic

    def __add__(self, other: 'Angle') -> Self:
        other_value = self._coerce(other)
        if other_value is None:
            return NotImplemented
        return type(self)(self._value + other_value)

    def __sub__(self, other: 'Angle') -> Self:
        other_value = self._coerce(other)
        if other_value is None:
            return NotImplemented
        return type(self)(self._value - other_value)

    def __neg__(self) -> Self:
        return type(self)(-self._value)

    def __pos__(self) -> Self:
        return self

    def __abs__(self) -> Self:
        return type(self)(np.abs(self._value))

    def __mul__(self, other: SCALAR_OR_ARRAY) -> Self:
        if isinstance(other, Angle):
            return NotImplemented
        return type(self)(self._value * np.asarray(other) if isinstance(other, (list, tuple)) else self._value * other)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> Any:
        # angle / angle is a unitless ratio, angle / scalar is an angle
        other_value = self._coerce(other)
        if other_value is not None:
            return self._value / other_value

        if isinstance(other, (Real, np.ndarray, np.floating)):
            return type(self)(self._value / other)

        return NotImplemented

    def __mod__(self, other: Any) -> Self:
        other_value = self._coerce(other)
        if other_value is None:
            if not isinstance(other, (Real, np.ndarray, np.floating)):
                return NotImplemented
            other_value = other
        return type(self)(np.mod(self._value, other_value))

    # comparison

    def _compare(self, other: Any, op) -> Any:
        other_value = self._coerce(other)
        if other_value is None:
            return NotImplemented
        result = op(self._value, other_value)
        return bool(result) if np.ndim(result) == 0 else result

    def __lt__(self, other: 'Angle') -> Any:
        return self._compare(other, np.less)

    def __le__(self, other: 'Angle') -> Any:
        return self._compare(other, np.less_equal)

    def __gt__(self, other: 'Angle') -> Any:
        return self._compare(other, np.greater)

    def __ge__(self, other: 'Angle') -> Any:
        return self._compare(other, np.greater_equal)

    def approx_eq(self, other: 'Angle', epsilon: float | None = None) -> bool:
        """
        Check whether two angles have the same raw value (in this angle's unit) within ``epsilon``.

        :param other: the angle to compare with
        :param epsilon: the tolerance, in this angle's unit.  If ``None`` the epsilon of the scalar kind is used
        :return: ``True`` if the angles are approximately equal
        """

        other_value = self._coerce(other)
        if other_value is None:
            return False

        return self.kind.approx_eq(self._value, other_value, epsilon)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Angle):
            return NotImplemented
        return self.approx_eq(other)

    __hash__ = None  # type: ignore[assignment]

    # normalization

    def normalize(self) -> Self:
        """
        Reduce this angle to the signed range (-half turn, half turn].

        :return: the normalized angle
        """

        half_turn = self.FULL_TURN / 2

        # -x mod full maps into [0, full) so that x in (-half, half] lands back on itself
        return type(self)(half_turn - np.mod(half_turn - self._value, self.FULL_TURN))

    def normalize_positive(self) -> Self:
        """
        Reduce this angle to the range [0, full turn).

        :return: the normalized angle
        """

        value = np.mod(self._value, self.FULL_TURN)

        # rounding can push a value just below zero up to exactly one full turn
        value = np.where(value >= self.FULL_TURN, value - self.FULL_TURN, value)

        return type(self)(value if np.ndim(value) else value[()])

    def opposite(self) -> Self:
        """
        :return: the angle half a turn away from this one, normalized
        """

        return type(self)(self._value + self.FULL_TURN / 2).normalize()

    def bisect(self, other: 'Angle') -> Self:
        """
        Compute the angle midway between this angle and ``other``, normalized.

        :param other: the other angle
        :return: the interior bisector of the two angles
        """

        return (self + (type(self)(other) - self) / 2).normalize()

    def equiv(self, other: 'Angle') -> bool:
        """
        Check whether two angles describe the same direction, that is, are equal after normalization.

        :param other: the angle to compare with
        :return: ``True`` if the angles are equivalent
        """

        difference = (self - other).normalize()

        return self.kind.approx_eq(difference.value, np.zeros_like(difference.value))

    # trigonometry

    def sin(self) -> F_SCALAR_OR_ARRAY:
        return self.kind.sin(self.radians)

    def cos(self) -> F_SCALAR_OR_ARRAY:
        return self.kind.cos(self.radians)

    def tan(self) -> F_SCALAR_OR_ARRAY:
        return self.kind.tan(self.radians)

    def sin_cos(self) -> tuple[F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY]:
        return self.sin(), self.cos()

    # conversions

    def __float__(self) -> float:
        return float(self._value)

    def __array__(self, dtype=None, copy=None) -> np.ndarray:
        return np.asarray(self._value, dtype=dtype)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self._value!r})'

    def __str__(self) -> str:
        return f'{self._value}{self.UNIT}'


class Radians(Angle):
    """
    An angle measured in radians.

        >>> from gfxmath.angle import Radians, Degrees
        >>> Radians(3*np.pi/2).normalize()
        Radians(-1.5707963267948966)
        >>> Radians(np.pi) + Degrees(90)
        Radians(4.71238898038469)
    """

    __slots__ = ()

    FULL_TURN = 2 * np.pi

    UNIT = ' rad'

    @staticmethod
    def _from_radians(value: F_SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
        return value

    @property
    def radians(self) -> F_SCALAR_OR_ARRAY:
        return self._value

    @property
    def degrees(self) -> F_SCALAR_OR_ARRAY:
        return self._value * (180 / np.pi)


class Degrees(Angle):
    """
    An angle measured in degrees.

        >>> from gfxmath.angle import Degrees
        >>> Degrees(270).normalize()
        Degrees(-90.0)
        >>> Degrees(-90).normalize_positive()
        Degrees(270.0)
    """

    __slots__ = ()

    FULL_TURN = 360.0

    UNIT = '°'

    @staticmethod
    def _from_radians(value: F_SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
        return value * (180 / np.pi)

    @property
    def radians(self) -> F_SCALAR_OR_ARRAY:
        return self._value * (np.pi / 180)

    @property
    def degrees(self) -> F_SCALAR_OR_ARRAY:
        return self._value


def as_radians(angle: Angle | SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    """
    Get the raw radian value of an angle.

    Plain numbers and arrays are assumed to already be in radians and are returned unchanged (as arrays for sequences).

    :param angle: the angle
    :return: the raw value in radians
    """

    if isinstance(angle, Angle):
        return angle.radians

    if isinstance(angle, (list, tuple)):
        return np.asarray(angle, dtype=np.float64)

    return angle


def sin(theta: Angle | SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    return np.sin(as_radians(theta))


def cos(theta: Angle | SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    return np.cos(as_radians(theta))


def tan(theta: Angle | SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    return np.tan(as_radians(theta))


def sin_cos(theta: Angle | SCALAR_OR_ARRAY) -> tuple[F_SCALAR_OR_ARRAY, F_SCALAR_OR_ARRAY]:
    radians = as_radians(theta)
    return np.sin(radians), np.cos(radians)


def cot(theta: Angle | SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    return 1 / tan(theta)


def sec(theta: Angle | SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    return 1 / cos(theta)


def csc(theta: Angle | SCALAR_OR_ARRAY) -> F_SCALAR_OR_ARRAY:
    return 1 / sin(theta)


def asin(value: SCALAR_OR_ARRAY) -> Radians:
    return Radians(kind_of(value).asin(value))


def acos(value: SCALAR_OR_ARRAY) -> Radians:
    return Radians(kind_of(value).acos(value))


def atan(value: SCALAR_OR_ARRAY) -> Radians:
    return Radians(kind_of(value).atan(value))


def atan2(y: SCALAR_OR_ARRAY, x: SCALAR_OR_ARRAY) -> Radians:
    return Radians(np.arctan2(y, x))


def bisect(first: Angle, second: Angle) -> Angle:
    """
    Compute the interior bisector of two angles in the unit of ``first``.

    See :meth:`Angle.bisect`.
    """

    return first.bisect(second)
