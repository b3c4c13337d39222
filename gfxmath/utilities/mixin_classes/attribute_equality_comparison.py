import numpy as np

from typing import Self, Any

from gfxmath.numeric import result_kind


class AttributeEqualityComparison:
    """
    A base class that implements approximate equality comparison based on attributes.

    Two instances compare equal when they are of the same class, have the same set of attributes, and each pair of
    attributes agrees.  Numeric array-like attributes are compared with the epsilon of their scalar kind (see
    :mod:`gfxmath.numeric`) since values produced by chains of transformations accumulate rounding error.  Any other
    attribute is compared with ``==``, so attributes that are themselves gfxmath value types use their own
    approximate equality.

    Because equality is approximate, classes using this mixin are not hashable.

    For example:

    .. code-block::

        class Offset(AttributeEqualityComparison):
            def __init__(self, x):
                self.x = np.asarray(x, dtype=float)

        Offset([1, 2]) == Offset([1, 2 + 1e-12])  # True
        Offset([1, 2]) == Offset([1, 2.1])  # False
    """

    __hash__ = None  # type: ignore[assignment]

    def __eq__(self, other: Any) -> bool:
        """
        Compare this object with another for equality by checking equality of all attributes.

        :param other: The object to compare with
        :return: True if the objects are equal, False otherwise
        """

        if not isinstance(other, self.__class__):
            return NotImplemented

        if set(self.__dict__.keys()) != set(other.__dict__.keys()):
            return False

        return all(self.comparison_dictionary(other).values())

    @staticmethod
    def _value_comparison(val1: Any, val2: Any) -> bool:
        """
        Compare two values, handling numeric array-like objects with a tolerance.

        This can be overridden if need be.

        :param val1: First value to compare
        :param val2: Second value to compare
        :return: True if values are equal, False otherwise
        """

        if isinstance(val1, (np.ndarray, np.floating, float, int)) and \
                isinstance(val2, (np.ndarray, np.floating, float, int)):

            if np.shape(val1) != np.shape(val2):
                return False

            return result_kind(val1, val2).approx_eq(val1, val2)

        return bool(val1 == val2)

    def comparison_dictionary(self, other: Self) -> dict[str, bool]:
        """
        Compares each attribute of self to other and stores the result in a dict mapping the attribute to the
        comparison result.

        This assumes that other and self are the same type and have the same attributes.

        :param other: The other instance to compare with
        :return: A dictionary mapping attribute names to comparison results
        """

        return {
            key: self._value_comparison(getattr(self, key), getattr(other, key))
            for key in self.__dict__.keys()
        }
