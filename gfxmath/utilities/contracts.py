"""
This module provides optional checking of the input contracts of the gfxmath kernels.

The kernels in gfxmath are total functions over well formed inputs and do not validate their numeric preconditions
(a unit length rotation axis, a non-zero quaternion before normalization, an invertible scale, ...) on every call.
Violating one of these preconditions produces an undefined (garbage) rotation rather than an error.

While developing it is often useful to catch these violations where they happen.  The module level
:data:`CONTRACTS` checker is consulted by the kernels at each precondition and, depending on its :attr:`mode`, either
ignores the violation (the default), emits a :class:`ContractViolationWarning`, or raises a
:class:`ContractViolationError`.  The default mode can be changed for the whole process::

    >>> from gfxmath.utilities.contracts import CONTRACTS
    >>> CONTRACTS.mode = 'raise'

or for a block of code::

    >>> from gfxmath.utilities.contracts import contract_mode
    >>> from gfxmath.rotations import Quaternion
    >>> with contract_mode('raise'):
    ...     Quaternion.from_axis_angle([1, 1, 0], 0.5)
    Traceback (most recent call last):
    ...
    gfxmath.utilities.contracts.ContractViolationError: the rotation axis must be unit length (magnitude 1.41421)

A mode set with :func:`contract_mode` is local to the current thread (or asyncio task) and is kept in a
:class:`contextvars.ContextVar`, so a block that turns checking on in one thread never changes what the kernels do in
another.
"""

import warnings

from contextlib import contextmanager

from contextvars import ContextVar

from dataclasses import dataclass

from typing import Iterator

import numpy as np

from gfxmath._typing import ARRAY_LIKE, CONTRACT_MODES
from gfxmath.utilities.options import UserOptions
from gfxmath.utilities.mixin_classes.user_option_configured import UserOptionConfigured


__all__ = ['ContractViolationError', 'ContractViolationWarning', 'ContractOptions', 'ContractChecker', 'CONTRACTS',
           'contract_mode']


_VALID_MODES = ('ignore', 'warn', 'raise')


class ContractViolationError(ValueError):
    """
    Raised when an input contract is violated and contract checking is in ``'raise'`` mode.
    """


class ContractViolationWarning(UserWarning):
    """
    Emitted when an input contract is violated and contract checking is in ``'warn'`` mode.
    """


@dataclass
class ContractOptions(UserOptions):
    """
    Options controlling how input contracts are checked.
    """

    mode: CONTRACT_MODES = 'ignore'
    """
    What to do when a contract is violated.

    ``'ignore'`` skips the checks entirely, ``'warn'`` emits a :class:`ContractViolationWarning`, and ``'raise'``
    raises a :class:`ContractViolationError`.
    """

    unit_tolerance: float = 1e-4
    """
    How far the magnitude of a vector or quaternion may be from 1 and still be considered unit length.
    """

    orthonormal_tolerance: float = 1e-4
    """
    The maximum absolute element of :math:`\\mathbf{R}^T\\mathbf{R}-\\mathbf{I}` for a matrix to be considered
    orthonormal.
    """

    zero_tolerance: float = 1e-12
    """
    Magnitudes at or below this value are treated as zero (not normalizable/invertible).
    """

    def override_options(self):
        if self.mode not in _VALID_MODES:
            raise ValueError(f'mode must be one of {_VALID_MODES}, not {self.mode!r}')


class ContractChecker(UserOptionConfigured[ContractOptions], ContractOptions):
    """
    Checks the numeric preconditions of the gfxmath kernels according to :class:`ContractOptions`.

    Each ``check_*`` method returns immediately when :attr:`mode` is ``'ignore'`` so that leaving the checks in place
    costs a single attribute lookup per call.

    The configured :attr:`mode` is the process wide default.  :meth:`override` replaces it for the current context
    only, so concurrent threads and tasks each see their own mode.
    """

    def __init__(self, options: ContractOptions | None = None):
        """
        :param options: the options to configure the checker with.  If ``None`` the defaults are used
        """

        # must exist before the options apply the default mode
        self._active_mode: ContextVar[CONTRACT_MODES | None] = ContextVar('contract_mode', default=None)

        super().__init__(ContractOptions, options=options)

    @property
    def mode(self) -> CONTRACT_MODES:
        """
        The mode in effect in the current context.

        This is the mode of the innermost :meth:`override` block active in this thread or task, or the configured
        default outside of any block.  Assigning changes the configured default.
        """

        active = self._active_mode.get()
        return self._default_mode if active is None else active

    @mode.setter
    def mode(self, value: CONTRACT_MODES):
        self._default_mode = value

    @contextmanager
    def override(self, mode: CONTRACT_MODES) -> Iterator['ContractChecker']:
        """
        Use ``mode`` for the current context inside a ``with`` block.

        The previous mode of the context is restored on exit even if an exception is raised.  Other threads and tasks
        are unaffected.

        :param mode: the mode to use inside the block
        :return: this checker
        :raises ValueError: if ``mode`` is not recognized
        """

        if mode not in _VALID_MODES:
            raise ValueError(f'mode must be one of {_VALID_MODES}, not {mode!r}')

        token = self._active_mode.set(mode)
        try:
            yield self
        finally:
            self._active_mode.reset(token)

    @property
    def enabled(self) -> bool:
        """
        Whether contract checking is active.
        """

        return self.mode != 'ignore'

    def violation(self, message: str) -> None:
        """
        Report a contract violation according to :attr:`mode`.

        :param message: a description of the violation
        :raises ContractViolationError: if :attr:`mode` is ``'raise'``
        """

        if self.mode == 'raise':
            raise ContractViolationError(message)

        if self.mode == 'warn':
            warnings.warn(message, ContractViolationWarning, stacklevel=3)

    def check_unit(self, values: ARRAY_LIKE, what: str) -> None:
        """
        Check that each vector (or quaternion) down the first axis of ``values`` has unit length.

        :param values: the vector(s) to check, one per column
        :param what: a description of the values used in the message
        """

        if not self.enabled:
            return

        magnitude = np.atleast_1d(np.linalg.norm(np.asarray(values, dtype=np.float64), axis=0))
        error = np.abs(magnitude - 1)

        if np.any(error > self.unit_tolerance):
            # report the worst offender
            self.violation(f'{what} must be unit length (magnitude {magnitude.flat[np.argmax(error)]:g})')

    def check_nonzero(self, magnitude: ARRAY_LIKE, what: str) -> None:
        """
        Check that a magnitude (or scale) is not zero.

        :param magnitude: the magnitude(s) to check
        :param what: a description of the values used in the message
        """

        if not self.enabled:
            return

        if np.any(np.abs(np.asarray(magnitude, dtype=np.float64)) <= self.zero_tolerance):
            self.violation(f'{what} must be non-zero')

    def check_orthonormal(self, matrix: ARRAY_LIKE, what: str = 'the rotation matrix') -> None:
        """
        Check that a square matrix (or stack of matrices) is orthonormal with a positive determinant.

        :param matrix: the matrix or ``n x d x d`` stack of matrices to check
        :param what: a description of the matrix used in the message
        """

        if not self.enabled:
            return

        matrix = np.asarray(matrix, dtype=np.float64)

        error = np.abs(matrix.swapaxes(-1, -2) @ matrix - np.eye(matrix.shape[-1])).max()

        if error > self.orthonormal_tolerance:
            self.violation(f'{what} must be orthonormal (max error {error:g})')

        elif np.any(np.linalg.det(matrix) < 0):
            self.violation(f'{what} must be a proper rotation (determinant -1)')


CONTRACTS = ContractChecker()
"""
The checker consulted by every kernel in gfxmath.
"""


@contextmanager
def contract_mode(mode: CONTRACT_MODES) -> Iterator[ContractChecker]:
    """
    Temporarily change the mode of :data:`CONTRACTS` for the current thread or task.

    See :meth:`ContractChecker.override`.

    :param mode: the mode to use inside the block
    :return: the module level checker
    """

    with CONTRACTS.override(mode) as checker:
        yield checker
