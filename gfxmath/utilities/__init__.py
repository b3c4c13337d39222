# Copyright 2021 United States Government as represented by the Administrator of the National Aeronautics and Space
# Administration.  No copyright is claimed in the United States under Title 17, U.S. Code. All Other Rights Reserved.


"""
This package provides configuration, contract checking, and mixin utilities used throughout gfxmath.
"""

from gfxmath.utilities.options import UserOptions
from gfxmath.utilities.contracts import (ContractViolationError, ContractViolationWarning, ContractOptions,
                                         ContractChecker, CONTRACTS, contract_mode)

__all__ = ['UserOptions', 'ContractViolationError', 'ContractViolationWarning', 'ContractOptions',
           'ContractChecker', 'CONTRACTS', 'contract_mode']
