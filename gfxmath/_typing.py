from typing import Union, Literal
from datetime import datetime

from pandas import Timestamp

import numpy as np
import numpy.typing as npt

FLOAT_ARRAY = npt.NDArray[np.floating]
ARRAY_LIKE = npt.ArrayLike
SCALAR_OR_ARRAY = Union[float, npt.ArrayLike]
F_SCALAR_OR_ARRAY = Union[float, FLOAT_ARRAY]

DatetimeLike = Union[datetime, Timestamp]

EULER_ORDERS = Literal['xyz', 'xzy', 'xyx', 'xzx', 'yxz', 'yzx', 'yxy', 'yzy', 'zxy', 'zyx', 'zyz', 'zxz']

AXES = Literal['x', 'y', 'z']

CONTRACT_MODES = Literal['ignore', 'warn', 'raise']
