"""Type aliases for the glidequery package."""

from datetime import date, datetime
from typing import Sequence, Union

Scalar = Union[str, int, float]
DateLike = Union[datetime, date]

# Operand accepted by the generic condition path: a scalar or a list/tuple of scalars
Operand = Union[Scalar, Sequence[Scalar]]

# Operand accepted by >, >=, <, <=
ComparisonOperand = Union[Scalar, DateLike]
