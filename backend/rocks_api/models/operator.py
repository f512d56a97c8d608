"""
Rocks API — Calculator Operators
==================================

What:  Enumerates the four operators understood by GET /calculator/{operator}.
Why:   An explicit tag with a total mapping to an operation function replaces
       a chain of string comparisons. Every member has exactly one function;
       anything else is "unknown" and handled by CalculatorService.

Division follows IEEE-754: x / 0 is ±Infinity and 0 / 0 is NaN. Python's
`/` raises ZeroDivisionError instead, so `divide` handles a zero divisor
itself.
"""

import math
from enum import Enum
from typing import Callable, Dict, Optional


def _divide(a: float, b: float) -> float:
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        # Sign of the infinity depends on the sign of the zero, as in C or JS
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


class Operator(str, Enum):
    """Calculator operator, matched case-sensitively by its value."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"

    @classmethod
    def parse(cls, value: str) -> Optional["Operator"]:
        """Return the member named by `value`, or None if there is none."""
        try:
            return cls(value)
        except ValueError:
            return None

    def apply(self, a: float, b: float) -> float:
        return OPERATIONS[self](a, b)


OPERATIONS: Dict[Operator, Callable[[float, float], float]] = {
    Operator.ADD: lambda a, b: a + b,
    Operator.SUBTRACT: lambda a, b: a - b,
    Operator.MULTIPLY: lambda a, b: a * b,
    Operator.DIVIDE: _divide,
}
