"""
Rocks API — Calculator Service
================================

What:  Implements GET /calculator/{operator}?num1=..&num2=..
Why:   Query parameters arrive as strings and results are rendered back into
       a sentence, so both directions need explicit, documented rules.
Who:   Called by routes/calculator.py.

Coercion (to_number):
    Query strings are read the way a JavaScript `Number()` call reads them,
    because that is what clients of this endpoint have always seen:

        "2"       → 2.0          "  2  "   → 2.0
        ""        → 0.0          "1e3"     → 1000.0
        "0x10"    → 16.0         "Infinity"→ inf
        "abc"     → nan          missing   → nan

Formatting (format_number):
    Results are printed like a JavaScript number: 5.0 → "5", 0.5 → "0.5",
    inf → "Infinity", nan → "NaN", 1e21 → "1e+21", 1e-7 → "1e-7".

Unknown operators:
    Any operator outside add/subtract/multiply/divide yields a result of 0.
    This is intentional legacy behaviour, not an error path.
"""

import logging
import math
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from rocks_api.models.operator import Operator

logger = logging.getLogger(__name__)

_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_RADIX_PREFIXES = {"0x": 16, "0o": 8, "0b": 2}

# Characters Number() trims: ECMAScript WhiteSpace (incl. BOM and Zs) and LineTerminator
_JS_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006"
    "\u2007\u2008\u2009\u200a\u2028\u2029\u202f\u205f\u3000\ufeff"
)

# Past 2**53 the exact integer value of a float may carry more digits than its repr
_MAX_SAFE_INTEGER = 2 ** 53


def to_number(raw: Optional[str]) -> float:
    """Coerce a query-string value to a float; never raises."""
    if raw is None:
        return math.nan

    text = raw.strip(_JS_WHITESPACE)
    if not text:
        return 0.0
    if text in ("Infinity", "+Infinity"):
        return math.inf
    if text == "-Infinity":
        return -math.inf

    radix = _RADIX_PREFIXES.get(text[:2].lower())
    if radix is not None:
        digits = text[2:]
        # int() would also accept "_", signs and surrounding spaces here
        if not (digits.isascii() and digits.isalnum()):
            return math.nan
        try:
            return float(int(digits, radix))
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf

    if _DECIMAL_LITERAL.fullmatch(text):
        return float(text)
    return math.nan


def format_number(value: float) -> str:
    """Render a float the way JavaScript's Number#toString does."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        if abs(value) < _MAX_SAFE_INTEGER:
            return str(int(value))
        # Shortest round-trip digits, padded with zeros: 1.2345678901234568e+20
        # prints as 123456789012345680000, not the exact binary value
        return format(Decimal(repr(value)).normalize(), "f")

    text = repr(value)
    if "e" not in text:
        return text

    mantissa, exponent = text.split("e")
    power = int(exponent)
    if -7 < power < 21:
        return format(Decimal(text), "f")
    sign = "+" if power > 0 else "-"
    return f"{mantissa}e{sign}{abs(power)}"


@dataclass(frozen=True)
class Calculation:
    """
    Outcome of one calculator request.

    num1/num2 keep the raw query strings so the summary echoes exactly what
    the client sent; `result` is the numeric outcome.
    """
    operator: str
    num1: Optional[str]
    num2: Optional[str]
    result: float

    @property
    def summary(self) -> str:
        return (
            f"The result of {self.num1 or ''} {self.operator} {self.num2 or ''} "
            f"is {format_number(self.result)}"
        )


class CalculatorService:
    """Applies one of the four Operator functions to coerced query values."""

    def calculate(
        self, operator: str, num1: Optional[str], num2: Optional[str]
    ) -> Calculation:
        op = Operator.parse(operator)
        if op is None:
            logger.debug("Unknown calculator operator %r; result defaults to 0", operator)
            result = 0.0
        else:
            result = op.apply(to_number(num1), to_number(num2))

        return Calculation(operator=operator, num1=num1, num2=num2, result=result)


# Module-level singleton
calculator_service = CalculatorService()
