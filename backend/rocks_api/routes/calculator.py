"""
Rocks API — Calculator Route
==============================

What:  Handles GET /calculator/{operator}?num1=<n>&num2=<n>.
How:   Passes the raw operator and query strings to CalculatorService and
       returns its summary sentence as plain text.

Example:
    GET /calculator/add?num1=2&num2=3
    → 200 "The result of 2 add 3 is 5"

Bad input never produces an error status: an unknown operator gives 0 and
non-numeric operands give NaN, both inside a normal 200 response.
"""

from typing import Optional

from fastapi import APIRouter, Query
from fastapi.responses import PlainTextResponse

from rocks_api.services.calculator_service import calculator_service

router = APIRouter(prefix="/calculator", tags=["Calculator"])


@router.get(
    "/{operator}",
    response_class=PlainTextResponse,
    summary="Apply an arithmetic operator",
    description=(
        "Supported operators: add, subtract, multiply, divide. "
        "Any other operator yields 0. Non-numeric operands yield NaN."
    ),
)
async def calculate(
    operator: str,
    num1: Optional[str] = Query(default=None, description="Left operand"),
    num2: Optional[str] = Query(default=None, description="Right operand"),
) -> str:
    return calculator_service.calculate(operator, num1, num2).summary
