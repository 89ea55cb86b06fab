"""Numeric addition tool."""

from __future__ import annotations

import math
from decimal import Decimal
from typing import Any, Dict, Union

from remote_mcp.mcp.tool import ArgumentKind, ArgumentSpec, Tool

Number = Union[int, float]


def format_number(value: Number) -> str:
    """Render a number in its shortest round-trip decimal form.

    Integral floats drop the trailing ``.0``. Magnitudes from 1e-6 up to 1e21
    are written positionally, others use ``1e+21`` style exponents.
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    magnitude = abs(value)
    if 1e-6 <= magnitude < 1e21:
        text = format(Decimal(repr(value)), "f")
        if "." in text:
            text = text.rstrip("0").rstrip(".")
        return text

    mantissa, _, exponent = repr(value).partition("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    exp = int(exponent)
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"


def to_double(value: Number) -> float:
    """Coerce a JSON number to a double, saturating oversized integers."""
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf


class AddTool(Tool):
    name = "add"
    description = "Return the sum of a and b"
    arguments = (
        ArgumentSpec(name="a", kind=ArgumentKind.NUMBER),
        ArgumentSpec(name="b", kind=ArgumentKind.NUMBER),
    )

    async def execute(self, arguments: Dict[str, Any]) -> str:
        total = to_double(arguments["a"]) + to_double(arguments["b"])
        return f"Result: {format_number(total)}"
