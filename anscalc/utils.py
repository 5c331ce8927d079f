import enum
import math
from dataclasses import dataclass
from decimal import Decimal


class PrintableEnum(enum.Enum):
    def __str__(self) -> str:
        return self.name

    __repr__ = __str__


@dataclass
class CalculatorError(Exception):
    errmsg: str

    def __str__(self) -> str:
        return self.errmsg


def format_number(value: float) -> str:
    """Plain positional decimal, no exponent and no trailing ".0" (4.0 -> "4", 1e20 -> "100000000000000000000")"""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # repr gives the shortest round-tripping digits, Decimal expands the exponent
    result = format(Decimal(repr(value)), "f")
    if "." in result:
        result = result.rstrip("0").rstrip(".")
    return result
