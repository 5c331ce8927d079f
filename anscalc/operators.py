import math
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

BinaryOperationImpl = Callable[[float, float], float]


@dataclass(frozen=True)
class OperatorInfo:
    symbol: str
    precedence: int
    left_associative: bool
    apply: BinaryOperationImpl


_OPERATORS: dict[str, OperatorInfo] = dict()

# read-only view, filled once at import time below
OPERATORS: Mapping[str, OperatorInfo] = MappingProxyType(_OPERATORS)


def register_operator(symbol: str, precedence: int, left_associative: bool = True):
    def decorator(fn: BinaryOperationImpl) -> BinaryOperationImpl:
        if symbol in _OPERATORS:
            raise ValueError(f"Operator {symbol!r} is already registered")
        _OPERATORS[symbol] = OperatorInfo(
            symbol=symbol, precedence=precedence, left_associative=left_associative, apply=fn
        )
        return fn

    return decorator


def get_operator(symbol: str) -> OperatorInfo:
    try:
        return OPERATORS[symbol]
    except KeyError:
        raise ValueError(f"Unknown operator: {symbol!r}") from None


@register_operator("+", precedence=1)
def add_(a: float, b: float) -> float:
    return a + b


@register_operator("-", precedence=1)
def sub_(a: float, b: float) -> float:
    return a - b


@register_operator("*", precedence=2)
def mul_(a: float, b: float) -> float:
    return a * b


@register_operator("/", precedence=2)
def div_(a: float, b: float) -> float:
    """IEEE-754 division: x/0 is a signed infinity and 0/0 is NaN instead of ZeroDivisionError"""
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b
