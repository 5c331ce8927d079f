import logging
from dataclasses import dataclass

from anscalc.operators import get_operator
from anscalc.postfix import to_postfix
from anscalc.tokenizer import Token, TokenType, tokenize
from anscalc.utils import CalculatorError

logger = logging.getLogger(__name__)


@dataclass
class CalcRuntimeError(CalculatorError):
    pass


@dataclass
class NumberFormatError(CalcRuntimeError):
    lexeme: str


@dataclass
class StackUnderflowError(CalcRuntimeError):
    pass


@dataclass
class EmptyExpressionError(CalcRuntimeError):
    pass


@dataclass
class MalformedExpressionError(CalcRuntimeError):
    leftover_values: list[float]


def evaluate(code: str, allow_unclosed_brackets: bool = False) -> float:
    """Stateless tokenize -> postfix -> evaluate pipeline for a single expression"""
    tokens = tokenize(code)
    postfix_tokens = to_postfix(tokens, allow_unclosed_brackets=allow_unclosed_brackets)
    return evaluate_postfix(postfix_tokens)


def evaluate_postfix(tokens: list[Token]) -> float:
    values: list[float] = []
    for token in tokens:
        if token.type is TokenType.NUMBER:
            values.append(_parse_number(token.lexeme))
        elif token.type is TokenType.OPERATOR:
            if len(values) < 2:
                raise StackUnderflowError(f"Operator {token.lexeme!r} is missing an operand")
            # the value pushed last is the right-hand operand
            right = values.pop()
            left = values.pop()
            values.append(get_operator(token.lexeme).apply(left, right))
        else:
            raise CalcRuntimeError(f"Unexpected token in postfix expression: {token}")

    if not values:
        raise EmptyExpressionError("Empty expression")
    if len(values) > 1:
        raise MalformedExpressionError(
            f"Expected a single result, got {len(values)} values", leftover_values=values
        )
    logger.debug("Evaluated %d postfix tokens to %r", len(tokens), values[0])
    return values[0]


def _parse_number(lexeme: str) -> float:
    try:
        return float(lexeme)
    except ValueError:
        raise NumberFormatError(f"Malformed number: {lexeme!r}", lexeme=lexeme) from None
