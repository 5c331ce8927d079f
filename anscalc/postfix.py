import logging
from dataclasses import dataclass

from anscalc.operators import get_operator
from anscalc.tokenizer import Token, TokenType, untokenize
from anscalc.utils import CalculatorError

logger = logging.getLogger(__name__)


@dataclass
class UnbalancedBracketError(CalculatorError):
    tokens: list[Token]
    error_token_idx: int

    def __str__(self) -> str:
        up_to_error = untokenize(self.tokens[: self.error_token_idx + 1])
        filler_whitespace = " " * (len(up_to_error) - len(self.tokens[self.error_token_idx].lexeme))
        return "\n".join([f"[Parser error] {self.errmsg}", untokenize(self.tokens), filler_whitespace + "^"])


def _should_pop(stack_top: Token, incoming: Token) -> bool:
    if stack_top.type is not TokenType.OPERATOR:
        return False
    top_precedence = get_operator(stack_top.lexeme).precedence
    incoming_info = get_operator(incoming.lexeme)
    if incoming_info.left_associative:
        # equal precedence pops, so same-precedence chains run left to right
        return top_precedence >= incoming_info.precedence
    return top_precedence > incoming_info.precedence


def to_postfix(tokens: list[Token], allow_unclosed_brackets: bool = False) -> list[Token]:
    """Shunting-yard: reorders numbers and operators into postfix order, dropping brackets.

    A ")" without a matching "(" always raises UnbalancedBracketError. A "(" that is never closed
    raises too, unless allow_unclosed_brackets is set, in which case it is silently dropped.
    """
    output: list[Token] = []
    # (token, index in the input) so errors can point at the bracket
    stack: list[tuple[Token, int]] = []

    for i, token in enumerate(tokens):
        if token.type is TokenType.NUMBER:
            output.append(token)
        elif token.type is TokenType.OPERATOR:
            while stack and _should_pop(stack[-1][0], token):
                output.append(stack.pop()[0])
            stack.append((token, i))
        elif token.type is TokenType.BRACKET_OPEN:
            stack.append((token, i))
        elif token.type is TokenType.BRACKET_CLOSE:
            while stack and stack[-1][0].type is not TokenType.BRACKET_OPEN:
                output.append(stack.pop()[0])
            if not stack:
                raise UnbalancedBracketError("Unmatched closing bracket", tokens=tokens, error_token_idx=i)
            stack.pop()
        else:
            raise ValueError(f"Unexpected token type: {token.type}")

    while stack:
        token, i = stack.pop()
        if token.type is TokenType.BRACKET_OPEN:
            if not allow_unclosed_brackets:
                raise UnbalancedBracketError("Unclosed bracket", tokens=tokens, error_token_idx=i)
            continue
        output.append(token)

    logger.debug("Postfix form of %r: %r", untokenize(tokens), " ".join(t.lexeme for t in output))
    return output
