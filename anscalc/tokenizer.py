import enum
import re
from dataclasses import dataclass

from anscalc.utils import CalculatorError, PrintableEnum


@dataclass
class TokenizerError(CalculatorError):
    code: str
    error_char_idx: int

    def __str__(self) -> str:
        print_start_idx = max(0, self.error_char_idx - 10)
        print_ellipsis_pre = print_start_idx > 0
        print_end_idx = min(len(self.code), self.error_char_idx + 10)
        print_ellipsis_post = print_end_idx < len(self.code)
        return "\n".join(
            [
                f"[Tokenizer error] {self.errmsg}",
                (
                    ("..." if print_ellipsis_pre else "")
                    + f"{self.code[print_start_idx:print_end_idx]}"
                    + ("..." if print_ellipsis_post else "")
                ),
                " " * (self.error_char_idx - print_start_idx + (3 if print_ellipsis_pre else 0)) + "^",
            ]
        )


class TokenType(PrintableEnum):
    NUMBER = enum.auto()
    OPERATOR = enum.auto()
    BRACKET_OPEN = enum.auto()
    BRACKET_CLOSE = enum.auto()


@dataclass
class Token:
    type: TokenType
    lexeme: str

    def __str__(self) -> str:
        return f"<{self.type}>{self.lexeme}"


OPERATOR_CHARS = "+-*/"

BRACKET_TOKENS = {
    "(": TokenType.BRACKET_OPEN,
    ")": TokenType.BRACKET_CLOSE,
}


def _is_valid_in_number(s: str) -> bool:
    # str.isdigit() would also accept superscripts and non-ASCII digits
    return s in "0123456789."


def _consume_number(code: str, start_idx: int) -> int:
    """Returns index right after the maximal run of number characters starting at start_idx"""
    end_idx = start_idx
    while end_idx < len(code) and _is_valid_in_number(code[end_idx]):
        end_idx += 1
    return end_idx


def _is_unary_minus_position(tokens: list[Token]) -> bool:
    return not tokens or tokens[-1].type in (TokenType.OPERATOR, TokenType.BRACKET_OPEN)


def tokenize(code: str) -> list[Token]:
    i = 0
    tokens: list[Token] = []
    while i < len(code):
        char = code[i]
        if _is_valid_in_number(char):
            number_end_idx = _consume_number(code, i)
            tokens.append(Token(type=TokenType.NUMBER, lexeme=code[i:number_end_idx]))
            i = number_end_idx
            continue
        elif char == "-" and _is_unary_minus_position(tokens):
            number_end_idx = _consume_number(code, i + 1)
            if number_end_idx == i + 1:
                raise TokenizerError("Unary minus must be followed by a number", code=code, error_char_idx=i)
            tokens.append(Token(type=TokenType.NUMBER, lexeme=code[i:number_end_idx]))
            i = number_end_idx
            continue
        elif char in OPERATOR_CHARS:
            tokens.append(Token(type=TokenType.OPERATOR, lexeme=char))
        elif char in BRACKET_TOKENS:
            tokens.append(Token(type=BRACKET_TOKENS[char], lexeme=char))
        elif char.isspace():
            pass
        else:
            raise TokenizerError(f"Unexpected character: {char!r}", code=code, error_char_idx=i)
        i += 1

    return tokens


def untokenize(tokens: list[Token]) -> str:
    result = " ".join(t.lexeme for t in tokens)

    # ( 1 + 2 ) => (1 + 2)
    result = re.sub(r"\(\s+", "(", result)
    result = re.sub(r"\s+\)", ")", result)
    return result
