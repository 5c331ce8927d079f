import pytest

from anscalc import postfix
from anscalc.operators import OPERATORS, OperatorInfo
from anscalc.postfix import UnbalancedBracketError, to_postfix
from anscalc.tokenizer import Token, TokenType, tokenize


def postfix_lexemes(code: str, allow_unclosed_brackets: bool = False) -> list[str]:
    return [t.lexeme for t in to_postfix(tokenize(code), allow_unclosed_brackets=allow_unclosed_brackets)]


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("1", ["1"]),
        pytest.param("1+2*3", ["1", "2", "3", "*", "+"]),
        pytest.param("2*3+4", ["2", "3", "*", "4", "+"]),
        pytest.param("(1+2)*3", ["1", "2", "+", "3", "*"]),
        pytest.param("10-2-3", ["10", "2", "-", "3", "-"], id="left associative minus"),
        pytest.param("8/2/2", ["8", "2", "/", "2", "/"], id="left associative division"),
        pytest.param("1-2+3", ["1", "2", "-", "3", "+"]),
        pytest.param("((1))", ["1"]),
        pytest.param("3*-2", ["3", "-2", "*"]),
        pytest.param("10 + 2 * (5 + 3 - 1)", ["10", "2", "5", "3", "+", "1", "-", "*", "+"]),
        pytest.param("()", []),
        pytest.param("", []),
    ],
)
def test_to_postfix(code: str, expected: list[str]) -> None:
    assert postfix_lexemes(code) == expected


@pytest.mark.parametrize(
    "code, error_token_idx, errmsg",
    [
        pytest.param("1+2)", 3, "Unmatched closing bracket"),
        pytest.param(")(", 0, "Unmatched closing bracket"),
        pytest.param("(1+2", 0, "Unclosed bracket"),
        pytest.param("2*((1+2)", 2, "Unclosed bracket"),
    ],
)
def test_unbalanced_brackets(code: str, error_token_idx: int, errmsg: str) -> None:
    with pytest.raises(UnbalancedBracketError) as exc_info:
        to_postfix(tokenize(code))
    assert exc_info.value.error_token_idx == error_token_idx
    assert exc_info.value.errmsg == errmsg


def test_unbalanced_bracket_error_points_at_bracket() -> None:
    with pytest.raises(UnbalancedBracketError) as exc_info:
        to_postfix(tokenize("1+2)"))
    assert str(exc_info.value).splitlines() == [
        "[Parser error] Unmatched closing bracket",
        "1 + 2)",
        "     ^",
    ]


@pytest.mark.parametrize(
    "code, expected",
    [
        pytest.param("(1+2", ["1", "2", "+"]),
        pytest.param("((1)", ["1"]),
        pytest.param("2*(3+4", ["2", "3", "4", "+", "*"]),
    ],
)
def test_unclosed_brackets_allowed(code: str, expected: list[str]) -> None:
    assert postfix_lexemes(code, allow_unclosed_brackets=True) == expected


def test_unmatched_closing_bracket_is_never_allowed() -> None:
    with pytest.raises(UnbalancedBracketError):
        to_postfix(tokenize("1)"), allow_unclosed_brackets=True)


def test_right_associative_operator(monkeypatch: pytest.MonkeyPatch) -> None:
    table = dict(OPERATORS)
    table["^"] = OperatorInfo(symbol="^", precedence=3, left_associative=False, apply=lambda a, b: a**b)
    monkeypatch.setattr(postfix, "get_operator", table.__getitem__)

    tokens = [
        Token(TokenType.NUMBER, "2"),
        Token(TokenType.OPERATOR, "^"),
        Token(TokenType.NUMBER, "3"),
        Token(TokenType.OPERATOR, "^"),
        Token(TokenType.NUMBER, "2"),
        Token(TokenType.OPERATOR, "*"),
        Token(TokenType.NUMBER, "4"),
    ]
    assert [t.lexeme for t in to_postfix(tokens)] == ["2", "3", "2", "^", "^", "4", "*"]
