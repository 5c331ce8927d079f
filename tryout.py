from anscalc.postfix import UnbalancedBracketError, to_postfix
from anscalc.runtime import CalcRuntimeError, evaluate_postfix
from anscalc.session import Session
from anscalc.tokenizer import TokenizerError, tokenize, untokenize
from anscalc.utils import format_number

for code in [
    "5",
    "-1",
    "1 + 1",
    "-1 + 1",
    "1 + -1",
    "4 + 6 * 3",
    "(4 + 6)",
    "(4+6) * 3",
    "10 - 2 - 3",
    "7/6/2000",
    "5/0",
    "-(2 + 3)",
    "(1 + 2",
    "1 + 2)",
    "1.2.3 + 4",
    "2 +",
    "2 3",
]:
    print("=" * 10)
    print(f"code: {code!r}")
    try:
        tokens = tokenize(code)
    except TokenizerError as e:
        print(e)
        continue

    print(f"tokens: {' '.join(str(t) for t in tokens)}")

    try:
        postfix_tokens = to_postfix(tokens)
    except UnbalancedBracketError as e:
        print(e)
        continue
    print(f"postfix: {untokenize(postfix_tokens)}")

    try:
        result = evaluate_postfix(postfix_tokens)
    except CalcRuntimeError as e:
        print(e)
        continue
    print(f"result: {format_number(result)}")

print("=" * 10)
session = Session()
for line in ["2 + 2", "ans * 10", "ans +", "ans / 8", "3 - ans"]:
    print(f"{line!r} -> {session.process(line)}")
