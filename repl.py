import argparse
import logging
from typing import Optional

from anscalc.config import PLACEHOLDER_MODES, SessionConfig
from anscalc.session import Session

EXIT_COMMAND = "exit"


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive calculator, 'ans' is the previous result")
    parser.add_argument(
        "--lenient-brackets",
        action="store_true",
        help="silently drop unclosed '(' instead of reporting an error",
    )
    parser.add_argument("--placeholder-mode", choices=PLACEHOLDER_MODES, default="substring")
    parser.add_argument("--max-input-length", type=int, default=4096)
    parser.add_argument("--log-level", default="WARNING")
    return parser.parse_args(argv)


def main(argv: Optional[list[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    session = Session(
        SessionConfig(
            placeholder_mode=args.placeholder_mode,
            allow_unclosed_brackets=args.lenient_brackets,
            max_input_length=args.max_input_length,
        )
    )

    print("Enter the expressions :")
    while True:
        try:
            code = input()
        except EOFError:
            break
        if code == EXIT_COMMAND:
            break

        print(session.process(code))
        print(f"Enter the expressions or type '{EXIT_COMMAND}' to quit:")


if __name__ == "__main__":
    main()
