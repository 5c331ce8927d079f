"""Stateful facade: placeholder substitution, evaluation and error formatting for one calculator session"""
import logging
import math
import re
import threading
from dataclasses import dataclass

from anscalc.config import DEFAULT_CONFIG, SessionConfig
from anscalc.runtime import evaluate
from anscalc.utils import CalculatorError, format_number

logger = logging.getLogger(__name__)


@dataclass
class InputTooLongError(CalculatorError):
    length: int
    max_length: int


class Session:
    """Evaluates one line at a time and remembers the last successful result.

    The last answer starts at 0 and is only overwritten by a successful evaluation, so a
    failed line never changes what the placeholder expands to.
    """

    def __init__(self, config: SessionConfig = DEFAULT_CONFIG) -> None:
        self.config = config
        self._last_answer = 0.0
        self._lock = threading.Lock()
        if config.placeholder_mode == "word":
            self._placeholder_re = re.compile(r"\b" + re.escape(config.placeholder) + r"\b")
        else:
            self._placeholder_re = re.compile(re.escape(config.placeholder))

    @property
    def last_answer(self) -> float:
        return self._last_answer

    def substitute_placeholder(self, raw_input: str) -> str:
        replacement = format_number(self._last_answer)
        if math.copysign(1.0, self._last_answer) < 0:
            # "3-ans" must not turn into "3--2" next to a binary operator
            replacement = f"({replacement})"
        return self._placeholder_re.sub(lambda _: replacement, raw_input)

    def evaluate(self, raw_input: str) -> float:
        """Raises CalculatorError subclasses on bad input, last answer is updated only on success"""
        if len(raw_input) > self.config.max_input_length:
            raise InputTooLongError(
                f"Input is {len(raw_input)} characters long, the limit is {self.config.max_input_length}",
                length=len(raw_input),
                max_length=self.config.max_input_length,
            )
        with self._lock:
            code = self.substitute_placeholder(raw_input)
            logger.debug("Evaluating %r (from %r)", code, raw_input)
            result = evaluate(code, allow_unclosed_brackets=self.config.allow_unclosed_brackets)
            self._last_answer = result
        return result

    def process(self, raw_input: str) -> str:
        try:
            result = self.evaluate(raw_input)
        except CalculatorError as e:
            logger.info("Failed to evaluate %r: %s", raw_input, e.errmsg)
            return self.config.error_prefix + str(e)
        return format_number(result)
