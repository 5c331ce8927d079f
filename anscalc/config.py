"""Session settings"""
from dataclasses import dataclass

PLACEHOLDER_MODES = ("substring", "word")


@dataclass(frozen=True)
class SessionConfig:
    placeholder: str = "ans"
    # "substring" replaces every occurrence, "word" only standalone words
    placeholder_mode: str = "substring"
    allow_unclosed_brackets: bool = False
    max_input_length: int = 4096
    error_prefix: str = "Error evaluating expression: "

    def __post_init__(self) -> None:
        if not self.placeholder:
            raise ValueError("Placeholder must not be empty")
        if self.placeholder_mode not in PLACEHOLDER_MODES:
            raise ValueError(f"Unknown placeholder mode {self.placeholder_mode!r}, expected one of {PLACEHOLDER_MODES}")
        if self.max_input_length <= 0:
            raise ValueError(f"max_input_length must be positive, got {self.max_input_length}")


DEFAULT_CONFIG = SessionConfig()
