"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum

DEFAULT_MAX_NESTING_DEPTH = 128


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STRICT = "strict"
    PERMISSIVE = "permissive"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling how much of the input must be consumed and how deep it may nest."""

    mode: ParseMode = ParseMode.STRICT
    require_end_of_input: bool = True
    max_nesting_depth: int = DEFAULT_MAX_NESTING_DEPTH

    def __post_init__(self) -> None:
        if self.max_nesting_depth < 1:
            raise ValueError("max_nesting_depth must be at least 1")

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.PERMISSIVE:
            return ParserOptions(mode=mode, require_end_of_input=False)

        return ParserOptions(mode=mode, require_end_of_input=True)
