"""Parser modes and configuration options."""

from dataclasses import dataclass
from enum import StrEnum


class ParseMode(StrEnum):
    """Top-level parser behavior profile."""

    STANDARD = "standard"
    STRICT = "strict"


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Feature flags controlling grammar strictness and extra diagnostics."""

    mode: ParseMode = ParseMode.STANDARD
    require_tag_body: bool = False
    warn_duplicate_attributes: bool = False
    max_depth: int = 200

    def __post_init__(self) -> None:
        if self.max_depth < 1:
            raise ValueError("max_depth must be 1 or greater")

    @staticmethod
    def for_mode(mode: ParseMode) -> "ParserOptions":
        if mode == ParseMode.STRICT:
            return ParserOptions(
                mode=mode,
                require_tag_body=True,
                warn_duplicate_attributes=True,
            )

        return ParserOptions(
            mode=mode,
            require_tag_body=False,
            warn_duplicate_attributes=False,
        )
