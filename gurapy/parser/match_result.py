"""Tagged values produced by grammar rules."""

from dataclasses import dataclass
from enum import StrEnum
from typing import Any


class MatchResultKind(StrEnum):
    USELESS_LINE = "useless_line"
    PAIR = "pair"
    COMMENT = "comment"
    IMPORT = "import"
    VARIABLE = "variable"
    EXPRESSION = "expression"
    PRIMITIVE = "primitive"
    LIST = "list"
    # A pair that belongs to an ancestor block declines to match.
    END_OF_BLOCK = "end_of_block"


@dataclass(frozen=True, slots=True)
class PairMatch:
    """One `key: value` pair; `pos`/`line` locate the first character of the key."""

    key: str
    value: Any
    indentation: int
    pos: int
    line: int


@dataclass(frozen=True, slots=True)
class ExpressionMatch:
    """An object body; `pos`/`line` locate its first key."""

    values: dict[str, Any]
    indentation: int
    pos: int
    line: int


@dataclass(frozen=True, slots=True)
class ImportMatch:
    """An `import "path"` statement; `pos`/`line` locate the `import` keyword."""

    path: str
    pos: int
    line: int


@dataclass(frozen=True, slots=True)
class MatchResult:
    kind: MatchResultKind
    value: Any = None

    @staticmethod
    def primitive(value: Any) -> "MatchResult":
        return MatchResult(MatchResultKind.PRIMITIVE, value)

    @property
    def is_end_of_block(self) -> bool:
        return self.kind == MatchResultKind.END_OF_BLOCK


END_OF_BLOCK = MatchResult(MatchResultKind.END_OF_BLOCK)
