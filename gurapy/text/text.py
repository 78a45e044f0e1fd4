from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True, order=True)
class TextSize:
    """Character offset into a Gura source text."""

    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError("TextSize cannot be negative")

    @staticmethod
    def from_int(value: int) -> "TextSize":
        return TextSize(value)

    def to_int(self) -> int:
        return self.value


ZERO: Final[TextSize] = TextSize(0)


@dataclass(frozen=True, slots=True, order=True)
class TextRange:
    """Half-open `[start, end)` span of characters, as covered by a diagnostic."""

    _start: int
    _end: int

    def __post_init__(self):
        if self._start < 0 or self._start > self._end:
            raise ValueError(f"Invalid text range [{self._start}, {self._end})")

    @staticmethod
    def at(offset: TextSize, length: TextSize) -> "TextRange":
        return TextRange(offset.value, offset.value + length.value)

    @property
    def start(self) -> TextSize:
        return TextSize(self._start)

    @property
    def end(self) -> TextSize:
        return TextSize(self._end)

    def is_empty(self) -> bool:
        return self._start == self._end

    def as_tuple(self) -> tuple[int, int]:
        return (self._start, self._end)


def slice_text_range(source: str, range: TextRange) -> str:
    """Source characters covered by `range`; empty past the end of the text."""
    return source[range.start.value : range.end.value]
