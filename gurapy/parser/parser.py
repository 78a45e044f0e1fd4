"""Backtracking, ordered-choice parser core."""

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Self

from gurapy.parser.errors import ParseError


@dataclass(slots=True)
class ParseState:
    """Mutable cursor over the input text.

    `pos` is the index of the next character to consume. `furthest_error` is
    the rewound `ParseError` that got furthest into the text.
    """

    text: str
    pos: int = 0
    line: int = 1
    furthest_error: ParseError | None = None

    @property
    def len(self) -> int:
        return len(self.text)


@dataclass(frozen=True, slots=True)
class ParserCheckpoint:
    pos: int
    line: int


class Parser:
    """Generic matching primitives shared by every grammar rule.

    A rule is a callable taking the parser. It fails by raising `ParseError`,
    which `match` and the `maybe_*` helpers turn into a rewind.
    """

    def __init__(self, text: str = "") -> None:
        self._state = ParseState(text)
        self._char_ranges_cache: dict[str, tuple[str, ...]] = {}

    @property
    def state(self) -> ParseState:
        return self._state

    @property
    def text(self) -> str:
        return self._state.text

    @property
    def pos(self) -> int:
        return self._state.pos

    @pos.setter
    def pos(self, value: int) -> None:
        self._state.pos = value

    @property
    def line(self) -> int:
        return self._state.line

    @line.setter
    def line(self, value: int) -> None:
        self._state.line = value

    @property
    def len(self) -> int:
        return self._state.len

    @property
    def at_end(self) -> bool:
        return self._state.pos >= self._state.len

    @property
    def furthest_error(self) -> ParseError | None:
        return self._state.furthest_error

    def reset(self, text: str) -> None:
        """Start over on a new text, keeping the character-set cache."""
        self._state = ParseState(text)

    def peek(self) -> str | None:
        if self.at_end:
            return None
        return self.text[self.pos]

    def checkpoint(self) -> ParserCheckpoint:
        return ParserCheckpoint(pos=self._state.pos, line=self._state.line)

    def rewind(self, checkpoint: ParserCheckpoint) -> None:
        self._state.pos = checkpoint.pos
        self._state.line = checkpoint.line

    def assert_end(self) -> None:
        if not self.at_end:
            raise ParseError(
                self.pos,
                self.line,
                f'Expected end of string but got "{self.text[self.pos]}"',
            )

    def split_char_ranges(self, chars: str) -> tuple[str, ...]:
        """Split a character set like `"0-9A-Za-z_"` into single chars and `x-y` ranges."""
        cached = self._char_ranges_cache.get(chars)
        if cached is not None:
            return cached

        result: list[str] = []
        index = 0
        length = len(chars)
        while index < length:
            if index + 2 < length and chars[index + 1] == "-":
                if chars[index] >= chars[index + 2]:
                    raise ValueError(f"Bad character range {chars[index : index + 3]!r}")
                result.append(chars[index : index + 3])
                index += 3
            else:
                result.append(chars[index])
                index += 1

        split = tuple(result)
        self._char_ranges_cache[chars] = split
        return split

    def char(self, chars: str | None = None) -> str:
        if self.at_end:
            expected = "next character" if chars is None else f"[{chars}]"
            raise ParseError(self.pos, self.line, f"Expected {expected} but got end of string")

        next_char = self.text[self.pos]
        if chars is None:
            self.pos += 1
            return next_char

        for char_range in self.split_char_ranges(chars):
            if len(char_range) == 1:
                if next_char == char_range:
                    self.pos += 1
                    return next_char
            elif char_range[0] <= next_char <= char_range[2]:
                self.pos += 1
                return next_char

        raise ParseError(self.pos, self.line, f'Expected [{chars}] but got "{next_char}"')

    def keyword(self, keywords: Sequence[str]) -> str:
        expected = ", ".join(keywords)
        if self.at_end:
            raise ParseError(self.pos, self.line, f'Expected "{expected}" but got end of string')

        for keyword in keywords:
            if self.text.startswith(keyword, self.pos):
                self.pos += len(keyword)
                return keyword

        raise ParseError(self.pos, self.line, f'Expected "{expected}" but got "{self.text[self.pos]}"')

    def match[T](self, rules: Sequence[Callable[[Self], T]]) -> T:
        """Try `rules` in order and return the first result.

        When every rule fails, the error that got furthest into the input wins.
        Rules failing at the same furthest position are reported together.
        """
        last_error_pos = -1
        last_error: ParseError | None = None
        last_error_rules: list[Callable[[Self], T]] = []

        for rule in rules:
            checkpoint = self.checkpoint()
            try:
                return rule(self)
            except ParseError as error:
                self.rewind(checkpoint)
                furthest = self._state.furthest_error
                if furthest is None or error.pos > furthest.pos:
                    self._state.furthest_error = error
                if error.pos > last_error_pos:
                    last_error = error
                    last_error_pos = error.pos
                    last_error_rules = [rule]
                elif error.pos == last_error_pos:
                    last_error_rules.append(rule)

        if last_error is not None and len(last_error_rules) == 1:
            raise last_error

        error_pos = max(min(self.len - 1, last_error_pos), 0)
        got = f'"{self.text[error_pos]}"' if error_pos < self.len else "end of string"
        names = ", ".join(_rule_name(rule) for rule in last_error_rules)
        raise ParseError(error_pos, self.line, f"Expected {names} but got {got}")

    def maybe_char(self, chars: str | None = None) -> str | None:
        try:
            return self.char(chars)
        except ParseError:
            return None

    def maybe_keyword(self, keywords: Sequence[str]) -> str | None:
        try:
            return self.keyword(keywords)
        except ParseError:
            return None

    def maybe_match[T](self, rules: Sequence[Callable[[Self], T]]) -> T | None:
        try:
            return self.match(rules)
        except ParseError:
            return None


def _rule_name(rule: Callable[..., object]) -> str:
    name = getattr(rule, "__name__", repr(rule))
    return name.removeprefix("parse_")
