"""Gura grammar rules built on the backtracking parser core.

Rules are plain functions taking the `DocumentParser`. They consume input and
return a value, or raise `ParseError` so the enclosing `match` can try the next
alternative. Indentation, duplicate and variable errors are fatal and are
never caught by the combinators.
"""

from __future__ import annotations

from typing import Any

from gurapy.parser.errors import (
    DuplicatedKeyError,
    DuplicatedVariableError,
    InvalidIndentationError,
    ParseError,
    VariableNotDefinedError,
)
from gurapy.parser.match_result import (
    END_OF_BLOCK,
    ExpressionMatch,
    ImportMatch,
    MatchResult,
    MatchResultKind,
    PairMatch,
)
from gurapy.parser.options import ParserOptions
from gurapy.parser.parser import Parser

NEW_LINE_CHARS = "\f\v\r\n"
BLANK_CHARS = " \t"
KEY_ACCEPTABLE_CHARS = "0-9A-Za-z_"
HEX_CHARS = "0-9a-fA-F"
# Superset of every number form; the scanned text is validated afterwards.
ACCEPTABLE_NUMBER_CHARS = "0-9A-Fa-fxoin+._-"
INDENTATION_STEP = 4

ESCAPE_SEQUENCES: dict[str, str] = {
    "b": "\b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    '"': '"',
    "\\": "\\",
    "$": "$",
}

_INTEGER_BASES: dict[str, int] = {"0x": 16, "0o": 8, "0b": 2}


class DocumentParser(Parser):
    """Parser for one document, owning its variable table and indentation stack.

    Imported files are expanded by their own `DocumentParser`; the imported-file
    set is copied into it and read back once the nested expansion is done.
    """

    def __init__(
        self,
        text: str = "",
        options: ParserOptions | None = None,
        *,
        imported_files: set[str] | None = None,
    ) -> None:
        super().__init__(text)
        self._options = options or ParserOptions()
        self.variables: dict[str, Any] = {}
        self.indentation_levels: list[int] = []
        self.imported_files: set[str] = set(imported_files or ())

    @property
    def options(self) -> ParserOptions:
        return self._options

    def last_indentation_level(self) -> int | None:
        if not self.indentation_levels:
            return None
        return self.indentation_levels[-1]

    def remove_last_indentation_level(self) -> None:
        if self.indentation_levels:
            self.indentation_levels.pop()

    def reset_indentation_level(self, width: int) -> None:
        """Drop levels deeper than `width` and make `width` the current level."""
        while self.indentation_levels and self.indentation_levels[-1] > width:
            self.indentation_levels.pop()
        if self.last_indentation_level() != width:
            self.indentation_levels.append(width)

    def get_variable_value(self, name: str, pos: int, line: int) -> Any:
        """Resolve `$name`: the document's own variables shadow the environment."""
        if name in self.variables:
            return self.variables[name]
        env_value = self._options.environment.get(name)
        if env_value is not None:
            return env_value
        raise VariableNotDefinedError(pos, line, f'Variable "{name}" is not defined')


def parse_start(parser: DocumentParser) -> dict[str, Any]:
    from gurapy.parser.imports import expand_imports

    parser.imported_files = expand_imports(parser, parser.options.base_dir, parser.imported_files)
    result = parser.match([parse_expression])
    eat_ws_and_new_lines(parser)
    furthest = parser.furthest_error
    if result is None and not parser.at_end and furthest is not None and furthest.pos > parser.pos:
        raise furthest
    parser.assert_end()
    if result is None:
        return {}
    return result.value.values


def parse_new_line(parser: DocumentParser) -> str:
    new_line = parser.char(NEW_LINE_CHARS)
    parser.line += 1
    return new_line


def parse_comment(parser: DocumentParser) -> MatchResult:
    parser.keyword(["#"])
    while not parser.at_end:
        char = parser.char()
        if char in NEW_LINE_CHARS:
            parser.line += 1
            break
    return MatchResult(MatchResultKind.COMMENT)


def parse_ws(parser: DocumentParser) -> None:
    while parser.maybe_char(BLANK_CHARS) is not None:
        continue


def parse_ws_with_indentation(parser: DocumentParser) -> int:
    width = 0
    while not parser.at_end:
        blank = parser.maybe_char(BLANK_CHARS)
        if blank is None:
            break
        if blank == "\t":
            raise InvalidIndentationError(
                parser.pos - 1,
                parser.line,
                "Tabs are not allowed to define indentation blocks",
            )
        width += 1
    return width


def eat_ws_and_new_lines(parser: DocumentParser) -> None:
    while True:
        char = parser.maybe_char(BLANK_CHARS + NEW_LINE_CHARS)
        if char is None:
            return
        if char in NEW_LINE_CHARS:
            parser.line += 1


def parse_useless_line(parser: DocumentParser) -> MatchResult:
    start = parser.pos
    parse_ws(parser)
    if parser.maybe_match([parse_comment]) is not None:
        return MatchResult(MatchResultKind.USELESS_LINE)
    if parser.maybe_match([parse_new_line]) is not None:
        return MatchResult(MatchResultKind.USELESS_LINE)
    if parser.at_end and parser.pos > start:
        return MatchResult(MatchResultKind.USELESS_LINE)
    raise ParseError(parser.pos, parser.line, "It is a valid line")


def parse_unquoted_string(parser: DocumentParser) -> str:
    chars = [parser.char(KEY_ACCEPTABLE_CHARS)]
    while True:
        char = parser.maybe_char(KEY_ACCEPTABLE_CHARS)
        if char is None:
            break
        chars.append(char)
    return "".join(chars)


def parse_key(parser: DocumentParser) -> str:
    key = parser.match([parse_unquoted_string])
    parser.keyword([":"])
    return key


def parse_expression(parser: DocumentParser) -> MatchResult | None:
    values: dict[str, Any] = {}
    indentation = 0
    first_pos = parser.pos
    first_line = parser.line

    while not parser.at_end:
        item = parser.maybe_match([parse_variable, parse_pair, parse_useless_line])
        if item is None or item.is_end_of_block:
            break

        if item.kind == MatchResultKind.PAIR:
            pair: PairMatch = item.value
            if pair.key in values:
                raise DuplicatedKeyError(
                    pair.pos,
                    pair.line,
                    f'The key "{pair.key}" has been already defined',
                )
            if not values:
                first_pos = pair.pos
                first_line = pair.line
            values[pair.key] = pair.value
            indentation = pair.indentation

        # A closing bracket or separator ends an object nested in a list.
        if parser.maybe_keyword(["]", ","]) is not None:
            parser.remove_last_indentation_level()
            parser.pos -= 1
            break

    if not values:
        return None
    return MatchResult(
        MatchResultKind.EXPRESSION,
        ExpressionMatch(values=values, indentation=indentation, pos=first_pos, line=first_line),
    )


def parse_pair(parser: DocumentParser) -> MatchResult:
    before_indentation = parser.checkpoint()
    width = parse_ws_with_indentation(parser)
    key_pos = parser.pos
    key_line = parser.line
    key = parser.match([parse_key])
    parse_ws(parser)

    if width % INDENTATION_STEP != 0:
        raise InvalidIndentationError(
            key_pos,
            key_line,
            f"Indentation block ({width}) must be divisible by {INDENTATION_STEP}",
        )

    last_level = parser.last_indentation_level()
    if last_level is None or width > last_level:
        parser.indentation_levels.append(width)
    elif width < last_level:
        parser.remove_last_indentation_level()
        # Give the line back so the ancestor block reads its indentation again.
        parser.rewind(before_indentation)
        return END_OF_BLOCK

    result = parser.match([parse_any_type])
    if result is None:
        raise ParseError(parser.pos, parser.line, f'Invalid pair "{key}": missing value')

    value = result.value
    if result.kind == MatchResultKind.EXPRESSION:
        block: ExpressionMatch = result.value
        if block.indentation == width:
            raise InvalidIndentationError(
                block.pos,
                block.line,
                f'Wrong indentation level for the children of key "{key}"',
            )
        if abs(block.indentation - width) != INDENTATION_STEP:
            raise InvalidIndentationError(
                block.pos,
                block.line,
                f"Difference between different indentation levels must be {INDENTATION_STEP}",
            )
        value = block.values
    elif result.kind == MatchResultKind.LIST:
        parser.reset_indentation_level(width)

    parser.maybe_match([parse_new_line])
    return MatchResult(
        MatchResultKind.PAIR,
        PairMatch(key=key, value=value, indentation=width, pos=key_pos, line=key_line),
    )


def parse_any_type(parser: DocumentParser) -> MatchResult | None:
    result = parser.maybe_match([parse_primitive_type])
    if result is not None:
        return result
    return parser.match([parse_complex_type])


def parse_primitive_type(parser: DocumentParser) -> MatchResult:
    parse_ws(parser)
    return parser.match(
        [
            parse_null,
            parse_empty,
            parse_boolean,
            parse_basic_string,
            parse_literal_string,
            parse_number,
            parse_variable_value,
        ]
    )


def parse_complex_type(parser: DocumentParser) -> MatchResult | None:
    return parser.match([parse_list, parse_expression])


def parse_null(parser: DocumentParser) -> MatchResult:
    parser.keyword(["null"])
    return MatchResult.primitive(None)


def parse_empty(parser: DocumentParser) -> MatchResult:
    parser.keyword(["empty"])
    return MatchResult.primitive({})


def parse_boolean(parser: DocumentParser) -> MatchResult:
    value = parser.keyword(["true", "false"]) == "true"
    return MatchResult.primitive(value)


def parse_list(parser: DocumentParser) -> MatchResult:
    items: list[Any] = []
    parse_ws(parser)
    parser.keyword(["["])
    depth = len(parser.indentation_levels)

    while True:
        if parser.maybe_match([parse_useless_line]) is not None:
            continue

        item = parser.maybe_match([parse_any_type])
        # Items never change the nesting depth of the list's siblings.
        del parser.indentation_levels[depth:]
        if item is None:
            break

        if item.kind == MatchResultKind.EXPRESSION:
            items.append(item.value.values)
        else:
            items.append(item.value)

        parse_ws(parser)
        parser.maybe_match([parse_new_line])
        if parser.maybe_keyword([","]) is None:
            break

    parse_ws(parser)
    parser.maybe_match([parse_new_line])
    parser.keyword(["]"])
    return MatchResult(MatchResultKind.LIST, items)


def parse_variable(parser: DocumentParser) -> MatchResult:
    pos = parser.pos
    line = parser.line
    parser.keyword(["$"])
    name = parser.match([parse_key])
    parse_ws(parser)
    result = parser.match(
        [
            parse_basic_string,
            parse_literal_string,
            parse_number,
            parse_variable_value,
        ]
    )

    if name in parser.variables:
        raise DuplicatedVariableError(pos, line, f'Variable "{name}" has been already declared')
    parser.variables[name] = result.value
    return MatchResult(MatchResultKind.VARIABLE)


def parse_variable_value(parser: DocumentParser) -> MatchResult:
    pos = parser.pos
    line = parser.line
    parser.keyword(["$"])
    name = parser.match([parse_unquoted_string])
    return MatchResult.primitive(parser.get_variable_value(name, pos, line))


def parse_basic_string(parser: DocumentParser) -> MatchResult:
    quote = parser.keyword(['"""', '"'])
    is_multiline = quote == '"""'
    if is_multiline:
        _trim_first_new_line(parser)

    chars: list[str] = []
    while True:
        if parser.maybe_keyword([quote]) is not None:
            break

        char = parser.char()
        if char == "\\":
            escape = parser.char()
            if escape in NEW_LINE_CHARS:
                parser.line += 1
                if is_multiline:
                    # Line-ending backslash trims every blank up to the next content.
                    eat_ws_and_new_lines(parser)
                    continue
                chars.append(char + escape)
            elif escape in ("u", "U"):
                chars.append(_parse_code_point(parser, 4 if escape == "u" else 8))
            else:
                chars.append(ESCAPE_SEQUENCES.get(escape, char + escape))
        elif char == "$":
            chars.append(_interpolate_variable(parser))
        else:
            if char in NEW_LINE_CHARS:
                parser.line += 1
            chars.append(char)

    return MatchResult.primitive("".join(chars))


def parse_literal_string(parser: DocumentParser) -> MatchResult:
    quote = parser.keyword(["'''", "'"])
    if quote == "'''":
        _trim_first_new_line(parser)

    chars: list[str] = []
    while True:
        if parser.maybe_keyword([quote]) is not None:
            break
        char = parser.char()
        if char in NEW_LINE_CHARS:
            parser.line += 1
        chars.append(char)

    return MatchResult.primitive("".join(chars))


def parse_number(parser: DocumentParser) -> MatchResult:
    chars = [parser.char(ACCEPTABLE_NUMBER_CHARS)]
    while True:
        char = parser.maybe_char(ACCEPTABLE_NUMBER_CHARS)
        if char is None:
            break
        chars.append(char)

    text = "".join(chars).replace("_", "")
    if not text:
        raise ParseError(parser.pos, parser.line, "Expected a number but got only separators")

    base = _INTEGER_BASES.get(text[:2])
    if base is not None:
        digits = text[2:]
        if digits and digits[0] not in "+-":
            try:
                return MatchResult.primitive(int(digits, base))
            except ValueError:
                pass
        raise ParseError(parser.pos, parser.line, f'"{text}" is not a valid number')

    unsigned = text[1:] if text[0] in "+-" else text
    if unsigned == "inf":
        return MatchResult.primitive(float("-inf") if text[0] == "-" else float("inf"))
    if unsigned == "nan":
        return MatchResult.primitive(float("nan"))

    is_float = any(char in "Ee." for char in text)
    try:
        value: int | float = float(text) if is_float else int(text)
    except ValueError:
        raise ParseError(parser.pos, parser.line, f'"{text}" is not a valid number') from None
    return MatchResult.primitive(value)


def parse_import(parser: DocumentParser) -> MatchResult:
    pos = parser.pos
    line = parser.line
    parser.keyword(["import"])
    parser.char(" ")
    path = parser.match([parse_quoted_string_with_var])
    parse_ws(parser)
    parser.maybe_match([parse_new_line])
    return MatchResult(MatchResultKind.IMPORT, ImportMatch(path=path, pos=pos, line=line))


def parse_quoted_string_with_var(parser: DocumentParser) -> str:
    quote = parser.keyword(['"'])
    chars: list[str] = []
    while True:
        char = parser.char()
        if char == quote:
            break
        if char == "$":
            chars.append(_interpolate_variable(parser))
        else:
            chars.append(char)
    return "".join(chars)


def _trim_first_new_line(parser: DocumentParser) -> None:
    if parser.maybe_char(NEW_LINE_CHARS) is not None:
        parser.line += 1


def _parse_code_point(parser: DocumentParser, digits: int) -> str:
    code_point = "".join(parser.char(HEX_CHARS) for _ in range(digits))
    try:
        return chr(int(code_point, 16))
    except (ValueError, OverflowError):
        raise ParseError(parser.pos, parser.line, f'"{code_point}" is not a valid code point') from None


def _interpolate_variable(parser: DocumentParser) -> str:
    # The `$` has just been consumed.
    pos = parser.pos - 1
    line = parser.line
    chars: list[str] = []
    while True:
        char = parser.maybe_char(KEY_ACCEPTABLE_CHARS)
        if char is None:
            break
        chars.append(char)
    return str(parser.get_variable_value("".join(chars), pos, line))
