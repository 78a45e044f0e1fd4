import pytest

from gurapy.parser import ParseError, Parser


def parse_a(parser: Parser) -> str:
    return parser.keyword(["a"])


def parse_ab(parser: Parser) -> str:
    parser.keyword(["a"])
    return parser.keyword(["b"])


def parse_ac(parser: Parser) -> str:
    parser.keyword(["a"])
    return parser.keyword(["c"])


def parse_x(parser: Parser) -> str:
    return parser.keyword(["x"])


def parse_y(parser: Parser) -> str:
    return parser.keyword(["y"])


def test_char_accepts_literal_characters_and_ranges() -> None:
    parser = Parser("b7_")

    assert parser.char("a-z") == "b"
    assert parser.char("0-9") == "7"
    assert parser.char("0-9A-Za-z_") == "_"
    assert parser.at_end


def test_char_without_set_consumes_anything() -> None:
    parser = Parser("\n")

    assert parser.char() == "\n"
    assert parser.pos == 1


def test_char_failure_keeps_position_and_reports_it() -> None:
    parser = Parser("ab!")
    parser.char("a-z")
    parser.char("a-z")

    with pytest.raises(ParseError) as exc_info:
        parser.char("a-z")

    assert exc_info.value.pos == 2
    assert parser.pos == 2


def test_char_at_end_of_input_fails() -> None:
    with pytest.raises(ParseError):
        Parser("").char()


def test_trailing_dash_is_a_literal_character() -> None:
    parser = Parser("-")

    assert parser.split_char_ranges("+._-") == ("+", ".", "_", "-")
    assert parser.char("+._-") == "-"


def test_split_char_ranges_is_cached() -> None:
    parser = Parser("")

    first = parser.split_char_ranges("0-9A-Za-z_")
    second = parser.split_char_ranges("0-9A-Za-z_")

    assert first == ("0-9", "A-Z", "a-z", "_")
    assert first is second


def test_split_char_ranges_rejects_bad_ranges() -> None:
    with pytest.raises(ValueError):
        Parser("").split_char_ranges("z-a")


def test_keyword_respects_declared_order() -> None:
    assert Parser('"""x').keyword(['"""', '"']) == '"""'
    assert Parser('"""x').keyword(['"', '"""']) == '"'


def test_keyword_failure() -> None:
    parser = Parser("nul")

    with pytest.raises(ParseError):
        parser.keyword(["null"])
    assert parser.pos == 0


def test_match_rewinds_between_alternatives() -> None:
    parser = Parser("ac")

    assert parser.match([parse_ab, parse_ac]) == "c"
    assert parser.at_end


def test_match_reports_furthest_error() -> None:
    parser = Parser("ad")

    with pytest.raises(ParseError) as exc_info:
        parser.match([parse_x, parse_ab])

    assert exc_info.value.pos == 1
    assert exc_info.value.message == 'Expected "b" but got "d"'
    assert parser.pos == 0


def test_match_combines_errors_at_the_same_position() -> None:
    parser = Parser("z")

    with pytest.raises(ParseError) as exc_info:
        parser.match([parse_x, parse_y])

    assert exc_info.value.pos == 0
    assert exc_info.value.message == 'Expected x, y but got "z"'


def test_furthest_error_survives_rewinds_until_reset() -> None:
    parser = Parser("ad")

    assert parser.furthest_error is None
    assert parser.maybe_match([parse_ab, parse_x]) is None
    assert parser.maybe_match([parse_a]) == "a"

    furthest = parser.furthest_error
    assert furthest is not None
    assert furthest.pos == 1
    assert furthest.message == 'Expected "b" but got "d"'

    parser.reset("x")
    assert parser.furthest_error is None


def test_match_does_not_catch_other_errors() -> None:
    def parse_boom(parser: Parser) -> str:
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        Parser("a").match([parse_boom, parse_a])


def test_maybe_helpers_return_none_and_rewind() -> None:
    parser = Parser("ad")

    assert parser.maybe_char("0-9") is None
    assert parser.maybe_keyword(["b"]) is None
    assert parser.maybe_match([parse_ab]) is None
    assert parser.pos == 0
    assert parser.maybe_match([parse_a]) == "a"
    assert parser.pos == 1


def test_checkpoint_and_rewind_restore_line() -> None:
    parser = Parser("a\nb")
    checkpoint = parser.checkpoint()
    parser.char()
    parser.char()
    parser.line += 1

    parser.rewind(checkpoint)

    assert (parser.pos, parser.line) == (0, 1)


def test_assert_end() -> None:
    parser = Parser("a")

    with pytest.raises(ParseError):
        parser.assert_end()

    parser.char()
    parser.assert_end()


def test_reset_starts_over_on_new_text() -> None:
    parser = Parser("abc")
    parser.char()

    parser.reset("xyz")

    assert parser.text == "xyz"
    assert (parser.pos, parser.line) == (0, 1)
    assert parser.peek() == "x"
