import pytest

from gurapy import MappingEnvironment, ParseError, ParserOptions, VariableNotDefinedError, parse


def _options(**values: str) -> ParserOptions:
    return ParserOptions(environment=MappingEnvironment(values))


@pytest.mark.parametrize(
    ("source", "expected"),
    [
        (r'a: "tab\there"', "tab\there"),
        (r'a: "back\\slash"', "back\\slash"),
        (r'a: "form\ffeed\bback"', "form\ffeed\bback"),
        (r'a: "cr\rlf\n"', "cr\rlf\n"),
        (r'a: "quote \" inside"', 'quote " inside'),
        (r'a: "éé"', "éé"),
        (r'a: "\U0001F600"', "\U0001f600"),
        (r'a: "keep \x as is"', "keep \\x as is"),
        ('a: ""', ""),
        ("a: ''", ""),
    ],
)
def test_basic_string_escapes(source: str, expected: str) -> None:
    assert parse(source) == {"a": expected}


def test_literal_strings_are_raw() -> None:
    data = parse(r"a: '\n $not_a_var \t'", _options())

    assert data == {"a": r"\n $not_a_var \t"}


def test_multiline_basic_string_trims_first_new_line_only() -> None:
    source = 'a: """\n\nline two\n"""\nb: 1\n'

    assert parse(source) == {"a": "\nline two\n", "b": 1}


def test_multiline_basic_string_on_one_line() -> None:
    assert parse('a: """one "quoted" line"""') == {"a": 'one "quoted" line'}


def test_multiline_basic_string_line_continuation_skips_blank_lines() -> None:
    source = 'a: """\\\n\n     joined"""\n'

    assert parse(source) == {"a": "joined"}


def test_multiline_literal_string_keeps_contents() -> None:
    source = "a: '''\nfirst\n  second '' quotes'''\n"

    assert parse(source) == {"a": "first\n  second '' quotes"}


def test_interpolation_uses_variables_and_environment() -> None:
    source = '$name: "Gura"\n$version: 2\na: "Hello $name v$version from $HOME_DIR"\n'

    data = parse(source, _options(HOME_DIR="/home/gura"))

    assert data == {"a": "Hello Gura v2 from /home/gura"}


def test_interpolation_of_escaped_dollar() -> None:
    assert parse(r'a: "costs \$5"') == {"a": "costs $5"}


def test_interpolation_of_undefined_variable_fails() -> None:
    with pytest.raises(VariableNotDefinedError) as exc_info:
        parse('a: "x $missing"\n', _options())

    assert exc_info.value.pos == 6
    assert exc_info.value.line == 1


def test_new_lines_inside_strings_are_counted() -> None:
    source = 'a: """\nx\ny"""\nb: $missing\n'

    with pytest.raises(VariableNotDefinedError) as exc_info:
        parse(source, _options())

    assert exc_info.value.line == 4


def test_unterminated_string_fails() -> None:
    with pytest.raises(ParseError):
        parse('a: "never closed\n')


def test_invalid_code_point_fails() -> None:
    with pytest.raises(ParseError):
        parse(r'a: "\UFFFFFFFF"')
