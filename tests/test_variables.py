import pytest

from gurapy import (
    DuplicatedVariableError,
    MappingEnvironment,
    ParseError,
    ParserOptions,
    VariableNotDefinedError,
    parse,
)
from tests._shared_cases import case_source


def test_variables_are_not_part_of_the_result() -> None:
    data = parse(case_source("variables"), ParserOptions(environment=MappingEnvironment()))

    assert not any(key.startswith("$") for key in data)
    assert "a_string" not in data


def test_environment_variable_fallback(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GURAPY_TEST_HOME", "/home/gura")

    assert parse("home: $GURAPY_TEST_HOME\n") == {"home": "/home/gura"}


def test_document_variables_shadow_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GURAPY_TEST_HOME", "/home/gura")

    data = parse('$GURAPY_TEST_HOME: "local"\nhome: $GURAPY_TEST_HOME\n')

    assert data == {"home": "local"}


def test_mapping_environment_is_used_instead_of_process_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("GURAPY_TEST_HOME", "/home/gura")
    options = ParserOptions(environment=MappingEnvironment({"GURAPY_TEST_HOME": "/sandbox"}))

    assert parse("home: $GURAPY_TEST_HOME\n", options) == {"home": "/sandbox"}


def test_variable_defined_between_pairs() -> None:
    source = "a: 1\n$middle: 5\nb: $middle\n"

    assert parse(source) == {"a": 1, "b": 5}


def test_variable_used_before_definition() -> None:
    options = ParserOptions(environment=MappingEnvironment())

    with pytest.raises(VariableNotDefinedError) as exc_info:
        parse("a: $later\n$later: 1\n", options)

    assert exc_info.value.pos == 3


def test_undefined_variable() -> None:
    options = ParserOptions(environment=MappingEnvironment())

    with pytest.raises(VariableNotDefinedError) as exc_info:
        parse("a: 1\nb: $undefined\n", options)

    assert exc_info.value.pos == 8
    assert exc_info.value.line == 2


def test_duplicated_variable() -> None:
    with pytest.raises(DuplicatedVariableError) as exc_info:
        parse("$a: 1\n$a: 2\n")

    assert exc_info.value.pos == 6
    assert exc_info.value.line == 2


def test_duplicated_variable_after_pairs() -> None:
    with pytest.raises(DuplicatedVariableError) as exc_info:
        parse("$a: 1\nb: 2\n$a: 3\n")

    assert exc_info.value.pos == 11
    assert exc_info.value.line == 3


@pytest.mark.parametrize("source", ["$a: true\n", "$a: null\n", "$a: [1]\n"])
def test_variables_only_hold_strings_and_numbers(source: str) -> None:
    with pytest.raises(ParseError):
        parse(source)
