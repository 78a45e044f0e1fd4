"""Exceptions raised while parsing Gura text.

Every error carries the absolute text position and the 1-based line where it
was detected. Only `ParseError` is treated as a speculative failure by the
engine's ordered-choice combinators; every other subclass aborts the parse.
"""

from __future__ import annotations

from typing import ClassVar

from gurapy.diagnostics import Diagnostic, DiagnosticSpec
from gurapy.diagnostics.codes import (
    IMPORT_DUPLICATED,
    IMPORT_FILE_NOT_FOUND,
    PARSER_DUPLICATED_KEY,
    PARSER_DUPLICATED_VARIABLE,
    PARSER_INVALID_INDENTATION,
    PARSER_SYNTAX_ERROR,
    PARSER_VARIABLE_NOT_DEFINED,
)
from gurapy.text import ZERO, TextRange, TextSize


class GuraError(Exception):
    """Base error with position, line and message."""

    spec: ClassVar[DiagnosticSpec] = PARSER_SYNTAX_ERROR

    def __init__(self, pos: int, line: int, message: str) -> None:
        super().__init__(f"{message} at line {line} (text position = {pos})")
        self.pos = pos
        self.line = line
        self.message = message

    def to_diagnostic(self, text: str | None = None) -> Diagnostic:
        """Convert into a `Diagnostic`; with `text` the range covers the offending character."""
        length = TextSize(1) if text is not None and self.pos < len(text) else ZERO
        return Diagnostic(
            code=self.spec.code,
            message=self.message,
            range=TextRange.at(TextSize.from_int(max(self.pos, 0)), length),
            line=self.line,
            severity=self.spec.severity,
            hint=self.spec.hint,
            category=self.spec.category,
        )


class ParseError(GuraError):
    pass


class InvalidIndentationError(GuraError):
    spec = PARSER_INVALID_INDENTATION


class DuplicatedKeyError(GuraError):
    spec = PARSER_DUPLICATED_KEY


class DuplicatedVariableError(GuraError):
    spec = PARSER_DUPLICATED_VARIABLE


class VariableNotDefinedError(GuraError):
    spec = PARSER_VARIABLE_NOT_DEFINED


class DuplicatedImportError(GuraError):
    spec = IMPORT_DUPLICATED


class ImportFileNotFoundError(GuraError):
    spec = IMPORT_FILE_NOT_FOUND


__all__ = [
    "DuplicatedImportError",
    "DuplicatedKeyError",
    "DuplicatedVariableError",
    "GuraError",
    "ImportFileNotFoundError",
    "InvalidIndentationError",
    "ParseError",
    "VariableNotDefinedError",
]
