"""Gura configuration language parser and serializer."""

from gurapy.format import dump, run_format
from gurapy.parser import (
    DuplicatedImportError,
    DuplicatedKeyError,
    DuplicatedVariableError,
    GuraError,
    ImportFileNotFoundError,
    InvalidIndentationError,
    MappingEnvironment,
    MemoryFileSystem,
    ParseError,
    ParserOptions,
    VariableNotDefinedError,
    parse,
    parse_file,
    parse_result,
)
from gurapy.pipeline import FormatRunResult, GuraParseResult

__all__ = [
    "DuplicatedImportError",
    "DuplicatedKeyError",
    "DuplicatedVariableError",
    "FormatRunResult",
    "GuraError",
    "GuraParseResult",
    "ImportFileNotFoundError",
    "InvalidIndentationError",
    "MappingEnvironment",
    "MemoryFileSystem",
    "ParseError",
    "ParserOptions",
    "VariableNotDefinedError",
    "dump",
    "parse",
    "parse_file",
    "parse_result",
    "run_format",
]
