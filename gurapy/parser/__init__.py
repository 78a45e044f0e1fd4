"""Parser infrastructure (backtracking core + Gura grammar + import expansion)."""

from gurapy.parser.errors import (
    DuplicatedImportError,
    DuplicatedKeyError,
    DuplicatedVariableError,
    GuraError,
    ImportFileNotFoundError,
    InvalidIndentationError,
    ParseError,
    VariableNotDefinedError,
)
from gurapy.parser.grammar import DocumentParser, parse_start
from gurapy.parser.gura import parse, parse_file, parse_result
from gurapy.parser.imports import expand_imports
from gurapy.parser.match_result import (
    END_OF_BLOCK,
    ExpressionMatch,
    ImportMatch,
    MatchResult,
    MatchResultKind,
    PairMatch,
)
from gurapy.parser.options import ParserOptions
from gurapy.parser.parser import ParseState, Parser, ParserCheckpoint
from gurapy.parser.sources import (
    Environment,
    FileSystem,
    LocalFileSystem,
    MappingEnvironment,
    MemoryFileSystem,
    ProcessEnvironment,
)

__all__ = [
    "END_OF_BLOCK",
    "DocumentParser",
    "DuplicatedImportError",
    "DuplicatedKeyError",
    "DuplicatedVariableError",
    "Environment",
    "ExpressionMatch",
    "FileSystem",
    "GuraError",
    "ImportFileNotFoundError",
    "ImportMatch",
    "InvalidIndentationError",
    "LocalFileSystem",
    "MappingEnvironment",
    "MatchResult",
    "MatchResultKind",
    "MemoryFileSystem",
    "PairMatch",
    "ParseError",
    "ParseState",
    "Parser",
    "ParserCheckpoint",
    "ParserOptions",
    "ProcessEnvironment",
    "VariableNotDefinedError",
    "expand_imports",
    "parse",
    "parse_file",
    "parse_result",
    "parse_start",
]
