"""Diagnostics."""

from gurapy.diagnostics.codes import (
    IMPORT_DUPLICATED,
    IMPORT_FILE_NOT_FOUND,
    PARSER_DUPLICATED_KEY,
    PARSER_DUPLICATED_VARIABLE,
    PARSER_INVALID_INDENTATION,
    PARSER_SYNTAX_ERROR,
    PARSER_VARIABLE_NOT_DEFINED,
    DiagnosticSpec,
)
from gurapy.diagnostics.diagnostic import Diagnostic, Severity
from gurapy.diagnostics.report import collect_diagnostics, has_errors

__all__ = [
    "IMPORT_DUPLICATED",
    "IMPORT_FILE_NOT_FOUND",
    "PARSER_DUPLICATED_KEY",
    "PARSER_DUPLICATED_VARIABLE",
    "PARSER_INVALID_INDENTATION",
    "PARSER_SYNTAX_ERROR",
    "PARSER_VARIABLE_NOT_DEFINED",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
    "collect_diagnostics",
    "has_errors",
]
