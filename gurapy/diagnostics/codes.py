"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final, Literal

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None


PARSER_SYNTAX_ERROR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_SYNTAX_ERROR",
    message="Input does not match the Gura grammar.",
    severity="error",
    category="parser",
)

PARSER_INVALID_INDENTATION: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_INDENTATION",
    message="Invalid indentation.",
    hint="Indent nested pairs with exactly 4 more spaces than their parent. Tabs are not allowed.",
    severity="error",
    category="parser",
)

PARSER_DUPLICATED_KEY: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DUPLICATED_KEY",
    message="Key defined more than once in the same object.",
    hint="Keep only one definition per key, including keys coming from imported files.",
    severity="error",
    category="parser",
)

PARSER_DUPLICATED_VARIABLE: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DUPLICATED_VARIABLE",
    message="Variable defined more than once.",
    hint="Variables are shared with imported files and can only be defined once.",
    severity="error",
    category="parser",
)

PARSER_VARIABLE_NOT_DEFINED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_VARIABLE_NOT_DEFINED",
    message="Variable is not defined.",
    hint="Define it with `$name: value` or export an environment variable with that name.",
    severity="error",
    category="parser",
)

IMPORT_DUPLICATED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="IMPORT_DUPLICATED",
    message="File imported more than once.",
    hint="Each file can be imported once per document, including transitive imports.",
    severity="error",
    category="import",
)

IMPORT_FILE_NOT_FOUND: Final[DiagnosticSpec] = DiagnosticSpec(
    code="IMPORT_FILE_NOT_FOUND",
    message="Imported file does not exist.",
    hint="Relative imports are resolved against the directory of the importing file.",
    severity="error",
    category="import",
)
