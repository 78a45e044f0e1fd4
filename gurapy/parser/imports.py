"""Textual expansion of `import` statements.

Imports may only appear at the top of a document, mixed with variable
definitions and useless lines. Each imported file is expanded depth-first and
its text is spliced in front of the rest of the importing document, so the
main grammar never sees an `import` statement.
"""

from __future__ import annotations

import logging

from gurapy.parser.errors import DuplicatedImportError, ImportFileNotFoundError
from gurapy.parser.grammar import (
    DocumentParser,
    parse_import,
    parse_useless_line,
    parse_variable,
)
from gurapy.parser.match_result import ImportMatch, MatchResultKind

logger = logging.getLogger(__name__)

BOM = "\ufeff"


def expand_imports(
    parser: DocumentParser,
    base_dir: str,
    imported_files: set[str],
) -> set[str]:
    """Splice every imported file into `parser` and return the updated imported-file set.

    The import header is consumed. Variables defined in it are already in
    `parser.variables`, so only the imported contents and the unconsumed
    remainder make up the new text.
    """
    statements, _ = _scan_import_header(parser)
    if not statements:
        return imported_files

    contents, imported_files = _read_imports(parser, statements, base_dir, imported_files)
    remainder = parser.text[parser.pos :]
    parser.reset("".join(contents) + remainder)
    logger.debug("Spliced %d imported file(s) ahead of %d remaining characters", len(contents), len(remainder))
    return imported_files


def _expand_imported_file(
    parser: DocumentParser,
    base_dir: str,
    imported_files: set[str],
) -> tuple[str, set[str]]:
    """Expanded text of an imported file; its own variable definitions are kept."""
    statements, definitions = _scan_import_header(parser)
    if not statements:
        return parser.text, imported_files

    contents, imported_files = _read_imports(parser, statements, base_dir, imported_files)
    expanded = "".join(contents) + "".join(definitions) + parser.text[parser.pos :]
    return expanded, imported_files


def _scan_import_header(parser: DocumentParser) -> tuple[list[ImportMatch], list[str]]:
    statements: list[ImportMatch] = []
    definitions: list[str] = []
    while not parser.at_end:
        start = parser.pos
        result = parser.maybe_match([parse_import, parse_variable, parse_useless_line])
        if result is None:
            break
        if result.kind == MatchResultKind.IMPORT:
            statements.append(result.value)
        else:
            definitions.append(parser.text[start : parser.pos])
    return statements, definitions


def _read_imports(
    parser: DocumentParser,
    statements: list[ImportMatch],
    base_dir: str,
    imported_files: set[str],
) -> tuple[list[str], set[str]]:
    file_system = parser.options.file_system
    contents: list[str] = []
    for statement in statements:
        path = file_system.join(base_dir, statement.path)
        if path in imported_files:
            raise DuplicatedImportError(
                statement.pos,
                statement.line,
                f'The file "{path}" has been already imported',
            )
        if not file_system.exists(path):
            raise ImportFileNotFoundError(
                statement.pos,
                statement.line,
                f'The file "{path}" does not exist',
            )

        logger.debug("Resolved import %r to %s", statement.path, path)
        # Registered before expanding so a file importing itself is rejected.
        imported_files = imported_files | {path}
        child = DocumentParser(
            file_system.read_text(path).removeprefix(BOM),
            parser.options,
            imported_files=imported_files,
        )
        text, imported_files = _expand_imported_file(child, file_system.dirname(path), imported_files)
        contents.append(text + "\n")
    return contents, imported_files
