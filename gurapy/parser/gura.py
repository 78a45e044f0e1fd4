"""High-level parse entrypoints for Gura source text."""

from __future__ import annotations

import dataclasses
import logging
import os
from typing import TYPE_CHECKING, Any

from gurapy.diagnostics import collect_diagnostics
from gurapy.parser.errors import GuraError
from gurapy.parser.grammar import DocumentParser, parse_start
from gurapy.parser.imports import BOM
from gurapy.parser.options import ParserOptions

if TYPE_CHECKING:
    from gurapy.pipeline import GuraParseResult

logger = logging.getLogger(__name__)


def parse(text: str, options: ParserOptions | None = None) -> dict[str, Any]:
    """Parse Gura text into a dictionary, raising a `GuraError` on invalid input."""
    return _parse_document(DocumentParser(text, options))


def parse_file(
    path: str | os.PathLike[str],
    options: ParserOptions | None = None,
) -> dict[str, Any]:
    """Parse a Gura file; its imports resolve relative to the file's directory."""
    resolved_options = options or ParserOptions()
    file_system = resolved_options.file_system
    resolved_path = file_system.join(".", os.fspath(path))
    text = file_system.read_text(resolved_path).removeprefix(BOM)

    file_options = dataclasses.replace(
        resolved_options,
        base_dir=file_system.dirname(resolved_path),
    )
    logger.debug("Parsing file %s", resolved_path)
    parser = DocumentParser(text, file_options, imported_files={resolved_path})
    return _parse_document(parser)


def parse_result(text: str, options: ParserOptions | None = None) -> GuraParseResult:
    """Parse without raising; failures are reported through diagnostics."""
    from gurapy.pipeline import GuraParseResult

    resolved_options = options or ParserOptions()
    try:
        data = parse(text, resolved_options)
    except GuraError as error:
        logger.debug("Parse failed: %s", error)
        return GuraParseResult(
            source_text=text,
            options=resolved_options,
            data=None,
            diagnostics=collect_diagnostics([error.to_diagnostic(text)]),
            error=error,
        )
    return GuraParseResult(
        source_text=text,
        options=resolved_options,
        data=data,
        diagnostics=[],
    )


def _parse_document(parser: DocumentParser) -> dict[str, Any]:
    logger.debug("Parsing %d characters", parser.len)
    data = parse_start(parser)
    logger.debug("Parsed %d top-level key(s)", len(data))
    return data
