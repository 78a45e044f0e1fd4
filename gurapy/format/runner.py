"""Format runner over a shared Gura parse result."""

from __future__ import annotations

from gurapy.format.dump import dump
from gurapy.parser import ParserOptions, parse_result
from gurapy.pipeline.result import GuraParseResult
from gurapy.pipeline.results import FormatRunResult


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    parse: GuraParseResult | None = None,
) -> FormatRunResult:
    """Re-render a document in canonical form from a single parse lifecycle.

    Comments, variables and imports are resolved away. A document with errors
    is returned unchanged along with its diagnostics.
    """
    resolved_parse = _resolve_parse(text, options=options, parse=parse)
    diagnostics = list(resolved_parse.diagnostics)

    if resolved_parse.data is None:
        formatted_text = resolved_parse.source_text
    else:
        formatted_text = dump(resolved_parse.data)
    changed = formatted_text != resolved_parse.source_text

    return FormatRunResult(
        parse=resolved_parse,
        formatted_text=formatted_text,
        diagnostics=diagnostics,
        changed=changed,
    )


def _resolve_parse(
    text: str,
    *,
    options: ParserOptions | None,
    parse: GuraParseResult | None,
) -> GuraParseResult:
    if parse is not None:
        if options is not None:
            raise ValueError("Pass either parse or options, not both")
        return parse
    return parse_result(text, options=options)
