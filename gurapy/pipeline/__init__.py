"""Shared parse carriers and lazy pipeline entrypoint exports."""

from __future__ import annotations

from gurapy.parser.options import ParserOptions
from gurapy.pipeline.result import GuraParseResult
from gurapy.pipeline.results import FormatRunResult


def run_format(
    text: str,
    options: ParserOptions | None = None,
    *,
    parse: GuraParseResult | None = None,
) -> FormatRunResult:
    from gurapy.format.runner import run_format as _run_format

    return _run_format(text, options=options, parse=parse)


__all__ = [
    "FormatRunResult",
    "GuraParseResult",
    "run_format",
]
