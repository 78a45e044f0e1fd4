"""Pipeline run result carriers for tool entrypoints."""

from __future__ import annotations

from dataclasses import dataclass

from gurapy.diagnostics import Diagnostic
from gurapy.pipeline.result import GuraParseResult


@dataclass(frozen=True, slots=True)
class FormatRunResult:
    """Result of formatting from a shared parse result."""

    parse: GuraParseResult
    formatted_text: str
    diagnostics: list[Diagnostic]
    changed: bool
