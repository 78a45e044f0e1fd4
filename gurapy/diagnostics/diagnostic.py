"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from gurapy.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted when a Gura document fails to parse."""

    code: str
    message: str
    range: TextRange
    line: int
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
