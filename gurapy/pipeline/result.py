"""Parse carrier for parse-once/consume-many workflows."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

from gurapy.diagnostics import has_errors
from gurapy.parser.options import ParserOptions

if TYPE_CHECKING:
    from gurapy.diagnostics import Diagnostic
    from gurapy.parser.errors import GuraError


@dataclass(slots=True)
class GuraParseResult:
    """Outcome of parsing one document without raising.

    `data` is `None` exactly when parsing failed; `error` then holds the
    exception that aborted the parse and `diagnostics` its diagnostic.
    """

    source_text: str
    options: ParserOptions
    data: dict[str, Any] | None
    diagnostics: list[Diagnostic]
    error: GuraError | None = None

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)

    def unwrap(self) -> dict[str, Any]:
        """Return the parsed data, re-raising the parse error if there was one."""
        if self.error is not None:
            raise self.error
        return cast(dict[str, Any], self.data)
