"""File system and environment collaborators used by imports and variables."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
import os
from pathlib import Path
import posixpath
from types import MappingProxyType
from typing import Protocol


class FileSystem(Protocol):
    """Read-only file access needed to resolve `import` statements."""

    def exists(self, path: str) -> bool: ...

    def read_text(self, path: str) -> str: ...

    def dirname(self, path: str) -> str: ...

    def join(self, base: str, relative: str) -> str: ...


class Environment(Protocol):
    """Fallback lookup for `$name` references missing from the variable table."""

    def get(self, name: str) -> str | None: ...


@dataclass(frozen=True, slots=True)
class LocalFileSystem:
    """Default file system backed by the local disk."""

    encoding: str = "utf-8"

    def exists(self, path: str) -> bool:
        return Path(path).is_file()

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding=self.encoding)

    def dirname(self, path: str) -> str:
        return os.path.dirname(path)

    def join(self, base: str, relative: str) -> str:
        # Absolute targets pass through unchanged.
        return os.path.normpath(os.path.join(base, relative))


@dataclass(frozen=True, slots=True)
class MemoryFileSystem:
    """In-memory file system for tests and embedding. Paths use forward slashes."""

    files: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def exists(self, path: str) -> bool:
        return _normalize_path(path) in self._normalized_files()

    def read_text(self, path: str) -> str:
        normalized = _normalize_path(path)
        files = self._normalized_files()
        if normalized not in files:
            raise FileNotFoundError(path)
        return files[normalized]

    def dirname(self, path: str) -> str:
        return posixpath.dirname(_normalize_path(path))

    def join(self, base: str, relative: str) -> str:
        return _normalize_path(posixpath.join(_normalize_path(base), _normalize_path(relative)))

    def _normalized_files(self) -> dict[str, str]:
        return {_normalize_path(path): text for path, text in self.files.items()}


@dataclass(frozen=True, slots=True)
class ProcessEnvironment:
    """Default environment backed by `os.environ`."""

    def get(self, name: str) -> str | None:
        return os.environ.get(name)


@dataclass(frozen=True, slots=True)
class MappingEnvironment:
    """Environment over a fixed mapping, for tests and sandboxed parsing."""

    values: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, name: str) -> str | None:
        return self.values.get(name)


def _normalize_path(path: str) -> str:
    stripped = path.strip().replace("\\", "/")
    if not stripped:
        return ""
    return posixpath.normpath(stripped)
