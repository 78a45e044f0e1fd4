"""Parser configuration options."""

from dataclasses import dataclass, field

from gurapy.parser.sources import (
    Environment,
    FileSystem,
    LocalFileSystem,
    ProcessEnvironment,
)


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Collaborators and defaults for one parse invocation.

    `base_dir` is the directory that relative imports of in-memory text resolve
    against. `parse_file` overrides it with the directory of the parsed file.
    """

    file_system: FileSystem = field(default_factory=LocalFileSystem)
    environment: Environment = field(default_factory=ProcessEnvironment)
    base_dir: str = "."
