"""Gura serialization and formatting."""

from gurapy.format.dump import dump, dump_scalar
from gurapy.format.runner import run_format

__all__ = [
    "dump",
    "dump_scalar",
    "run_format",
]
