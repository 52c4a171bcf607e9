"""File I/O related utilities.

Small helpers for mapping YAML paths back to source lines in diagnostics.
"""

from .source_location import SourceLocation, format_source, join_yaml_path, lookup_source

__all__ = [
    "SourceLocation",
    "format_source",
    "join_yaml_path",
    "lookup_source",
]
