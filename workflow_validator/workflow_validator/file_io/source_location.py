from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Iterable, Optional


@dataclass(frozen=True)
class SourceLocation:
    file_path: Optional[Path] = None
    yaml_path: Optional[str] = None
    line: Optional[int] = None  # 1-based


def json_pointer_escape(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


def join_yaml_path(tokens: Iterable) -> str:
    """Build a JSON-pointer-like YAML path ("/steps/build/image") from path tokens."""
    return "".join(f"/{json_pointer_escape(str(token))}" for token in tokens)


def lookup_source(source_map: Optional[Dict[str, Dict[str, int]]], yaml_path: Optional[str]) -> SourceLocation:
    """Find the location of *yaml_path*, falling back to its closest recorded ancestor."""
    if not source_map or yaml_path is None:
        return SourceLocation(yaml_path=yaml_path)

    path = yaml_path
    while True:
        entry = source_map.get(path)
        if entry:
            return SourceLocation(yaml_path=yaml_path, line=entry.get("line"))
        if not path:
            return SourceLocation(yaml_path=yaml_path)
        path = path.rsplit("/", 1)[0]


def format_source(loc: Optional[SourceLocation]) -> str:
    if not loc:
        return ""

    parts = []
    if loc.file_path is not None:
        if loc.line is not None:
            parts.append(f"source= {loc.file_path}:{loc.line}")
        else:
            parts.append(f"source= {loc.file_path}")

    if loc.yaml_path:
        parts.append(f"yaml_path={loc.yaml_path}")

    if not parts:
        return ""

    return " (" + " ".join(parts) + ")"
