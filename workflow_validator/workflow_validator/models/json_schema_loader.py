# Copyright 2026 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""JSON Schema loader for the per-version workflow schemas.

Schemas live in ``schema/<version>/<name>.json``; every file in a version
directory becomes one entry of that version's schema mapping.
"""

import json
from pathlib import Path
from typing import Dict


SCHEMA_ROOT = Path(__file__).parent.parent / "schema"

# Schema cache to avoid reloading files
_SCHEMA_CACHE: Dict[str, Dict[str, dict]] = {}


def get_schema_dir(version: str, schema_root: Path = SCHEMA_ROOT) -> Path:
    """Get the directory holding the JSON Schema files of *version*."""
    return schema_root / version


def has_schemas(version: str, schema_root: Path = SCHEMA_ROOT) -> bool:
    """Return True if *version* has at least one schema file. Never raises."""
    try:
        schema_dir = get_schema_dir(version, schema_root)
        return schema_dir.is_dir() and any(schema_dir.glob("*.json"))
    except (OSError, ValueError):
        return False


def load_schema_file(schema_path: Path) -> dict:
    """Load one JSON Schema file.

    Raises:
        FileNotFoundError: If the schema file doesn't exist
        json.JSONDecodeError: If the schema file is invalid JSON
    """
    if not schema_path.exists():
        raise FileNotFoundError(f"Schema file not found: {schema_path}")

    try:
        with open(schema_path, "r", encoding="utf-8") as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise json.JSONDecodeError(
            f"Invalid JSON in schema file {schema_path}: {e.msg}",
            e.doc,
            e.pos,
        ) from e


def load_schemas(version: str, schema_root: Path = SCHEMA_ROOT) -> Dict[str, dict]:
    """Load all JSON Schema files of *version*, keyed by file stem.

    Raises:
        FileNotFoundError: If the version has no schema files
        json.JSONDecodeError: If a schema file is invalid JSON
    """
    schema_dir = get_schema_dir(version, schema_root)
    cache_key = str(schema_dir)
    if cache_key in _SCHEMA_CACHE:
        return _SCHEMA_CACHE[cache_key]

    if not has_schemas(version, schema_root):
        raise FileNotFoundError(f"No schema files found for version {version}: {schema_dir}")

    schemas = {path.stem: load_schema_file(path) for path in sorted(schema_dir.glob("*.json"))}

    _SCHEMA_CACHE[cache_key] = schemas
    return schemas


def clear_cache() -> None:
    """Clear the schema cache. Useful for testing."""
    _SCHEMA_CACHE.clear()
