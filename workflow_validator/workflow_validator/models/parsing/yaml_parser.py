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
"""YAML document loader with source maps and caching support."""

import yaml
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional, Union

from ...config import validator_config
from ...exceptions import WorkflowValidatorError
from ...file_io.source_location import json_pointer_escape

logger = logging.getLogger(__name__)


class DocumentLoadError(WorkflowValidatorError):
    """Exception raised when a workflow document cannot be read or parsed."""
    pass


@dataclass
class LoadedDocument:
    """A parsed document together with the text it came from."""

    data: Any
    raw_text: str
    source_map: Dict[str, Dict[str, int]] = field(default_factory=dict)
    file_path: Optional[Path] = None


class YamlParser:
    """YAML parser with caching."""

    def __init__(self, cache_enabled: bool = None):
        """Initialize YAML parser.

        Args:
            cache_enabled: Whether to enable caching. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else validator_config.cache_enabled
        self._cache: Dict[Path, LoadedDocument] = {}

    @classmethod
    def build_source_map(cls, content: str) -> Dict[str, Dict[str, int]]:
        """Build a mapping from YAML JSON-pointer-like paths to 1-based line/column.

        This uses PyYAML's node tree (yaml.compose) so we can track locations without
        changing the parsed data shapes returned by safe_load.
        """
        source_map: Dict[str, Dict[str, int]] = {}

        try:
            root = yaml.compose(content, Loader=yaml.SafeLoader)
        except yaml.YAMLError:
            # Parsing errors are reported by safe_load.
            return source_map

        if root is None:
            return source_map

        def _record(path: str, node) -> None:
            mark = getattr(node, "start_mark", None)
            if mark is None:
                return
            # PyYAML uses 0-based line/column
            source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

        def _walk(node, path: str) -> None:
            _record(path, node)

            if isinstance(node, yaml.nodes.MappingNode):
                for key_node, value_node in node.value:
                    key = getattr(key_node, "value", None)
                    if key is None:
                        continue
                    child_path = f"{path}/{json_pointer_escape(str(key))}"
                    _walk(value_node, child_path)
                    # Mapping entries point at their key rather than the value.
                    _record(child_path, key_node)
            elif isinstance(node, yaml.nodes.SequenceNode):
                for idx, item_node in enumerate(node.value):
                    _walk(item_node, f"{path}/{idx}")

        _walk(root, "")
        return source_map

    def load_document_from_string(self, content: str, file_path: Optional[Path] = None) -> LoadedDocument:
        """Parse YAML (or JSON) content into a LoadedDocument.

        Raises:
            DocumentLoadError: If content cannot be parsed
        """
        try:
            data = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            location = f" {file_path}" if file_path is not None else " content"
            raise DocumentLoadError(f"Failed to parse YAML{location}: {exc}") from exc

        if data is None:
            data = {}

        return LoadedDocument(
            data=data,
            raw_text=content,
            source_map=self.build_source_map(content),
            file_path=file_path,
        )

    def load_document(self, file_path: Union[str, Path]) -> LoadedDocument:
        """Load a YAML document file.

        Raises:
            DocumentLoadError: If file cannot be read or parsed
        """
        path = Path(file_path)

        if not path.exists():
            raise DocumentLoadError(f"Workflow file not found: {path}")

        if not path.is_file():
            raise DocumentLoadError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading workflow from cache: {path}")
            return self._cache[path]

        logger.debug(f"Loading workflow file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Failed to read workflow file {path}: {exc}") from exc

        document = self.load_document_from_string(content, file_path=path)

        if self.cache_enabled:
            self._cache[path] = document

        return document

    def clear_cache(self):
        """Clear the document cache."""
        self._cache.clear()
        logger.debug("Workflow cache cleared")


# Global parser instance
yaml_parser = YamlParser()
