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
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, List

from ..exceptions import ImplementationLoadError, RegistryError
from ..models.error_factory import build_unsupported_version_error
from ..utils.format_version import version_sort_key

logger = logging.getLogger(__name__)


# Zero-argument callable building a validator implementation
ValidatorFactory = Callable[[], Any]


class ValidatorRegistry:
    """Maps normalized version keys to validator implementations.

    Implementations are constructed lazily on first resolution, at most once per
    version, and kept for the lifetime of the registry.
    """

    def __init__(self) -> None:
        self._factories: Dict[str, ValidatorFactory] = {}
        self._instances: Dict[str, Any] = {}
        self._lock = threading.RLock()

    def register(self, version: str, factory: ValidatorFactory) -> None:
        """Register *factory* as the implementation source for *version*."""
        if not isinstance(version, str) or not version:
            raise RegistryError(f"Version key must be a non-empty string, got: {version!r}")
        if not callable(factory):
            raise RegistryError(f"Validator factory for version {version} is not callable")

        with self._lock:
            if version in self._factories:
                raise RegistryError(f"Duplicate validator registration for version {version}")
            self._factories[version] = factory
        logger.debug(f"Registered validator for schema version {version}")

    def is_registered(self, version: str) -> bool:
        return version in self._factories

    def supported_versions(self) -> List[str]:
        return sorted(self._factories, key=version_sort_key)

    def resolve(self, version: str) -> Any:
        """Return the implementation registered for *version*.

        Raises:
            UnsupportedVersionError: If nothing is registered for *version*.
            ImplementationLoadError: If the registered factory fails or returns nothing.
        """
        instance = self._instances.get(version)
        if instance is not None:
            return instance

        if not self.is_registered(version):
            available = self.supported_versions()
            logger.debug(f"No validator for schema version {version}. Available versions: {available}")
            raise build_unsupported_version_error(version)

        with self._lock:
            instance = self._instances.get(version)
            if instance is not None:
                return instance

            logger.debug(f"Loading validator for schema version {version}")
            try:
                instance = self._factories[version]()
            except Exception as exc:
                logger.error(f"Failed to load validator for schema version {version}: {exc}")
                raise ImplementationLoadError(version) from exc

            if instance is None:
                raise ImplementationLoadError(version)

            self._instances[version] = instance
            return instance
