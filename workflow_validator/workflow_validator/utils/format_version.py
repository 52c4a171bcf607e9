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
"""Version utilities for the ``version`` field of workflow documents.

The ``version`` field selects the schema family a document is validated
against (e.g. ``1.0``, ``2.0``).

Normalization rules:
  * Missing ``version`` key → the default family (``1.0``).
  * An explicit ``null`` counts as ``0`` and matches no family.
  * Any numeric value in ``[1, 1.2]`` → ``1.0``. Versions 1.0, 1.1 and 1.2
    share one schema.
  * Other numeric values keep their textual form (``"2.0"`` stays ``"2.0"``).
  * Non-numeric values pass through unchanged and will not match any family.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Optional, Tuple, Union

from .. import DEFAULT_SCHEMA_VERSION

logger = logging.getLogger(__name__)


RawVersion = Optional[Union[str, int, float, bool]]


class _MissingVersion:
    """Marker for a document with no ``version`` key."""

    def __repr__(self) -> str:
        return "MISSING_VERSION"


MISSING_VERSION: Any = _MissingVersion()

LEGACY_MIN = 1.0
LEGACY_MAX = 1.2


# ---- raw value → number -----------------------------------------------------


def coerce_version_number(raw: Any) -> Optional[float]:
    """Return the numeric value of *raw*, or ``None`` if it is not numeric.

    Booleans count as ``1`` and ``0``. ``None`` and a blank string count
    as ``0``.
    """
    if raw is None:
        return 0.0
    if isinstance(raw, (bool, int, float)):
        value = float(raw)
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(value):
        return None
    return value


# ---- raw value → version key ------------------------------------------------


def normalize_version(raw_version: RawVersion = MISSING_VERSION) -> str:
    """Normalize a raw ``version`` value into a schema family key.

    Returns:
        A non-empty version key string.
    """
    if raw_version is MISSING_VERSION:
        return DEFAULT_SCHEMA_VERSION

    number = coerce_version_number(raw_version)
    if number is None:
        return str(raw_version).strip() or repr(raw_version)

    if LEGACY_MIN <= number <= LEGACY_MAX:
        if str(raw_version).strip() != DEFAULT_SCHEMA_VERSION:
            logger.debug(f"Version {raw_version!r} is validated against schema {DEFAULT_SCHEMA_VERSION}")
        return DEFAULT_SCHEMA_VERSION

    if isinstance(raw_version, str):
        return raw_version.strip() or "0"
    if raw_version is None or isinstance(raw_version, bool):
        return str(int(number))
    return str(raw_version)


def version_sort_key(version: str) -> Tuple[int, float, str]:
    """Sort key placing numeric versions first, in numeric order."""
    number = coerce_version_number(version)
    if number is None:
        return (1, 0.0, version)
    return (0, number, version)
