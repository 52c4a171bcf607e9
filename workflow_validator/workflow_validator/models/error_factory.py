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
"""Builders for the structured errors raised by the dispatcher."""

from .. import DEFAULT_SCHEMA_VERSION
from ..exceptions import UnsupportedVersionError
from .error_detail import DETAIL_TYPE_VALIDATION, LEVEL_WORKFLOW, ValidationErrorDetail


DOCS_LINK = "https://codefresh.io/docs/docs/codefresh-yaml/what-is-the-codefresh-yaml/"
UNSUPPORTED_VERSION_ACTION = "Please change the version to valid one"


def build_unsupported_version_error(version: str) -> UnsupportedVersionError:
    """Build the error reported when *version* has no registered validator.

    The single detail points at the ``version`` key with ``lines=0``: the problem
    is the declared metadata of the document, not any particular line of it.
    """
    message = (
        f"Current version: {version} is invalid. "
        f"please change version to {DEFAULT_SCHEMA_VERSION}"
    )
    detail = ValidationErrorDetail(
        message=message,
        type=DETAIL_TYPE_VALIDATION,
        context={"key": "version"},
        level=LEVEL_WORKFLOW,
        docs_link=DOCS_LINK,
        action_items=UNSUPPORTED_VERSION_ACTION,
        lines=0,
    )
    return UnsupportedVersionError(version, message, [detail])
