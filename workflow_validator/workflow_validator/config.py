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
"""Configuration management for the workflow validator."""

import os
import logging
from dataclasses import dataclass

from .utils.logging_utils import configure_split_stream_logging
from .utils.output_format import OutputFormat


@dataclass
class ValidatorConfig:
    """Configuration class for the workflow validator tools."""
    log_level: str = "WARNING"
    print_level: str = "WARNING"
    cache_enabled: bool = False
    output_format: str = OutputFormat.HUMAN

    @classmethod
    def from_env(cls) -> 'ValidatorConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv('WORKFLOW_VALIDATOR_LOG_LEVEL', 'WARNING'),
            print_level=os.getenv('WORKFLOW_VALIDATOR_PRINT_LEVEL', 'WARNING'),
            cache_enabled=os.getenv('WORKFLOW_VALIDATOR_CACHE_ENABLED', 'false').lower() == 'true',
            output_format=os.getenv('WORKFLOW_VALIDATOR_OUTPUT_FORMAT', OutputFormat.HUMAN),
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.WARNING)
        stderr_level = getattr(logging, self.print_level.upper(), logging.WARNING)

        formatter = logging.Formatter('%(name)s - %(levelname)s - %(message)s')
        return configure_split_stream_logging(
            'workflow_validator', level=level, stderr_level=stderr_level, formatter=formatter
        )


# Global configuration instance
validator_config = ValidatorConfig.from_env()
