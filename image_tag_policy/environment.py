"""
Environment Configuration Module

Handles parsing and validation of environment variables.
This is a pure module - no side effects, just data transformation.
"""

from dataclasses import dataclass
from typing import Dict, List, Optional
import logging

from .config import DEFAULT_ANNOTATION_PREFIX, DEFAULT_TAG_PATTERN

logger = logging.getLogger(__name__)


@dataclass
class EnvironmentConfig:
    """Configuration parsed from environment variables."""

    tag_pattern: str = DEFAULT_TAG_PATTERN
    strict: bool = False
    policy_file: Optional[str] = None
    container: str = ""
    annotation_prefix: str = DEFAULT_ANNOTATION_PREFIX
    log_level: str = "INFO"

    @classmethod
    def from_env(cls, env: Dict[str, str]) -> "EnvironmentConfig":
        """Create configuration from environment variables.

        Args:
            env: Dictionary of environment variables (typically os.environ)

        Returns:
            EnvironmentConfig instance
        """
        tag_pattern = env.get("TAG_PATTERN", "")
        if not tag_pattern.strip():
            logger.debug(f"TAG_PATTERN not set, using {DEFAULT_TAG_PATTERN}")
            tag_pattern = DEFAULT_TAG_PATTERN

        return cls(
            tag_pattern=tag_pattern.strip(),
            strict=env.get("STRICT_PATTERN", "false").lower() == "true",
            policy_file=env.get("POLICY_FILE", "").strip() or None,
            container=env.get("CONTAINER", "").strip(),
            annotation_prefix=env.get("ANNOTATION_PREFIX", DEFAULT_ANNOTATION_PREFIX).strip(),
            log_level=env.get("LOG_LEVEL", "INFO").strip() or "INFO",
        )

    def validate(self) -> List[str]:
        """Validate the configuration.

        Returns:
            List of error messages (empty if valid)
        """
        from .pattern import new_pattern
        from .utils import parse_log_level

        errors = []

        if self.strict and not new_pattern(self.tag_pattern).valid():
            errors.append(f"Invalid TAG_PATTERN: '{self.tag_pattern}'")

        if self.container and not self.policy_file:
            errors.append("CONTAINER requires POLICY_FILE to be set")

        try:
            parse_log_level(self.log_level)
        except ValueError:
            errors.append(f"Invalid LOG_LEVEL '{self.log_level}'")

        return errors
