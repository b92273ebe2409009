"""
Policy Loading Module

Reads per-container tag patterns from workload manifests. Patterns are
configured as annotations on the workload:

    metadata:
      annotations:
        fluxcd.io/tag.api: semver:~1.2
        fluxcd.io/tag.worker: glob:production-*

Files are only read, nothing is written back.

Functions:
    patterns_from_annotations: Extract patterns from an annotation mapping
    load_policy_file: Read patterns from a YAML manifest
    invalid_patterns: List containers whose pattern is not valid
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping

import dpath
import yaml

from .config import DEFAULT_ANNOTATION_PREFIX, TAG_ANNOTATION
from .pattern import AnyPattern, new_pattern

logger = logging.getLogger(__name__)


def patterns_from_annotations(
    annotations: Mapping[str, Any], prefix: str = DEFAULT_ANNOTATION_PREFIX
) -> Dict[str, AnyPattern]:
    """
    Extract tag patterns from workload annotations.

    Args:
        annotations: Annotation mapping of a workload
        prefix: Annotation namespace, e.g. ``fluxcd.io/``

    Returns:
        Dictionary mapping container names to patterns
    """
    key_prefix = prefix + TAG_ANNOTATION
    patterns = {}
    for key, value in annotations.items():
        if not isinstance(key, str) or not key.startswith(key_prefix):
            continue
        container = key[len(key_prefix):]
        if not container:
            logger.warning(f"Ignoring annotation '{key}' without container name")
            continue
        patterns[container] = new_pattern(str(value))
    return patterns


def load_policy_file(path: str, prefix: str = DEFAULT_ANNOTATION_PREFIX) -> Dict[str, AnyPattern]:
    """
    Read tag patterns from the annotations of a YAML manifest.

    Args:
        path: Path to the manifest
        prefix: Annotation namespace

    Returns:
        Dictionary mapping container names to patterns, empty if the file
        or its annotations are missing

    Raises:
        yaml.YAMLError: If the file is not valid YAML
    """
    file_path = Path(path)
    if not file_path.exists():
        logger.warning(f"Policy file {path} not found")
        return {}

    with file_path.open(encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if not isinstance(data, dict):
        return {}

    annotations = dpath.get(data, "metadata/annotations", default=None)
    if not isinstance(annotations, dict):
        logger.info(f"No annotations found in {path}")
        return {}

    patterns = patterns_from_annotations(annotations, prefix)
    logger.info(f"Loaded {len(patterns)} tag pattern(s) from {path}")
    return patterns


def invalid_patterns(patterns: Mapping[str, AnyPattern]) -> List[str]:
    """Return the names of containers whose pattern is not valid."""
    return sorted(name for name, pattern in patterns.items() if not pattern.valid())
