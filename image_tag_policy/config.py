"""
Configuration Module for Image Tag Policy

This module contains constants used throughout the application.
They control how pattern strings are recognised and where tag
policies are looked up in workload annotations.

Constants:
    GLOB_PREFIX: Prefix marking a glob pattern (optional on input)
    SEMVER_PREFIX: Prefix marking a semantic version constraint pattern
    SEMVER_MATCH_ALL: Constraint expression that accepts every semver tag
    DEFAULT_ANNOTATION_PREFIX: Annotation namespace holding tag policies
    TAG_ANNOTATION: Annotation key part preceding the container name
    DEFAULT_TAG_PATTERN: Pattern used when none is configured
"""

GLOB_PREFIX = "glob:"
SEMVER_PREFIX = "semver:"
SEMVER_MATCH_ALL = "*"

DEFAULT_ANNOTATION_PREFIX = "fluxcd.io/"
TAG_ANNOTATION = "tag."

DEFAULT_TAG_PATTERN = GLOB_PREFIX + "*"
