"""
Pattern Module

Patterns select image tags and decide how matching tags are ranked.

A pattern string carries its type as a prefix:

    glob:dev-*          shell-style wildcard match
    semver:~1.2         semantic version range constraint

The prefix may be omitted and then defaults to glob matching.
``semver:*`` matches only tags that are valid semantic versions while
``glob:*`` matches every single tag.

Classes:
    PatternType: Enum of the supported pattern kinds
    Pattern: Protocol shared by every pattern kind
    GlobPattern: Pattern matching tags by glob expression
    SemverPattern: Pattern matching tags by semantic version constraints

Functions:
    new_pattern: Build a pattern from its string form, never fails
    new_pattern_strict: Build a pattern and reject invalid ones

Constants:
    PATTERN_ALL: Matches every tag
    PATTERN_LATEST: Matches only the ``latest`` tag
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Protocol, Union

from . import images, matching, semver_support
from .config import GLOB_PREFIX, SEMVER_MATCH_ALL, SEMVER_PREFIX
from .exceptions import InvalidPatternError

logger = logging.getLogger(__name__)


class PatternType(Enum):
    """Enum for different pattern types."""
    GLOB = "glob"
    SEMVER = "semver"


class Pattern(Protocol):
    """Interface shared by glob and semver patterns."""

    pattern_type: PatternType

    def matches(self, tag: str) -> bool:
        """Check whether a tag is selected by the pattern."""
        ...

    def __str__(self) -> str:
        """Return the prefixed string form."""
        ...

    def image_newer_func(self) -> images.SortLessFunc:
        """Return the function ranking matching images newest first."""
        ...

    def valid(self) -> bool:
        """Check whether the pattern is considered valid."""
        ...


@dataclass(frozen=True)
class GlobPattern:
    """Matches tags by shell-style wildcard expression."""

    pattern: str  # without prefix
    pattern_type = PatternType.GLOB

    def matches(self, tag: str) -> bool:
        return matching.glob_match(self.pattern, tag)

    def __str__(self) -> str:
        return GLOB_PREFIX + self.pattern

    def image_newer_func(self) -> images.SortLessFunc:
        # Glob matches have no order of their own, rank by build time
        return images.by_created_desc

    def valid(self) -> bool:
        return True


@dataclass(frozen=True)
class SemverPattern:
    """Matches tags by semantic version constraints.

    See https://semver.org/
    """

    pattern: str  # without prefix
    constraints: Optional[semver_support.Constraints] = None
    pattern_type = PatternType.SEMVER

    def matches(self, tag: str) -> bool:
        try:
            version = semver_support.parse_version(tag)
        except ValueError:
            return False

        # `*` is match-all for valid semver tags, pre-releases included
        if self.pattern == SEMVER_MATCH_ALL:
            return True
        if self.constraints is None:
            # Invalid constraints match anything
            return True
        return self.constraints.check(version)

    def __str__(self) -> str:
        return SEMVER_PREFIX + self.pattern

    def image_newer_func(self) -> images.SortLessFunc:
        return images.by_semver_tag_desc

    def valid(self) -> bool:
        return self.constraints is not None


AnyPattern = Union[GlobPattern, SemverPattern]


def new_pattern(raw: str) -> AnyPattern:
    """
    Build a pattern according to the prefix of its string form.

    The prefix is optional and defaults to ``glob``. A malformed semver
    constraint does not raise: the pattern is built without constraints,
    matches every semver tag and reports itself as not valid.

    Args:
        raw: Pattern string, e.g. ``semver:>=1.2.0 <2.0.0``

    Returns:
        GlobPattern or SemverPattern instance
    """
    if raw.startswith(SEMVER_PREFIX):
        expression = raw[len(SEMVER_PREFIX):]
        try:
            constraints = semver_support.parse_constraints(expression)
        except ValueError as e:
            logger.debug(f"Ignoring invalid semver constraint '{expression}': {e}")
            constraints = None
        return SemverPattern(expression, constraints)

    if raw.startswith(GLOB_PREFIX):
        raw = raw[len(GLOB_PREFIX):]
    return GlobPattern(raw)


def new_pattern_strict(raw: str) -> AnyPattern:
    """
    Build a pattern, rejecting it if it is not valid.

    Args:
        raw: Pattern string

    Returns:
        GlobPattern or SemverPattern instance

    Raises:
        InvalidPatternError: If the semver constraint cannot be parsed
    """
    pattern = new_pattern(raw)
    if not pattern.valid():
        raise InvalidPatternError(f"Invalid tag pattern: '{raw}'", pattern=raw)
    return pattern


PATTERN_ALL = new_pattern(GLOB_PREFIX + "*")
PATTERN_LATEST = new_pattern(GLOB_PREFIX + "latest")
