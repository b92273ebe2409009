"""
Semantic Version Support Module

Narrow interface over the semantic version libraries used by semver patterns.
Pure functions, no side effects.

Functions:
    parse_version: Parse an image tag into a semantic version
    parse_constraints: Parse a range constraint expression
    compare_versions: Compare two versions by semver precedence

Classes:
    Constraints: Parsed constraint set, checks versions for membership

Tags are parsed and ordered with ``semver``. Constraint expressions are
parsed and evaluated with ``semantic_version``: npm range syntax
(``>=1.2.0 <2.0.0``, ``~1.2``, ``^2``, ``1.x``, ``1.2 - 1.4.5``, ``||``)
first, then the comma separated form (``>=1.2.0,<2.0.0``).
"""

import logging
from dataclasses import dataclass, field
from typing import Union

import semantic_version
from semver import Version

logger = logging.getLogger(__name__)


def parse_version(text: str) -> Version:
    """
    Parse a tag as a semantic version.

    A leading ``v`` is accepted, as are missing minor and patch
    components (``1.2`` is read as ``1.2.0``).

    Args:
        text: The tag to parse

    Returns:
        Parsed version

    Raises:
        ValueError: If the tag is not a semantic version
    """
    if not isinstance(text, str):
        raise ValueError(f"Invalid semantic version: {text!r}")
    if text.startswith("v"):
        text = text[1:]
    return Version.parse(text, optional_minor_and_patch=True)


def compare_versions(a: Version, b: Version) -> int:
    """Compare two versions, returning -1, 0 or 1."""
    return a.compare(b)


@dataclass(frozen=True)
class Constraints:
    """A parsed constraint expression."""

    expression: str
    spec: Union[semantic_version.NpmSpec, semantic_version.SimpleSpec] = field(compare=False)

    def check(self, version: Version) -> bool:
        return self.spec.match(semantic_version.Version(str(version)))


def parse_constraints(expr: str) -> Constraints:
    """
    Parse a constraint expression.

    Args:
        expr: Expression such as ``>=1.2.0 <2.0.0 || ~3.1``

    Returns:
        Constraints instance

    Raises:
        ValueError: If the expression is empty or malformed
    """
    if not isinstance(expr, str) or not expr.strip():
        raise ValueError(f"Improper constraint: {expr!r}")

    try:
        return Constraints(expression=expr, spec=semantic_version.NpmSpec(expr))
    except ValueError as e:
        logger.debug(f"'{expr}' is not an npm range ({e}), trying comma separated form")

    try:
        return Constraints(expression=expr, spec=semantic_version.SimpleSpec(expr))
    except ValueError as e:
        raise ValueError(f"Improper constraint: {expr!r}") from e
