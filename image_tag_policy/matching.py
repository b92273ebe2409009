"""
Glob Matching Module

Shell-style wildcard matching of image tags.
Pure function, no side effects.
"""

from fnmatch import fnmatchcase


def glob_match(pattern: str, candidate: str) -> bool:
    """
    Check whether a candidate tag matches a glob expression.

    `*` matches any run of characters, `?` a single character and
    `[...]` a character set. Matching is case-sensitive and covers
    the whole candidate.

    Args:
        pattern: Glob expression without prefix
        candidate: Tag to test

    Returns:
        True if the candidate matches
    """
    return fnmatchcase(candidate, pattern)
