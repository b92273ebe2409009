"""
Image Ranking Module

Ordering functions for ranking image tags newest first, and helpers that
filter candidates through a pattern and apply its ordering.

Classes:
    ImageInfo: Data class describing a candidate image tag

Functions:
    by_created_desc: Newer creation timestamp first
    by_semver_tag_desc: Higher semantic version first
    sort_images: Sort images with a "less" function
    filter_and_sort: Keep images matching a pattern, newest first
    newest_image: Best candidate for a pattern
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from functools import cmp_to_key
from typing import Callable, Iterable, List, Optional, TYPE_CHECKING

from . import semver_support

if TYPE_CHECKING:
    from .pattern import Pattern


@dataclass(frozen=True)
class ImageInfo:
    """A candidate image tag and its creation time, if known."""

    tag: str
    created_at: Optional[datetime] = None


# Returns True when the first image should be ranked before the second
SortLessFunc = Callable[[ImageInfo, ImageInfo], bool]


def _as_utc(timestamp: Optional[datetime]) -> Optional[datetime]:
    """Treat naive timestamps as UTC so they compare with aware ones."""
    if timestamp is not None and timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def by_created_desc(a: ImageInfo, b: ImageInfo) -> bool:
    """Rank by creation time, most recent first.

    Images without a timestamp are ranked first, equal timestamps
    fall back to the tag so the order is deterministic. Naive
    timestamps are read as UTC.
    """
    created_a = _as_utc(a.created_at)
    created_b = _as_utc(b.created_at)
    if created_a == created_b:
        return a.tag < b.tag
    if created_a is None:
        return True
    if created_b is None:
        return False
    return created_a > created_b


def by_semver_tag_desc(a: ImageInfo, b: ImageInfo) -> bool:
    """Rank by semantic version precedence, highest first.

    Tags that are not semantic versions are ranked after those that are.
    """
    try:
        version_a = semver_support.parse_version(a.tag)
    except ValueError:
        version_a = None
    try:
        version_b = semver_support.parse_version(b.tag)
    except ValueError:
        version_b = None

    if version_a is None and version_b is None:
        return a.tag < b.tag
    if version_a is None:
        return False
    if version_b is None:
        return True

    cmp = semver_support.compare_versions(version_a, version_b)
    if cmp != 0:
        return cmp > 0
    return a.tag < b.tag


def sort_images(images: Iterable[ImageInfo], less: SortLessFunc) -> List[ImageInfo]:
    """
    Sort images with a "less" function.

    Args:
        images: Images to sort
        less: Function returning True if its first argument ranks first

    Returns:
        New list, best ranked image first
    """
    def compare(a: ImageInfo, b: ImageInfo) -> int:
        if less(a, b):
            return -1
        if less(b, a):
            return 1
        return 0

    return sorted(images, key=cmp_to_key(compare))


def filter_and_sort(images: Iterable[ImageInfo], pattern: "Pattern") -> List[ImageInfo]:
    """
    Keep the images whose tag matches a pattern and rank them newest first.

    Args:
        images: Candidate images
        pattern: Pattern selecting tags and their ordering

    Returns:
        Matching images, newest first
    """
    matching = [image for image in images if pattern.matches(image.tag)]
    return sort_images(matching, pattern.image_newer_func())


def newest_image(images: Iterable[ImageInfo], pattern: "Pattern") -> Optional[ImageInfo]:
    """Return the newest image matching a pattern, or None."""
    ranked = filter_and_sort(images, pattern)
    return ranked[0] if ranked else None
