"""Custom exceptions for Image Tag Policy."""

from typing import Optional


class InvalidPatternError(Exception):
    """Raised when a pattern is required to be valid but is not."""

    def __init__(self, message: str, pattern: Optional[str] = None):
        self.pattern = pattern
        super().__init__(message)
