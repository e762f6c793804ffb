"""Custom exceptions for slatecheck.

Schema violations are returned as results, not raised. These exceptions cover
the surrounding plumbing only.
"""


class SlatecheckError(Exception):
    """Base exception for slatecheck operations."""


class DocumentLoadError(SlatecheckError):
    """Raised when a serialized document cannot be read."""

    def __init__(self, message: str, source: str = ""):
        self.source = source
        super().__init__(message)
